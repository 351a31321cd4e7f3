"""Inline code spans inside prose."""

from __future__ import annotations

from lessonrender.schemas import InlineSegment

_BACKTICK = "`"


def split_inline_code(text: str | None) -> list[InlineSegment]:
    """Split prose into plain text and inline code segments.

    Backticks delimit code spans: chunks alternate plain/code starting with
    plain. With an odd number of backticks the last chunk has no closing
    delimiter and stays plain, backtick included. An empty code chunk stays
    plain as a literal pair of backticks. Other empty chunks are dropped and
    neighbouring plain chunks are merged.

    >>> [s.text for s in split_inline_code("usa `IDLE` y guarda")]
    ['usa ', 'IDLE', ' y guarda']
    """
    chunks = (text or "").split(_BACKTICK)
    dangling = len(chunks) % 2 == 0

    segments: list[InlineSegment] = []
    for index, chunk in enumerate(chunks):
        is_code = index % 2 == 1
        if dangling and index == len(chunks) - 1:
            is_code = False
            chunk = _BACKTICK + chunk
        if is_code and not chunk:
            is_code = False
            chunk = _BACKTICK * 2
        if not chunk:
            continue
        if not is_code and segments and segments[-1].kind == "text":
            segments[-1] = InlineSegment(kind="text", text=segments[-1].text + chunk)
            continue
        segments.append(InlineSegment(kind="code" if is_code else "text", text=chunk))
    return segments
