"""Format rendered lessons into summary, tree, and HTML content outputs."""

from __future__ import annotations

from html import escape
from typing import Final

from lessonrender.schemas import (
    InlineSegment,
    LessonResult,
    RenderedBlock,
    RenderedCallout,
    RenderedCode,
    RenderedHeading,
    RenderedImage,
    RenderedLesson,
    RenderedList,
    RenderedParagraph,
    RenderedSection,
    RenderedTable,
    Token,
    TokenKind,
)

TOKEN_CLASSES: Final[dict[TokenKind, str]] = {
    TokenKind.STRING: "text-emerald-300",
    TokenKind.NUMBER: "text-amber-300",
    TokenKind.KEYWORD: "text-orange-300",
    TokenKind.BUILTIN: "text-violet-300",
    TokenKind.COMMENT: "text-rose-300",
}

UNTITLED_SECTION: Final = "(sin título)"


def format_lesson(
    *,
    title: str | None,
    lesson: RenderedLesson,
    include_toc: bool = True,
) -> LessonResult:
    """Create summary, section tree, and HTML content."""
    tree = "Sections:\n" + create_sections_tree(lesson.sections)
    content = render_html(lesson, include_toc=include_toc)

    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    summary_lines.append(f"Sections: {len(lesson.sections)}")
    summary_lines.append(f"Blocks: {count_blocks(lesson)}")
    code_lines = count_code_lines(lesson)
    if code_lines:
        summary_lines.append(f"Code lines: {code_lines}")

    return LessonResult(summary="\n".join(summary_lines), sections_tree=tree, content=content)


def count_blocks(lesson: RenderedLesson) -> int:
    return sum(len(section.blocks) for section in lesson.sections)


def count_code_lines(lesson: RenderedLesson) -> int:
    return sum(
        len(block.lines)
        for section in lesson.sections
        for block in section.blocks
        if isinstance(block, RenderedCode)
    )


def create_sections_tree(sections: list[RenderedSection]) -> str:
    """List section titles with their sub-headings indented below."""
    lines: list[str] = []
    for section in sections:
        lines.append(section.title or UNTITLED_SECTION)
        for block in section.blocks:
            if isinstance(block, RenderedHeading):
                lines.append("    " + block.text)
    return "\n".join(lines)


def render_html(lesson: RenderedLesson, *, include_toc: bool = True) -> str:
    parts: list[str] = ['<article class="lesson">']
    if include_toc:
        toc = _render_toc(lesson.sections)
        if toc:
            parts.append(toc)
    for section in lesson.sections:
        parts.append(_render_section(section))
    parts.append("</article>")
    return "\n".join(parts)


def _render_toc(sections: list[RenderedSection]) -> str:
    items = [f"<li>{escape(section.title)}</li>" for section in sections if section.title]
    if not items:
        return ""
    return '<nav class="lesson-toc"><ul>' + "".join(items) + "</ul></nav>"


def _render_section(section: RenderedSection) -> str:
    parts = ['<section class="lesson-section">']
    if section.title:
        parts.append(f'<h2 class="section-title">{escape(section.title)}</h2>')
    parts.extend(_render_block(block) for block in section.blocks)
    parts.append("</section>")
    return "\n".join(parts)


def _render_block(block: RenderedBlock) -> str:
    if isinstance(block, RenderedHeading):
        return f'<h3 class="lesson-subheading">{escape(block.text)}</h3>'

    if isinstance(block, RenderedParagraph):
        return f"<p>{_render_segments(block.segments)}</p>"

    if isinstance(block, RenderedList):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{_render_segments(item)}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"

    if isinstance(block, RenderedCode):
        lines = "\n".join(_render_code_line(line) for line in block.lines)
        return f'<pre class="code-block"><code>{lines}</code></pre>'

    if isinstance(block, RenderedCallout):
        title = f'<div class="callout-title">{escape(block.title)}</div>' if block.title else ""
        body = f'<div class="callout-body">{_render_segments(block.segments)}</div>'
        return f'<aside class="callout">{title}{body}</aside>'

    if isinstance(block, RenderedTable):
        return _render_table(block)

    if isinstance(block, RenderedImage):
        caption = f"<figcaption>{escape(block.caption)}</figcaption>" if block.caption else ""
        return (
            f'<figure><img src="{escape(block.src)}" alt="{escape(block.alt)}" loading="lazy">'
            f"{caption}</figure>"
        )

    return ""


def _render_segments(segments: list[InlineSegment]) -> str:
    return "".join(
        f'<code class="inline-code">{escape(segment.text)}</code>'
        if segment.kind == "code"
        else escape(segment.text)
        for segment in segments
    )


def _render_code_line(tokens: list[Token]) -> str:
    out: list[str] = []
    for token in tokens:
        css = TOKEN_CLASSES.get(token.kind)
        text = escape(token.text)
        out.append(f'<span class="{css}">{text}</span>' if css else text)
    return "".join(out)


def _render_table(table: RenderedTable) -> str:
    head = "".join(f"<th>{escape(header)}</th>" for header in table.headers)
    rows: list[str] = []
    for row in table.rows:
        cells: list[str] = []
        for cell in row:
            content = _render_segments(cell.segments)
            if cell.color:
                cells.append(f'<td class="color-cell"><span class="{cell.color}">{content}</span></td>')
            else:
                cells.append(f"<td>{content}</td>")
        rows.append("<tr>" + "".join(cells) + "</tr>")
    thead = f"<thead><tr>{head}</tr></thead>" if head else ""
    return f'<table class="lesson-table">{thead}<tbody>{"".join(rows)}</tbody></table>'
