"""Section grouping, heading classification and section filtering."""

from __future__ import annotations

import re
from typing import Iterable, Protocol, TypeVar

from lessonrender.schemas import ContentBlock, HeadingBlock, Section
from lessonrender.text import normalize

_EXERCISE_WORD = "ejercicio"


class _Titled(Protocol):
    title: str


_TitledT = TypeVar("_TitledT", bound=_Titled)


def _leading_digits(text: str, start: int) -> int:
    end = start
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return end


def is_numbered_subheading(text: str) -> bool:
    """True for headings that start with ``<digits>.<digits>`` ("4.2", "40.5")."""
    s = text.strip()
    first_end = _leading_digits(s, 0)
    if first_end == 0 or first_end >= len(s) or s[first_end] != ".":
        return False
    return _leading_digits(s, first_end + 1) > first_end + 1


def is_exercise_heading(text: str) -> bool:
    """True for "Ejercicio <digit>..." headings, case-insensitively."""
    s = text.strip().lower()
    if not s.startswith(_EXERCISE_WORD):
        return False
    rest = s[len(_EXERCISE_WORD) :]
    if not rest or not rest[0].isspace():
        return False
    rest = rest.lstrip()
    return bool(rest) and "0" <= rest[0] <= "9"


def is_subheading(text: str) -> bool:
    return is_numbered_subheading(text) or is_exercise_heading(text)


def sectionize(blocks: Iterable[ContentBlock] | None) -> list[Section]:
    """Group a flat block sequence into titled sections.

    Top-level headings open a new section and become its title. Sub-headings
    and every other block are appended to the current section; blocks before
    the first top-level heading go to an anonymous (untitled) section.
    """
    sections: list[Section] = []
    current: Section | None = None

    for block in blocks or ():
        if isinstance(block, HeadingBlock) and not is_subheading(block.text):
            current = Section(title=block.text)
            sections.append(current)
            continue
        if current is None:
            current = Section()
            sections.append(current)
        current.blocks.append(block)

    return sections


def normalize_section_title(title: str) -> str:
    """Normalize section titles for comparison."""
    title = normalize(title.strip())
    title = re.sub(r"^[\d.]+\s+", "", title)
    return re.sub(r"\s+", " ", title)


def filter_sections(
    sections: list[_TitledT],
    *,
    mode: str = "exclude",
    selected: Iterable[str] | None = None,
) -> list[_TitledT]:
    """Filter sections by title using include or exclude mode."""
    selected_titles = {normalize_section_title(title) for title in (selected or []) if title.strip()}
    if not selected_titles:
        return sections

    result: list[_TitledT] = []
    for section in sections:
        in_selected = normalize_section_title(section.title) in selected_titles
        if (mode == "include") == in_selected:
            result.append(section)
    return result
