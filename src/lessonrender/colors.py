"""Semantic coloring for color-name tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from lessonrender.schemas import TableBlock
from lessonrender.text import normalize

DEFAULT_COLOR: Final = "text-slate-900"

COLOR_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "negro": "text-slate-900",
        "naranja": "text-orange-500",
        "azul": "text-blue-500",
        "morado": "text-violet-600",
        "rojo oscuro": "text-red-800",
        "rojo claro": "text-red-500",
        "verde": "text-emerald-600",
    }
)

_COLOR_HEADER_MARKER: Final = "color"


def color_for(name: str) -> str:
    """Map a color name to its display color, matching after normalization.

    Only case and diacritics are normalized; spacing must match exactly.
    """
    return COLOR_NAMES.get(normalize(name), DEFAULT_COLOR)


def is_color_table(table: TableBlock) -> bool:
    """A table whose first header mentions "color" colors its first column."""
    return bool(table.headers) and _COLOR_HEADER_MARKER in normalize(table.headers[0])
