"""Procedural placeholder images for courses without artwork."""

from __future__ import annotations

from typing import Final
from urllib.parse import quote

from lessonrender.catalog import get_cycles
from lessonrender.schemas import Course

_FNV_OFFSET: Final = 2166136261
_FNV_PRIME: Final = 16777619
_MASK_32: Final = 0xFFFFFFFF

# Characters encodeURIComponent leaves alone besides ASCII alphanumerics.
_URI_SAFE: Final = "-_.!~*'()"

_ACCENTS: Final[dict[str, tuple[str, str]]] = {
    "DAM": ("#6366F1", "#22C55E"),
    "DAW": ("#0EA5E9", "#6366F1"),
    "ASIR": ("#F59E0B", "#EF4444"),
    "SMR": ("#10B981", "#0EA5E9"),
}
_DEFAULT_ACCENT: Final = ("#64748B", "#94A3B8")


def hash_str(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of ``text``."""
    data = text.encode("utf-16-le")
    h = _FNV_OFFSET
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * _FNV_PRIME) & _MASK_32
    return h


def cycle_accent(cycle: str) -> tuple[str, str]:
    """Gradient start/end colors for a cycle."""
    return _ACCENTS.get(cycle, _DEFAULT_ACCENT)


def course_image_svg(course: Course) -> str:
    """Draw a blurred-blob gradient seeded by the course identity."""
    cycles = get_cycles(course)
    primary = cycles[0].value if cycles else ""
    start, end = cycle_accent(primary)
    seed = hash_str(f"{course.id}|{course.title}|{primary}")

    c1x, c1y, c1r = 820 + seed % 320, 120 + (seed >> 8) % 180, 190 + (seed >> 16) % 140
    c2x, c2y, c2r = 180 + (seed >> 4) % 360, 520 + (seed >> 12) % 160, 210 + (seed >> 20) % 160
    c3x, c3y, c3r = 560 + (seed >> 6) % 320, 320 + (seed >> 14) % 220, 180 + (seed >> 22) % 140
    w1, w2, w3 = 470 + seed % 90, 590 + (seed >> 10) % 90, 520 + (seed >> 18) % 90

    return (
        "<svg xmlns='http://www.w3.org/2000/svg' width='1200' height='675' viewBox='0 0 1200 675'>"
        "<defs>"
        "<linearGradient id='g' x1='0' y1='0' x2='1' y2='1'>"
        f"<stop offset='0' stop-color='{start}' stop-opacity='0.95'/>"
        f"<stop offset='1' stop-color='{end}' stop-opacity='0.95'/>"
        "</linearGradient>"
        "<filter id='b' x='-25%' y='-25%' width='150%' height='150%'>"
        "<feGaussianBlur stdDeviation='34'/>"
        "</filter>"
        "</defs>"
        "<rect width='1200' height='675' fill='url(#g)'/>"
        "<g filter='url(#b)'>"
        f"<circle cx='{c1x}' cy='{c1y}' r='{c1r}' fill='rgba(255,255,255,0.22)'/>"
        f"<circle cx='{c2x}' cy='{c2y}' r='{c2r}' fill='rgba(255,255,255,0.16)'/>"
        f"<circle cx='{c3x}' cy='{c3y}' r='{c3r}' fill='rgba(255,255,255,0.12)'/>"
        "</g>"
        f"<path d='M0 {w1} C 240 {w1 - 70}, 420 {w2 + 80}, 640 {w2} "
        f"C 860 {w2 - 80}, 980 {w3 + 90}, 1200 {w3} L1200 675 L0 675 Z' "
        "fill='rgba(255,255,255,0.12)'/>"
        f"<path d='M0 {w1 + 90} C 260 {w2 + 40}, 520 {w3 + 120}, 760 {w2 + 70} "
        f"C 980 {w3 + 40}, 1090 {w1 + 170}, 1200 {w1 + 130} L1200 675 L0 675 Z' "
        "fill='rgba(0,0,0,0.06)'/>"
        "</svg>"
    )


def svg_data_uri(svg: str) -> str:
    return "data:image/svg+xml;charset=utf-8," + quote(svg, safe=_URI_SAFE)


def course_image_data_uri(course: Course) -> str:
    return svg_data_uri(course_image_svg(course))


def course_image(course: Course) -> str:
    """The authored course image, or a generated placeholder."""
    return course.image or course_image_data_uri(course)
