"""Hash-based page navigation.

Locations look like ``#/<course_id>`` for a course page and
``#/<course_id>/<topic_id>`` for a lesson; anything else is the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, unquote


@dataclass(frozen=True)
class Route:
    """Where the reader is: catalog, course page or topic page."""

    course_id: str | None = None
    topic_id: str | None = None

    @property
    def view(self) -> str:
        if self.course_id is None:
            return "catalog"
        if self.topic_id is None:
            return "course"
        return "topic"


def parse_hash(location_hash: str | None) -> Route:
    """Parse a location hash; extra path segments are ignored."""
    path = (location_hash or "").lstrip("#").strip("/")
    parts = [unquote(part) for part in path.split("/") if part]
    if not parts:
        return Route()
    if len(parts) == 1:
        return Route(course_id=parts[0])
    return Route(course_id=parts[0], topic_id=parts[1])


def format_hash(route: Route) -> str:
    if route.course_id is None:
        return "#/"
    location = "#/" + quote(route.course_id, safe="")
    if route.topic_id is not None:
        location += "/" + quote(route.topic_id, safe="")
    return location
