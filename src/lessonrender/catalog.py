"""Course catalog loading, search and ordering."""

from __future__ import annotations

import json
import logging
from importlib import resources
from typing import Any

from pydantic import ValidationError

from lessonrender.config import LESSONRENDER_CATALOG_URL
from lessonrender.exceptions import CourseNotFoundError, ParseError, TopicNotFoundError
from lessonrender.fetch import fetch_catalog_json
from lessonrender.schemas import ALL_CYCLES, Catalog, Course, Cycle, Topic
from lessonrender.text import normalize, spanish_sort_key

logger = logging.getLogger(__name__)

_BUNDLED_CATALOG = "catalog.json"


def get_cycles(course: Course) -> list[Cycle]:
    """Cycles of a course: ``cycles`` when set, else the single ``cycle``."""
    if course.cycles:
        return list(course.cycles)
    if course.cycle:
        return [course.cycle]
    return []


def is_in_construction(course: Course) -> bool:
    """Courses are in construction unless explicitly marked otherwise."""
    return course.in_construction is not False


def filter_courses(
    courses: list[Course], query: str = "", cycle: Cycle | str = ALL_CYCLES
) -> list[Course]:
    """Keep courses in ``cycle`` whose normalized title contains ``query``."""
    needle = normalize(query).strip()
    wanted = None if cycle == ALL_CYCLES else Cycle(cycle)

    result: list[Course] = []
    for course in courses:
        if wanted is not None and wanted not in get_cycles(course):
            continue
        if needle and needle not in normalize(course.title):
            continue
        result.append(course)
    return result


def sort_courses(courses: list[Course]) -> list[Course]:
    """Finished courses first, then by title in Spanish alphabetical order."""
    return sorted(
        courses,
        key=lambda course: (is_in_construction(course), spanish_sort_key(course.title)),
    )


def find_course(catalog: Catalog, course_id: str) -> Course:
    for course in catalog.courses:
        if course.id == course_id:
            return course
    raise CourseNotFoundError(f"Course {course_id!r} not found")


def find_topic(course: Course, topic_id: str) -> Topic:
    for topic in course.topics:
        if topic.id == topic_id:
            return topic
    raise TopicNotFoundError(f"Topic {topic_id!r} not found in course {course.id!r}")


def load_catalog_data(data: str | bytes | dict[str, Any] | list[Any]) -> Catalog:
    """Build a catalog from JSON text or already-decoded JSON.

    A bare list is taken as the list of courses.

    Raises:
        ParseError: If the data is not valid JSON or not a valid catalog.
    """
    try:
        if isinstance(data, (str, bytes)):
            data = json.loads(data)
        if isinstance(data, list):
            data = {"courses": data}
        return Catalog.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ParseError(f"Invalid catalog data: {exc}") from exc


def load_bundled_catalog() -> Catalog:
    """Load the catalog shipped with the package."""
    text = resources.files("lessonrender.data").joinpath(_BUNDLED_CATALOG).read_text(encoding="utf-8")
    return load_catalog_data(text)


async def load_catalog(url: str | None = None, *, use_cache: bool = True) -> Catalog:
    """Load the catalog from ``url`` (or the configured URL), else the bundled one."""
    url = url or LESSONRENDER_CATALOG_URL
    if not url:
        return load_bundled_catalog()

    logger.debug("Loading catalog from %s", url)
    return load_catalog_data(await fetch_catalog_json(url, use_cache=use_cache))
