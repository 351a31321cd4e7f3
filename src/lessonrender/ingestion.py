"""Lesson pipeline: catalog -> topic -> rendered and formatted lesson."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from lessonrender.catalog import find_course, find_topic, load_catalog
from lessonrender.output_formatter import format_lesson
from lessonrender.render import render_lesson
from lessonrender.routes import Route, format_hash
from lessonrender.schemas import Catalog, LessonResult, RenderedLesson
from lessonrender.sections import filter_sections

IN_CONSTRUCTION_SUMMARY = "En construcción"


@dataclass
class RenderOptions:
    """Options for topic rendering.

    Attributes:
        include_toc: If True, prepend a table of contents to the HTML content.
        section_filter_mode: Mode for section filtering ("include" or "exclude").
        sections: List of section titles to include or exclude.
        catalog_url: Catalog to load instead of the configured/bundled one.
    """

    include_toc: bool = True
    section_filter_mode: Literal["include", "exclude"] = "exclude"
    sections: list[str] = field(default_factory=list)
    catalog_url: str | None = None


async def render_topic(
    *,
    course_id: str,
    topic_id: str,
    options: RenderOptions | None = None,
    catalog: Catalog | None = None,
) -> tuple[RenderedLesson, LessonResult, dict[str, Any]]:
    """Load a topic from the catalog and render it.

    Args:
        course_id: Identifier of the course.
        topic_id: Identifier of the topic inside the course.
        options: Rendering options. Uses defaults if None.
        catalog: Already-loaded catalog; loaded from ``options.catalog_url``
            (or configuration) when None.

    Returns:
        Tuple of (lesson, formatted result, metadata).

    Raises:
        CourseNotFoundError: If the course does not exist.
        TopicNotFoundError: If the topic does not exist in the course.
        FetchError: If a remote catalog cannot be fetched.
        ParseError: If the catalog is not valid.
    """
    opts = options or RenderOptions()
    if catalog is None:
        catalog = await load_catalog(opts.catalog_url)

    course = find_course(catalog, course_id)
    topic = find_topic(course, topic_id)

    metadata: dict[str, Any] = {
        "course_id": course.id,
        "course_title": course.title,
        "topic_id": topic.id,
        "title": topic.title,
        "in_construction": topic.page_blocks is None,
        "topics": [
            {
                "id": t.id,
                "title": t.title,
                "body": t.body,
                "available": t.page_blocks is not None,
                "href": format_hash(Route(course_id=course.id, topic_id=t.id)),
            }
            for t in course.topics
        ],
    }

    if topic.page_blocks is None:
        lesson = RenderedLesson()
        result = LessonResult(
            summary=f"Title: {topic.title}\n{IN_CONSTRUCTION_SUMMARY}",
            sections_tree="Sections:",
            content="",
        )
        return lesson, result, metadata

    lesson = render_lesson(topic.page_blocks)
    lesson = RenderedLesson(
        sections=filter_sections(
            lesson.sections, mode=opts.section_filter_mode, selected=opts.sections
        )
    )
    result = format_lesson(title=topic.title, lesson=lesson, include_toc=opts.include_toc)
    return lesson, result, metadata
