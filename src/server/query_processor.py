"""Turn API requests into catalog listings and rendered lessons."""

from __future__ import annotations

from lessonrender.catalog import filter_courses, get_cycles, is_in_construction, sort_courses
from lessonrender.images import course_image
from lessonrender.ingestion import RenderOptions, render_topic
from lessonrender.output_formatter import format_lesson
from lessonrender.render import render_lesson
from lessonrender.routes import Route, format_hash
from lessonrender.schemas import ALL_CYCLES, Catalog, Course
from lessonrender.utils.logging_config import get_logger
from server.models import (
    CatalogResponse,
    CourseDetail,
    CourseSummary,
    RenderRequest,
    RenderResponse,
    SectionFilterMode,
    TopicResponse,
    TopicSummary,
)
from server.server_config import MAX_RESULTS

# Initialize logger for this module
logger = get_logger(__name__)


def course_summary(course: Course) -> CourseSummary:
    return CourseSummary(
        id=course.id,
        title=course.title,
        cycles=[cycle.value for cycle in get_cycles(course)],
        in_construction=is_in_construction(course),
        image=course_image(course),
        href=format_hash(Route(course_id=course.id)),
    )


def course_detail(course: Course) -> CourseDetail:
    summary = course_summary(course)
    return CourseDetail(
        **summary.model_dump(),
        objectives=course.objectives,
        recommendations=course.recommendations,
        topics=[
            TopicSummary(
                id=t.id,
                title=t.title,
                body=t.body,
                available=t.page_blocks is not None,
                href=format_hash(Route(course_id=course.id, topic_id=t.id)),
            )
            for t in course.topics
        ],
    )


def list_courses(catalog: Catalog, *, query: str = "", cycle: str = ALL_CYCLES) -> CatalogResponse:
    """Filter and sort the catalog for the listing page."""
    courses = sort_courses(filter_courses(catalog.courses, query, cycle))
    logger.debug("Catalog listing", extra={"query": query, "cycle": cycle, "matches": len(courses)})
    return CatalogResponse(
        query=query,
        cycle=cycle,
        total=len(courses),
        courses=[course_summary(course) for course in courses[:MAX_RESULTS]],
    )


async def process_topic(
    catalog: Catalog,
    course_id: str,
    topic_id: str,
    *,
    section_filter_mode: SectionFilterMode = SectionFilterMode.EXCLUDE,
    sections: list[str] | None = None,
    include_toc: bool = True,
) -> TopicResponse:
    """Render one topic of the catalog.

    Lookup and catalog errors propagate; the application maps them to HTTP
    responses.
    """
    options = RenderOptions(
        include_toc=include_toc,
        section_filter_mode=section_filter_mode.value,
        sections=sections or [],
    )
    lesson, result, metadata = await render_topic(
        course_id=course_id, topic_id=topic_id, options=options, catalog=catalog
    )

    logger.info(
        "Topic rendered",
        extra={
            "course_id": course_id,
            "topic_id": topic_id,
            "sections": len(lesson.sections),
            "in_construction": metadata["in_construction"],
        },
    )

    return TopicResponse(
        course_id=metadata["course_id"],
        course_title=metadata["course_title"],
        topic_id=metadata["topic_id"],
        title=metadata["title"],
        in_construction=metadata["in_construction"],
        topics=[TopicSummary(**topic) for topic in metadata["topics"]],
        lesson=lesson,
        summary=result.summary,
        sections_tree=result.sections_tree,
        content=result.content,
        section_filter_mode=section_filter_mode,
        sections=options.sections,
    )


def process_render(request: RenderRequest) -> RenderResponse:
    """Render an ad-hoc block list."""
    lesson = render_lesson(request.blocks)
    result = format_lesson(title=request.title, lesson=lesson, include_toc=request.include_toc)
    logger.info(
        "Blocks rendered",
        extra={"blocks": len(request.blocks), "sections": len(lesson.sections)},
    )
    return RenderResponse(
        title=request.title,
        lesson=lesson,
        summary=result.summary,
        sections_tree=result.sections_tree,
        content=result.content,
    )
