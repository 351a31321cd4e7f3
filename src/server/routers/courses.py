"""Catalog and topic endpoints."""

from typing import Annotated, Literal, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse, Response

from lessonrender.catalog import find_course
from lessonrender.images import course_image_svg
from lessonrender.schemas import Catalog
from server.models import CatalogResponse, CourseDetail, SectionFilterMode, TopicResponse
from server.query_processor import course_detail, list_courses, process_topic
from server.routers_utils import COMMON_LESSON_RESPONSES, get_catalog

router = APIRouter()

CatalogDep = Annotated[Catalog, Depends(get_catalog)]
CycleFilter = Literal["all", "DAM", "DAW", "ASIR", "SMR"]


@router.get("/api/courses", response_model=CatalogResponse)
async def api_list_courses(
    catalog: CatalogDep,
    q: str = "",
    cycle: CycleFilter = "all",
) -> CatalogResponse:
    """List courses, filtered by title search and cycle.

    **Query Parameters**
    - **q** (`str`, optional): text contained in the title, ignoring case and accents
    - **cycle** (`str`, optional): `all`, `DAM`, `DAW`, `ASIR` or `SMR`
    """
    return list_courses(catalog, query=q, cycle=cycle)


@router.get("/api/courses/{course_id}", response_model=CourseDetail, responses=COMMON_LESSON_RESPONSES)
async def api_course(catalog: CatalogDep, course_id: str) -> CourseDetail:
    """Return a course page: objectives, recommendations and topic index."""
    return course_detail(find_course(catalog, course_id))


@router.get("/api/courses/{course_id}/image", response_model=None, responses=COMMON_LESSON_RESPONSES)
async def api_course_image(
    catalog: CatalogDep, course_id: str
) -> Union[RedirectResponse, Response]:  # noqa: FA100 (future-rewritable-type-annotation) (pydantic)
    """Redirect to the authored course image or serve the generated placeholder SVG."""
    course = find_course(catalog, course_id)
    if course.image and not course.image.startswith("data:"):
        return RedirectResponse(course.image)
    return Response(content=course_image_svg(course), media_type="image/svg+xml")


@router.get(
    "/api/courses/{course_id}/topics/{topic_id}",
    response_model=TopicResponse,
    responses=COMMON_LESSON_RESPONSES,
)
async def api_topic(
    catalog: CatalogDep,
    course_id: str,
    topic_id: str,
    section_filter_mode: SectionFilterMode = SectionFilterMode.EXCLUDE,
    sections: Annotated[list[str], Query()] = [],  # noqa: B006 (FastAPI copies defaults)
    include_toc: bool = True,
) -> TopicResponse:
    """Render one topic of a course.

    **Query Parameters**
    - **section_filter_mode** (`str`, optional): `include` or `exclude`
    - **sections** (`list[str]`, optional): section titles to include or exclude
    - **include_toc** (`bool`, optional): prepend a table of contents to the HTML
    """
    return await process_topic(
        catalog,
        course_id,
        topic_id,
        section_filter_mode=section_filter_mode,
        sections=sections,
        include_toc=include_toc,
    )
