"""Pydantic models for the lesson API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from lessonrender.schemas import RenderedLesson
from server.server_config import MAX_RENDER_BLOCKS


class SectionFilterMode(str, Enum):
    """Enumeration for section filtering modes."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


class TopicSummary(BaseModel):
    """One entry of a course's topic index.

    Attributes
    ----------
    id : str
        Topic identifier.
    title : str
        Topic title.
    body : str
        Short description shown in the index.
    available : bool
        Whether the topic has lesson content (otherwise it is in construction).
    href : str
        Location hash of the topic page, e.g. ``#/python-intro/t1``.

    """

    id: str
    title: str
    body: str = ""
    available: bool = False
    href: str = ""


class CourseSummary(BaseModel):
    """Catalog listing entry."""

    id: str = Field(..., description="Course identifier")
    title: str = Field(..., description="Course title")
    cycles: list[str] = Field(default_factory=list, description="Cycles the course belongs to")
    in_construction: bool = Field(default=True, description="Course is still being written")
    image: str = Field(..., description="Authored image URL or generated placeholder data URI")
    href: str = Field(default="", description="Location hash of the course page")


class CourseDetail(CourseSummary):
    """Course page: summary plus objectives, recommendations and topic index."""

    objectives: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    topics: list[TopicSummary] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    """Filtered catalog listing."""

    query: str = ""
    cycle: str = "all"
    total: int = 0
    courses: list[CourseSummary] = Field(default_factory=list)


class RenderRequest(BaseModel):
    """Request model for POST /api/render.

    Attributes
    ----------
    blocks : list
        Authored content blocks (JSON objects). Unknown block types are skipped.
    title : str | None
        Optional lesson title used in the summary.
    include_toc : bool
        Prepend a table of contents to the HTML content.

    """

    blocks: list[Any] = Field(default_factory=list, description="Authored content blocks")
    title: str | None = Field(default=None, description="Lesson title")
    include_toc: bool = Field(default=True, description="Include table of contents in HTML")

    @field_validator("blocks")
    @classmethod
    def validate_blocks(cls, v: list[Any]) -> list[Any]:
        """Reject oversized block lists."""
        if len(v) > MAX_RENDER_BLOCKS:
            err = f"at most {MAX_RENDER_BLOCKS} blocks can be rendered at once"
            raise ValueError(err)
        return v

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class RenderResponse(BaseModel):
    """Rendered lesson plus formatted outputs."""

    title: str | None = Field(default=None, description="Lesson title")
    lesson: RenderedLesson = Field(..., description="Structured rendered lesson")
    summary: str = Field(..., description="Lesson summary")
    sections_tree: str = Field(..., description="Section tree")
    content: str = Field(..., description="HTML content")


class TopicResponse(RenderResponse):
    """Rendered catalog topic."""

    course_id: str
    course_title: str
    topic_id: str
    in_construction: bool = False
    topics: list[TopicSummary] = Field(default_factory=list)
    section_filter_mode: SectionFilterMode = SectionFilterMode.EXCLUDE
    sections: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
