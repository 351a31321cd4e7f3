"""Course catalog models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Cycle(str, Enum):
    """Vocational training cycles a course belongs to."""

    DAM = "DAM"
    DAW = "DAW"
    ASIR = "ASIR"
    SMR = "SMR"


ALL_CYCLES = "all"


class Topic(BaseModel):
    """One lesson of a course.

    ``page_blocks`` holds the authored blocks as raw JSON objects; they are
    validated when the lesson is rendered so that a single unknown block does
    not reject the whole catalog.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    body: str = ""
    page_blocks: list[Any] | None = Field(default=None, alias="pageBlocks")


class Course(BaseModel):
    """A course listed in the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    cycles: list[Cycle] | None = None
    cycle: Cycle | None = None
    image: str | None = None
    in_construction: bool | None = Field(default=None, alias="inConstruction")
    objectives: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    topics: list[Topic] = Field(default_factory=list)


class Catalog(BaseModel):
    courses: list[Course] = Field(default_factory=list)
