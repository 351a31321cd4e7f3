"""Rendered lesson document models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    """Classification of a run of code characters."""

    WHITESPACE = "whitespace"
    STRING = "string-literal"
    NUMBER = "numeric-literal"
    KEYWORD = "keyword"
    BUILTIN = "builtin-identifier"
    COMMENT = "comment"
    PLAIN = "plain"


class Token(BaseModel):
    """A classified slice of one code line."""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: TokenKind


class InlineSegment(BaseModel):
    """A run of prose, either plain text or an inline code span."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text", "code"]
    text: str


class RenderedHeading(BaseModel):
    type: Literal["heading"] = "heading"
    text: str


class RenderedParagraph(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    segments: list[InlineSegment] = Field(default_factory=list)


class RenderedList(BaseModel):
    type: Literal["list"] = "list"
    ordered: bool = False
    items: list[list[InlineSegment]] = Field(default_factory=list)


class RenderedCode(BaseModel):
    """Highlighted code; one token list per source line."""

    type: Literal["code"] = "code"
    lines: list[list[Token]] = Field(default_factory=list)


class RenderedCallout(BaseModel):
    type: Literal["callout"] = "callout"
    title: str | None = None
    segments: list[InlineSegment] = Field(default_factory=list)


class RenderedCell(BaseModel):
    """A table cell. ``color`` is set only for color-name cells."""

    segments: list[InlineSegment] = Field(default_factory=list)
    color: str | None = None


class RenderedTable(BaseModel):
    type: Literal["table"] = "table"
    headers: list[str] = Field(default_factory=list)
    rows: list[list[RenderedCell]] = Field(default_factory=list)
    color_table: bool = False


class RenderedImage(BaseModel):
    type: Literal["image"] = "image"
    src: str
    alt: str = ""
    caption: str | None = None


RenderedBlock = Annotated[
    Union[
        RenderedHeading,
        RenderedParagraph,
        RenderedList,
        RenderedCode,
        RenderedCallout,
        RenderedTable,
        RenderedImage,
    ],
    Field(discriminator="type"),
]


class RenderedSection(BaseModel):
    title: str = ""
    blocks: list[RenderedBlock] = Field(default_factory=list)


class RenderedLesson(BaseModel):
    """A lesson ready for display: ordered sections of rendered blocks."""

    sections: list[RenderedSection] = Field(default_factory=list)


class LessonResult(BaseModel):
    """Formatted lesson output."""

    summary: str
    sections_tree: str
    content: str
