"""Authored content block models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    """Loosely typed scalars become text; missing text becomes empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _as_text_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [_as_text(item) for item in value]
    return value


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class _TextBlock(_Block):
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)


class _ItemsBlock(_Block):
    items: list[str] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def coerce_items(cls, v: Any) -> Any:
        return _as_text_list(v)


class HeadingBlock(_TextBlock):
    """A heading; either a section title or an in-section sub-heading."""

    type: Literal["heading"] = "heading"


class ParagraphBlock(_TextBlock):
    type: Literal["paragraph"] = "paragraph"


class UnorderedListBlock(_ItemsBlock):
    type: Literal["unordered-list"] = "unordered-list"


class OrderedListBlock(_ItemsBlock):
    type: Literal["ordered-list"] = "ordered-list"


class CodeBlock(_TextBlock):
    """A code snippet, possibly spanning several lines."""

    type: Literal["code"] = "code"


class CalloutBlock(_TextBlock):
    type: Literal["callout"] = "callout"
    title: str | None = None


class TableBlock(_Block):
    """A table; rows may be ragged and headers may be empty.

    Missing header or row lists read as empty, a missing row as an empty
    row, and numeric or boolean cells as their text.
    """

    type: Literal["table"] = "table"
    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, v: Any) -> Any:
        return _as_text_list(v)

    @field_validator("rows", mode="before")
    @classmethod
    def coerce_rows(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [_as_text_list(row) for row in v]
        return v


class ImageBlock(_Block):
    type: Literal["image"] = "image"
    src: str
    alt: str = ""
    caption: str | None = None

    @field_validator("alt", mode="before")
    @classmethod
    def coerce_alt(cls, v: Any) -> Any:
        return _as_text(v)


ContentBlock = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        UnorderedListBlock,
        OrderedListBlock,
        CodeBlock,
        CalloutBlock,
        TableBlock,
        ImageBlock,
    ],
    Field(discriminator="type"),
]

# Short tags used by the authoring store.
BLOCK_TYPE_ALIASES: dict[str, str] = {
    "h": "heading",
    "p": "paragraph",
    "ul": "unordered-list",
    "ol": "ordered-list",
    "img": "image",
}

BLOCK_TYPES: frozenset[str] = frozenset(
    {
        "heading",
        "paragraph",
        "unordered-list",
        "ordered-list",
        "code",
        "callout",
        "table",
        "image",
    }
)


class Section(BaseModel):
    """A titled run of consecutive blocks."""

    title: str = ""
    blocks: list[ContentBlock] = Field(default_factory=list)
