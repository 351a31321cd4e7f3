"""Shared schemas for lessonrender."""

from lessonrender.schemas.blocks import (
    BLOCK_TYPE_ALIASES,
    BLOCK_TYPES,
    CalloutBlock,
    CodeBlock,
    ContentBlock,
    HeadingBlock,
    ImageBlock,
    OrderedListBlock,
    ParagraphBlock,
    Section,
    TableBlock,
    UnorderedListBlock,
)
from lessonrender.schemas.catalog import ALL_CYCLES, Catalog, Course, Cycle, Topic
from lessonrender.schemas.document import (
    InlineSegment,
    LessonResult,
    RenderedBlock,
    RenderedCallout,
    RenderedCell,
    RenderedCode,
    RenderedHeading,
    RenderedImage,
    RenderedLesson,
    RenderedList,
    RenderedParagraph,
    RenderedSection,
    RenderedTable,
    Token,
    TokenKind,
)

__all__ = [
    "ALL_CYCLES",
    "BLOCK_TYPES",
    "BLOCK_TYPE_ALIASES",
    "CalloutBlock",
    "Catalog",
    "CodeBlock",
    "ContentBlock",
    "Course",
    "Cycle",
    "HeadingBlock",
    "ImageBlock",
    "InlineSegment",
    "LessonResult",
    "OrderedListBlock",
    "ParagraphBlock",
    "RenderedBlock",
    "RenderedCallout",
    "RenderedCell",
    "RenderedCode",
    "RenderedHeading",
    "RenderedImage",
    "RenderedLesson",
    "RenderedList",
    "RenderedParagraph",
    "RenderedSection",
    "RenderedTable",
    "Section",
    "TableBlock",
    "Token",
    "TokenKind",
    "Topic",
    "UnorderedListBlock",
]
