"""Render content blocks into a lesson document."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import BaseModel, TypeAdapter, ValidationError

from lessonrender.colors import color_for, is_color_table
from lessonrender.highlighting import tokenize_code
from lessonrender.inline import split_inline_code
from lessonrender.schemas import (
    BLOCK_TYPE_ALIASES,
    BLOCK_TYPES,
    CalloutBlock,
    CodeBlock,
    ContentBlock,
    HeadingBlock,
    ImageBlock,
    InlineSegment,
    OrderedListBlock,
    ParagraphBlock,
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
    TableBlock,
    UnorderedListBlock,
)
from lessonrender.sections import sectionize

logger = logging.getLogger(__name__)

_BLOCK_ADAPTER: TypeAdapter[ContentBlock] = TypeAdapter(ContentBlock)


def parse_blocks(raw_blocks: Iterable[Any] | None) -> list[ContentBlock]:
    """Validate authored blocks, skipping anything that is not a known block.

    Accepts already-built block models or JSON objects using either the
    canonical type tags or the short authoring aliases ("h", "p", "ul", ...).
    Unknown types and malformed blocks are logged and dropped.
    """
    blocks: list[ContentBlock] = []
    for index, raw in enumerate(raw_blocks or ()):
        if raw is None:
            continue
        if isinstance(raw, BaseModel):
            raw = raw.model_dump()
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object block at index %d", index)
            continue

        block_type = raw.get("type")
        if isinstance(block_type, str):
            block_type = BLOCK_TYPE_ALIASES.get(block_type, block_type)
        if not isinstance(block_type, str) or block_type not in BLOCK_TYPES:
            logger.warning("Skipping unknown block type %r at index %d", raw.get("type"), index)
            continue

        try:
            blocks.append(_BLOCK_ADAPTER.validate_python({**raw, "type": block_type}))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed %s block at index %d: %s",
                block_type,
                index,
                exc.error_count(),
            )
    return blocks


def render_block(block: ContentBlock) -> RenderedBlock | None:
    """Render one block; returns None for a block that cannot be rendered."""
    if isinstance(block, HeadingBlock):
        return RenderedHeading(text=block.text)

    if isinstance(block, ParagraphBlock):
        return RenderedParagraph(segments=split_inline_code(block.text))

    if isinstance(block, (UnorderedListBlock, OrderedListBlock)):
        return RenderedList(
            ordered=isinstance(block, OrderedListBlock),
            items=[split_inline_code(item) for item in block.items],
        )

    if isinstance(block, CodeBlock):
        return RenderedCode(lines=tokenize_code(block.text))

    if isinstance(block, CalloutBlock):
        return RenderedCallout(title=block.title or None, segments=split_inline_code(block.text))

    if isinstance(block, TableBlock):
        return _render_table(block)

    if isinstance(block, ImageBlock):
        return RenderedImage(src=block.src, alt=block.alt, caption=block.caption or None)

    logger.warning("No renderer for block %r", type(block).__name__)
    return None


def _render_table(table: TableBlock) -> RenderedTable:
    color_table = is_color_table(table)
    rows: list[list[RenderedCell]] = []
    for row in table.rows:
        cells: list[RenderedCell] = []
        for column, cell in enumerate(row):
            if color_table and column == 0:
                segments = [InlineSegment(kind="text", text=cell)] if cell else []
                cells.append(RenderedCell(segments=segments, color=color_for(cell)))
            else:
                cells.append(RenderedCell(segments=split_inline_code(cell)))
        rows.append(cells)
    return RenderedTable(headers=list(table.headers), rows=rows, color_table=color_table)


def render_lesson(raw_blocks: Iterable[Any] | None) -> RenderedLesson:
    """Render a lesson's block sequence into titled, rendered sections."""
    sections: list[RenderedSection] = []
    for section in sectionize(parse_blocks(raw_blocks)):
        rendered = [node for node in (render_block(block) for block in section.blocks) if node is not None]
        sections.append(RenderedSection(title=section.title, blocks=rendered))
    return RenderedLesson(sections=sections)
