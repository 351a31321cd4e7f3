"""Shared router helpers."""

from __future__ import annotations

from typing import Any

from lessonrender.catalog import load_catalog
from lessonrender.schemas import Catalog
from server.models import ErrorResponse

COMMON_LESSON_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Course or topic not found"},
    502: {"model": ErrorResponse, "description": "Catalog could not be fetched or parsed"},
}


async def get_catalog() -> Catalog:
    """FastAPI dependency returning the active catalog."""
    return await load_catalog()
