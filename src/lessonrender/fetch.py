"""Fetch and cache remote course catalogs."""

from __future__ import annotations

import logging

from lessonrender.cache_utils import (
    cache_path_for,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)
from lessonrender.config import LESSONRENDER_CACHE_PATH, LESSONRENDER_CACHE_TTL_SECONDS
from lessonrender.exceptions import CatalogNotAvailableError, FetchError
from lessonrender.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)

_404_MESSAGE = "No course catalog is published at {url}."


async def fetch_catalog_json(url: str, *, use_cache: bool = True) -> str:
    """Fetch catalog JSON text and cache it locally.

    When the network fetch fails and a cached copy exists (even a stale one),
    the cached copy is served instead.

    Args:
        url: URL of the catalog JSON document.
        use_cache: Whether to use a fresh cached copy if available.

    Returns:
        The catalog JSON as text.

    Raises:
        CatalogNotAvailableError: If the URL answers 404.
        FetchError: If a network error occurs and nothing is cached.
    """
    cache_path = cache_path_for(url, LESSONRENDER_CACHE_PATH)

    if use_cache and is_cache_fresh(cache_path, LESSONRENDER_CACHE_TTL_SECONDS):
        return await read_text_async(cache_path)

    try:
        text = await fetch_with_retries(
            url,
            on_404=CatalogNotAvailableError,
            on_404_message=_404_MESSAGE.format(url=url),
        )
    except CatalogNotAvailableError:
        raise
    except FetchError as exc:
        if use_cache and cache_path.exists():
            logger.warning("Serving stale catalog for %s after fetch failure: %s", url, exc)
            return await read_text_async(cache_path)
        raise

    await mkdir_async(cache_path.parent, parents=True, exist_ok=True)
    await write_text_async(cache_path, text)
    return text
