"""Tests for remote catalog fetching and caching."""

from __future__ import annotations

import os
import time
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from lessonrender.cache_utils import cache_path_for
from lessonrender.exceptions import CatalogNotAvailableError, FetchError
from lessonrender.fetch import fetch_catalog_json

URL = "https://cdn.example.com/catalog.json"


@pytest.fixture
def cache_dir(tmp_path: Path):
    with patch("lessonrender.fetch.LESSONRENDER_CACHE_PATH", tmp_path):
        yield tmp_path


def _age(path: Path, seconds: float) -> None:
    old_time = time.time() - seconds
    os.utime(path, (old_time, old_time))


class TestFetchCatalogJson:
    """Tests for fetch_catalog_json function."""

    @pytest.mark.asyncio
    async def test_fetches_and_writes_cache(self, cache_dir: Path) -> None:
        with patch(
            "lessonrender.fetch.fetch_with_retries", new_callable=AsyncMock, return_value='{"courses": []}'
        ) as mock_fetch:
            text = await fetch_catalog_json(URL)

        assert text == '{"courses": []}'
        assert cache_path_for(URL, cache_dir).read_text(encoding="utf-8") == '{"courses": []}'
        assert mock_fetch.await_args.kwargs["on_404"] is CatalogNotAvailableError

    @pytest.mark.asyncio
    async def test_serves_fresh_cache_without_fetching(self, cache_dir: Path) -> None:
        cache_path_for(URL, cache_dir).write_text("cached", encoding="utf-8")

        with patch("lessonrender.fetch.fetch_with_retries", new_callable=AsyncMock) as mock_fetch:
            text = await fetch_catalog_json(URL)

        assert text == "cached"
        mock_fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_bypasses_cache_when_disabled(self, cache_dir: Path) -> None:
        cache_path_for(URL, cache_dir).write_text("cached", encoding="utf-8")

        with patch("lessonrender.fetch.fetch_with_retries", new_callable=AsyncMock, return_value="fresh"):
            text = await fetch_catalog_json(URL, use_cache=False)

        assert text == "fresh"
        assert cache_path_for(URL, cache_dir).read_text(encoding="utf-8") == "fresh"

    @pytest.mark.asyncio
    async def test_refetches_stale_cache(self, cache_dir: Path) -> None:
        path = cache_path_for(URL, cache_dir)
        path.write_text("old", encoding="utf-8")
        _age(path, 10**6)

        with (
            patch("lessonrender.fetch.LESSONRENDER_CACHE_TTL_SECONDS", 60),
            patch("lessonrender.fetch.fetch_with_retries", new_callable=AsyncMock, return_value="new"),
        ):
            text = await fetch_catalog_json(URL)

        assert text == "new"

    @pytest.mark.asyncio
    async def test_serves_stale_cache_when_fetch_fails(self, cache_dir: Path) -> None:
        path = cache_path_for(URL, cache_dir)
        path.write_text("old", encoding="utf-8")
        _age(path, 10**6)

        with (
            patch("lessonrender.fetch.LESSONRENDER_CACHE_TTL_SECONDS", 60),
            patch(
                "lessonrender.fetch.fetch_with_retries",
                new_callable=AsyncMock,
                side_effect=FetchError("offline"),
            ),
        ):
            text = await fetch_catalog_json(URL)

        assert text == "old"

    @pytest.mark.asyncio
    async def test_raises_when_fetch_fails_and_nothing_cached(self, cache_dir: Path) -> None:
        with patch(
            "lessonrender.fetch.fetch_with_retries",
            new_callable=AsyncMock,
            side_effect=FetchError("offline"),
        ):
            with pytest.raises(FetchError, match="offline"):
                await fetch_catalog_json(URL)

        assert not cache_path_for(URL, cache_dir).exists()

    @pytest.mark.asyncio
    async def test_missing_catalog_is_never_served_from_cache(self, cache_dir: Path) -> None:
        path = cache_path_for(URL, cache_dir)
        path.write_text("old", encoding="utf-8")
        _age(path, 10**6)

        with (
            patch("lessonrender.fetch.LESSONRENDER_CACHE_TTL_SECONDS", 60),
            patch(
                "lessonrender.fetch.fetch_with_retries",
                new_callable=AsyncMock,
                side_effect=CatalogNotAvailableError("gone"),
            ),
        ):
            with pytest.raises(CatalogNotAvailableError):
                await fetch_catalog_json(URL)

    @pytest.mark.asyncio
    async def test_creates_cache_directory(self, tmp_path: Path) -> None:
        nested = tmp_path / "a" / "b"
        with (
            patch("lessonrender.fetch.LESSONRENDER_CACHE_PATH", nested),
            patch("lessonrender.fetch.fetch_with_retries", new_callable=AsyncMock, return_value="[]"),
        ):
            await fetch_catalog_json(URL)

        assert cache_path_for(URL, nested).exists()
