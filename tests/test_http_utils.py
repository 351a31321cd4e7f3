"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from lessonrender.exceptions import CatalogNotAvailableError, FetchError, RateLimitError
from lessonrender.http_utils import RETRY_STATUS_CODES, fetch_with_retries

URL = "https://example.com/catalog.json"


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.raise_for_status = MagicMock()
    return response


def _client(**get_kwargs) -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(**get_kwargs)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


@pytest.fixture
def fast_retries():
    """Two retries with a negligible backoff."""
    with (
        patch("lessonrender.http_utils.LESSONRENDER_FETCH_MAX_RETRIES", 2),
        patch("lessonrender.http_utils.LESSONRENDER_FETCH_BACKOFF_S", 0.001),
    ):
        yield


class TestRetryStatusCodes:
    """Tests for RETRY_STATUS_CODES constant."""

    def test_contains_expected_codes(self) -> None:
        """Should contain all expected retryable status codes."""
        assert RETRY_STATUS_CODES == frozenset({429, 500, 502, 503, 504})


class TestFetchWithRetries:
    """Tests for fetch_with_retries function."""

    @pytest.mark.asyncio
    async def test_returns_text(self) -> None:
        """Returns the response body as text."""
        client = _client(return_value=_response(200, '{"courses": []}'))

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            result = await fetch_with_retries(URL)

        assert result == '{"courses": []}'

    @pytest.mark.asyncio
    async def test_raises_on_404_with_default_message(self) -> None:
        """Raises FetchError on 404 with default message."""
        client = _client(return_value=_response(404))

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            with pytest.raises(FetchError, match="Resource not found"):
                await fetch_with_retries(URL)

        assert client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_raises_custom_exception_on_404(self) -> None:
        """Raises the requested exception class without retrying."""
        client = _client(return_value=_response(404))

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            with pytest.raises(CatalogNotAvailableError, match="No catalog here"):
                await fetch_with_retries(
                    URL,
                    on_404=CatalogNotAvailableError,
                    on_404_message="No catalog here",
                )

        assert client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_retries_on_503(self, fast_retries: None) -> None:
        """Retries on 503 status code."""
        client = _client(side_effect=[_response(503), _response(200, "ok")])

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            result = await fetch_with_retries(URL)

        assert result == "ok"
        assert client.get.call_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_max_retries(self, fast_retries: None) -> None:
        """Raises FetchError after exhausting retries."""
        client = _client(return_value=_response(502))

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            with pytest.raises(FetchError, match="Failed to fetch"):
                await fetch_with_retries(URL)

        # Initial attempt + 2 retries
        assert client.get.call_count == 3

    @pytest.mark.asyncio
    async def test_persistent_429_raises_rate_limit_error(self, fast_retries: None) -> None:
        client = _client(return_value=_response(429))

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            with pytest.raises(RateLimitError, match="Rate limited"):
                await fetch_with_retries(URL)

        assert client.get.call_count == 3

    @pytest.mark.asyncio
    async def test_retries_on_request_error(self, fast_retries: None) -> None:
        """Retries on network request errors."""
        client = _client(side_effect=[httpx.RequestError("Connection failed"), _response(200, "ok")])

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client):
            result = await fetch_with_retries(URL)

        assert result == "ok"

    @pytest.mark.asyncio
    async def test_backoff_doubles(self) -> None:
        client = _client(return_value=_response(500))

        with (
            patch("lessonrender.http_utils.LESSONRENDER_FETCH_MAX_RETRIES", 2),
            patch("lessonrender.http_utils.LESSONRENDER_FETCH_BACKOFF_S", 0.5),
            patch("lessonrender.http_utils.asyncio.sleep", new_callable=AsyncMock) as mock_sleep,
            patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client),
        ):
            with pytest.raises(FetchError):
                await fetch_with_retries(URL)

        assert [c.args[0] for c in mock_sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_uses_provided_client(self) -> None:
        """Uses provided httpx.AsyncClient if passed."""
        client = _client(return_value=_response(200, "ok"))

        with patch("lessonrender.http_utils.httpx.AsyncClient") as mock_client_class:
            result = await fetch_with_retries(URL, client=client)

        assert result == "ok"
        client.get.assert_called_once_with(URL)
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_client_has_correct_settings(self) -> None:
        """Creates client with JSON headers and redirect settings."""
        client = _client(return_value=_response(200, "ok"))

        with patch("lessonrender.http_utils.httpx.AsyncClient", return_value=client) as mock_client_class:
            await fetch_with_retries(URL)

        call_kwargs = mock_client_class.call_args.kwargs
        assert call_kwargs["follow_redirects"] is True
        assert call_kwargs["max_redirects"] == 5
        assert call_kwargs["headers"]["Accept"] == "application/json"
        assert "timeout" in call_kwargs
