"""HTTP utilities for fetching content with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from lessonrender.config import (
    LESSONRENDER_FETCH_BACKOFF_S,
    LESSONRENDER_FETCH_MAX_RETRIES,
    LESSONRENDER_FETCH_TIMEOUT_S,
    LESSONRENDER_USER_AGENT,
)
from lessonrender.exceptions import FetchError, RateLimitError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch text from a URL with retry logic for transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Custom exception class to raise on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses. If None,
            a generic message is used.

    Returns:
        The response body as text.

    Raises:
        RateLimitError: If the server keeps answering 429.
        FetchError (or custom on_404 exception): If the fetch fails after all
            retries or returns 404.
    """
    timeout = httpx.Timeout(LESSONRENDER_FETCH_TIMEOUT_S)
    headers = {"User-Agent": LESSONRENDER_USER_AGENT, "Accept": "application/json"}
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(LESSONRENDER_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    message = on_404_message or f"Resource not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code == 429:
                    last_exc = RateLimitError(f"Rate limited by {url}")
                elif response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc
            except not_found_exc_class:
                raise

            if attempt < LESSONRENDER_FETCH_MAX_RETRIES:
                backoff = LESSONRENDER_FETCH_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        if isinstance(last_exc, RateLimitError):
            raise last_exc
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
