"""HTTP utilities for fetching documents with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from headingcheck.config import (
    HEADINGCHECK_FETCH_BACKOFF_S,
    HEADINGCHECK_FETCH_MAX_RETRIES,
    HEADINGCHECK_FETCH_TIMEOUT_S,
    HEADINGCHECK_USER_AGENT,
)
from headingcheck.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch text from a URL, retrying transient failures with backoff.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The decoded response body.

    Raises:
        FetchError: If the response is a non-retryable error status, or the
            fetch still fails after all retries.
    """
    timeout = httpx.Timeout(HEADINGCHECK_FETCH_TIMEOUT_S)
    headers = {"User-Agent": HEADINGCHECK_USER_AGENT}
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(HEADINGCHECK_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except httpx.HTTPStatusError as exc:
                # 4xx other than 429 will not improve on retry.
                raise FetchError(
                    f"Failed to fetch URL: {url} - HTTP {exc.response.status_code}"
                ) from exc
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < HEADINGCHECK_FETCH_MAX_RETRIES:
                backoff = HEADINGCHECK_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying %s in %.2fs after attempt %d: %s",
                    url,
                    backoff,
                    attempt + 1,
                    last_exc,
                )
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch URL: {url} - {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
