"""Fetch documents to analyze."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import httpx

from headingcheck.exceptions import InvalidInputError
from headingcheck.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str | None) -> str:
    """Return the stripped URL, or raise if it cannot be fetched.

    Raises:
        InvalidInputError: If the URL is empty, not a string, or not an
            absolute http(s) URL.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidInputError("URL cannot be null or empty")
    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not parsed.netloc:
        raise InvalidInputError(f"Unsupported URL: {url!r} (expected http or https)")
    return url


async def fetch_document(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch the raw markup of a web page.

    Args:
        url: Absolute http(s) URL of the page.
        client: Optional shared httpx.AsyncClient.

    Returns:
        The page markup as text.

    Raises:
        InvalidInputError: If the URL is rejected before fetching.
        FetchError: If the page cannot be fetched.
    """
    url = validate_url(url)
    logger.debug("Fetching %s", url)
    return await fetch_with_retries(url, client=client)
