"""Shared HTML utilities: parsing markup into a traversable tree."""

from __future__ import annotations

import logging

from headingcheck.config import HEADINGCHECK_HTML_PARSER
from headingcheck.exceptions import ParseError

try:
    from bs4 import BeautifulSoup, FeatureNotFound
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def parse_document(html: str | bytes, parser: str | None = None) -> BeautifulSoup:
    """Parse raw markup into a BeautifulSoup document.

    Malformed markup is tolerated the way the underlying tree builder
    tolerates it; only a failure to build any tree is an error.

    Args:
        html: Raw markup text (or bytes, decoded by BeautifulSoup).
        parser: Tree builder name. Defaults to ``HEADINGCHECK_HTML_PARSER``.

    Returns:
        The parsed document.

    Raises:
        ParseError: If the input is not markup or the parser is unavailable.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Expected markup text, got {type(html).__name__}")

    features = parser or HEADINGCHECK_HTML_PARSER
    try:
        return BeautifulSoup(html, features)
    except FeatureNotFound as exc:
        raise ParseError(
            f"HTML parser {features!r} is not available: {exc}"
        ) from exc
    except (TypeError, ValueError) as exc:
        logger.debug("Failed to parse document with %s: %s", features, exc)
        raise ParseError(f"Failed to parse document: {exc}") from exc
