"""Heading structure analysis pipeline: markup -> outline and findings."""

from __future__ import annotations

import logging

import httpx

from headingcheck.extractor import extract_headings
from headingcheck.fetch import fetch_document
from headingcheck.html_utils import parse_document
from headingcheck.incongruence import detect_incongruent_headings
from headingcheck.outline import build_semantic_tree
from headingcheck.schemas import AnalysisResult

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def analyze(document: BeautifulSoup | Tag) -> AnalysisResult:
    """Analyze the headings of a parsed document.

    Never fails for a parsed document; a document without headings yields
    empty lists.
    """
    headings = extract_headings(document)
    roots, skipped_levels = build_semantic_tree(headings)
    incongruent = detect_incongruent_headings(headings)

    logger.debug(
        "Analyzed %d headings: %d skipped levels, %d incongruent",
        len(headings),
        len(skipped_levels),
        len(incongruent),
    )
    return AnalysisResult(
        semantic_structure=roots,
        skipped_levels=skipped_levels,
        incongruent_headings=incongruent,
    )


def analyze_html(html: str | bytes, *, parser: str | None = None) -> AnalysisResult:
    """Parse markup and analyze its headings.

    Raises:
        ParseError: If no document tree can be built from ``html``.
    """
    return analyze(parse_document(html, parser))


async def analyze_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    parser: str | None = None,
) -> AnalysisResult:
    """Fetch a web page and analyze its headings.

    Args:
        url: Absolute http(s) URL of the page.
        client: Optional shared httpx.AsyncClient.
        parser: Optional BeautifulSoup tree builder name.

    Returns:
        The analysis result.

    Raises:
        InvalidInputError: If the URL is empty or not http(s).
        FetchError: If the page cannot be fetched.
        ParseError: If the fetched markup cannot be parsed.
    """
    html = await fetch_document(url, client=client)
    logger.info("Fetched %s (%d characters)", url, len(html))
    return analyze_html(html, parser=parser)
