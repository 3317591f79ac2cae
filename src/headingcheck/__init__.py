"""headingcheck: check the heading outline of HTML documents."""

from headingcheck.analysis import analyze, analyze_html, analyze_url
from headingcheck.exceptions import (
    FetchError,
    HeadingCheckError,
    InvalidInputError,
    ParseError,
)
from headingcheck.html_utils import parse_document
from headingcheck.schemas import AnalysisResult, HeadingNode

__all__ = [
    "AnalysisResult",
    "FetchError",
    "HeadingCheckError",
    "HeadingNode",
    "InvalidInputError",
    "ParseError",
    "analyze",
    "analyze_html",
    "analyze_url",
    "parse_document",
]
