"""Shared schemas for headingcheck."""

from headingcheck.schemas.headings import AnalysisResult, HeadingNode

__all__ = ["AnalysisResult", "HeadingNode"]
