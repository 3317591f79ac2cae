"""Custom exceptions for headingcheck."""


class HeadingCheckError(Exception):
    """Base exception for headingcheck operations."""


class InvalidInputError(HeadingCheckError, ValueError):
    """Input rejected before any network activity (e.g. empty URL)."""


class FetchError(HeadingCheckError):
    """Error during document fetching."""


class ParseError(HeadingCheckError):
    """Error during markup parsing."""
