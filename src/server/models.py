"""Pydantic models for the analyze endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AnalyzeRequest(BaseModel):
    """Request model for the /analyze endpoint.

    Attributes
    ----------
    url : str
        The web page whose headings are analyzed.

    """

    url: str = Field(..., description="URL of the page to analyze")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that ``url`` is not empty."""
        if not v.strip():
            err = "URL cannot be null or empty"
            raise ValueError(err)
        return v.strip()


class AnalyzeErrorResponse(BaseModel):
    """Error response model for the /analyze endpoint.

    Attributes
    ----------
    error : str
        Short error category.
    message : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error category")
    message: str = Field(..., description="Error message")
