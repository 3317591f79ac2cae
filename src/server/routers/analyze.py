"""Analyze endpoint for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from headingcheck.analysis import analyze_url
from headingcheck.exceptions import FetchError, InvalidInputError
from server.models import AnalyzeErrorResponse, AnalyzeRequest

logger = logging.getLogger(__name__)

router = APIRouter()

COMMON_ANALYZE_RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"model": AnalyzeErrorResponse, "description": "Invalid URL or fetch failure"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": AnalyzeErrorResponse, "description": "Unexpected failure"},
}


@router.post("/analyze", responses=COMMON_ANALYZE_RESPONSES)
async def api_analyze(analyze_request: AnalyzeRequest) -> JSONResponse:
    """Analyze the heading structure of a web page.

    **Fetches the page, parses it and reports its heading outline.** The
    response has exactly three keys: ``semantic-structure``,
    ``skipped-levels`` and ``incongruent-headings``.

    **Parameters**

    - **analyze_request** (`AnalyzeRequest`): body holding the page ``url``

    **Returns**

    - **JSONResponse**: the analysis result, or an error body with status 400
      (invalid URL, fetch failure) or 500
    """
    url = analyze_request.url
    try:
        result = await analyze_url(url)
    except (InvalidInputError, FetchError) as exc:
        logger.warning("Analysis rejected", extra={"url": url, "error": str(exc)})
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        logger.exception("Analysis failed", extra={"url": url})
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal server error")

    logger.info(
        "Analysis completed successfully",
        extra={
            "url": url,
            "skipped_levels": len(result.skipped_levels),
            "incongruent_headings": len(result.incongruent_headings),
        },
    )
    return JSONResponse(content=result.to_json_dict())


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = AnalyzeErrorResponse(error="Analysis failed", message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())
