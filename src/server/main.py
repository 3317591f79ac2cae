"""FastAPI application serving heading analyses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from server.models import AnalyzeErrorResponse
from server.routers.analyze import router as analyze_router

logger = logging.getLogger(__name__)

app = FastAPI(title="headingcheck", description="Heading structure analysis for web pages")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(analyze_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or missing request bodies as 400 instead of 422."""
    logger.warning("Invalid request", extra={"path": request.url.path, "errors": exc.errors()})
    body = AnalyzeErrorResponse(
        error="Invalid URL",
        message='Please provide a JSON body with a valid "url" field',
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
