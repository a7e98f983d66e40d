# src/qa_review/main.py
"""Main entry point for the Q&A review application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qa_review.api.v1 import (
    posts_router,
    registry_router,
    replies_router,
    reviewer_requests_router,
    reviewers_router,
    reviews_router,
)
from qa_review.core.errors import QAReviewError
from qa_review.core.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Questions, answers, versioned peer reviews and reviewer reputation",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routers
app.include_router(posts_router, prefix="/api/v1")
app.include_router(replies_router, prefix="/api/v1")
app.include_router(reviews_router, prefix="/api/v1")
app.include_router(reviewers_router, prefix="/api/v1")
app.include_router(registry_router, prefix="/api/v1")
app.include_router(reviewer_requests_router, prefix="/api/v1")


@app.exception_handler(QAReviewError)
async def handle_core_error(request: Request, exc: QAReviewError) -> JSONResponse:
    """Render typed core errors as ``{"error": {...}}`` with the mapped status."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("qa_review.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
