"""Version 1 API endpoints."""

from .endpoints import (
    posts_router,
    registry_router,
    replies_router,
    reviewer_requests_router,
    reviewers_router,
    reviews_router,
)

__all__ = [
    "posts_router",
    "replies_router",
    "reviews_router",
    "reviewers_router",
    "registry_router",
    "reviewer_requests_router",
]
