"""API endpoint modules for version 1."""

from .posts import router as posts_router
from .registry import router as registry_router
from .replies import router as replies_router
from .reviewer_requests import router as reviewer_requests_router
from .reviews import reviewers_router
from .reviews import router as reviews_router

__all__ = [
    "posts_router",
    "replies_router",
    "reviews_router",
    "reviewers_router",
    "registry_router",
    "reviewer_requests_router",
]
