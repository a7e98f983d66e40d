"""Business logic services for the Q&A review core."""

from .post_service import PostService
from .registry_service import RegistryService
from .reply_service import ReplyService
from .review_service import ReviewService
from .reviewer_requests import ReviewerRequestService

__all__ = [
    "PostService",
    "ReplyService",
    "ReviewService",
    "RegistryService",
    "ReviewerRequestService",
]
