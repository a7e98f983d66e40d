"""SQLAlchemy models for the Q&A review service."""

from .post import Post
from .registry import ReviewerRating, ReviewerWeight, TrustedReviewer
from .reply import Reply, ReplyLike
from .review import Review, ReviewerExperience, ReviewFeedback
from .user import ReviewerRequest, UserAccount

__all__ = [
    "Post",
    "Reply", "ReplyLike",
    "Review", "ReviewFeedback", "ReviewerExperience",
    "TrustedReviewer", "ReviewerWeight", "ReviewerRating",
    "UserAccount", "ReviewerRequest",
]
