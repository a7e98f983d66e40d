"""
Pydantic schemas for records returned to callers and API request bodies.

Services never hand ORM rows or cursors to callers; they return these records.
"""

from .common import Created, Outcome
from .post import PostCreate, PostRecord, PostUpdate
from .registry import RatingRequest, ReviewerRequestCreate, TrustRequest, WeightRequest
from .reply import LikeCount, LikeRequest, ReplyCreate, ReplyRecord, ReplySort, ReplyUpdate
from .review import (
    ExperienceUpdate,
    FeedbackCreate,
    FeedbackRecord,
    ReviewCreate,
    ReviewerProfile,
    ReviewRecord,
    ReviewTarget,
    ReviewUpdate,
)

__all__ = [
    "Created", "Outcome",
    "PostCreate", "PostRecord", "PostUpdate",
    "ReplyCreate", "ReplyRecord", "ReplySort", "ReplyUpdate", "LikeRequest", "LikeCount",
    "ReviewCreate", "ReviewRecord", "ReviewTarget", "ReviewUpdate",
    "FeedbackCreate", "FeedbackRecord", "ExperienceUpdate", "ReviewerProfile",
    "TrustRequest", "WeightRequest", "RatingRequest", "ReviewerRequestCreate",
]
