"""Review, feedback and reviewer-profile Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReviewTarget(str, Enum):
    """Kind of content a review critiques."""

    POST = "post"
    REPLY = "reply"


class ReviewCreate(BaseModel):
    """Schema for creating a review of a post or a reply."""

    target_kind: ReviewTarget
    target_id: int
    reviewer_name: str = Field(..., min_length=1, max_length=255)
    content: str


class ReviewUpdate(BaseModel):
    """Schema for publishing a new version of a review."""

    content: str


class ReviewRecord(BaseModel):
    """A single review version returned to callers."""

    id: int
    target_kind: ReviewTarget
    target_id: int
    content: str
    reviewer_name: str
    feedback_count: int
    previous_review_id: int | None

    @model_validator(mode="before")
    @classmethod
    def _derive_target(cls, data: object) -> object:
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, dict):
            data = {
                "id": data.id,
                "post_id": data.post_id,
                "reply_id": data.reply_id,
                "content": data.content,
                "reviewer_name": data.reviewer_name,
                "feedback_count": data.feedback_count,
                "previous_review_id": data.previous_review_id,
            }
        else:
            data = dict(data)
        if "target_kind" not in data:
            reply_id = data.pop("reply_id", None)
            post_id = data.pop("post_id", None)
            if reply_id is not None:
                data["target_kind"] = ReviewTarget.REPLY
                data["target_id"] = reply_id
            else:
                data["target_kind"] = ReviewTarget.POST
                data["target_id"] = post_id
        return data

    model_config = ConfigDict(from_attributes=True)


class FeedbackCreate(BaseModel):
    """Schema for adding a message to a review's feedback thread."""

    sender: str = Field(..., min_length=1, max_length=255)
    message: str


class FeedbackRecord(BaseModel):
    """A feedback message returned to callers."""

    id: int
    review_id: int
    sender: str
    message: str
    ordinal: int

    model_config = ConfigDict(from_attributes=True)


class ExperienceUpdate(BaseModel):
    """Schema for a reviewer's profile experience text."""

    experience: str


class ReviewerProfile(BaseModel):
    """Reviewer profile summary."""

    username: str
    experience: str | None
    review_count: int
