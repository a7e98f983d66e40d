"""Reply-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReplySort(str, Enum):
    """Ordering for reply listings."""

    OLDEST = "oldest"
    LIKES = "likes"


class ReplyCreate(BaseModel):
    """Schema for answering a post or replying to another reply."""

    post_id: int
    author: str = Field(..., min_length=1, max_length=255)
    body: str
    parent_reply_id: int | None = Field(None, description="Parent reply for nested replies")
    is_private: bool = False


class ReplyUpdate(BaseModel):
    """Schema for editing a reply's body."""

    body: str


class LikeRequest(BaseModel):
    """Schema identifying the user liking or unliking a reply."""

    username: str = Field(..., min_length=1, max_length=255)


class LikeCount(BaseModel):
    """Like count after a like mutation."""

    reply_id: int
    like_count: int


class ReplyRecord(BaseModel):
    """Reply information returned to callers."""

    id: int
    post_id: int
    parent_reply_id: int | None
    author: str
    body: str
    is_private: bool
    like_count: int
    nested_reply_count: int

    model_config = ConfigDict(from_attributes=True)
