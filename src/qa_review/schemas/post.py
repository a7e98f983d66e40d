"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    author: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., description="Question title")
    body: str = Field(..., description="Question body")


class PostUpdate(BaseModel):
    """Schema for editing a post's title and body."""

    title: str
    body: str


class PostRecord(BaseModel):
    """Post information returned to callers."""

    id: int
    author: str
    title: str
    body: str
    reply_count: int

    model_config = ConfigDict(from_attributes=True)
