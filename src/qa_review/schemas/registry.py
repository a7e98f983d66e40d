"""Trust, weight and rating Pydantic schemas."""

from pydantic import BaseModel, Field


class TrustRequest(BaseModel):
    """Schema for adding or removing a trusted reviewer."""

    student: str = Field(..., min_length=1, max_length=255)
    reviewer: str = Field(..., min_length=1, max_length=255)


class WeightRequest(TrustRequest):
    """Schema for assigning a ranking weight to a reviewer."""

    weight: int


class RatingRequest(TrustRequest):
    """Schema for rating a reviewer."""

    rating: int


class ReviewerRequestCreate(BaseModel):
    """Schema for a student asking to become a reviewer."""

    username: str = Field(..., min_length=1, max_length=255)
