"""Review, version and feedback endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from qa_review.db.session import get_db
from qa_review.schemas.common import Created, Outcome
from qa_review.schemas.review import (
    ExperienceUpdate,
    FeedbackCreate,
    FeedbackRecord,
    ReviewCreate,
    ReviewerProfile,
    ReviewRecord,
    ReviewUpdate,
)
from qa_review.services.review_service import ReviewService
from qa_review.services.reviewer_requests import ReviewerRequestService

router = APIRouter(prefix="/reviews", tags=["reviews"])
reviewers_router = APIRouter(prefix="/reviewers", tags=["reviews"])

SessionDep = Annotated[Session, Depends(get_db)]


@router.post("/", response_model=Created, status_code=status.HTTP_201_CREATED)
def create_review(payload: ReviewCreate, db: SessionDep) -> Created:
    return ReviewService(db).create_review(
        payload.target_kind, payload.target_id, payload.reviewer_name, payload.content
    )


@router.get("/{review_id}", response_model=ReviewRecord)
def get_review(review_id: int, db: SessionDep) -> ReviewRecord:
    return ReviewService(db).get_review(review_id)


@router.post("/{review_id}/versions", response_model=Created, status_code=status.HTTP_201_CREATED)
def update_review(review_id: int, payload: ReviewUpdate, db: SessionDep) -> Created:
    """Publish a new version; the existing version is preserved."""
    return ReviewService(db).update_review(review_id, payload.content)


@router.get("/{review_id}/versions", response_model=list[ReviewRecord])
def get_version_chain(review_id: int, db: SessionDep) -> list[ReviewRecord]:
    """Return this version and all earlier ones, newest first."""
    return ReviewService(db).get_version_chain(review_id)


@router.get("/{review_id}/previous", response_model=ReviewRecord)
def get_previous_version(review_id: int, db: SessionDep) -> ReviewRecord:
    previous = ReviewService(db).get_previous_version(review_id)
    if previous is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Review has no previous version",
        )
    return previous


@router.get("/{review_id}/latest", response_model=ReviewRecord)
def get_latest_version(review_id: int, db: SessionDep) -> ReviewRecord:
    return ReviewService(db).get_latest_version(review_id)


@router.post("/{review_id}/feedback", response_model=Outcome, status_code=status.HTTP_201_CREATED)
def add_feedback(review_id: int, payload: FeedbackCreate, db: SessionDep) -> Outcome:
    return Outcome(ok=ReviewService(db).add_feedback(review_id, payload.sender, payload.message))


@router.get("/{review_id}/feedback", response_model=list[FeedbackRecord])
def list_feedback(review_id: int, db: SessionDep) -> list[FeedbackRecord]:
    return ReviewService(db).list_feedback(review_id)


@reviewers_router.get("/", response_model=list[str])
def list_reviewers(db: SessionDep) -> list[str]:
    """Usernames holding the reviewer role."""
    return ReviewerRequestService(db).list_reviewers()


@reviewers_router.get("/{username}", response_model=ReviewerProfile)
def get_reviewer_profile(username: str, db: SessionDep) -> ReviewerProfile:
    return ReviewService(db).get_reviewer_profile(username)


@reviewers_router.get("/{username}/reviews", response_model=list[ReviewRecord])
def list_reviews_by_reviewer(username: str, db: SessionDep) -> list[ReviewRecord]:
    return ReviewService(db).list_reviews_by_reviewer(username)


@reviewers_router.put("/{username}/experience", response_model=Outcome)
def set_experience(username: str, payload: ExperienceUpdate, db: SessionDep) -> Outcome:
    return Outcome(ok=ReviewService(db).set_experience(username, payload.experience))
