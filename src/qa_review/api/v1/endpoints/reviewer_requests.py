"""Reviewer-role request endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from qa_review.core.errors import DuplicateError
from qa_review.db.session import get_db
from qa_review.schemas.common import Outcome
from qa_review.schemas.registry import ReviewerRequestCreate
from qa_review.services.reviewer_requests import ReviewerRequestService

router = APIRouter(prefix="/reviewer-requests", tags=["reviewer-requests"])

SessionDep = Annotated[Session, Depends(get_db)]


@router.post("/", response_model=Outcome, status_code=status.HTTP_201_CREATED)
def request_reviewer(payload: ReviewerRequestCreate, db: SessionDep) -> Outcome:
    if not ReviewerRequestService(db).request_reviewer(payload.username):
        raise DuplicateError(f"{payload.username} is already a reviewer or has a pending request")
    return Outcome(ok=True)


@router.get("/", response_model=list[str])
def list_pending_requests(db: SessionDep) -> list[str]:
    return ReviewerRequestService(db).list_pending_requests()


@router.post("/{username}/approve", response_model=Outcome)
def approve_request(username: str, db: SessionDep) -> Outcome:
    if not ReviewerRequestService(db).approve_request(username):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No pending request")
    return Outcome(ok=True)


@router.post("/{username}/deny", response_model=Outcome)
def deny_request(username: str, db: SessionDep) -> Outcome:
    if not ReviewerRequestService(db).deny_request(username):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No pending request")
    return Outcome(ok=True)
