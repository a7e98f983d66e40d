"""Trust, weight and rating endpoints plus per-student review rankings."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from qa_review.core.errors import ConstraintError, DuplicateError
from qa_review.db.session import get_db
from qa_review.schemas.common import Outcome
from qa_review.schemas.registry import RatingRequest, TrustRequest, WeightRequest
from qa_review.schemas.review import ReviewRecord, ReviewTarget
from qa_review.services.registry_service import RegistryService

router = APIRouter(prefix="/registry", tags=["registry"])

SessionDep = Annotated[Session, Depends(get_db)]


@router.post("/trust", response_model=Outcome, status_code=status.HTTP_201_CREATED)
def add_trust(payload: TrustRequest, db: SessionDep) -> Outcome:
    if not RegistryService(db).add_trust(payload.student, payload.reviewer):
        raise DuplicateError(f"{payload.student} already trusts {payload.reviewer}")
    return Outcome(ok=True)


@router.delete("/trust", status_code=status.HTTP_204_NO_CONTENT)
def remove_trust(
    db: SessionDep,
    student: str = Query(..., min_length=1),
    reviewer: str = Query(..., min_length=1),
) -> Response:
    if not RegistryService(db).remove_trust(student, reviewer):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trust edge not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/weights", response_model=Outcome)
def set_weight(payload: WeightRequest, db: SessionDep) -> Outcome:
    if not RegistryService(db).set_weight(payload.student, payload.reviewer, payload.weight):
        raise ConstraintError("Weight must be zero or greater")
    return Outcome(ok=True)


@router.put("/ratings", response_model=Outcome)
def set_rating(payload: RatingRequest, db: SessionDep) -> Outcome:
    return Outcome(ok=RegistryService(db).set_rating(payload.student, payload.reviewer, payload.rating))


@router.get("/{student}/trusted", response_model=list[str])
def list_trusted_reviewers(student: str, db: SessionDep) -> list[str]:
    return RegistryService(db).list_trusted_reviewers(student)


@router.get("/{student}/reviewers", response_model=list[str])
def list_my_reviewers(student: str, db: SessionDep) -> list[str]:
    return RegistryService(db).list_my_reviewers(student)


@router.get("/{student}/top-reviewers", response_model=list[str])
def list_top_reviewers(
    student: str,
    db: SessionDep,
    limit: int | None = Query(None, ge=1, le=100),
) -> list[str]:
    return RegistryService(db).list_top_reviewers(student, limit)


@router.get("/{student}/reviews/{target_kind}/{target_id}", response_model=list[ReviewRecord])
def list_reviews_for_student(
    student: str,
    target_kind: ReviewTarget,
    target_id: int,
    db: SessionDep,
    order: Literal["trusted", "weight", "rating"] = Query(
        "weight", description="trusted filters to trusted reviewers; weight/rating rank all reviews"
    ),
) -> list[ReviewRecord]:
    service = RegistryService(db)
    if order == "trusted":
        return service.list_trusted_reviews_for_target(target_kind, target_id, student)
    if order == "rating":
        return service.list_reviews_ranked_by_rating(target_kind, target_id, student)
    return service.list_reviews_ranked_by_weight(target_kind, target_id, student)
