"""Reply and like endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from qa_review.db.session import get_db
from qa_review.schemas.common import Created
from qa_review.schemas.reply import (
    LikeCount,
    LikeRequest,
    ReplyCreate,
    ReplyRecord,
    ReplySort,
    ReplyUpdate,
)
from qa_review.schemas.review import ReviewRecord, ReviewTarget
from qa_review.services.reply_service import ReplyService
from qa_review.services.review_service import ReviewService

router = APIRouter(prefix="/replies", tags=["replies"])

SessionDep = Annotated[Session, Depends(get_db)]


@router.post("/", response_model=Created, status_code=status.HTTP_201_CREATED)
def create_reply(payload: ReplyCreate, db: SessionDep) -> Created:
    """Answer a post or reply to a reply; nested replies inherit the parent's post."""
    return ReplyService(db).create_reply(
        payload.post_id,
        payload.author,
        payload.body,
        parent_reply_id=payload.parent_reply_id,
        is_private=payload.is_private,
    )


@router.get("/{reply_id}", response_model=ReplyRecord)
def get_reply(reply_id: int, db: SessionDep) -> ReplyRecord:
    return ReplyService(db).get_reply(reply_id)


@router.put("/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_reply(reply_id: int, payload: ReplyUpdate, db: SessionDep) -> Response:
    if not ReplyService(db).edit_reply(reply_id, payload.body):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reply not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reply(reply_id: int, db: SessionDep) -> Response:
    if not ReplyService(db).delete_reply(reply_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reply not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{reply_id}/children", response_model=list[ReplyRecord])
def list_nested_replies(
    reply_id: int,
    db: SessionDep,
    viewer: str = Query(..., description="Username of the caller, used for private replies"),
    sort: ReplySort = Query(ReplySort.OLDEST, description="oldest first, or most liked first"),
) -> list[ReplyRecord]:
    return ReplyService(db).list_nested_replies(reply_id, viewer, sort)


@router.post("/{reply_id}/like", response_model=LikeCount)
def like_reply(reply_id: int, payload: LikeRequest, db: SessionDep) -> LikeCount:
    count = ReplyService(db).add_like(reply_id, payload.username)
    return LikeCount(reply_id=reply_id, like_count=count)


@router.delete("/{reply_id}/like", response_model=LikeCount)
def unlike_reply(
    reply_id: int,
    db: SessionDep,
    username: str = Query(..., min_length=1),
) -> LikeCount:
    count = ReplyService(db).remove_like(reply_id, username)
    return LikeCount(reply_id=reply_id, like_count=count)


@router.post("/{reply_id}/like/toggle", response_model=LikeCount)
def toggle_like(reply_id: int, payload: LikeRequest, db: SessionDep) -> LikeCount:
    count = ReplyService(db).toggle_like(reply_id, payload.username)
    return LikeCount(reply_id=reply_id, like_count=count)


@router.get("/{reply_id}/likes", response_model=list[str])
def list_likers(reply_id: int, db: SessionDep) -> list[str]:
    return ReplyService(db).list_likers(reply_id)


@router.get("/{reply_id}/reviews", response_model=list[ReviewRecord])
def list_reply_reviews(
    reply_id: int,
    db: SessionDep,
    latest_only: bool = Query(False, description="Drop versions that have been replaced"),
) -> list[ReviewRecord]:
    return ReviewService(db).list_reviews_for_target(
        ReviewTarget.REPLY, reply_id, latest_only=latest_only
    )
