"""Post-related endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from qa_review.db.session import get_db
from qa_review.schemas.common import Created
from qa_review.schemas.post import PostCreate, PostRecord, PostUpdate
from qa_review.schemas.reply import ReplyRecord, ReplySort
from qa_review.schemas.review import ReviewRecord, ReviewTarget
from qa_review.services.post_service import PostService
from qa_review.services.reply_service import ReplyService
from qa_review.services.review_service import ReviewService

router = APIRouter(prefix="/posts", tags=["posts"])

SessionDep = Annotated[Session, Depends(get_db)]


@router.post("/", response_model=Created, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, db: SessionDep) -> Created:
    """Create a question; suspicious content is sanitized and reported in ``warnings``."""
    return PostService(db).create_post(payload.author, payload.title, payload.body)


@router.get("/", response_model=list[PostRecord])
def list_posts(
    db: SessionDep,
    q: str | None = Query(None, description="Case-insensitive keyword filter"),
    author: str | None = Query(None, description="Only posts by this author"),
    answered: bool = Query(False, description="Only posts with at least one reply"),
) -> list[PostRecord]:
    service = PostService(db)
    if q:
        return service.search_posts(q)
    if author:
        return service.list_posts_by_author(author)
    if answered:
        return service.list_answered_posts()
    return service.list_posts()


@router.get("/{post_id}", response_model=PostRecord)
def get_post(post_id: int, db: SessionDep) -> PostRecord:
    return PostService(db).get_post(post_id)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_post(post_id: int, payload: PostUpdate, db: SessionDep) -> Response:
    if not PostService(db).edit_post(post_id, payload.title, payload.body):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, db: SessionDep) -> Response:
    """Delete a post together with its replies, reviews and feedback."""
    if not PostService(db).delete_post(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/replies", response_model=list[ReplyRecord])
def list_top_level_replies(
    post_id: int,
    db: SessionDep,
    viewer: str = Query(..., description="Username of the caller, used for private replies"),
    sort: ReplySort = Query(ReplySort.OLDEST, description="oldest first, or most liked first"),
) -> list[ReplyRecord]:
    PostService(db).get_post(post_id)
    return ReplyService(db).list_top_level_replies(post_id, viewer, sort)


@router.get("/{post_id}/reviews", response_model=list[ReviewRecord])
def list_post_reviews(
    post_id: int,
    db: SessionDep,
    latest_only: bool = Query(False, description="Drop versions that have been replaced"),
) -> list[ReviewRecord]:
    return ReviewService(db).list_reviews_for_target(
        ReviewTarget.POST, post_id, latest_only=latest_only
    )
