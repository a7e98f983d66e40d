"""Mapping and constraint checks for the ORM models."""

import pytest
from sqlalchemy.exc import IntegrityError

from qa_review.core.errors import StorageError
from qa_review.db.session import atomic
from qa_review.models import (
    Post,
    ReplyLike,
    Review,
    ReviewerRating,
    ReviewerWeight,
    ReviewFeedback,
    TrustedReviewer,
)


def test_table_names() -> None:
    """Model classes expose expected __tablename__ values."""
    assert Post.__tablename__ == "post"
    assert Review.__tablename__ == "review"
    assert ReviewFeedback.__tablename__ == "review_feedback"
    assert TrustedReviewer.__tablename__ == "trusted_reviewer"


@pytest.mark.parametrize(
    ("model", "columns"),
    [
        (ReplyLike, {"reply_id", "username"}),
        (TrustedReviewer, {"student", "reviewer"}),
        (ReviewerWeight, {"student", "reviewer"}),
        (ReviewerRating, {"student", "reviewer"}),
    ],
)
def test_composite_primary_keys(model, columns) -> None:
    assert {c.name for c in model.__table__.primary_key} == columns


def test_review_requires_exactly_one_target(db_session) -> None:
    db_session.add(Review(content="No target at all", reviewer_name="rev", feedback_count=0))
    with pytest.raises(IntegrityError):
        db_session.flush()
    db_session.rollback()


def test_negative_weight_rejected_by_schema(db_session) -> None:
    db_session.add(ReviewerWeight(student="s", reviewer="r", weight=-1))
    with pytest.raises(IntegrityError):
        db_session.flush()
    db_session.rollback()


def test_atomic_wraps_driver_errors(db_session) -> None:
    """A failed unit of work surfaces as StorageError and leaves nothing behind."""
    with pytest.raises(StorageError):
        with atomic(db_session):
            db_session.add(TrustedReviewer(student="s", reviewer="ok"))
            db_session.add(ReviewerWeight(student="s", reviewer="r", weight=-5))

    assert db_session.get(TrustedReviewer, ("s", "ok")) is None


def test_reply_like_requires_existing_reply(db_session) -> None:
    db_session.add(ReplyLike(reply_id=999, username="ghost"))
    with pytest.raises(IntegrityError):
        db_session.flush()
    db_session.rollback()
