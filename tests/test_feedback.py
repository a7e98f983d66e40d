"""Tests for review feedback threads."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from qa_review.core.errors import NotFound, StorageError, ValidationError
from qa_review.repositories.review_repo import ReviewRepository


def test_feedback_is_ordered_and_counted(reviews, make_review) -> None:
    review_id = make_review("rev")

    assert reviews.add_feedback(review_id, "alice", "Could you expand on this?")
    assert reviews.add_feedback(review_id, "rev", "Sure, see the revision.")

    thread = reviews.list_feedback(review_id)
    assert [(f.ordinal, f.sender) for f in thread] == [(1, "alice"), (2, "rev")]
    assert reviews.feedback_count(review_id) == 2
    assert reviews.get_review(review_id).feedback_count == len(thread)


def test_blank_feedback_rejected(reviews, make_review) -> None:
    review_id = make_review("rev")
    with pytest.raises(ValidationError):
        reviews.add_feedback(review_id, "alice", "   ")
    assert reviews.feedback_count(review_id) == 0


def test_feedback_on_missing_review(reviews) -> None:
    with pytest.raises(NotFound):
        reviews.add_feedback(55, "alice", "Hello there")


def test_feedback_and_counter_commit_together(reviews, make_review, monkeypatch) -> None:
    """A failing counter update leaves the thread untouched."""
    review_id = make_review("rev")

    def _fail(self, review_id: int) -> bool:
        raise SQLAlchemyError("counter update failed")

    monkeypatch.setattr(ReviewRepository, "increment_feedback_count", _fail)

    with pytest.raises(StorageError):
        reviews.add_feedback(review_id, "alice", "This should vanish.")

    monkeypatch.undo()
    assert reviews.list_feedback(review_id) == []
    assert reviews.feedback_count(review_id) == 0
