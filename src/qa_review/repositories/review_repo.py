"""Data access helpers for reviews, feedback threads and reviewer profiles."""
from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import ColumnElement, delete, func, or_, select, update
from sqlalchemy.orm import Session

from qa_review.models.review import Review, ReviewerExperience, ReviewFeedback
from qa_review.schemas.review import ReviewTarget

__all__ = ["ReviewRepository", "target_clause"]


def target_clause(target_kind: ReviewTarget, target_id: int) -> ColumnElement[bool]:
    """Return the WHERE clause selecting reviews of one post or one reply."""
    if target_kind is ReviewTarget.POST:
        return Review.post_id == target_id
    return Review.reply_id == target_id


class ReviewRepository:
    """Database access for review versions, feedback and experience rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, review_id: int) -> Review | None:
        return self.session.get(Review, review_id)

    def create(
        self,
        *,
        content: str,
        reviewer_name: str,
        post_id: int | None,
        reply_id: int | None,
        previous_review_id: int | None = None,
    ) -> Review:
        """Insert a review row and flush so its identifier is assigned."""
        review = Review(
            content=content,
            reviewer_name=reviewer_name,
            post_id=post_id,
            reply_id=reply_id,
            feedback_count=0,
            previous_review_id=previous_review_id,
        )
        self.session.add(review)
        self.session.flush()
        return review

    def list_for_target(self, target_kind: ReviewTarget, target_id: int) -> list[Review]:
        """Return every review version for a target in insertion order."""
        stmt = (
            select(Review)
            .where(target_clause(target_kind, target_id))
            .order_by(Review.id.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def list_by_reviewer(self, reviewer_name: str) -> list[Review]:
        stmt = (
            select(Review)
            .where(Review.reviewer_name == reviewer_name)
            .order_by(Review.id.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def ids_for_targets(
        self,
        *,
        post_ids: Collection[int] = (),
        reply_ids: Collection[int] = (),
    ) -> list[int]:
        clauses = []
        if post_ids:
            clauses.append(Review.post_id.in_(post_ids))
        if reply_ids:
            clauses.append(Review.reply_id.in_(reply_ids))
        if not clauses:
            return []
        return list(self.session.execute(select(Review.id).where(or_(*clauses))).scalars())

    def delete_many(self, review_ids: Collection[int]) -> int:
        """Delete reviews together with their feedback rows."""
        if not review_ids:
            return 0
        self.session.execute(
            delete(ReviewFeedback).where(ReviewFeedback.review_id.in_(review_ids))
        )
        result = self.session.execute(delete(Review).where(Review.id.in_(review_ids)))
        return result.rowcount

    # Feedback threads

    def next_ordinal(self, review_id: int) -> int:
        current = self.session.execute(
            select(func.max(ReviewFeedback.ordinal)).where(ReviewFeedback.review_id == review_id)
        ).scalar()
        return (current or 0) + 1

    def add_feedback(self, *, review_id: int, sender: str, message: str, ordinal: int) -> ReviewFeedback:
        feedback = ReviewFeedback(
            review_id=review_id,
            sender=sender,
            message=message,
            ordinal=ordinal,
        )
        self.session.add(feedback)
        self.session.flush()
        return feedback

    def increment_feedback_count(self, review_id: int) -> bool:
        result = self.session.execute(
            update(Review)
            .where(Review.id == review_id)
            .values(feedback_count=Review.feedback_count + 1)
        )
        return result.rowcount > 0

    def list_feedback(self, review_id: int) -> list[ReviewFeedback]:
        stmt = (
            select(ReviewFeedback)
            .where(ReviewFeedback.review_id == review_id)
            .order_by(ReviewFeedback.ordinal.asc())
        )
        return list(self.session.execute(stmt).scalars())

    # Reviewer experience

    def get_experience(self, username: str) -> ReviewerExperience | None:
        return self.session.get(ReviewerExperience, username)

    def upsert_experience(self, username: str, experience: str) -> ReviewerExperience:
        row = self.get_experience(username)
        if row is None:
            row = ReviewerExperience(username=username, experience=experience)
            self.session.add(row)
        else:
            row.experience = experience
        self.session.flush()
        return row
