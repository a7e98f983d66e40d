"""Data access helpers for trust, weight and rating edges.

The ranking queries live here because they join reviews with the registry
tables; each one is a single SELECT so it reads one consistent snapshot.
"""
from __future__ import annotations

from sqlalchemy import and_, delete, func, select, union
from sqlalchemy.orm import Session

from qa_review.models.registry import ReviewerRating, ReviewerWeight, TrustedReviewer
from qa_review.models.review import Review
from qa_review.repositories.review_repo import target_clause
from qa_review.schemas.review import ReviewTarget

__all__ = ["RegistryRepository"]


class RegistryRepository:
    """Database access for a student's relationships to reviewers."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # Trust edges

    def get_trust(self, student: str, reviewer: str) -> TrustedReviewer | None:
        return self.session.get(TrustedReviewer, (student, reviewer))

    def add_trust(self, student: str, reviewer: str) -> TrustedReviewer:
        edge = TrustedReviewer(student=student, reviewer=reviewer)
        self.session.add(edge)
        self.session.flush()
        return edge

    def remove_trust(self, student: str, reviewer: str) -> bool:
        result = self.session.execute(
            delete(TrustedReviewer).where(
                TrustedReviewer.student == student,
                TrustedReviewer.reviewer == reviewer,
            )
        )
        return result.rowcount > 0

    def list_trusted(self, student: str) -> list[str]:
        stmt = (
            select(TrustedReviewer.reviewer)
            .where(TrustedReviewer.student == student)
            .order_by(TrustedReviewer.reviewer.asc())
        )
        return list(self.session.execute(stmt).scalars())

    # Weights and ratings

    def get_weight(self, student: str, reviewer: str) -> ReviewerWeight | None:
        return self.session.get(ReviewerWeight, (student, reviewer))

    def upsert_weight(self, student: str, reviewer: str, weight: int) -> ReviewerWeight:
        row = self.get_weight(student, reviewer)
        if row is None:
            row = ReviewerWeight(student=student, reviewer=reviewer, weight=weight)
            self.session.add(row)
        else:
            row.weight = weight
        self.session.flush()
        return row

    def get_rating(self, student: str, reviewer: str) -> ReviewerRating | None:
        return self.session.get(ReviewerRating, (student, reviewer))

    def upsert_rating(self, student: str, reviewer: str, rating: int) -> ReviewerRating:
        row = self.get_rating(student, reviewer)
        if row is None:
            row = ReviewerRating(student=student, reviewer=reviewer, rating=rating)
            self.session.add(row)
        else:
            row.rating = rating
        self.session.flush()
        return row

    def list_related_reviewers(self, student: str) -> list[str]:
        """Return reviewers the student has trusted, weighted or rated."""
        stmt = union(
            select(TrustedReviewer.reviewer.label("reviewer")).where(
                TrustedReviewer.student == student
            ),
            select(ReviewerWeight.reviewer.label("reviewer")).where(
                ReviewerWeight.student == student
            ),
            select(ReviewerRating.reviewer.label("reviewer")).where(
                ReviewerRating.student == student
            ),
        )
        return sorted(self.session.execute(stmt).scalars())

    def top_rated_reviewers(self, student: str, limit: int | None = None) -> list[str]:
        stmt = (
            select(ReviewerRating.reviewer)
            .where(ReviewerRating.student == student)
            .order_by(ReviewerRating.rating.desc(), ReviewerRating.reviewer.asc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars())

    # Review queries filtered or ordered by the registry

    def trusted_reviews_for_target(
        self, target_kind: ReviewTarget, target_id: int, student: str
    ) -> list[Review]:
        stmt = (
            select(Review)
            .join(
                TrustedReviewer,
                and_(
                    TrustedReviewer.reviewer == Review.reviewer_name,
                    TrustedReviewer.student == student,
                ),
            )
            .where(target_clause(target_kind, target_id))
            .order_by(Review.id.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def reviews_ranked_by_weight(
        self, target_kind: ReviewTarget, target_id: int, student: str
    ) -> list[Review]:
        weight = func.coalesce(ReviewerWeight.weight, 0)
        stmt = (
            select(Review)
            .outerjoin(
                ReviewerWeight,
                and_(
                    ReviewerWeight.reviewer == Review.reviewer_name,
                    ReviewerWeight.student == student,
                ),
            )
            .where(target_clause(target_kind, target_id))
            .order_by(weight.desc(), Review.id.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def reviews_ranked_by_rating(
        self, target_kind: ReviewTarget, target_id: int, student: str
    ) -> list[Review]:
        rating = func.coalesce(ReviewerRating.rating, 0)
        stmt = (
            select(Review)
            .outerjoin(
                ReviewerRating,
                and_(
                    ReviewerRating.reviewer == Review.reviewer_name,
                    ReviewerRating.student == student,
                ),
            )
            .where(target_clause(target_kind, target_id))
            .order_by(rating.desc(), Review.feedback_count.desc(), Review.id.asc())
        )
        return list(self.session.execute(stmt).scalars())
