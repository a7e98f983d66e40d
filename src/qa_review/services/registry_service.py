"""Trust & weight registry and the review rankings that depend on it."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from qa_review.db.session import atomic
from qa_review.repositories.registry_repo import RegistryRepository
from qa_review.schemas.review import ReviewRecord, ReviewTarget

logger = logging.getLogger(__name__)


class RegistryService:
    """Per-student trust set, reviewer weights and reviewer ratings.

    Duplicate trust edges and negative weights are reported through a
    ``False`` return value rather than an exception.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.registry = RegistryRepository(db)

    def add_trust(self, student: str, reviewer: str) -> bool:
        """Add ``reviewer`` to ``student``'s trusted set; False if already there."""
        with atomic(self.db):
            if self.registry.get_trust(student, reviewer) is not None:
                logger.info("%s already trusts %s", student, reviewer)
                return False
            self.registry.add_trust(student, reviewer)
        return True

    def remove_trust(self, student: str, reviewer: str) -> bool:
        """Remove a trust edge; True only when one was actually removed."""
        with atomic(self.db):
            return self.registry.remove_trust(student, reviewer)

    def is_trusted(self, student: str, reviewer: str) -> bool:
        return self.registry.get_trust(student, reviewer) is not None

    def list_trusted_reviewers(self, student: str) -> list[str]:
        return self.registry.list_trusted(student)

    def set_weight(self, student: str, reviewer: str, weight: int) -> bool:
        """Create or update a reviewer weight; negative weights are rejected."""
        if weight < 0:
            logger.info("Rejected negative weight %d for %s -> %s", weight, student, reviewer)
            return False
        with atomic(self.db):
            self.registry.upsert_weight(student, reviewer, weight)
        return True

    def get_weight(self, student: str, reviewer: str) -> int:
        """Return the weight ``student`` gave ``reviewer``, 0 when unset."""
        row = self.registry.get_weight(student, reviewer)
        return row.weight if row else 0

    def set_rating(self, student: str, reviewer: str, rating: int) -> bool:
        with atomic(self.db):
            self.registry.upsert_rating(student, reviewer, rating)
        return True

    def get_rating(self, student: str, reviewer: str) -> int | None:
        row = self.registry.get_rating(student, reviewer)
        return row.rating if row else None

    def list_my_reviewers(self, student: str) -> list[str]:
        """Return every reviewer the student has trusted, weighted or rated.

        Wider than ``list_trusted_reviewers``: a reviewer the student only
        rated or weighted is included.
        """
        return self.registry.list_related_reviewers(student)

    def list_top_reviewers(self, student: str, limit: int | None = None) -> list[str]:
        """Return reviewers ordered by the student's rating, highest first."""
        return self.registry.top_rated_reviewers(student, limit)

    def list_trusted_reviews_for_target(
        self, target_kind: ReviewTarget, target_id: int, student: str
    ) -> list[ReviewRecord]:
        """Return reviews of a target written by reviewers the student trusts.

        An empty trust set yields an empty list.
        """
        rows = self.registry.trusted_reviews_for_target(ReviewTarget(target_kind), target_id, student)
        return [ReviewRecord.model_validate(row) for row in rows]

    def list_reviews_ranked_by_weight(
        self, target_kind: ReviewTarget, target_id: int, student: str
    ) -> list[ReviewRecord]:
        """Order a target's reviews by the student's reviewer weight.

        Unweighted reviewers count as 0; equal weights keep insertion order.
        """
        rows = self.registry.reviews_ranked_by_weight(ReviewTarget(target_kind), target_id, student)
        return [ReviewRecord.model_validate(row) for row in rows]

    def list_reviews_ranked_by_rating(
        self, target_kind: ReviewTarget, target_id: int, student: str
    ) -> list[ReviewRecord]:
        """Order a target's reviews by the student's reviewer rating.

        Unrated reviewers count as 0; ties go to the review with more feedback.
        """
        rows = self.registry.reviews_ranked_by_rating(ReviewTarget(target_kind), target_id, student)
        return [ReviewRecord.model_validate(row) for row in rows]
