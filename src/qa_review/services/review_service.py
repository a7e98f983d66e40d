"""Review engine: versioned reviews, feedback threads and reviewer profiles.

Reviews are append-only. Publishing a new version inserts a row whose
``previous_review_id`` points at the version it replaces, so walking back
from any version always ends at the original review. Updating an older
version again branches the history. The reverse direction (older to newer)
is never stored; ``successor_index`` builds it once per query and resolves
branches to the newest successor.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from qa_review.core.errors import ConstraintError, NotFound, ValidationError
from qa_review.db.session import atomic
from qa_review.models.review import Review
from qa_review.repositories.post_repo import PostRepository
from qa_review.repositories.reply_repo import ReplyRepository
from qa_review.repositories.review_repo import ReviewRepository
from qa_review.schemas.common import Created
from qa_review.schemas.review import FeedbackRecord, ReviewerProfile, ReviewRecord, ReviewTarget
from qa_review.services.sanitizer import clean_for_storage

logger = logging.getLogger(__name__)


class ReviewService:
    """Creates and versions reviews and manages their feedback threads."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.posts = PostRepository(db)
        self.replies = ReplyRepository(db)
        self.reviews = ReviewRepository(db)

    def create_review(
        self,
        target_kind: ReviewTarget,
        target_id: int,
        reviewer_name: str,
        content: str,
    ) -> Created:
        """Attach a new review to a post or a reply.

        Raises:
            ValidationError: If the content is empty or too short.
            NotFound: If the target does not exist.
        """
        target_kind = ReviewTarget(target_kind)
        clean = clean_for_storage(content, field="Review")
        with atomic(self.db):
            self._require_target(target_kind, target_id)
            review = self.reviews.create(
                content=clean.text,
                reviewer_name=reviewer_name,
                post_id=target_id if target_kind is ReviewTarget.POST else None,
                reply_id=target_id if target_kind is ReviewTarget.REPLY else None,
            )
        logger.info(
            "Review %d by %s created on %s %d",
            review.id,
            reviewer_name,
            target_kind.value,
            target_id,
        )
        return Created(id=review.id, warnings=clean.warnings)

    def update_review(self, review_id: int, new_content: str) -> Created:
        """Publish a new version of a review.

        The existing row is left untouched; a new row copies its reviewer and
        target and records ``review_id`` as its previous version. Any version
        may be updated, so a review that was already replaced gains a second
        successor.

        Raises:
            NotFound: If ``review_id`` does not exist.
            ValidationError: If the new content is empty or too short.
        """
        clean = clean_for_storage(new_content, field="Review")
        with atomic(self.db):
            current = self._require(review_id)
            review = self.reviews.create(
                content=clean.text,
                reviewer_name=current.reviewer_name,
                post_id=current.post_id,
                reply_id=current.reply_id,
                previous_review_id=current.id,
            )
        logger.info("Review %d replaced by version %d", review_id, review.id)
        return Created(id=review.id, warnings=clean.warnings)

    def get_review(self, review_id: int) -> ReviewRecord:
        return ReviewRecord.model_validate(self._require(review_id))

    def has_previous_version(self, review_id: int) -> bool:
        return self._require(review_id).previous_review_id is not None

    def get_previous_version(self, review_id: int) -> ReviewRecord | None:
        """Return the version that ``review_id`` replaced, one hop back."""
        previous_id = self._require(review_id).previous_review_id
        if previous_id is None:
            return None
        previous = self.reviews.get_by_id(previous_id)
        return ReviewRecord.model_validate(previous) if previous else None

    def get_version_chain(self, review_id: int) -> list[ReviewRecord]:
        """Return ``review_id`` and every earlier version, newest first."""
        chain: list[ReviewRecord] = []
        review: Review | None = self._require(review_id)
        seen: set[int] = set()
        while review is not None and review.id not in seen:
            seen.add(review.id)
            chain.append(ReviewRecord.model_validate(review))
            if review.previous_review_id is None:
                break
            review = self.reviews.get_by_id(review.previous_review_id)
        return chain

    def successor_index(self, target_kind: ReviewTarget, target_id: int) -> dict[int, int]:
        """Map each replaced review id on a target to the id that replaced it.

        A version updated more than once maps to its highest-id successor.
        """
        index: dict[int, int] = {}
        for review in self.reviews.list_for_target(ReviewTarget(target_kind), target_id):
            previous_id = review.previous_review_id
            if previous_id is not None:
                index[previous_id] = max(review.id, index.get(previous_id, review.id))
        return index

    def get_latest_version(self, review_id: int) -> ReviewRecord:
        """Follow a review's successors forward to its newest version."""
        review = self._require(review_id)
        target_kind, target_id = _target_of(review)
        successors = self.successor_index(target_kind, target_id)
        latest_id = review.id
        while latest_id in successors:
            latest_id = successors[latest_id]
        return self.get_review(latest_id)

    def list_reviews_for_target(
        self,
        target_kind: ReviewTarget,
        target_id: int,
        *,
        latest_only: bool = False,
    ) -> list[ReviewRecord]:
        """Return a target's reviews in insertion order.

        Every version is included unless ``latest_only`` is set, in which case
        versions that have been replaced are dropped.
        """
        rows = self.reviews.list_for_target(ReviewTarget(target_kind), target_id)
        if latest_only:
            replaced = {row.previous_review_id for row in rows if row.previous_review_id}
            rows = [row for row in rows if row.id not in replaced]
        return [ReviewRecord.model_validate(row) for row in rows]

    def list_reviews_by_reviewer(self, reviewer_name: str) -> list[ReviewRecord]:
        return [
            ReviewRecord.model_validate(row)
            for row in self.reviews.list_by_reviewer(reviewer_name)
        ]

    # Feedback threads

    def add_feedback(self, review_id: int, sender: str, message: str) -> bool:
        """Append a message to a review's thread and bump its feedback count.

        Both writes commit together or not at all.

        Raises:
            NotFound: If the review does not exist.
            ValidationError: If the message is blank.
        """
        if message is None or not message.strip():
            raise ValidationError(["Feedback message cannot be empty"])
        with atomic(self.db):
            self._require(review_id)
            ordinal = self.reviews.next_ordinal(review_id)
            self.reviews.add_feedback(
                review_id=review_id,
                sender=sender,
                message=message,
                ordinal=ordinal,
            )
            self.reviews.increment_feedback_count(review_id)
        logger.debug("Feedback #%d from %s added to review %d", ordinal, sender, review_id)
        return True

    def list_feedback(self, review_id: int) -> list[FeedbackRecord]:
        self._require(review_id)
        return [
            FeedbackRecord.model_validate(row) for row in self.reviews.list_feedback(review_id)
        ]

    def feedback_count(self, review_id: int) -> int:
        return self._require(review_id).feedback_count

    # Reviewer profiles

    def get_experience(self, username: str) -> str | None:
        row = self.reviews.get_experience(username)
        return row.experience if row else None

    def set_experience(self, username: str, experience: str) -> bool:
        """Create or replace a reviewer's experience text."""
        clean = clean_for_storage(experience, field="Experience")
        with atomic(self.db):
            self.reviews.upsert_experience(username, clean.text)
        return True

    def get_reviewer_profile(self, username: str) -> ReviewerProfile:
        return ReviewerProfile(
            username=username,
            experience=self.get_experience(username),
            review_count=len(self.reviews.list_by_reviewer(username)),
        )

    def _require(self, review_id: int) -> Review:
        review = self.reviews.get_by_id(review_id)
        if review is None:
            raise NotFound(f"Review {review_id} not found")
        return review

    def _require_target(self, target_kind: ReviewTarget, target_id: int) -> None:
        if target_kind is ReviewTarget.POST:
            found = self.posts.get_by_id(target_id) is not None
        else:
            found = self.replies.get_by_id(target_id) is not None
        if not found:
            raise NotFound(f"{target_kind.value.capitalize()} {target_id} not found")


def _target_of(review: Review) -> tuple[ReviewTarget, int]:
    if review.reply_id is not None:
        return ReviewTarget.REPLY, review.reply_id
    if review.post_id is None:
        raise ConstraintError(f"Review {review.id} has no target")
    return ReviewTarget.POST, review.post_id
