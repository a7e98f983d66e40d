"""Models for versioned reviews, their feedback threads and reviewer profiles."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from qa_review.db.session import Base


class Review(Base):
    """One version of a reviewer's critique of a post or a reply.

    Rows are append-only: an update inserts a new row whose
    ``previous_review_id`` points at the version it replaces. Only
    ``feedback_count`` changes after insert.
    """

    __tablename__ = "review"
    __table_args__ = (
        CheckConstraint(
            "(post_id IS NULL) <> (reply_id IS NULL)",
            name="ck_review_single_target",
        ),
        Index("ix_review_post_id", "post_id"),
        Index("ix_review_reply_id", "reply_id"),
        Index("ix_review_reviewer_name", "reviewer_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=True,
    )
    reply_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("reply.id", ondelete="CASCADE"),
        nullable=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    reviewer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    feedback_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    previous_review_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("review.id", ondelete="CASCADE"),
        nullable=True,
    )


class ReviewFeedback(Base):
    """A message in the private thread attached to a review."""

    __tablename__ = "review_feedback"
    __table_args__ = (
        UniqueConstraint("review_id", "ordinal", name="uq_review_feedback_ordinal"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    review_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("review.id", ondelete="CASCADE"),
        nullable=False,
    )
    sender: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    # 1-based insertion order within the review's thread.
    ordinal: Mapped[int] = mapped_column(Integer, nullable=False)


class ReviewerExperience(Base):
    """Free-text experience blurb shown on a reviewer's profile."""

    __tablename__ = "reviewer_experience"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    experience: Mapped[str] = mapped_column(Text, nullable=False)
