"""Per-student relationships to reviewers: trust, weight and rating."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from qa_review.db.session import Base


class TrustedReviewer(Base):
    """Membership edge: ``student`` trusts ``reviewer``."""

    __tablename__ = "trusted_reviewer"

    student: Mapped[str] = mapped_column(String(255), primary_key=True)
    reviewer: Mapped[str] = mapped_column(String(255), primary_key=True)


class ReviewerWeight(Base):
    """Student-assigned ranking weight for a reviewer."""

    __tablename__ = "reviewer_weight"
    __table_args__ = (
        CheckConstraint("weight >= 0", name="ck_reviewer_weight_non_negative"),
    )

    student: Mapped[str] = mapped_column(String(255), primary_key=True)
    reviewer: Mapped[str] = mapped_column(String(255), primary_key=True)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)


class ReviewerRating(Base):
    """Student-assigned rating used for "top reviewer" ordering."""

    __tablename__ = "reviewer_rating"

    student: Mapped[str] = mapped_column(String(255), primary_key=True)
    reviewer: Mapped[str] = mapped_column(String(255), primary_key=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
