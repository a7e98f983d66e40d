"""Role directory and reviewer-role requests."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from qa_review.db.session import Base

REQUEST_STATUS_PENDING = "pending"


class UserAccount(Base):
    """Username to role mapping consulted by the default role resolver."""

    __tablename__ = "user_account"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    role: Mapped[str] = mapped_column(String(200), nullable=False)


class ReviewerRequest(Base):
    """A student's request to be granted the reviewer role."""

    __tablename__ = "reviewer_request"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=REQUEST_STATUS_PENDING
    )
