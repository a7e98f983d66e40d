"""Data access helpers for the role directory and reviewer requests."""
from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from qa_review.models.user import REQUEST_STATUS_PENDING, ReviewerRequest, UserAccount
from qa_review.repositories.post_repo import escape_like

__all__ = ["UserRepository"]


class UserRepository:
    """Database access for user roles and pending reviewer requests."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_account(self, username: str) -> UserAccount | None:
        return self.session.get(UserAccount, username)

    def set_role(self, username: str, role: str) -> UserAccount:
        account = self.get_account(username)
        if account is None:
            account = UserAccount(username=username, role=role)
            self.session.add(account)
        else:
            account.role = role
        self.session.flush()
        return account

    def list_with_role(self, role: str) -> list[str]:
        """Return usernames whose role string contains ``role``, ignoring case."""
        pattern = f"%{escape_like(role.lower())}%"
        stmt = (
            select(UserAccount.username)
            .where(func.lower(UserAccount.role).like(pattern, escape="\\"))
            .order_by(UserAccount.username.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def get_request(self, username: str) -> ReviewerRequest | None:
        return self.session.get(ReviewerRequest, username)

    def add_request(self, username: str) -> ReviewerRequest:
        request = ReviewerRequest(username=username, status=REQUEST_STATUS_PENDING)
        self.session.add(request)
        self.session.flush()
        return request

    def delete_request(self, username: str) -> bool:
        result = self.session.execute(
            delete(ReviewerRequest).where(ReviewerRequest.username == username)
        )
        return result.rowcount > 0

    def list_pending(self) -> list[str]:
        stmt = (
            select(ReviewerRequest.username)
            .where(ReviewerRequest.status == REQUEST_STATUS_PENDING)
            .order_by(ReviewerRequest.username.asc())
        )
        return list(self.session.execute(stmt).scalars())
