"""Narrow seams to collaborators that live outside the review core."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from qa_review.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


class RoleResolver(Protocol):
    """Resolves, updates and searches user roles.

    A role string may hold several comma-separated roles.
    """

    def role_of(self, username: str) -> str | None: ...

    def set_role(self, username: str, role: str) -> None: ...

    def usernames_with_role(self, role: str) -> list[str]: ...


class Notifier(Protocol):
    """Delivers a notification string to a user id.

    The core never calls this itself; the UI layer does after asking the core
    for recipients (for example a post's author).
    """

    def deliver(self, message: str, recipient_user_id: int) -> bool: ...


class DatabaseRoleResolver:
    """Role resolver backed by the ``user_account`` table."""

    def __init__(self, db: Session) -> None:
        self.users = UserRepository(db)

    def role_of(self, username: str) -> str | None:
        account = self.users.get_account(username)
        return account.role if account else None

    def set_role(self, username: str, role: str) -> None:
        self.users.set_role(username, role)

    def usernames_with_role(self, role: str) -> list[str]:
        return self.users.list_with_role(role)


class LoggingNotifier:
    """Notifier that only records deliveries in the log."""

    def __init__(self) -> None:
        self.delivered: list[tuple[int, str]] = []

    def deliver(self, message: str, recipient_user_id: int) -> bool:
        logger.info("Notification for user %d: %s", recipient_user_id, message)
        self.delivered.append((recipient_user_id, message))
        return True
