"""Workflow for students asking to become reviewers."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from qa_review.core.settings import settings
from qa_review.db.session import atomic
from qa_review.repositories.user_repo import UserRepository
from qa_review.services.collaborators import DatabaseRoleResolver, RoleResolver

logger = logging.getLogger(__name__)


class ReviewerRequestService:
    """Submit, list, approve and deny reviewer-role requests."""

    def __init__(self, db: Session, roles: RoleResolver | None = None) -> None:
        self.db = db
        self.users = UserRepository(db)
        self.roles = roles or DatabaseRoleResolver(db)

    def request_reviewer(self, username: str) -> bool:
        """Record a pending request.

        Returns:
            False when the user is already a reviewer or already has a request.
        """
        if self._is_reviewer(username):
            return False
        with atomic(self.db):
            if self.users.get_request(username) is not None:
                return False
            self.users.add_request(username)
        logger.info("Reviewer request submitted by %s", username)
        return True

    def list_pending_requests(self) -> list[str]:
        return self.users.list_pending()

    def list_reviewers(self) -> list[str]:
        """Return every username holding the reviewer role, sorted."""
        return self.roles.usernames_with_role(settings.reviewer_role)

    def approve_request(self, username: str) -> bool:
        """Grant the reviewer role and close the request; False if none is pending.

        The reviewer role is appended to any role the user already holds.
        """
        with atomic(self.db):
            if not self.users.delete_request(username):
                return False
            current = self.roles.role_of(username)
            if not current:
                role = settings.reviewer_role
            elif settings.reviewer_role.lower() in current.lower():
                role = current
            else:
                role = f"{current},{settings.reviewer_role}"
            self.roles.set_role(username, role)
        logger.info("Reviewer request for %s approved", username)
        return True

    def deny_request(self, username: str) -> bool:
        """Close the request without changing the user's role."""
        with atomic(self.db):
            removed = self.users.delete_request(username)
        if removed:
            logger.info("Reviewer request for %s denied", username)
        return removed

    def _is_reviewer(self, username: str) -> bool:
        role = self.roles.role_of(username)
        return role is not None and settings.reviewer_role.lower() in role.lower()
