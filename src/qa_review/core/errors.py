"""Typed error taxonomy for the review core.

Every failure a caller can branch on is one of the classes below. The HTTP
adapter maps them to status codes through ``ERROR_CODE_TO_STATUS``.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes shared by the Python API and the HTTP adapter."""

    E_VALIDATION = "E_VALIDATION"
    E_NOT_FOUND = "E_NOT_FOUND"
    E_DUPLICATE = "E_DUPLICATE"
    E_CONSTRAINT = "E_CONSTRAINT"
    E_STORAGE = "E_STORAGE"


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.E_VALIDATION: 400,
    ErrorCode.E_NOT_FOUND: 404,
    ErrorCode.E_DUPLICATE: 409,
    ErrorCode.E_CONSTRAINT: 422,
    ErrorCode.E_STORAGE: 500,
}


class QAReviewError(Exception):
    """Base exception for all core errors.

    Attributes:
        code: The error code enum value
        message: Human-readable error message
    """

    code: ErrorCode = ErrorCode.E_STORAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        """HTTP status derived from the error code."""
        return ERROR_CODE_TO_STATUS[self.code]

    def to_dict(self) -> dict[str, object]:
        return {"code": self.code.value, "message": self.message}


class ValidationError(QAReviewError):
    """Content is empty, too short or otherwise fails the content policy."""

    code = ErrorCode.E_VALIDATION

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems = tuple(problems)
        super().__init__("; ".join(self.problems) or "Invalid content")

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data["problems"] = list(self.problems)
        return data


class NotFound(QAReviewError):
    """The referenced post, reply or review does not exist."""

    code = ErrorCode.E_NOT_FOUND


class DuplicateError(QAReviewError):
    """The relationship being created already exists."""

    code = ErrorCode.E_DUPLICATE


class ConstraintError(QAReviewError):
    """A data-model constraint would be violated by the request."""

    code = ErrorCode.E_CONSTRAINT


class StorageError(QAReviewError):
    """The storage backend failed; the transaction was rolled back."""

    code = ErrorCode.E_STORAGE
