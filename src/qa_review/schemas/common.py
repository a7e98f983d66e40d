"""Shared Pydantic schemas for write results."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Created(BaseModel):
    """Identifier of a freshly inserted row plus any content-policy warnings.

    ``warnings`` is non-empty when suspicious content was sanitized before
    storage; the write still succeeded.
    """

    id: int
    warnings: list[str] = Field(default_factory=list)


class Outcome(BaseModel):
    """Boolean result of a registry or edit operation."""

    ok: bool
