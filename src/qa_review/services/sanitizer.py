"""Content policy checks and best-effort cleanup for free-text input.

Everything here is a pure function of its arguments. Injection safety comes
from parameterised statements in the repositories; the suspicious-content
check only tells users that their text will be cleaned before storage.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from qa_review.core.errors import ValidationError
from qa_review.core.settings import settings

logger = logging.getLogger(__name__)

BLOCKED_KEYWORDS: tuple[str, ...] = (
    "union",
    "select",
    "insert",
    "update",
    "delete",
    "drop",
    "alter",
    "create",
    "execute",
    "shutdown",
)
SUSPICIOUS_SEQUENCES: tuple[str, ...] = ("--", ";", "/*", "*/")

_KEYWORD_RE = re.compile(r"\b(" + "|".join(BLOCKED_KEYWORDS) + r")\b", re.IGNORECASE)
_STRIP_CHARS_RE = re.compile(r"[\"'#;()*/]")
_TRAILING_COMMENT_RE = re.compile(r"(;\s*--|UNION\s*--)", re.IGNORECASE)


@dataclass(frozen=True)
class ContentCheck:
    """Outcome of validating one or more free-text fields.

    ``blocking`` problems must stop the write. ``suspicious`` content is
    reported but the write proceeds with sanitized text.
    """

    problems: tuple[str, ...] = ()
    blocking: bool = False
    suspicious: bool = False

    @property
    def ok(self) -> bool:
        return not self.problems

    def merge(self, other: ContentCheck) -> ContentCheck:
        return ContentCheck(
            problems=self.problems + other.problems,
            blocking=self.blocking or other.blocking,
            suspicious=self.suspicious or other.suspicious,
        )


@dataclass(frozen=True)
class CleanText:
    """Text ready for storage plus any warnings raised while cleaning it."""

    text: str
    warnings: list[str] = field(default_factory=list)


def is_suspicious(text: str | None) -> bool:
    """Return True when text contains a blocklisted keyword or comment/terminator sequence."""
    if not text:
        return False
    if _KEYWORD_RE.search(text):
        return True
    return any(sequence in text for sequence in SUSPICIOUS_SEQUENCES)


def sanitize(text: str | None) -> str:
    """Strip quote, comment and terminator characters and blocklisted keywords.

    Lossy and best-effort; never raises.
    """
    if text is None:
        return ""
    cleaned = _STRIP_CHARS_RE.sub("", text)
    cleaned = _KEYWORD_RE.sub("", cleaned)
    return _TRAILING_COMMENT_RE.sub(";", cleaned)


def _length_problems(text: str | None, field: str, *, min_length: int) -> list[str]:
    if text is None or not text.strip():
        return [f"{field} cannot be empty"]
    if len(text.strip()) < min_length:
        return [f"{field} must be at least {min_length} characters"]
    return []


def validate_content(text: str | None, *, field: str = "Content") -> ContentCheck:
    """Check a free-text body against the content policy.

    Args:
        text: The submitted text.
        field: Label used in the human-readable problem messages.

    Returns:
        A ``ContentCheck``; an empty ``problems`` tuple means the text can be
        stored as-is.
    """
    if text is None or not text.strip():
        return ContentCheck(problems=(f"{field} cannot be empty",), blocking=True)

    problems = _length_problems(text, field, min_length=settings.min_content_length)
    blocking = bool(problems)
    suspicious = is_suspicious(text.strip())
    if suspicious:
        problems.append(f"{field} contains suspicious content")

    return ContentCheck(problems=tuple(problems), blocking=blocking, suspicious=suspicious)


def validate_question(title: str | None, body: str | None) -> ContentCheck:
    """Validate a post's title and body together."""
    title_check = ContentCheck()
    if title is None or not title.strip():
        title_check = ContentCheck(problems=("Title cannot be empty",), blocking=True)
    else:
        problems: list[str] = []
        suspicious = is_suspicious(title)
        if suspicious:
            problems.append("Title contains suspicious content")
        too_long = len(title) > settings.max_title_length
        if too_long:
            problems.append(f"Title cannot exceed {settings.max_title_length} characters")
        title_check = ContentCheck(
            problems=tuple(problems), blocking=too_long, suspicious=suspicious
        )
    return title_check.merge(validate_content(body, field="Question"))


def clean_for_storage(text: str | None, *, field: str = "Content") -> CleanText:
    """Apply the write policy to a single field.

    Raises:
        ValidationError: If the text is empty or too short, before or after
            sanitization.
    """
    check = validate_content(text, field=field)
    return _apply(check, text or "", field, min_length=settings.min_content_length)


def clean_question(title: str | None, body: str | None) -> tuple[CleanText, CleanText]:
    """Apply the write policy to a post's title and body.

    Raises:
        ValidationError: If the title is blank or too long, or the body is
            empty or too short, before or after sanitization.
    """
    check = validate_question(title, body)
    if check.blocking:
        raise ValidationError(check.problems)
    clean_title = _apply(
        ContentCheck(suspicious=is_suspicious(title)), title or "", "Title", min_length=1
    )
    clean_body = _apply(
        ContentCheck(suspicious=is_suspicious(body)),
        body or "",
        "Question",
        min_length=settings.min_content_length,
    )
    return clean_title, clean_body


def _apply(check: ContentCheck, text: str, field: str, *, min_length: int) -> CleanText:
    if check.blocking:
        raise ValidationError(check.problems)
    if not check.suspicious:
        return CleanText(text=text)
    cleaned = sanitize(text)
    # Sanitizing can strip the text below the length rules.
    problems = _length_problems(cleaned, field, min_length=min_length)
    if problems:
        logger.info("%s rejected: nothing usable left after sanitizing", field)
        raise ValidationError(
            [f"{problem} after removing suspicious content" for problem in problems]
        )
    logger.warning("%s contained suspicious content; storing sanitized text", field)
    return CleanText(text=cleaned, warnings=[f"{field} contains suspicious content"])
