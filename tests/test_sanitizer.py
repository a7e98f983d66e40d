"""Tests for the content policy and best-effort sanitizer."""

import pytest

from qa_review.core.errors import ValidationError
from qa_review.services.sanitizer import (
    clean_for_storage,
    clean_question,
    is_suspicious,
    sanitize,
    validate_content,
    validate_question,
)


@pytest.mark.parametrize(
    "text",
    ["DROP TABLE users", "please Select me", "a -- b", "one; two", "/* note */"],
)
def test_is_suspicious_flags_keywords_and_sequences(text: str) -> None:
    assert is_suspicious(text)


@pytest.mark.parametrize("text", ["How do closures work?", "natural selection", "", None])
def test_is_suspicious_ignores_plain_text(text) -> None:
    """Keywords only match as whole words."""
    assert not is_suspicious(text)


def test_sanitize_strips_quotes_terminators_and_keywords() -> None:
    cleaned = sanitize("Robert'); DROP TABLE students;--")
    assert "'" not in cleaned
    assert ";" not in cleaned
    assert "DROP" not in cleaned
    assert "Robert" in cleaned


def test_sanitize_never_raises_on_none() -> None:
    assert sanitize(None) == ""


def test_validate_content_empty_is_blocking() -> None:
    check = validate_content("   ", field="Answer")
    assert check.blocking
    assert check.problems == ("Answer cannot be empty",)


def test_validate_content_too_short() -> None:
    check = validate_content("abc")
    assert check.blocking
    assert "at least 5 characters" in check.problems[0]


def test_validate_content_short_and_suspicious_reports_both() -> None:
    check = validate_content("drop")
    assert check.blocking
    assert check.suspicious
    assert len(check.problems) == 2


def test_validate_content_accepts_ordinary_text() -> None:
    check = validate_content("A perfectly normal answer.")
    assert check.ok
    assert not check.blocking


def test_validate_question_rejects_long_title() -> None:
    check = validate_question("x" * 101, "A body long enough.")
    assert check.blocking
    assert any("100 characters" in problem for problem in check.problems)


def test_validate_question_missing_title() -> None:
    check = validate_question("", "A body long enough.")
    assert check.blocking
    assert "Title cannot be empty" in check.problems


def test_clean_for_storage_sanitizes_suspicious_text() -> None:
    clean = clean_for_storage("Try SELECT here please", field="Answer")
    assert "SELECT" not in clean.text
    assert clean.warnings == ["Answer contains suspicious content"]


def test_clean_for_storage_raises_on_blank() -> None:
    with pytest.raises(ValidationError) as exc_info:
        clean_for_storage("", field="Review")
    assert exc_info.value.problems == ("Review cannot be empty",)


def test_clean_question_passes_clean_text_through() -> None:
    title, body = clean_question("Loops", "What is an off by one error?")
    assert title.text == "Loops"
    assert body.text == "What is an off by one error?"
    assert title.warnings == [] and body.warnings == []


def test_clean_for_storage_rejects_text_emptied_by_sanitizing() -> None:
    with pytest.raises(ValidationError) as exc_info:
        clean_for_storage("select union drop", field="Review")
    assert exc_info.value.problems == (
        "Review cannot be empty after removing suspicious content",
    )


def test_clean_for_storage_rejects_text_shortened_by_sanitizing() -> None:
    with pytest.raises(ValidationError) as exc_info:
        clean_for_storage("drop it;", field="Answer")
    assert exc_info.value.problems == (
        "Answer must be at least 5 characters after removing suspicious content",
    )


def test_clean_question_rejects_title_emptied_by_sanitizing() -> None:
    with pytest.raises(ValidationError) as exc_info:
        clean_question("DROP", "What is an off by one error?")
    assert exc_info.value.problems == ("Title cannot be empty after removing suspicious content",)
