from __future__ import annotations

from typing import Optional

from sentiment_analyzer.sentiment_types import ErrorKind, ValidationOutcome

MAX_TEXT_LENGTH = 500


def validate_text(text: Optional[str]) -> ValidationOutcome:
    """
    Precondition check on user text.

    Rules:
    - None/empty/whitespace-only -> EMPTY_TEXT "Text cannot be empty"
    - longer than MAX_TEXT_LENGTH -> TEXT_TOO_LONG "Text is too long (n/500 characters)"
    """
    if not text or not text.strip():
        return ValidationOutcome(
            is_valid=False,
            error_message="Text cannot be empty",
            error_kind=ErrorKind.EMPTY_TEXT,
        )

    if len(text) > MAX_TEXT_LENGTH:
        return ValidationOutcome(
            is_valid=False,
            error_message=f"Text is too long ({len(text)}/{MAX_TEXT_LENGTH} characters)",
            error_kind=ErrorKind.TEXT_TOO_LONG,
        )

    return ValidationOutcome(is_valid=True)


def validate_api_key(api_key: Optional[str]) -> ValidationOutcome:
    if not api_key or not api_key.strip():
        return ValidationOutcome(
            is_valid=False,
            error_message="API key cannot be empty",
            error_kind=ErrorKind.MISSING_CREDENTIAL,
        )
    return ValidationOutcome(is_valid=True)
