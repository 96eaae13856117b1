"""Input validation, sanitization and password strength scoring.

Everything here is pure and cheap; it runs before any engine sees the input.
The strength score is a heuristic for UI feedback, not a security guarantee.
"""

from __future__ import annotations

import re
from typing import Optional

from .config import CIPHERTEXT_MAX_CHARS, PLAINTEXT_MAX_CHARS
from .exceptions import EmptyInputError, ErrorKind, InputTooLargeError
from .models import InputKind, KeyStrengthScore, StrengthLevel

MIN_LENGTH = 8
STRONG_LENGTH = 12
VERY_STRONG_LENGTH = 16

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^a-zA-Z0-9]")
_ANGLE_BRACKETS = re.compile(r"[<>]")

_LIMITS = {
    InputKind.PLAINTEXT: PLAINTEXT_MAX_CHARS,
    InputKind.CIPHERTEXT: CIPHERTEXT_MAX_CHARS,
}

_LABELS = {
    InputKind.PLAINTEXT: "Plain text",
    InputKind.CIPHERTEXT: "Encrypted text",
}


def validate_input(text: str, kind: InputKind) -> Optional[ErrorKind]:
    """Return the reason ``text`` is rejected, or None when it is acceptable."""
    if not text.strip():
        return ErrorKind.EMPTY_INPUT
    if len(text) > _LIMITS[kind]:
        return ErrorKind.INPUT_TOO_LARGE
    return None


def describe_validation_error(kind: InputKind, error: ErrorKind) -> str:
    label = _LABELS[kind]
    if error is ErrorKind.EMPTY_INPUT:
        return f"{label} is required"
    if error is ErrorKind.INPUT_TOO_LARGE:
        return f"{label} is too long (max {_LIMITS[kind]:,} characters)"
    return f"{label} is invalid"


def require_valid_input(text: str, kind: InputKind) -> None:
    """Raise the typed validation error for ``text``, if any."""
    error = validate_input(text, kind)
    if error is None:
        return
    message = describe_validation_error(kind, error)
    if error is ErrorKind.EMPTY_INPUT:
        raise EmptyInputError(message)
    raise InputTooLargeError(message)


def sanitize_input(text: str) -> str:
    # Drops markup delimiters so echoed input cannot open a tag; also trims.
    return _ANGLE_BRACKETS.sub("", text).strip()


def _level_for(score: int) -> StrengthLevel:
    if score <= 2:
        return StrengthLevel.WEAK
    if score <= 4:
        return StrengthLevel.MEDIUM
    if score <= 6:
        return StrengthLevel.STRONG
    return StrengthLevel.VERY_STRONG


def score_key_strength(password: str) -> KeyStrengthScore:
    """
    Score a password from 0 to 7.

    Length gives +2 at 16 characters or more, +1 from 12 to 15. Each character
    class present (lowercase, uppercase, digit, symbol) gives +1. A password of
    16+ characters using all four classes gets one more point, which is the
    only way to reach Very Strong.
    """
    score = 0
    feedback = []
    length = len(password)

    if length < MIN_LENGTH:
        feedback.append(f"Minimum {MIN_LENGTH} characters required")
    elif length >= VERY_STRONG_LENGTH:
        score += 2
    elif length >= STRONG_LENGTH:
        score += 1

    classes = (
        (_LOWERCASE, "Add lowercase letters"),
        (_UPPERCASE, "Add uppercase letters"),
        (_DIGIT, "Add numbers"),
        (_SYMBOL, "Add special characters"),
    )
    present = 0
    for pattern, hint in classes:
        if pattern.search(password):
            score += 1
            present += 1
        else:
            feedback.append(hint)

    if length >= VERY_STRONG_LENGTH and present == len(classes):
        score += 1

    return KeyStrengthScore(
        score=score,
        feedback=", ".join(feedback) if feedback else "Good password strength",
        level=_level_for(score),
    )
