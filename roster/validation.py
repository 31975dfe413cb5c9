"""
Validation for the Roster Ranker.

Raw form input (a name and a score, usually both strings) is turned into
a StudentRecord here or refused with a typed ValidationError. This is the
only path that builds records for the store.

Acceptance requirements (ALL must be true):
1. Name is non-empty after trimming whitespace
2. Score coerces to a finite number
3. Score lies in the closed range [SCORE_MIN, SCORE_MAX]
"""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from .domain import (
    Score,
    StudentRecord,
    ValidationError,
    ValidationErrorKind,
)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

SCORE_MIN = 0
SCORE_MAX = 100

EMPTY_NAME_MESSAGE = "Please enter the student's name."
NOT_A_NUMBER_MESSAGE = "Score must be a number."
OUT_OF_RANGE_MESSAGE = f"Score must be between {SCORE_MIN} and {SCORE_MAX}."


# =============================================================================
# ID AND TIMESTAMP SOURCES
# =============================================================================

def create_student_id() -> str:
    """Generate a unique student ID."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# FIELD VALIDATION
# =============================================================================

def normalize_name(raw_name: Optional[str]) -> str:
    """
    Trim a raw name.

    Raises:
        ValidationError: If nothing is left after trimming (EMPTY_NAME)
    """
    name = (raw_name or "").strip()
    if not name:
        raise ValidationError(
            ValidationErrorKind.EMPTY_NAME,
            EMPTY_NAME_MESSAGE,
            raw_name,
        )
    return name


def coerce_score(raw_score: Any) -> Score:
    """
    Coerce a raw score to a finite number.

    Whole numbers come back as int ("85" -> 85, 85.0 -> 85),
    everything else as float ("85.5" -> 85.5).

    Raises:
        ValidationError: If the value is not a finite number (NOT_A_NUMBER)
    """
    # bool is an int subclass but never a score
    if raw_score is None or isinstance(raw_score, bool):
        raise ValidationError(
            ValidationErrorKind.NOT_A_NUMBER,
            NOT_A_NUMBER_MESSAGE,
            raw_score,
        )

    if isinstance(raw_score, int):
        return raw_score

    # float() also takes digit separators ("5_0"); form input never does
    if isinstance(raw_score, str) and "_" in raw_score:
        raise ValidationError(
            ValidationErrorKind.NOT_A_NUMBER,
            NOT_A_NUMBER_MESSAGE,
            raw_score,
        )

    try:
        value = float(raw_score.strip() if isinstance(raw_score, str) else raw_score)
    except (TypeError, ValueError):
        raise ValidationError(
            ValidationErrorKind.NOT_A_NUMBER,
            NOT_A_NUMBER_MESSAGE,
            raw_score,
        )

    if not math.isfinite(value):
        raise ValidationError(
            ValidationErrorKind.NOT_A_NUMBER,
            NOT_A_NUMBER_MESSAGE,
            raw_score,
        )

    if value.is_integer():
        return int(value)
    return value


def validate_score_range(
    score: Score,
    min_score: Score = SCORE_MIN,
    max_score: Score = SCORE_MAX,
) -> None:
    """
    Validate that a score is inside the allowed range.

    Raises:
        ValidationError: If score is outside [min_score, max_score] (OUT_OF_RANGE)
    """
    if score < min_score or score > max_score:
        raise ValidationError(
            ValidationErrorKind.OUT_OF_RANGE,
            OUT_OF_RANGE_MESSAGE,
            score,
        )


# =============================================================================
# FULL STUDENT VALIDATION
# =============================================================================

def validate_student(
    raw_name: Optional[str],
    raw_score: Any,
    id_factory: Callable[[], str] = create_student_id,
    clock: Callable[[], datetime] = utc_now,
) -> StudentRecord:
    """
    Turn raw input into a StudentRecord.

    Checks run in form order: name first, then score.

    Args:
        raw_name: Name as typed by the user
        raw_score: Score as typed (string) or already numeric
        id_factory: Source of fresh ids (defaults to UUID4)
        clock: Source of creation timestamps (defaults to UTC now)

    Returns:
        StudentRecord with trimmed name and numeric score

    Raises:
        ValidationError: EMPTY_NAME, NOT_A_NUMBER or OUT_OF_RANGE
    """
    name = normalize_name(raw_name)
    score = coerce_score(raw_score)
    validate_score_range(score)

    return StudentRecord(
        id=id_factory(),
        name=name,
        score=score,
        created_at=clock(),
    )
