"""
Core Domain Objects for the Roster Ranker.

Every stored student is a StudentRecord produced by the validator.
Records are immutable: corrections require removal and re-addition.

Domain Objects:
    StudentRecord  — A validated student with a name and score
    Direction      — Ranking order (low-to-high or high-to-low)
    RankingResult  — An ephemeral ordering plus sort statistics
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Union


Score = Union[int, float]


# =============================================================================
# ERROR TAXONOMY
# =============================================================================

class RosterError(Exception):
    """Base class for every recoverable roster failure."""


class ValidationErrorKind(Enum):
    """
    Reasons raw input can be refused.

    EMPTY_NAME:    name is missing or only whitespace
    NOT_A_NUMBER:  score does not coerce to a finite number
    OUT_OF_RANGE:  score is outside [0, 100]
    """
    EMPTY_NAME = "empty_name"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


class ValidationError(RosterError):
    """Raised when raw input cannot become a StudentRecord."""

    def __init__(self, kind: ValidationErrorKind, message: str, value: Any = None):
        self.kind = kind
        self.message = message
        self.value = value
        super().__init__(f"[{kind.value}] {message}")


class NotFoundError(RosterError):
    """Raised when a removal targets an id that is not in the roster."""

    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"No student with id '{student_id}'")


class DuplicateIdError(RosterError):
    """Raised when a record with an already stored id is appended."""

    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student id '{student_id}' is already in the roster")


# =============================================================================
# STUDENT RECORD
# =============================================================================

@dataclass(frozen=True)
class StudentRecord:
    """
    A validated student.

    Only roster.validation builds these for the store, which guarantees
    a non-empty trimmed name and a score inside [0, 100].
    """
    id: str
    name: str
    score: Score
    created_at: datetime

    def display_score(self) -> str:
        """Score without a trailing '.0' for whole numbers."""
        if isinstance(self.score, float) and self.score.is_integer():
            return str(int(self.score))
        return str(self.score)


# =============================================================================
# DIRECTION
# =============================================================================

class Direction(Enum):
    """
    Ranking order.

    ASCENDING:  low score first
    DESCENDING: high score first
    """
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def label(self) -> str:
        """Human-readable order, as shown next to the order toggle."""
        if self is Direction.ASCENDING:
            return "Low → High"
        return "High → Low"

    def toggled(self) -> Direction:
        if self is Direction.ASCENDING:
            return Direction.DESCENDING
        return Direction.ASCENDING

    @classmethod
    def parse(cls, value: Union[Direction, str]) -> Direction:
        """
        Accept a Direction or its string value ("asc" / "desc").

        Raises:
            ValueError: If the value names no direction
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown direction: {value!r} (expected 'asc' or 'desc')"
            )


DEFAULT_DIRECTION = Direction.DESCENDING


# =============================================================================
# RANKING RESULT
# =============================================================================

@dataclass(frozen=True)
class RankingResult:
    """
    An ordering of the roster by score plus sort statistics.

    Ephemeral: recomputed on demand and never stored in the roster.
    """
    records: tuple[StudentRecord, ...]
    direction: Direction
    passes: int = 0
    swaps: int = 0

    @property
    def total(self) -> int:
        return len(self.records)

    def is_empty(self) -> bool:
        return not self.records
