# Roster Ranker
# Core: validation, roster store, ranking engine

"""
Core invariant: every stored student passed validation, so every
stored score lies in [0, 100].

Rankings are computed from a snapshot of the roster and never
change the roster itself.
"""

from .domain import (
    Direction,
    DuplicateIdError,
    NotFoundError,
    RankingResult,
    RosterError,
    StudentRecord,
    ValidationError,
    ValidationErrorKind,
)
from .ranking import rank
from .store import RosterStore
from .validation import validate_student

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "DuplicateIdError",
    "NotFoundError",
    "RankingResult",
    "RosterError",
    "RosterStore",
    "StudentRecord",
    "ValidationError",
    "ValidationErrorKind",
    "rank",
    "validate_student",
]
