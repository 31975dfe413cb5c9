"""
Roster Session — the presentation adapter.

Holds what one open roster page holds: the roster itself, the chosen
order, and the ranking currently on display. User gestures arrive as
method calls (or as command lines via `execute`) and come back as a
Feedback banner.

Display rules carried over from the page:
    - Any roster change discards the displayed ranking.
    - Sorting needs at least MIN_STUDENTS_TO_SORT students; below that
      the ranking is cleared and the engine is not called.
    - Changing the order re-sorts right away (or clears the ranking when
      there are too few students).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from ..domain import (
    DEFAULT_DIRECTION,
    Direction,
    NotFoundError,
    RankingResult,
    StudentRecord,
    ValidationError,
)
from ..ranking import generate_short_summary, rank
from ..store import RosterStore
from ..validation import validate_student

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

MIN_STUDENTS_TO_SORT = 2
TOO_FEW_TO_SORT_MESSAGE = f"Add at least {MIN_STUDENTS_TO_SORT} students to sort."


# =============================================================================
# FEEDBACK
# =============================================================================

class FeedbackKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Feedback:
    """A short message shown to the user after an action."""
    message: str
    kind: FeedbackKind = FeedbackKind.SUCCESS

    @property
    def ok(self) -> bool:
        return self.kind is FeedbackKind.SUCCESS

    @classmethod
    def error(cls, message: str) -> Feedback:
        return cls(message, FeedbackKind.ERROR)


# =============================================================================
# SESSION
# =============================================================================

class RosterSession:
    """
    One interactive roster: store, order and displayed ranking.
    """

    def __init__(
        self,
        store: Optional[RosterStore] = None,
        direction: Union[Direction, str] = DEFAULT_DIRECTION,
    ) -> None:
        self.store = store if store is not None else RosterStore()
        self._direction = Direction.parse(direction)
        self._ranking: Optional[RankingResult] = None
        self._ranking_revision = -1

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def ranking(self) -> Optional[RankingResult]:
        """The ranking on display, or None if absent or stale."""
        if self._ranking is None:
            return None
        if self._ranking_revision != self.store.revision:
            return None
        return self._ranking

    @property
    def students(self) -> tuple[StudentRecord, ...]:
        return self.store.all()

    @property
    def can_sort(self) -> bool:
        return len(self.store) >= MIN_STUDENTS_TO_SORT

    @property
    def can_clear(self) -> bool:
        return not self.store.is_empty

    def clear_ranking(self) -> None:
        self._ranking = None
        self._ranking_revision = -1

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def submit(self, name: Optional[str], score: Any) -> Feedback:
        """Validate form input and add the student."""
        try:
            student = validate_student(name, score)
        except ValidationError as e:
            logger.warning("Rejected student input (%s): %r, %r", e.kind.value, name, score)
            return Feedback.error(e.message)

        self.store.append(student)
        self.clear_ranking()
        logger.info("Added student %s (%s)", student.name, student.id)
        return Feedback(f"Added {student.name} with score {student.display_score()}.")

    def remove(self, ref: str) -> Feedback:
        """
        Remove a student by id or by 1-based row number.
        """
        student_id = self.resolve_ref(ref)
        if student_id is None:
            return Feedback.error(f"No student matches '{ref}'.")

        try:
            removed = self.store.remove_by_id(student_id)
        except NotFoundError:
            return Feedback.error(f"No student matches '{ref}'.")

        self.clear_ranking()
        logger.info("Removed student %s (%s)", removed.name, removed.id)
        return Feedback(f"Removed {removed.name}.")

    def clear(self) -> Feedback:
        """Empty the roster."""
        if not self.can_clear:
            return Feedback.error("No students to clear.")

        count = len(self.store)
        self.store.clear()
        self.clear_ranking()
        logger.info("Cleared %d students", count)
        return Feedback("Student list cleared.")

    def sort(self) -> Optional[RankingResult]:
        """
        Rank the roster in the current order and put it on display.

        Returns None (and clears the display) when there are too few
        students to sort.
        """
        if not self.can_sort:
            self.clear_ranking()
            return None

        result = rank(self.store.all(), self._direction)
        self._ranking = result
        self._ranking_revision = self.store.revision
        logger.debug("Sorted roster: %s", generate_short_summary(result))
        return result

    def set_direction(self, direction: Union[Direction, str]) -> Direction:
        """Change the order and re-sort, as the order toggle does."""
        self._direction = Direction.parse(direction)
        self.sort()
        return self._direction

    def toggle_direction(self) -> Direction:
        return self.set_direction(self._direction.toggled())

    def reset_form(self) -> Feedback:
        return Feedback("Form cleared.")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def resolve_ref(self, ref: str) -> Optional[str]:
        """Map a row number or an id to a stored student id."""
        ref = ref.strip()
        if not ref:
            return None
        if self.store.get(ref) is not None:
            return ref
        if ref.isdigit():
            index = int(ref) - 1
            students = self.store.all()
            if 0 <= index < len(students):
                return students[index].id
        return None

    # -------------------------------------------------------------------------
    # Command lines
    # -------------------------------------------------------------------------

    def execute(self, line: str) -> Optional[Feedback]:
        """
        Run one command line.

        Commands:
            add <name...> <score>   add a student (name may contain spaces)
            remove <id|row>         remove a student
            clear                   remove every student
            sort                    rank the roster
            order [asc|desc|toggle] change the order (toggle if omitted)
            reset                   clear the entry form
            list                    show the roster (no feedback)

        Returns:
            Feedback for the action, or None when there is nothing to report
        """
        parts = line.split()
        if not parts:
            return None

        command, args = parts[0].lower(), parts[1:]
        logger.debug("Dispatching command %r with %d args", command, len(args))

        if command == "add":
            if not args:
                return self.submit("", "")
            if len(args) == 1:
                return self.submit(args[0], "")
            return self.submit(" ".join(args[:-1]), args[-1])

        if command == "remove":
            if not args:
                return Feedback.error("Usage: remove <id|row>")
            return self.remove(args[0])

        if command == "clear":
            return self.clear()

        if command == "sort":
            if self.sort() is None:
                return Feedback.error(TOO_FEW_TO_SORT_MESSAGE)
            return None

        if command == "order":
            choice = args[0].lower() if args else "toggle"
            if choice == "toggle":
                direction = self.toggle_direction()
            else:
                try:
                    direction = self.set_direction(choice)
                except ValueError:
                    return Feedback.error("Usage: order [asc|desc|toggle]")
            return Feedback(f"Order: {direction.label}")

        if command == "reset":
            return self.reset_form()

        if command == "list":
            return None

        return Feedback.error(f"Unknown command: {command}. Type 'help' for commands.")
