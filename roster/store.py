"""
In-memory Roster Store.

An ordered collection of StudentRecords that preserves insertion order.
Nothing is persisted; each RosterStore is independent, so a process can
hold as many rosters as it needs.

Every mutation bumps `revision`. Rankings are never recomputed here:
whoever displays a ranking compares the revision it was computed at with
the current one and discards it when they differ.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .domain import DuplicateIdError, NotFoundError, StudentRecord


class RosterStore:
    """Ordered, insertion-preserving collection of student records."""

    def __init__(self) -> None:
        self._records: list[StudentRecord] = []
        self._revision = 0

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def revision(self) -> int:
        """Mutation counter; changes whenever the contents change."""
        return self._revision

    @property
    def is_empty(self) -> bool:
        return not self._records

    def all(self) -> tuple[StudentRecord, ...]:
        """Snapshot of the roster in insertion order."""
        return tuple(self._records)

    def get(self, student_id: str) -> Optional[StudentRecord]:
        for record in self._records:
            if record.id == student_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self.all())

    def __contains__(self, student_id: object) -> bool:
        return any(record.id == student_id for record in self._records)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def append(self, record: StudentRecord) -> None:
        """
        Add a record to the end of the roster.

        Names may repeat; ids may not.

        Raises:
            DuplicateIdError: If a record with the same id is already stored
        """
        if record.id in self:
            raise DuplicateIdError(record.id)
        self._records.append(record)
        self._revision += 1

    def remove_by_id(self, student_id: str) -> StudentRecord:
        """
        Remove and return the record with the given id.

        Raises:
            NotFoundError: If no record has that id (roster unchanged)
        """
        for index, record in enumerate(self._records):
            if record.id == student_id:
                del self._records[index]
                self._revision += 1
                return record
        raise NotFoundError(student_id)

    def clear(self) -> None:
        """Remove every record. Clearing an empty roster changes nothing."""
        if not self._records:
            return
        self._records.clear()
        self._revision += 1
