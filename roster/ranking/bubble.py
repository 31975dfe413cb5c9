"""
Adjacent-exchange (bubble) sort with statistics.

Core principle:
    The ranking is reproducible step by step. Given the same roster and
    direction, the output order, pass count and swap count are identical.

Algorithm:
    Sweep the working copy left to right, exchanging each adjacent pair
    that is out of order for the requested direction. Comparisons are
    strict, so equal scores never move past each other (stable). A sweep
    with no exchanges ends the sort; it is still counted as a pass.
"""

from __future__ import annotations

from typing import Callable, Sequence, Union

from ..domain import DEFAULT_DIRECTION, Direction, RankingResult, StudentRecord


OutOfOrder = Callable[[StudentRecord, StudentRecord], bool]


def _ascending_out_of_order(left: StudentRecord, right: StudentRecord) -> bool:
    return left.score > right.score


def _descending_out_of_order(left: StudentRecord, right: StudentRecord) -> bool:
    return left.score < right.score


OUT_OF_ORDER: dict[Direction, OutOfOrder] = {
    Direction.ASCENDING: _ascending_out_of_order,
    Direction.DESCENDING: _descending_out_of_order,
}


def rank(
    records: Sequence[StudentRecord],
    direction: Union[Direction, str] = DEFAULT_DIRECTION,
) -> RankingResult:
    """
    Rank records by score.

    The input sequence is copied and never mutated.

    Args:
        records: Roster snapshot in insertion order
        direction: Direction or "asc" / "desc" (defaults to high-to-low)

    Returns:
        RankingResult with the reordered records, passes and swaps

    Raises:
        ValueError: If direction names no known order
    """
    direction = Direction.parse(direction)
    out_of_order = OUT_OF_ORDER[direction]

    working = list(records)
    n = len(working)
    passes = 0
    swaps = 0

    for i in range(n - 1):
        passes += 1
        swapped = False
        for j in range(n - i - 1):
            if out_of_order(working[j], working[j + 1]):
                working[j], working[j + 1] = working[j + 1], working[j]
                swapped = True
                swaps += 1
        if not swapped:
            break

    return RankingResult(
        records=tuple(working),
        direction=direction,
        passes=passes,
        swaps=swaps,
    )
