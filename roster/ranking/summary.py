"""
Plain-English summaries of a ranking.

These are VIEWS over a RankingResult; nothing here feeds back into
the sort.
"""

from __future__ import annotations

from ..domain import RankingResult


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def generate_summary(result: RankingResult) -> list[tuple[str, str]]:
    """
    Rows shown beneath the ranked table.

    Order, passes, swaps and the number of ranked students,
    as (label, value) pairs in display order.
    """
    return [
        ("Order", result.direction.label),
        ("Passes", str(result.passes)),
        ("Swaps", str(result.swaps)),
        ("Total Students", str(result.total)),
    ]


def generate_short_summary(result: RankingResult) -> str:
    """
    One-line summary for logs and quick scanning.
    """
    return (
        f"{result.direction.label}: "
        f"{_plural(result.passes, 'pass', 'passes')}, "
        f"{_plural(result.swaps, 'swap', 'swaps')}, "
        f"{_plural(result.total, 'student', 'students')}"
    )
