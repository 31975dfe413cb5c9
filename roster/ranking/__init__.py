# Ranking package for the Roster Ranker
"""
Deterministic score ranking.

Provides an adjacent-exchange sort that reports how much work it did
(passes and swaps), plus human-readable summaries of the result.
"""

from .bubble import rank
from .summary import generate_short_summary, generate_summary

__all__ = [
    "rank",
    "generate_summary",
    "generate_short_summary",
]
