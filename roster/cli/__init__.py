# CLI package for the Roster Ranker
"""
Terminal interface for the Roster Ranker.

Commands:
    roster rank   — Rank students given as NAME=SCORE arguments
    roster shell  — Interactive session (add, remove, clear, sort, order)
"""
