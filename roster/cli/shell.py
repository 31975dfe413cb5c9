"""
Interactive roster shell.

Reads one command per line until `quit`, `exit` or end of input, and
redraws the roster after every command.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console

from .render import HELP_TEXT, render_session
from .session import RosterSession

logger = logging.getLogger(__name__)

PROMPT = "roster> "
QUIT_COMMANDS = {"quit", "exit"}


def run_shell(
    session: RosterSession,
    console: Console,
    read_line: Optional[Callable[[str], str]] = None,
) -> int:
    """
    Run the interactive loop.

    Args:
        session: Roster session to drive
        console: Where the screen is drawn
        read_line: Prompt function (defaults to console.input)

    Returns:
        Exit code (always 0; bad input is reported, never fatal)
    """
    if read_line is None:
        read_line = console.input

    console.print("Roster Ranker — type 'help' for commands.")
    render_session(console, session)

    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = line.strip().lower()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command == "help":
            console.print(HELP_TEXT, markup=False)
            continue

        feedback = session.execute(line)
        render_session(console, session, feedback)

    logger.debug("Shell closed with %d students", len(session.store))
    return 0
