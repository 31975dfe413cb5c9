"""
Roster Ranker CLI.

Commands:
    roster rank --student NAME=SCORE ...   — Rank students in one go
    roster shell                            — Interactive roster session

Nothing is persisted: each invocation starts with an empty roster.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..domain import DEFAULT_DIRECTION, Direction
from .render import render_session
from .session import TOO_FEW_TO_SORT_MESSAGE, Feedback, RosterSession
from .shell import run_shell

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# LOGGING
# =============================================================================

def configure_logging(verbose: bool = False) -> None:
    """Send logs to stderr so they never mix with rendered tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_student(value: str) -> tuple[str, str]:
    """
    Split a NAME=SCORE argument.

    The last '=' separates the score, so names may contain '='.
    Validation of the parts happens later, in the session.
    """
    name, sep, score = value.rpartition("=")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"expected NAME=SCORE, got {value!r}"
        )
    return name, score


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_rank(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    """Add every --student, then print the roster and its ranking."""
    console = console or Console()
    session = RosterSession(direction=args.order)

    failures = 0
    for name, score in args.students or []:
        feedback = session.submit(name, score)
        if not feedback.ok:
            failures += 1
            console.print(Text.assemble(
                (f"Skipped {name!r}: ", "bold red"),
                feedback.message,
            ))

    feedback = None
    if session.sort() is None:
        feedback = Feedback.error(TOO_FEW_TO_SORT_MESSAGE)
    render_session(console, session, feedback, show_ids=False)

    return 1 if failures else 0


def cmd_shell(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    """Start an interactive session."""
    console = console or Console()
    session = RosterSession(direction=args.order)
    return run_shell(session, console)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Roster Ranker — rank students by score",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    order_choices = [d.value for d in Direction]

    # Rank command
    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank students given on the command line",
    )
    rank_parser.add_argument(
        "-s", "--student",
        dest="students",
        action="append",
        type=parse_student,
        metavar="NAME=SCORE",
        help="Student to add (repeatable)",
    )
    rank_parser.add_argument(
        "--order",
        choices=order_choices,
        default=DEFAULT_DIRECTION.value,
        help="Ranking order (default: desc, high to low)",
    )
    rank_parser.set_defaults(func=cmd_rank)

    # Shell command
    shell_parser = subparsers.add_parser(
        "shell",
        help="Start an interactive roster session",
    )
    shell_parser.add_argument(
        "--order",
        choices=order_choices,
        default=DEFAULT_DIRECTION.value,
        help="Initial ranking order (default: desc, high to low)",
    )
    shell_parser.set_defaults(func=cmd_shell)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
