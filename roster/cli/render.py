"""
Terminal rendering for the Roster Ranker.

Builds rich renderables from session state. Rendering is idempotent:
the whole screen is rebuilt from the store and the displayed ranking
every time, so nothing here keeps state.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..domain import Direction, RankingResult, StudentRecord
from ..ranking import generate_summary
from .session import Feedback, RosterSession


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

EMPTY_ROSTER_TEXT = "No students added yet."
EMPTY_RANKING_TEXT = "Sorting pending…"

FEEDBACK_STYLES = {
    "success": "green",
    "error": "bold red",
}

HELP_TEXT = """\
Commands:
  add <name> <score>       Add a student (score 0-100)
  remove <id|row>          Remove a student
  clear                    Remove every student
  sort                     Rank students by score
  order [asc|desc|toggle]  Change the ranking order
  reset                    Clear the entry form
  list                     Show the roster
  help                     Show this help
  quit                     Leave the shell"""


# =============================================================================
# TABLES
# =============================================================================

def build_roster_table(
    students: Sequence[StudentRecord],
    show_ids: bool = True,
) -> Table:
    """Roster in insertion order, with an empty-state row."""
    table = Table(title="Students", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Score", justify="right")
    if show_ids:
        table.add_column("ID", style="dim", no_wrap=True)

    if not students:
        table.add_row("", Text(EMPTY_ROSTER_TEXT, style="italic dim"))
        return table

    for index, student in enumerate(students, start=1):
        row = [str(index), Text(student.name), student.display_score()]
        if show_ids:
            row.append(student.id)
        table.add_row(*row)

    return table


def build_ranking_table(ranking: Optional[RankingResult]) -> Table:
    """Ranked students, or the pending state when nothing is sorted."""
    table = Table(title="Ranking", box=box.SIMPLE_HEAVY)
    table.add_column("Rank", justify="right")
    table.add_column("Name")
    table.add_column("Score", justify="right")

    if ranking is None or ranking.is_empty():
        table.add_row("", Text(EMPTY_RANKING_TEXT, style="italic dim"))
        return table

    for position, student in enumerate(ranking.records, start=1):
        table.add_row(
            Text(str(position), style="bold cyan"),
            Text(student.name),
            student.display_score(),
        )

    return table


def build_summary_panel(ranking: RankingResult) -> Panel:
    """Order, passes, swaps and total under the ranking."""
    lines = Text()
    for index, (label, value) in enumerate(generate_summary(ranking)):
        if index:
            lines.append("\n")
        lines.append(f"{label}: ", style="bold")
        lines.append(value)
    return Panel(lines, title="Sort Summary", expand=False)


def format_feedback(feedback: Feedback) -> Text:
    return Text(feedback.message, style=FEEDBACK_STYLES[feedback.kind.value])


def format_order_label(direction: Direction) -> Text:
    return Text.assemble(("Order: ", "bold"), direction.label)


# =============================================================================
# SCREENS
# =============================================================================

def build_screen(session: RosterSession, show_ids: bool = True) -> Group:
    """Everything the roster page shows, rebuilt from scratch."""
    parts = [
        build_roster_table(session.students, show_ids=show_ids),
        format_order_label(session.direction),
        build_ranking_table(session.ranking),
    ]
    if session.ranking is not None:
        parts.append(build_summary_panel(session.ranking))
    return Group(*parts)


def render_session(
    console: Console,
    session: RosterSession,
    feedback: Optional[Feedback] = None,
    show_ids: bool = True,
) -> None:
    """Print the feedback banner (if any) followed by the full screen."""
    if feedback is not None:
        console.print(format_feedback(feedback))
    console.print(build_screen(session, show_ids=show_ids))
