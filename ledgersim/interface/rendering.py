"""Mini README: Plain-text rendering helpers for the console.

Structure:
    * format_choices - numbered list lines (``[1] ...``).
    * format_schedule - the ``Day | Interest | Balance |`` table.
"""

from __future__ import annotations

from typing import Iterable, List

from ..interest import InterestEntry

SCHEDULE_HEADER = "Day | Interest | Balance |"


def format_choices(choices: Iterable[object]) -> List[str]:
    """Number choices from one, matching what ``parse_choice`` expects."""

    return [f"[{position}] {choice}" for position, choice in enumerate(choices, start=1)]


def format_schedule(schedule: Iterable[InterestEntry]) -> List[str]:
    """Render a schedule with two-decimal interest and balance columns."""

    lines = [SCHEDULE_HEADER]
    for entry in schedule:
        lines.append(f"{entry.day:<3} | {entry.interest:<8.2f} | {entry.balance:<7.2f} |")
    return lines
