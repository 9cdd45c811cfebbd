"""Mini README: Daily compounding interest projections.

Structure:
    * InterestEntry - one row of a schedule (day, interest, running balance).
    * project - build a schedule for a balance, horizon and annual rate.
    * InterestProjector - binds the session's fixed annual rate.

The daily rate is the annual rate divided by 365 regardless of leap years.
Each day's interest is charged on the running balance, which already
includes every earlier day's accrual.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import List

from ..currency.conversion import ensure_finite
from ..errors import InvalidAmount
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DAYS_PER_YEAR = 365


@dataclass(frozen=True, slots=True)
class InterestEntry:
    """Interest earned on a single simulated day."""

    day: int
    interest: float
    balance: float


def project(starting_balance: float, day_count: int, annual_rate: float) -> List[InterestEntry]:
    """Return the compounding schedule for ``day_count`` days."""

    if isinstance(day_count, bool) or not isinstance(day_count, Integral):
        raise InvalidAmount(f"Day count must be a whole number, got {day_count!r}.")
    if day_count < 0:
        raise InvalidAmount(f"Day count cannot be negative, got {day_count}.")
    running = ensure_finite(starting_balance, "Starting balance")
    daily_rate = ensure_finite(annual_rate, "Annual rate") / DAYS_PER_YEAR

    schedule: List[InterestEntry] = []
    for day in range(1, int(day_count) + 1):
        interest = running * daily_rate
        running += interest
        schedule.append(InterestEntry(day=day, interest=interest, balance=running))
    LOGGER.debug(
        "Projected %s days from %s at %s annual", day_count, starting_balance, annual_rate
    )
    return schedule


class InterestProjector:
    """Project schedules using one fixed annual rate."""

    def __init__(self, annual_rate: float) -> None:
        self.annual_rate = ensure_finite(annual_rate, "Annual rate")

    @property
    def daily_rate(self) -> float:
        return self.annual_rate / DAYS_PER_YEAR

    def project(self, starting_balance: float, day_count: int) -> List[InterestEntry]:
        return project(starting_balance, day_count, self.annual_rate)
