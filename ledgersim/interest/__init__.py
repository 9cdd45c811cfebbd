"""Mini README: Interest projection helpers.

Projections are reports only: they read a starting balance and return a
day-by-day schedule without touching any account.
"""

from .projector import DAYS_PER_YEAR, InterestEntry, InterestProjector, project

__all__ = ["DAYS_PER_YEAR", "InterestEntry", "InterestProjector", "project"]
