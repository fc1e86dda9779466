from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CommonDate:
    """(year, month, day) interchange shape. Carries no validity of its own."""
    year: int
    month: int
    day: int


@dataclass(frozen=True, order=True)
class OrdinalDate:
    """(year, day-of-year) interchange shape; day_of_year is 1-based."""
    year: int
    day_of_year: int
