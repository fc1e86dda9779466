"""
calfix.calendars.olympiad
-------------------------
Olympiad year numbering: 4-year cycles counted from 776 BC, each with
years 1..4. This renames Julian years only; it has no days of its own.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import CalendarError, ErrorKind

OLYMPIAD_START = -776


@dataclass(frozen=True, order=True)
class Olympiad:
    cycle: int
    year: int

    def __post_init__(self) -> None:
        if not (1 <= self.year <= 4):
            raise CalendarError(ErrorKind.INVALID_YEAR, f"Olympiad year {self.year}")

    def to_julian_year(self) -> int:
        years = OLYMPIAD_START + 4 * (self.cycle - 1) + self.year - 1
        # No Julian year 0: 1 BC is -1.
        return years if years < 0 else years + 1

    @classmethod
    def from_julian_year(cls, year: int) -> "Olympiad":
        if year == 0:
            raise CalendarError(ErrorKind.INVALID_YEAR, "Julian year 0")
        years = year - OLYMPIAD_START - (0 if year < 0 else 1)
        cycle, offset = divmod(years, 4)
        return cls(cycle + 1, offset + 1)
