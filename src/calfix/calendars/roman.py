"""
calfix.calendars.roman
----------------------
Roman day naming over Julian years: each day is counted down, inclusively,
to the next Kalends, Nones or Ides.

A smaller count is a later day, so ordering reverses on count. In a Julian
leap year, February 24 and 25 are both "the sixth day before the Kalends
of March"; the second of them (the bissextile day) sets the leap flag.

Reingold & Dershowitz, listings 3.5-3.14.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Tuple

from ..core.contracts import FixedConvertible
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import FIXED_MAX, FIXED_MIN, Fixed
from ..core.numeric import adjusted_remainder
from ..core.types import CommonDate
from .julian import Julian

YEAR_ROME_FOUNDED_JULIAN = -753


class RomanEvent(IntEnum):
    KALENDS = 1
    NONES = 2
    IDES = 3


def ides_of_month(month: int) -> int:
    return 15 if month in (3, 5, 7, 10) else 13


def nones_of_month(month: int) -> int:
    return ides_of_month(month) - 8


def julian_year_from_auc(year: int) -> int:
    """Julian year of a year ab urbe condita."""
    if 1 <= year <= -YEAR_ROME_FOUNDED_JULIAN:
        return year + YEAR_ROME_FOUNDED_JULIAN - 1
    return year + YEAR_ROME_FOUNDED_JULIAN


def auc_year_from_julian(year: int) -> int:
    if YEAR_ROME_FOUNDED_JULIAN <= year <= -1:
        return year - YEAR_ROME_FOUNDED_JULIAN + 1
    return year - YEAR_ROME_FOUNDED_JULIAN


@total_ordering
@dataclass(frozen=True)
class Roman(FixedConvertible):
    year: int
    month: int
    event: RomanEvent
    count: int
    leap: bool = False

    def _key(self) -> Tuple[int, int, int, int, bool]:
        return (self.year, self.month, int(self.event), -self.count, self.leap)

    def __lt__(self, other: "Roman") -> bool:
        if not isinstance(other, Roman):
            return NotImplemented
        return self._key() < other._key()

    @classmethod
    def epoch(cls) -> Fixed:
        return Julian.epoch()

    @classmethod
    def try_new(cls, year: int, month: int, event: RomanEvent, count: int, leap: bool = False) -> "Roman":
        if year == 0:
            raise CalendarError(ErrorKind.INVALID_YEAR, "Roman year 0")
        if not (1 <= month <= 12):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"Roman month {month}")
        if count < 1:
            raise CalendarError(ErrorKind.INVALID_DAY, f"Roman count {count}")
        try:
            event = RomanEvent(event)
        except ValueError:
            raise CalendarError(ErrorKind.INVALID_DAY, f"Roman event {event!r}") from None
        candidate = cls(year, month, event, count, leap)
        day = cls.day_number(year, month, candidate.event, count, leap)
        if not (FIXED_MIN <= day <= FIXED_MAX):
            raise CalendarError(ErrorKind.OUT_OF_BOUNDS, f"{candidate}")
        # A name is valid exactly when it is the name of the day it denotes.
        if cls.from_fixed(Fixed(day)) != candidate:
            raise CalendarError(ErrorKind.INVALID_DAY, f"{candidate} names no day")
        return candidate

    def auc_year(self) -> int:
        return auc_year_from_julian(self.year)

    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    # ---------------------------------------------------------
    # Timeline
    # ---------------------------------------------------------
    @classmethod
    def day_number(cls, year: int, month: int, event: RomanEvent, count: int, leap: bool) -> int:
        if event == RomanEvent.KALENDS:
            event_day = 1
        elif event == RomanEvent.NONES:
            event_day = nones_of_month(month)
        else:
            event_day = ides_of_month(month)
        j = Julian.day_number(year, month, event_day)
        bissextile_span = (
            Julian.is_leap(year)
            and month == 3
            and event == RomanEvent.KALENDS
            and 6 <= count <= 16
        )
        return j - count + (0 if bissextile_span else 1) + (1 if leap else 0)

    def to_fixed(self) -> Fixed:
        return Fixed(Roman.day_number(self.year, self.month, self.event, self.count, self.leap))

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "Roman":
        j = Julian.from_fixed(fixed)
        year, month, day = j.year, j.month, j.day
        month1 = adjusted_remainder(month + 1, 12)
        if month1 != 1:
            year1 = year
        elif year != -1:
            year1 = year + 1
        else:
            year1 = 1

        if day == 1:
            return cls(year, month, RomanEvent.KALENDS, 1)
        nones = nones_of_month(month)
        if day <= nones:
            return cls(year, month, RomanEvent.NONES, nones - day + 1)
        ides = ides_of_month(month)
        if day <= ides:
            return cls(year, month, RomanEvent.IDES, ides - day + 1)
        if month != 2 or not Julian.is_leap(year):
            kalends1 = cls.day_number(year1, month1, RomanEvent.KALENDS, 1, False)
            return cls(year1, month1, RomanEvent.KALENDS, kalends1 - fixed.day + 1)
        if day < 25:
            return cls(year, 3, RomanEvent.KALENDS, 30 - day)
        return cls(year, 3, RomanEvent.KALENDS, 31 - day, day == 25)

    def to_julian_date(self) -> CommonDate:
        return Julian.from_fixed(self.to_fixed()).to_common_date()
