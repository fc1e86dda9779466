"""
calfix.calendars.iso
--------------------
ISO 8601 week dates: (year, week, weekday). Week 1 is the week holding
the year's first Thursday, weeks start on Monday, and a "long" year has
53 weeks. Day numbers run Monday = 1 .. Sunday = 7.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from ..core.contracts import FixedConvertible
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.numeric import adjusted_remainder
from ..cycles import Weekday
from .gregorian import Gregorian


@total_ordering
@dataclass(frozen=True)
class ISO(FixedConvertible):
    year: int
    week: int
    day: Weekday

    def _key(self) -> Tuple[int, int, int]:
        return (self.year, self.week, self.day_num())

    def __lt__(self, other: "ISO") -> bool:
        if not isinstance(other, ISO):
            return NotImplemented
        return self._key() < other._key()

    @classmethod
    def try_new(cls, year: int, week: int, day: Weekday) -> "ISO":
        if week < 1 or week > 53 or (week == 53 and not cls.is_leap(year)):
            raise CalendarError(ErrorKind.INVALID_WEEK, f"ISO {year}-W{week:02d}")
        return cls(year, week, Weekday(day))

    @classmethod
    def new_year(cls, year: int) -> "ISO":
        return cls(year, 1, Weekday.MONDAY)

    @classmethod
    def is_leap(cls, year: int) -> bool:
        """True for long (53-week) years: Jan 1 or Dec 31 falls on a Thursday."""
        jan1 = Weekday.from_unbounded(Gregorian.day_number(year, 1, 1))
        dec31 = Weekday.from_unbounded(Gregorian.day_number(year, 12, 31))
        return Weekday.THURSDAY in (jan1, dec31)

    def day_num(self) -> int:
        return adjusted_remainder(int(self.day), 7)

    def quarter(self) -> int:
        return (self.week - 1) // 14 + 1

    @classmethod
    def epoch(cls) -> Fixed:
        return Gregorian.epoch()

    # ---------------------------------------------------------
    # Timeline
    # ---------------------------------------------------------
    @classmethod
    def day_number(cls, year: int, week: int, day_num: int) -> int:
        # Sundays counted from Dec 28 of the prior year, which always lies in its last week.
        dec28 = Gregorian.day_number(year - 1, 12, 28)
        return Weekday.SUNDAY.before_day(dec28) + 7 * week + day_num

    def to_fixed(self) -> Fixed:
        return Fixed(type(self).day_number(self.year, self.week, self.day_num()))

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "ISO":
        date = fixed.day
        approx = Gregorian.RULE.ordinal_from_day(date - 3).year
        year = approx + 1 if date >= cls.day_number(approx + 1, 1, 1) else approx
        week = (date - cls.day_number(year, 1, 1)) // 7 + 1
        return cls(year, week, Weekday.from_unbounded(date))
