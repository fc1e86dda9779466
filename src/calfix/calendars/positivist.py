"""
calfix.calendars.positivist
---------------------------
Auguste Comte's Positivist calendar: thirteen 28-day months named for
historical figures, then the Festival of the Dead and, in leap years,
the Festival of Holy Women (stored as month 14).

Years count from 1789 (year 1 = Gregorian 1789). The leap rule is the
Gregorian rule applied to the Gregorian year; its historical source is
uncertain, so the offset is kept as a named, overridable constant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

from ..core.contracts import CommonDateCalendar, OrdinalCalendar, Perennial
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.numeric import adjusted_remainder
from ..core.types import CommonDate, OrdinalDate
from ..cycles import Weekday
from .gregorian import Gregorian

POSITIVIST_YEAR_OFFSET = 1789 - 1
NON_MONTH = 14


class PositivistMonth(IntEnum):
    MOSES = 1
    HOMER = 2
    ARISTOTLE = 3
    ARCHIMEDES = 4
    CAESAR = 5
    SAINT_PAUL = 6
    CHARLEMAGNE = 7
    DANTE = 8
    GUTENBERG = 9
    SHAKESPEARE = 10
    DESCARTES = 11
    FREDERICK = 12
    BICHAT = 13


class PositivistComplementaryDay(IntEnum):
    FESTIVAL_OF_THE_DEAD = 1
    FESTIVAL_OF_HOLY_WOMEN = 2


@dataclass(frozen=True, order=True)
class Positivist(Perennial, CommonDateCalendar, OrdinalCalendar):
    year: int
    month: int
    day: int

    YEAR_OFFSET: ClassVar[int] = POSITIVIST_YEAR_OFFSET

    @classmethod
    def epoch(cls) -> Fixed:
        return Gregorian(cls.YEAR_OFFSET + 1, 1, 1).to_fixed()

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return Gregorian.is_leap(year + cls.YEAR_OFFSET)

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 366 if cls.is_leap(year) else 365

    # ---------------------------------------------------------
    # Perennial
    # ---------------------------------------------------------
    def complementary(self) -> Optional[PositivistComplementaryDay]:
        if self.month == NON_MONTH:
            return PositivistComplementaryDay(self.day)
        return None

    @classmethod
    def complementary_count(cls, year: int) -> int:
        return 2 if cls.is_leap(year) else 1

    def weekday(self) -> Optional[Weekday]:
        if self.month == NON_MONTH:
            return None
        return Weekday(self.day % 7)

    def quarter(self) -> int:
        if self.month >= PositivistMonth.BICHAT:
            return 4
        return (self.month - 1) // 3 + 1

    # ---------------------------------------------------------
    # Common date contract
    # ---------------------------------------------------------
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (1 <= date.month <= NON_MONTH):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"Positivist {date}")
        last = cls.complementary_count(date.year) if date.month == NON_MONTH else 28
        if not (1 <= date.day <= last):
            raise CalendarError(ErrorKind.INVALID_DAY, f"Positivist {date}")

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        return CommonDate(year, NON_MONTH, cls.complementary_count(year))

    # ---------------------------------------------------------
    # Ordinal shape and timeline
    # ---------------------------------------------------------
    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        g = Gregorian.ordinal_from_fixed(fixed)
        return OrdinalDate(g.year - cls.YEAR_OFFSET, g.day_of_year)

    def to_ordinal(self) -> OrdinalDate:
        return OrdinalDate(self.year, 28 * (self.month - 1) + self.day)

    @classmethod
    def from_ordinal_unchecked(cls, ordinal: OrdinalDate) -> "Positivist":
        doy = ordinal.day_of_year
        return cls(ordinal.year, (doy - 1) // 28 + 1, adjusted_remainder(doy, 28))

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "Positivist":
        return cls.from_ordinal_unchecked(cls.ordinal_from_fixed(fixed))

    def to_fixed(self) -> Fixed:
        start = Gregorian.prior_elapsed_days(self.year + type(self).YEAR_OFFSET)
        return Fixed(start + self.to_ordinal().day_of_year)
