"""
calfix.calendars.tranquility
----------------------------
Jeff Siggins' Tranquility calendar (OMNI, July 1989).

Years count from the Apollo 11 landing at 20:18:01.2 on Gregorian
1969-07-20. That day is Moon Landing Day, a pseudo-year 0 of one day
that never repeats. Year 1 A.T. starts the next day; years before it are
negative (B.T.) with no year 0 between them.

Each year is thirteen 28-day months followed by Armstrong Day on the
anniversary (every year but -1). In leap years Aldrin Day is inserted
after the 27th of Hippocrates, on Gregorian February 29. The complementary
days have month 0 and day 0 (Moon Landing), 1 (Armstrong) or 2 (Aldrin).

Year lengths follow the Gregorian year holding each Tranquility
February, so the ordinal day is found by shifting the Gregorian one and
wrapping by the Gregorian year length.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from fractions import Fraction
from functools import total_ordering
from typing import Optional

from ..clock import ClockTime, TimeOfDay
from ..core.contracts import CommonDateCalendar, OrdinalCalendar, Perennial
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.numeric import adjusted_remainder
from ..core.types import CommonDate, OrdinalDate
from ..cycles import Weekday
from .gregorian import Gregorian
from .moment import CalendarMoment

TRANQUILITY_EPOCH_GREGORIAN = CommonDate(1969, 7, 20)
TRANQUILITY_EPOCH_CLOCK = ClockTime(20, 18, Fraction(6, 5))
NON_MONTH = 0


class TranquilityMonth(IntEnum):
    ARCHIMEDES = 1
    BRAHE = 2
    COPERNICUS = 3
    DARWIN = 4
    EINSTEIN = 5
    FARADAY = 6
    GALILEO = 7
    HIPPOCRATES = 8
    IMHOTEP = 9
    JUNG = 10
    KEPLER = 11
    LAVOISIER = 12
    MENDEL = 13


class TranquilityComplementaryDay(IntEnum):
    MOON_LANDING_DAY = 0
    ARMSTRONG_DAY = 1
    ALDRIN_DAY = 2


# Ordinal day of Aldrin Day in a leap year (after 27 Hippocrates).
AFTER_H27 = TranquilityMonth.HIPPOCRATES * 28
# Gregorian day-of-year + shift = Tranquility day-of-year, modulo the Gregorian year.
ORDINAL_SHIFT = TranquilityMonth.FARADAY * 28 - 4


@total_ordering
@dataclass(frozen=True)
class Tranquility(Perennial, CommonDateCalendar, OrdinalCalendar):
    year: int
    month: int
    day: int

    def __lt__(self, other: "Tranquility") -> bool:
        if not isinstance(other, Tranquility):
            return NotImplemented
        a, b = self.to_ordinal(), other.to_ordinal()
        return (a.year, a.day_of_year) < (b.year, b.day_of_year)

    @classmethod
    def epoch(cls) -> Fixed:
        g = TRANQUILITY_EPOCH_GREGORIAN
        day = Gregorian.day_number(g.year, g.month, g.day)
        return Fixed(day, TimeOfDay.from_clock_unchecked(TRANQUILITY_EPOCH_CLOCK).value)

    @classmethod
    def is_leap(cls, year: int) -> bool:
        base = TRANQUILITY_EPOCH_GREGORIAN.year
        if year > 0:
            return Gregorian.is_leap(year + base)
        if year < 0:
            return Gregorian.is_leap(year + base + 1)
        return False

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 366 if cls.is_leap(year) else 365

    @classmethod
    def prior_elapsed_days(cls, year: int) -> int:
        if year == 0:
            return cls.epoch().day - 1
        y = year + 1 if year < 0 else year
        g = TRANQUILITY_EPOCH_GREGORIAN
        return Gregorian.day_number(y - 1 + g.year, g.month, g.day)

    # ---------------------------------------------------------
    # Perennial
    # ---------------------------------------------------------
    def complementary(self) -> Optional[TranquilityComplementaryDay]:
        if self.month == NON_MONTH:
            return TranquilityComplementaryDay(self.day)
        return None

    @classmethod
    def complementary_count(cls, year: int) -> int:
        if cls.is_leap(year):
            return 2
        if year == -1:
            return 0
        return 1

    def weekday(self) -> Optional[Weekday]:
        if self.complementary() is not None:
            return None
        return Weekday((self.day + 4) % 7)

    def quarter(self) -> int:
        extra = self.complementary()
        if extra == TranquilityComplementaryDay.ALDRIN_DAY:
            return 3
        if extra is not None:
            return 4
        return (self.try_week_of_year() - 1) // 13 + 1

    # ---------------------------------------------------------
    # Common date contract
    # ---------------------------------------------------------
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (0 <= date.month <= 13):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"Tranquility {date}")
        if date.month == NON_MONTH:
            if date.day == 0 and date.year == 0:
                return
            if date.day == 1 and date.year not in (0, -1):
                return
            if date.day == 2 and date.year != 0 and cls.is_leap(date.year):
                return
            raise CalendarError(ErrorKind.INVALID_DAY, f"Tranquility {date}")
        if not (1 <= date.day <= 28):
            raise CalendarError(ErrorKind.INVALID_DAY, f"Tranquility {date}")
        if date.year == 0:
            raise CalendarError(ErrorKind.INVALID_YEAR, f"Tranquility {date}")

    @classmethod
    def in_effective_bounds(cls, date: CommonDate) -> bool:
        # Complementary days sort by ordinal, not by their month number.
        value = cls.from_common_date_unchecked(date)
        return cls.effective_min() <= value <= cls.effective_max()

    @classmethod
    def year_start_date(cls, year: int) -> CommonDate:
        if year == 0:
            return CommonDate(0, NON_MONTH, TranquilityComplementaryDay.MOON_LANDING_DAY)
        return CommonDate(year, 1, 1)

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        if year == 0:
            return CommonDate(0, NON_MONTH, TranquilityComplementaryDay.MOON_LANDING_DAY)
        if year == -1:
            return CommonDate(-1, TranquilityMonth.MENDEL, 28)
        return CommonDate(year, NON_MONTH, TranquilityComplementaryDay.ARMSTRONG_DAY)

    # ---------------------------------------------------------
    # Ordinal shape
    # ---------------------------------------------------------
    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        g = Gregorian.ordinal_from_fixed(fixed)
        doy = adjusted_remainder(g.day_of_year + ORDINAL_SHIFT, Gregorian.days_in_year(g.year))
        year = g.year - TRANQUILITY_EPOCH_GREGORIAN.year + (1 if doy <= ORDINAL_SHIFT else 0)
        if year < 1:
            year -= 1
        if year == -1 and doy == 365:
            return OrdinalDate(0, 1)
        return OrdinalDate(year, doy)

    def to_ordinal(self) -> OrdinalDate:
        extra = self.complementary()
        if extra == TranquilityComplementaryDay.MOON_LANDING_DAY:
            doy = 1
        elif extra == TranquilityComplementaryDay.ARMSTRONG_DAY:
            doy = 364 + type(self).complementary_count(self.year)
        elif extra == TranquilityComplementaryDay.ALDRIN_DAY:
            doy = AFTER_H27
        else:
            doy = (self.month - 1) * 28 + self.day
            if doy >= AFTER_H27 and type(self).complementary_count(self.year) == 2:
                doy += 1
        return OrdinalDate(self.year, doy)

    @classmethod
    def from_ordinal_unchecked(cls, ordinal: OrdinalDate) -> "Tranquility":
        year, doy = ordinal.year, ordinal.day_of_year
        leap = cls.is_leap(year)
        if year == 0:
            return cls(0, NON_MONTH, TranquilityComplementaryDay.MOON_LANDING_DAY)
        if (doy == 365 and not leap) or (doy == 366 and leap):
            return cls(year, NON_MONTH, TranquilityComplementaryDay.ARMSTRONG_DAY)
        if doy == AFTER_H27 and leap:
            return cls(year, NON_MONTH, TranquilityComplementaryDay.ALDRIN_DAY)
        if leap and doy > AFTER_H27:
            doy -= 1
        return cls(year, (doy - 1) // 28 + 1, adjusted_remainder(doy, 28))

    # ---------------------------------------------------------
    # Timeline
    # ---------------------------------------------------------
    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "Tranquility":
        return cls.from_ordinal_unchecked(cls.ordinal_from_fixed(fixed))

    def to_fixed(self) -> Fixed:
        ordinal = self.to_ordinal()
        return Fixed(type(self).prior_elapsed_days(ordinal.year) + ordinal.day_of_year)


@dataclass(frozen=True, order=True)
class TranquilityMoment(CalendarMoment):
    CALENDAR = Tranquility

    def is_after_tranquility(self) -> bool:
        """True once the landing instant has passed."""
        if self.date.year == 0:
            return self.time > TimeOfDay.from_clock_unchecked(TRANQUILITY_EPOCH_CLOCK)
        return self.date.year > 0
