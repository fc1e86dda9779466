"""
calfix.calendars.cotsworth
--------------------------
Moses Cotsworth's International Fixed Calendar, as used by Eastman Kodak:
thirteen 28-day months with "Sol" between June and July. Year Day (13/29)
ends every year; Leap Day (6/29) follows June in Gregorian leap years.
Neither belongs to a week, so every month starts on a Sunday.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..core.contracts import CommonDateCalendar, OrdinalCalendar, Perennial
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.numeric import adjusted_remainder
from ..core.types import CommonDate, OrdinalDate
from ..cycles import Weekday
from .gregorian import Gregorian

# Day of year of Leap Day in a leap year.
LEAP_DAY_ORDINAL = 6 * 28 + 1


class CotsworthMonth(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    SOL = 7
    JULY = 8
    AUGUST = 9
    SEPTEMBER = 10
    OCTOBER = 11
    NOVEMBER = 12
    DECEMBER = 13


class CotsworthComplementaryDay(IntEnum):
    YEAR_DAY = 1
    LEAP_DAY = 2


@dataclass(frozen=True, order=True)
class Cotsworth(Perennial, CommonDateCalendar, OrdinalCalendar):
    year: int
    month: int
    day: int

    @classmethod
    def epoch(cls) -> Fixed:
        return Gregorian.epoch()

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return Gregorian.is_leap(year)

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return Gregorian.days_in_year(year)

    # ---------------------------------------------------------
    # Perennial
    # ---------------------------------------------------------
    def complementary(self) -> Optional[CotsworthComplementaryDay]:
        if self.day == 29 and self.month == CotsworthMonth.DECEMBER:
            return CotsworthComplementaryDay.YEAR_DAY
        if self.day == 29 and self.month == CotsworthMonth.JUNE:
            return CotsworthComplementaryDay.LEAP_DAY
        return None

    @classmethod
    def complementary_count(cls, year: int) -> int:
        return 2 if cls.is_leap(year) else 1

    def weekday(self) -> Optional[Weekday]:
        if self.complementary() is not None:
            return None
        return Weekday((self.day - 1) % 7)

    def quarter(self) -> int:
        extra = self.complementary()
        if extra == CotsworthComplementaryDay.YEAR_DAY:
            return 4
        if extra == CotsworthComplementaryDay.LEAP_DAY:
            return 2
        return (self.try_week_of_year() - 1) // 13 + 1

    # ---------------------------------------------------------
    # Common date contract
    # ---------------------------------------------------------
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (1 <= date.month <= 13):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"Cotsworth {date}")
        if not (1 <= date.day <= 29):
            raise CalendarError(ErrorKind.INVALID_DAY, f"Cotsworth {date}")
        if date.day == 29 and not (
            date.month == 13 or (date.month == 6 and cls.is_leap(date.year))
        ):
            raise CalendarError(ErrorKind.INVALID_DAY, f"Cotsworth {date}")

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        return CommonDate(year, CotsworthMonth.DECEMBER, 29)

    # ---------------------------------------------------------
    # Ordinal shape and timeline
    # ---------------------------------------------------------
    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        return Gregorian.ordinal_from_fixed(fixed)

    def to_ordinal(self) -> OrdinalDate:
        doy = 28 * (self.month - 1) + self.day
        if self.month > CotsworthMonth.JUNE and type(self).is_leap(self.year):
            doy += 1
        return OrdinalDate(self.year, doy)

    @classmethod
    def from_ordinal_unchecked(cls, ordinal: OrdinalDate) -> "Cotsworth":
        doy, leap = ordinal.day_of_year, cls.is_leap(ordinal.year)
        if doy == 365 + int(leap):
            return cls(ordinal.year, 13, 29)
        if leap and doy == LEAP_DAY_ORDINAL:
            return cls(ordinal.year, 6, 29)
        if leap and doy > LEAP_DAY_ORDINAL:
            doy -= 1
        return cls(ordinal.year, (doy - 1) // 28 + 1, adjusted_remainder(doy, 28))

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "Cotsworth":
        return cls.from_ordinal_unchecked(cls.ordinal_from_fixed(fixed))

    def to_fixed(self) -> Fixed:
        return Fixed(Gregorian.prior_elapsed_days(self.year) + self.to_ordinal().day_of_year)
