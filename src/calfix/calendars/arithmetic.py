"""
calfix.calendars.arithmetic
---------------------------
The leap-rule parameterized solar calendar algorithm shared by Gregorian
and Julian (and, through them, every calendar that borrows their years).

A rule supplies the epoch, the leap predicate, the count of days before
a year, and the year decomposition used for decoding. Month arithmetic
is common: it treats March as the start of a 12-month cycle so the
running leap-day correction is monotonic within a year (Reingold &
Dershowitz, listings 2.17-2.23).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, Tuple, Type, TypeVar

from ..core.contracts import CommonDateCalendar, OrdinalCalendar
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.types import CommonDate, OrdinalDate

MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class LeapRule(Protocol):
    epoch: int

    def is_leap(self, year: int) -> bool: ...

    def valid_year(self, year: int) -> bool: ...

    def prior_elapsed_days(self, year: int) -> int:
        """Fixed day of the last day before the year starts."""
        ...

    def ordinal_from_day(self, day: int) -> OrdinalDate: ...


@dataclass(frozen=True)
class GregorianRule:
    """Every 4th year, except centuries not divisible by 400. Year 0 exists."""
    epoch: int = 1

    def is_leap(self, year: int) -> bool:
        return year % 4 == 0 and (year % 400) not in (100, 200, 300)

    def valid_year(self, year: int) -> bool:
        return True

    def prior_elapsed_days(self, year: int) -> int:
        y = year - 1
        return (self.epoch - 1) + 365 * y + y // 4 - y // 100 + y // 400

    def ordinal_from_day(self, day: int) -> OrdinalDate:
        d0 = day - self.epoch
        n400, d1 = divmod(d0, 146097)
        n100, d2 = divmod(d1, 36524)
        n4, d3 = divmod(d2, 1461)
        n1 = d3 // 365
        year = 400 * n400 + 100 * n100 + 4 * n4 + n1
        # Last day of a 400- or 4-year cycle: the decomposition lands one year late.
        if n100 == 4 or n1 == 4:
            return OrdinalDate(year, 366)
        return OrdinalDate(year + 1, d3 % 365 + 1)


@dataclass(frozen=True)
class JulianRule:
    """Every 4th year. No year 0: 1 BC is year -1 and is a leap year."""
    epoch: int = -1

    def is_leap(self, year: int) -> bool:
        if year > 0:
            return year % 4 == 0
        return year % 4 == 3

    def valid_year(self, year: int) -> bool:
        return year != 0

    def prior_elapsed_days(self, year: int) -> int:
        y = year + 1 if year < 0 else year
        return (self.epoch - 1) + 365 * (y - 1) + (y - 1) // 4

    def ordinal_from_day(self, day: int) -> OrdinalDate:
        approx = (4 * (day - self.epoch) + 1464) // 1461
        year = approx - 1 if approx <= 0 else approx
        return OrdinalDate(year, day - self.prior_elapsed_days(year))


# ============================================================
# Month arithmetic (rule independent)
# ============================================================

def month_length(month: int, leap: bool) -> int:
    if month == 2 and leap:
        return 29
    return MONTH_LENGTHS[month - 1]


def day_of_year(month: int, day: int, leap: bool) -> int:
    if month <= 2:
        correction = 0
    elif leap:
        correction = -1
    else:
        correction = -2
    return (367 * month - 362) // 12 + correction + day


def month_day_from_ordinal(day_of_year_: int, leap: bool) -> Tuple[int, int]:
    prior_days = day_of_year_ - 1
    march1 = day_of_year(3, 1, leap)
    if day_of_year_ < march1:
        correction = 0
    elif leap:
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = day_of_year_ - day_of_year(month, 1, leap) + 1
    return month, day


# ============================================================
# Shared calendar base
# ============================================================

A = TypeVar("A", bound="ArithmeticCalendar")


class ArithmeticCalendar(CommonDateCalendar, OrdinalCalendar):
    """Base for (year, month, day) calendars driven by a LeapRule."""
    RULE: ClassVar[LeapRule]

    @classmethod
    def epoch(cls) -> Fixed:
        return Fixed(cls.RULE.epoch)

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return cls.RULE.is_leap(year)

    @classmethod
    def prior_elapsed_days(cls, year: int) -> int:
        return cls.RULE.prior_elapsed_days(year)

    @classmethod
    def month_length(cls, year: int, month: int) -> int:
        return month_length(month, cls.is_leap(year))

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 366 if cls.is_leap(year) else 365

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not cls.RULE.valid_year(date.year):
            raise CalendarError(ErrorKind.INVALID_YEAR, f"{cls.__name__} {date}")
        if not (1 <= date.month <= 12):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"{cls.__name__} {date}")
        if not (1 <= date.day <= cls.month_length(date.year, date.month)):
            raise CalendarError(ErrorKind.INVALID_DAY, f"{cls.__name__} {date}")

    @classmethod
    def valid_ordinal(cls, ordinal: OrdinalDate) -> None:
        if not cls.RULE.valid_year(ordinal.year):
            raise CalendarError(ErrorKind.INVALID_YEAR, f"{cls.__name__} {ordinal}")
        super().valid_ordinal(ordinal)

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        return CommonDate(year, 12, 31)

    # ---------------------------------------------------------
    # Ordinal shape
    # ---------------------------------------------------------
    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        return cls.RULE.ordinal_from_day(fixed.day)

    def to_ordinal(self) -> OrdinalDate:
        leap = type(self).is_leap(self.year)
        return OrdinalDate(self.year, day_of_year(self.month, self.day, leap))

    @classmethod
    def from_ordinal_unchecked(cls: Type[A], ordinal: OrdinalDate) -> A:
        month, day = month_day_from_ordinal(ordinal.day_of_year, cls.is_leap(ordinal.year))
        return cls(ordinal.year, month, day)  # type: ignore[call-arg]

    # ---------------------------------------------------------
    # Timeline
    # ---------------------------------------------------------
    @classmethod
    def from_fixed(cls: Type[A], fixed: Fixed) -> A:
        return cls.from_ordinal_unchecked(cls.ordinal_from_fixed(fixed))

    @classmethod
    def day_number(cls, year: int, month: int, day: int) -> int:
        """Integer day index of a date, with no bounds check."""
        return cls.prior_elapsed_days(year) + day_of_year(month, day, cls.is_leap(year))

    def to_fixed(self) -> Fixed:
        return Fixed(type(self).day_number(self.year, self.month, self.day))
