"""
calfix.calendars.symmetry
-------------------------
Symmetry454 and Symmetry010 leap-week calendars (Irvin L. Bromberg).

Every year is 52 or 53 whole weeks and starts on a Monday. Quarters hold
91 days; leap years append a 7-day 13th month ("Irvember"). Two month
schemes:

    454  4 + 5 + 4 weeks per quarter (28, 35, 28 days)
    010  30 + 31 + 30 days per quarter

and two leap cycles, each given by (C, L, K) with
is_leap(y) = (L*y + K) mod C < L:

    northward equinox  C=293, L=52, K=146
    north solstice     C=389, L=69, K=194

Decoding follows "Basic Symmetry454 and Symmetry010 Calendar Arithmetic"
step by step; in particular the year estimate divides by the mean year
in floating point, as that listing does.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Tuple, Type, TypeVar

from ..core.contracts import CommonDateCalendar
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.types import CommonDate
from .gregorian import Gregorian


class SymmetryMonth(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12
    IRVEMBER = 13


@dataclass(frozen=True)
class SymmetryParams:
    cycle: int      # C
    leaps: int      # L
    offset: int     # K

    def __post_init__(self) -> None:
        if self.cycle <= 0 or self.leaps <= 0:
            raise ValueError("cycle and leaps must be positive")
        if not (self.leaps < self.cycle):
            raise ValueError("Require leaps < cycle")
        if not (0 <= self.offset < self.cycle):
            raise ValueError("offset must be in 0..cycle-1")

    @property
    def mean_year(self) -> float:
        # 364 + 7L/C, written as 365 + (7L - C)/C to match the published constants
        return 365.0 + float(7 * self.leaps - self.cycle) / float(self.cycle)


NORTHWARD_EQUINOX = SymmetryParams(cycle=293, leaps=52, offset=146)
NORTH_SOLSTICE = SymmetryParams(cycle=389, leaps=69, offset=194)

S = TypeVar("S", bound="Symmetry")


class Symmetry(CommonDateCalendar):
    """Shared arithmetic; concrete variants fix PARAMS and SCHEME."""
    PARAMS: ClassVar[SymmetryParams]
    SCHEME: ClassVar[str]   # "454" or "010"

    year: int
    month: int
    day: int

    @classmethod
    def epoch(cls) -> Fixed:
        return Gregorian.epoch()

    @classmethod
    def is_leap(cls, year: int) -> bool:
        p = cls.PARAMS
        return (p.leaps * year + p.offset) % p.cycle < p.leaps

    @classmethod
    def new_year_day(cls, year: int, epoch: Optional[int] = None) -> int:
        p = cls.PARAMS
        if epoch is None:
            epoch = cls.epoch().day
        e = year - 1
        return epoch + 364 * e + 7 * ((p.leaps * e + p.offset) // p.cycle)

    @classmethod
    def days_before_month(cls, month: int) -> int:
        if cls.SCHEME == "454":
            return 28 * (month - 1) + 7 * (month // 3)
        return 30 * (month - 1) + month // 3

    @classmethod
    def days_in_month(cls, month: int) -> int:
        if month == 13:
            return 7
        if cls.SCHEME == "454":
            return 28 + 7 * ((month % 3) // 2)
        return 30 + (month % 3) // 2

    @classmethod
    def day_of_year_of(cls, month: int, day: int) -> int:
        return cls.days_before_month(month) + day

    @classmethod
    def year_from_fixed(cls, day: int) -> Tuple[int, int]:
        """(year, fixed day of its new year) for a fixed day."""
        epoch = cls.epoch().day
        year = math.ceil((day - epoch) / cls.PARAMS.mean_year)
        start = cls.new_year_day(year, epoch)
        if start < day:
            if day - start >= 364:
                next_start = cls.new_year_day(year + 1, epoch)
                if day >= next_start:
                    return year + 1, next_start
            return year, start
        if start > day:
            return year - 1, cls.new_year_day(year - 1, epoch)
        return year, start

    # ---------------------------------------------------------
    # Timeline
    # ---------------------------------------------------------
    @classmethod
    def from_fixed(cls: Type[S], fixed: Fixed) -> S:
        year, start = cls.year_from_fixed(fixed.day)
        day_of_year = fixed.day - start + 1
        week_of_year = _ceil_div(day_of_year, 7)
        quarter = _ceil_div(4 * week_of_year, 53)
        day_of_quarter = day_of_year - 91 * (quarter - 1)
        week_of_quarter = _ceil_div(day_of_quarter, 7)
        if cls.SCHEME == "454":
            month_of_quarter = _ceil_div(2 * week_of_quarter, 9)
        else:
            month_of_quarter = _ceil_div(2 * day_of_quarter, 61)
        month = 3 * (quarter - 1) + month_of_quarter
        day = day_of_year - cls.days_before_month(month)
        return cls(year, month, day)  # type: ignore[call-arg]

    def to_fixed(self) -> Fixed:
        cls = type(self)
        return Fixed(cls.new_year_day(self.year) + cls.day_of_year_of(self.month, self.day) - 1)

    # ---------------------------------------------------------
    # Common date contract
    # ---------------------------------------------------------
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (1 <= date.month <= 13):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"{cls.__name__} {date}")
        if date.month == 13 and not cls.is_leap(date.year):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"{cls.__name__} {date}: not a leap year")
        if not (1 <= date.day <= cls.days_in_month(date.month)):
            raise CalendarError(ErrorKind.INVALID_DAY, f"{cls.__name__} {date}")

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        if cls.is_leap(year):
            return CommonDate(year, 13, 7)
        return CommonDate(year, 12, cls.days_in_month(12))

    def day_of_year(self) -> int:
        return type(self).day_of_year_of(self.month, self.day)

    def quarter(self) -> int:
        if self.month == 13:
            return 4
        return (self.month - 1) // 3 + 1

    def week_of_year(self) -> int:
        return _ceil_div(self.day_of_year(), 7)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


@dataclass(frozen=True, order=True)
class Symmetry454(Symmetry):
    year: int
    month: int
    day: int

    PARAMS: ClassVar[SymmetryParams] = NORTHWARD_EQUINOX
    SCHEME: ClassVar[str] = "454"


@dataclass(frozen=True, order=True)
class Symmetry010(Symmetry):
    year: int
    month: int
    day: int

    PARAMS: ClassVar[SymmetryParams] = NORTHWARD_EQUINOX
    SCHEME: ClassVar[str] = "010"


@dataclass(frozen=True, order=True)
class Symmetry454Solstice(Symmetry):
    year: int
    month: int
    day: int

    PARAMS: ClassVar[SymmetryParams] = NORTH_SOLSTICE
    SCHEME: ClassVar[str] = "454"


@dataclass(frozen=True, order=True)
class Symmetry010Solstice(Symmetry):
    year: int
    month: int
    day: int

    PARAMS: ClassVar[SymmetryParams] = NORTH_SOLSTICE
    SCHEME: ClassVar[str] = "010"
