"""
calfix.calendars.coptic
-----------------------
Coptic and Ethiopic calendars: twelve 30-day months and a short 13th
month of 5 days (6 in a leap year). Every 4th year is leap, counting
year 3 as the first. Year 0 is allowed.

Both share one arithmetic and differ only in epoch (Julian 284-08-29 for
Coptic, Julian 8-08-29 for Ethiopic).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Type, TypeVar

from ..core.contracts import CommonDateCalendar, OrdinalCalendar
from ..core.derive import quarter_of_month
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.types import CommonDate, OrdinalDate
from .julian import Julian

EPAGOMENE = 13


class CopticMonth(IntEnum):
    THOOUT = 1
    PAOPE = 2
    ATHOR = 3
    KOIAK = 4
    TOBE = 5
    MESHIR = 6
    PAREMOTEP = 7
    PARMOUTE = 8
    PASHONS = 9
    PAONE = 10
    EPEP = 11
    MESORE = 12
    EPAGOMENE = 13


class EthiopicMonth(IntEnum):
    MASKARAM = 1
    TEQEMT = 2
    HEDAR = 3
    TAKHSAS = 4
    TER = 5
    YAKATIT = 6
    MAGABIT = 7
    MIYAZYA = 8
    GENBOT = 9
    SANE = 10
    HAMLE = 11
    NAHASE = 12
    PAGUEMEN = 13


A = TypeVar("A", bound="AlexandrianCalendar")


class AlexandrianCalendar(CommonDateCalendar, OrdinalCalendar):
    """Shared 30-day-month arithmetic; concrete classes fix EPOCH_JULIAN."""
    EPOCH_JULIAN: ClassVar[CommonDate]

    @classmethod
    def epoch(cls) -> Fixed:
        return Julian.from_common_date_unchecked(cls.EPOCH_JULIAN).to_fixed()

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return year % 4 == 3

    @classmethod
    def month_length(cls, year: int, month: int) -> int:
        if month == EPAGOMENE:
            return 6 if cls.is_leap(year) else 5
        return 30

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 366 if cls.is_leap(year) else 365

    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (1 <= date.month <= EPAGOMENE):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"{cls.__name__} {date}")
        if not (1 <= date.day <= cls.month_length(date.year, date.month)):
            raise CalendarError(ErrorKind.INVALID_DAY, f"{cls.__name__} {date}")

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        return CommonDate(year, EPAGOMENE, cls.month_length(year, EPAGOMENE))

    def quarter(self) -> int:
        return quarter_of_month(self.month, intercalary=self.month == EPAGOMENE)

    # ---------------------------------------------------------
    # Ordinal shape
    # ---------------------------------------------------------
    @classmethod
    def prior_elapsed_days(cls, year: int) -> int:
        return cls.epoch().day - 1 + 365 * (year - 1) + year // 4

    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        year = (4 * (fixed.day - cls.epoch().day) + 1463) // 1461
        return OrdinalDate(year, fixed.day - cls.prior_elapsed_days(year))

    def to_ordinal(self) -> OrdinalDate:
        return OrdinalDate(self.year, 30 * (self.month - 1) + self.day)

    @classmethod
    def from_ordinal_unchecked(cls: Type[A], ordinal: OrdinalDate) -> A:
        month = (ordinal.day_of_year - 1) // 30 + 1
        day = ordinal.day_of_year - 30 * (month - 1)
        return cls(ordinal.year, month, day)  # type: ignore[call-arg]

    @classmethod
    def from_fixed(cls: Type[A], fixed: Fixed) -> A:
        return cls.from_ordinal_unchecked(cls.ordinal_from_fixed(fixed))

    def to_fixed(self) -> Fixed:
        return Fixed(type(self).prior_elapsed_days(self.year) + self.to_ordinal().day_of_year)


@dataclass(frozen=True, order=True)
class Coptic(AlexandrianCalendar):
    year: int
    month: int
    day: int

    EPOCH_JULIAN: ClassVar[CommonDate] = CommonDate(284, 8, 29)


@dataclass(frozen=True, order=True)
class Ethiopic(AlexandrianCalendar):
    year: int
    month: int
    day: int

    EPOCH_JULIAN: ClassVar[CommonDate] = CommonDate(8, 8, 29)
