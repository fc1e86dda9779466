"""
calfix.calendars.egyptian
-------------------------
The Egyptian "wandering year" and its Armenian descendant: twelve 30-day
months plus five epagomenal days (stored as month 13), no leap years.

Egyptian counts from the era of Nabonassar (JD 1448638), Armenian from
RD 201443 (Julian 552-07-11).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Type, TypeVar

from ..core.contracts import CommonDateCalendar, OrdinalCalendar
from ..core.derive import quarter_of_month
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.types import CommonDate, OrdinalDate
from ..day_count import JulianDay, RataDie

NON_MONTH = 13
EPAGOMENAL_DAYS = 5

NABONASSAR_ERA_JD = 1448638
ARMENIAN_EPOCH_RD = 201443


class EgyptianMonth(IntEnum):
    THOTH = 1
    PHAOPHI = 2
    ATHYR = 3
    CHOIAK = 4
    TYBI = 5
    MECHIR = 6
    PHAMENOTH = 7
    PHARMUTHI = 8
    PACHON = 9
    PAYNI = 10
    EPIPHI = 11
    MESORI = 12


class EgyptianDayUponTheYear(IntEnum):
    BIRTH_OF_OSIRIS = 1
    BIRTH_OF_HORUS = 2
    BIRTH_OF_SETH = 3
    BIRTH_OF_ISIS = 4
    BIRTH_OF_NEPHTHYS = 5


class ArmenianMonth(IntEnum):
    NAWASARDI = 1
    HORI = 2
    SAHMI = 3
    TRE = 4
    KALOCH = 5
    ARACH = 6
    MEHEKANI = 7
    AREG = 8
    AHEKANI = 9
    MARERI = 10
    MARGACH = 11
    HROTICH = 12


W = TypeVar("W", bound="WanderingYear")


class WanderingYear(CommonDateCalendar, OrdinalCalendar):
    """365-day years with no intercalation. Day counts start at the epoch's midnight."""

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return False

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 365

    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (1 <= date.month <= NON_MONTH):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"{cls.__name__} {date}")
        last = EPAGOMENAL_DAYS if date.month == NON_MONTH else 30
        if not (1 <= date.day <= last):
            raise CalendarError(ErrorKind.INVALID_DAY, f"{cls.__name__} {date}")

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        return CommonDate(year, NON_MONTH, EPAGOMENAL_DAYS)

    def quarter(self) -> int:
        return quarter_of_month(self.month, intercalary=self.month == NON_MONTH)

    def complementary(self) -> Optional[int]:
        """Epagomenal day number 1..5, or None inside a month."""
        return self.day if self.month == NON_MONTH else None

    @classmethod
    def complementary_count(cls, year: int) -> int:
        return EPAGOMENAL_DAYS

    # ---------------------------------------------------------
    # Ordinal shape and timeline
    # ---------------------------------------------------------
    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        years, doy = divmod(fixed.day - cls.epoch().day, 365)
        return OrdinalDate(years + 1, doy + 1)

    def to_ordinal(self) -> OrdinalDate:
        return OrdinalDate(self.year, 30 * (self.month - 1) + self.day)

    @classmethod
    def from_ordinal_unchecked(cls: Type[W], ordinal: OrdinalDate) -> W:
        month = (ordinal.day_of_year - 1) // 30 + 1
        day = ordinal.day_of_year - 30 * (month - 1)
        return cls(ordinal.year, month, day)  # type: ignore[call-arg]

    @classmethod
    def from_fixed(cls: Type[W], fixed: Fixed) -> W:
        return cls.from_ordinal_unchecked(cls.ordinal_from_fixed(fixed))

    def to_fixed(self) -> Fixed:
        days = 365 * (self.year - 1) + self.to_ordinal().day_of_year - 1
        return Fixed(type(self).epoch().day + days)


@dataclass(frozen=True, order=True)
class Egyptian(WanderingYear):
    year: int
    month: int
    day: int

    @classmethod
    def epoch(cls) -> Fixed:
        # JD counts from noon; the calendar day starts at the preceding midnight.
        return JulianDay(NABONASSAR_ERA_JD).to_fixed()


@dataclass(frozen=True, order=True)
class Armenian(WanderingYear):
    year: int
    month: int
    day: int

    @classmethod
    def epoch(cls) -> Fixed:
        return RataDie(ARMENIAN_EPOCH_RD).to_fixed()
