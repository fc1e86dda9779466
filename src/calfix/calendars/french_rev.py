"""
calfix.calendars.french_rev
---------------------------
Arithmetic French Revolutionary calendar (Romme's proposed rule).

Twelve 30-day months of three 10-day décades, then 5 or 6 sansculottides
(stored as month 13). Leap years follow 4/100/400/4000 rules. Two
variants exist:

    FrenchRevArith            leap rule applied to year + 1, which lines
                              up with the historical leap years 3, 7, 11
    FrenchRevArithUnadjusted  leap rule applied to the year itself; a
                              few historically dated events land one day
                              off under this variant, which is expected

Reingold & Dershowitz, listings 17.8-17.11.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Type, TypeVar

from ..core.contracts import CommonDateCalendar, Perennial
from ..core.derive import quarter_of_month
from ..core.errors import CalendarError, ErrorKind
from ..core.fixed import Fixed
from ..core.numeric import adjusted_remainder
from ..core.types import CommonDate
from .gregorian import Gregorian

FRENCH_EPOCH_GREGORIAN = CommonDate(1792, 9, 22)
NON_MONTH = 13


class FrenchRevMonth(IntEnum):
    VENDEMIAIRE = 1
    BRUMAIRE = 2
    FRIMAIRE = 3
    NIVOSE = 4
    PLUVIOSE = 5
    VENTOSE = 6
    GERMINAL = 7
    FLOREAL = 8
    PRAIRIAL = 9
    MESSIDOR = 10
    THERMIDOR = 11
    FRUCTIDOR = 12


class FrenchRevWeekday(IntEnum):
    PRIMIDI = 1
    DUODI = 2
    TRIDI = 3
    QUARTIDI = 4
    QUINTIDI = 5
    SEXTIDI = 6
    SEPTIDI = 7
    OCTIDI = 8
    NONIDI = 9
    DECADI = 10


class Sansculottide(IntEnum):
    VERTU = 1
    GENIE = 2
    TRAVAIL = 3
    OPINION = 4
    RECOMPENSE = 5
    REVOLUTION = 6


F = TypeVar("F", bound="FrenchRevolutionary")


class FrenchRevolutionary(Perennial, CommonDateCalendar):
    """Shared arithmetic; LEAP_SHIFT selects the variant."""
    LEAP_SHIFT: ClassVar[int]
    DAYS_PER_WEEK = 10
    WEEKS_PER_MONTH = 3

    @classmethod
    def is_adjusted(cls) -> bool:
        return cls.LEAP_SHIFT == 1

    @classmethod
    def epoch(cls) -> Fixed:
        return Gregorian.from_common_date_unchecked(FRENCH_EPOCH_GREGORIAN).to_fixed()

    @classmethod
    def is_leap(cls, year: int) -> bool:
        y = year + cls.LEAP_SHIFT
        return y % 4 == 0 and (y % 400) not in (100, 200, 300) and y % 4000 != 0

    # ---------------------------------------------------------
    # Perennial
    # ---------------------------------------------------------
    def complementary(self) -> Optional[Sansculottide]:
        if self.month == NON_MONTH:
            return Sansculottide(self.day)
        return None

    @classmethod
    def complementary_count(cls, year: int) -> int:
        return 6 if cls.is_leap(year) else 5

    def weekday(self) -> Optional[FrenchRevWeekday]:
        if self.month == NON_MONTH:
            return None
        return FrenchRevWeekday(adjusted_remainder(self.day, 10))

    # ---------------------------------------------------------
    # Common date contract
    # ---------------------------------------------------------
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        if not (1 <= date.month <= NON_MONTH):
            raise CalendarError(ErrorKind.INVALID_MONTH, f"{cls.__name__} {date}")
        last = cls.complementary_count(date.year) if date.month == NON_MONTH else 30
        if not (1 <= date.day <= last):
            raise CalendarError(ErrorKind.INVALID_DAY, f"{cls.__name__} {date}")

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        return CommonDate(year, NON_MONTH, cls.complementary_count(year))

    def quarter(self) -> int:
        return quarter_of_month(self.month, intercalary=self.month == NON_MONTH)

    # ---------------------------------------------------------
    # Timeline
    # ---------------------------------------------------------
    @classmethod
    def _day_number(cls, year: int, month: int, day: int) -> int:
        y = year + cls.LEAP_SHIFT - 1
        leap_days = y // 4 - y // 100 + y // 400 - y // 4000
        return cls.epoch().day - 1 + 365 * (year - 1) + leap_days + 30 * (month - 1) + day

    def to_fixed(self) -> Fixed:
        return Fixed(type(self)._day_number(self.year, self.month, self.day))

    @classmethod
    def from_fixed(cls: Type[F], fixed: Fixed) -> F:
        date = fixed.day
        approx = (4000 * (date - cls.epoch().day + 2)) // 1460969 + 1
        year = approx - 1 if date < cls._day_number(approx, 1, 1) else approx
        year_start = cls._day_number(year, 1, 1)
        month = 1 + (date - year_start) // 30
        day = 1 + date - cls._day_number(year, month, 1)
        return cls(year, month, day)  # type: ignore[call-arg]


@dataclass(frozen=True, order=True)
class FrenchRevArith(FrenchRevolutionary):
    year: int
    month: int
    day: int

    LEAP_SHIFT: ClassVar[int] = 1


@dataclass(frozen=True, order=True)
class FrenchRevArithUnadjusted(FrenchRevolutionary):
    year: int
    month: int
    day: int

    LEAP_SHIFT: ClassVar[int] = 0
