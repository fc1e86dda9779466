"""
calfix.core.contracts
---------------------
The capability sets every calendar implements to join the shared timeline.

Protocols describe the boundary; the base classes supply the generic
derivations (effective bounds, validated construction, year start/end,
quarter, week of year, nth weekday) so that a concrete calendar only
provides its epoch, its two conversions and its validity predicate.

Data flows one way: calendars convert to and from Fixed, never directly
to each other.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Optional, Protocol, Tuple, Type, TypeVar

from .derive import perennial_week_of_year, quarter_of_month, week_of_year
from .errors import CalendarError, ErrorKind
from .fixed import Fixed
from .types import CommonDate, OrdinalDate

if TYPE_CHECKING:
    from ..cycles import Weekday

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FixedConvertible")


class ConversionContract(Protocol):
    @classmethod
    def epoch(cls) -> Fixed:
        """The Fixed value of the calendar's first day."""
        ...

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "ConversionContract":
        """Total over the effective range; the result need not pass validation."""
        ...

    def to_fixed(self) -> Fixed:
        """Total over valid values."""
        ...


class CommonDateContract(ConversionContract, Protocol):
    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        """Raise CalendarError if the fields do not name a day of this calendar."""
        ...

    @classmethod
    def try_from_common_date(cls, date: CommonDate) -> "CommonDateContract": ...

    def to_common_date(self) -> CommonDate: ...

    @classmethod
    def year_start_date(cls, year: int) -> CommonDate: ...

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate: ...


# ============================================================
# Base classes
# ============================================================

class FixedConvertible:
    """Epoch, both conversions, and bounds derived from the timeline's own."""

    @classmethod
    def epoch(cls) -> Fixed:
        raise NotImplementedError

    @classmethod
    def from_fixed(cls: Type[T], fixed: Fixed) -> T:
        raise NotImplementedError

    def to_fixed(self) -> Fixed:
        raise NotImplementedError

    @classmethod
    @lru_cache(maxsize=None)
    def _bounds(cls: Type[T]) -> Tuple[T, T]:
        lo = cls.from_fixed(Fixed.effective_min())
        hi = cls.from_fixed(Fixed.effective_max())
        logger.debug("effective bounds for %s: %r .. %r", cls.__name__, lo, hi)
        return lo, hi

    @classmethod
    def effective_min(cls: Type[T]) -> T:
        return cls._bounds()[0]

    @classmethod
    def effective_max(cls: Type[T]) -> T:
        return cls._bounds()[1]

    def day_of_week(self) -> "Weekday":
        from ..cycles import Weekday
        return Weekday.from_fixed(self.to_fixed())


C = TypeVar("C", bound="CommonDateCalendar")


class CommonDateCalendar(FixedConvertible):
    """
    Calendars whose values are (year, month, day) triples.

    Subclasses are frozen dataclasses with those three fields and provide
    valid_month_day() and year_end_date(). Direct construction skips
    validation; try_from_common_date() is the checked path.
    """
    year: int
    month: int
    day: int

    @classmethod
    def valid_month_day(cls, date: CommonDate) -> None:
        raise NotImplementedError

    @classmethod
    def is_valid(cls, date: CommonDate) -> bool:
        try:
            cls.valid_month_day(date)
        except CalendarError:
            return False
        return True

    @classmethod
    def from_common_date_unchecked(cls: Type[C], date: CommonDate) -> C:
        return cls(date.year, date.month, date.day)  # type: ignore[call-arg]

    def to_common_date(self) -> CommonDate:
        return CommonDate(self.year, self.month, self.day)

    @classmethod
    def in_effective_bounds(cls, date: CommonDate) -> bool:
        lo = cls.effective_min().to_common_date()
        hi = cls.effective_max().to_common_date()
        return lo <= date <= hi

    @classmethod
    def try_from_common_date(cls: Type[C], date: CommonDate) -> C:
        cls.valid_month_day(date)
        if not cls.in_effective_bounds(date):
            raise CalendarError(ErrorKind.OUT_OF_BOUNDS, f"{cls.__name__} {date}")
        return cls.from_common_date_unchecked(date)

    @classmethod
    def try_new(cls: Type[C], year: int, month: int, day: int) -> C:
        return cls.try_from_common_date(CommonDate(year, month, day))

    @classmethod
    def year_start_date(cls, year: int) -> CommonDate:
        return CommonDate(year, 1, 1)

    @classmethod
    def year_end_date(cls, year: int) -> CommonDate:
        raise NotImplementedError

    @classmethod
    def year_start(cls: Type[C], year: int) -> C:
        return cls.try_from_common_date(cls.year_start_date(year))

    @classmethod
    def year_end(cls: Type[C], year: int) -> C:
        return cls.try_from_common_date(cls.year_end_date(year))

    # ---------------------------------------------------------
    # Generic derivations
    # ---------------------------------------------------------
    def quarter(self) -> int:
        return quarter_of_month(self.month)

    def week_of_year(self) -> int:
        start = type(self).year_start(self.year).to_fixed()
        return week_of_year(self.to_fixed().day, start.day)

    def nth_kday(self: C, n: int, k: "Weekday") -> C:
        """The n-th weekday k on or after this date (n > 0), or on or before it (n < 0)."""
        return type(self).from_fixed(k.nth_kday(n, self.to_fixed()))

    def first_kday(self: C, k: "Weekday") -> C:
        return self.nth_kday(1, k)

    def last_kday(self: C, k: "Weekday") -> C:
        return self.nth_kday(-1, k)


class OrdinalCalendar:
    """Calendars that also expose the (year, day-of-year) shape."""

    @classmethod
    def days_in_year(cls, year: int) -> int:
        raise NotImplementedError

    @classmethod
    def valid_ordinal(cls, ordinal: OrdinalDate) -> None:
        if not (1 <= ordinal.day_of_year <= cls.days_in_year(ordinal.year)):
            raise CalendarError(ErrorKind.INVALID_DAY_OF_YEAR, f"{cls.__name__} {ordinal}")

    @classmethod
    def ordinal_from_fixed(cls, fixed: Fixed) -> OrdinalDate:
        raise NotImplementedError

    def to_ordinal(self) -> OrdinalDate:
        raise NotImplementedError

    @classmethod
    def from_ordinal_unchecked(cls, ordinal: OrdinalDate):
        raise NotImplementedError

    @classmethod
    def try_from_ordinal(cls, ordinal: OrdinalDate):
        cls.valid_ordinal(ordinal)
        return cls.from_ordinal_unchecked(ordinal)


class Perennial:
    """
    Calendars whose months hold whole weeks, so every date falls on the
    same weekday each year, plus complementary days outside the week.
    Exactly one of complementary() and weekday() is not None.
    """
    DAYS_PER_WEEK = 7
    WEEKS_PER_MONTH = 4

    month: int
    day: int

    def complementary(self) -> Optional[int]:
        raise NotImplementedError

    @classmethod
    def complementary_count(cls, year: int) -> int:
        raise NotImplementedError

    def weekday(self):
        raise NotImplementedError

    def try_week_of_year(self) -> Optional[int]:
        if self.complementary() is not None:
            return None
        return perennial_week_of_year(self.month, self.day, self.DAYS_PER_WEEK, self.WEEKS_PER_MONTH)
