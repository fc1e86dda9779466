"""
calfix.cycles
-------------
Named day cycles that repeat without years: the 7-day week and the
42-day Akan cycle (6 prefixes x 7 stems).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .core.errors import CalendarError, ErrorKind
from .core.fixed import Fixed
from .core.numeric import adjusted_remainder, interval_modulus, modulus


class Weekday(IntEnum):
    # RD 1 (0001-01-01) is a Monday, so day mod 7 gives the weekday directly.
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_unbounded(cls, n: int) -> "Weekday":
        return cls(modulus(n, 7))

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "Weekday":
        return cls.from_unbounded(fixed.day)

    # ---------------------------------------------------------
    # Weekday searches (integer day indices)
    # ---------------------------------------------------------
    def on_or_before_day(self, day: int) -> int:
        return day - modulus(day - int(self), 7)

    def on_or_after_day(self, day: int) -> int:
        return self.on_or_before_day(day + 6)

    def nearest_day(self, day: int) -> int:
        return self.on_or_before_day(day + 3)

    def before_day(self, day: int) -> int:
        return self.on_or_before_day(day - 1)

    def after_day(self, day: int) -> int:
        return self.on_or_before_day(day + 7)

    # ---------------------------------------------------------
    # Weekday searches (checked, on the timeline)
    # ---------------------------------------------------------
    def on_or_before(self, date: Fixed) -> Fixed:
        return Fixed.new(self.on_or_before_day(date.day))

    def on_or_after(self, date: Fixed) -> Fixed:
        return Fixed.new(self.on_or_after_day(date.day))

    def nearest(self, date: Fixed) -> Fixed:
        return Fixed.new(self.nearest_day(date.day))

    def before(self, date: Fixed) -> Fixed:
        return Fixed.new(self.before_day(date.day))

    def after(self, date: Fixed) -> Fixed:
        return Fixed.new(self.after_day(date.day))

    def nth_kday(self, n: int, date: Fixed) -> Fixed:
        """
        The n-th occurrence of this weekday on or after date (n > 0) or
        on or before it (n < 0).
        """
        if n == 0:
            raise CalendarError(ErrorKind.INVALID_DAY, "nth_kday needs n != 0")
        if n > 0:
            return Fixed.new(self.before_day(date.day) + 7 * n)
        return Fixed.new(self.after_day(date.day) + 7 * n)


class AkanPrefix(IntEnum):
    NWONA = 1
    NKYI = 2
    KURU = 3
    KWA = 4
    MONO = 5
    FO = 6


class AkanStem(IntEnum):
    WUKUO = 1
    YAW = 2
    FIE = 3
    MEMENE = 4
    KWASI = 5
    DWO = 6
    BENE = 7


AKAN_CYCLE_START = 37
AKAN_CYCLE_LENGTH = 42


@dataclass(frozen=True)
class Akan:
    prefix: AkanPrefix
    stem: AkanStem

    @classmethod
    def day_name(cls, n: int) -> "Akan":
        return cls(AkanPrefix(adjusted_remainder(n, 6)), AkanStem(adjusted_remainder(n, 7)))

    @classmethod
    def epoch(cls) -> Fixed:
        return Fixed(AKAN_CYCLE_START)

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "Akan":
        return cls.day_name(fixed.day - cls.epoch().day)

    def name_difference(self, other: "Akan") -> int:
        """Days (1..42) from this name forward to other."""
        prefix_diff = int(other.prefix) - int(self.prefix)
        stem_diff = int(other.stem) - int(self.stem)
        return adjusted_remainder(prefix_diff + 36 * (stem_diff - prefix_diff), AKAN_CYCLE_LENGTH)

    def cycle_index(self) -> int:
        """Position 1..42, with Nwona-Wukuo first."""
        return Akan.day_name(0).name_difference(self)

    def on_or_before(self, date: Fixed) -> Fixed:
        diff = Akan.from_fixed(Fixed(0)).name_difference(self)
        return Fixed.new(interval_modulus(diff, date.day, date.day - AKAN_CYCLE_LENGTH))
