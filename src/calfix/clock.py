"""
calfix.clock
------------
Time of day as a fraction of a day, and its hours/minutes/seconds view.

The two convert through mixed radix [24, 60, 60] pivoted on days. Float
fields are read as the decimal they print as, so every input survives a
round trip exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from .core.errors import CalendarError, ErrorKind
from .core.fixed import Fixed
from .core.numeric import from_mixed_radix, to_mixed_radix

Number = Union[int, float, Fraction]

CLOCK_RADICES = (24, 60, 60)


def _tidy(x: Number) -> Number:
    if isinstance(x, Fraction) and x.denominator == 1:
        return int(x)
    return x


def _exact(x: Number) -> Number:
    """Finite floats become the Fraction of their shortest decimal repr: 0.1 -> 1/10."""
    if isinstance(x, float) and math.isfinite(x):
        return _tidy(Fraction(repr(x)))
    return x


@dataclass(frozen=True, order=True)
class ClockTime:
    """Unchecked hours/minutes/seconds. Build from user input with ClockTime.new()."""
    hours: int = 0
    minutes: int = 0
    seconds: Number = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", _exact(self.seconds))

    @staticmethod
    def check_fields(hours: int, minutes: int, seconds: Number) -> None:
        if not (0 <= hours <= 23):
            raise CalendarError(ErrorKind.INVALID_HOUR, f"hours={hours}")
        if not (0 <= minutes < 60):
            raise CalendarError(ErrorKind.INVALID_MINUTE, f"minutes={minutes}")
        if isinstance(seconds, float) and not math.isfinite(seconds):
            raise CalendarError(ErrorKind.ENCOUNTERED_NAN, f"seconds={seconds}")
        # 60 is allowed for a leap second
        if not (0 <= seconds <= 60):
            raise CalendarError(ErrorKind.INVALID_SECOND, f"seconds={seconds}")

    @classmethod
    def new(cls, hours: int, minutes: int, seconds: Number = 0) -> "ClockTime":
        cls.check_fields(hours, minutes, seconds)
        return cls(hours, minutes, seconds)

    @classmethod
    def from_time_of_day(cls, t: "TimeOfDay") -> "ClockTime":
        _, h, m, s = to_mixed_radix(t.value, CLOCK_RADICES, 0)
        return cls(int(h), int(m), _tidy(s))


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """
    Fraction of a day since midnight. Normally in [0, 1); a leap second at
    23:59:60 lands exactly on 1.
    """
    value: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        v = self.value
        if isinstance(v, float) and not math.isfinite(v):
            raise CalendarError(ErrorKind.ENCOUNTERED_NAN, f"TimeOfDay({v!r})")
        if not isinstance(v, Fraction):
            object.__setattr__(self, "value", Fraction(_exact(v)))
        if self.value < 0:
            raise CalendarError(ErrorKind.OUT_OF_BOUNDS, f"TimeOfDay({v!r})")

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "TimeOfDay":
        return cls(fixed.to_time_of_day())

    @classmethod
    def try_from_clock(cls, clock: ClockTime) -> "TimeOfDay":
        ClockTime.check_fields(clock.hours, clock.minutes, clock.seconds)
        return cls.from_clock_unchecked(clock)

    @classmethod
    def from_clock_unchecked(cls, clock: ClockTime) -> "TimeOfDay":
        fields = [0, _exact(clock.hours), _exact(clock.minutes), _exact(clock.seconds)]
        x = from_mixed_radix(fields, CLOCK_RADICES, 0)
        return cls(x)

    def to_clock(self) -> ClockTime:
        return ClockTime.from_time_of_day(self)

    def seconds(self) -> Number:
        return _tidy(self.value * 86400)
