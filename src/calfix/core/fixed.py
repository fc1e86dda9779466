"""
calfix.core.fixed
-----------------
The shared continuous timeline.

A Fixed value is an integer day index (day 1 = proleptic Gregorian
0001-01-01, i.e. Rata Die) plus an exact sub-day fraction in [0, 1).
Keeping the two apart means day indices never pick up float noise; a
single scalar is produced only where a formula needs one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from .errors import CalendarError, ContractViolation, ErrorKind
from .numeric import EFFECTIVE_MAX, EFFECTIVE_MIN, approx_eq

Number = Union[int, float, Fraction]

# Recommended range for results. Intermediate arithmetic may overshoot it
# as long as it stays within the effective range.
FIXED_MAX: float = EFFECTIVE_MAX * (2048 - 1) / 2048
FIXED_MIN: float = -FIXED_MAX

SECONDS_PER_DAY = 86400


@dataclass(frozen=True, order=True)
class Fixed:
    """
    A point on the timeline. Direct construction is the unchecked path:
    out-of-range fields are a contract violation. Use Fixed.new() for
    caller-supplied scalars.
    """
    day: int
    fraction: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        if not isinstance(self.day, int):
            raise ContractViolation(f"day must be int, got {type(self.day).__name__}")
        if not isinstance(self.fraction, Fraction):
            object.__setattr__(self, "fraction", Fraction(self.fraction))
        if not (0 <= self.fraction < 1):
            raise ContractViolation(f"fraction {self.fraction} outside [0, 1)")
        if not (EFFECTIVE_MIN <= self.day <= EFFECTIVE_MAX):
            raise ContractViolation(f"day {self.day} outside effective bounds")

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------
    @classmethod
    def new(cls, x: Number) -> "Fixed":
        """Checked construction from a scalar day count."""
        if isinstance(x, float) and not math.isfinite(x):
            raise CalendarError(ErrorKind.ENCOUNTERED_NAN, f"Fixed.new({x!r})")
        if not (EFFECTIVE_MIN <= x <= EFFECTIVE_MAX):
            raise CalendarError(ErrorKind.OUT_OF_BOUNDS, f"Fixed.new({x!r})")
        day = math.floor(x)
        return cls(day, Fraction(x) - day)

    @classmethod
    def from_day(cls, day: int) -> "Fixed":
        return cls(int(day))

    @classmethod
    def effective_min(cls) -> "Fixed":
        """Lower end of the range recommended for results."""
        return cls.new(FIXED_MIN)

    @classmethod
    def effective_max(cls) -> "Fixed":
        return cls.new(FIXED_MAX)

    # ---------------------------------------------------------
    # Views
    # ---------------------------------------------------------
    @property
    def value(self) -> Fraction:
        """Exact scalar day count."""
        return self.day + self.fraction

    def to_float(self) -> float:
        return float(self.value)

    def to_day(self) -> "Fixed":
        """Midnight at the start of the same day."""
        return Fixed(self.day)

    def to_time_of_day(self) -> Fraction:
        return self.fraction

    def same_second(self, other: "Fixed") -> bool:
        return approx_eq(self.value, other.value)

    def add_days(self, days: Number) -> "Fixed":
        return Fixed.new(self.value + days)

    def in_fixed_bounds(self) -> bool:
        return FIXED_MIN <= self.value <= FIXED_MAX
