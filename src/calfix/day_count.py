"""
calfix.day_count
----------------
Plain day counts offset from the timeline: Rata Die, Julian Day, Modified
Julian Day, and Unix time (whole seconds).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, Type, TypeVar, Union

from .core.contracts import FixedConvertible
from .core.fixed import SECONDS_PER_DAY, Fixed

Number = Union[int, float, Fraction]

D = TypeVar("D", bound="DayCount")


@dataclass(frozen=True, order=True)
class DayCount(FixedConvertible):
    """Real-valued day count: fixed = EPOCH + value."""
    value: Fraction
    EPOCH: ClassVar[Fraction] = Fraction(0)

    def __post_init__(self) -> None:
        if not isinstance(self.value, Fraction):
            object.__setattr__(self, "value", Fraction(self.value))

    @classmethod
    def epoch(cls) -> Fixed:
        return Fixed.new(cls.EPOCH)

    @classmethod
    def from_fixed(cls: Type[D], fixed: Fixed) -> D:
        return cls(fixed.value - cls.EPOCH)

    def to_fixed(self) -> Fixed:
        return Fixed.new(self.EPOCH + self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True, order=True)
class RataDie(DayCount):
    EPOCH: ClassVar[Fraction] = Fraction(0)


@dataclass(frozen=True, order=True)
class JulianDay(DayCount):
    # JD 0 is noon, 4713-11-24 BC (proleptic Gregorian)
    EPOCH: ClassVar[Fraction] = Fraction(-17214245, 10)


@dataclass(frozen=True, order=True)
class ModifiedJulianDay(DayCount):
    # MJD 0 is midnight, 1858-11-17
    EPOCH: ClassVar[Fraction] = Fraction(678576)


UNIX_EPOCH_DAY = 719163


@dataclass(frozen=True, order=True)
class UnixMoment(FixedConvertible):
    """Whole seconds since 1970-01-01T00:00:00, leap seconds not counted."""
    seconds: int

    @classmethod
    def epoch(cls) -> Fixed:
        return Fixed(UNIX_EPOCH_DAY)

    @classmethod
    def from_fixed(cls, fixed: Fixed) -> "UnixMoment":
        return cls(round(SECONDS_PER_DAY * (fixed.value - UNIX_EPOCH_DAY)))

    def to_fixed(self) -> Fixed:
        return Fixed.new(UNIX_EPOCH_DAY + Fraction(self.seconds, SECONDS_PER_DAY))
