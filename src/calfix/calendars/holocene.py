"""
calfix.calendars.holocene
-------------------------
Cesare Emiliani's Holocene calendar (Human Era): the proleptic Gregorian
calendar with 10000 added to the year. Since 10000 is a multiple of 400,
leap years coincide with Gregorian ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.fixed import Fixed
from ..core.types import OrdinalDate
from .arithmetic import ArithmeticCalendar, GregorianRule, LeapRule

HOLOCENE_YEAR_OFFSET = 10000


@dataclass(frozen=True)
class HoloceneRule(GregorianRule):
    """Gregorian rule with years renumbered; epoch is Gregorian -9999-01-01."""
    year_offset: int = HOLOCENE_YEAR_OFFSET

    def prior_elapsed_days(self, year: int) -> int:
        return super().prior_elapsed_days(year - self.year_offset)

    def ordinal_from_day(self, day: int) -> OrdinalDate:
        g = super().ordinal_from_day(day)
        return OrdinalDate(g.year + self.year_offset, g.day_of_year)


@dataclass(frozen=True, order=True)
class Holocene(ArithmeticCalendar):
    year: int
    month: int
    day: int

    RULE: ClassVar[LeapRule] = HoloceneRule()

    @classmethod
    def epoch(cls) -> Fixed:
        return cls(1, 1, 1).to_fixed()
