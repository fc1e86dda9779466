"""
calfix.calendars.julian
-----------------------
Proleptic Julian calendar. There is no year 0: 1 AD follows 1 BC (year -1).
Julian 1 AD January 1 is RD -1 (Gregorian 0-12-30).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .arithmetic import ArithmeticCalendar, JulianRule, LeapRule


@dataclass(frozen=True, order=True)
class Julian(ArithmeticCalendar):
    year: int
    month: int
    day: int

    RULE: ClassVar[LeapRule] = JulianRule()
