"""
calfix.calendars.gregorian
--------------------------
Proleptic Gregorian calendar. Year 0 exists (1 BC); epoch is RD 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Dict, Tuple

from ..core.types import CommonDate
from .arithmetic import ArithmeticCalendar, GregorianRule, LeapRule


class GregorianMonth(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@dataclass(frozen=True, order=True)
class Gregorian(ArithmeticCalendar):
    year: int
    month: int
    day: int

    RULE: ClassVar[LeapRule] = GregorianRule()


# Epochs of other eras as proleptic Gregorian dates, with their RD day.
# From Reingold & Dershowitz, table 1.2. The Babylonian and Zoroastrian
# rows carry unresolved attribution and are kept as published.
NOTABLE_DAYS: Dict[str, Tuple[CommonDate, int]] = {
    "julian_day": (CommonDate(-4713, 11, 24), -1721425),
    "hebrew": (CommonDate(-3760, 9, 7), -1373427),
    "mayan": (CommonDate(-3113, 8, 11), -1137142),
    "hindu_kali_yuga": (CommonDate(-3101, 1, 23), -1132959),
    "chinese": (CommonDate(-2636, 2, 15), -963099),
    "egyptian_nabonassar": (CommonDate(-746, 2, 18), -272787),
    "babylonian": (CommonDate(-310, 3, 29), -113502),
    "tibetan": (CommonDate(-127, 12, 7), -46410),
    "julian": (CommonDate(0, 12, 30), -1),
    "gregorian": (CommonDate(1, 1, 1), 1),
    "akan": (CommonDate(1, 2, 6), 37),
    "ethiopic": (CommonDate(8, 8, 27), 2796),
    "coptic": (CommonDate(284, 8, 29), 103605),
    "armenian": (CommonDate(552, 7, 13), 201443),
    "persian": (CommonDate(622, 3, 22), 226896),
    "islamic": (CommonDate(622, 7, 19), 227015),
    "zoroastrian": (CommonDate(632, 6, 19), 230638),
    "french_revolutionary": (CommonDate(1792, 9, 22), 654415),
    "bahai": (CommonDate(1844, 3, 21), 673222),
    "modified_julian_day": (CommonDate(1858, 11, 17), 678576),
    "unix": (CommonDate(1970, 1, 1), 719163),
}
