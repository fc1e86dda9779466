"""
calfix.core.derive
------------------
Generic derivations shared by calendars that only know their own
(year, month, day) layout. Irregular calendars override the method that
calls these instead of re-implementing them.
"""

from __future__ import annotations


def quarter_of_month(month: int, *, intercalary: bool = False) -> int:
    """Quarter 1..4 for a 1-based month of a 3-months-per-quarter layout."""
    if intercalary:
        return 4
    return (month - 1) // 3 + 1


def week_of_year(day: int, year_start: int) -> int:
    """Conventional 7-day weeks counted from the calendar's own year start."""
    return (day - year_start) // 7 + 1


def perennial_week_of_year(month: int, day: int, days_per_week: int, weeks_per_month: int) -> int:
    """Week of year for calendars where every month holds whole weeks."""
    days_per_month = days_per_week * weeks_per_month
    return ((month - 1) * days_per_month + day - 1) // days_per_week + 1
