"""
calfix.calendars.moment
-----------------------
A calendar date paired with a time of day.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Type, TypeVar

from ..clock import ClockTime, TimeOfDay
from ..core.contracts import FixedConvertible
from ..core.fixed import Fixed

M = TypeVar("M", bound="CalendarMoment")


@dataclass(frozen=True, order=True)
class CalendarMoment(FixedConvertible):
    """
    (date, time) in any calendar. Subclasses may pin CALENDAR so that
    from_fixed() needs no calendar argument.
    """
    date: Any
    time: TimeOfDay = TimeOfDay()

    CALENDAR: ClassVar[Optional[type]] = None

    @classmethod
    def _calendar(cls, calendar: Optional[type]) -> type:
        calendar = calendar or cls.CALENDAR
        if calendar is None:
            raise TypeError(f"{cls.__name__}.from_fixed() needs a calendar")
        return calendar

    @classmethod
    def epoch(cls) -> Fixed:
        return cls._calendar(None).epoch()

    @classmethod
    def from_fixed(cls: Type[M], fixed: Fixed, calendar: Optional[type] = None) -> M:
        date = cls._calendar(calendar).from_fixed(fixed)
        return cls(date, TimeOfDay.from_fixed(fixed))

    def to_fixed(self) -> Fixed:
        return Fixed.new(self.date.to_fixed().value + self.time.value)

    def clock(self) -> ClockTime:
        return self.time.to_clock()
