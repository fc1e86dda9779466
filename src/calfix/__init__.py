"""calfix public API.

Every calendar converts to and from one shared timeline (Fixed). Keep
this surface small: the calendar classes and the registry-backed helpers
re-exported here cover most uses.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    calendar_info,
    convert,
    effective_bounds,
    fields,
    from_fixed,
    get_calendar,
    list_calendars,
    register_calendar,
    to_fixed,
    today,
)
from .calendars.coptic import Coptic, Ethiopic
from .calendars.cotsworth import Cotsworth
from .calendars.egyptian import Armenian, Egyptian
from .calendars.french_rev import FrenchRevArith, FrenchRevArithUnadjusted
from .calendars.gregorian import Gregorian
from .calendars.holocene import Holocene
from .calendars.iso import ISO
from .calendars.julian import Julian
from .calendars.moment import CalendarMoment
from .calendars.olympiad import Olympiad
from .calendars.positivist import Positivist
from .calendars.roman import Roman, RomanEvent
from .calendars.symmetry import Symmetry010, Symmetry010Solstice, Symmetry454, Symmetry454Solstice
from .calendars.tranquility import Tranquility, TranquilityMoment
from .clock import ClockTime, TimeOfDay
from .core.errors import CalendarError, CalfixError, ContractViolation, ErrorKind
from .core.fixed import Fixed
from .core.types import CommonDate, OrdinalDate
from .cycles import Akan, Weekday
from .day_count import JulianDay, ModifiedJulianDay, RataDie, UnixMoment

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "calendar_info",
    "convert",
    "effective_bounds",
    "fields",
    "from_fixed",
    "get_calendar",
    "list_calendars",
    "register_calendar",
    "to_fixed",
    "today",
    "Akan",
    "Armenian",
    "CalendarError",
    "CalendarMoment",
    "CalfixError",
    "ClockTime",
    "CommonDate",
    "ContractViolation",
    "Coptic",
    "Cotsworth",
    "Egyptian",
    "ErrorKind",
    "Ethiopic",
    "Fixed",
    "FrenchRevArith",
    "FrenchRevArithUnadjusted",
    "Gregorian",
    "Holocene",
    "ISO",
    "Julian",
    "JulianDay",
    "ModifiedJulianDay",
    "Olympiad",
    "OrdinalDate",
    "Positivist",
    "RataDie",
    "Roman",
    "RomanEvent",
    "Symmetry010",
    "Symmetry010Solstice",
    "Symmetry454",
    "Symmetry454Solstice",
    "TimeOfDay",
    "Tranquility",
    "TranquilityMoment",
    "UnixMoment",
    "Weekday",
]
