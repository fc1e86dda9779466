from __future__ import annotations

import logging
from typing import Dict

from calfix.calendars.coptic import Coptic, Ethiopic
from calfix.calendars.cotsworth import Cotsworth
from calfix.calendars.egyptian import Armenian, Egyptian
from calfix.calendars.french_rev import FrenchRevArith, FrenchRevArithUnadjusted
from calfix.calendars.gregorian import Gregorian
from calfix.calendars.holocene import Holocene
from calfix.calendars.iso import ISO
from calfix.calendars.julian import Julian
from calfix.calendars.positivist import Positivist
from calfix.calendars.roman import Roman
from calfix.calendars.symmetry import Symmetry010, Symmetry010Solstice, Symmetry454, Symmetry454Solstice
from calfix.calendars.tranquility import Tranquility
from calfix.core.registry import CalendarRegistry, CalendarSpec
from calfix.day_count import JulianDay, ModifiedJulianDay, RataDie, UnixMoment

logger = logging.getLogger(__name__)

ALL_SPECS: Dict[str, CalendarSpec] = {
    spec.name: spec
    for spec in (
        CalendarSpec("rata_die", RataDie, "Days since the day before 0001-01-01 (Gregorian)", "count"),
        CalendarSpec("jd", JulianDay, "Julian Day, counted from noon", "count"),
        CalendarSpec("mjd", ModifiedJulianDay, "Modified Julian Day", "count"),
        CalendarSpec("unix", UnixMoment, "Seconds since 1970-01-01T00:00:00", "count"),
        CalendarSpec("gregorian", Gregorian, "Proleptic Gregorian, with year 0"),
        CalendarSpec("julian", Julian, "Proleptic Julian, no year 0"),
        CalendarSpec("iso", ISO, "ISO 8601 week date", "week"),
        CalendarSpec("roman", Roman, "Roman Kalends/Nones/Ides over Julian years", "roman"),
        CalendarSpec("coptic", Coptic, "Coptic (era of the martyrs)"),
        CalendarSpec("ethiopic", Ethiopic, "Ethiopic"),
        CalendarSpec("egyptian", Egyptian, "Egyptian wandering year (era of Nabonassar)"),
        CalendarSpec("armenian", Armenian, "Armenian"),
        CalendarSpec("french_rev", FrenchRevArith, "French Revolutionary, Romme rule, adjusted"),
        CalendarSpec("french_rev_unadjusted", FrenchRevArithUnadjusted, "French Revolutionary, Romme rule"),
        CalendarSpec("positivist", Positivist, "Comte's Positivist calendar"),
        CalendarSpec("cotsworth", Cotsworth, "International Fixed Calendar"),
        CalendarSpec("holocene", Holocene, "Holocene (Human Era)"),
        CalendarSpec("symmetry454", Symmetry454, "Symmetry454, northward equinox cycle"),
        CalendarSpec("symmetry010", Symmetry010, "Symmetry010, northward equinox cycle"),
        CalendarSpec("symmetry454_solstice", Symmetry454Solstice, "Symmetry454, north solstice cycle"),
        CalendarSpec("symmetry010_solstice", Symmetry010Solstice, "Symmetry010, north solstice cycle"),
        CalendarSpec("tranquility", Tranquility, "Tranquility (Apollo 11 epoch)"),
    )
}


def build_registry() -> CalendarRegistry:
    reg = CalendarRegistry()
    for spec in ALL_SPECS.values():
        reg.register(spec)
    logger.debug("registered %d calendars", len(ALL_SPECS))
    return reg
