# tests/test_api_cli.py

import pytest

import calfix
from calfix import cli
from calfix.bootstrap import ALL_SPECS, build_registry
from calfix.core.registry import CalendarRegistry, CalendarSpec


def test_registry_contents():
    names = calfix.list_calendars()
    assert names == sorted(ALL_SPECS)
    assert len(names) == 22
    for expected in ("gregorian", "julian", "iso", "roman", "tranquility", "unix", "symmetry454"):
        assert expected in names
    assert calfix.get_calendar("gregorian") is calfix.Gregorian


def test_registry_operations():
    reg = build_registry()
    assert reg.name_of(calfix.Coptic) == "coptic"
    with pytest.raises(KeyError):
        reg.get("mayan")
    with pytest.raises(KeyError):
        reg.register(CalendarSpec("gregorian", calfix.Gregorian))
    reg.register(CalendarSpec("gregorian", calfix.Julian, "replaced"), overwrite=True)
    assert reg.get("gregorian").calendar is calfix.Julian

    empty = CalendarRegistry()
    assert empty.list() == []
    with pytest.raises(KeyError):
        empty.name_of(calfix.Gregorian)


def test_calendar_info():
    info = calfix.calendar_info("gregorian")
    assert info["class"] == "Gregorian"
    assert info["shape"] == "common"
    assert info["epoch"] == 1
    assert set(info["effective_min"]) == {"year", "month", "day"}
    assert calfix.calendar_info("iso")["shape"] == "week"


def test_from_fixed_and_convert():
    assert calfix.from_fixed("gregorian", 1) == calfix.Gregorian(1, 1, 1)
    assert calfix.from_fixed("gregorian", calfix.Fixed(719163)) == calfix.Gregorian(1970, 1, 1)
    assert calfix.convert(calfix.Gregorian(1970, 1, 1), "unix") == calfix.UnixMoment(0)
    assert calfix.convert(calfix.Julian(1752, 9, 3), "gregorian") == calfix.Gregorian(1752, 9, 14)
    assert calfix.to_fixed(calfix.Gregorian(1, 1, 1)) == calfix.Fixed(1)
    with pytest.raises(KeyError):
        calfix.from_fixed("nope", 1)
    with pytest.raises(calfix.CalendarError):
        calfix.from_fixed("gregorian", float("nan"))


def test_today_uses_given_clock():
    assert calfix.today(now=0) == calfix.Gregorian(1970, 1, 1)
    assert calfix.today("unix", now=86400) == calfix.UnixMoment(86400)
    assert calfix.today("iso", now=0) == calfix.ISO(1970, 1, calfix.Weekday.THURSDAY)


def test_fields_are_plain():
    assert calfix.fields(calfix.Gregorian(2024, 2, 29)) == {"year": 2024, "month": 2, "day": 29}
    assert calfix.fields(calfix.ISO(2024, 1, calfix.Weekday.SUNDAY)) == {"year": 2024, "week": 1, "day": 0}
    assert calfix.fields(calfix.RataDie(5)) == {"value": 5}
    assert calfix.fields(calfix.JulianDay(1.5)) == {"value": 1.5}
    with pytest.raises(TypeError):
        calfix.fields(42)


def test_cli_list(capsys):
    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out
    assert "Tranquility" in out


def test_cli_convert(capsys):
    assert cli.main(["convert", "--fixed", "1", "--calendar", "gregorian"]) == 0
    out = capsys.readouterr().out
    assert "year=1 month=1 day=1" in out

    assert cli.main(["convert", "--unix", "0", "--calendar", "gregorian", "--calendar", "iso"]) == 0
    out = capsys.readouterr().out
    assert "year=1970 month=1 day=1" in out
    assert "week=1 day=4" in out


def test_cli_bounds_and_today(capsys):
    assert cli.main(["--log-level", "DEBUG", "bounds", "--calendar", "julian"]) == 0
    out = capsys.readouterr().out
    assert "julian (min)" in out and "julian (max)" in out
    assert cli.main(["today", "--calendar", "gregorian"]) == 0
    assert "gregorian" in capsys.readouterr().out


def test_cli_round_trip_diagnostic(capsys):
    pytest.importorskip("numpy")
    assert cli.main(["diag", "round-trip", "--N", "50", "--calendars", "gregorian,roman"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
