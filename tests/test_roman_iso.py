# tests/test_roman_iso.py

import random

import pytest

from calfix.calendars.gregorian import Gregorian
from calfix.calendars.iso import ISO
from calfix.calendars.julian import Julian
from calfix.calendars.roman import (
    Roman,
    RomanEvent,
    auc_year_from_julian,
    ides_of_month,
    julian_year_from_auc,
    nones_of_month,
)
from calfix.core.errors import CalendarError, ErrorKind
from calfix.core.fixed import Fixed
from calfix.core.types import CommonDate
from calfix.cycles import Weekday

K, N, I = RomanEvent.KALENDS, RomanEvent.NONES, RomanEvent.IDES


def roman_of(y, m, d):
    return Roman.from_fixed(Julian(y, m, d).to_fixed())


# ============================================================
# Roman
# ============================================================

def test_named_days():
    assert roman_of(-44, 3, 15) == Roman(-44, 3, I, 1)
    assert roman_of(2000, 1, 1) == Roman(2000, 1, K, 1)
    assert roman_of(2000, 1, 5) == Roman(2000, 1, N, 1)
    assert roman_of(2000, 1, 4) == Roman(2000, 1, N, 2)
    assert roman_of(2000, 1, 14) == Roman(2000, 2, K, 19)
    assert roman_of(2000, 7, 7) == Roman(2000, 7, N, 1)
    assert ides_of_month(10) == 15 and nones_of_month(10) == 7
    assert ides_of_month(4) == 13 and nones_of_month(4) == 5


def test_bissextile_day():
    # 2004 is a Julian leap year: Feb 24 and 25 share a count
    assert roman_of(2004, 2, 23) == Roman(2004, 3, K, 7)
    assert roman_of(2004, 2, 24) == Roman(2004, 3, K, 6)
    assert roman_of(2004, 2, 25) == Roman(2004, 3, K, 6, True)
    assert roman_of(2004, 2, 26) == Roman(2004, 3, K, 5)
    assert Roman(2004, 3, K, 6, True).to_fixed() == Julian(2004, 2, 25).to_fixed()
    assert roman_of(2003, 2, 24) == Roman(2003, 3, K, 6)

    a, b, c = Roman(2004, 3, K, 6), Roman(2004, 3, K, 6, True), Roman(2004, 3, K, 5)
    assert a < b < c
    assert a.to_fixed() < b.to_fixed() < c.to_fixed()


def test_year_boundary():
    # late December counts down to the Kalends of January of the next year
    r = roman_of(-1, 12, 20)
    assert (r.year, r.month, r.event) == (1, 1, K)
    assert r.to_fixed() == Julian(-1, 12, 20).to_fixed()
    assert roman_of(2000, 12, 31) == Roman(2001, 1, K, 2)


def test_try_new_checks():
    assert Roman.try_new(2004, 3, K, 6, True) == Roman(2004, 3, K, 6, True)
    with pytest.raises(CalendarError) as e:
        Roman.try_new(2003, 3, K, 6, True)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        Roman.try_new(0, 3, K, 1)
    assert e.value.kind is ErrorKind.INVALID_YEAR
    with pytest.raises(CalendarError) as e:
        Roman.try_new(2000, 13, K, 1)
    assert e.value.kind is ErrorKind.INVALID_MONTH
    with pytest.raises(CalendarError) as e:
        Roman.try_new(2000, 1, N, 0)
    assert e.value.kind is ErrorKind.INVALID_DAY
    # "5 days before the Nones of January" is the Kalends
    with pytest.raises(CalendarError) as e:
        Roman.try_new(2000, 1, N, 5)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        Roman.try_new(10 ** 12, 1, K, 1)
    assert e.value.kind is ErrorKind.OUT_OF_BOUNDS
    assert Roman.try_new(2000, 3, 3, 1) == Roman(2000, 3, I, 1)
    for bad_event in (0, 4, -1):
        with pytest.raises(CalendarError) as e:
            Roman.try_new(2000, 3, bad_event, 1)
        assert e.value.kind is ErrorKind.INVALID_DAY


def test_auc_years():
    assert auc_year_from_julian(-753) == 1
    assert auc_year_from_julian(-1) == 753
    assert auc_year_from_julian(1) == 754
    assert julian_year_from_auc(1) == -753
    assert julian_year_from_auc(753) == -1
    assert julian_year_from_auc(754) == 1
    assert Roman(-44, 3, I, 1).auc_year() == 710
    for y in range(-2000, 2000):
        if y != 0:
            assert julian_year_from_auc(auc_year_from_julian(y)) == y


def test_roman_roundtrip_and_order():
    random.seed(42)
    prev = None
    start = random.randint(-10**6, 10**6)
    for d in range(start, start + 2000):
        r = Roman.from_fixed(Fixed(d))
        assert r.to_fixed() == Fixed(d)
        assert Roman.try_new(r.year, r.month, r.event, r.count, r.leap) == r
        if prev is not None:
            assert prev < r
        prev = r
    assert Roman(2004, 3, K, 6).to_julian_date() == CommonDate(2004, 2, 24)
    assert Roman(2004, 5, I, 1).quarter() == 2


# ============================================================
# ISO week dates
# ============================================================

def iso_of(y, m, d):
    return ISO.from_fixed(Gregorian(y, m, d).to_fixed())


def test_iso_known_dates():
    assert iso_of(2024, 1, 1) == ISO(2024, 1, Weekday.MONDAY)
    assert iso_of(2021, 1, 3) == ISO(2020, 53, Weekday.SUNDAY)
    assert iso_of(2008, 12, 29) == ISO(2009, 1, Weekday.MONDAY)
    assert iso_of(2010, 1, 3) == ISO(2009, 53, Weekday.SUNDAY)
    assert ISO(2024, 1, Weekday.MONDAY).to_fixed() == Gregorian(2024, 1, 1).to_fixed()
    assert ISO.new_year(2009).to_fixed() == Gregorian(2008, 12, 29).to_fixed()


def test_iso_long_years():
    assert ISO.is_leap(2020)
    assert ISO.is_leap(2015)
    assert not ISO.is_leap(2021)
    assert ISO.try_new(2020, 53, Weekday.FRIDAY) == ISO(2020, 53, Weekday.FRIDAY)
    with pytest.raises(CalendarError) as e:
        ISO.try_new(2021, 53, Weekday.MONDAY)
    assert e.value.kind is ErrorKind.INVALID_WEEK
    with pytest.raises(CalendarError) as e:
        ISO.try_new(2021, 0, Weekday.MONDAY)
    assert e.value.kind is ErrorKind.INVALID_WEEK


def test_iso_day_numbers_and_order():
    assert ISO(2020, 53, Weekday.SUNDAY).day_num() == 7
    assert ISO(2020, 53, Weekday.MONDAY) < ISO(2020, 53, Weekday.SUNDAY)
    assert ISO(2020, 53, Weekday.SUNDAY) < ISO(2021, 1, Weekday.MONDAY)
    assert ISO(2020, 14, Weekday.MONDAY).quarter() == 1
    assert ISO(2020, 15, Weekday.MONDAY).quarter() == 2


def test_iso_roundtrip():
    random.seed(42)
    for _ in range(5000):
        f = Fixed(random.randint(-10**8, 10**8))
        iso = ISO.from_fixed(f)
        assert iso.to_fixed() == f
        assert ISO.try_new(iso.year, iso.week, iso.day) == iso
        assert iso.day == Weekday.from_fixed(f)
