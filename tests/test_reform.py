# tests/test_reform.py

import random

import pytest

from calfix.calendars.cotsworth import Cotsworth, CotsworthComplementaryDay
from calfix.calendars.french_rev import (
    FrenchRevArith,
    FrenchRevArithUnadjusted,
    FrenchRevWeekday,
    Sansculottide,
)
from calfix.calendars.gregorian import Gregorian
from calfix.calendars.holocene import Holocene
from calfix.calendars.olympiad import Olympiad
from calfix.calendars.positivist import Positivist, PositivistComplementaryDay
from calfix.core.errors import CalendarError, ErrorKind
from calfix.core.fixed import Fixed
from calfix.core.types import OrdinalDate
from calfix.cycles import Weekday

# ============================================================
# French Revolutionary
# ============================================================

# Gregorian date, adjusted date, unadjusted date
FRENCH_EVENTS = [
    ((1794, 6, 10), (2, 9, 22), (2, 9, 22)),
    ((1794, 7, 27), (2, 11, 9), (2, 11, 9)),
    ((1795, 10, 5), (4, 1, 13), (4, 1, 14)),
    ((1797, 9, 4), (5, 12, 18), (5, 12, 18)),
    ((1798, 5, 11), (6, 8, 22), (6, 8, 22)),
    ((1799, 6, 18), (7, 9, 30), (7, 9, 30)),
    ((1799, 11, 9), (8, 2, 18), (8, 2, 19)),
    ((1871, 5, 6), (79, 8, 16), (79, 8, 16)),
]


@pytest.mark.parametrize("greg,adjusted,unadjusted", FRENCH_EVENTS)
def test_french_historical_events(greg, adjusted, unadjusted):
    f = Gregorian(*greg).to_fixed()
    assert FrenchRevArith.try_new(*adjusted).to_fixed() == f
    assert FrenchRevArith.from_fixed(f) == FrenchRevArith(*adjusted)
    assert FrenchRevArithUnadjusted.try_new(*unadjusted).to_fixed() == f
    assert FrenchRevArithUnadjusted.from_fixed(f) == FrenchRevArithUnadjusted(*unadjusted)


def test_french_epoch_and_leap_years():
    assert FrenchRevArith(1, 1, 1).to_fixed() == Gregorian(1792, 9, 22).to_fixed()
    assert FrenchRevArith.is_adjusted() and not FrenchRevArithUnadjusted.is_adjusted()
    assert [y for y in range(1, 16) if FrenchRevArith.is_leap(y)] == [3, 7, 11, 15]
    assert [y for y in range(1, 16) if FrenchRevArithUnadjusted.is_leap(y)] == [4, 8, 12]
    assert not FrenchRevArith.is_leap(3999)
    assert not FrenchRevArith.is_leap(99)
    assert FrenchRevArith.is_leap(399)


def test_french_complementary_days():
    assert FrenchRevArith.try_new(3, 13, 6).complementary() is Sansculottide.REVOLUTION
    with pytest.raises(CalendarError) as e:
        FrenchRevArithUnadjusted.try_new(3, 13, 6)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        FrenchRevArith.try_new(3, 14, 1)
    assert e.value.kind is ErrorKind.INVALID_MONTH
    assert FrenchRevArith.year_end(3) == FrenchRevArith(3, 13, 6)
    assert FrenchRevArith.year_end(4) == FrenchRevArith(4, 13, 5)
    assert FrenchRevArith(4, 13, 2).weekday() is None
    assert FrenchRevArith(4, 13, 2).quarter() == 4


def test_french_decades():
    assert FrenchRevArith(2, 9, 22).weekday() is FrenchRevWeekday.DUODI
    assert FrenchRevArith(2, 9, 30).weekday() is FrenchRevWeekday.DECADI
    assert FrenchRevArith(2, 9, 1).try_week_of_year() == 25
    assert FrenchRevArith(2, 13, 1).try_week_of_year() is None


# ============================================================
# Positivist
# ============================================================

def test_positivist_layout():
    assert Positivist(1, 1, 1).to_fixed() == Gregorian(1789, 1, 1).to_fixed()
    assert Positivist.epoch() == Gregorian(1789, 1, 1).to_fixed()
    assert Positivist(236, 14, 1).to_fixed() == Gregorian(2024, 12, 30).to_fixed()
    assert Positivist(236, 14, 2).to_fixed() == Gregorian(2024, 12, 31).to_fixed()
    assert Positivist(235, 14, 1).to_fixed() == Gregorian(2023, 12, 31).to_fixed()
    assert Positivist.from_fixed(Gregorian(2024, 12, 31).to_fixed()) == Positivist(236, 14, 2)


def test_positivist_days():
    d = Positivist.try_new(236, 14, 2)
    assert d.complementary() is PositivistComplementaryDay.FESTIVAL_OF_HOLY_WOMEN
    assert d.weekday() is None
    with pytest.raises(CalendarError) as e:
        Positivist.try_new(235, 14, 2)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        Positivist.try_new(235, 3, 29)
    assert e.value.kind is ErrorKind.INVALID_DAY
    assert Positivist(236, 1, 1).weekday() is Weekday.MONDAY
    assert Positivist(236, 1, 7).weekday() is Weekday.SUNDAY
    assert Positivist(236, 13, 1).quarter() == 4
    assert Positivist(236, 4, 1).quarter() == 2
    assert Positivist(236, 2, 1).try_week_of_year() == 5
    assert Positivist.year_end(236) == Positivist(236, 14, 2)


# ============================================================
# Cotsworth
# ============================================================

def test_cotsworth_special_days():
    assert Cotsworth(2024, 6, 29).to_fixed() == Gregorian(2024, 6, 17).to_fixed()
    assert Cotsworth(2024, 7, 1).to_fixed() == Gregorian(2024, 6, 18).to_fixed()
    assert Cotsworth(2023, 13, 29).to_fixed() == Gregorian(2023, 12, 31).to_fixed()
    assert Cotsworth.from_fixed(Gregorian(2024, 6, 17).to_fixed()) == Cotsworth(2024, 6, 29)
    assert Cotsworth(2024, 6, 29).complementary() is CotsworthComplementaryDay.LEAP_DAY
    assert Cotsworth(2024, 13, 29).complementary() is CotsworthComplementaryDay.YEAR_DAY
    with pytest.raises(CalendarError) as e:
        Cotsworth.try_new(2023, 6, 29)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        Cotsworth.try_new(2024, 5, 29)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        Cotsworth.try_new(2024, 14, 1)
    assert e.value.kind is ErrorKind.INVALID_MONTH


def test_cotsworth_weeks():
    for month in range(1, 14):
        assert Cotsworth(2024, month, 1).weekday() is Weekday.SUNDAY
        assert Cotsworth(2024, month, 28).weekday() is Weekday.SATURDAY
    assert Cotsworth(2023, 13, 29).quarter() == 4
    assert Cotsworth(2024, 6, 29).quarter() == 2
    assert Cotsworth(2023, 4, 1).quarter() == 1
    assert Cotsworth(2023, 4, 8).quarter() == 2
    assert Cotsworth(2024, 6, 29).try_week_of_year() is None


# ============================================================
# Holocene and Olympiad
# ============================================================

def test_holocene():
    assert Holocene(12024, 1, 1).to_fixed() == Gregorian(2024, 1, 1).to_fixed()
    assert Holocene.from_fixed(Fixed(1)) == Holocene(10001, 1, 1)
    assert Holocene.epoch() == Gregorian(-9999, 1, 1).to_fixed()
    assert Holocene.is_leap(12024) and not Holocene.is_leap(11900)
    assert Holocene.try_from_ordinal(OrdinalDate(12024, 366)) == Holocene(12024, 12, 31)


def test_olympiad():
    assert Olympiad.from_julian_year(-776) == Olympiad(1, 1)
    assert Olympiad(1, 4).to_julian_year() == -773
    assert Olympiad(195, 1).to_julian_year() == 1
    assert Olympiad.from_julian_year(1) == Olympiad(195, 1)
    assert Olympiad.from_julian_year(-1) == Olympiad(194, 4)
    for y in range(-2000, 2000):
        if y != 0:
            assert Olympiad.from_julian_year(y).to_julian_year() == y
    with pytest.raises(CalendarError) as e:
        Olympiad(1, 5)
    assert e.value.kind is ErrorKind.INVALID_YEAR
    with pytest.raises(CalendarError):
        Olympiad.from_julian_year(0)


def test_roundtrip():
    random.seed(42)
    for _ in range(3000):
        f = Fixed(random.randint(-10**8, 10**8))
        for cls in (FrenchRevArith, FrenchRevArithUnadjusted, Positivist, Cotsworth, Holocene):
            d = cls.from_fixed(f)
            cls.valid_month_day(d.to_common_date())
            assert d.to_fixed() == f
