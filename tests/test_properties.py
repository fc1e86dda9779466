# tests/test_properties.py
#
# Checks that hold for every registered calendar.

import random

import pytest

import calfix
from calfix.calendars.tranquility import Tranquility
from calfix.core.contracts import CommonDateCalendar, Perennial
from calfix.core.errors import CalendarError, ErrorKind
from calfix.core.fixed import FIXED_MAX, FIXED_MIN, Fixed

NAMES = calfix.list_calendars()
PERENNIAL = [n for n in NAMES if issubclass(calfix.get_calendar(n), Perennial)]
COMMON = [n for n in NAMES if issubclass(calfix.get_calendar(n), CommonDateCalendar)]

LO, HI = int(FIXED_MIN), int(FIXED_MAX)


def sample_days(n, lo=-10**7, hi=10**7):
    random.seed(42)
    return [random.randint(lo, hi) for _ in range(n)]


def sample_pairs(n):
    """Ordered day pairs: dense around the common eras, plus close neighbours anywhere in range."""
    random.seed(42)
    pairs = []
    for _ in range(n):
        a = random.randint(-10**7, 10**7)
        pairs.append((a, random.randint(-10**7, 10**7)))
    for _ in range(n):
        a = random.randint(LO, HI)
        b = min(max(a + random.randint(-127, 127), LO), HI)
        pairs.append((a, b))
    return [(min(a, b), max(a, b)) for a, b in pairs if a != b]


def order_key(x):
    # Tranquility's month-0 days sit inside the year, so compare by ordinal
    if isinstance(x, Tranquility):
        return x.to_ordinal()
    return x.to_common_date()


@pytest.mark.parametrize("name", NAMES)
def test_roundtrip(name):
    cls = calfix.get_calendar(name)
    for d in sample_days(500) + sample_days(500, LO, HI):
        assert cls.from_fixed(Fixed(d)).to_fixed() == Fixed(d)


@pytest.mark.parametrize("name", NAMES)
def test_order_follows_timeline(name):
    cls = calfix.get_calendar(name)
    for lo, hi in sample_pairs(200):
        assert cls.from_fixed(Fixed(lo)) < cls.from_fixed(Fixed(hi))


@pytest.mark.parametrize("name", COMMON)
def test_common_date_order_follows_timeline(name):
    cls = calfix.get_calendar(name)
    for lo, hi in sample_pairs(200):
        a = cls.from_fixed(Fixed(lo))
        b = cls.from_fixed(Fixed(hi))
        assert order_key(a) < order_key(b)


@pytest.mark.parametrize("name", NAMES)
def test_one_more_day(name):
    cls = calfix.get_calendar(name)
    for d in sample_days(200) + sample_days(200, LO, HI - 1):
        x = cls.from_fixed(Fixed(d))
        y = cls.from_fixed(Fixed(d + 1))
        assert x < y
        assert y.to_fixed().day - x.to_fixed().day == 1


@pytest.mark.parametrize("name", COMMON)
def test_from_fixed_gives_valid_dates(name):
    cls = calfix.get_calendar(name)
    for d in sample_days(500) + sample_days(500, LO, HI):
        x = cls.from_fixed(Fixed(d))
        assert cls.try_from_common_date(x.to_common_date()) == x
        assert 1 <= x.quarter() <= 4


@pytest.mark.parametrize("name", PERENNIAL)
def test_complementary_xor_weekday(name):
    cls = calfix.get_calendar(name)
    for d in sample_days(1000):
        x = cls.from_fixed(Fixed(d))
        assert (x.complementary() is None) != (x.weekday() is None)


@pytest.mark.parametrize("name", NAMES)
def test_effective_bounds(name):
    cls = calfix.get_calendar(name)
    lo, hi = calfix.effective_bounds(name)
    mid = cls.from_fixed(Fixed(0))
    assert lo < mid < hi
    assert lo.to_fixed() <= Fixed(0) <= hi.to_fixed()
    assert lo == cls.effective_min() and hi == cls.effective_max()
    assert cls.effective_max() is cls.effective_max()


@pytest.mark.parametrize("name", NAMES)
def test_effective_bounds_match_fixed_range(name):
    cls = calfix.get_calendar(name)
    assert cls.effective_min() == cls.from_fixed(Fixed.new(FIXED_MIN))
    assert cls.effective_max() == cls.from_fixed(Fixed.new(FIXED_MAX))
    assert cls.effective_min().to_fixed() == Fixed(LO)
    assert cls.effective_max().to_fixed() == Fixed(HI)
    assert cls.from_fixed(Fixed(HI + 1)) > cls.effective_max()
    assert cls.from_fixed(Fixed(LO - 1)) < cls.effective_min()


@pytest.mark.parametrize("name", COMMON)
def test_dates_past_the_range_are_rejected(name):
    cls = calfix.get_calendar(name)
    for x in (cls.effective_min(), cls.effective_max()):
        assert cls.try_from_common_date(x.to_common_date()) == x
    for d in (LO - 1, HI + 1):
        date = cls.from_fixed(Fixed(d)).to_common_date()
        if not cls.is_valid(date):
            continue
        with pytest.raises(CalendarError) as e:
            cls.try_from_common_date(date)
        assert e.value.kind is ErrorKind.OUT_OF_BOUNDS


@pytest.mark.parametrize("name", COMMON)
def test_year_start_end(name):
    cls = calfix.get_calendar(name)
    for year in (-500, 2, 1999, 2024):
        start = cls.year_start(year)
        end = cls.year_end(year)
        assert start < end
        before = cls.from_fixed(Fixed(start.to_fixed().day - 1))
        after = cls.from_fixed(Fixed(end.to_fixed().day + 1))
        assert before.year != start.year
        assert after.year != end.year
