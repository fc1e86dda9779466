# tests/test_alexandrian.py

import random
from fractions import Fraction

import pytest

from calfix.calendars.coptic import Coptic, CopticMonth, Ethiopic
from calfix.calendars.egyptian import Armenian, Egyptian, EgyptianDayUponTheYear
from calfix.calendars.gregorian import Gregorian
from calfix.calendars.julian import Julian
from calfix.core.errors import CalendarError, ErrorKind
from calfix.core.fixed import Fixed
from calfix.core.types import CommonDate


def test_coptic_epoch_and_known_dates():
    assert Coptic.epoch() == Fixed(103605)
    assert Coptic(1, 1, 1).to_fixed() == Fixed(103605)
    assert Coptic.from_fixed(Gregorian(1887, 9, 11).to_fixed()) == Coptic(1604, 1, 1)


def test_coptic_christmas():
    # Koiak 29 is Julian Dec 25, or Dec 26 when the Coptic year before was leap
    assert Coptic(1717, CopticMonth.KOIAK, 29).to_fixed() == Gregorian(2001, 1, 7).to_fixed()
    assert Coptic(1717, CopticMonth.KOIAK, 29).to_fixed() == Julian(2000, 12, 25).to_fixed()
    assert Coptic.is_leap(1715)
    assert Coptic(1716, CopticMonth.KOIAK, 29).to_fixed() == Gregorian(2000, 1, 8).to_fixed()


def test_ethiopic():
    assert Ethiopic(1, 1, 1).to_fixed() == Fixed(2796)
    assert Ethiopic.from_fixed(Gregorian(2023, 9, 12).to_fixed()) == Ethiopic(2016, 1, 1)


def test_alexandrian_validation():
    assert Coptic.try_new(1715, 13, 6) == Coptic(1715, 13, 6)
    with pytest.raises(CalendarError) as e:
        Coptic.try_new(1716, 13, 6)
    assert e.value.kind is ErrorKind.INVALID_DAY
    with pytest.raises(CalendarError) as e:
        Ethiopic.try_new(2016, 14, 1)
    assert e.value.kind is ErrorKind.INVALID_MONTH
    with pytest.raises(CalendarError) as e:
        Ethiopic.try_new(2016, 1, 31)
    assert e.value.kind is ErrorKind.INVALID_DAY
    assert Coptic.year_end_date(1715) == CommonDate(1715, 13, 6)
    assert Coptic.year_end_date(1716) == CommonDate(1716, 13, 5)
    assert Coptic(1716, 13, 1).quarter() == 4
    assert Coptic(1716, 4, 1).quarter() == 2


def test_egyptian_epochs():
    # The era of Nabonassar starts at JD 1448638, noon
    assert Egyptian.epoch() == Fixed(-272787, Fraction(1, 2))
    assert Egyptian(1, 1, 1).to_fixed() == Fixed(-272787)
    assert Armenian.epoch() == Fixed(201443)
    assert Armenian(1, 1, 1).to_fixed() == Fixed(201443)
    assert Armenian.from_fixed(Julian(552, 7, 11).to_fixed()) == Armenian(1, 1, 1)


def test_wandering_year():
    last = Egyptian(1, 13, 5)
    assert Egyptian.from_fixed(Fixed(last.to_fixed().day + 1)) == Egyptian(2, 1, 1)
    assert Egyptian.from_fixed(Fixed(-272787 + 365 * 100)) == Egyptian(101, 1, 1)
    assert Egyptian(5, 13, 3).complementary() == EgyptianDayUponTheYear.BIRTH_OF_SETH
    assert Egyptian(5, 12, 3).complementary() is None
    assert Egyptian.complementary_count(5) == 5
    assert Armenian.year_end(10) == Armenian(10, 13, 5)
    with pytest.raises(CalendarError) as e:
        Armenian.try_new(1, 13, 6)
    assert e.value.kind is ErrorKind.INVALID_DAY
    # no leap years: every year is exactly 365 days
    assert Egyptian.from_fixed(Fixed(-272787 + 1461 * 365)).year == 1462


def test_roundtrip():
    random.seed(42)
    for _ in range(3000):
        f = Fixed(random.randint(-10**8, 10**8))
        for cls in (Coptic, Ethiopic, Egyptian, Armenian):
            d = cls.from_fixed(f)
            cls.valid_month_day(d.to_common_date())
            assert d.to_fixed() == f
            assert cls.try_from_ordinal(d.to_ordinal()) == d
