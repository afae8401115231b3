# tests/test_cutover.py

from datetime import date

import pytest

from altchrono import (
    CalendarValidationError,
    ChronoField as F,
    ChronoUnit as U,
    ChronologyMismatchError,
    MissingConfigurationError,
    Period,
    ValueRange,
)
from altchrono.chronologies import BRITISH, JULIAN, CutoverChronology

VATICAN = CutoverChronology(date(1582, 10, 15))


def bc(y, m, d):
    return BRITISH.date(y, m, d)


@pytest.mark.parametrize("ymd,iso", [
    ((1, 1, 3), date(1, 1, 1)),
    ((1700, 2, 29), date(1700, 3, 11)),
    ((1752, 9, 2), date(1752, 9, 13)),
    ((1752, 9, 14), date(1752, 9, 14)),
    ((1800, 2, 28), date(1800, 2, 28)),
    ((2012, 7, 5), date(2012, 7, 5)),
])
def test_samples(ymd, iso):
    cd = bc(*ymd)
    assert cd.to_iso() == iso
    assert BRITISH.date_from(iso) == cd


def test_gap_is_normalized_forward():
    assert bc(1752, 9, 3) == bc(1752, 9, 14)
    assert bc(1752, 9, 13) == bc(1752, 9, 24)
    assert bc(1752, 9, 3).day == 14
    assert BRITISH.date_from(JULIAN.date(1752, 9, 3)) == bc(1752, 9, 14)


def test_lengths():
    assert bc(1752, 9, 1).length_of_month() == 19
    assert bc(1752, 1, 1).length_of_year() == 355
    assert bc(1700, 2, 1).length_of_month() == 29
    assert bc(1800, 2, 1).length_of_month() == 28
    assert BRITISH.is_leap_year(1700)
    assert not BRITISH.is_leap_year(1800)
    assert bc(1752, 9, 1).range(F.DAY_OF_MONTH) == ValueRange.of(1, 30)
    assert BRITISH.range(F.DAY_OF_YEAR).min_largest == 1
    assert BRITISH.range(F.DAY_OF_YEAR).max_smallest == 355


def test_bad_dates():
    with pytest.raises(CalendarValidationError):
        bc(1800, 2, 29)
    with pytest.raises(CalendarValidationError):
        bc(1752, 9, 31)
    with pytest.raises(CalendarValidationError):
        BRITISH.date_year_day(2001, 366)
    with pytest.raises(CalendarValidationError):
        BRITISH.date_year_day(1752, 356)
    assert BRITISH.date_year_day(1752, 247) == bc(1752, 9, 14)


def test_get_fields():
    cd = bc(1752, 9, 14)
    assert cd.get(F.DAY_OF_WEEK) == 4
    assert cd.get(F.DAY_OF_YEAR) == 247
    assert cd.get(F.ALIGNED_DAY_OF_WEEK_IN_YEAR) == 2
    assert cd.get(F.ALIGNED_WEEK_OF_YEAR) == 36
    assert cd.get(F.ALIGNED_DAY_OF_WEEK_IN_MONTH) == 3
    assert bc(1752, 9, 2).get(F.DAY_OF_WEEK) == 3


@pytest.mark.parametrize("start,field,value,expected", [
    ((1752, 9, 2), F.DAY_OF_WEEK, 1, (1752, 8, 31)),
    ((1752, 9, 2), F.DAY_OF_MONTH, 3, (1752, 9, 14)),
    ((1752, 9, 2), F.DAY_OF_MONTH, 13, (1752, 9, 24)),
    ((1752, 9, 2), F.DAY_OF_YEAR, 356, (1753, 1, 1)),
    ((1752, 9, 2), F.ALIGNED_WEEK_OF_MONTH, 4, (1752, 10, 4)),
    ((1752, 9, 2), F.ALIGNED_WEEK_OF_YEAR, 1, (1752, 1, 1)),
    ((1752, 9, 2), F.ALIGNED_WEEK_OF_YEAR, 52, (1753, 1, 3)),
    ((1752, 8, 4), F.MONTH_OF_YEAR, 9, (1752, 9, 15)),
    ((1751, 9, 4), F.YEAR, 1752, (1752, 9, 15)),
    ((2012, 2, 29), F.YEAR, 2011, (2011, 2, 28)),
    ((2014, 5, 26), F.ERA, 0, (-2013, 5, 26)),
])
def test_with_field(start, field, value, expected):
    assert bc(*start).with_field(field, value) == bc(*expected)


def test_plus():
    assert bc(1752, 9, 2).plus(1, U.DAYS) == bc(1752, 9, 14)
    assert bc(1752, 9, 14).minus(1, U.DAYS) == bc(1752, 9, 2)
    assert bc(1752, 9, 2).plus(1, U.WEEKS) == bc(1752, 9, 20)
    assert bc(1752, 8, 12).plus(1, U.MONTHS) == bc(1752, 9, 23)
    assert bc(1752, 9, 2) + Period(BRITISH, 0, 1, 3) == bc(1752, 10, 5)
    assert bc(1752, 10, 12) - Period(BRITISH, 0, 1, 0) == bc(1752, 9, 23)


@pytest.mark.parametrize("start,end,unit,expected", [
    ((1752, 9, 1), (1752, 9, 14), U.DAYS, 2),
    ((1752, 9, 1), (1752, 9, 19), U.WEEKS, 1),
    ((1752, 9, 2), (1752, 9, 19), U.WEEKS, 0),
    ((1752, 9, 2), (1752, 10, 1), U.MONTHS, 0),
    ((1752, 9, 2), (1752, 10, 2), U.MONTHS, 1),
    ((1752, 9, 14), (1752, 10, 13), U.MONTHS, 0),
    ((2014, 5, 26), (2015, 5, 25), U.YEARS, 0),
    ((2014, 5, 26), (2024, 5, 26), U.DECADES, 1),
    ((-2013, 5, 26), (2014, 5, 26), U.ERAS, 1),
])
def test_until_unit(start, end, unit, expected):
    assert bc(*start).until(bc(*end), unit) == expected


@pytest.mark.parametrize("start,end,expected", [
    ((1752, 7, 2), (1752, 9, 1), (0, 1, 30)),
    ((1752, 7, 2), (1752, 9, 14), (0, 2, 1)),
    ((1752, 7, 4), (1752, 9, 14), (0, 1, 30)),
    ((1752, 8, 16), (1752, 9, 14), (0, 0, 18)),
    ((1752, 8, 16), (1752, 9, 16), (0, 1, 0)),
    ((1752, 9, 14), (1752, 8, 15), (0, 0, -19)),
    ((1752, 9, 14), (1752, 7, 13), (0, -2, -1)),
    ((1752, 9, 2), (1752, 10, 1), (0, 0, 18)),
])
def test_until_period(start, end, expected):
    a, b = bc(*start), bc(*end)
    p = a.until(b)
    assert tuple(p) == expected
    assert a.plus(p) == b


def test_vatican_cutover():
    assert VATICAN.date(1582, 10, 5) == VATICAN.date(1582, 10, 15)
    assert VATICAN.date(1582, 10, 4).plus(1, U.DAYS) == VATICAN.date(1582, 10, 15)
    assert VATICAN.date(1582, 10, 1).length_of_month() == 21
    assert VATICAN.cutover_days == 10
    assert BRITISH.cutover_days == 11
    assert VATICAN.id == "Cutover[1582-10-15]"
    assert BRITISH.id == "BritishCutover"
    assert VATICAN.info()["cutover"] == "1582-10-15"


def test_configuration_is_part_of_equality():
    assert CutoverChronology(date(1752, 9, 14)) == BRITISH
    assert VATICAN != BRITISH
    with pytest.raises(ChronologyMismatchError):
        VATICAN.date(1600, 1, 1).until(bc(1600, 1, 1))


def test_bad_configuration():
    with pytest.raises(MissingConfigurationError):
        CutoverChronology()
    with pytest.raises(CalendarValidationError):
        CutoverChronology(date(1500, 1, 1))
    with pytest.raises(CalendarValidationError):
        CutoverChronology(date(2400, 1, 1))
    with pytest.raises(TypeError):
        CutoverChronology("1752-09-14")
