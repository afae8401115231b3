# tests/test_international_fixed.py

from datetime import date

import pytest

from altchrono import CalendarValidationError, ChronoField as F, ChronoUnit as U
from altchrono.chronologies import INTERNATIONAL_FIXED as IFC, EpagomenalDay


def ifc(y, m, d):
    return IFC.date(y, m, d)


@pytest.mark.parametrize("ymd,iso", [
    ((1, 1, 1), date(1, 1, 1)),
    ((1, 13, 28), date(1, 12, 30)),
    ((1, 0, 0), date(1, 12, 31)),
    ((2012, 6, 16), date(2012, 6, 4)),
    ((2012, -1, -1), date(2012, 6, 17)),
    ((2012, 7, 1), date(2012, 6, 18)),
    ((2013, 7, 1), date(2013, 6, 18)),
])
def test_samples(ymd, iso):
    cd = ifc(*ymd)
    assert cd.to_iso() == iso
    assert IFC.date_from(iso) == cd


def test_special_days():
    assert IFC.year_day(2012) == ifc(2012, 0, 0)
    assert IFC.leap_day(2012) == ifc(2012, -1, -1)
    assert IFC.year_day(2012).epagomenal is EpagomenalDay.YEAR_DAY
    assert IFC.leap_day(2012).epagomenal is EpagomenalDay.LEAP_DAY
    assert ifc(2012, 6, 28).epagomenal is None
    assert str(IFC.leap_day(2012)) == "Ifc CE 2012 Leap Day"
    assert str(IFC.year_day(2012)) == "Ifc CE 2012 Year Day"
    assert str(ifc(2012, 6, 16)) == "Ifc CE 2012-06-16"
    assert IFC.year_day(2012).day_of_year == 366
    assert IFC.leap_day(2012).day_of_year == 169


def test_bad_dates():
    with pytest.raises(CalendarValidationError):
        ifc(2013, -1, -1)
    with pytest.raises(CalendarValidationError):
        ifc(2012, 13, 29)
    with pytest.raises(CalendarValidationError):
        ifc(2012, 14, 1)
    with pytest.raises(CalendarValidationError):
        ifc(0, 1, 1)
    with pytest.raises(CalendarValidationError):
        IFC.date_year_day(2013, 366)


def test_week_fields():
    assert ifc(2012, 1, 1).get(F.DAY_OF_WEEK) == 7
    assert ifc(2012, 6, 23).get(F.DAY_OF_WEEK) == 1
    assert ifc(2012, 13, 28).get(F.DAY_OF_WEEK) == 6
    assert IFC.leap_day(2012).get(F.DAY_OF_WEEK) == 0
    assert IFC.year_day(2012).get(F.ALIGNED_WEEK_OF_YEAR) == 0
    assert ifc(2012, 13, 28).get(F.ALIGNED_WEEK_OF_YEAR) == 52
    assert ifc(2012, 7, 1).get(F.DAY_OF_YEAR) == 170
    assert IFC.leap_day(2012).range(F.DAY_OF_MONTH).minimum == -1
    assert IFC.year_day(2012).range(F.ALIGNED_WEEK_OF_MONTH).maximum == 0


def test_weeks_skip_special_days():
    assert ifc(2012, 6, 28).plus(1, U.WEEKS) == ifc(2012, 7, 7)
    assert ifc(2012, 13, 28).plus(1, U.WEEKS) == ifc(2013, 1, 7)
    assert ifc(2013, 1, 7).minus(1, U.WEEKS) == ifc(2012, 13, 28)


# a special day counts as the day before it going forward, the day after it going back
@pytest.mark.parametrize("start,weeks,expected", [
    ((2012, -1, -1), 1, (2012, 7, 7)),
    ((2012, -1, -1), -1, (2012, 6, 22)),
    ((2012, 0, 0), 1, (2013, 1, 7)),
    ((2012, 0, 0), -1, (2012, 13, 22)),
    ((2011, 0, 0), 52, (2012, 13, 28)),
    ((2012, -1, -1), 52, (2013, 6, 28)),
])
def test_plus_weeks_from_special_days(start, weeks, expected):
    assert ifc(*start).plus(weeks, U.WEEKS) == ifc(*expected)


@pytest.mark.parametrize("start,end,weeks", [
    ((2012, 6, 28), (2012, -1, -1), 0),
    ((2012, -1, -1), (2012, 7, 7), 1),
    ((2012, -1, -1), (2012, 7, 6), 0),
    ((2012, -1, -1), (2012, 6, 22), -1),
    ((2012, -1, -1), (2012, 6, 23), 0),
    ((2012, 7, 7), (2012, -1, -1), 0),
    ((2012, 7, 8), (2012, -1, -1), -1),
    ((2012, 6, 21), (2012, -1, -1), 1),
    ((2012, 0, 0), (2013, 1, 7), 1),
    ((2011, 0, 0), (2012, 0, 0), 52),
    ((2012, 0, 0), (2011, 0, 0), -52),
    ((2012, 1, 1), (2012, 13, 28), 51),
])
def test_weeks_until_across_special_days(start, end, weeks):
    assert ifc(*start).until(ifc(*end), U.WEEKS) == weeks


def test_weeks_until_then_plus_stays_inside():
    start, end = ifc(2117, 11, 20), ifc(2199, 2, 15)
    weeks = start.until(end, U.WEEKS)
    assert weeks == 4227
    assert start.plus(weeks, U.WEEKS) == ifc(2199, 2, 13)
    for a, b in [(IFC.year_day(2011), IFC.year_day(2012)),
                 (IFC.leap_day(2012), ifc(2012, 6, 20)),
                 (ifc(2012, 7, 6), IFC.leap_day(2012)),
                 (IFC.year_day(2012), IFC.leap_day(2016))]:
        for x, y in ((a, b), (b, a)):
            reached = x.plus(x.until(y, U.WEEKS), U.WEEKS)
            assert min(x, y) <= reached <= max(x, y)


def test_leap_day_arithmetic():
    leap = IFC.leap_day(2012)
    assert leap.plus(1, U.DAYS) == ifc(2012, 7, 1)
    assert leap.plus(1, U.MONTHS) == ifc(2012, 7, 28)
    assert leap.plus(1, U.YEARS) == ifc(2013, 6, 28)
    assert leap.plus(4, U.YEARS) == IFC.leap_day(2016)
    assert ifc(2012, 5, 28).plus(1, U.MONTHS) == ifc(2012, 6, 28)


def test_year_day_arithmetic():
    yd = IFC.year_day(2012)
    assert yd.plus(1, U.YEARS) == IFC.year_day(2013)
    assert yd.plus(1, U.DAYS) == ifc(2013, 1, 1)
    assert yd.plus(1, U.MONTHS) == ifc(2013, 1, 28)
    assert ifc(2012, 12, 28).plus(1, U.MONTHS) == ifc(2012, 13, 28)


def test_with_field():
    assert ifc(2012, 3, 5).with_field(F.DAY_OF_MONTH, 0) == IFC.year_day(2012)
    assert ifc(2012, 3, 5).with_field(F.MONTH_OF_YEAR, -1) == IFC.leap_day(2012)
    with pytest.raises(CalendarValidationError):
        ifc(2013, 3, 5).with_field(F.DAY_OF_MONTH, -1)
    assert IFC.leap_day(2012).with_field(F.DAY_OF_WEEK, 1) == ifc(2012, 6, 23)
    assert IFC.leap_day(2012).with_field(F.DAY_OF_WEEK, 0) == IFC.leap_day(2012)
    assert ifc(2012, 3, 5).with_field(F.DAY_OF_WEEK, 7) == ifc(2012, 3, 1)
    assert ifc(2012, 3, 5).with_field(F.ALIGNED_WEEK_OF_MONTH, 4) == ifc(2012, 3, 26)
    assert ifc(2012, 3, 5).with_field(F.ALIGNED_WEEK_OF_YEAR, 52) == ifc(2012, 13, 26)
    assert IFC.year_day(2012).with_field(F.MONTH_OF_YEAR, 2) == ifc(2012, 2, 28)
    assert ifc(2012, 3, 5).with_field(F.DAY_OF_YEAR, 169) == IFC.leap_day(2012)


def test_until():
    leap = IFC.leap_day(2012)
    assert ifc(2012, 6, 28).until(leap, U.MONTHS) == 0
    assert leap.until(ifc(2012, 7, 28), U.MONTHS) == 0
    assert ifc(2012, 6, 1).until(ifc(2012, 7, 1), U.MONTHS) == 1
    assert leap.until(IFC.leap_day(2016), U.YEARS) == 4
    assert IFC.year_day(2012).until(IFC.year_day(2013), U.YEARS) == 1
    p = ifc(2012, 2, 10).until(leap)
    assert ifc(2012, 2, 10).plus(p) == leap


def test_single_era():
    assert ifc(2012, 1, 1).get(F.ERA) == 1
    assert ifc(2012, 1, 1).year_of_era == 2012
    assert IFC.range(F.ERA).maximum == 1
