# tests/test_symmetry.py

from datetime import date

import pytest

from altchrono import CalendarValidationError, ChronoField as F, ChronoUnit as U, Period
from altchrono.chronologies import SYMMETRY010 as SYM010, SYMMETRY454 as SYM454


@pytest.mark.parametrize("ymd,iso", [
    ((1, 1, 1), date(1, 1, 1)),
    ((1970, 1, 4), date(1970, 1, 1)),
    ((1999, 12, 29), date(2000, 1, 1)),
    ((2000, 1, 1), date(2000, 1, 3)),
])
def test_sym010_samples(ymd, iso):
    cd = SYM010.date(*ymd)
    assert cd.to_iso() == iso
    assert SYM010.date_from(iso) == cd


def test_sym454_samples():
    assert SYM454.date(1, 1, 1).to_iso() == date(1, 1, 1)
    assert SYM454.date(2000, 1, 1).to_iso() == date(2000, 1, 3)
    assert SYM454.date(1999, 12, 26).to_iso() == date(1999, 12, 31)
    assert SYM454.date_from(date(2000, 1, 3)) == SYM454.date(2000, 1, 1)


def test_same_year_boundaries():
    for year in (1, 1999, 2009, 2010, 2400):
        assert SYM010.date(year, 1, 1).to_epoch_day() == SYM454.date(year, 1, 1).to_epoch_day()


def test_leap_years():
    assert not SYM010.is_leap_year(1999)
    assert SYM010.is_leap_year(2009)
    assert SYM010.date(2009, 12, 37).plus(1, U.DAYS) == SYM010.date(2010, 1, 1)
    assert SYM454.date(2009, 12, 35).plus(1, U.DAYS) == SYM454.date(2010, 1, 1)
    with pytest.raises(CalendarValidationError):
        SYM010.date(2010, 12, 31)
    with pytest.raises(CalendarValidationError):
        SYM454.date(2010, 12, 29)
    leaps = [y for y in range(1, 294) if SYM010.is_leap_year(y)]
    assert len(leaps) == 52


def test_lengths():
    assert [SYM010.length_of_month(2010, m) for m in range(1, 13)] == [30, 31, 30] * 4
    assert [SYM454.length_of_month(2010, m) for m in range(1, 13)] == [28, 35, 28] * 4
    assert SYM010.length_of_year(2009) == 371
    assert SYM454.length_of_year(2010) == 364


def test_every_year_and_quarter_starts_on_monday():
    for year in range(1995, 2015):
        for month in (1, 4, 7, 10):
            assert SYM010.date(year, month, 1).get(F.DAY_OF_WEEK) == 1
            assert SYM454.date(year, month, 1).get(F.DAY_OF_WEEK) == 1


def test_day_of_year():
    assert SYM010.date(2010, 3, 1).day_of_year == 62
    assert SYM010.date(2010, 12, 30).day_of_year == 364
    assert SYM454.date(2010, 3, 1).day_of_year == 64
    assert SYM454.date_year_day(2010, 64) == SYM454.date(2010, 3, 1)


def test_arithmetic():
    assert SYM010.date(2010, 2, 31).plus(1, U.MONTHS) == SYM010.date(2010, 3, 30)
    assert SYM010.date(2009, 12, 37).plus(1, U.YEARS) == SYM010.date(2010, 12, 30)
    assert SYM454.date(2010, 1, 28).plus(1, U.MONTHS) == SYM454.date(2010, 2, 28)
    assert SYM010.date(2010, 1, 1) + Period(SYM010, 1, 2, 3) == SYM010.date(2011, 3, 4)
    a, b = SYM454.date(2009, 11, 30), SYM454.date(2010, 2, 3)
    p = a.until(b)
    assert tuple(p) == (0, 2, 3)
    assert a.plus(p) == b


def test_strings():
    assert str(SYM010.date(2010, 2, 31)) == "Sym010 CE 2010-02-31"
    assert str(SYM454.date(0, 1, 1)) == "Sym454 BCE 1-01-01"


@pytest.mark.parametrize("chrono", [SYM010, SYM454])
@pytest.mark.parametrize("field", [F.DAY_OF_WEEK, F.ALIGNED_WEEK_OF_MONTH, F.ALIGNED_WEEK_OF_YEAR,
                                   F.DAY_OF_MONTH, F.MONTH_OF_YEAR])
def test_with_field_zero_keeps_date(chrono, field):
    cd = chrono.date(2014, 5, 26)
    assert cd.with_field(field, 0) == cd


def test_with_field_zero_only_where_out_of_range():
    cd = SYM010.date(2014, 5, 26)
    assert cd.with_field(F.YEAR, 0) == SYM010.date(0, 5, 26)
    with pytest.raises(CalendarValidationError):
        cd.with_field(F.DAY_OF_WEEK, 8)
    with pytest.raises(CalendarValidationError):
        SYM454.date(2014, 5, 26).with_field(F.DAY_OF_MONTH, -1)
