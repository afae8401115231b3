# tests/test_engine.py
#
# Laws every registered calendar must obey.

import random
from datetime import date, datetime, time

import pytest

import altchrono
from altchrono import (
    CalendarValidationError,
    ChronoField as F,
    ChronoUnit as U,
    ChronologyMismatchError,
    EraMismatchError,
    Period,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from altchrono.chronologies import COPTIC, DISCORDIAN, INTERNATIONAL_FIXED, JULIAN, JulianEra
from altchrono.core.time import date_to_epoch_day

NAMES = altchrono.list_chronologies()
ISO_WEEK_CALENDARS = [n for n in NAMES if n not in ("Discordian", "Ifc")]


def chrono(name):
    return altchrono.get_chronology(name)


@pytest.mark.parametrize("name", NAMES)
def test_epoch_day_round_trip(name):
    c = chrono(name)
    rng = random.Random(name)
    for _ in range(300):
        e = rng.randint(-700_000, 700_000)
        cd = c.date_epoch_day(e)
        assert cd.to_epoch_day() == e
        assert c.date(cd.year, cd.month, cd.day) == cd
        assert c.date_year_day(cd.year, cd.day_of_year) == cd
        assert cd.plus_days(1).to_epoch_day() == e + 1


@pytest.mark.parametrize("name", NAMES)
def test_years_are_contiguous(name):
    c = chrono(name)
    for year in [1700, 1751, 1752, 1753, 1800, 1900] + list(range(1990, 2031)):
        last = c.date_year_day(year, c.length_of_year(year))
        assert last.plus_days(1) == c.date_year_day(year + 1, 1)


@pytest.mark.parametrize("name", [n for n in NAMES if n != "BritishCutover"])
def test_year_length_follows_leap_rule(name):
    c = chrono(name)
    lengths = {True: set(), False: set()}
    for year in range(1, 800):
        lengths[c.is_leap_year(year)].add(c.length_of_year(year))
    assert len(lengths[True]) == 1
    assert len(lengths[False]) == 1
    assert lengths[True] != lengths[False]


@pytest.mark.parametrize("name", ISO_WEEK_CALENDARS)
def test_day_of_week_matches_iso(name):
    c = chrono(name)
    rng = random.Random(name)
    for _ in range(200):
        cd = c.date_epoch_day(rng.randint(-700_000, 700_000))
        assert cd.get(F.DAY_OF_WEEK) == cd.to_iso().isoweekday()


@pytest.mark.parametrize("name", NAMES)
def test_period_round_trip(name):
    c = chrono(name)
    rng = random.Random(name)
    for _ in range(200):
        e = rng.randint(-100_000, 100_000)
        a = c.date_epoch_day(e)
        b = c.date_epoch_day(e + rng.randint(-3000, 3000))
        p = a.until(b)
        assert a.plus(p) == b
        assert a + p == b
        assert a.until(b, U.DAYS) == b.to_epoch_day() - a.to_epoch_day()


@pytest.mark.parametrize("name", NAMES)
def test_unit_arithmetic_inverts(name):
    c = chrono(name)
    rng = random.Random(name)
    for _ in range(100):
        a = c.date_epoch_day(rng.randint(-100_000, 100_000))
        n = rng.randint(-40, 40)
        assert a.plus(n, U.DAYS).minus(n, U.DAYS) == a
        if a.epagomenal is None:
            assert a.plus(n, U.WEEKS).minus(n, U.WEEKS) == a
        later = a.plus(n, U.MONTHS)
        assert abs(a.until(later, U.MONTHS)) <= abs(n)


@pytest.mark.parametrize("name", NAMES)
def test_weeks_until_never_overshoots(name):
    c = chrono(name)
    rng = random.Random("weeks-" + name)
    for _ in range(300):
        e = rng.randint(-100_000, 100_000)
        a = c.date_epoch_day(e)
        b = c.date_epoch_day(e + rng.randint(-800, 800))
        reached = a.plus(a.until(b, U.WEEKS), U.WEEKS)
        assert min(a, b) <= reached <= max(a, b)
        assert abs(b.to_epoch_day() - reached.to_epoch_day()) <= 8


@pytest.mark.parametrize("name", NAMES)
def test_ordering(name):
    c = chrono(name)
    a = c.date_epoch_day(15000)
    b = c.date_epoch_day(15001)
    assert a < b
    assert b > a
    assert a <= a
    assert sorted([b, a]) == [a, b]
    assert len({a, b, c.date_epoch_day(15000)}) == 2


def test_conversions():
    cd = COPTIC.date(1728, 10, 29)
    assert cd.to_iso() == date(2012, 7, 6)
    assert cd.at_time(time(12, 0)) == datetime(2012, 7, 6, 12, 0)
    assert JULIAN.date_from(cd) == JULIAN.date(2012, 6, 23)
    assert altchrono.to_iso(cd) == date(2012, 7, 6)
    assert altchrono.from_iso(date(2012, 7, 6), chronology="Coptic") == cd
    assert altchrono.convert(cd, to="Ifc").to_iso() == date(2012, 7, 6)
    with pytest.raises(TypeError):
        COPTIC.date_from("2012-07-06")


def test_today_agrees_across_calendars():
    a = altchrono.today(chronology="Coptic")
    b = altchrono.today(chronology="Pax")
    assert abs(a.to_epoch_day() - b.to_epoch_day()) <= 1
    assert abs(a.to_epoch_day() - date_to_epoch_day(date.today())) <= 1


def test_chronology_mismatch():
    c = COPTIC.date(1728, 10, 29)
    j = JULIAN.date(2012, 6, 23)
    with pytest.raises(ChronologyMismatchError):
        c.until(j)
    with pytest.raises(ChronologyMismatchError):
        c.until(j, U.DAYS)
    with pytest.raises(ChronologyMismatchError):
        c.plus(Period(JULIAN, 0, 1, 0))
    with pytest.raises(ChronologyMismatchError):
        c < j
    assert c != j


def test_era_mismatch():
    with pytest.raises(EraMismatchError):
        COPTIC.date_era(JulianEra.AD, 1728, 1, 1)
    with pytest.raises(EraMismatchError):
        DISCORDIAN.date_era(JulianEra.AD, 3178, 1, 1)
    assert isinstance(EraMismatchError("x"), TypeError)


def test_unsupported_fields_and_units():
    cd = COPTIC.date(1728, 10, 29)
    with pytest.raises(UnsupportedFieldError):
        cd.get(F.HOUR_OF_DAY)
    with pytest.raises(UnsupportedFieldError):
        cd.range(F.MINUTE_OF_HOUR)
    with pytest.raises(UnsupportedFieldError):
        cd.with_field(F.NANO_OF_DAY, 0)
    with pytest.raises(UnsupportedFieldError):
        chrono("Sym010").date(2014, 5, 26).with_field(F.NANO_OF_DAY, 0)
    with pytest.raises(UnsupportedUnitError):
        cd.plus(1, U.HOURS)
    with pytest.raises(UnsupportedUnitError):
        cd.plus(1, U.FOREVER)
    with pytest.raises(UnsupportedUnitError):
        cd.until(cd, U.HALF_DAYS)
    assert cd.is_supported(F.DAY_OF_MONTH)
    assert not cd.is_supported(F.HOUR_OF_DAY)
    assert cd.is_supported(U.MILLENNIA)
    assert not cd.is_supported(U.FOREVER)


def test_year_multiples():
    cd = JULIAN.date(2000, 2, 29)
    assert cd.plus(1, U.DECADES) == JULIAN.date(2010, 2, 28)
    assert cd.plus(1, U.CENTURIES) == JULIAN.date(2100, 2, 29)
    assert cd.plus(1, U.MILLENNIA) == JULIAN.date(3000, 2, 29)
    assert cd.until(JULIAN.date(3000, 2, 28), U.MILLENNIA) == 0
    with pytest.raises(CalendarValidationError):
        cd.plus(1, U.ERAS)
    assert cd.minus(1, U.ERAS) == JULIAN.date(-1999, 2, 28)


def test_epagomenal_days_are_flagged_only_where_they_exist():
    assert COPTIC.date(1728, 13, 5).epagomenal is None
    assert INTERNATIONAL_FIXED.year_day(2011).epagomenal is not None
    assert DISCORDIAN.st_tibs_day(3178).epagomenal is not None


def test_period_strings():
    assert str(Period(COPTIC)) == "Coptic P0D"
    assert str(Period(JULIAN, 1, -2, 3)) == "Julian P1Y-2M3D"
    assert (-Period(JULIAN, 1, 0, 3)).is_negative()
    assert Period(JULIAN).is_zero()
