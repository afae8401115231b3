# tests/test_time.py

import random
from datetime import date, timedelta

import pytest

from altchrono.core import time as t


def test_epoch_day_matches_ordinal():
    random.seed(42)
    epoch = date(1970, 1, 1).toordinal()
    for _ in range(5000):
        d = date(1, 1, 1) + timedelta(days=random.randint(0, 3_652_058))
        e = t.date_to_epoch_day(d)
        assert e == d.toordinal() - epoch
        assert t.date_from_epoch_day(e) == d
        assert t.iso_to_epoch_day(d.year, d.month, d.day) == e


def test_iso_roundtrip_far_years():
    """Proleptic years outside datetime's range still round-trip."""
    random.seed(42)
    for _ in range(2000):
        e = random.randint(-400_000_000, 400_000_000)
        y, m, d = t.iso_from_epoch_day(e)
        assert t.iso_to_epoch_day(y, m, d) == e
        assert 1 <= d <= t.iso_month_length(y, m)


def test_known_epochs():
    assert t.iso_to_epoch_day(1970, 1, 1) == 0
    assert t.iso_to_epoch_day(0, 12, 31) == -719163
    assert t.iso_from_epoch_day(-1) == (1969, 12, 31)
    assert t.to_jdn(date(2000, 1, 1)) == 2451545
    assert t.from_jdn(2440588) == date(1970, 1, 1)


def test_iso_day_of_week():
    assert t.iso_day_of_week(0) == 4  # Thursday
    assert t.iso_day_of_week(t.date_to_epoch_day(date(2012, 7, 6))) == 5


@pytest.mark.parametrize("a,b,q,r", [
    (7, 2, 3, 1),
    (-7, 2, -3, -1),
    (7, -2, -3, 1),
    (-7, -2, 3, -1),
    (0, 5, 0, 0),
])
def test_trunc_div_mod(a, b, q, r):
    assert t.trunc_div(a, b) == q
    assert t.trunc_mod(a, b) == r


def test_leap_and_lengths():
    assert t.iso_is_leap(2000)
    assert not t.iso_is_leap(1900)
    assert t.iso_is_leap(-4)
    assert t.iso_month_length(2012, 2) == 29
    assert t.iso_month_length(2011, 2) == 28
    assert t.iso_month_length(2011, 9) == 30
