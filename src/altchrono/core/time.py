from __future__ import annotations

from datetime import date
from typing import Tuple

EPOCH_JDN = 2440588            # JDN of 1970-01-01
DAYS_PER_400_YEARS = 146097


def _jdn(y: int, m: int, day: int) -> int:
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def _ymd(jdn: int) -> Tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return _jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    return date(*_ymd(jdn))


def iso_to_epoch_day(y: int, m: int, d: int) -> int:
    """Days since 1970-01-01 of a proleptic Gregorian date, for any integer year."""
    cycles, yy = divmod(y, 400)
    return _jdn(yy, m, d) - EPOCH_JDN + cycles * DAYS_PER_400_YEARS


def iso_from_epoch_day(epoch_day: int) -> Tuple[int, int, int]:
    """Inverse of iso_to_epoch_day."""
    cycles, rem = divmod(epoch_day, DAYS_PER_400_YEARS)
    y, m, d = _ymd(rem + EPOCH_JDN)
    return y + 400 * cycles, m, d


def date_to_epoch_day(d: date) -> int:
    return to_jdn(d) - EPOCH_JDN


def date_from_epoch_day(epoch_day: int) -> date:
    return from_jdn(epoch_day + EPOCH_JDN)


def iso_is_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def iso_month_length(y: int, m: int) -> int:
    if m == 2:
        return 29 if iso_is_leap(y) else 28
    return 30 if m in (4, 6, 9, 11) else 31


def iso_day_of_week(epoch_day: int) -> int:
    """ISO day-of-week (Monday=1 .. Sunday=7); 1970-01-01 was a Thursday."""
    return (epoch_day + 3) % 7 + 1


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * trunc_div(a, b)
