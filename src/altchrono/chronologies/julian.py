"""
altchrono.chronologies.julian
-----------------------------
The proleptic Julian calendar: Gregorian month lengths with a leap year
every fourth year and no century exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple

from ..core.fields import ChronoField, ValueRange
from .base import BaseChronology
from .eras import JulianEra

YMD = Tuple[int, int, int]

# days from 0001-01-01 (Julian) to 1970-01-01 (ISO), plus the Julian year-0 shift
DAYS_0001_TO_1970 = 678577 + 40587

# cumulative days before each month in a common year
_MONTH_STARTS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def julian_is_leap(year: int) -> bool:
    return year % 4 == 0


def julian_month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if julian_is_leap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def julian_day_of_year(year: int, month: int, day: int) -> int:
    leap = 1 if (month > 2 and julian_is_leap(year)) else 0
    return _MONTH_STARTS[month - 1] + leap + day


def julian_from_year_day(year: int, day_of_year: int) -> YMD:
    leap = julian_is_leap(year)
    for month in range(12, 0, -1):
        start = _MONTH_STARTS[month - 1] + (1 if (leap and month > 2) else 0)
        if day_of_year > start:
            return year, month, day_of_year - start
    raise ValueError(f"day of year {day_of_year} out of range")


def julian_to_epoch_day(year: int, month: int, day: int) -> int:
    return (year - 1) * 365 + (year - 1) // 4 + julian_day_of_year(year, month, day) - 1 - DAYS_0001_TO_1970


def julian_from_epoch_day(epoch_day: int) -> YMD:
    days = epoch_day + DAYS_0001_TO_1970
    cycle, day_in_cycle = divmod(days, 1461)
    if day_in_cycle == 1460:
        return julian_from_year_day(cycle * 4 + 4, 366)
    year = cycle * 4 + day_in_cycle // 365 + 1
    return julian_from_year_day(year, day_in_cycle % 365 + 1)


@dataclass(frozen=True)
class JulianChronology(BaseChronology):
    id: ClassVar[str] = "Julian"
    calendar_type: ClassVar[str] = "julian"
    eras: ClassVar[Tuple[JulianEra, ...]] = (JulianEra.BC, JulianEra.AD)
    min_year: ClassVar[int] = -999_998
    max_year: ClassVar[int] = 999_999

    def is_leap_year(self, year: int) -> bool:
        return julian_is_leap(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def length_of_month(self, year: int, month: int) -> int:
        return julian_month_length(year, month)

    def length_of_year(self, year: int) -> int:
        return 366 if julian_is_leap(year) else 365

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return julian_day_of_year(year, month, day)

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        return julian_from_year_day(year, day_of_year)

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        return julian_to_epoch_day(year, month, day)

    def from_epoch_day(self, epoch_day: int) -> YMD:
        return julian_from_epoch_day(epoch_day)

    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, 5),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 12),
        }


JULIAN = JulianChronology()
