"""
altchrono.chronologies.pax
--------------------------
The Pax calendar.

Thirteen months of 28 days. A leap year inserts the 7-day month *Pax*
before the last month, so December becomes month 14. Years ending in 99,
years ending in 00 (except multiples of 400) and years whose last two digits
are divisible by 6 are leap years.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Tuple

from ..core.fields import ChronoField, ValueRange
from ..core.time import trunc_mod
from .base import BaseChronology, YMD
from .eras import PaxEra

DAYS_IN_MONTH = 28
DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 13
DAYS_PAX_0001_TO_ISO_1970 = 719163
LEAP_YEARS_PER_400 = 71


def pax_is_leap(year: int) -> bool:
    last_two = trunc_mod(year, 100)
    return abs(last_two) == 99 or (trunc_mod(year, 400) != 0 and (last_two == 0 or last_two % 6 == 0))


def _prefix_counts() -> List[int]:
    counts = [0]
    for year in range(1, 400):
        counts.append(counts[-1] + (1 if pax_is_leap(year) else 0))
    return counts


_LEAPS_UP_TO = _prefix_counts()


def _count_leaps(n: int) -> int:
    """Leap years in 1..n, n >= 0."""
    cycles, rem = divmod(n, 400)
    return cycles * LEAP_YEARS_PER_400 + _LEAPS_UP_TO[rem]


def pax_leap_years_before(year: int) -> int:
    # leap years are mirrored around year 0, which is not one
    if year >= 1:
        return _count_leaps(year - 1)
    return -_count_leaps(-year)


@dataclass(frozen=True)
class PaxChronology(BaseChronology):
    id: ClassVar[str] = "Pax"
    calendar_type: ClassVar[str] = "pax"
    eras: ClassVar[Tuple[PaxEra, ...]] = (PaxEra.BCE, PaxEra.CE)
    fixed_months_per_year: ClassVar[bool] = False
    min_year: ClassVar[int] = -999_999
    max_year: ClassVar[int] = 1_000_000
    mean_year_length: ClassVar[float] = 364 + DAYS_IN_WEEK * LEAP_YEARS_PER_400 / 400

    def is_leap_year(self, year: int) -> bool:
        return pax_is_leap(year)

    def months_in_year(self, year: int) -> int:
        return MONTHS_IN_YEAR + 1 if self.is_leap_year(year) else MONTHS_IN_YEAR

    def length_of_month(self, year: int, month: int) -> int:
        if month == MONTHS_IN_YEAR and self.is_leap_year(year):
            return DAYS_IN_WEEK
        return DAYS_IN_MONTH

    def length_of_year(self, year: int) -> int:
        return 371 if self.is_leap_year(year) else 364

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return (month - 1) * DAYS_IN_MONTH - (DAYS_IN_MONTH - DAYS_IN_WEEK if month == 14 else 0) + day

    def first_day_of_year(self, year: int) -> int:
        return (year - 1) * 364 + pax_leap_years_before(year) * DAYS_IN_WEEK - DAYS_PAX_0001_TO_ISO_1970

    # ------------------------------------------------------------------
    # Months per year vary, so proleptic months need the leap count
    # ------------------------------------------------------------------
    def _first_proleptic_month(self, year: int) -> int:
        return year * MONTHS_IN_YEAR + pax_leap_years_before(year)

    def proleptic_month(self, year: int, month: int, day: int) -> int:
        return self._first_proleptic_month(year) + month - 1

    def from_proleptic_month(self, proleptic_month: int) -> Tuple[int, int]:
        year = int(proleptic_month // (MONTHS_IN_YEAR + LEAP_YEARS_PER_400 / 400))
        while self._first_proleptic_month(year) > proleptic_month:
            year -= 1
        while self._first_proleptic_month(year + 1) <= proleptic_month:
            year += 1
        return year, proleptic_month - self._first_proleptic_month(year) + 1

    def resolve_previous(self, year: int, month: int, day: int) -> YMD:
        self.check_year(year)
        month = min(month, self.months_in_year(year))
        return year, month, min(day, self.length_of_month(year, month))

    def move_to_year(self, year: int, month: int, day: int, new_year: int) -> YMD:
        # December keeps being December when the leap month appears
        if month == MONTHS_IN_YEAR and not self.is_leap_year(year) and self.is_leap_year(new_year):
            month = MONTHS_IN_YEAR + 1
        return self.resolve_previous(new_year, month, day)

    def year_key(self, year: int, month: int, day: int) -> int:
        # months are counted in halves so Pax sits between November and December
        if month <= 12:
            slot = month * 2
        elif month == MONTHS_IN_YEAR and self.is_leap_year(year):
            slot = 25
        else:
            slot = 26
        return slot * 256 + day

    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, 7, 28),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 364, 371),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 4),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 52, 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 13, 14),
        }

    def date_range(self, year: int, month: int, day: int, field: ChronoField) -> ValueRange:
        if field is ChronoField.MONTH_OF_YEAR:
            return ValueRange.of(1, self.months_in_year(year))
        return super().date_range(year, month, day, field)


PAX = PaxChronology()
