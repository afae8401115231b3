"""
altchrono.chronologies.symmetry
-------------------------------
The Symmetry010 and Symmetry454 calendars.

Both split the year into four identical quarters of 91 days and add a leap
week to December in 52 years out of every 293. Symmetry010 uses months of
30, 31 and 30 days per quarter; Symmetry454 uses months of 4, 5 and 4 weeks.
Every year and every quarter starts on a Monday.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple

from ..core.fields import ChronoField, ValueRange
from .base import BaseChronology
from .eras import IsoEra

DAYS_0001_TO_1970 = 719162
LEAP_CYCLE_YEARS = 293
LEAP_CYCLE_LEAPS = 52


def symmetry_is_leap(year: int) -> bool:
    return (52 * year + 146) % 293 < 52


def symmetry_leap_years_before(year: int) -> int:
    return (52 * (year - 1) + 146) // 293


class SymmetryChronology(BaseChronology):
    eras: ClassVar[Tuple[IsoEra, ...]] = (IsoEra.BCE, IsoEra.CE)
    min_year: ClassVar[int] = -1_000_000
    max_year: ClassVar[int] = 1_000_000
    mean_year_length: ClassVar[float] = 364 + 7 * LEAP_CYCLE_LEAPS / LEAP_CYCLE_YEARS

    def is_leap_year(self, year: int) -> bool:
        return symmetry_is_leap(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def length_of_year(self, year: int) -> int:
        return 371 if self.is_leap_year(year) else 364

    def first_day_of_year(self, year: int) -> int:
        return (year - 1) * 364 + symmetry_leap_years_before(year) * 7 - DAYS_0001_TO_1970

    def unchanged_by(self, field: ChronoField, value: int) -> bool:
        # 0 is outside the range of the day, week and month fields and leaves the date alone
        return value == 0 and not self.range(field).is_valid_value(0)


@dataclass(frozen=True)
class Symmetry010Chronology(SymmetryChronology):
    id: ClassVar[str] = "Sym010"
    calendar_type: ClassVar[str] = "sym010"

    def length_of_month(self, year: int, month: int) -> int:
        if month == 12 and self.is_leap_year(year):
            return 37
        return 31 if month % 3 == 2 else 30

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return 30 * (month - 1) + month // 3 + day

    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, 30, 37),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 364, 371),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 5, 6),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 52, 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 12),
        }


@dataclass(frozen=True)
class Symmetry454Chronology(SymmetryChronology):
    id: ClassVar[str] = "Sym454"
    calendar_type: ClassVar[str] = "sym454"

    def length_of_month(self, year: int, month: int) -> int:
        if month == 12 and self.is_leap_year(year):
            return 35
        return 35 if month % 3 == 2 else 28

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return 28 * (month - 1) + 7 * (month // 3) + day

    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, 28, 35),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 364, 371),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, 5),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 52, 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 12),
        }


SYMMETRY010 = Symmetry010Chronology()
SYMMETRY454 = Symmetry454Chronology()
