"""
altchrono.chronologies.nile
---------------------------
The Coptic and Ethiopic calendars.

Both have twelve months of 30 days followed by a short thirteenth month of
5 days, or 6 in a leap year. A year is leap when ``year % 4 == 3``. The two
calendars differ only in their epoch and era names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from ..core.fields import ChronoField, ValueRange
from .base import BaseChronology
from .eras import CopticEra, EthiopicEra

YMD = Tuple[int, int, int]


class NileChronology(BaseChronology):
    # days between the calendar's epoch and 1970-01-01
    epoch_offset: ClassVar[int] = 0
    min_year: ClassVar[int] = -999_998
    max_year: ClassVar[int] = 999_999

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def months_in_year(self, year: int) -> int:
        return 13

    def length_of_month(self, year: int, month: int) -> int:
        if month == 13:
            return 6 if self.is_leap_year(year) else 5
        return 30

    def length_of_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return (month - 1) * 30 + day

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        return year, (day_of_year - 1) // 30 + 1, (day_of_year - 1) % 30 + 1

    def first_day_of_year(self, year: int) -> int:
        return (year - 1) * 365 + year // 4 - self.epoch_offset

    def from_epoch_day(self, epoch_day: int) -> YMD:
        days = epoch_day + self.epoch_offset
        year = (days * 4 + 1463) // 1461
        day0 = days - ((year - 1) * 365 + year // 4)
        return year, day0 // 30 + 1, day0 % 30 + 1

    def adjust(self, year: int, month: int, day: int, field: ChronoField, value: int) -> Optional[YMD]:
        if field is ChronoField.DAY_OF_YEAR:
            # 366 in a common year clamps to the last epagomenal day
            return self.resolve_previous(year, (value - 1) // 30 + 1, (value - 1) % 30 + 1)
        return None

    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, 5, 30),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 5),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 13),
        }


@dataclass(frozen=True)
class CopticChronology(NileChronology):
    """Calendar of the Coptic church, counted from the Era of the Martyrs (284 AD)."""
    id: ClassVar[str] = "Coptic"
    calendar_type: ClassVar[str] = "coptic"
    eras: ClassVar[Tuple[CopticEra, ...]] = (CopticEra.BEFORE_AM, CopticEra.AM)
    epoch_offset: ClassVar[int] = 615558


@dataclass(frozen=True)
class EthiopicChronology(NileChronology):
    """Calendar of Ethiopia, counted from the Incarnation (8 AD)."""
    id: ClassVar[str] = "Ethiopic"
    calendar_type: ClassVar[str] = "ethiopic"
    eras: ClassVar[Tuple[EthiopicEra, ...]] = (EthiopicEra.BEFORE_INCARNATION, EthiopicEra.INCARNATION)
    epoch_offset: ClassVar[int] = 716367


COPTIC = CopticChronology()
ETHIOPIC = EthiopicChronology()
