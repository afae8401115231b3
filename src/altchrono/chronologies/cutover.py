"""
altchrono.chronologies.cutover
------------------------------
Hybrid Julian/Gregorian calendars.

Dates before the cutover follow the Julian rules and dates on or after it the
Gregorian rules. The days skipped by the switch do not exist: a date inside
the gap is moved forward by the length of the gap, so the Julian
``1752-09-03`` of the British calendar is the Gregorian ``1752-09-14``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import cached_property
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..core.errors import CalendarValidationError, MissingConfigurationError
from ..core.fields import ChronoField, ValueRange
from ..core.time import date_to_epoch_day, iso_from_epoch_day, iso_is_leap, iso_month_length, iso_to_epoch_day
from .base import BaseChronology, _ceil_div
from .eras import JulianEra
from .julian import julian_from_epoch_day, julian_is_leap, julian_month_length, julian_to_epoch_day

YMD = Tuple[int, int, int]

EARLIEST_CUTOVER = date(1582, 1, 1)
LATEST_CUTOVER = date(2400, 1, 1)
BRITISH_CUTOVER = date(1752, 9, 14)


@dataclass(frozen=True)
class CutoverChronology(BaseChronology):
    """
    Julian calendar up to ``cutover`` (exclusive), Gregorian from it onwards.

    ``cutover`` is the first Gregorian day, as a ``datetime.date``.
    """
    cutover: Optional[date] = None

    eras: ClassVar[Tuple[JulianEra, ...]] = (JulianEra.BC, JulianEra.AD)
    min_year: ClassVar[int] = -999_998
    max_year: ClassVar[int] = 999_999

    def __post_init__(self) -> None:
        if self.cutover is None:
            raise MissingConfigurationError("CutoverChronology requires a cutover date")
        if not isinstance(self.cutover, date):
            raise TypeError(f"cutover must be a datetime.date, got {type(self.cutover)}")
        if not EARLIEST_CUTOVER <= self.cutover < LATEST_CUTOVER:
            raise CalendarValidationError(
                f"Cutover date must be between {EARLIEST_CUTOVER} and {LATEST_CUTOVER}, got {self.cutover}"
            )

    @property
    def id(self) -> str:  # type: ignore[override]
        if self.cutover == BRITISH_CUTOVER:
            return "BritishCutover"
        return f"Cutover[{self.cutover.isoformat()}]"

    @property
    def calendar_type(self) -> str:  # type: ignore[override]
        return "britishcutover" if self.cutover == BRITISH_CUTOVER else "cutover"

    @cached_property
    def cutover_epoch_day(self) -> int:
        return date_to_epoch_day(self.cutover)

    @cached_property
    def cutover_julian(self) -> YMD:
        """Julian date of the first Gregorian day; Julian dates from here on fall into the gap or later."""
        return julian_from_epoch_day(self.cutover_epoch_day)

    @cached_property
    def cutover_days(self) -> int:
        """Number of days skipped by the switch."""
        y, m, d = self.cutover_julian
        return julian_to_epoch_day(y, m, d) - iso_to_epoch_day(y, m, d)

    # ------------------------------------------------------------------
    # Kernel
    # ------------------------------------------------------------------
    def is_leap_year(self, year: int) -> bool:
        if year <= self.cutover.year:
            return julian_is_leap(year)
        return iso_is_leap(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def nominal_length_of_month(self, year: int, month: int) -> int:
        """Month length before removing the gap, used to validate days."""
        if year <= self.cutover.year:
            return julian_month_length(year, month)
        return iso_month_length(year, month)

    def _month_start(self, year: int, month: int) -> int:
        return self.to_epoch_day(year, month, 1)

    def length_of_month(self, year: int, month: int) -> int:
        if month == 12:
            return self._month_start(year + 1, 1) - self._month_start(year, 12)
        return self._month_start(year, month + 1) - self._month_start(year, month)

    def first_day_of_year(self, year: int) -> int:
        return self.to_epoch_day(year, 1, 1)

    def length_of_year(self, year: int) -> int:
        return self.first_day_of_year(year + 1) - self.first_day_of_year(year)

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.to_epoch_day(year, month, day) - self.first_day_of_year(year) + 1

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        return self.from_epoch_day(self.first_day_of_year(year) + day_of_year - 1)

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        c = self.cutover
        if (year, month, day) < (c.year, c.month, c.day):
            return julian_to_epoch_day(year, month, day)
        return iso_to_epoch_day(year, month, day)

    def from_epoch_day(self, epoch_day: int) -> YMD:
        if epoch_day < self.cutover_epoch_day:
            return julian_from_epoch_day(epoch_day)
        return iso_from_epoch_day(epoch_day)

    def check_date(self, year: int, month: int, day: int) -> None:
        self.check_year(year)
        if not 1 <= month <= 12:
            raise CalendarValidationError(
                f"Invalid month {month} for {self.id} year {year}", field=ChronoField.MONTH_OF_YEAR
            )
        if not 1 <= day <= self.nominal_length_of_month(year, month):
            raise CalendarValidationError(
                f"Invalid day {day} for {self.id} {year}/{month}", field=ChronoField.DAY_OF_MONTH
            )

    def normalize(self, year: int, month: int, day: int) -> YMD:
        return self.from_epoch_day(self.to_epoch_day(year, month, day))

    def resolve_previous(self, year: int, month: int, day: int) -> YMD:
        self.check_year(year)
        return self.normalize(year, month, min(day, self.nominal_length_of_month(year, month)))

    def position_in_month(self, year: int, month: int, day: int) -> int:
        return self.to_epoch_day(year, month, day) - self._month_start(year, month) + 1

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------
    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        c = self.cutover
        short_year = self.length_of_year(c.year)
        short_month = self.length_of_month(c.year, c.month)
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, short_year, 366),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, min(4, _ceil_div(short_month, 7)), 5),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, _ceil_div(short_year, 7), 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, 12),
        }

    def date_range(self, year: int, month: int, day: int, field: ChronoField) -> ValueRange:
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.nominal_length_of_month(year, month))
        return super().date_range(year, month, day, field)

    def info(self) -> Dict[str, Any]:
        out = super().info()
        out["cutover"] = self.cutover.isoformat()
        out["cutover_days"] = self.cutover_days
        return out


BRITISH = CutoverChronology(BRITISH_CUTOVER)
