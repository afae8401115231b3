"""
altchrono.chronologies.fixed
----------------------------
The International Fixed Calendar.

Thirteen months of 28 days, each starting on a Sunday. Year Day follows
the last day of the year and Leap Day follows June 28 in Gregorian leap
years; neither belongs to a month or a week. They are held as month/day
``0/0`` (Year Day) and ``-1/-1`` (Leap Day).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from ..core.date import ChronoDate
from ..core.errors import CalendarValidationError
from ..core.fields import ChronoField, ValueRange
from ..core.time import iso_from_epoch_day, iso_is_leap, iso_to_epoch_day, trunc_div
from .base import BaseChronology
from .eras import EpagomenalDay, InternationalFixedEra

YMD = Tuple[int, int, int]

DAYS_IN_MONTH = 28
MONTHS_IN_YEAR = 13
DAYS_0000_TO_1970 = 719528
LEAP_DAY_OF_YEAR = 6 * DAYS_IN_MONTH + 1

YEAR_DAY = (0, 0)
LEAP_DAY = (-1, -1)

_WEEK_FIELDS = (
    ChronoField.DAY_OF_WEEK,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
    ChronoField.ALIGNED_WEEK_OF_MONTH,
    ChronoField.ALIGNED_WEEK_OF_YEAR,
)


def _leap_years_before(year: int) -> int:
    y = year - 1
    return y // 4 - y // 100 + y // 400


@dataclass(frozen=True)
class InternationalFixedChronology(BaseChronology):
    id: ClassVar[str] = "Ifc"
    calendar_type: ClassVar[str] = "ifc"
    eras: ClassVar[Tuple[InternationalFixedEra, ...]] = (InternationalFixedEra.CE,)
    min_year: ClassVar[int] = 1
    max_year: ClassVar[int] = 1_000_000

    def year_day(self, year: int) -> ChronoDate:
        return self.date(year, *YEAR_DAY)

    def leap_day(self, year: int) -> ChronoDate:
        return self.date(year, *LEAP_DAY)

    @staticmethod
    def _special(month: int, day: int) -> bool:
        return month < 1

    def is_leap_year(self, year: int) -> bool:
        return iso_is_leap(year)

    def months_in_year(self, year: int) -> int:
        return MONTHS_IN_YEAR

    def length_of_month(self, year: int, month: int) -> int:
        return 1 if month < 1 else DAYS_IN_MONTH

    def length_of_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def day_of_year(self, year: int, month: int, day: int) -> int:
        if (month, day) == YEAR_DAY:
            return self.length_of_year(year)
        if (month, day) == LEAP_DAY:
            return LEAP_DAY_OF_YEAR
        doy = (month - 1) * DAYS_IN_MONTH + day
        if month >= 7 and self.is_leap_year(year):
            doy += 1
        return doy

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        if self.is_leap_year(year):
            if day_of_year == LEAP_DAY_OF_YEAR:
                return (year,) + LEAP_DAY
            if day_of_year > LEAP_DAY_OF_YEAR:
                day_of_year -= 1
        if day_of_year == 365:
            return (year,) + YEAR_DAY
        return year, (day_of_year - 1) // DAYS_IN_MONTH + 1, (day_of_year - 1) % DAYS_IN_MONTH + 1

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        return year * 365 + _leap_years_before(year) + self.day_of_year(year, month, day) - DAYS_0000_TO_1970

    def from_epoch_day(self, epoch_day: int) -> YMD:
        year, _, _ = iso_from_epoch_day(epoch_day)
        return self.from_year_day(year, epoch_day - iso_to_epoch_day(year, 1, 1) + 1)

    def check_date(self, year: int, month: int, day: int) -> None:
        if (month, day) == YEAR_DAY:
            self.check_year(year)
            return
        if (month, day) == LEAP_DAY:
            self.check_year(year)
            if not self.is_leap_year(year):
                raise CalendarValidationError(
                    f"Invalid date: Leap Day only occurs in leap years, {year} is not one",
                    field=ChronoField.DAY_OF_MONTH,
                )
            return
        super().check_date(year, month, day)

    # ------------------------------------------------------------------
    # Weeks skip the special days: regular days are numbered 364 to a year.
    # A special day shares the number of the regular day after it.
    # ------------------------------------------------------------------
    def _regular_day(self, year: int, month: int, day: int) -> int:
        month, day = self.arith_fields(year, month, day)
        return (year - 1) * 364 + (month - 1) * DAYS_IN_MONTH + day

    def _from_regular_day(self, number: int) -> YMD:
        year, index = divmod(number - 1, 364)
        return year + 1, index // DAYS_IN_MONTH + 1, index % DAYS_IN_MONTH + 1

    def _week_origin(self, year: int, month: int, day: int, forward: bool) -> int:
        # moving forward a special day starts from the day before it
        number = self._regular_day(year, month, day)
        if forward and self._special(month, day):
            number -= 1
        return number

    def plus_weeks(self, year: int, month: int, day: int, weeks: int) -> Optional[YMD]:
        origin = self._week_origin(year, month, day, weeks > 0)
        return self._from_regular_day(origin + weeks * 7)

    def weeks_until(self, start: YMD, end: YMD) -> int:
        forward = self.to_epoch_day(*end) > self.to_epoch_day(*start)
        a = self._week_origin(*start, forward)
        b = self._week_origin(*end, forward)
        return trunc_div(b - a, 7)

    # ------------------------------------------------------------------
    # Arithmetic: Year Day counts as 13/29 and Leap Day as 6/29
    # ------------------------------------------------------------------
    def arith_fields(self, year: int, month: int, day: int) -> Tuple[int, int]:
        if (month, day) == YEAR_DAY:
            return MONTHS_IN_YEAR, DAYS_IN_MONTH + 1
        if (month, day) == LEAP_DAY:
            return 6, DAYS_IN_MONTH + 1
        return month, day

    def resolve_previous(self, year: int, month: int, day: int) -> YMD:
        self.check_year(year)
        if month < 1:
            month, day = self.arith_fields(year, month, day)
        if day > DAYS_IN_MONTH:
            if month == MONTHS_IN_YEAR:
                return (year,) + YEAR_DAY
            if month == 6 and self.is_leap_year(year):
                return (year,) + LEAP_DAY
            day = DAYS_IN_MONTH
        return year, month, day

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    def position_in_year(self, year: int, month: int, day: int) -> int:
        return (month - 1) * DAYS_IN_MONTH + day

    def day_of_week(self, year: int, month: int, day: int) -> int:
        # every month starts on a Sunday
        return (5 + day) % 7 + 1

    def get_field(self, year: int, month: int, day: int, field: ChronoField) -> int:
        if self._special(month, day) and field in _WEEK_FIELDS:
            return 0
        return super().get_field(year, month, day, field)

    def adjust(self, year: int, month: int, day: int, field: ChronoField, value: int) -> Optional[YMD]:
        if field in (ChronoField.DAY_OF_MONTH, ChronoField.MONTH_OF_YEAR):
            if value == 0:
                return (year,) + YEAR_DAY
            if value == -1:
                if not self.is_leap_year(year):
                    raise CalendarValidationError(
                        f"Invalid value for {field}: -1 is Leap Day and {year} is not a leap year", field=field
                    )
                return (year,) + LEAP_DAY
            return None
        if field not in _WEEK_FIELDS:
            return None
        if value == 0:
            return year, month, day
        if self._special(month, day):
            # week fields of a special day are taken from the day before it
            month, day = self.arith_fields(year, month, day)
            day = DAYS_IN_MONTH
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            return year, month, (value - 1) * 7 + (day - 1) % 7 + 1
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            position = (value - 1) * 7 + (self.position_in_year(year, month, day) - 1) % 7 + 1
            return year, (position - 1) // DAYS_IN_MONTH + 1, (position - 1) % DAYS_IN_MONTH + 1
        week_start = ((day - 1) // 7) * 7
        if field is ChronoField.DAY_OF_WEEK:
            return year, month, week_start + value % 7 + 1
        return year, month, week_start + value

    def epagomenal(self, year: int, month: int, day: int) -> Optional[EpagomenalDay]:
        if (month, day) == YEAR_DAY:
            return EpagomenalDay.YEAR_DAY
        if (month, day) == LEAP_DAY:
            return EpagomenalDay.LEAP_DAY
        return None

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------
    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(0, 1, 7, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(0, 1, 7, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(0, 1, 7, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(-1, 1, 28, 28),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(0, 1, 4, 4),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(0, 1, 52, 52),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(-1, 1, 13, 13),
        }

    def date_range(self, year: int, month: int, day: int, field: ChronoField) -> ValueRange:
        self.check_field(field)
        if self._special(month, day):
            if field in _WEEK_FIELDS:
                return ValueRange.of(0, 0)
            if field in (ChronoField.DAY_OF_MONTH, ChronoField.MONTH_OF_YEAR):
                return ValueRange.of(month, month)
        if field in _WEEK_FIELDS[:3]:
            return ValueRange.of(1, 7)
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, 52)
        if field is ChronoField.MONTH_OF_YEAR:
            return ValueRange.of(1, MONTHS_IN_YEAR)
        return super().date_range(year, month, day, field)

    def format_date(self, year: int, month: int, day: int) -> str:
        kind = self.epagomenal(year, month, day)
        if kind is not None:
            return f"{self.id} CE {year} {kind.value}"
        return super().format_date(year, month, day)


INTERNATIONAL_FIXED = InternationalFixedChronology()
