"""
altchrono.chronologies.base
---------------------------
Default kernel behaviour shared by every calendar system.

A concrete chronology must at least provide ``is_leap_year``,
``months_in_year``, ``length_of_month`` and either ``first_day_of_year`` or a
closed-form ``to_epoch_day``/``from_epoch_day`` pair. Everything else has a
default that is correct for calendars whose months form a plain grid.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from functools import cached_property
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..core.date import ChronoDate
from ..core.errors import CalendarValidationError, EraMismatchError, UnsupportedFieldError
from ..core.fields import ChronoField, ValueRange
from ..core.time import date_to_epoch_day, iso_day_of_week, trunc_div

YMD = Tuple[int, int, int]


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


class BaseChronology:
    id: ClassVar[str] = ""
    calendar_type: ClassVar[str] = ""
    eras: ClassVar[Tuple[Enum, ...]] = ()
    days_in_week: ClassVar[int] = 7
    fixed_months_per_year: ClassVar[bool] = True
    min_year: ClassVar[int] = -999_999
    max_year: ClassVar[int] = 999_999
    mean_year_length: ClassVar[float] = 365.25

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    def date(self, year: int, month: int, day: int) -> ChronoDate:
        self.check_date(year, month, day)
        return ChronoDate(self, *self.normalize(year, month, day))

    def date_era(self, era: Enum, year_of_era: int, month: int, day: int) -> ChronoDate:
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def date_year_day(self, year: int, day_of_year: int) -> ChronoDate:
        self.check_year_day(year, day_of_year)
        return ChronoDate(self, *self.from_year_day(year, day_of_year))

    def date_epoch_day(self, epoch_day: int) -> ChronoDate:
        self.range(ChronoField.EPOCH_DAY).check_valid_value(epoch_day, ChronoField.EPOCH_DAY)
        return ChronoDate(self, *self.from_epoch_day(epoch_day))

    def date_from(self, temporal: Any) -> ChronoDate:
        """Convert a ``datetime.date`` or a date of any chronology."""
        if isinstance(temporal, ChronoDate):
            return self.date_epoch_day(temporal.to_epoch_day())
        if isinstance(temporal, date):
            return self.date_epoch_day(date_to_epoch_day(temporal))
        raise TypeError(f"Unable to obtain a {self.id} date from {type(temporal)}")

    def date_now(self) -> ChronoDate:
        return self.date_from(date.today())

    # ------------------------------------------------------------------
    # Lengths
    # ------------------------------------------------------------------
    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    def months_in_year(self, year: int) -> int:
        raise NotImplementedError

    def length_of_month(self, year: int, month: int) -> int:
        raise NotImplementedError

    def length_of_year(self, year: int) -> int:
        return sum(self.length_of_month(year, m) for m in range(1, self.months_in_year(year) + 1))

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return sum(self.length_of_month(year, m) for m in range(1, month)) + day

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        month = 1
        while day_of_year > self.length_of_month(year, month):
            day_of_year -= self.length_of_month(year, month)
            month += 1
        return year, month, day_of_year

    # ------------------------------------------------------------------
    # Epoch-day conversion
    # ------------------------------------------------------------------
    def first_day_of_year(self, year: int) -> int:
        raise NotImplementedError

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        return self.first_day_of_year(year) + self.day_of_year(year, month, day) - 1

    def from_epoch_day(self, epoch_day: int) -> YMD:
        origin = self.first_day_of_year(1)
        year = 1 + int((epoch_day - origin) // self.mean_year_length)
        while self.first_day_of_year(year) > epoch_day:
            year -= 1
        while self.first_day_of_year(year + 1) <= epoch_day:
            year += 1
        return self.from_year_day(year, epoch_day - self.first_day_of_year(year) + 1)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def check_year(self, year: int) -> None:
        ValueRange.of(self.min_year, self.max_year).check_valid_value(year, ChronoField.YEAR)

    def check_date(self, year: int, month: int, day: int) -> None:
        self.check_year(year)
        if not 1 <= month <= self.months_in_year(year):
            raise CalendarValidationError(
                f"Invalid month {month} for {self.id} year {year}", field=ChronoField.MONTH_OF_YEAR
            )
        if not 1 <= day <= self.length_of_month(year, month):
            raise CalendarValidationError(
                f"Invalid day {day} for {self.id} {year}/{month}", field=ChronoField.DAY_OF_MONTH
            )

    def check_year_day(self, year: int, day_of_year: int) -> None:
        self.check_year(year)
        if not 1 <= day_of_year <= self.length_of_year(year):
            if day_of_year == self.length_of_year(year) + 1 and not self.is_leap_year(year):
                msg = f"Invalid day of year {day_of_year}: {self.id} year {year} is not a leap year"
            else:
                msg = f"Invalid day of year {day_of_year} for {self.id} year {year}"
            raise CalendarValidationError(msg, field=ChronoField.DAY_OF_YEAR)

    # ------------------------------------------------------------------
    # Lenient resolution and arithmetic
    # ------------------------------------------------------------------
    def normalize(self, year: int, month: int, day: int) -> YMD:
        return year, month, day

    def resolve_previous(self, year: int, month: int, day: int) -> YMD:
        """Closest valid date on or before (year, month, day), clamping the day."""
        self.check_year(year)
        return year, month, min(day, self.length_of_month(year, month))

    def arith_fields(self, year: int, month: int, day: int) -> Tuple[int, int]:
        """Month index and day carried by month and year arithmetic."""
        return month, day

    def move_to_year(self, year: int, month: int, day: int, new_year: int) -> YMD:
        m, d = self.arith_fields(year, month, day)
        return self.resolve_previous(new_year, m, d)

    def proleptic_month(self, year: int, month: int, day: int) -> int:
        m, _ = self.arith_fields(year, month, day)
        return year * self.months_in_year(year) + m - 1

    def from_proleptic_month(self, proleptic_month: int) -> Tuple[int, int]:
        year, m0 = divmod(proleptic_month, self.months_in_year(0))
        return year, m0 + 1

    def plus_months(self, year: int, month: int, day: int, months: int) -> YMD:
        if months == 0:
            return year, month, day
        new_year, new_month = self.from_proleptic_month(self.proleptic_month(year, month, day) + months)
        _, d = self.arith_fields(year, month, day)
        return self.resolve_previous(new_year, new_month, d)

    def plus_weeks(self, year: int, month: int, day: int, weeks: int) -> Optional[YMD]:
        """Calendar-specific week addition; None means plain epoch-day addition."""
        return None

    def weeks_until(self, start: YMD, end: YMD) -> int:
        """Whole weeks from start to end, truncated toward zero."""
        return trunc_div(self.to_epoch_day(*end) - self.to_epoch_day(*start), self.days_in_week)

    def day_key(self, year: int, month: int, day: int) -> int:
        return self.arith_fields(year, month, day)[1]

    def month_key(self, year: int, month: int, day: int) -> int:
        return self.proleptic_month(year, month, day) * 256 + self.day_key(year, month, day)

    def year_key(self, year: int, month: int, day: int) -> int:
        month_in_year = self.proleptic_month(year, month, day) - self.proleptic_month(year, 1, 1)
        return month_in_year * 256 + self.day_key(year, month, day)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    def check_field(self, field: ChronoField) -> None:
        if not field.is_date_based:
            raise UnsupportedFieldError(f"Unsupported field: {field}")

    def day_of_week(self, year: int, month: int, day: int) -> int:
        return iso_day_of_week(self.to_epoch_day(year, month, day))

    def position_in_month(self, year: int, month: int, day: int) -> int:
        return day

    def position_in_year(self, year: int, month: int, day: int) -> int:
        return self.day_of_year(year, month, day)

    def get_field(self, year: int, month: int, day: int, field: ChronoField) -> int:
        self.check_field(field)
        w = self.days_in_week
        if field is ChronoField.DAY_OF_WEEK:
            return self.day_of_week(year, month, day)
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self.position_in_month(year, month, day) - 1) % w + 1
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.position_in_year(year, month, day) - 1) % w + 1
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            return (self.position_in_month(year, month, day) - 1) // w + 1
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            return (self.position_in_year(year, month, day) - 1) // w + 1
        if field is ChronoField.DAY_OF_MONTH:
            return day
        if field is ChronoField.DAY_OF_YEAR:
            return self.day_of_year(year, month, day)
        if field is ChronoField.EPOCH_DAY:
            return self.to_epoch_day(year, month, day)
        if field is ChronoField.MONTH_OF_YEAR:
            return month
        if field is ChronoField.PROLEPTIC_MONTH:
            return self.proleptic_month(year, month, day)
        if field is ChronoField.YEAR:
            return year
        if field is ChronoField.YEAR_OF_ERA:
            return year if (year >= 1 or len(self.eras) == 1) else 1 - year
        if field is ChronoField.ERA:
            return self.era_of(year).value
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def unchanged_by(self, field: ChronoField, value: int) -> bool:
        """True when ``with_field(field, value)`` leaves every date as it is."""
        return False

    def adjust(self, year: int, month: int, day: int, field: ChronoField, value: int) -> Optional[YMD]:
        """Calendar-specific ``with_field``; None defers to the generic rules."""
        return None

    def epagomenal(self, year: int, month: int, day: int) -> Optional[Enum]:
        return None

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------
    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        raise NotImplementedError

    @cached_property
    def _ranges(self) -> Dict[ChronoField, ValueRange]:
        ranges = dict(self._field_ranges())
        last_month = self.months_in_year(self.max_year)
        ranges.setdefault(ChronoField.EPOCH_DAY, ValueRange.of(
            self.to_epoch_day(self.min_year, 1, 1),
            self.to_epoch_day(self.max_year, last_month, self.length_of_month(self.max_year, last_month)),
        ))
        ranges.setdefault(ChronoField.YEAR, ValueRange.of(self.min_year, self.max_year))
        if len(self.eras) == 1:
            ranges.setdefault(ChronoField.YEAR_OF_ERA, ValueRange.of(self.min_year, self.max_year))
            ranges.setdefault(ChronoField.ERA, ValueRange.of(self.eras[0].value, self.eras[0].value))
        else:
            ranges.setdefault(ChronoField.YEAR_OF_ERA, ValueRange.of(1, self.max_year, 1 - self.min_year))
            ranges.setdefault(ChronoField.ERA, ValueRange.of(self.eras[0].value, self.eras[-1].value))
        ranges.setdefault(ChronoField.PROLEPTIC_MONTH, ValueRange.of(
            self.proleptic_month(self.min_year, 1, 1),
            self.proleptic_month(self.max_year, last_month, 1),
        ))
        return ranges

    def range(self, field: ChronoField) -> ValueRange:
        """Range of a field over the whole chronology."""
        self.check_field(field)
        return self._ranges[field]

    def date_range(self, year: int, month: int, day: int, field: ChronoField) -> ValueRange:
        """Range of a field for the month or year containing the given date."""
        self.check_field(field)
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month(year, month))
        if field is ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year(year))
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            return ValueRange.of(1, _ceil_div(self.length_of_month(year, month), self.days_in_week))
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, _ceil_div(self.length_of_year(year), self.days_in_week))
        return self.range(field)

    # ------------------------------------------------------------------
    # Eras
    # ------------------------------------------------------------------
    def era_of(self, year: int) -> Enum:
        if len(self.eras) == 1:
            return self.eras[0]
        return self.eras[-1] if year >= 1 else self.eras[0]

    def era_of_value(self, value: int) -> Enum:
        for era in self.eras:
            if era.value == value:
                return era
        raise CalendarValidationError(f"Invalid era for {self.id}: {value}", field=ChronoField.ERA)

    def proleptic_year(self, era: Enum, year_of_era: int) -> int:
        if era not in self.eras:
            names = [e.name for e in self.eras]
            raise EraMismatchError(f"{self.id} era must be one of {names}, got {era!r}")
        if year_of_era < 1 and len(self.eras) > 1:
            raise CalendarValidationError(
                f"Invalid year of era {year_of_era}", field=ChronoField.YEAR_OF_ERA
            )
        if len(self.eras) == 1 or era is self.eras[-1]:
            return year_of_era
        return 1 - year_of_era

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def format_date(self, year: int, month: int, day: int) -> str:
        era = self.era_of(year)
        yoe = self.get_field(year, month, day, ChronoField.YEAR_OF_ERA)
        return f"{self.id} {era.name} {yoe}-{month:02d}-{day:02d}"

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "calendar_type": self.calendar_type,
            "eras": [e.name for e in self.eras],
            "days_in_week": self.days_in_week,
            "months_in_year": self.months_in_year(1),
            "year_range": (self.min_year, self.max_year),
        }

    def __str__(self) -> str:
        return self.id
