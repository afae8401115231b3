"""
altchrono.core.date
-------------------
The immutable date value shared by every calendar system.

``ChronoDate`` holds a chronology and a (year, month, day) triple that the
chronology considers canonical. All arithmetic is written once here and
delegates the calendar-specific questions to the chronology kernel.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .errors import ChronologyMismatchError, UnsupportedFieldError, UnsupportedUnitError
from .fields import YEAR_MULTIPLES, ChronoField, ChronoUnit, ValueRange
from .period import Period
from .time import date_from_epoch_day, trunc_div

if TYPE_CHECKING:
    from .chronology import Chronology

_YEAR_PACK = 65536


@total_ordering
@dataclass(frozen=True)
class ChronoDate:
    chronology: "Chronology"
    year: int
    month: int
    day: int

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_epoch_day(self) -> int:
        return self.chronology.to_epoch_day(self.year, self.month, self.day)

    def to_iso(self) -> date:
        """The same day as a ``datetime.date`` (ISO years 1..9999 only)."""
        return date_from_epoch_day(self.to_epoch_day())

    def at_time(self, t: time) -> datetime:
        return datetime.combine(self.to_iso(), t)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def era(self) -> Enum:
        return self.chronology.era_of(self.year)

    @property
    def year_of_era(self) -> int:
        return self.get(ChronoField.YEAR_OF_ERA)

    @property
    def day_of_year(self) -> int:
        return self.chronology.day_of_year(self.year, self.month, self.day)

    @property
    def day_of_week(self) -> int:
        return self.get(ChronoField.DAY_OF_WEEK)

    @property
    def epagomenal(self) -> Optional[Enum]:
        """The kind of epagomenal day this is, or None for an ordinary day."""
        return self.chronology.epagomenal(self.year, self.month, self.day)

    def is_leap_year(self) -> bool:
        return self.chronology.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return self.chronology.length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return self.chronology.length_of_year(self.year)

    def is_supported(self, item: Union[ChronoField, ChronoUnit]) -> bool:
        if isinstance(item, ChronoField):
            return item.is_date_based
        return item in _DATE_UNITS

    def get(self, field: ChronoField) -> int:
        return self.chronology.get_field(self.year, self.month, self.day, field)

    def range(self, field: ChronoField) -> ValueRange:
        return self.chronology.date_range(self.year, self.month, self.day, field)

    # ------------------------------------------------------------------
    # Adjustment
    # ------------------------------------------------------------------
    def _of(self, ymd: Tuple[int, int, int]) -> "ChronoDate":
        if ymd == (self.year, self.month, self.day):
            return self
        return ChronoDate(self.chronology, *ymd)

    def _of_epoch_day(self, epoch_day: int) -> "ChronoDate":
        return self.chronology.date_epoch_day(epoch_day)

    def with_field(self, field: ChronoField, value: int) -> "ChronoDate":
        """
        Return a copy with one field changed.

        The value is checked against the range of the field over the whole
        chronology; within that range it is applied leniently, clamping the
        day-of-month or rolling across month and year boundaries.
        """
        chrono = self.chronology
        if chrono.unchanged_by(field, value):
            return self
        chrono.range(field).check_valid_value(value, field)
        y, m, d = self.year, self.month, self.day
        adjusted = chrono.adjust(y, m, d, field, value)
        if adjusted is not None:
            return self._of(adjusted)

        w = chrono.days_in_week
        current = self.get(field)
        if field in (ChronoField.DAY_OF_WEEK,
                     ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
                     ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
                     ChronoField.DAY_OF_YEAR):
            return self.plus_days(value - current)
        if field in (ChronoField.ALIGNED_WEEK_OF_MONTH, ChronoField.ALIGNED_WEEK_OF_YEAR):
            return self.plus_days((value - current) * w)
        if field is ChronoField.EPOCH_DAY:
            return self._of_epoch_day(value)
        if field is ChronoField.DAY_OF_MONTH:
            am, _ = chrono.arith_fields(y, m, d)
            return self._of(chrono.resolve_previous(y, am, value))
        if field is ChronoField.MONTH_OF_YEAR:
            _, ad = chrono.arith_fields(y, m, d)
            return self._of(chrono.resolve_previous(y, value, ad))
        if field is ChronoField.PROLEPTIC_MONTH:
            return self.plus_months(value - current)
        if field is ChronoField.YEAR_OF_ERA:
            return self._of(chrono.move_to_year(y, m, d, value if y >= 1 else 1 - value))
        if field is ChronoField.YEAR:
            return self._of(chrono.move_to_year(y, m, d, value))
        if field is ChronoField.ERA:
            if value == current:
                return self
            return self._of(chrono.move_to_year(y, m, d, 1 - y))
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def with_day_of_month(self, day: int) -> "ChronoDate":
        return self.with_field(ChronoField.DAY_OF_MONTH, day)

    def with_month(self, month: int) -> "ChronoDate":
        return self.with_field(ChronoField.MONTH_OF_YEAR, month)

    def with_year(self, year: int) -> "ChronoDate":
        return self.with_field(ChronoField.YEAR, year)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def plus_days(self, days: int) -> "ChronoDate":
        if days == 0:
            return self
        return self._of_epoch_day(self.to_epoch_day() + days)

    def plus_weeks(self, weeks: int) -> "ChronoDate":
        if weeks == 0:
            return self
        ymd = self.chronology.plus_weeks(self.year, self.month, self.day, weeks)
        if ymd is not None:
            return self._of(ymd)
        return self.plus_days(weeks * self.chronology.days_in_week)

    def plus_months(self, months: int) -> "ChronoDate":
        return self._of(self.chronology.plus_months(self.year, self.month, self.day, months))

    def plus_years(self, years: int) -> "ChronoDate":
        if years == 0:
            return self
        return self._of(self.chronology.move_to_year(self.year, self.month, self.day, self.year + years))

    def plus(self, amount: Union[int, Period], unit: Optional[ChronoUnit] = None) -> "ChronoDate":
        """Add ``amount`` of ``unit``, or a ``Period`` of the same chronology."""
        if isinstance(amount, Period):
            return self._plus_period(amount)
        if unit is ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit is ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit is ChronoUnit.MONTHS:
            return self.plus_months(amount)
        if unit in YEAR_MULTIPLES:
            return self.plus_years(amount * YEAR_MULTIPLES[unit])
        if unit is ChronoUnit.ERAS:
            return self.with_field(ChronoField.ERA, self.get(ChronoField.ERA) + amount)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def minus(self, amount: Union[int, Period], unit: Optional[ChronoUnit] = None) -> "ChronoDate":
        if isinstance(amount, Period):
            return self._plus_period(amount.negated())
        return self.plus(-amount, unit)

    def _plus_period(self, period: Period) -> "ChronoDate":
        self._check_same(period.chronology)
        if self.chronology.fixed_months_per_year:
            n = self.chronology.months_in_year(self.year)
            return self.plus_months(period.years * n + period.months).plus_days(period.days)
        return self.plus_years(period.years).plus_months(period.months).plus_days(period.days)

    def __add__(self, other: Period) -> "ChronoDate":
        if not isinstance(other, Period):
            return NotImplemented
        return self._plus_period(other)

    def __sub__(self, other: Period) -> "ChronoDate":
        if not isinstance(other, Period):
            return NotImplemented
        return self._plus_period(other.negated())

    # ------------------------------------------------------------------
    # Spans
    # ------------------------------------------------------------------
    def _check_same(self, chronology: "Chronology") -> None:
        if chronology != self.chronology:
            raise ChronologyMismatchError(
                f"Chronology mismatch, expected: {self.chronology.id}, actual: {chronology.id}"
            )

    def _months_until(self, end: "ChronoDate") -> int:
        chrono = self.chronology
        start_key = chrono.month_key(self.year, self.month, self.day)
        end_key = chrono.month_key(end.year, end.month, end.day)
        return trunc_div(end_key - start_key, 256)

    def _years_until(self, end: "ChronoDate") -> int:
        chrono = self.chronology
        start = self.year * _YEAR_PACK + chrono.year_key(self.year, self.month, self.day)
        stop = end.year * _YEAR_PACK + chrono.year_key(end.year, end.month, end.day)
        return trunc_div(stop - start, _YEAR_PACK)

    def until(self, end: "ChronoDate", unit: Optional[ChronoUnit] = None) -> Union[int, Period]:
        """
        Amount of time until ``end``.

        With a unit, the number of whole units (truncated toward zero).
        Without one, the ``Period`` satisfying ``self.plus(period) == end``.
        """
        self._check_same(end.chronology)
        if unit is None:
            return self._period_until(end)
        if unit is ChronoUnit.DAYS:
            return end.to_epoch_day() - self.to_epoch_day()
        if unit is ChronoUnit.WEEKS:
            return self.chronology.weeks_until((self.year, self.month, self.day), (end.year, end.month, end.day))
        if unit is ChronoUnit.MONTHS:
            return self._months_until(end)
        if unit in YEAR_MULTIPLES:
            return trunc_div(self._years_until(end), YEAR_MULTIPLES[unit])
        if unit is ChronoUnit.ERAS:
            return end.get(ChronoField.ERA) - self.get(ChronoField.ERA)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def _period_until(self, end: "ChronoDate") -> Period:
        chrono = self.chronology
        target = end.to_epoch_day()

        def overshoots(amount: int, reached: "ChronoDate") -> bool:
            remaining = target - reached.to_epoch_day()
            return (amount > 0 and remaining < 0) or (amount < 0 and remaining > 0)

        if chrono.fixed_months_per_year:
            start, years = self, 0
        else:
            years = self._years_until(end)
            start = self.plus_years(years)
            while years != 0 and overshoots(years, start):
                years -= 1 if years > 0 else -1
                start = self.plus_years(years)

        months = start._months_until(end)
        reached = start.plus_months(months)
        while months != 0 and overshoots(months, reached):
            months -= 1 if months > 0 else -1
            reached = start.plus_months(months)
        days = target - reached.to_epoch_day()

        if chrono.fixed_months_per_year:
            n = chrono.months_in_year(self.year)
            years, months = trunc_div(months, n), months - n * trunc_div(months, n)
        return Period(chrono, years, months, days)

    # ------------------------------------------------------------------
    # Ordering and presentation
    # ------------------------------------------------------------------
    def __lt__(self, other: "ChronoDate") -> bool:
        if not isinstance(other, ChronoDate):
            return NotImplemented
        self._check_same(other.chronology)
        return self.to_epoch_day() < other.to_epoch_day()

    def __str__(self) -> str:
        return self.chronology.format_date(self.year, self.month, self.day)


_DATE_UNITS = frozenset(
    [ChronoUnit.DAYS, ChronoUnit.WEEKS, ChronoUnit.MONTHS, ChronoUnit.ERAS, *YEAR_MULTIPLES]
)
