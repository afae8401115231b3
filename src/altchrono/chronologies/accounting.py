"""
altchrono.chronologies.accounting
---------------------------------
Configurable "4-4-5" style fiscal calendars.

An accounting year ends on a fixed day-of-week, either the last one in a
given ISO month or the one nearest the end of that month. Years are therefore
52 or 53 weeks long; the extra week of a 53-week year is appended to one
configured month. Months are whole weeks, laid out by an
``AccountingYearDivision``.

Use ``AccountingChronologyBuilder`` to assemble a chronology::

    chrono = (AccountingChronologyBuilder()
              .ends_on(DayOfWeek.SUNDAY)
              .nearest_end_of(8)
              .with_division(AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS)
              .leap_week_in_month(13)
              .to_chronology())
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..core.errors import CalendarValidationError, MissingConfigurationError
from ..core.fields import ChronoField, DayOfWeek, ValueRange
from ..core.time import iso_day_of_week, iso_month_length, iso_to_epoch_day
from .base import BaseChronology, YMD
from .eras import AccountingEra

DAYS_IN_WEEK = 7
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class AccountingYearDivision(Enum):
    """How the 52 regular weeks of an accounting year are split into months."""
    QUARTERS_OF_PATTERN_4_4_5_WEEKS = (4, 4, 5) * 4
    QUARTERS_OF_PATTERN_4_5_4_WEEKS = (4, 5, 4) * 4
    QUARTERS_OF_PATTERN_5_4_4_WEEKS = (5, 4, 4) * 4
    THIRTEEN_EVEN_MONTHS_OF_4_WEEKS = (4,) * 13

    @property
    def months_in_year(self) -> int:
        return len(self.value)

    @property
    def _elapsed_weeks(self) -> Tuple[int, ...]:
        out = [0]
        for weeks in self.value[:-1]:
            out.append(out[-1] + weeks)
        return tuple(out)

    def _check_month(self, month: int) -> int:
        return ValueRange.of(1, self.months_in_year).check_valid_value(month, ChronoField.MONTH_OF_YEAR)

    def weeks_in_month(self, month: int, leap_week_in_month: int = 0) -> int:
        self._check_month(month)
        if leap_week_in_month:
            self._check_month(leap_week_in_month)
        return self.value[month - 1] + (1 if month == leap_week_in_month else 0)

    def weeks_at_start_of_month(self, month: int, leap_week_in_month: int = 0) -> int:
        self._check_month(month)
        if leap_week_in_month:
            self._check_month(leap_week_in_month)
        extra = 1 if leap_week_in_month and month > leap_week_in_month else 0
        return self._elapsed_weeks[month - 1] + extra

    def month_from_elapsed_weeks(self, weeks_elapsed: int, leap_week_in_month: int = 0) -> int:
        """Month containing the week that starts after ``weeks_elapsed`` whole weeks."""
        weeks_in_year = 53 if leap_week_in_month else 52
        if not 0 <= weeks_elapsed < weeks_in_year:
            raise CalendarValidationError(
                f"Count of elapsed weeks {weeks_elapsed} not valid, should be in the range [0, {weeks_in_year})"
            )
        if leap_week_in_month:
            self._check_month(leap_week_in_month)
        elapsed = self._elapsed_weeks
        index = bisect_left(elapsed, weeks_elapsed)
        month = index + 1 if index < len(elapsed) and elapsed[index] == weeks_elapsed else index
        # the first week of the month after the leap week still belongs to the leap month
        if leap_week_in_month and month > leap_week_in_month and weeks_elapsed == elapsed[month - 1]:
            return month - 1
        return month


@dataclass(frozen=True)
class AccountingChronology(BaseChronology):
    """
    A fiscal calendar of whole weeks.

    ``year_offset`` is 0 when accounting year Y ends in ISO year Y and 1 when
    it starts in ISO year Y (so it ends in Y + 1).
    """
    ends_on: Optional[DayOfWeek] = None
    end: Optional[int] = None
    in_last_week: bool = False
    division: Optional[AccountingYearDivision] = None
    leap_week_in_month: int = 0
    year_offset: int = 0

    id: ClassVar[str] = "Accounting"
    calendar_type: ClassVar[str] = "accounting"
    eras: ClassVar[Tuple[AccountingEra, ...]] = (AccountingEra.BCE, AccountingEra.CE)
    mean_year_length: ClassVar[float] = 365.2425

    def __post_init__(self) -> None:
        if self.ends_on is None:
            raise MissingConfigurationError("Must call ends_on() to set the day-of-week the year ends on")
        if self.end is None:
            raise MissingConfigurationError("Must call nearest_end_of() or in_last_week_of() to set the ending month")
        if self.division is None:
            raise MissingConfigurationError("Must call with_division() to set how the year is divided")
        if not isinstance(self.ends_on, DayOfWeek):
            object.__setattr__(self, "ends_on", DayOfWeek(self.ends_on))
        ValueRange.of(1, 12).check_valid_value(self.end, ChronoField.MONTH_OF_YEAR)
        if not 1 <= self.leap_week_in_month <= self.division.months_in_year:
            raise CalendarValidationError(
                f"Leap week cannot be placed in month {self.leap_week_in_month}, "
                f"{self.division.name} has {self.division.months_in_year} months",
                field=ChronoField.MONTH_OF_YEAR,
            )
        if self.year_offset not in (0, 1):
            raise CalendarValidationError(f"year_offset must be 0 or 1, got {self.year_offset}")

    # ------------------------------------------------------------------
    # Year boundaries
    # ------------------------------------------------------------------
    def iso_year_end(self, iso_year: int) -> int:
        """Epoch day of the last day of the accounting year ending in ``iso_year``."""
        if self.in_last_week:
            anchor = iso_to_epoch_day(iso_year, self.end, iso_month_length(iso_year, self.end))
        elif self.end == 12:
            anchor = iso_to_epoch_day(iso_year + 1, 1, 3)
        else:
            anchor = iso_to_epoch_day(iso_year, self.end + 1, 3)
        return anchor - (iso_day_of_week(anchor) - self.ends_on) % DAYS_IN_WEEK

    def year_end(self, year: int) -> int:
        return self.iso_year_end(year + self.year_offset)

    def _leap_month(self, year: int) -> int:
        return self.leap_week_in_month if self.is_leap_year(year) else 0

    # ------------------------------------------------------------------
    # Kernel
    # ------------------------------------------------------------------
    def is_leap_year(self, year: int) -> bool:
        return self.year_end(year) - self.year_end(year - 1) == 53 * DAYS_IN_WEEK

    def months_in_year(self, year: int) -> int:
        return self.division.months_in_year

    def length_of_month(self, year: int, month: int) -> int:
        return self.division.weeks_in_month(month, self._leap_month(year)) * DAYS_IN_WEEK

    def length_of_year(self, year: int) -> int:
        return (53 if self.is_leap_year(year) else 52) * DAYS_IN_WEEK

    def first_day_of_year(self, year: int) -> int:
        return self.year_end(year - 1) + 1

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.division.weeks_at_start_of_month(month, self._leap_month(year)) * DAYS_IN_WEEK + day

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        leap_month = self._leap_month(year)
        month = self.division.month_from_elapsed_weeks((day_of_year - 1) // DAYS_IN_WEEK, leap_month)
        start = self.division.weeks_at_start_of_month(month, leap_month) * DAYS_IN_WEEK
        return year, month, day_of_year - start

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------
    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        weeks = self.division.value
        leap_weeks = max(
            self.division.weeks_in_month(m, self.leap_week_in_month)
            for m in range(1, self.division.months_in_year + 1)
        )
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
            ChronoField.DAY_OF_MONTH: ValueRange.of(1, min(weeks) * DAYS_IN_WEEK, leap_weeks * DAYS_IN_WEEK),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 364, 371),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, min(weeks), leap_weeks),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 52, 53),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(1, self.division.months_in_year),
        }

    def info(self) -> Dict[str, Any]:
        out = super().info()
        out["ends_on"] = self.ends_on.name
        out["end"] = ("last week of " if self.in_last_week else "nearest end of ") + MONTH_NAMES[self.end - 1]
        out["division"] = self.division.name
        out["leap_week_in_month"] = self.leap_week_in_month
        out["year"] = "starts in ISO year" if self.year_offset else "ends in ISO year"
        return out


class AccountingChronologyBuilder:
    """Fluent builder collecting the configuration of an ``AccountingChronology``."""

    def __init__(self) -> None:
        self._ends_on: Optional[DayOfWeek] = None
        self._end: Optional[int] = None
        self._in_last_week = False
        self._division: Optional[AccountingYearDivision] = None
        self._leap_week_in_month = 0
        self._year_offset = 0

    def ends_on(self, day_of_week: DayOfWeek) -> "AccountingChronologyBuilder":
        self._ends_on = day_of_week
        return self

    def nearest_end_of(self, month: int) -> "AccountingChronologyBuilder":
        self._in_last_week = False
        self._end = month
        return self

    def in_last_week_of(self, month: int) -> "AccountingChronologyBuilder":
        self._in_last_week = True
        self._end = month
        return self

    def with_division(self, division: AccountingYearDivision) -> "AccountingChronologyBuilder":
        self._division = division
        return self

    def leap_week_in_month(self, month: int) -> "AccountingChronologyBuilder":
        self._leap_week_in_month = month
        return self

    def accounting_year_ends_in_iso_year(self) -> "AccountingChronologyBuilder":
        self._year_offset = 0
        return self

    def accounting_year_starts_in_iso_year(self) -> "AccountingChronologyBuilder":
        self._year_offset = 1
        return self

    def to_chronology(self) -> AccountingChronology:
        return AccountingChronology(
            ends_on=self._ends_on,
            end=self._end,
            in_last_week=self._in_last_week,
            division=self._division,
            leap_week_in_month=self._leap_week_in_month,
            year_offset=self._year_offset,
        )
