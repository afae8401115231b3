from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .errors import CalendarValidationError


class ChronoField(Enum):
    # date-based
    DAY_OF_WEEK = "DayOfWeek"
    ALIGNED_DAY_OF_WEEK_IN_MONTH = "AlignedDayOfWeekInMonth"
    ALIGNED_DAY_OF_WEEK_IN_YEAR = "AlignedDayOfWeekInYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    ALIGNED_WEEK_OF_MONTH = "AlignedWeekOfMonth"
    ALIGNED_WEEK_OF_YEAR = "AlignedWeekOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    ERA = "Era"
    # time-based, never supported by a date
    NANO_OF_DAY = "NanoOfDay"
    SECOND_OF_DAY = "SecondOfDay"
    MINUTE_OF_HOUR = "MinuteOfHour"
    MINUTE_OF_DAY = "MinuteOfDay"
    HOUR_OF_DAY = "HourOfDay"
    AMPM_OF_DAY = "AmPmOfDay"

    @property
    def is_date_based(self) -> bool:
        return self in _DATE_FIELDS

    def __str__(self) -> str:
        return self.value


_DATE_FIELDS = frozenset(
    f for f in ChronoField
    if f not in (
        ChronoField.NANO_OF_DAY,
        ChronoField.SECOND_OF_DAY,
        ChronoField.MINUTE_OF_HOUR,
        ChronoField.MINUTE_OF_DAY,
        ChronoField.HOUR_OF_DAY,
        ChronoField.AMPM_OF_DAY,
    )
)


class ChronoUnit(Enum):
    NANOS = "Nanos"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    HALF_DAYS = "HalfDays"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"
    FOREVER = "Forever"

    def __str__(self) -> str:
        return self.value


# years per unit for the year-multiple units
YEAR_MULTIPLES = {
    ChronoUnit.YEARS: 1,
    ChronoUnit.DECADES: 10,
    ChronoUnit.CENTURIES: 100,
    ChronoUnit.MILLENNIA: 1000,
}


class DayOfWeek(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def plus(self, days: int) -> "DayOfWeek":
        return DayOfWeek((self.value - 1 + days) % 7 + 1)


@dataclass(frozen=True)
class ValueRange:
    """
    Range of valid values for a field.

    The minimum may vary between ``min_smallest`` and ``min_largest`` and the
    maximum between ``max_smallest`` and ``max_largest`` depending on the date.
    """
    min_smallest: int
    min_largest: int
    max_smallest: int
    max_largest: int

    @classmethod
    def of(cls, *values: int) -> "ValueRange":
        if len(values) == 2:
            lo, hi = values
            return cls(lo, lo, hi, hi)
        if len(values) == 3:
            lo, hi_small, hi_large = values
            return cls(lo, lo, hi_small, hi_large)
        if len(values) == 4:
            return cls(*values)
        raise TypeError(f"ValueRange.of() takes 2 to 4 values, got {len(values)}")

    @property
    def minimum(self) -> int:
        return self.min_smallest

    @property
    def maximum(self) -> int:
        return self.max_largest

    @property
    def is_fixed(self) -> bool:
        return self.min_smallest == self.min_largest and self.max_smallest == self.max_largest

    def is_valid_value(self, value: int) -> bool:
        return self.min_smallest <= value <= self.max_largest

    def check_valid_value(self, value: int, field: ChronoField) -> int:
        if not self.is_valid_value(value):
            raise CalendarValidationError(
                f"Invalid value for {field} (valid values {self}): {value}", field=field
            )
        return value

    def __str__(self) -> str:
        lo = f"{self.min_smallest}" if self.min_smallest == self.min_largest else f"{self.min_smallest}/{self.min_largest}"
        hi = f"{self.max_smallest}" if self.max_smallest == self.max_largest else f"{self.max_smallest}/{self.max_largest}"
        return f"{lo} - {hi}"
