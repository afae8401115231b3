"""
altchrono.chronologies.discordian
---------------------------------
The Discordian calendar.

Five seasons (Chaos, Discord, Confusion, Bureaucracy, The Aftermath) of 73
days and a 5-day week. In leap years St. Tib's Day is inserted between
Chaos 59 and Chaos 60; it belongs to no season and no week, and is held as
month 0, day 0. Years are counted from 1166 BC, leap years follow the
Gregorian rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from ..core.date import ChronoDate
from ..core.errors import CalendarValidationError
from ..core.fields import ChronoField, ValueRange
from ..core.time import iso_from_epoch_day, iso_is_leap, iso_to_epoch_day, trunc_div
from .base import BaseChronology
from .eras import DiscordianEra, EpagomenalDay

YMD = Tuple[int, int, int]

OFFSET_FROM_ISO_0000 = 1166
DAYS_1167_TO_ISO_1970 = 719162
ST_TIBS_OFFSET = 60
DAYS_IN_MONTH = 73
DAYS_IN_WEEK = 5

_WEEK_FIELDS = (
    ChronoField.DAY_OF_WEEK,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
    ChronoField.ALIGNED_WEEK_OF_MONTH,
    ChronoField.ALIGNED_WEEK_OF_YEAR,
)

SEASONS = ("Chaos", "Discord", "Confusion", "Bureaucracy", "The Aftermath")
WEEKDAYS = ("Sweetmorn", "Boomtime", "Pungenday", "Prickle-Prickle", "Setting Orange")


def _leap_years_before(year: int) -> int:
    offset_year = year - OFFSET_FROM_ISO_0000 - 1
    return offset_year // 4 - offset_year // 100 + offset_year // 400


@dataclass(frozen=True)
class DiscordianChronology(BaseChronology):
    id: ClassVar[str] = "Discordian"
    calendar_type: ClassVar[str] = "discordian"
    eras: ClassVar[Tuple[DiscordianEra, ...]] = (DiscordianEra.YOLD,)
    days_in_week: ClassVar[int] = DAYS_IN_WEEK
    min_year: ClassVar[int] = 1
    max_year: ClassVar[int] = 999_999

    def st_tibs_day(self, year: int) -> ChronoDate:
        return self.date(year, 0, 0)

    def is_leap_year(self, year: int) -> bool:
        return iso_is_leap(year - OFFSET_FROM_ISO_0000)

    def months_in_year(self, year: int) -> int:
        return 5

    def length_of_month(self, year: int, month: int) -> int:
        return 1 if month == 0 else DAYS_IN_MONTH

    def length_of_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def day_of_year(self, year: int, month: int, day: int) -> int:
        if month == 0:
            return ST_TIBS_OFFSET
        doy = (month - 1) * DAYS_IN_MONTH + day
        if doy >= ST_TIBS_OFFSET and self.is_leap_year(year):
            doy += 1
        return doy

    def from_year_day(self, year: int, day_of_year: int) -> YMD:
        if self.is_leap_year(year):
            if day_of_year == ST_TIBS_OFFSET:
                return year, 0, 0
            if day_of_year > ST_TIBS_OFFSET:
                day_of_year -= 1
        return year, (day_of_year - 1) // DAYS_IN_MONTH + 1, (day_of_year - 1) % DAYS_IN_MONTH + 1

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        days = (year - OFFSET_FROM_ISO_0000 - 1) * 365 + _leap_years_before(year)
        return days + self.day_of_year(year, month, day) - 1 - DAYS_1167_TO_ISO_1970

    def from_epoch_day(self, epoch_day: int) -> YMD:
        iso_year, _, _ = iso_from_epoch_day(epoch_day)
        doy = epoch_day - iso_to_epoch_day(iso_year, 1, 1) + 1
        return self.from_year_day(iso_year + OFFSET_FROM_ISO_0000, doy)

    def check_date(self, year: int, month: int, day: int) -> None:
        if month == 0 and day == 0:
            self.check_year(year)
            if not self.is_leap_year(year):
                raise CalendarValidationError(
                    f"Invalid date: St. Tib's Day only occurs in leap years, {year} is not one",
                    field=ChronoField.MONTH_OF_YEAR,
                )
            return
        if month == 0 or day == 0:
            raise CalendarValidationError(
                f"Invalid date {year}/{month}/{day}: month and day must both be 0 for St. Tib's Day",
                field=ChronoField.DAY_OF_MONTH if month else ChronoField.MONTH_OF_YEAR,
            )
        super().check_date(year, month, day)

    # ------------------------------------------------------------------
    # Weeks skip St. Tib's Day: regular days are numbered 365 to a year.
    # For adding weeks St. Tib's Day takes the place of Chaos 60.
    # ------------------------------------------------------------------
    def _regular_day(self, year: int, month: int, day: int) -> int:
        if month == 0:
            month, day = 1, ST_TIBS_OFFSET
        return (year - 1) * 365 + (month - 1) * DAYS_IN_MONTH + day

    def _from_regular_day(self, number: int) -> YMD:
        year, index = divmod(number - 1, 365)
        return year + 1, index // DAYS_IN_MONTH + 1, index % DAYS_IN_MONTH + 1

    def plus_weeks(self, year: int, month: int, day: int, weeks: int) -> Optional[YMD]:
        if month == 0 and weeks % 73 == 0:
            return self.move_to_year(year, month, day, year + weeks // 73)
        return self._from_regular_day(self._regular_day(year, month, day) + weeks * DAYS_IN_WEEK)

    def weeks_until(self, start: YMD, end: YMD) -> int:
        a = self._regular_day(*start)
        b = self._regular_day(*end)
        # St. Tib's Day counts as the neighbour on the side of the other date
        if start[1] == 0 and end[1] != 0 and b <= a:
            a -= 1
        if end[1] == 0 and start[1] != 0 and a < b:
            b -= 1
        return trunc_div(b - a, DAYS_IN_WEEK)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def arith_fields(self, year: int, month: int, day: int) -> Tuple[int, int]:
        if month == 0:
            return 1, 0
        return month, day

    def resolve_previous(self, year: int, month: int, day: int) -> YMD:
        self.check_year(year)
        if month == 0:
            if self.is_leap_year(year):
                return year, 0, 0
            month, day = 1, ST_TIBS_OFFSET
        if day == 0:
            day = ST_TIBS_OFFSET
        return year, month, min(day, DAYS_IN_MONTH)

    def move_to_year(self, year: int, month: int, day: int, new_year: int) -> YMD:
        if month == 0:
            return self.resolve_previous(new_year, 0, 0)
        return super().move_to_year(year, month, day, new_year)

    def plus_months(self, year: int, month: int, day: int, months: int) -> YMD:
        if month != 0 or months == 0:
            return super().plus_months(year, month, day, months)
        new_year, new_month = self.from_proleptic_month(self.proleptic_month(year, month, day) + months)
        # St. Tib's Day is kept when landing back in Chaos
        return self.resolve_previous(new_year, 0 if new_month == 1 else new_month, 0)

    def day_key(self, year: int, month: int, day: int) -> int:
        # St. Tib's Day sorts between Chaos 59 and Chaos 60
        return ST_TIBS_OFFSET * 2 - 1 if month == 0 else day * 2

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    def position_in_year(self, year: int, month: int, day: int) -> int:
        return (month - 1) * DAYS_IN_MONTH + day

    def day_of_week(self, year: int, month: int, day: int) -> int:
        return (self.position_in_year(year, month, day) - 1) % DAYS_IN_WEEK + 1

    def get_field(self, year: int, month: int, day: int, field: ChronoField) -> int:
        if month == 0 and field in _WEEK_FIELDS:
            return 0
        return super().get_field(year, month, day, field)

    def adjust(self, year: int, month: int, day: int, field: ChronoField, value: int) -> Optional[YMD]:
        if field not in _WEEK_FIELDS and field not in (ChronoField.DAY_OF_MONTH, ChronoField.MONTH_OF_YEAR):
            return None
        if value == 0:
            if not self.is_leap_year(year):
                raise CalendarValidationError(
                    f"Invalid value for {field}: 0 is St. Tib's Day and {year} is not a leap year", field=field
                )
            return year, 0, 0
        if field not in _WEEK_FIELDS:
            return None
        if month == 0:
            # St. Tib's Day takes its week from the day after it
            month, day = 1, ST_TIBS_OFFSET
        current = self.get_field(year, month, day, field)
        step = 1 if field in _WEEK_FIELDS[:3] else DAYS_IN_WEEK
        return self._from_regular_day(self._regular_day(year, month, day) + (value - current) * step)

    def epagomenal(self, year: int, month: int, day: int) -> Optional[EpagomenalDay]:
        return EpagomenalDay.ST_TIBS_DAY if month == 0 else None

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------
    def _field_ranges(self) -> Dict[ChronoField, ValueRange]:
        return {
            ChronoField.DAY_OF_WEEK: ValueRange.of(0, 1, 5, 5),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(0, 1, 5, 5),
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(0, 1, 5, 5),
            ChronoField.DAY_OF_MONTH: ValueRange.of(0, 1, 73, 73),
            ChronoField.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(0, 1, 15, 15),
            ChronoField.ALIGNED_WEEK_OF_YEAR: ValueRange.of(0, 1, 73, 73),
            ChronoField.MONTH_OF_YEAR: ValueRange.of(0, 1, 5, 5),
        }

    def date_range(self, year: int, month: int, day: int, field: ChronoField) -> ValueRange:
        self.check_field(field)
        # fields that see St. Tib's Day as 0 admit 0 throughout a leap year
        low = 0 if self.is_leap_year(year) else 1
        if field is ChronoField.MONTH_OF_YEAR:
            return ValueRange.of(low, 5)
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return ValueRange.of(low, DAYS_IN_WEEK)
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(low, 365 // DAYS_IN_WEEK)
        if month == 0 and field in (ChronoField.DAY_OF_WEEK, ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
                                    ChronoField.ALIGNED_WEEK_OF_MONTH, ChronoField.DAY_OF_MONTH):
            return ValueRange.of(0, 0)
        if field in _WEEK_FIELDS[:2]:
            return ValueRange.of(1, DAYS_IN_WEEK)
        return super().date_range(year, month, day, field)

    def format_date(self, year: int, month: int, day: int) -> str:
        if month == 0:
            return f"{self.id} YOLD {year} St. Tib's Day"
        return super().format_date(year, month, day)


DISCORDIAN = DiscordianChronology()
