from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from .fields import ChronoField, ValueRange

logger = logging.getLogger(__name__)

YMD = Tuple[int, int, int]


class Chronology(Protocol):
    """
    Kernel contract of a calendar system.

    A chronology maps (year, month, day) triples to and from the epoch-day axis
    and answers the calendar-specific questions the generic date engine asks.
    """
    id: str
    calendar_type: str
    eras: Sequence[Enum]
    days_in_week: int
    fixed_months_per_year: bool

    def is_leap_year(self, year: int) -> bool: ...
    def months_in_year(self, year: int) -> int: ...
    def length_of_month(self, year: int, month: int) -> int: ...
    def length_of_year(self, year: int) -> int: ...
    def day_of_year(self, year: int, month: int, day: int) -> int: ...
    def to_epoch_day(self, year: int, month: int, day: int) -> int: ...
    def from_epoch_day(self, epoch_day: int) -> YMD: ...
    def from_year_day(self, year: int, day_of_year: int) -> YMD: ...
    def check_date(self, year: int, month: int, day: int) -> None: ...
    def check_year_day(self, year: int, day_of_year: int) -> None: ...
    def normalize(self, year: int, month: int, day: int) -> YMD: ...
    def resolve_previous(self, year: int, month: int, day: int) -> YMD: ...
    def move_to_year(self, year: int, month: int, day: int, new_year: int) -> YMD: ...
    def proleptic_month(self, year: int, month: int, day: int) -> int: ...
    def plus_months(self, year: int, month: int, day: int, months: int) -> YMD: ...
    def month_key(self, year: int, month: int, day: int) -> int: ...
    def year_key(self, year: int, month: int, day: int) -> int: ...
    def get_field(self, year: int, month: int, day: int, field: ChronoField) -> int: ...
    def adjust(self, year: int, month: int, day: int, field: ChronoField, value: int) -> Optional[YMD]: ...
    def plus_weeks(self, year: int, month: int, day: int, weeks: int) -> Optional[YMD]: ...
    def weeks_until(self, start: YMD, end: YMD) -> int: ...
    def unchanged_by(self, field: ChronoField, value: int) -> bool: ...
    def range(self, field: ChronoField) -> ValueRange: ...
    def date_range(self, year: int, month: int, day: int, field: ChronoField) -> ValueRange: ...
    def era_of(self, year: int) -> Enum: ...
    def era_of_value(self, value: int) -> Enum: ...
    def proleptic_year(self, era: Enum, year_of_era: int) -> int: ...
    def format_date(self, year: int, month: int, day: int) -> str: ...
    def info(self) -> Dict[str, Any]: ...


@dataclass
class ChronologyRegistry:
    _chronologies: Dict[str, Chronology]

    def get(self, name: str) -> Chronology:
        if name in self._chronologies:
            return self._chronologies[name]
        # calendar types are accepted as aliases of ids
        for chrono in self._chronologies.values():
            if chrono.calendar_type == name:
                return chrono
        raise KeyError(f"Unknown chronology '{name}'. Available: {sorted(self._chronologies)}")

    def list(self) -> List[str]:
        return sorted(self._chronologies.keys())

    def register(self, name: str, chronology: Chronology, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._chronologies):
            raise KeyError(f"Chronology '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering chronology %s as %r", chronology.id, name)
        self._chronologies[name] = chronology
