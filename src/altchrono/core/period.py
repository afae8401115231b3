from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .chronology import Chronology


@dataclass(frozen=True)
class Period:
    """A years/months/days amount bound to one chronology."""
    chronology: "Chronology"
    years: int = 0
    months: int = 0
    days: int = 0

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def negated(self) -> "Period":
        return Period(self.chronology, -self.years, -self.months, -self.days)

    def __neg__(self) -> "Period":
        return self.negated()

    def __iter__(self):
        return iter((self.years, self.months, self.days))

    def __str__(self) -> str:
        if self.is_zero():
            return f"{self.chronology.id} P0D"
        parts = []
        if self.years:
            parts.append(f"{self.years}Y")
        if self.months:
            parts.append(f"{self.months}M")
        if self.days:
            parts.append(f"{self.days}D")
        return f"{self.chronology.id} P{''.join(parts)}"
