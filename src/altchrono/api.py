from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .chronologies.factory import make_chronology as _make_chronology
from .core.chronology import Chronology, ChronologyRegistry
from .core.date import ChronoDate
from .core.types import ChronologySpec
from .core.time import date_to_epoch_day

_registry: Optional[ChronologyRegistry] = None

def set_registry(reg: ChronologyRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ChronologyRegistry:
    if _registry is None:
        raise RuntimeError("Chronology registry not initialized")
    return _registry

def list_chronologies() -> List[str]:
    return _reg().list()

def chronology_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def get_chronology(name: str) -> Chronology:
    return _reg().get(name)

def make_chronology(spec: ChronologySpec) -> Chronology:
    return _make_chronology(spec)

def register_chronology(name: str, chronology: Chronology, *, overwrite: bool = False) -> None:
    _reg().register(name, chronology, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def from_iso(d: date, *, chronology: str) -> ChronoDate:
    """The date of ``chronology`` falling on the ISO date ``d``."""
    return _reg().get(chronology).date_epoch_day(date_to_epoch_day(d))

def to_iso(cd: ChronoDate) -> date:
    return cd.to_iso()

def convert(cd: ChronoDate, *, to: str) -> ChronoDate:
    """Re-express ``cd`` in another registered chronology."""
    return _reg().get(to).date_epoch_day(cd.to_epoch_day())

def today(*, chronology: str) -> ChronoDate:
    return _reg().get(chronology).date_now()

def month_days(year: int, month: int, *, chronology: str) -> List[ChronoDate]:
    """All dates of one month, in order (epagomenal days are not part of a month)."""
    current = _reg().get(chronology).date(year, month, 1)
    days = []
    while current.epagomenal is not None or (current.year, current.month) == (year, month):
        if current.epagomenal is None:
            days.append(current)
        current = current.plus_days(1)
    return days
