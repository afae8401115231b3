"""
altchrono.chronologies.factory
------------------------------
Transforms pure data specifications into live Chronology objects.
"""

from __future__ import annotations

from ..core.chronology import Chronology
from ..core.types import ChronologySpec
from .accounting import AccountingChronologyBuilder
from .cutover import CutoverChronology
from .discordian import DISCORDIAN
from .fixed import INTERNATIONAL_FIXED
from .julian import JULIAN
from .nile import COPTIC, ETHIOPIC
from .pax import PAX
from .specs import AccountingParams, CutoverParams, FixedParams
from .symmetry import SYMMETRY010, SYMMETRY454

SINGLETONS = {
    c.calendar_type: c
    for c in (COPTIC, ETHIOPIC, JULIAN, DISCORDIAN, INTERNATIONAL_FIXED, SYMMETRY010, SYMMETRY454, PAX)
}


def build_accounting(params: AccountingParams):
    builder = (
        AccountingChronologyBuilder()
        .ends_on(params.ends_on)
        .with_division(params.division)
        .leap_week_in_month(params.leap_week_in_month)
    )
    if params.in_last_week:
        builder.in_last_week_of(params.end)
    else:
        builder.nearest_end_of(params.end)
    if params.year_offset:
        builder.accounting_year_starts_in_iso_year()
    return builder.to_chronology()


def make_chronology(spec: ChronologySpec) -> Chronology:
    """The universal entry point."""
    payload = spec.payload
    if isinstance(payload, FixedParams):
        if payload.calendar_type not in SINGLETONS:
            raise KeyError(f"Unknown calendar type '{payload.calendar_type}'. Available: {sorted(SINGLETONS)}")
        return SINGLETONS[payload.calendar_type]
    if isinstance(payload, CutoverParams):
        return CutoverChronology(payload.cutover)
    if isinstance(payload, AccountingParams):
        return build_accounting(payload)
    raise TypeError(f"Unknown Chronology Params type: {type(payload)}")
