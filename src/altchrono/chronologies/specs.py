from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict

from ..core.fields import DayOfWeek
from ..core.types import ChronologySpec
from .accounting import AccountingYearDivision
from .cutover import BRITISH_CUTOVER


# ============================================================
# PARAMETER PAYLOADS
# ============================================================

@dataclass(frozen=True)
class FixedParams:
    """A calendar without configuration, named by its calendar type."""
    calendar_type: str


@dataclass(frozen=True)
class CutoverParams:
    cutover: date


@dataclass(frozen=True)
class AccountingParams:
    ends_on: DayOfWeek
    end: int
    in_last_week: bool = False
    division: AccountingYearDivision = AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS
    leap_week_in_month: int = 13
    year_offset: int = 0


def fixed(name: str, calendar_type: str) -> ChronologySpec:
    return ChronologySpec(kind="fixed", id=name, payload=FixedParams(calendar_type))


# ============================================================
# SPECS
# ============================================================

FIXED_SPECS: Dict[str, ChronologySpec] = {
    "Coptic": fixed("Coptic", "coptic"),
    "Ethiopic": fixed("Ethiopic", "ethiopic"),
    "Julian": fixed("Julian", "julian"),
    "Discordian": fixed("Discordian", "discordian"),
    "Ifc": fixed("Ifc", "ifc"),
    "Sym010": fixed("Sym010", "sym010"),
    "Sym454": fixed("Sym454", "sym454"),
    "Pax": fixed("Pax", "pax"),
}

BRITISH_CUTOVER_SPEC = ChronologySpec(
    kind="cutover",
    id="BritishCutover",
    payload=CutoverParams(BRITISH_CUTOVER),
)

# National Retail Federation 4-5-4 calendar: the fiscal year ends on the
# Saturday nearest the end of January and is named after the year it starts in.
RETAIL_454_SPEC = ChronologySpec(
    kind="accounting",
    id="Accounting",
    payload=AccountingParams(
        ends_on=DayOfWeek.SATURDAY,
        end=1,
        division=AccountingYearDivision.QUARTERS_OF_PATTERN_4_5_4_WEEKS,
        leap_week_in_month=12,
        year_offset=1,
    ),
)

CONFIGURED_SPECS: Dict[str, ChronologySpec] = {
    "BritishCutover": BRITISH_CUTOVER_SPEC,
    "Accounting": RETAIL_454_SPEC,
}

ALL_SPECS: Dict[str, ChronologySpec] = {**FIXED_SPECS, **CONFIGURED_SPECS}
