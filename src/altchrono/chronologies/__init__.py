from .accounting import AccountingChronology, AccountingChronologyBuilder, AccountingYearDivision
from .base import BaseChronology
from .cutover import BRITISH, CutoverChronology
from .discordian import DISCORDIAN, DiscordianChronology
from .eras import (
    AccountingEra,
    CopticEra,
    DiscordianEra,
    EpagomenalDay,
    EthiopicEra,
    InternationalFixedEra,
    IsoEra,
    JulianEra,
    PaxEra,
)
from .fixed import INTERNATIONAL_FIXED, InternationalFixedChronology
from .julian import JULIAN, JulianChronology
from .nile import COPTIC, ETHIOPIC, CopticChronology, EthiopicChronology
from .pax import PAX, PaxChronology
from .symmetry import SYMMETRY010, SYMMETRY454, Symmetry010Chronology, Symmetry454Chronology

__all__ = [
    "BaseChronology",
    "CopticChronology",
    "EthiopicChronology",
    "JulianChronology",
    "CutoverChronology",
    "DiscordianChronology",
    "InternationalFixedChronology",
    "Symmetry010Chronology",
    "Symmetry454Chronology",
    "PaxChronology",
    "AccountingChronology",
    "AccountingChronologyBuilder",
    "AccountingYearDivision",
    "COPTIC",
    "ETHIOPIC",
    "JULIAN",
    "BRITISH",
    "DISCORDIAN",
    "INTERNATIONAL_FIXED",
    "SYMMETRY010",
    "SYMMETRY454",
    "PAX",
    "AccountingEra",
    "CopticEra",
    "DiscordianEra",
    "EpagomenalDay",
    "EthiopicEra",
    "InternationalFixedEra",
    "IsoEra",
    "JulianEra",
    "PaxEra",
]
