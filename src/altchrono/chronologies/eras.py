from __future__ import annotations

from enum import Enum


class CopticEra(Enum):
    """Eras of the Coptic calendar: before and after the Era of the Martyrs."""
    BEFORE_AM = 0
    AM = 1


class EthiopicEra(Enum):
    BEFORE_INCARNATION = 0
    INCARNATION = 1


class JulianEra(Enum):
    BC = 0
    AD = 1


class IsoEra(Enum):
    """Before/after the common era, as used by the Symmetry calendars."""
    BCE = 0
    CE = 1


class PaxEra(Enum):
    BCE = 0
    CE = 1


class AccountingEra(Enum):
    BCE = 0
    CE = 1


class DiscordianEra(Enum):
    """Year of Our Lady of Discord, the single Discordian era."""
    YOLD = 1


class InternationalFixedEra(Enum):
    CE = 1


class EpagomenalDay(Enum):
    """Days standing outside the month grid of their calendar."""
    LEAP_DAY = "Leap Day"
    YEAR_DAY = "Year Day"
    ST_TIBS_DAY = "St. Tib's Day"
