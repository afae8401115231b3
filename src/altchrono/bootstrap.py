from __future__ import annotations

import logging

from altchrono.chronologies.factory import make_chronology
from altchrono.chronologies.specs import ALL_SPECS
from altchrono.core.chronology import ChronologyRegistry

logger = logging.getLogger(__name__)


def build_registry() -> ChronologyRegistry:
    chronologies = {}
    for name, spec in ALL_SPECS.items():
        chronologies[name] = make_chronology(spec)
    logger.debug("built chronology registry with %d entries", len(chronologies))
    return ChronologyRegistry(chronologies)
