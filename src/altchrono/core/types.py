from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Literal


@dataclass(frozen=True)
class ChronologySpec:
    """Top-level wrapper for all chronology specifications."""
    kind: Literal["fixed", "cutover", "accounting"]
    id: str
    payload: Any  # FixedParams | CutoverParams | AccountingParams

    def tweak(self, **changes: Any) -> "ChronologySpec":
        """Copy of this spec with some payload fields replaced."""
        return replace(self, payload=replace(self.payload, **changes))
