"""altchrono public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_chronologies,
    chronology_info,
    get_chronology,
    make_chronology,
    register_chronology,
    from_iso,
    to_iso,
    convert,
    today,
    month_days,
)
from .core.date import ChronoDate
from .core.errors import (
    AltChronoError,
    CalendarValidationError,
    ChronologyMismatchError,
    EraMismatchError,
    MissingConfigurationError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from .core.fields import ChronoField, ChronoUnit, DayOfWeek, ValueRange
from .core.period import Period
from .core.types import ChronologySpec

__all__ = [
    "list_chronologies",
    "chronology_info",
    "get_chronology",
    "make_chronology",
    "register_chronology",
    "from_iso",
    "to_iso",
    "convert",
    "today",
    "month_days",
    "ChronoDate",
    "Period",
    "ChronoField",
    "ChronoUnit",
    "DayOfWeek",
    "ValueRange",
    "ChronologySpec",
    "AltChronoError",
    "CalendarValidationError",
    "ChronologyMismatchError",
    "EraMismatchError",
    "MissingConfigurationError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
]
