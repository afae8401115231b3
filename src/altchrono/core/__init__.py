from .date import ChronoDate
from .errors import (
    AltChronoError,
    CalendarValidationError,
    ChronologyMismatchError,
    EraMismatchError,
    MissingConfigurationError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from .fields import ChronoField, ChronoUnit, DayOfWeek, ValueRange
from .period import Period

__all__ = [
    "ChronoDate",
    "Period",
    "ChronoField",
    "ChronoUnit",
    "DayOfWeek",
    "ValueRange",
    "AltChronoError",
    "CalendarValidationError",
    "ChronologyMismatchError",
    "EraMismatchError",
    "MissingConfigurationError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
]
