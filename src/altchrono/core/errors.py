from __future__ import annotations

from typing import Any, Optional


class AltChronoError(Exception):
    """Base error."""


class CalendarValidationError(AltChronoError, ValueError):
    """Raised when a date, day-of-year or configuration value is outside a calendar's domain."""

    def __init__(self, message: str, *, field: Optional[Any] = None):
        super().__init__(message)
        self.field = field


class UnsupportedFieldError(AltChronoError, ValueError):
    """Raised when a field is not handled by a chronology."""


class UnsupportedUnitError(AltChronoError, ValueError):
    """Raised when a unit is not handled by a chronology."""


class EraMismatchError(AltChronoError, TypeError):
    """Raised when an era of another calendar family is passed in."""


class MissingConfigurationError(AltChronoError, TypeError):
    """Raised when a required configuration value is missing."""


class ChronologyMismatchError(AltChronoError, ValueError):
    """Raised when dates or periods of different chronologies are combined."""
