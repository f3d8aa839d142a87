"""
Error types raised by indicator computations.

Three kinds of failure exist:
- INSUFFICIENT_DATA: series shorter than the computation requires
- INVALID_DATA: series contains (or produces) non-finite or non-numeric values
- CONFIGURATION: indicator parameters are inconsistent
"""

from enum import Enum


class ErrorKind(Enum):
    """Kind of indicator failure"""
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    INVALID_DATA = "INVALID_DATA"
    CONFIGURATION = "CONFIGURATION"


class IndicatorError(ValueError):
    """Base class for every failure raised by an indicator."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})"


class InsufficientDataError(IndicatorError):
    """Input series is shorter than the minimum length required."""
    kind = ErrorKind.INSUFFICIENT_DATA


class InvalidDataError(IndicatorError):
    """Input contains or produces NaN/Infinity, or is not a numeric series."""
    kind = ErrorKind.INVALID_DATA


class ConfigurationError(IndicatorError):
    """Indicator parameters are mutually inconsistent."""
    kind = ErrorKind.CONFIGURATION
