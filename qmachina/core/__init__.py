"""
Core building blocks: error types and series helpers
"""

from .errors import (
    ErrorKind,
    IndicatorError,
    InsufficientDataError,
    InvalidDataError,
    ConfigurationError,
)
from .series import PriceSeries, as_price_series, coerce_period

__all__ = [
    'ErrorKind',
    'IndicatorError',
    'InsufficientDataError',
    'InvalidDataError',
    'ConfigurationError',
    'PriceSeries',
    'as_price_series',
    'coerce_period',
]
