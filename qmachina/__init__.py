"""
qmachina
========

Technical analysis indicators computed over full price series:
SMA, EMA, RSI, Bollinger Bands and MACD.

Every indicator recomputes from the series it is given - there is no
streaming state between calls.
"""

__version__ = "0.1.0"
__author__ = "qmachina"

from .core.errors import (
    ErrorKind,
    IndicatorError,
    InsufficientDataError,
    InvalidDataError,
    ConfigurationError,
)
from .indicators import (
    Indicator,
    PeriodIndicator,
    SimpleMovingAverage,
    ExponentialMovingAverage,
    RelativeStrengthIndex,
    MACD,
    BollingerBands,
    BandValues,
    create_indicator,
)
from .config import IndicatorConfig

__all__ = [
    'ErrorKind',
    'IndicatorError',
    'InsufficientDataError',
    'InvalidDataError',
    'ConfigurationError',
    'Indicator',
    'PeriodIndicator',
    'SimpleMovingAverage',
    'ExponentialMovingAverage',
    'RelativeStrengthIndex',
    'MACD',
    'BollingerBands',
    'BandValues',
    'create_indicator',
    'IndicatorConfig',
]
