"""
Technical indicators library.

All indicators follow a consistent interface:
- compute(series) to evaluate the indicator over a full price series
- period / set_period() to read or change the look-back window
"""

from .base import Indicator, PeriodIndicator
from .moving_averages import ExponentialMovingAverage, SimpleMovingAverage
from .oscillators import RelativeStrengthIndex, MACD
from .volatility import BollingerBands, BandValues
from .factory import create_indicator, available_indicators

__all__ = [
    'Indicator',
    'PeriodIndicator',
    'ExponentialMovingAverage',
    'SimpleMovingAverage',
    'RelativeStrengthIndex',
    'MACD',
    'BollingerBands',
    'BandValues',
    'create_indicator',
    'available_indicators',
]
