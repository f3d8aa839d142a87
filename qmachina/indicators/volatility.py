"""
Volatility indicators (Bollinger Bands)
"""

import math
from typing import NamedTuple, Tuple

import numpy as np

from .base import Indicator, PeriodIndicator
from .moving_averages import SimpleMovingAverage
from ..core.series import PriceSeries, as_price_series


class BandValues(NamedTuple):
    """Upper, middle and lower Bollinger band values"""
    upper: float
    middle: float
    lower: float


class BollingerBands(PeriodIndicator, Indicator[Tuple[float, float]]):
    """
    Bollinger Bands.

    Volatility bands placed above and below a moving average.
    Bands widen when volatility increases and narrow when it decreases.

    Components:
    - Middle Band: SMA of the first N prices
    - Upper Band: Middle Band + (2 * Standard Deviation)
    - Lower Band: Middle Band - (2 * Standard Deviation)

    The standard deviation is the population deviation of the same first
    N prices the SMA averages.
    """

    K = 2.0  # Number of standard deviations

    def __init__(self, period: int = 20):
        super().__init__(period)
        self._sma = SimpleMovingAverage(self.period)

    def set_period(self, period: int) -> None:
        super().set_period(period)
        self._sma.set_period(self.period)

    def compute_bands(self, series: PriceSeries) -> BandValues:
        """
        Compute all three bands.

        Raises
        ------
        InsufficientDataError
            If the series is shorter than the period
        InvalidDataError
            If the SMA of the window is not finite
        """
        prices = as_price_series(series)

        # SMA enforces the length check and surfaces NaN before variance runs
        middle = self._sma.compute(prices)

        window = prices[:self.period]
        with np.errstate(over="ignore"):
            variance = float(((window - middle) ** 2).sum()) / self.period
        std = math.sqrt(variance)

        return BandValues(
            upper=middle + (self.K * std),
            middle=middle,
            lower=middle - (self.K * std),
        )

    def compute(self, series: PriceSeries) -> Tuple[float, float]:
        """(upper band, lower band)"""
        bands = self.compute_bands(series)
        return bands.upper, bands.lower
