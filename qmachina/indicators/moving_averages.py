"""
Moving average indicators.
"""

import logging
import math

import numpy as np

from .base import Indicator, PeriodIndicator
from ..core.errors import InsufficientDataError, InvalidDataError
from ..core.series import PriceSeries, as_price_series

logger = logging.getLogger(__name__)


class SimpleMovingAverage(PeriodIndicator, Indicator[float]):
    """
    Simple Moving Average (SMA).

    Calculates the arithmetic mean of the FIRST N values of the series.
    Callers pass the exact slice they want averaged.

    Formula: SMA = (P1 + P2 + ... + Pn) / n
    """

    def __init__(self, period: int = 20):
        super().__init__(period)

    def compute(self, series: PriceSeries) -> float:
        prices = as_price_series(series)

        if len(prices) < self.period:
            logger.debug(f"SMA({self.period}): {len(prices)} values supplied")
            raise InsufficientDataError("Period is larger than the sampled data.")

        with np.errstate(over="ignore"):
            total = float(prices[:self.period].sum())
        # Only the aggregate is checked; NaNs that cancel out are not caught
        if not math.isfinite(total):
            logger.debug(f"SMA({self.period}): non-finite sum {total}")
            raise InvalidDataError("Invalid data encountered during calculations.")

        return total / self.period


class ExponentialMovingAverage(PeriodIndicator, Indicator[float]):
    """
    Exponential Moving Average (EMA).

    Gives more weight to recent prices using exponential smoothing over the
    LAST N values of the series, seeded with the oldest value of that window.

    Formula: EMA = (Price - EMA(prev)) * k + EMA(prev)
    where k = 2 / (period + 1)
    """

    def __init__(self, period: int = 20):
        super().__init__(period)
        self._smoothing = self._smoothing_for(self.period)

    @staticmethod
    def _smoothing_for(period: int) -> float:
        return 2.0 / (period + 1.0)

    @property
    def smoothing(self) -> float:
        """Smoothing factor, derived from the period"""
        return self._smoothing

    def set_period(self, period: int) -> None:
        super().set_period(period)
        self._smoothing = self._smoothing_for(self.period)

    def compute(self, series: PriceSeries) -> float:
        prices = as_price_series(series)

        if len(prices) < self.period:
            logger.debug(f"EMA({self.period}): {len(prices)} values supplied")
            raise InsufficientDataError("Period is larger than the sampled data.")

        window = prices[len(prices) - self.period:]

        ema = None
        for value in window.tolist():
            if not math.isfinite(value):
                logger.debug(f"EMA({self.period}): non-finite value {value}")
                raise InvalidDataError("Invalid data encountered during calculations.")
            if ema is None:
                ema = value
            else:
                ema = (value - ema) * self._smoothing + ema

        return ema
