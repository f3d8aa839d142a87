"""
Oscillator indicators (RSI, MACD, etc.)
"""

import logging
from typing import Optional

import numpy as np

from .base import Indicator, PeriodIndicator
from .moving_averages import ExponentialMovingAverage
from ..core.errors import ConfigurationError, InsufficientDataError, InvalidDataError
from ..core.series import PriceSeries, as_price_series

logger = logging.getLogger(__name__)


class RelativeStrengthIndex(PeriodIndicator, Indicator[float]):
    """
    Relative Strength Index (RSI).

    Measures the magnitude of price changes across the whole series.
    Values range from 0 to 100.
    - Above 70: Overbought
    - Below 30: Oversold

    Formula: RSI = 100 - (100 / (1 + RS))
    where RS = Total Gain / Total Loss

    The period only sets the minimum series length (period + 1); every
    consecutive pair of the series contributes to the gains and losses.
    """

    def __init__(self, period: int = 14):
        super().__init__(period)

    def compute(self, series: PriceSeries) -> float:
        prices = as_price_series(series)

        if len(prices) < self.period + 1:
            logger.debug(f"RSI({self.period}): {len(prices)} values supplied")
            raise InsufficientDataError("Insufficient data for RSI calculation.")

        if not np.isfinite(prices).all():
            logger.debug(f"RSI({self.period}): series contains non-finite values")
            raise InvalidDataError("Invalid data encountered during calculations.")

        changes = np.diff(prices)
        gains = float(changes[changes > 0].sum())
        losses = float(-changes[changes <= 0].sum())

        if gains == 0:
            return 0.0

        if losses == 0:
            return 100.0

        rs = gains / losses
        return 100.0 - (100.0 / (1.0 + rs))


class MACD(PeriodIndicator, Indicator[float]):
    """
    Moving Average Convergence Divergence (MACD).

    Trend-following momentum indicator showing relationship between
    two exponential moving averages.

    Components:
    - MACD Line: Fast EMA - Slow EMA
    - Signal Line: EMA of prior MACD Line values (optional)

    Constructor order is slow period first: MACD(26, 12, 9).
    """

    def __init__(
        self,
        slow_period: int = 26,
        fast_period: int = 12,
        signal_period: Optional[int] = None
    ):
        super().__init__(slow_period)  # Use slow period as main period
        self._slow_ema = ExponentialMovingAverage(slow_period)
        self._fast_ema = ExponentialMovingAverage(fast_period)
        self._signal_ema: Optional[ExponentialMovingAverage] = None
        if signal_period is not None:
            self._signal_ema = ExponentialMovingAverage(signal_period)

    @property
    def slow_period(self) -> int:
        """Slow EMA period"""
        return self._slow_ema.period

    @slow_period.setter
    def slow_period(self, period: int) -> None:
        self.set_period(period)

    @property
    def fast_period(self) -> int:
        """Fast EMA period"""
        return self._fast_ema.period

    @fast_period.setter
    def fast_period(self, period: int) -> None:
        self._fast_ema.set_period(period)

    @property
    def signal_period(self) -> Optional[int]:
        """Signal EMA period, or None when no signal line is configured"""
        if self._signal_ema is None:
            return None
        return self._signal_ema.period

    @signal_period.setter
    def signal_period(self, period: Optional[int]) -> None:
        if period is None:
            self._signal_ema = None
        elif self._signal_ema is None:
            self._signal_ema = ExponentialMovingAverage(period)
        else:
            self._signal_ema.set_period(period)

    def set_period(self, period: int) -> None:
        """Set the slow EMA period (the main period of the MACD)."""
        super().set_period(period)
        self._slow_ema.set_period(self.period)

    def compute(self, series: PriceSeries) -> float:
        """
        MACD line: fast EMA minus slow EMA, each over its own trailing window.

        Raises
        ------
        ConfigurationError
            If the fast period is not strictly less than the slow period
        InsufficientDataError
            If the series is shorter than the slow period
        """
        if self.fast_period >= self.slow_period:
            logger.debug(f"MACD: fast period {self.fast_period} >= slow period {self.slow_period}")
            raise ConfigurationError("The fast EMA must be less than the slow EMA.")

        prices = as_price_series(series)

        if len(prices) < self.slow_period:
            logger.debug(f"MACD({self.slow_period}, {self.fast_period}): {len(prices)} values supplied")
            raise InsufficientDataError("Slow EMA period is larger than the Data length.")

        fast_value = self._fast_ema.compute(prices)
        slow_value = self._slow_ema.compute(prices)

        return fast_value - slow_value

    def generate_signal(self, macd_values: PriceSeries) -> float:
        """
        Signal line value from a series of prior MACD line values.

        Parameters
        ----------
        macd_values : sequence of float
            Exactly signal_period MACD values, oldest-first

        Raises
        ------
        ConfigurationError
            If no signal period is configured or the number of values
            differs from the signal period
        """
        if self._signal_ema is None:
            raise ConfigurationError("MACD has no signal period configured.")

        values = as_price_series(macd_values)

        if len(values) != self._signal_ema.period:
            logger.debug(f"MACD signal: {len(values)} values for period {self._signal_ema.period}")
            raise ConfigurationError("Period is larger or smaller than the Data.")

        return self._signal_ema.compute(values)

    def __repr__(self) -> str:
        return (
            f"MACD(slow_period={self.slow_period}, fast_period={self.fast_period}, "
            f"signal_period={self.signal_period})"
        )
