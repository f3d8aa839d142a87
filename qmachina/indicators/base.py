"""
Base indicator classes that all indicators inherit from.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..core.series import PriceSeries, coerce_period

logger = logging.getLogger(__name__)

V = TypeVar("V")


class PeriodIndicator(ABC):
    """
    Capability shared by indicators with a look-back window.

    The period is always >= 1: a period of 0 is coerced to 1 both on
    construction and on mutation.
    """

    def __init__(self, period: int):
        """
        Initialize period.

        Parameters
        ----------
        period : int
            Lookback period for the indicator
        """
        self._period = coerce_period(period)

    @property
    def period(self) -> int:
        """Current look-back period"""
        return self._period

    @period.setter
    def period(self, period: int) -> None:
        self.set_period(period)

    def set_period(self, period: int) -> None:
        """
        Change the look-back period. Takes effect on the next compute().

        Parameters
        ----------
        period : int
            New period (0 is coerced to 1)
        """
        new_period = coerce_period(period)
        logger.debug(f"{self.__class__.__name__}: period {self._period} -> {new_period}")
        self._period = new_period

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(period={self.period})"


class Indicator(ABC, Generic[V]):
    """
    Abstract base class for all technical indicators.

    All indicators must implement:
    - compute(series): indicator value for a full price series

    Indicators keep no state between calls apart from their configuration.
    """

    @abstractmethod
    def compute(self, series: PriceSeries) -> V:
        """
        Compute the indicator over a price series.

        Parameters
        ----------
        series : sequence of float, np.ndarray or pd.Series
            Price values ordered oldest-first

        Returns
        -------
        V
            Indicator value

        Raises
        ------
        InsufficientDataError, InvalidDataError, ConfigurationError
        """
        pass
