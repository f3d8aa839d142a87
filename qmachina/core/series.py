"""
Price series and period helpers shared by all indicators.
"""

import logging
import numbers
from typing import Sequence, Union

import numpy as np
import pandas as pd

from .errors import ConfigurationError, InvalidDataError

logger = logging.getLogger(__name__)

PriceSeries = Union[Sequence[float], np.ndarray, pd.Series]


def as_price_series(data: PriceSeries) -> np.ndarray:
    """
    Coerce input data into a read-only 1-D float64 array.

    The input is always copied, so the caller's object is never modified.

    Parameters
    ----------
    data : sequence of float, np.ndarray or pd.Series
        Price values ordered oldest-first

    Returns
    -------
    np.ndarray
        Read-only float64 array

    Raises
    ------
    InvalidDataError
        If a value cannot be converted to float or the input is not 1-D
    """
    try:
        if isinstance(data, pd.Series):
            arr = data.to_numpy(dtype=np.float64, copy=True)
        else:
            arr = np.array(data, dtype=np.float64)
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"Rejected non-numeric series: {e}")
        raise InvalidDataError(f"Series contains non-numeric values: {e}") from e

    if arr.ndim != 1:
        raise InvalidDataError(f"Series must be one-dimensional, got {arr.ndim} dimensions.")

    arr.flags.writeable = False
    return arr


def coerce_period(period: int) -> int:
    """
    Normalize a look-back period.

    A period of 0 becomes 1. Negative or non-integer periods are rejected.
    """
    if isinstance(period, bool) or not isinstance(period, numbers.Integral):
        raise ConfigurationError(f"Period must be an integer, got {period!r}.")
    if period < 0:
        raise ConfigurationError(f"Period must not be negative, got {period}.")
    return 1 if period == 0 else int(period)
