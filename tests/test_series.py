"""Tests for series coercion, period coercion and error types."""

import numpy as np
import pandas as pd
import pytest

from qmachina.core.errors import (
    ConfigurationError,
    ErrorKind,
    IndicatorError,
    InsufficientDataError,
    InvalidDataError,
)
from qmachina.core.series import as_price_series, coerce_period
from qmachina.indicators import ExponentialMovingAverage, SimpleMovingAverage


class TestAsPriceSeries:
    """Tests for input coercion."""

    def test_list_input(self):
        arr = as_price_series([1, 2, 3])
        assert arr.dtype == np.float64
        assert arr.tolist() == [1.0, 2.0, 3.0]

    def test_result_is_read_only(self):
        arr = as_price_series([1.0, 2.0])
        with pytest.raises(ValueError):
            arr[0] = 5.0

    def test_caller_array_not_frozen(self):
        source = np.array([1.0, 2.0, 3.0])
        as_price_series(source)
        source[0] = 9.0
        assert source[0] == 9.0

    def test_pandas_series_input(self):
        prices = pd.Series([1.0, 2.0, 3.0, 4.0, 5.0], index=list("abcde"))
        assert SimpleMovingAverage(3).compute(prices) == 2.0
        assert ExponentialMovingAverage(3).compute(prices) == pytest.approx(4.25)

    def test_numpy_input(self):
        assert SimpleMovingAverage(2).compute(np.arange(1, 6)) == 1.5

    def test_tuple_input(self):
        assert SimpleMovingAverage(2).compute((4.0, 6.0)) == 5.0

    def test_non_numeric_input(self):
        with pytest.raises(InvalidDataError):
            as_price_series([1.0, "abc", 3.0])

    def test_value_too_large_for_float(self):
        with pytest.raises(InvalidDataError):
            as_price_series([1.0, 10 ** 400])

    def test_value_too_large_for_float_in_compute(self):
        with pytest.raises(InvalidDataError):
            SimpleMovingAverage(1).compute([10 ** 400])

    def test_multi_dimensional_input(self):
        with pytest.raises(InvalidDataError):
            as_price_series([[1.0, 2.0], [3.0, 4.0]])

    def test_scalar_input(self):
        with pytest.raises(InvalidDataError):
            as_price_series(5.0)


class TestCoercePeriod:
    """Tests for period normalization."""

    def test_zero_becomes_one(self):
        assert coerce_period(0) == 1

    def test_positive_kept(self):
        assert coerce_period(14) == 14

    def test_numpy_integer_accepted(self):
        assert coerce_period(np.int64(9)) == 9

    def test_negative_rejected(self):
        with pytest.raises(ConfigurationError):
            coerce_period(-3)


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("error_cls, kind", [
        (InsufficientDataError, ErrorKind.INSUFFICIENT_DATA),
        (InvalidDataError, ErrorKind.INVALID_DATA),
        (ConfigurationError, ErrorKind.CONFIGURATION),
    ])
    def test_error_kinds(self, error_cls, kind):
        error = error_cls("boom")
        assert error.kind is kind
        assert error.message == "boom"
        assert isinstance(error, IndicatorError)
        assert isinstance(error, ValueError)

    def test_error_repr(self):
        assert repr(InvalidDataError("bad")) == "InvalidDataError(kind=INVALID_DATA, message='bad')"
