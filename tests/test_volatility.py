"""Tests for Bollinger Bands."""

import math
import warnings

import pytest

from qmachina.core.errors import InsufficientDataError, InvalidDataError
from qmachina.indicators import BandValues, BollingerBands

PRICES = [100.0, 101.0, 102.0, 103.0, 102.0, 101.0, 100.0, 99.0, 98.0, 97.0]


class TestBollingerBands:
    """Tests for Bollinger Bands calculation."""

    def test_bollinger_creation_with_valid_period(self):
        assert BollingerBands(20).period == 20

    def test_bollinger_creation_with_zero_period(self):
        assert BollingerBands(0).period == 1

    def test_bollinger_basic(self):
        upper, lower = BollingerBands(5).compute(PRICES)

        assert upper > lower
        assert upper == pytest.approx(103.63, abs=0.01)
        assert lower == pytest.approx(99.56, abs=0.01)

    def test_bollinger_compute_bands(self):
        """Middle band is the mean of the first 5 prices; std is sqrt(1.04)."""
        bands = BollingerBands(5).compute_bands(PRICES)

        assert isinstance(bands, BandValues)
        assert bands.middle == pytest.approx(101.6)
        assert bands.upper == pytest.approx(101.6 + 2 * math.sqrt(1.04))
        assert bands.lower == pytest.approx(101.6 - 2 * math.sqrt(1.04))

    def test_bollinger_uses_leading_window(self):
        """Prices after the first `period` elements do not move the bands."""
        bb = BollingerBands(3)
        assert bb.compute([1.0, 2.0, 3.0]) == bb.compute([1.0, 2.0, 3.0, 500.0, -500.0])

    def test_bollinger_zero_variance(self):
        upper, lower = BollingerBands(4).compute([50.0, 50.0, 50.0, 50.0, 10.0])
        assert upper == lower == 50.0

    def test_bollinger_symmetric_around_middle(self):
        bands = BollingerBands(4).compute_bands([1.0, 3.0, 5.0, 7.0])
        assert bands.upper - bands.middle == pytest.approx(bands.middle - bands.lower)
        assert bands.upper > bands.lower

    def test_bollinger_insufficient_data(self):
        with pytest.raises(InsufficientDataError):
            BollingerBands(20).compute([100.0, 101.0, 102.0])

    def test_bollinger_invalid_data(self):
        with pytest.raises(InvalidDataError):
            BollingerBands(5).compute([100.0, math.nan, 102.0, 103.0, 104.0])

    def test_bollinger_overflowing_variance(self):
        """Squared deviations past float range widen the bands to infinity without a RuntimeWarning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            upper, lower = BollingerBands(2).compute([1e200, -1e200])

        assert upper == math.inf
        assert lower == -math.inf

    def test_bollinger_set_period_updates_sma(self):
        bb = BollingerBands(3)
        data = [1.0, 2.0, 3.0, 4.0]
        bb.compute(data)

        bb.set_period(5)
        assert bb.period == 5
        with pytest.raises(InsufficientDataError):
            bb.compute(data)

        bb.period = 4
        assert bb.compute_bands(data).middle == pytest.approx(2.5)
