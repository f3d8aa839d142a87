"""
Build indicators by name from an IndicatorConfig.
"""

from typing import Callable, Dict, List, Optional

from .base import Indicator
from .moving_averages import ExponentialMovingAverage, SimpleMovingAverage
from .oscillators import MACD, RelativeStrengthIndex
from .volatility import BollingerBands
from ..config.indicator_config import IndicatorConfig
from ..core.errors import ConfigurationError

_BUILDERS: Dict[str, Callable[[IndicatorConfig], Indicator]] = {
    'sma': lambda c: SimpleMovingAverage(c.sma_period),
    'ema': lambda c: ExponentialMovingAverage(c.ema_period),
    'rsi': lambda c: RelativeStrengthIndex(c.rsi_period),
    'bollinger': lambda c: BollingerBands(c.bollinger_period),
    'macd': lambda c: MACD(c.macd_slow_period, c.macd_fast_period, c.macd_signal_period),
}


def available_indicators() -> List[str]:
    """Names accepted by create_indicator()"""
    return sorted(_BUILDERS)


def create_indicator(name: str, config: Optional[IndicatorConfig] = None) -> Indicator:
    """
    Create an indicator by name.

    Parameters
    ----------
    name : str
        One of available_indicators() (case-insensitive)
    config : IndicatorConfig, optional
        Periods to use; defaults when omitted

    Raises
    ------
    ConfigurationError
        If the name is not a string or is unknown
    """
    if not isinstance(name, str):
        raise ConfigurationError(f"Indicator name must be a string, got {name!r}.")

    builder = _BUILDERS.get(name.strip().lower())
    if builder is None:
        raise ConfigurationError(
            f"Unknown indicator '{name}'. Available: {', '.join(available_indicators())}"
        )
    return builder(config or IndicatorConfig())
