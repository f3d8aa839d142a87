"""
Indicator Configuration Module

Default look-back periods for every indicator, loadable from:
- built-in defaults
- environment variables (QMACHINA_<FIELD>, optionally from a .env file)
- a JSON file
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "QMACHINA_"


@dataclass
class IndicatorConfig:
    """Default periods used when building indicators by name."""

    # Moving averages
    sma_period: int = 20
    ema_period: int = 20

    # Oscillators
    rsi_period: int = 14
    macd_slow_period: int = 26
    macd_fast_period: int = 12
    macd_signal_period: int = 9

    # Volatility
    bollinger_period: int = 20

    def validate(self) -> None:
        """Check that every period is usable and the MACD periods are ordered."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"{f.name} must be a non-negative integer, got {value!r}.")

        if self.macd_fast_period >= self.macd_slow_period:
            raise ConfigurationError("The fast EMA must be less than the slow EMA.")

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> 'IndicatorConfig':
        """
        Build a configuration from environment variables.

        Parameters
        ----------
        env_file : str or Path, optional
            .env file to load first (existing variables are not overridden);
            searched for upward from the working directory when omitted
        """
        if env_file is None:
            env_file = find_dotenv(usecwd=True)
        load_dotenv(dotenv_path=env_file)

        overrides = {}
        for f in fields(cls):
            env_name = f"{ENV_PREFIX}{f.name.upper()}"
            raw = os.getenv(env_name)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[f.name] = int(raw)
            except ValueError as e:
                raise ConfigurationError(f"{env_name} must be an integer, got {raw!r}.") from e

        config = cls(**overrides)
        config.validate()
        return config

    def save(self, path: Union[str, Path]) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(asdict(self), f, indent=2)
        logger.info(f"Indicator configuration saved to: {path}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'IndicatorConfig':
        """
        Load configuration from a JSON file, falling back to defaults.

        An unreadable, malformed or invalid (see validate()) file logs a
        warning and yields the defaults.
        """
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            config = cls(**data)
            config.validate()
            return config
        # ValueError covers JSONDecodeError, UnicodeDecodeError and ConfigurationError
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Could not load config file {path}: {e}")
            return cls()
