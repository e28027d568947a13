"""
Configuration for PyMeasures.

A single :class:`MeasurementConfig` instance holds the process-wide display
and adapter defaults. The engine itself is pure; configuration only affects
how values are rendered and how pandas adapters name their columns.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

VALID_STYLES = ("short", "long")
VALID_ROUNDING = ("half_up", "half_even")


@dataclass
class MeasurementConfig:
    """
    Display and adapter settings.

    Parameters
    ----------
    default_precision : int, default 2
        Decimal places used by ``format`` when no precision is given. Values
        outside 0..10 are clamped at format time.

    default_style : str, default "long"
        Unit rendering used by ``format`` when no style is given: "short"
        renders the symbol ("kg"), "long" the display name ("kilogram").

    decimal_digits : int, default 28
        Significant digits used when a magnitude is a non-terminating
        rational (e.g. 1/3) and has to be shown as a decimal.

    rounding : str, default "half_up"
        Rounding rule for ``format``: "half_up" rounds ties away from zero,
        "half_even" rounds ties to the even digit.

    value_column : str, default "value"
        Column holding the magnitude string in pandas adapters.

    unit_column : str, default "unit"
        Column holding the unit key in pandas adapters.
    """

    default_precision: int = 2
    default_style: str = "long"
    decimal_digits: int = 28
    rounding: str = "half_up"
    value_column: str = "value"
    unit_column: str = "unit"

    def __post_init__(self):
        if self.default_style not in VALID_STYLES:
            raise ValueError(
                f"default_style must be one of {VALID_STYLES}, got {self.default_style!r}")
        if self.rounding not in VALID_ROUNDING:
            raise ValueError(
                f"rounding must be one of {VALID_ROUNDING}, got {self.rounding!r}")
        if self.decimal_digits < 1:
            raise ValueError("decimal_digits must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'MeasurementConfig':
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            logger.debug(f"Ignoring unknown configuration keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in config_dict.items() if k in known})


_active_config = MeasurementConfig()


def get_config() -> MeasurementConfig:
    """Return the process-wide configuration."""
    return _active_config


def set_config(config: MeasurementConfig) -> MeasurementConfig:
    """Replace the process-wide configuration and return the previous one."""
    global _active_config
    previous = _active_config
    _active_config = config
    logger.debug(f"Measurement configuration updated: {config.to_dict()}")
    return previous


def create_measurement_config(
    default_precision: int = 2,
    default_style: str = "long",
    **kwargs
) -> MeasurementConfig:
    """Create a configuration with common settings.

    Parameters
    ----------
    default_precision : int, default 2
        Decimal places for ``format``.
    default_style : str, default "long"
        "short" or "long" unit rendering for ``format``.
    **kwargs
        Any additional `MeasurementConfig` fields to override.

    Returns
    -------
    MeasurementConfig
        A populated configuration instance.
    """
    return MeasurementConfig(
        default_precision=default_precision,
        default_style=default_style,
        **kwargs
    )


def load_measurement_config(config_path: Union[str, Path]) -> MeasurementConfig:
    """Load configuration from JSON file."""
    with open(config_path, 'r') as f:
        config_dict = json.load(f)
    return MeasurementConfig.from_dict(config_dict)


def save_measurement_config(config: MeasurementConfig, config_path: Union[str, Path]) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
