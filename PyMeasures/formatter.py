"""
String rendering of measurements.

Three renderings are offered:

``format``
    Fixed precision (0..10 places, clamped) followed by the unit symbol
    ("short") or display name ("long").
``humanize``
    Minimal digits and a pluralized unit name ("2.5 kilograms", "1 foot").
``to_display_string``
    The legacy rendering used by ``str()``. It always shows at least one
    decimal digit, so integral values print as "10.0 kilogram".
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from .config import MeasurementConfig, get_config
from .numeric import decimal_string, fixed_string, strip_trailing_zeros

if TYPE_CHECKING:
    from .measurement import Measurement

MIN_PRECISION = 0
MAX_PRECISION = 10


class UnitStyle(str, Enum):
    """How the unit is rendered by ``format``."""
    SHORT = "short"
    LONG = "long"


def _resolve_style(style: Union[UnitStyle, str]) -> UnitStyle:
    try:
        return UnitStyle(style)
    except ValueError:
        raise ValueError(
            f"Unknown unit style {style!r}; expected 'short' or 'long'") from None


def clamp_precision(precision: int) -> int:
    return max(MIN_PRECISION, min(MAX_PRECISION, int(precision)))


class MeasurementFormatter:
    """
    Renders measurements using the settings of a :class:`MeasurementConfig`.

    Parameters
    ----------
    config : MeasurementConfig, optional
        Settings to use. Defaults to the process-wide configuration at the
        time each method is called.
    """

    def __init__(self, config: Optional[MeasurementConfig] = None):
        self._config = config

    @property
    def config(self) -> MeasurementConfig:
        return self._config or get_config()

    def format(
        self,
        measurement: Measurement,
        precision: Optional[int] = None,
        style: Optional[Union[UnitStyle, str]] = None,
    ) -> str:
        """
        Render ``measurement`` with a fixed number of decimal places.

        Parameters
        ----------
        measurement : Measurement
            The measurement to render.
        precision : int, optional
            Decimal places; clamped to 0..10. Defaults to
            ``config.default_precision``.
        style : {"short", "long"}, optional
            Unit rendering. Defaults to ``config.default_style``.

        Returns
        -------
        str
            e.g. "10.50 kilogram" or "10.5 kg".
        """
        config = self.config
        places = clamp_precision(config.default_precision if precision is None else precision)
        unit_style = _resolve_style(config.default_style if style is None else style)
        value = fixed_string(measurement.magnitude, places, config.rounding)
        return f"{value} {self.format_unit(measurement, unit_style)}"

    def format_unit(self, measurement: Measurement, style: Union[UnitStyle, str] = UnitStyle.LONG) -> str:
        if _resolve_style(style) is UnitStyle.SHORT:
            return measurement.unit.symbol
        return measurement.unit.display_name

    def humanize(self, measurement: Measurement) -> str:
        """Minimal digits and a unit name pluralized unless the magnitude is +/-1."""
        magnitude = measurement.magnitude
        if magnitude.denominator == 1:
            value = str(magnitude.numerator)
        else:
            value = strip_trailing_zeros(decimal_string(magnitude, self.config.decimal_digits))
        plural = abs(magnitude) != 1
        return f"{value} {measurement.unit.name(plural=plural)}"

    def to_display_string(self, measurement: Measurement) -> str:
        """Legacy rendering: integral values keep a ".0" suffix."""
        magnitude = measurement.magnitude
        if magnitude.denominator == 1:
            value = f"{magnitude.numerator}.0"
        else:
            value = strip_trailing_zeros(decimal_string(magnitude, self.config.decimal_digits))
            if '.' not in value:
                value += ".0"
        return f"{value} {measurement.unit.display_name}"


def format_measurement(
    measurement: Measurement,
    precision: Optional[int] = None,
    style: Optional[Union[UnitStyle, str]] = None,
) -> str:
    """Render ``measurement`` with fixed precision; see :meth:`MeasurementFormatter.format`."""
    return MeasurementFormatter().format(measurement, precision, style)


def humanize(measurement: Measurement) -> str:
    """Render ``measurement`` in natural language, e.g. "2 fluid ounces"."""
    return MeasurementFormatter().humanize(measurement)


def to_display_string(measurement: Measurement) -> str:
    """Legacy ``str()`` rendering, e.g. "500.0 gram"."""
    return MeasurementFormatter().to_display_string(measurement)
