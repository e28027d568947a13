"""
pandas adapters for measurement columns.

Columns of free-text quantities ("10 kg", "1/2 lb") are parsed into exact
``value``/``unit`` frames, and object Series holding :class:`Measurement`
instances can be converted, aggregated and filtered in a target unit.
Missing entries (``None``/``NaN``) stay missing and are never dropped.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import pandas as pd

from .arithmetic import mean_measurement, sum_measurements
from .config import get_config
from .conversion import UnitLike, convert_to
from .exceptions import DivisionByZero, ParseError
from .measurement import Measurement, measurement_class
from .parser import parse

logger = logging.getLogger(__name__)

VALID_ERRORS = ("raise", "coerce")


def _is_missing(value: Any) -> bool:
    if isinstance(value, Measurement):
        return False
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _check_errors(errors: str) -> None:
    if errors not in VALID_ERRORS:
        raise ValueError(f"errors must be one of {VALID_ERRORS}, got {errors!r}")


def _present(series: pd.Series) -> List[Measurement]:
    return [value for value in series if not _is_missing(value)]


def parse_series(series: pd.Series, kind: Any, errors: str = "raise") -> pd.DataFrame:
    """
    Parse a column of quantity strings.

    Parameters
    ----------
    series : pd.Series
        Strings such as "10 kg" or "1/2 pound". Missing entries are kept as
        missing rows.
    kind : QuantityKind, str or Measurement subclass
        Quantity kind every entry must have.
    errors : {"raise", "coerce"}, default "raise"
        "raise" propagates the first parse error, "coerce" writes a row of
        ``None`` for unparseable entries.

    Returns
    -------
    pd.DataFrame
        Indexed like ``series`` with the configured value and unit columns
        (exact magnitude string, canonical unit key) plus ``original``.
    """
    _check_errors(errors)
    cls = measurement_class(kind)
    config = get_config()

    results = []
    for idx, value in series.items():
        measurement = None
        if _is_missing(value):
            logger.debug(f"Row {idx}: missing value")
        else:
            try:
                measurement = parse(cls, str(value))
            except (ParseError, DivisionByZero) as exc:
                if errors == "raise":
                    raise
                logger.debug(f"Row {idx}: coerced to missing ({exc})")

        if measurement is not None:
            record = measurement.to_record()
            magnitude, unit_key = record["value"], record["unit"]
        else:
            magnitude = unit_key = None
        results.append({
            config.value_column: magnitude,
            config.unit_column: unit_key,
            'original': None if _is_missing(value) else str(value),
        })

    return pd.DataFrame(results, index=series.index,
                        columns=[config.value_column, config.unit_column, 'original'], dtype=object)


def parse_measurements(series: pd.Series, kind: Any, errors: str = "raise") -> pd.Series:
    """Parse a column of quantity strings into a Series of measurements."""
    _check_errors(errors)
    cls = measurement_class(kind)

    def _parse(value):
        if _is_missing(value):
            return None
        try:
            return parse(cls, str(value))
        except (ParseError, DivisionByZero) as exc:
            if errors == "raise":
                raise
            logger.debug(f"Coerced {value!r} to missing ({exc})")
            return None

    return pd.Series([_parse(v) for v in series], index=series.index, dtype=object, name=series.name)


def series_to_frame(series: pd.Series) -> pd.DataFrame:
    """Split a Series of measurements into value and unit columns."""
    config = get_config()
    rows = []
    for value in series:
        if _is_missing(value):
            rows.append({config.value_column: None, config.unit_column: None})
        else:
            magnitude, unit_key = value.to_columns()
            rows.append({config.value_column: magnitude, config.unit_column: unit_key})
    return pd.DataFrame(rows, index=series.index, columns=[config.value_column, config.unit_column], dtype=object)


def frame_to_measurements(
    df: pd.DataFrame,
    kind: Any,
    value_column: Optional[str] = None,
    unit_column: Optional[str] = None,
) -> pd.Series:
    """
    Rebuild measurements from a value/unit frame.

    Rows where either column is missing become ``None``.
    """
    config = get_config()
    value_column = value_column or config.value_column
    unit_column = unit_column or config.unit_column
    for column in (value_column, unit_column):
        if column not in df.columns:
            raise KeyError(f"Column '{column}' not found in DataFrame")

    cls = measurement_class(kind)
    measurements = []
    for magnitude, unit in zip(df[value_column], df[unit_column]):
        if _is_missing(magnitude) or _is_missing(unit):
            measurements.append(None)
        else:
            measurements.append(cls(magnitude, str(unit)))
    return pd.Series(measurements, index=df.index, dtype=object)


def convert_column(series: pd.Series, unit: UnitLike) -> pd.Series:
    """Convert every measurement in ``series`` to ``unit``."""
    return series.map(lambda m: None if _is_missing(m) else convert_to(m, unit))


def sum_column(series: pd.Series, unit: Optional[UnitLike] = None) -> Measurement:
    """
    Exact total of a measurement column, ignoring missing entries.

    Raises
    ------
    ValueError
        If the column holds no measurements.
    """
    return sum_measurements(_present(series), unit)


def mean_column(series: pd.Series, unit: Optional[UnitLike] = None) -> Measurement:
    """Exact mean of a measurement column, ignoring missing entries."""
    return mean_measurement(_present(series), unit)


def filter_between(
    series: pd.Series,
    low: Optional[Measurement] = None,
    high: Optional[Measurement] = None,
    inclusive: bool = True,
) -> pd.Series:
    """
    Entries of ``series`` lying between ``low`` and ``high``.

    Either bound may be omitted. Bounds may use any unit of the column's
    kind; a bound of another kind raises ``IncompatibleQuantityKind``.
    Missing entries are excluded.
    """
    def _keep(m) -> bool:
        if _is_missing(m):
            return False
        if low is not None and (m < low if inclusive else m <= low):
            return False
        if high is not None and (m > high if inclusive else m >= high):
            return False
        return True

    mask = [_keep(m) for m in series]
    return series[pd.Series(mask, index=series.index, dtype=bool)]
