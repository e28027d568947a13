"""
Record, JSON and two-column boundaries for measurements.

A record is ``{"value": "<exact string>", "unit": "<canonical key>"}``. The
value is written as a plain decimal when it terminates and as ``"n/d"``
otherwise, so reading a record back always yields the identical quantity.
Readers are lenient: numeric values and any known spelling of the unit
(in any case) are accepted.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np

from .exceptions import SerializationError
from .measurement import Measurement, measurement_class
from .numeric import to_exact

VALUE_FIELD = "value"
UNIT_FIELD = "unit"


def to_record(measurement: Measurement) -> Dict[str, str]:
    """Boundary record for ``measurement``."""
    return measurement.to_record()


def from_record(kind: Any, record: Mapping) -> Measurement:
    """
    Rebuild a measurement of ``kind`` from a record.

    Parameters
    ----------
    kind : QuantityKind, str or Measurement subclass
        Expected quantity kind.
    record : Mapping
        Must contain ``"value"`` (str, int, float or Decimal) and ``"unit"``
        (any name, symbol or alias of a unit of ``kind``).

    Returns
    -------
    Measurement

    Raises
    ------
    SerializationError
        If the record is not a mapping, lacks a field or has a field of the
        wrong type.
    InvalidMagnitude, UnknownUnit
        If the fields are present but their contents are invalid.
    """
    cls = measurement_class(kind)
    if not isinstance(record, Mapping):
        raise SerializationError(f"expected a mapping, got {type(record).__name__}", record)

    missing = [name for name in (VALUE_FIELD, UNIT_FIELD) if record.get(name) is None]
    if missing:
        raise SerializationError(f"missing field(s): {', '.join(missing)}", record)

    value = record[VALUE_FIELD]
    unit = record[UNIT_FIELD]
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal, Fraction, np.number)):
        raise SerializationError(f"field 'value' has unsupported type {type(value).__name__}", record)
    if not isinstance(unit, str):
        raise SerializationError(f"field 'unit' must be a string, got {type(unit).__name__}", record)

    return cls(to_exact(value), unit)


def to_json(measurement: Measurement, **kwargs) -> str:
    """Record of ``measurement`` as a JSON document."""
    return json.dumps(to_record(measurement), **kwargs)


def from_json(kind: Any, text: str) -> Measurement:
    """Read a measurement of ``kind`` from a JSON record."""
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON ({exc.msg})", text) from exc
    return from_record(kind, record)


def to_records(measurements: Iterable[Measurement]) -> List[Dict[str, str]]:
    return [to_record(m) for m in measurements]


def from_records(kind: Any, records: Iterable[Mapping]) -> List[Measurement]:
    return [from_record(kind, record) for record in records]


def to_columns(measurement: Measurement) -> Tuple[str, str]:
    """``(magnitude string, lowercase unit key)`` for two-column storage."""
    return measurement.to_columns()


def from_columns(kind: Any, magnitude: str, unit_key: str) -> Measurement:
    """
    Rebuild a measurement from its two stored columns.

    Raises
    ------
    SerializationError
        If either column is missing.
    """
    if magnitude is None or unit_key is None:
        raise SerializationError("both magnitude and unit columns are required",
                                 (magnitude, unit_key))
    return measurement_class(kind)(magnitude, unit_key)
