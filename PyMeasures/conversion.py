"""
Unit conversion for PyMeasures.

Every conversion goes through the quantity kind's base unit: the magnitude
is multiplied by the source unit's factor and divided by the target unit's
factor. Tables therefore hold one factor per unit, and all arithmetic stays
in exact rationals.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING, Optional, TypeVar, Union

from .exceptions import IncompatibleQuantityKind
from .units import UnitDescriptor

if TYPE_CHECKING:
    from .measurement import Measurement


M = TypeVar("M", bound="Measurement")
UnitLike = Union[UnitDescriptor, Enum, str]


def check_same_kind(left: object, right: object, operation: Optional[str] = None) -> None:
    """
    Ensure two operands are measurements of the same quantity kind.

    Raises
    ------
    IncompatibleQuantityKind
        If ``right`` is not a measurement or its kind differs from ``left``'s.
    """
    left_kind = getattr(left, "kind", None)
    right_kind = getattr(right, "kind", None)
    if right_kind is None or not hasattr(right, "magnitude"):
        raise IncompatibleQuantityKind(left_kind, type(right).__name__, operation)
    if left_kind is not right_kind:
        raise IncompatibleQuantityKind(left_kind, right_kind, operation)


def to_base_value(measurement: Measurement) -> Fraction:
    """Magnitude of ``measurement`` expressed in its kind's base unit."""
    return measurement.magnitude * measurement.unit.conversion_factor


def convert_to(measurement: M, target_unit: UnitLike) -> M:
    """
    Convert a measurement to another unit of the same kind.

    Parameters
    ----------
    measurement : Measurement
        The measurement to convert.
    target_unit : UnitDescriptor, unit enum member or str
        Target unit. Strings are resolved through the kind's unit table.

    Returns
    -------
    Measurement
        ``measurement`` itself when the unit is unchanged, otherwise a new
        measurement of the same class in ``target_unit``.

    Raises
    ------
    UnknownUnit
        If a unit name cannot be resolved.
    IncompatibleQuantityKind
        If ``target_unit`` belongs to another quantity kind.
    """
    unit = measurement.resolve_unit(target_unit)
    if unit == measurement.unit:
        return measurement
    magnitude = to_base_value(measurement) / unit.conversion_factor
    return measurement.from_exact(magnitude, unit)


def convert_value(value: Fraction, from_unit: UnitDescriptor, to_unit: UnitDescriptor) -> Fraction:
    """Convert a bare exact value between two units of the same kind."""
    if from_unit.kind is not to_unit.kind:
        raise IncompatibleQuantityKind(from_unit.kind, to_unit.kind, "convert")
    if from_unit == to_unit:
        return value
    return value * from_unit.conversion_factor / to_unit.conversion_factor
