"""
Arithmetic on measurements.

Sums and differences reconcile units by converting the right operand into
the left operand's unit; the result always carries the left operand's unit.
Scaling and division take plain numbers. Every operation returns a new
measurement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, TypeVar

from .conversion import UnitLike, check_same_kind, convert_to
from .exceptions import DivisionByZero
from .numeric import Number, to_exact

if TYPE_CHECKING:
    from .measurement import Measurement


M = TypeVar("M", bound="Measurement")


def add(a: M, b: M) -> M:
    """Return ``a + b`` in ``a``'s unit."""
    check_same_kind(a, b, "add")
    if a.unit == b.unit:
        other = b.magnitude
    else:
        other = convert_to(b, a.unit).magnitude
    return a.from_exact(a.magnitude + other, a.unit)


def subtract(a: M, b: M) -> M:
    """Return ``a - b`` in ``a``'s unit. Negative results are allowed."""
    check_same_kind(a, b, "subtract")
    if a.unit == b.unit:
        other = b.magnitude
    else:
        other = convert_to(b, a.unit).magnitude
    return a.from_exact(a.magnitude - other, a.unit)


def scale(a: M, factor: Number) -> M:
    """Multiply the magnitude by ``factor``; the unit is unchanged."""
    return a.from_exact(a.magnitude * to_exact(factor), a.unit)


def divide(a: M, factor: Number) -> M:
    """
    Divide the magnitude by ``factor``; the unit is unchanged.

    Raises
    ------
    DivisionByZero
        If ``factor`` is zero.
    """
    divisor = to_exact(factor)
    if divisor == 0:
        raise DivisionByZero("division")
    return a.from_exact(a.magnitude / divisor, a.unit)


def negate(a: M) -> M:
    return a.from_exact(-a.magnitude, a.unit)


def absolute(a: M) -> M:
    return a.from_exact(abs(a.magnitude), a.unit)


def sum_measurements(items: Iterable[M], unit: Optional[UnitLike] = None) -> M:
    """
    Sum measurements of one kind.

    Parameters
    ----------
    items : iterable of Measurement
        Measurements to add; all must share a quantity kind.
    unit : unit-like, optional
        Unit of the result. Defaults to the first item's unit.

    Raises
    ------
    ValueError
        If ``items`` is empty.
    """
    values: List[M] = list(items)
    if not values:
        raise ValueError("Cannot sum an empty sequence of measurements")
    total = values[0] if unit is None else convert_to(values[0], unit)
    for item in values[1:]:
        total = add(total, item)
    return total


def mean_measurement(items: Iterable[M], unit: Optional[UnitLike] = None) -> M:
    """Arithmetic mean of measurements of one kind, exact."""
    values: List[M] = list(items)
    if not values:
        raise ValueError("Cannot average an empty sequence of measurements")
    return divide(sum_measurements(values, unit), len(values))
