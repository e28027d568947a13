"""
Comparison and hashing of measurements.

Measurements are compared by the physical quantity they denote: the right
operand is converted into the left operand's unit first, so 1 kg equals
1000 g. Hashes are taken over the base-unit magnitude so that equal
measurements always hash equal.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from .conversion import check_same_kind, convert_to, to_base_value

if TYPE_CHECKING:
    from .measurement import Measurement


class Ordering(IntEnum):
    """Result of :func:`compare`."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _aligned(a: Measurement, b: Measurement):
    if a.unit == b.unit:
        return a.magnitude, b.magnitude
    return a.magnitude, convert_to(b, a.unit).magnitude


def compare(a: Measurement, b: Measurement) -> Ordering:
    """Order two measurements of the same kind by physical value."""
    check_same_kind(a, b, "compare")
    left, right = _aligned(a, b)
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def equal(a: Measurement, b: Measurement) -> bool:
    """True if both measurements denote the same physical quantity."""
    check_same_kind(a, b, "compare")
    left, right = _aligned(a, b)
    return left == right


def measurement_hash(a: Measurement) -> int:
    """Hash over quantity kind and base-unit magnitude."""
    return hash((a.kind, to_base_value(a)))
