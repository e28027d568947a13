"""Length units (base: meter)."""

from __future__ import annotations

from enum import Enum

from .base import QuantityKind, UnitTable


class LengthUnit(str, Enum):
    """Length units by canonical key."""
    METER = "meter"
    CENTIMETER = "centimeter"
    MILLIMETER = "millimeter"
    KILOMETER = "kilometer"
    INCH = "inch"
    FOOT = "foot"
    YARD = "yard"
    MILE = "mile"


# International inch/foot/yard/mile, all exact
LENGTH_UNITS = [
    ("meter", "m", "1", True, ["metre"]),
    ("centimeter", "cm", "0.01", True, ["centimetre"]),
    ("millimeter", "mm", "0.001", True, ["millimetre"]),
    ("kilometer", "km", "1000", True, ["kilometre"]),
    ("inch", "in", "0.0254", False, []),
    ("foot", "ft", "0.3048", False, []),
    ("yard", "yd", "0.9144", False, ["yds"]),
    ("mile", "mi", "1609.344", False, []),
]

LENGTH_TABLE = UnitTable.from_specs(QuantityKind.LENGTH, LENGTH_UNITS, base_key="meter")
