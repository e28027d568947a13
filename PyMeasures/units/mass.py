"""Mass units (base: gram)."""

from __future__ import annotations

from enum import Enum

from .base import QuantityKind, UnitTable


class MassUnit(str, Enum):
    """Mass units by canonical key."""
    GRAM = "gram"
    KILOGRAM = "kilogram"
    MILLIGRAM = "milligram"
    TONNE = "tonne"
    POUND = "pound"
    OUNCE = "ounce"
    SLUG = "slug"


# Factors are grams per unit; pound and ounce are exact by definition
MASS_UNITS = [
    ("gram", "g", "1", True, ["gramme"]),
    ("kilogram", "kg", "1000", True, ["kgs", "kilo", "kilogramme"]),
    ("milligram", "mg", "0.001", True, ["milligramme"]),
    ("tonne", "t", "1000000", True, ["metric ton", "metric tons"]),
    ("pound", "lb", "453.59237", False, ["lbs"]),
    ("ounce", "oz", "28.349523125", False, ["ozs"]),
    ("slug", "slug", "14593.903", False, []),
]

MASS_TABLE = UnitTable.from_specs(QuantityKind.MASS, MASS_UNITS, base_key="gram")
