"""Volume units (base: liter). Customary units are US liquid measures."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from .base import QuantityKind, UnitTable


class VolumeUnit(str, Enum):
    """Volume units by canonical key."""
    LITER = "liter"
    MILLILITER = "milliliter"
    GALLON = "gallon"
    QUART = "quart"
    PINT = "pint"
    CUP = "cup"
    FLUID_OUNCE = "fluid_ounce"


# Liters per unit, following NIST Handbook 44 (US liquid gallon = 3.785411784 L)
VOLUME_UNITS = [
    ("liter", "L", "1", True, ["litre"]),
    ("milliliter", "mL", "0.001", True, ["millilitre"]),
    ("gallon", "gal", "3.785411784", False, ["gals"]),
    ("quart", "qt", "0.946352946", False, []),
    ("pint", "pt", "0.473176473", False, []),
    ("cup", "cup", "0.2365882365", False, []),
    ("fluid_ounce", "fl oz", "0.0295735295625", False, ["floz", "fl_oz", "fl. oz"]),
]

VOLUME_TABLE = UnitTable.from_specs(QuantityKind.VOLUME, VOLUME_UNITS, base_key="liter")

US_LIQUID_UNITS: FrozenSet[str] = frozenset({"gallon", "quart", "pint", "cup", "fluid_ounce"})
