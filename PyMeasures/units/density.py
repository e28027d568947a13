"""
Density units (base: gram per milliliter).

Density is the one compound kind: every unit is a mass unit per a volume
unit. Besides the table itself this module holds the vocabulary used to
split compound text such as "lb/ft³" into its mass and volume parts.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from .base import QuantityKind, UnitTable


class DensityUnit(str, Enum):
    """Density units by canonical key."""
    GRAM_PER_MILLILITER = "gram_per_milliliter"
    KILOGRAM_PER_LITER = "kilogram_per_liter"
    GRAM_PER_CUBIC_CENTIMETER = "gram_per_cubic_centimeter"
    KILOGRAM_PER_CUBIC_METER = "kilogram_per_cubic_meter"
    POUND_PER_GALLON = "pound_per_gallon"
    POUND_PER_CUBIC_FOOT = "pound_per_cubic_foot"
    OUNCE_PER_CUBIC_INCH = "ounce_per_cubic_inch"


# Grams per milliliter in one unit. kg/L and g/cm³ coincide with the base.
DENSITY_UNITS = [
    ("gram_per_milliliter", "g/mL", "1", True,
     ["g_per_ml", "gml", "g per ml"]),
    ("kilogram_per_liter", "kg/L", "1", True,
     ["kg_per_l", "kgl", "kg per l"]),
    ("gram_per_cubic_centimeter", "g/cm³", "1", True,
     ["g/cc", "g_per_cc", "gcm", "g/cm3", "g_per_cm3"]),
    ("kilogram_per_cubic_meter", "kg/m³", "0.001", True,
     ["kg/m3", "kg_per_m3", "kgm"]),
    ("pound_per_gallon", "lb/gal", "0.119826427", False,
     ["lb_per_gal", "lbgal", "lbs/gal"]),
    ("pound_per_cubic_foot", "lb/ft³", "0.016018463", False,
     ["lb/ft3", "lb_per_ft3", "lbft", "lbs/ft3"]),
    ("ounce_per_cubic_inch", "oz/in³", "1.729994044", False,
     ["oz/in3", "oz_per_in3", "ozin"]),
]

DENSITY_TABLE = UnitTable.from_specs(
    QuantityKind.DENSITY, DENSITY_UNITS, base_key="gram_per_milliliter")

# Denominator spellings accepted in compound density text, by canonical volume part
DENSITY_VOLUME_PARTS: Dict[str, str] = {
    "ml": "milliliter",
    "milliliter": "milliliter",
    "millilitre": "milliliter",
    "l": "liter",
    "liter": "liter",
    "litre": "liter",
    "cc": "cubic_centimeter",
    "cm3": "cubic_centimeter",
    "cm³": "cubic_centimeter",
    "cubic centimeter": "cubic_centimeter",
    "m3": "cubic_meter",
    "m³": "cubic_meter",
    "cubic meter": "cubic_meter",
    "gal": "gallon",
    "gallon": "gallon",
    "ft3": "cubic_foot",
    "ft³": "cubic_foot",
    "cu ft": "cubic_foot",
    "cubic foot": "cubic_foot",
    "in3": "cubic_inch",
    "in³": "cubic_inch",
    "cu in": "cubic_inch",
    "cubic inch": "cubic_inch",
}
