"""
Unit tables for PyMeasures.

One immutable :class:`UnitTable` per :class:`QuantityKind`, built once at
import time. The module-level helpers below are the lookup contract used by
the rest of the package.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import Dict, List, Union

from .base import (
    IRREGULAR_PLURALS,
    QuantityKind,
    UnitDescriptor,
    UnitTable,
    build_unit,
    normalize_unit_text,
    pluralize,
)
from .density import DENSITY_TABLE, DENSITY_VOLUME_PARTS, DensityUnit
from .length import LENGTH_TABLE, LengthUnit
from .mass import MASS_TABLE, MassUnit
from .volume import US_LIQUID_UNITS, VOLUME_TABLE, VolumeUnit

UNIT_TABLES: Dict[QuantityKind, UnitTable] = {
    QuantityKind.MASS: MASS_TABLE,
    QuantityKind.LENGTH: LENGTH_TABLE,
    QuantityKind.VOLUME: VOLUME_TABLE,
    QuantityKind.DENSITY: DENSITY_TABLE,
}

# Kind-scoped enums, used to recognise enum members passed as units
UNIT_ENUMS: Dict[QuantityKind, type] = {
    QuantityKind.MASS: MassUnit,
    QuantityKind.LENGTH: LengthUnit,
    QuantityKind.VOLUME: VolumeUnit,
    QuantityKind.DENSITY: DensityUnit,
}

_KIND_ALIASES: Dict[str, QuantityKind] = {
    "mass": QuantityKind.MASS,
    "weight": QuantityKind.MASS,
    "length": QuantityKind.LENGTH,
    "distance": QuantityKind.LENGTH,
    "volume": QuantityKind.VOLUME,
    "density": QuantityKind.DENSITY,
}


def resolve_kind(kind: Union[QuantityKind, str]) -> QuantityKind:
    """Accept a :class:`QuantityKind` or its name ("mass", "Weight", ...)."""
    if isinstance(kind, QuantityKind):
        return kind
    if isinstance(kind, str):
        resolved = _KIND_ALIASES.get(kind.strip().lower())
        if resolved is not None:
            return resolved
    raise ValueError(
        f"Unknown quantity kind {kind!r}. Valid kinds are: "
        f"{', '.join(k.value for k in QuantityKind)}")


def get_table(kind: Union[QuantityKind, str]) -> UnitTable:
    """Unit table for ``kind``."""
    return UNIT_TABLES[resolve_kind(kind)]


def lookup_unit(kind: Union[QuantityKind, str], text: str) -> UnitDescriptor:
    """Resolve a name, symbol, alias or plural to a unit of ``kind``."""
    return get_table(kind).lookup(text)


def conversion_factor(kind: Union[QuantityKind, str], unit: Union[UnitDescriptor, Enum, str]) -> Fraction:
    """Exact number of base units in one ``unit``."""
    return get_table(kind).conversion_factor(unit)


def base_unit(kind: Union[QuantityKind, str]) -> UnitDescriptor:
    """Base unit of ``kind`` (conversion factor 1)."""
    return get_table(kind).base_unit


def get_supported_units(kind: Union[QuantityKind, str]) -> List[str]:
    """Canonical unit keys of ``kind``."""
    return get_table(kind).names()


def get_supported_kinds() -> List[str]:
    """Names of all quantity kinds."""
    return [kind.value for kind in QuantityKind]


__all__ = [
    "QuantityKind",
    "UnitDescriptor",
    "UnitTable",
    "MassUnit",
    "LengthUnit",
    "VolumeUnit",
    "DensityUnit",
    "MASS_TABLE",
    "LENGTH_TABLE",
    "VOLUME_TABLE",
    "DENSITY_TABLE",
    "UNIT_TABLES",
    "UNIT_ENUMS",
    "DENSITY_VOLUME_PARTS",
    "US_LIQUID_UNITS",
    "IRREGULAR_PLURALS",
    "build_unit",
    "normalize_unit_text",
    "pluralize",
    "resolve_kind",
    "get_table",
    "lookup_unit",
    "conversion_factor",
    "base_unit",
    "get_supported_units",
    "get_supported_kinds",
]
