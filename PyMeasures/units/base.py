"""
Unit table primitives for PyMeasures.

A :class:`UnitTable` is the closed, immutable set of units of one
:class:`QuantityKind`. Each unit is a :class:`UnitDescriptor` carrying an
exact conversion factor to the kind's base unit, its symbol, its display
names and its metric/imperial classification. Tables resolve free text
(canonical names, symbols, aliases, singular and plural forms) to
descriptors case-insensitively.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from fractions import Fraction
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..exceptions import IncompatibleQuantityKind, UnknownUnit

logger = logging.getLogger(__name__)


class QuantityKind(Enum):
    """Kinds of physical quantity a measurement can represent."""
    MASS = "mass"
    LENGTH = "length"
    VOLUME = "volume"
    DENSITY = "density"

    def __str__(self) -> str:
        return self.name.capitalize()


# Irregular plurals; everything else takes a trailing "s"
IRREGULAR_PLURALS: Dict[str, str] = {
    "foot": "feet",
    "inch": "inches",
}


def pluralize(name: str) -> str:
    """
    Pluralize a unit display name.

    Compound "x per y" names only pluralize the leading part
    ("pound per gallon" -> "pounds per gallon").
    """
    if " per " in name:
        head, tail = name.split(" per ", 1)
        return f"{pluralize(head)} per {tail}"
    words = name.split(" ")
    last = words[-1]
    if last in IRREGULAR_PLURALS:
        words[-1] = IRREGULAR_PLURALS[last]
    elif not last.endswith("s"):
        words[-1] = last + "s"
    return " ".join(words)


def normalize_unit_text(text: str) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    return " ".join(str(text).strip().lower().split())


@dataclass(frozen=True)
class UnitDescriptor:
    """
    One named unit of a quantity kind.

    Identity is the pair ``(kind, key)``; all other fields are descriptive.
    """

    key: str
    kind: QuantityKind
    symbol: str = field(compare=False)
    conversion_factor: Fraction = field(compare=False)
    is_metric: bool = field(compare=False)
    display_name: str = field(compare=False)
    plural_name: str = field(compare=False)
    aliases: FrozenSet[str] = field(default_factory=frozenset, compare=False)
    # Set by the owning table
    is_base: bool = field(default=False, compare=False)

    @property
    def is_imperial(self) -> bool:
        return not self.is_metric

    def name(self, plural: bool = False) -> str:
        """Display name, optionally pluralized."""
        return self.plural_name if plural else self.display_name

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"UnitDescriptor({self.kind.value}:{self.key})"


# (key, symbol, factor-as-decimal-string, is_metric, aliases)
UnitSpec = Tuple[str, str, str, bool, Sequence[str]]


def build_unit(kind: QuantityKind, key: str, symbol: str, factor: str,
               is_metric: bool, aliases: Iterable[str] = ()) -> UnitDescriptor:
    """Create a descriptor from an exact decimal factor literal."""
    if not isinstance(factor, str):
        raise TypeError(f"Conversion factor for {key} must be a decimal string literal")
    exact = Fraction(factor)
    if exact <= 0:
        raise ValueError(f"Conversion factor for {key} must be positive")
    display = key.replace("_", " ")
    return UnitDescriptor(
        key=key,
        kind=kind,
        symbol=symbol,
        conversion_factor=exact,
        is_metric=is_metric,
        display_name=display,
        plural_name=pluralize(display),
        aliases=frozenset(normalize_unit_text(a) for a in aliases),
    )


class UnitTable:
    """Immutable registry of the units of one quantity kind."""

    def __init__(self, kind: QuantityKind, units: Sequence[UnitDescriptor], base_key: str):
        self.kind = kind
        self._units: Tuple[UnitDescriptor, ...] = tuple(
            replace(u, is_base=u.key == base_key) for u in units)
        self._by_key: Dict[str, UnitDescriptor] = {u.key: u for u in self._units}

        if base_key not in self._by_key:
            raise ValueError(f"Base unit '{base_key}' is not part of the {kind} table")
        self._base = self._by_key[base_key]
        if self._base.conversion_factor != 1:
            raise ValueError(f"Base unit '{base_key}' must have a conversion factor of 1")
        for unit in self._units:
            if unit.kind is not kind:
                raise ValueError(f"Unit '{unit.key}' belongs to {unit.kind}, not {kind}")

        self._index: Dict[str, UnitDescriptor] = {}
        for unit in self._units:
            for text in self._spellings(unit):
                self._register(text, unit)
        logger.debug(
            f"Built {kind} unit table: {len(self._units)} units, {len(self._index)} spellings")

    @classmethod
    def from_specs(cls, kind: QuantityKind, specs: Sequence[UnitSpec], base_key: str) -> 'UnitTable':
        """Build a table from ``(key, symbol, factor, is_metric, aliases)`` tuples."""
        units = [build_unit(kind, key, symbol, factor, metric, aliases)
                 for key, symbol, factor, metric, aliases in specs]
        return cls(kind, units, base_key)

    @staticmethod
    def _spellings(unit: UnitDescriptor) -> List[str]:
        spellings = [
            unit.key,
            unit.key.replace("_", ""),
            unit.display_name,
            unit.plural_name,
            unit.symbol,
        ]
        for alias in unit.aliases:
            spellings.append(alias)
            # Plural forms for word-like aliases ("metre" -> "metres")
            if alias.isalpha() and not alias.endswith("s") and len(alias) > 3:
                spellings.append(alias + "s")
        return [normalize_unit_text(s) for s in spellings]

    def _register(self, text: str, unit: UnitDescriptor) -> None:
        existing = self._index.get(text)
        if existing is not None and existing is not unit:
            raise ValueError(
                f"Spelling '{text}' maps to both '{existing.key}' and '{unit.key}' in {self.kind}")
        self._index[text] = unit

    @property
    def base_unit(self) -> UnitDescriptor:
        return self._base

    @property
    def units(self) -> Tuple[UnitDescriptor, ...]:
        return self._units

    def names(self) -> List[str]:
        """Canonical keys in table order."""
        return [u.key for u in self._units]

    def get(self, text: str) -> Optional[UnitDescriptor]:
        """Resolve ``text`` to a unit, or None if it is not a known spelling."""
        if text is None:
            return None
        normalized = normalize_unit_text(text)
        unit = self._index.get(normalized)
        if unit is None and "_" in normalized:
            unit = self._index.get(normalized.replace("_", " "))
        return unit

    def lookup(self, text: str) -> UnitDescriptor:
        """Resolve ``text`` to a unit or raise :class:`UnknownUnit`."""
        unit = self.get(text)
        if unit is None:
            raise UnknownUnit(str(text), self.kind)
        return unit

    def resolve(self, unit: Union[UnitDescriptor, Enum, str]) -> UnitDescriptor:
        """Accept a descriptor, a kind-scoped enum member or a name string."""
        if isinstance(unit, UnitDescriptor):
            if unit.kind is not self.kind:
                raise IncompatibleQuantityKind(unit.kind, self.kind, "use unit")
            if unit.key not in self._by_key:
                raise UnknownUnit(unit.key, self.kind)
            return self._by_key[unit.key]
        if isinstance(unit, Enum):
            return self.lookup(str(unit.value))
        if isinstance(unit, str):
            return self.lookup(unit)
        raise UnknownUnit(repr(unit), self.kind)

    def conversion_factor(self, unit: Union[UnitDescriptor, Enum, str]) -> Fraction:
        """Exact amount of the base unit in one ``unit``."""
        return self.resolve(unit).conversion_factor

    def metric_units(self) -> List[UnitDescriptor]:
        return [u for u in self._units if u.is_metric]

    def imperial_units(self) -> List[UnitDescriptor]:
        return [u for u in self._units if not u.is_metric]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, UnitDescriptor):
            return item.kind is self.kind and item.key in self._by_key
        if isinstance(item, str):
            return self.get(item) is not None
        return False

    def __iter__(self) -> Iterator[UnitDescriptor]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitTable({self.kind.value}, base={self._base.key}, units={len(self._units)})"
