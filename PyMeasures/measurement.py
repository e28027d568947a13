"""
Measurement value objects for PyMeasures.

A measurement is an immutable pair of an exact magnitude and a unit of one
quantity kind. :class:`Measurement` implements the behaviour once; the
concrete classes :class:`Mass`, :class:`Length`, :class:`Volume` and
:class:`Density` bind it to a quantity kind and its unit table. Operations
between measurements check the kind tag at runtime and raise
:class:`~PyMeasures.exceptions.IncompatibleQuantityKind` on a mismatch.

Examples
--------
>>> from PyMeasures import Mass
>>> Mass(1, "kg") + Mass(500, "g")
Mass(1.5, kilogram)
>>> Mass(1, "kg") == Mass(1000, "gram")
True
>>> Mass("1/2", "lb").convert_to("g").format(precision=1)
'226.8 gram'
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, Union

from . import arithmetic, comparison, conversion
from .exceptions import IncompatibleQuantityKind
from .formatter import MeasurementFormatter, UnitStyle
from .numeric import Number, exact_string, to_decimal, to_exact
from .units import (
    DENSITY_TABLE,
    LENGTH_TABLE,
    MASS_TABLE,
    UNIT_ENUMS,
    US_LIQUID_UNITS,
    VOLUME_TABLE,
    QuantityKind,
    UnitDescriptor,
    UnitTable,
    resolve_kind,
)

UnitLike = Union[UnitDescriptor, Enum, str]


class Measurement:
    """
    Immutable (magnitude, unit) pair of a single quantity kind.

    Not instantiated directly; use :class:`Mass`, :class:`Length`,
    :class:`Volume` or :class:`Density`.

    Parameters
    ----------
    value : int, float, Decimal, Fraction, str or numpy scalar
        The magnitude. Floats are taken at their shortest ``repr``; strings
        may be decimals or fractions ("1/3").
    unit : UnitDescriptor, unit enum member or str
        The unit, by descriptor, kind-scoped enum (``MassUnit.KILOGRAM``) or
        any name, symbol, alias or plural known to the kind's table.

    Raises
    ------
    InvalidMagnitude
        If ``value`` is NaN, infinite or not numeric.
    UnknownUnit
        If ``unit`` cannot be resolved.
    IncompatibleQuantityKind
        If ``unit`` belongs to a different quantity kind.
    """

    kind: ClassVar[Optional[QuantityKind]] = None
    table: ClassVar[Optional[UnitTable]] = None

    __slots__ = ("_magnitude", "_unit")

    def __init__(self, value: Number, unit: UnitLike):
        if self.kind is None:
            raise TypeError(
                "Measurement is abstract; use Mass, Length, Volume or Density")
        resolved = self.resolve_unit(unit)
        object.__setattr__(self, "_magnitude", to_exact(value))
        object.__setattr__(self, "_unit", resolved)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_exact(cls, magnitude: Fraction, unit: UnitDescriptor):
        """Build from an already exact magnitude and resolved unit, skipping validation."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "_magnitude", magnitude)
        object.__setattr__(instance, "_unit", unit)
        return instance

    @classmethod
    def of(cls, value: Number, unit: UnitLike):
        """Alias of the constructor, convenient for ``map``/``apply``."""
        return cls(value, unit)

    @classmethod
    def parse(cls, text: str):
        """Parse "<value> <unit>" text; see :func:`PyMeasures.parser.parse`."""
        from .parser import parse
        return parse(cls, text)

    @classmethod
    def resolve_unit(cls, unit: UnitLike) -> UnitDescriptor:
        """Resolve ``unit`` against this kind's unit table."""
        if isinstance(unit, Enum) and not isinstance(unit, UNIT_ENUMS[cls.kind]):
            for other_kind, enum_type in UNIT_ENUMS.items():
                if isinstance(unit, enum_type):
                    raise IncompatibleQuantityKind(other_kind, cls.kind, "use unit")
        return cls.table.resolve(unit)

    @classmethod
    def base_unit(cls) -> UnitDescriptor:
        return cls.table.base_unit

    @classmethod
    def conversion_factor(cls, unit: UnitLike) -> Fraction:
        return cls.resolve_unit(unit).conversion_factor

    @classmethod
    def metric_unit(cls, unit: UnitLike) -> bool:
        return cls.resolve_unit(unit).is_metric

    @classmethod
    def imperial_unit(cls, unit: UnitLike) -> bool:
        return cls.resolve_unit(unit).is_imperial

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def magnitude(self) -> Fraction:
        return self._magnitude

    # Same name as the record field
    value = magnitude

    @property
    def unit(self) -> UnitDescriptor:
        return self._unit

    @property
    def symbol(self) -> str:
        return self._unit.symbol

    def unit_name(self, plural: bool = False) -> str:
        return self._unit.name(plural)

    @property
    def is_metric(self) -> bool:
        return self._unit.is_metric

    @property
    def base_magnitude(self) -> Fraction:
        """Magnitude expressed in the kind's base unit."""
        return conversion.to_base_value(self)

    def to_decimal(self, digits: int = 28) -> Decimal:
        """Magnitude as a Decimal; exact whenever the expansion terminates."""
        return to_decimal(self._magnitude, digits)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert_to(self, target_unit: UnitLike):
        """Same quantity in ``target_unit``; returns ``self`` if unchanged."""
        return conversion.convert_to(self, target_unit)

    to = convert_to

    def to_base(self):
        """Same quantity in the kind's base unit."""
        return conversion.convert_to(self, self.table.base_unit)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __mul__(self, factor):
        if isinstance(factor, Measurement):
            return NotImplemented
        return arithmetic.scale(self, factor)

    __rmul__ = __mul__

    def __truediv__(self, factor):
        if isinstance(factor, Measurement):
            return NotImplemented
        return arithmetic.divide(self, factor)

    def __neg__(self):
        return arithmetic.negate(self)

    def __pos__(self):
        return self

    def __abs__(self):
        return arithmetic.absolute(self)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: Measurement) -> comparison.Ordering:
        return comparison.compare(self, other)

    def __eq__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        if other.kind is not self.kind:
            return False
        return comparison.equal(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return comparison.compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return comparison.compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return comparison.compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return comparison.compare(self, other) >= 0

    def __hash__(self):
        return comparison.measurement_hash(self)

    # ------------------------------------------------------------------
    # Rendering and boundary records
    # ------------------------------------------------------------------

    def format(self, precision: Optional[int] = None,
               style: Optional[Union[UnitStyle, str]] = None) -> str:
        return MeasurementFormatter().format(self, precision, style)

    def humanize(self) -> str:
        return MeasurementFormatter().humanize(self)

    def to_display_string(self) -> str:
        return MeasurementFormatter().to_display_string(self)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({exact_string(self._magnitude)}, {self._unit.key})"

    def to_record(self) -> Dict[str, str]:
        """``{"value": <exact string>, "unit": <canonical key>}``."""
        return {"value": exact_string(self._magnitude), "unit": self._unit.key}

    def to_columns(self) -> Tuple[str, str]:
        """``(magnitude string, lowercase unit key)`` for two-column storage."""
        return exact_string(self._magnitude), self._unit.key.lower()

    # ------------------------------------------------------------------
    # Immutability
    # ------------------------------------------------------------------

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (exact_string(self._magnitude), self._unit.key))


def _coerce_density(density: Union['Density', Number], unit: Optional[UnitLike]) -> 'Density':
    if isinstance(density, Density):
        return density
    if isinstance(density, Measurement):
        raise IncompatibleQuantityKind(density.kind, QuantityKind.DENSITY, "use as density")
    if unit is None:
        raise TypeError("A density value needs a unit, or pass a Density instance")
    return Density(density, unit)


class Mass(Measurement):
    """Mass measurement; base unit gram."""

    kind = QuantityKind.MASS
    table = MASS_TABLE
    __slots__ = ()

    def to_volume(self, density: Union['Density', Number], unit: Optional[UnitLike] = None) -> 'Volume':
        """Volume this mass occupies at ``density`` (in milliliters)."""
        from .bridge import mass_to_volume
        return mass_to_volume(self, _coerce_density(density, unit))

    volume_given = to_volume


class Length(Measurement):
    """Length measurement; base unit meter."""

    kind = QuantityKind.LENGTH
    table = LENGTH_TABLE
    __slots__ = ()


class Volume(Measurement):
    """Volume measurement; base unit liter. Customary units are US liquid."""

    kind = QuantityKind.VOLUME
    table = VOLUME_TABLE
    __slots__ = ()

    @classmethod
    def us_liquid_unit(cls, unit: UnitLike) -> bool:
        return cls.resolve_unit(unit).key in US_LIQUID_UNITS

    @property
    def is_us_liquid(self) -> bool:
        return self.unit.key in US_LIQUID_UNITS

    def to_mass(self, density: Union['Density', Number], unit: Optional[UnitLike] = None) -> Mass:
        """Mass of this volume at ``density`` (in grams)."""
        from .bridge import volume_to_mass
        return volume_to_mass(self, _coerce_density(density, unit))

    mass_given = to_mass
    to_weight = to_mass
    weight_given = to_mass


class Density(Measurement):
    """Density measurement; base unit gram per milliliter."""

    kind = QuantityKind.DENSITY
    table = DENSITY_TABLE
    __slots__ = ()

    @property
    def is_imperial(self) -> bool:
        return self.unit.is_imperial


Weight = Mass

MEASUREMENT_CLASSES: Dict[QuantityKind, Type[Measurement]] = {
    QuantityKind.MASS: Mass,
    QuantityKind.LENGTH: Length,
    QuantityKind.VOLUME: Volume,
    QuantityKind.DENSITY: Density,
}


def measurement_class(kind: Any) -> Type[Measurement]:
    """
    Concrete measurement class for ``kind``.

    ``kind`` may be a :class:`QuantityKind`, a kind name ("mass", "weight")
    or a measurement class.
    """
    if isinstance(kind, type) and issubclass(kind, Measurement):
        if kind.kind is None:
            raise TypeError("Measurement is abstract; use Mass, Length, Volume or Density")
        return kind
    return MEASUREMENT_CLASSES[resolve_kind(kind)]
