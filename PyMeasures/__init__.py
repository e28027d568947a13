"""
PyMeasures: Exact Physical Measurements
=======================================

This package provides immutable, exactly-valued measurements of mass,
length, volume and density. Magnitudes are rational numbers, so conversions
between units, arithmetic and mass/volume bridging through a density never
drift. Operations that mix quantity kinds are rejected at runtime with a
typed error. pandas adapters bring the same guarantees to whole columns.

Modules
-------

``measurement``
    The ``Mass``, ``Length``, ``Volume`` and ``Density`` value objects.
``units``
    Per-kind unit tables with exact conversion factors and aliases.
``conversion``, ``arithmetic``, ``comparison``
    Base-unit conversion, exact arithmetic, ordering and hashing.
``parser``, ``formatter``
    Strict "<value> <unit>" parsing and fixed/humanized rendering.
``bridge``
    Mass <-> volume conversion through a density.
``serialization``
    Record, JSON and two-column boundaries.
``frames``, ``validators``
    pandas column adapters and column validators.
``config``
    Process-wide display and adapter settings.

Examples
--------
>>> from PyMeasures import Mass, Volume, Density
>>> Mass(1, "kg") + Mass(500, "g")
Mass(1.5, kilogram)
>>> Volume.parse("1 cup").to_mass(Density(0.5, "g/mL")).format(precision=1)
'118.3 gram'
"""

from .arithmetic import mean_measurement, sum_measurements
from .bridge import mass_to_volume, volume_to_mass
from .comparison import Ordering, compare
from .config import (
    MeasurementConfig,
    create_measurement_config,
    get_config,
    load_measurement_config,
    save_measurement_config,
    set_config,
)
from .conversion import convert_to, convert_value
from .exceptions import (
    DivisionByZero,
    IncompatibleQuantityKind,
    InvalidDensity,
    InvalidFormat,
    InvalidMagnitude,
    InvalidNumericLiteral,
    ParseError,
    SerializationError,
    UnitError,
    UnknownUnit,
)
from .formatter import MeasurementFormatter, UnitStyle, format_measurement, humanize, to_display_string
from .measurement import Density, Length, Mass, Measurement, Volume, Weight, measurement_class
from .parser import MeasurementParser, parse, parse_unit, parse_value, try_parse
from .serialization import from_columns, from_json, from_record, to_columns, to_json, to_record
from .units import (
    DensityUnit,
    LengthUnit,
    MassUnit,
    QuantityKind,
    UnitDescriptor,
    UnitTable,
    VolumeUnit,
    get_supported_kinds,
    get_supported_units,
    get_table,
    lookup_unit,
)

__version__ = "0.1.0"

__all__ = [
    # Value objects
    "Measurement",
    "Mass",
    "Weight",
    "Length",
    "Volume",
    "Density",
    "measurement_class",
    # Units
    "QuantityKind",
    "UnitDescriptor",
    "UnitTable",
    "MassUnit",
    "LengthUnit",
    "VolumeUnit",
    "DensityUnit",
    "get_table",
    "lookup_unit",
    "get_supported_units",
    "get_supported_kinds",
    # Operations
    "convert_to",
    "convert_value",
    "compare",
    "Ordering",
    "sum_measurements",
    "mean_measurement",
    "mass_to_volume",
    "volume_to_mass",
    # Text
    "MeasurementParser",
    "parse",
    "try_parse",
    "parse_value",
    "parse_unit",
    "MeasurementFormatter",
    "UnitStyle",
    "format_measurement",
    "humanize",
    "to_display_string",
    # Boundaries
    "to_record",
    "from_record",
    "to_json",
    "from_json",
    "to_columns",
    "from_columns",
    # Configuration
    "MeasurementConfig",
    "create_measurement_config",
    "get_config",
    "set_config",
    "load_measurement_config",
    "save_measurement_config",
    # Errors
    "UnitError",
    "InvalidMagnitude",
    "IncompatibleQuantityKind",
    "InvalidDensity",
    "DivisionByZero",
    "ParseError",
    "InvalidFormat",
    "InvalidNumericLiteral",
    "UnknownUnit",
    "SerializationError",
]
