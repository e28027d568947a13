from fractions import Fraction

import pytest

from PyMeasures.exceptions import IncompatibleQuantityKind, UnknownUnit
from PyMeasures.units import (
    DENSITY_TABLE,
    LENGTH_TABLE,
    MASS_TABLE,
    UNIT_TABLES,
    VOLUME_TABLE,
    LengthUnit,
    MassUnit,
    QuantityKind,
    UnitTable,
    build_unit,
    conversion_factor,
    get_supported_kinds,
    get_supported_units,
    lookup_unit,
    pluralize,
    resolve_kind,
)


class TestUnitTables:
    """Structure of the built-in unit tables."""

    def test_every_base_unit_has_factor_one(self):
        for kind, table in UNIT_TABLES.items():
            assert table.kind is kind
            assert table.base_unit.conversion_factor == 1

    def test_base_units(self):
        assert MASS_TABLE.base_unit.key == "gram"
        assert LENGTH_TABLE.base_unit.key == "meter"
        assert VOLUME_TABLE.base_unit.key == "liter"
        assert DENSITY_TABLE.base_unit.key == "gram_per_milliliter"

    def test_all_factors_positive_and_exact(self):
        for table in UNIT_TABLES.values():
            for unit in table:
                assert isinstance(unit.conversion_factor, Fraction)
                assert unit.conversion_factor > 0

    def test_table_sizes(self):
        assert len(MASS_TABLE) == 7
        assert len(LENGTH_TABLE) == 8
        assert len(VOLUME_TABLE) == 7
        assert len(DENSITY_TABLE) == 7

    def test_exact_definitions(self):
        assert MASS_TABLE.conversion_factor("lb") == Fraction("453.59237")
        assert LENGTH_TABLE.conversion_factor("in") == Fraction("0.0254")
        assert VOLUME_TABLE.conversion_factor("gal") == Fraction("3.785411784")

    def test_metric_classification(self):
        metric = {u.key for u in MASS_TABLE.metric_units()}
        imperial = {u.key for u in MASS_TABLE.imperial_units()}
        assert metric == {"gram", "kilogram", "milligram", "tonne"}
        assert imperial == {"pound", "ounce", "slug"}


class TestUnitLookup:
    """Resolution of names, symbols, aliases and plurals."""

    @pytest.mark.parametrize("text,key", [
        ("kg", "kilogram"),
        ("KG", "kilogram"),
        ("Kilograms", "kilogram"),
        ("kilos", "kilogram"),
        ("lbs", "pound"),
        ("pounds", "pound"),
        ("gramme", "gram"),
        ("metric tons", "tonne"),
    ])
    def test_mass_spellings(self, text, key):
        assert MASS_TABLE.lookup(text).key == key

    @pytest.mark.parametrize("text,key", [
        ("feet", "foot"),
        ("inches", "inch"),
        ("metres", "meter"),
        ("  km ", "kilometer"),
        ("yds", "yard"),
    ])
    def test_length_spellings(self, text, key):
        assert LENGTH_TABLE.lookup(text).key == key

    @pytest.mark.parametrize("text", ["fl oz", "fl. oz", "floz", "fluid ounces", "FLUID_OUNCE"])
    def test_fluid_ounce_spellings(self, text):
        assert VOLUME_TABLE.lookup(text).key == "fluid_ounce"

    def test_density_symbols(self):
        assert DENSITY_TABLE.lookup("g/mL").key == "gram_per_milliliter"
        assert DENSITY_TABLE.lookup("kg/m3").key == "kilogram_per_cubic_meter"
        assert DENSITY_TABLE.lookup("lb/ft³").key == "pound_per_cubic_foot"
        assert DENSITY_TABLE.lookup("pounds per gallon").key == "pound_per_gallon"

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnit) as exc_info:
            MASS_TABLE.lookup("meters")
        assert exc_info.value.unit_text == "meters"
        assert exc_info.value.kind is QuantityKind.MASS

    def test_get_returns_none(self):
        assert MASS_TABLE.get("furlong") is None
        assert MASS_TABLE.get(None) is None

    def test_contains(self):
        assert "kg" in MASS_TABLE
        assert "m" not in MASS_TABLE
        assert MASS_TABLE.base_unit in MASS_TABLE
        assert LENGTH_TABLE.base_unit not in MASS_TABLE

    def test_resolve_enum(self):
        assert MASS_TABLE.resolve(MassUnit.POUND).key == "pound"

    def test_resolve_descriptor_of_other_kind(self):
        with pytest.raises(IncompatibleQuantityKind):
            MASS_TABLE.resolve(LENGTH_TABLE.lookup("m"))

    def test_descriptor_identity(self):
        kilogram = MASS_TABLE.lookup("kg")
        assert kilogram == MASS_TABLE.lookup("kilogram")
        assert kilogram != MASS_TABLE.lookup("g")
        assert str(kilogram) == "kilogram"
        assert kilogram.name(plural=True) == "kilograms"
        assert kilogram.is_metric and not kilogram.is_imperial
        assert MASS_TABLE.lookup("g").is_base and not kilogram.is_base

    def test_only_the_named_base_is_base(self):
        assert DENSITY_TABLE.lookup("g/mL").is_base
        assert not DENSITY_TABLE.lookup("kg/L").is_base
        assert not DENSITY_TABLE.lookup("g/cm3").is_base
        for table in UNIT_TABLES.values():
            assert [u.key for u in table if u.is_base] == [table.base_unit.key]

    def test_resolve_descriptor_missing_from_table(self):
        grain = build_unit(QuantityKind.MASS, "grain", "gr", "0.06479891", False)
        with pytest.raises(UnknownUnit) as exc_info:
            MASS_TABLE.resolve(grain)
        assert exc_info.value.unit_text == "grain"


class TestTableConstruction:
    """Validation performed when building a table."""

    def test_base_must_have_factor_one(self):
        kilogram = build_unit(QuantityKind.MASS, "kilogram", "kg", "1000", True)
        with pytest.raises(ValueError):
            UnitTable(QuantityKind.MASS, [kilogram], base_key="kilogram")

    def test_conflicting_spelling(self):
        gram = build_unit(QuantityKind.MASS, "gram", "g", "1", True)
        grain = build_unit(QuantityKind.MASS, "grain", "g", "0.06479891", False)
        with pytest.raises(ValueError, match="maps to both"):
            UnitTable(QuantityKind.MASS, [gram, grain], base_key="gram")

    def test_mixed_kinds_rejected(self):
        gram = build_unit(QuantityKind.MASS, "gram", "g", "1", True)
        meter = build_unit(QuantityKind.LENGTH, "meter", "m", "1", True)
        with pytest.raises(ValueError):
            UnitTable(QuantityKind.MASS, [gram, meter], base_key="gram")

    def test_factor_must_be_string_literal(self):
        with pytest.raises(TypeError):
            build_unit(QuantityKind.MASS, "gram", "g", 1.0, True)

    def test_factor_must_be_positive(self):
        with pytest.raises(ValueError):
            build_unit(QuantityKind.MASS, "nothing", "n", "0", True)


class TestPluralize:
    def test_regular_and_irregular(self):
        assert pluralize("gram") == "grams"
        assert pluralize("foot") == "feet"
        assert pluralize("inch") == "inches"
        assert pluralize("fluid ounce") == "fluid ounces"

    def test_compound(self):
        assert pluralize("pound per gallon") == "pounds per gallon"
        assert pluralize("kilogram per cubic meter") == "kilograms per cubic meter"


class TestModuleHelpers:
    def test_resolve_kind(self):
        assert resolve_kind("mass") is QuantityKind.MASS
        assert resolve_kind("Weight") is QuantityKind.MASS
        assert resolve_kind("distance") is QuantityKind.LENGTH
        assert resolve_kind(QuantityKind.VOLUME) is QuantityKind.VOLUME
        with pytest.raises(ValueError):
            resolve_kind("temperature")

    def test_supported(self):
        assert get_supported_kinds() == ["mass", "length", "volume", "density"]
        assert get_supported_units("length")[:2] == ["meter", "centimeter"]

    def test_lookup_and_factor(self):
        assert lookup_unit("weight", "oz").key == "ounce"
        assert conversion_factor(QuantityKind.LENGTH, LengthUnit.MILE) == Fraction("1609.344")
