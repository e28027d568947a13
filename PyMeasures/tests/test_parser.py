from fractions import Fraction

import pytest

from PyMeasures import Density, Length, Mass, Volume, parse
from PyMeasures.exceptions import (
    DivisionByZero,
    InvalidFormat,
    InvalidNumericLiteral,
    ParseError,
    UnknownUnit,
)
from PyMeasures.parser import MeasurementParser, parse_unit, parse_value, try_parse
from PyMeasures.units import QuantityKind


class TestParseValid:
    """Well-formed "<value> <unit>" strings."""

    def test_decimal(self):
        m = parse(Mass, "10.5 kg")
        assert m.magnitude == Fraction(21, 2)
        assert m.unit.key == "kilogram"

    def test_fraction_is_exact(self):
        m = parse("mass", "1/2 pound")
        assert m.magnitude == Fraction(1, 2)
        assert m.unit.key == "pound"

    def test_negative(self):
        m = parse(QuantityKind.LENGTH, "-3.14 meters")
        assert isinstance(m, Length)
        assert m.magnitude == Fraction("-3.14")

    def test_no_space_and_surrounding_whitespace(self):
        assert parse(Mass, "5.5kg") == Mass(5.5, "kg")
        assert parse(Mass, "  10\tkg  ") == Mass(10, "kg")

    def test_decimal_never_goes_through_float(self):
        assert parse(Mass, "0.1 kg").magnitude == Fraction(1, 10)

    def test_multi_word_unit(self):
        m = parse(Volume, "2 fl oz")
        assert m.unit.key == "fluid_ounce"
        assert parse(Volume, "3 fluid ounces").magnitude == 3

    def test_classmethod(self):
        assert Mass.parse("2 lbs") == Mass(2, "lb")

    def test_case_insensitive_unit(self):
        assert parse(Mass, "1 KG").unit.key == "kilogram"


class TestParseDensity:
    """Compound density units are split into mass and volume parts."""

    @pytest.mark.parametrize("text,key", [
        ("1.0 g/mL", "gram_per_milliliter"),
        ("62.4 lb/ft³", "pound_per_cubic_foot"),
        ("1000 kg/m3", "kilogram_per_cubic_meter"),
        ("8.34 lbs/gal", "pound_per_gallon"),
        ("2 pounds/gallon", "pound_per_gallon"),
        ("1 kg/liter", "kilogram_per_liter"),
        ("1 kilograms per cubic meter", "kilogram_per_cubic_meter"),
        ("1 grams / cc", "gram_per_cubic_centimeter"),
        ("0.5 lb/cu ft", "pound_per_cubic_foot"),
    ])
    def test_density_units(self, text, key):
        assert parse(Density, text).unit.key == key

    def test_unsupported_combination(self):
        with pytest.raises(UnknownUnit):
            parse(Density, "3 g/l")


class TestParseErrors:
    @pytest.mark.parametrize("text", ["10.", ".5 kg", "1/2/3 kg", "1.2.3 kg", "10. kg"])
    def test_invalid_numeric_literal(self, text):
        with pytest.raises(InvalidNumericLiteral):
            parse(Mass, text)

    def test_zero_denominator(self):
        with pytest.raises(DivisionByZero):
            parse(Mass, "1/0 kg")

    @pytest.mark.parametrize("text", ["", "   ", "kg", "10", "ten kg", "10 @kg", "10 5"])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormat):
            parse(Mass, text)

    def test_non_ascii_unit_is_unknown_not_malformed(self):
        with pytest.raises(UnknownUnit) as exc_info:
            parse(Mass, "10 µg")
        assert exc_info.value.unit_text == "µg"

    def test_unknown_unit_carries_context(self):
        with pytest.raises(UnknownUnit) as exc_info:
            parse(Length, "10 kg")
        assert exc_info.value.unit_text == "kg"
        assert exc_info.value.input == "10 kg"
        assert exc_info.value.kind is QuantityKind.LENGTH

    def test_all_are_parse_errors(self):
        for text in ("10.", "kg", "10 parsecs"):
            with pytest.raises(ParseError):
                parse(Length, text)

    def test_non_string(self):
        with pytest.raises(TypeError):
            parse(Mass, 10)


class TestParserHelpers:
    def test_parse_value(self):
        assert parse_value("-1/2") == Fraction(-1, 2)
        assert parse_value("42") == 42
        with pytest.raises(InvalidNumericLiteral):
            parse_value("1e3")

    def test_parse_unit(self):
        assert parse_unit("volume", "cups").key == "cup"
        assert parse_unit(Density, "g/cm³").key == "gram_per_cubic_centimeter"

    def test_try_parse(self):
        assert try_parse(Mass, "10 kg") == Mass(10, "kg")
        assert try_parse(Mass, "10 parsecs") is None
        assert try_parse(Mass, "1/0 kg") is None

    def test_parser_instance(self):
        parser = MeasurementParser()
        value, unit_text = parser.split("2.5 lb")
        assert value == Fraction(5, 2)
        assert unit_text == "lb"
