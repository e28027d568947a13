from fractions import Fraction

import pandas as pd
import pytest

from PyMeasures import Length, Mass
from PyMeasures.config import MeasurementConfig, set_config
from PyMeasures.exceptions import IncompatibleQuantityKind, InvalidFormat
from PyMeasures.frames import (
    convert_column,
    filter_between,
    frame_to_measurements,
    mean_column,
    parse_measurements,
    parse_series,
    series_to_frame,
    sum_column,
)


class TestParseSeries:
    """Parsing free-text quantity columns."""

    def test_columns_and_index(self, raw_quantities):
        df = parse_series(raw_quantities, "mass")
        assert list(df.columns) == ["value", "unit", "original"]
        assert list(df.index) == list(raw_quantities.index)

    def test_exact_values(self, raw_quantities):
        df = parse_series(raw_quantities, "mass")
        assert df.loc[0, "value"] == "10"
        assert df.loc[0, "unit"] == "kilogram"
        assert df.loc[1, "value"] == "0.5"
        assert df.loc[1, "unit"] == "pound"
        assert df.loc[4, "value"] == "2.5"
        assert df.loc[4, "original"] == "2.5kg"

    def test_missing_rows_kept(self, raw_quantities):
        df = parse_series(raw_quantities, "mass")
        assert len(df) == len(raw_quantities)
        assert df.loc[2, "value"] is None
        assert df.loc[2, "original"] is None

    def test_raise(self):
        with pytest.raises(InvalidFormat):
            parse_series(pd.Series(["10 kg", "heavy"]), Mass)

    def test_coerce(self):
        df = parse_series(pd.Series(["10 kg", "heavy", "3 parsecs"]), Mass, errors="coerce")
        assert df.loc[0, "unit"] == "kilogram"
        assert df.loc[1, "value"] is None
        assert df.loc[1, "original"] == "heavy"
        assert df.loc[2, "unit"] is None

    def test_invalid_errors_option(self):
        with pytest.raises(ValueError):
            parse_series(pd.Series(["10 kg"]), Mass, errors="ignore")

    def test_configured_column_names(self):
        set_config(MeasurementConfig(value_column="amount", unit_column="uom"))
        df = parse_series(pd.Series(["10 kg"]), Mass)
        assert list(df.columns) == ["amount", "uom", "original"]

    def test_parse_measurements(self, raw_quantities):
        parsed = parse_measurements(raw_quantities, Mass)
        assert parsed.name == "weight"
        assert parsed[0] == Mass(10, "kg")
        assert parsed[2] is None


class TestFrameRoundTrip:
    def test_series_to_frame(self, mass_series):
        df = series_to_frame(mass_series)
        assert df.loc[0, "value"] == "1"
        assert df.loc[0, "unit"] == "kilogram"
        assert df.loc[2, "unit"] is None

    def test_frame_to_measurements(self, mass_series):
        restored = frame_to_measurements(series_to_frame(mass_series), "mass")
        assert restored[0] == mass_series[0]
        assert restored[3].unit.key == "pound"
        assert restored[2] is None

    def test_missing_column(self):
        with pytest.raises(KeyError):
            frame_to_measurements(pd.DataFrame({"value": ["1"]}), Mass)

    def test_custom_columns(self):
        df = pd.DataFrame({"qty": ["1/3", "2"], "uom": ["kg", "lb"]})
        restored = frame_to_measurements(df, Mass, value_column="qty", unit_column="uom")
        assert restored[0].magnitude == Fraction(1, 3)
        assert restored[1] == Mass(2, "lb")


class TestColumnOperations:
    def test_convert_column(self, mass_series):
        grams = convert_column(mass_series, "g")
        assert grams[0].magnitude == 1000
        assert grams[1].magnitude == 500
        assert grams[3].magnitude == Fraction("907.18474")
        assert grams[2] is None

    def test_sum_column(self, mass_series):
        total = sum_column(mass_series, "g")
        assert total.unit.key == "gram"
        assert total.magnitude == Fraction("2407.18474")

    def test_sum_column_default_unit(self):
        total = sum_column(pd.Series([Mass(1, "kg"), Mass(500, "g")]))
        assert total == Mass(1.5, "kg")
        assert total.unit.key == "kilogram"

    def test_mean_column_ignores_missing(self):
        mean = mean_column(pd.Series([Mass(1, "kg"), None, Mass(500, "g")]))
        assert mean.magnitude == Fraction(3, 4)

    def test_empty_column(self):
        with pytest.raises(ValueError):
            sum_column(pd.Series([None, None]))

    def test_filter_between(self, mass_series):
        kept = filter_between(mass_series, low=Mass(600, "g"), high=Mass(1, "kg"))
        assert list(kept.index) == [0, 3]

    def test_filter_exclusive(self, mass_series):
        kept = filter_between(mass_series, low=Mass(500, "g"), inclusive=False)
        assert list(kept.index) == [0, 3]

    def test_filter_open_bound(self, mass_series):
        kept = filter_between(mass_series, high=Mass(600, "g"))
        assert list(kept.index) == [1]

    def test_filter_wrong_kind(self, mass_series):
        with pytest.raises(IncompatibleQuantityKind):
            filter_between(mass_series, low=Length(1, "m"))
