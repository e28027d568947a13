import pandas as pd
import pytest

from PyMeasures import Length, Mass
from PyMeasures.validators import (
    AllowedUnitValidator,
    MeasurementRangeValidator,
    PositiveMeasurementValidator,
    ValidationResult,
    validate_measurements,
)


class TestMeasurementRangeValidator:
    def test_bounds_in_other_units(self, weights_df):
        validator = MeasurementRangeValidator(["weight"], min_value=Mass(0, "g"), max_value=Mass(1, "t"))
        result = validator.validate(weights_df)
        assert not result.is_valid
        assert [e["row"] for e in result.errors] == [1, 3]
        assert result.valid_rows == 2
        assert result.total_rows == 4

    def test_min_only(self, weights_df):
        result = MeasurementRangeValidator(["weight"], min_value=Mass(1, "g")).validate(weights_df)
        assert [e["row"] for e in result.errors] == [1]

    def test_needs_a_bound(self):
        with pytest.raises(ValueError):
            MeasurementRangeValidator(["weight"])

    def test_inverted_bounds(self):
        with pytest.raises(ValueError):
            MeasurementRangeValidator(["weight"], min_value=Mass(2, "kg"), max_value=Mass(1, "kg"))

    def test_kind_mismatch_reported(self, weights_df):
        result = MeasurementRangeValidator(["weight"], min_value=Length(0, "m")).validate(weights_df)
        assert len(result.errors) == 3
        assert "Incompatible quantity kinds" in result.errors[0]["message"]


class TestPositiveMeasurementValidator:
    def test_negative_rejected(self, weights_df):
        result = PositiveMeasurementValidator(["weight"]).validate(weights_df)
        assert [e["row"] for e in result.errors] == [1]

    def test_nulls_can_be_rejected(self, weights_df):
        result = PositiveMeasurementValidator(["weight"], allow_null=False).validate(weights_df)
        assert [e["row"] for e in result.errors] == [1, 2]

    def test_zero(self):
        df = pd.DataFrame({"weight": [Mass(0, "kg")]})
        assert not PositiveMeasurementValidator(["weight"]).validate(df).is_valid
        assert PositiveMeasurementValidator(["weight"], allow_zero=True).validate(df).is_valid

    def test_non_measurement_value(self):
        df = pd.DataFrame({"weight": ["10 kg"]})
        result = PositiveMeasurementValidator(["weight"]).validate(df)
        assert "Not a measurement" in result.errors[0]["message"]

    def test_list_cell_reported_not_raised(self):
        df = pd.DataFrame({"weight": [[1, 2], Mass(1, "kg"), None]})
        result = PositiveMeasurementValidator(["weight"]).validate(df)
        assert [e["row"] for e in result.errors] == [0]
        assert result.errors[0]["message"] == "Not a measurement: list"


class TestAllowedUnitValidator:
    def test_allowed_units(self, weights_df):
        result = AllowedUnitValidator(["weight"], ["kg", "grams"]).validate(weights_df)
        assert [e["row"] for e in result.errors] == [3]

    def test_units_of_other_kind(self, weights_df):
        result = AllowedUnitValidator(["weight"], ["m"]).validate(weights_df)
        assert len(result.errors) == 3

    def test_requires_units(self):
        with pytest.raises(ValueError):
            AllowedUnitValidator(["weight"], [])


class TestValidationResult:
    def test_missing_column(self, weights_df):
        result = PositiveMeasurementValidator(["mass"]).validate(weights_df)
        assert result.errors[0]["row"] == -1
        assert result.valid_rows == 4

    def test_summary_and_errors_df(self, weights_df):
        result = PositiveMeasurementValidator(["weight"]).validate(weights_df)
        summary = result.summary()
        assert summary["error_count"] == 1
        assert summary["validity_rate"] == 75.0
        assert list(result.errors_df().columns) == ["column", "row", "message", "value"]

    def test_empty_result(self):
        result = ValidationResult()
        assert result.is_valid
        assert result.validity_rate == 100.0
        assert result.errors_df().empty


class TestValidateMeasurements:
    def test_combined(self, weights_df):
        validators = [
            MeasurementRangeValidator(["weight"], max_value=Mass(1, "t")),
            PositiveMeasurementValidator(["weight"]),
            AllowedUnitValidator(["weight"], ["kg", "g", "t"]),
        ]
        result = validate_measurements(weights_df, validators)
        assert len(result.errors) == 2
        assert result.valid_rows == 2
        assert result.quality_metrics["validity_rate"] == 50.0
