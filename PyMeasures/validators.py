"""
Validation of measurement columns.

Validators check pandas columns of :class:`Measurement` objects (or
``value``/``unit`` frames rebuilt with
:func:`~PyMeasures.frames.frame_to_measurements`) against physical rules:
bounds in any unit, strict positivity and an allowed set of units. Failures
are collected in a :class:`ValidationResult` rather than raised, so a whole
column can be reviewed at once.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .exceptions import UnitError
from .measurement import Measurement

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of measurement validation containing errors and quality metrics."""

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.quality_metrics: Dict[str, Any] = {}
        self.valid_rows: int = 0
        self.total_rows: int = 0

    def add_error(self, column: str, row_index: Any, message: str, value: Any = None):
        """Add a validation error."""
        self.errors.append({
            'column': column,
            'row': row_index,
            'message': message,
            'value': value
        })

    def set_quality_metric(self, name: str, value: Any):
        """Set a quality metric."""
        self.quality_metrics[name] = value

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def validity_rate(self) -> float:
        """Valid rows as percentage of all rows."""
        if self.total_rows == 0:
            return 100.0
        return (self.valid_rows / self.total_rows) * 100

    def summary(self) -> Dict[str, Any]:
        """Generate a summary of validation results."""
        return {
            'total_rows': self.total_rows,
            'valid_rows': self.valid_rows,
            'error_count': len(self.errors),
            'validity_rate': round(self.validity_rate, 2),
            'quality_metrics': self.quality_metrics
        }

    def errors_df(self) -> pd.DataFrame:
        """Convert errors to DataFrame for analysis."""
        return pd.DataFrame(self.errors, columns=['column', 'row', 'message', 'value'])


class BaseMeasurementValidator(ABC):
    """
    Abstract base class for measurement column validators.

    Parameters
    ----------
    columns : list of str
        Columns of Measurement objects to check.
    allow_null : bool, default True
        Whether missing entries are acceptable.
    """

    def __init__(self, columns: Iterable[str], allow_null: bool = True):
        self.columns = list(columns)
        self.allow_null = allow_null

    @abstractmethod
    def check(self, measurement: Measurement) -> Optional[str]:
        """Return an error message for ``measurement``, or None if it passes."""

    def validate(self, df: pd.DataFrame) -> ValidationResult:
        """Validate the configured columns of ``df``."""
        result = ValidationResult()
        result.total_rows = len(df)
        valid_rows = set(df.index)

        for col in self.columns:
            if col not in df.columns:
                result.add_error(col, -1, f"Column '{col}' not found")
                continue

            failures = 0
            for idx, value in df[col].items():
                message = self._message_for(value)
                if message is not None:
                    result.add_error(col, idx, message, value)
                    valid_rows.discard(idx)
                    failures += 1
            result.set_quality_metric(f'{col}_{self.metric_name}_failures', failures)

        result.valid_rows = len(valid_rows)
        return result

    @property
    def metric_name(self) -> str:
        return type(self).__name__.replace('Validator', '').lower()

    def _message_for(self, value: Any) -> Optional[str]:
        if not isinstance(value, Measurement):
            if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
                return None if self.allow_null else "Missing measurement"
            return f"Not a measurement: {type(value).__name__}"
        try:
            return self.check(value)
        except UnitError as exc:
            return str(exc)


class MeasurementRangeValidator(BaseMeasurementValidator):
    """
    Checks that measurements lie within inclusive bounds.

    Parameters
    ----------
    columns : list of str
        Columns to check.
    min_value, max_value : Measurement, optional
        Bounds in any unit of the column's kind. A measurement of another
        kind is reported as an error.
    """

    def __init__(
        self,
        columns: Iterable[str],
        min_value: Optional[Measurement] = None,
        max_value: Optional[Measurement] = None,
        allow_null: bool = True,
    ):
        super().__init__(columns, allow_null)
        if min_value is None and max_value is None:
            raise ValueError("At least one of min_value and max_value is required")
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")
        self.min_value = min_value
        self.max_value = max_value

    def check(self, measurement: Measurement) -> Optional[str]:
        if self.min_value is not None and measurement < self.min_value:
            return f"Value {measurement} below minimum {self.min_value}"
        if self.max_value is not None and measurement > self.max_value:
            return f"Value {measurement} above maximum {self.max_value}"
        return None


class PositiveMeasurementValidator(BaseMeasurementValidator):
    """Checks that magnitudes are strictly positive (or non-negative with ``allow_zero``)."""

    def __init__(self, columns: Iterable[str], allow_zero: bool = False, allow_null: bool = True):
        super().__init__(columns, allow_null)
        self.allow_zero = allow_zero

    def check(self, measurement: Measurement) -> Optional[str]:
        if measurement.magnitude < 0 or (measurement.magnitude == 0 and not self.allow_zero):
            return f"Value {measurement} is not positive"
        return None


class AllowedUnitValidator(BaseMeasurementValidator):
    """
    Checks that measurements are expressed in one of a set of units.

    ``units`` may use any spelling known to the column's unit table; they
    are resolved lazily against each measurement's kind.
    """

    def __init__(self, columns: Iterable[str], units: Iterable[Any], allow_null: bool = True):
        super().__init__(columns, allow_null)
        self.units = list(units)
        if not self.units:
            raise ValueError("At least one allowed unit is required")

    def check(self, measurement: Measurement) -> Optional[str]:
        allowed = {measurement.resolve_unit(unit).key for unit in self.units}
        if measurement.unit.key not in allowed:
            return f"Unit '{measurement.unit.key}' not in allowed units {sorted(allowed)}"
        return None


def validate_measurements(
    df: pd.DataFrame, validators: Iterable[BaseMeasurementValidator]
) -> ValidationResult:
    """
    Run several validators and combine their results.

    A row is valid only if every validator accepts it.
    """
    combined = ValidationResult()
    combined.total_rows = len(df)
    valid_rows = set(df.index)

    for validator in validators:
        logger.info(f"Running {validator.__class__.__name__}...")
        result = validator.validate(df)
        combined.errors.extend(result.errors)
        combined.quality_metrics.update(result.quality_metrics)
        for error in result.errors:
            if error['row'] != -1:
                valid_rows.discard(error['row'])

    combined.valid_rows = len(valid_rows)
    combined.set_quality_metric('validity_rate', round(combined.validity_rate, 2))
    logger.info(
        f"Validated {combined.total_rows} rows: {combined.valid_rows} valid, "
        f"{len(combined.errors)} errors")
    return combined
