"""
Exception hierarchy for PyMeasures.

Every error raised by the measurement engine derives from :class:`UnitError`,
so callers can catch all unit-related failures in one place. Each concrete
error also derives from the closest built-in exception (``ValueError``,
``TypeError``, ``ZeroDivisionError``) so generic handlers keep working.
"""

from __future__ import annotations

from typing import Optional


class UnitError(Exception):
    """Base class for all unit-related errors."""


class InvalidMagnitude(UnitError, ValueError):
    """Raised when a magnitude is NaN, infinite or not a number at all."""

    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        self.reason = reason or "Value must be a finite number"
        super().__init__(f"Invalid magnitude {value!r}: {self.reason}")


class IncompatibleQuantityKind(UnitError, TypeError):
    """Raised when an operation mixes measurements of different quantity kinds."""

    def __init__(self, left: object, right: object, operation: Optional[str] = None):
        self.left = left
        self.right = right
        self.operation = operation
        message = f"Cannot combine {left} with {right}"
        if operation:
            message = f"Cannot {operation} {left} and {right}"
        super().__init__(f"{message}: Incompatible quantity kinds")


class InvalidDensity(UnitError, ValueError):
    """Raised when a density used for mass/volume bridging is not positive."""

    def __init__(self, magnitude: object):
        self.magnitude = magnitude
        super().__init__(f"Density must be positive (got {magnitude})")


class DivisionByZero(UnitError, ZeroDivisionError):
    """Raised on scalar division by zero or a fraction with a zero denominator."""

    def __init__(self, operation: str = "division", detail: Optional[str] = None):
        self.operation = operation
        self.detail = detail
        message = f"Arithmetic operation '{operation}' failed: Division by zero"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ParseError(UnitError, ValueError):
    """Raised when a string cannot be parsed into a measurement."""

    def __init__(self, input: str, reason: Optional[str] = None):
        self.input = input
        self.reason = reason
        message = f"Cannot parse '{input}' as measurement"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidFormat(ParseError):
    """The input does not have the ``<value> <unit>`` shape at all."""

    def __init__(self, input: str):
        super().__init__(input, "Invalid format. Expected: '<value> <unit>' (e.g., '10 kg')")


class InvalidNumericLiteral(ParseError):
    """The value part looks numeric but violates the strict numeric grammar."""

    def __init__(self, input: str, literal: str):
        self.literal = literal
        super().__init__(input, f"Invalid numeric value '{literal}'")


class UnknownUnit(ParseError):
    """A unit name or symbol could not be resolved for the quantity kind."""

    def __init__(self, unit_text: str, kind: object = None, input: Optional[str] = None):
        self.unit_text = unit_text
        self.kind = kind
        reason = f"Unknown unit '{unit_text}'"
        if kind is not None:
            reason += f" for {kind}"
        super().__init__(input if input is not None else unit_text, reason)


class SerializationError(UnitError, ValueError):
    """Raised when a boundary record is missing fields or malformed."""

    def __init__(self, reason: str, record: object = None):
        self.reason = reason
        self.record = record
        super().__init__(f"Cannot deserialize measurement: {reason}")


__all__ = [
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
