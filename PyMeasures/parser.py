"""
Parsing of human-readable measurement strings.

Accepted input is a value followed by a unit, with optional whitespace
around and between them::

    "10.5 kg"   "1/2 pound"   "-3.14 meters"   "5.5kg"   "  10\\tkg  "
    "2 fl oz"   "1.0 g/mL"    "62.4 lb/ft³"

Values are decimal literals (``-?\\d+(\\.\\d+)?``) or simple fractions
(``-?\\d+/\\d+``). Both are parsed straight into exact fractions; no value
ever passes through binary floating point. Units are resolved through the
target kind's unit table; density text such as "g/mL" or "lb/ft³" is split
into its mass and volume parts first.
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import Any, Optional, Tuple

from .exceptions import DivisionByZero, InvalidFormat, InvalidNumericLiteral, ParseError, UnknownUnit
from .measurement import Measurement, measurement_class
from .units import (
    DENSITY_TABLE,
    DENSITY_VOLUME_PARTS,
    MASS_TABLE,
    VOLUME_TABLE,
    QuantityKind,
    UnitDescriptor,
    normalize_unit_text,
)

logger = logging.getLogger(__name__)


class MeasurementParser:
    """Strict parser for ``<value> <unit>`` strings."""

    def __init__(self):
        # Loose shape first, so numeric-looking garbage ("10.", ".5", "1/2/3")
        # is reported as a bad literal rather than a bad format
        self.measurement_pattern = re.compile(
            r'^\s*(?P<value>-?[\d./]+)\s*(?P<unit>\S(?:.*\S)?)?\s*$', re.DOTALL)
        self.fraction_pattern = re.compile(r'^(-?\d+)/(\d+)$')
        self.decimal_pattern = re.compile(r'^-?\d+(?:\.\d+)?$')
        # Unicode letters ("µg"), "/" and superscripts; multi-word units ("fl oz")
        # and trailing exponent digits ("kg/m3") are allowed
        self.unit_pattern = re.compile(
            r'^(?:[^\W\d_]|[²³])(?:[^\W_]|[²³/.])*(?:\s+(?:[^\W_]|[²³/.])+)*$')
        self.density_separator = re.compile(r'\s*/\s*|\s+per\s+')

    def parse_value(self, value_text: str, input: Optional[str] = None) -> Fraction:
        """
        Parse a decimal or fraction literal into an exact value.

        Raises
        ------
        InvalidNumericLiteral
            If the literal violates the strict grammar ("10.", ".5", "1/2/3").
        DivisionByZero
            If a fraction has a zero denominator.
        """
        literal = value_text.strip()
        fraction_match = self.fraction_pattern.match(literal)
        if fraction_match:
            numerator = int(fraction_match.group(1))
            denominator = int(fraction_match.group(2))
            if denominator == 0:
                raise DivisionByZero("fraction", f"zero denominator in '{value_text}'")
            return Fraction(numerator, denominator)
        if self.decimal_pattern.match(literal):
            return Fraction(literal)
        raise InvalidNumericLiteral(input if input is not None else value_text, value_text)

    def split(self, text: str) -> Tuple[Fraction, str]:
        """
        Split ``text`` into an exact value and the raw unit text.

        Raises
        ------
        InvalidFormat
            If ``text`` is not shaped like ``<value> <unit>``.
        InvalidNumericLiteral, DivisionByZero
            If the value part is malformed.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected a string, got {type(text).__name__}")
        match = self.measurement_pattern.match(text)
        if not match:
            raise InvalidFormat(text)
        value = self.parse_value(match.group('value'), input=text)
        unit_text = match.group('unit')
        if unit_text is None or not self.unit_pattern.match(unit_text):
            raise InvalidFormat(text)
        return value, unit_text

    def resolve_unit(self, kind: QuantityKind, unit_text: str, input: Optional[str] = None) -> UnitDescriptor:
        """Resolve unit text for ``kind``; density text is decomposed first."""
        if kind is QuantityKind.DENSITY:
            unit = self.resolve_density_unit(unit_text)
        else:
            unit = measurement_class(kind).table.get(unit_text)
        if unit is None:
            raise UnknownUnit(unit_text, kind, input=input)
        return unit

    def resolve_density_unit(self, unit_text: str) -> Optional[UnitDescriptor]:
        """
        Resolve compound density text such as "g/mL", "lb/ft³" or
        "kilograms per cubic meter".
        """
        direct = DENSITY_TABLE.get(unit_text)
        if direct is not None:
            return direct

        parts = self.density_separator.split(normalize_unit_text(unit_text), maxsplit=1)
        if len(parts) != 2:
            return None
        mass_text, volume_text = parts

        mass_unit = MASS_TABLE.get(mass_text)
        volume_key = DENSITY_VOLUME_PARTS.get(volume_text)
        if volume_key is None:
            volume_unit = VOLUME_TABLE.get(volume_text)
            volume_key = volume_unit.key if volume_unit is not None else None
        if mass_unit is None or volume_key is None:
            return None

        candidate = f"{mass_unit.key}_per_{volume_key}"
        logger.debug(f"Density unit '{unit_text}' normalized to '{candidate}'")
        return DENSITY_TABLE.get(candidate)

    def parse(self, kind: Any, text: str) -> Measurement:
        """
        Parse ``text`` into a measurement of ``kind``.

        Parameters
        ----------
        kind : QuantityKind, str or Measurement subclass
            Target quantity kind, e.g. ``QuantityKind.MASS``, "mass" or ``Mass``.
        text : str
            Input such as "10.5 kg" or "1/2 pound".

        Returns
        -------
        Measurement
            A measurement of the requested kind.

        Raises
        ------
        InvalidFormat, InvalidNumericLiteral, UnknownUnit, DivisionByZero
        """
        cls = measurement_class(kind)
        value, unit_text = self.split(text)
        unit = self.resolve_unit(cls.kind, unit_text, input=text)
        return cls.from_exact(value, unit)

    def try_parse(self, kind: Any, text: str) -> Optional[Measurement]:
        """Like :meth:`parse` but returns None for any parse failure."""
        try:
            return self.parse(kind, text)
        except (ParseError, DivisionByZero, TypeError) as exc:
            logger.debug(f"Could not parse {text!r}: {exc}")
            return None


_default_parser = MeasurementParser()


def parse(kind: Any, text: str) -> Measurement:
    """Parse ``text`` into a measurement of ``kind``; see :meth:`MeasurementParser.parse`."""
    return _default_parser.parse(kind, text)


def try_parse(kind: Any, text: str) -> Optional[Measurement]:
    """Parse ``text`` or return None."""
    return _default_parser.try_parse(kind, text)


def parse_value(value_text: str) -> Fraction:
    """Parse a decimal or fraction literal into an exact value."""
    return _default_parser.parse_value(value_text)


def parse_unit(kind: Any, unit_text: str) -> UnitDescriptor:
    """Resolve unit text for ``kind`` the way :func:`parse` does."""
    return _default_parser.resolve_unit(measurement_class(kind).kind, unit_text)
