"""
Exact numeric helpers for PyMeasures.

Magnitudes are held as :class:`fractions.Fraction` so that conversion,
arithmetic and density bridging never lose precision. These helpers build
fractions from caller input (ints, floats, decimals, numpy scalars, strings)
and render them back to decimal text without going through binary floating
point.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, localcontext
from fractions import Fraction
from typing import Union

import numpy as np

from .exceptions import DivisionByZero, InvalidMagnitude


Number = Union[int, float, Decimal, Fraction, str, np.integer, np.floating]


def to_exact(value: Number) -> Fraction:
    """
    Convert a caller-supplied number into an exact :class:`Fraction`.

    Floats are converted through their shortest ``repr`` so that ``0.1``
    becomes exactly one tenth rather than the nearest binary fraction.

    Parameters
    ----------
    value : int, float, Decimal, Fraction, str or numpy scalar
        The value to convert. Strings may be decimal ("10.5"), scientific
        ("1e3") or fractional ("1/3").

    Returns
    -------
    Fraction
        The exact value.

    Raises
    ------
    InvalidMagnitude
        If the value is NaN, infinite, a bool or not numeric.
    DivisionByZero
        If a fractional string has a zero denominator.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool) or isinstance(value, np.bool_):
        raise InvalidMagnitude(value, "Booleans are not magnitudes")
    if isinstance(value, (int, np.integer)):
        return Fraction(int(value))
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            raise InvalidMagnitude(value, "Value cannot be NaN")
        if math.isinf(value):
            raise InvalidMagnitude(value, "Value cannot be infinite")
        if isinstance(value, np.floating):
            # Shortest repr at the scalar's own precision
            return Fraction(Decimal(np.format_float_positional(value, unique=True, trim="-")))
        return Fraction(Decimal(repr(value)))
    if isinstance(value, Decimal):
        if value.is_nan():
            raise InvalidMagnitude(value, "Value cannot be NaN")
        if value.is_infinite():
            raise InvalidMagnitude(value, "Value cannot be infinite")
        return Fraction(value)
    if isinstance(value, str):
        return _exact_from_string(value)
    raise InvalidMagnitude(value, f"Unsupported numeric type {type(value).__name__}")


def _exact_from_string(text: str) -> Fraction:
    cleaned = text.strip()
    if not cleaned:
        raise InvalidMagnitude(text, "Value cannot be empty")
    try:
        return Fraction(cleaned)
    except ZeroDivisionError as exc:
        raise DivisionByZero("fraction", f"zero denominator in '{text}'") from exc
    except ValueError as exc:
        # Fraction() rejects "nan"/"inf"; Decimal tells us which one it was
        try:
            special = Decimal(cleaned)
        except InvalidOperation:
            raise InvalidMagnitude(text, "Not a numeric literal") from exc
        if special.is_nan():
            raise InvalidMagnitude(text, "Value cannot be NaN") from exc
        raise InvalidMagnitude(text, "Value cannot be infinite") from exc


def is_terminating(value: Fraction) -> bool:
    """Return True if ``value`` has a finite decimal expansion."""
    denominator = value.denominator
    for prime in (2, 5):
        while denominator % prime == 0:
            denominator //= prime
    return denominator == 1


def _decimal_places(denominator: int) -> int:
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    return max(twos, fives)


def to_decimal(value: Fraction, digits: int = 28) -> Decimal:
    """
    Render a fraction as a :class:`Decimal`.

    Terminating fractions are rendered exactly regardless of ``digits``;
    non-terminating ones are rounded to ``digits`` significant digits.
    """
    if is_terminating(value):
        places = _decimal_places(value.denominator)
        scaled = value.numerator * (10 ** places // value.denominator)
        sign = 1 if scaled < 0 else 0
        return Decimal((sign, tuple(int(d) for d in str(abs(scaled))), -places))
    with localcontext() as ctx:
        ctx.prec = digits
        return Decimal(value.numerator) / Decimal(value.denominator)


def decimal_string(value: Fraction, digits: int = 28) -> str:
    """Plain positional decimal text for ``value`` (no exponent)."""
    return format(to_decimal(value, digits), 'f')


def exact_string(value: Fraction) -> str:
    """
    Lossless text for ``value``.

    A plain decimal when the expansion terminates ("0.125"), otherwise the
    reduced fraction ("1/3"). Both forms are accepted by :func:`to_exact`.
    """
    if is_terminating(value):
        return decimal_string(value)
    return f"{value.numerator}/{value.denominator}"


def strip_trailing_zeros(text: str) -> str:
    """Remove trailing fractional zeros and a dangling decimal point."""
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def round_exact(value: Fraction, places: int, rounding: str = "half_up") -> Fraction:
    """
    Round ``value`` to ``places`` decimal places without leaving exact arithmetic.

    ``half_up`` rounds ties away from zero; ``half_even`` rounds ties to the
    even neighbour.
    """
    scale = 10 ** places
    scaled = value * scale
    if rounding == "half_even":
        rounded = round(scaled)
    elif rounding == "half_up":
        rounded = math.floor(abs(scaled) + Fraction(1, 2))
        if scaled < 0:
            rounded = -rounded
    else:
        raise ValueError(f"Unknown rounding mode: {rounding}")
    return Fraction(rounded, scale)


def fixed_string(value: Fraction, places: int, rounding: str = "half_up") -> str:
    """Render ``value`` with exactly ``places`` decimal places."""
    rounded = round_exact(value, places, rounding)
    units = int(rounded * 10 ** places)
    sign = '-' if units < 0 else ''
    digits = str(abs(units))
    if places == 0:
        return sign + digits
    digits = digits.rjust(places + 1, '0')
    return f"{sign}{digits[:-places]}.{digits[-places:]}"
