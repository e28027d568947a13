"""
Mass <-> volume conversion through a density.

Density is the only bridge between the mass and volume kinds. Both
directions normalize to grams, milliliters and grams per milliliter, so the
arithmetic is a single exact multiplication or division and a round trip
returns the original quantity exactly.
"""

from __future__ import annotations

from .conversion import convert_to
from .exceptions import IncompatibleQuantityKind, InvalidDensity
from .measurement import Density, Mass, Volume
from .units import QuantityKind

GRAM = Mass.table.lookup("gram")
MILLILITER = Volume.table.lookup("milliliter")
GRAM_PER_MILLILITER = Density.table.base_unit


def _require(measurement: object, kind: QuantityKind, operation: str) -> None:
    if getattr(measurement, "kind", None) is not kind:
        raise IncompatibleQuantityKind(getattr(measurement, "kind", type(measurement).__name__),
                                       kind, operation)


def _density_in_base(density: Density, operation: str):
    _require(density, QuantityKind.DENSITY, operation)
    if density.magnitude <= 0:
        raise InvalidDensity(density.magnitude)
    return convert_to(density, GRAM_PER_MILLILITER).magnitude


def mass_to_volume(mass: Mass, density: Density) -> Volume:
    """
    Volume occupied by ``mass`` at ``density``.

    Parameters
    ----------
    mass : Mass
        Any mass unit.
    density : Density
        Any density unit; must be strictly positive.

    Returns
    -------
    Volume
        The volume in milliliters (grams divided by grams per milliliter).

    Raises
    ------
    InvalidDensity
        If the density magnitude is zero or negative.
    IncompatibleQuantityKind
        If the arguments are not a mass and a density.
    """
    _require(mass, QuantityKind.MASS, "convert mass to volume with")
    density_base = _density_in_base(density, "convert mass to volume with")
    grams = convert_to(mass, GRAM).magnitude
    return Volume.from_exact(grams / density_base, MILLILITER)


def volume_to_mass(volume: Volume, density: Density) -> Mass:
    """
    Mass of ``volume`` at ``density``, in grams.

    Raises
    ------
    InvalidDensity
        If the density magnitude is zero or negative.
    IncompatibleQuantityKind
        If the arguments are not a volume and a density.
    """
    _require(volume, QuantityKind.VOLUME, "convert volume to mass with")
    density_base = _density_in_base(density, "convert volume to mass with")
    milliliters = convert_to(volume, MILLILITER).magnitude
    return Mass.from_exact(milliliters * density_base, GRAM)
