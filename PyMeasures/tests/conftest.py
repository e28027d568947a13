"""Shared fixtures for measurement tests."""

import pandas as pd
import pytest

from PyMeasures import Density, Length, Mass, Volume
from PyMeasures.config import get_config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    """Keep the process-wide configuration isolated between tests."""
    previous = get_config()
    yield
    set_config(previous)


@pytest.fixture
def kilogram():
    return Mass(1, "kg")


@pytest.fixture
def water_density():
    """Density of water, 1 g/mL."""
    return Density(1, "g/mL")


@pytest.fixture
def oil_density():
    """Density of olive oil, 0.92 g/mL."""
    return Density("0.92", "g/mL")


@pytest.fixture
def mass_series():
    """Series of masses in mixed units with one missing entry."""
    return pd.Series([Mass(1, "kg"), Mass(500, "g"), None, Mass(2, "lb")])


@pytest.fixture
def weights_df():
    """Frame of ingredient weights, including invalid and missing rows."""
    return pd.DataFrame({
        "ingredient": ["flour", "sugar", "salt", "water"],
        "weight": [Mass(1, "kg"), Mass(-5, "g"), None, Mass(30, "t")],
    })


@pytest.fixture
def raw_quantities():
    """Free-text quantity column as it would arrive from a CSV file."""
    return pd.Series(["10 kg", "1/2 lb", None, "500 g", "2.5kg"], name="weight")


@pytest.fixture
def sample_lengths():
    return [Length(1, "mi"), Length(100, "m"), Length(3, "ft")]


@pytest.fixture
def cup():
    return Volume(1, "cup")
