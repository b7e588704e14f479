"""
Shared pytest fixtures for PyGap tests.

This module provides the default catalog, small hand-built catalogs and
random sources, reducing code duplication across test files.
"""
import pytest

from pygap.config_loader import load_species_catalog
from pygap.parameters import SimulationParameters
from pygap.rng import RandomStream
from pygap.species import SpeciesCatalog
from tests.utils import PIN_CHERRY, SUGAR_MAPLE, WHITE_BIRCH


# =============================================================================
# Catalog and Parameter Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def catalog():
    """The packaged 13-species catalog."""
    return load_species_catalog()


@pytest.fixture
def params():
    """Default simulation constants."""
    return SimulationParameters()


@pytest.fixture
def three_species_catalog():
    """One species of each tolerance class.

    Ids: 0 = Sugar maple, 1 = Pin cherry, 2 = White birch.
    """
    return SpeciesCatalog.build([SUGAR_MAPLE, PIN_CHERRY, WHITE_BIRCH])


@pytest.fixture
def shade_only_catalog():
    """A reduced catalog holding only Sugar maple."""
    return SpeciesCatalog.build([SUGAR_MAPLE], require_all_groups=False)


# =============================================================================
# Random Source Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """A seeded random stream."""
    return RandomStream(seed=20240611)
