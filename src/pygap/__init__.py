"""
PyGap: individual-tree forest gap model for Python

A JABOWA-style succession model. Trees of thirteen northern hardwood
species are recruited, compete for light, grow and die on independent
plots; the plots form a Monte Carlo ensemble.

Quick Start:
    >>> from pygap import SimulationEngine
    >>> engine = SimulationEngine(n_plots=10, seed=1)
    >>> df = engine.run(years=200, output_interval=10)
    >>> df.groupby('year')['weight'].mean()
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__author__ = "PyGap Development Team"

# =============================================================================
# Core Classes - Primary API
# =============================================================================
from .tree import Tree
from .plot import Plot, PlotRecord, SpeciesTally, YearSummary
from .forest import Forest
from .simulation_engine import SimulationEngine

# =============================================================================
# Species and Parameters
# =============================================================================
from .species import SpeciesCatalog, Pft, ToleranceClass
from .parameters import SimulationParameters, DEFAULT_PARAMETERS

# =============================================================================
# Configuration Loading
# =============================================================================
from .config_loader import (
    ConfigLoader,
    get_config_loader,
    load_species_catalog,
    load_simulation_parameters,
)

# =============================================================================
# Growth, Competition and Mortality Models
# =============================================================================
from .competition import calculate_shading_biomass, assign_shading
from .mortality import MortalityModel, MortalityResult

# =============================================================================
# Random Streams
# =============================================================================
from .rng import RandomStream, create_plot_streams

# =============================================================================
# Output
# =============================================================================
from .output import format_header, format_record, records_to_dataframe, DataExporter

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    GapError,
    ConfigurationError,
    InvalidParameterError,
    SpeciesNotFoundError,
    SimulationError,
    DataError,
    InvalidDataError,
    ConfigFileNotFoundError,
)

# =============================================================================
# Entry Point
# =============================================================================
from .main import main

# =============================================================================
# Public API Definition
# =============================================================================
__all__ = [
    # Package Metadata
    "__version__",
    "__author__",
    # Core Classes
    "Tree",
    "Plot",
    "PlotRecord",
    "SpeciesTally",
    "YearSummary",
    "Forest",
    "SimulationEngine",
    # Species and Parameters
    "SpeciesCatalog",
    "Pft",
    "ToleranceClass",
    "SimulationParameters",
    "DEFAULT_PARAMETERS",
    # Configuration
    "ConfigLoader",
    "get_config_loader",
    "load_species_catalog",
    "load_simulation_parameters",
    # Models
    "calculate_shading_biomass",
    "assign_shading",
    "MortalityModel",
    "MortalityResult",
    # Random Streams
    "RandomStream",
    "create_plot_streams",
    # Output
    "format_header",
    "format_record",
    "records_to_dataframe",
    "DataExporter",
    # Exceptions
    "GapError",
    "ConfigurationError",
    "InvalidParameterError",
    "SpeciesNotFoundError",
    "SimulationError",
    "DataError",
    "InvalidDataError",
    "ConfigFileNotFoundError",
    # Entry Point
    "main",
]
