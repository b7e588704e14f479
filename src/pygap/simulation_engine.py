"""
Simulation engine driving a forest through time.

The engine owns the year counter: each step increments the year and then
advances every plot once. Snapshots of all plots are collected at a fixed
interval and returned as a DataFrame.
"""
from typing import List, Optional, TextIO

import pandas as pd

from .config_loader import load_simulation_parameters, load_species_catalog
from .exceptions import SimulationError
from .forest import Forest
from .logging_config import get_logger, log_run_summary
from .output import format_header, format_record, records_to_dataframe
from .parameters import SimulationParameters
from .plot import PlotRecord
from .species import SpeciesCatalog

__all__ = ['SimulationEngine']


class SimulationEngine:
    """Runs a forest ensemble year by year.

    Attributes:
        catalog: Species catalog
        params: Simulation constants
        forest: The simulated forest
        year: Number of years simulated so far
    """

    def __init__(self, n_plots: int, catalog: Optional[SpeciesCatalog] = None,
                 params: Optional[SimulationParameters] = None,
                 seed: Optional[int] = None, parallel_workers: int = 1):
        """Initialize the engine.

        Args:
            n_plots: Number of plots in the ensemble
            catalog: Species catalog. Defaults to the packaged catalog.
            params: Simulation constants. Defaults to the packaged constants.
            seed: Master seed, overriding params.seed
            parallel_workers: Threads used to advance plots
        """
        self.catalog = catalog if catalog is not None else load_species_catalog()
        self.params = params if params is not None else load_simulation_parameters()
        self.forest = Forest(n_plots, self.catalog, self.params,
                             seed=seed, parallel_workers=parallel_workers)
        self.year = 0
        self.logger = get_logger(__name__)

    def increase_year(self) -> int:
        self.year += 1
        return self.year

    def step(self) -> None:
        """Simulate one year."""
        self.increase_year()
        self.forest.advance(self.year)

    def snapshot(self) -> List[PlotRecord]:
        """Current record of every plot."""
        return self.forest.dump(self.year)

    def header(self) -> str:
        return format_header(self.catalog)

    def run(self, years: int, output_interval: int = 1,
            stream: Optional[TextIO] = None) -> pd.DataFrame:
        """Simulate ``years`` years.

        Args:
            years: Number of years to simulate
            output_interval: Record plots every this many years; the final
                year is always recorded
            stream: Optional text stream receiving the header and one
                fixed-width line per recorded plot

        Returns:
            DataFrame of recorded plot snapshots (see records_to_dataframe)

        Raises:
            SimulationError: If years is negative or output_interval is not positive
        """
        if years < 0:
            raise SimulationError(f"Cannot simulate a negative number of years: {years}")
        if output_interval <= 0:
            raise SimulationError(f"output_interval must be positive, got {output_interval}")

        if stream is not None:
            stream.write(self.header() + "\n")

        records: List[PlotRecord] = []
        for i in range(1, years + 1):
            self.step()
            if i % output_interval == 0 or i == years:
                snapshot = self.snapshot()
                records.extend(snapshot)
                if stream is not None:
                    for record in snapshot:
                        stream.write(format_record(record) + "\n")
            self.logger.debug(f"Year {self.year}: {self.forest.total_trees} trees in forest")

        log_run_summary(self.logger, years, self.forest.nplots,
                        self.forest.total_trees / self.forest.nplots,
                        self.forest.mean_weight())
        return records_to_dataframe(records, self.catalog)
