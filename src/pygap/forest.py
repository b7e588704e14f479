"""
Forest class: a Monte Carlo ensemble of independent plots.

Plots never interact, so they can be advanced in any order or in parallel.
Each plot draws from its own random stream spawned from the master seed,
which keeps results identical whether plots run serially or on a thread pool.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional, Tuple

from .exceptions import SimulationError
from .logging_config import get_logger
from .parameters import SimulationParameters, DEFAULT_PARAMETERS
from .plot import Plot, PlotRecord, YearSummary
from .rng import create_plot_streams
from .species import SpeciesCatalog

__all__ = ['Forest']


class Forest:
    """Fixed-size collection of independent plots.

    Attributes:
        catalog: Species catalog shared by all plots
        params: Simulation constants shared by all plots
        seed: Master seed the plot streams were spawned from
        parallel_workers: Number of threads used by advance()
    """

    def __init__(self, n_plots: int, catalog: SpeciesCatalog,
                 params: SimulationParameters = DEFAULT_PARAMETERS,
                 seed: Optional[int] = None, parallel_workers: int = 1):
        """Create ``n_plots`` empty plots.

        Args:
            n_plots: Number of plots (fixed for the run)
            catalog: Species catalog
            params: Simulation constants
            seed: Master seed. Defaults to params.seed.
            parallel_workers: Threads used to advance plots; 1 runs serially

        Raises:
            SimulationError: If n_plots or parallel_workers is not positive
        """
        if n_plots <= 0:
            raise SimulationError(f"A forest needs at least one plot, got {n_plots}")
        if parallel_workers <= 0:
            raise SimulationError(f"parallel_workers must be positive, got {parallel_workers}")

        self.catalog = catalog
        self.params = params
        self.seed = params.seed if seed is None else seed
        self.parallel_workers = parallel_workers
        self.logger = get_logger(__name__)

        streams = create_plot_streams(self.seed, n_plots)
        self._plots: Tuple[Plot, ...] = tuple(
            Plot(catalog, stream, params, index=i) for i, stream in enumerate(streams)
        )
        self.logger.debug(f"Created forest of {n_plots} plots (seed {self.seed})")

    @property
    def nplots(self) -> int:
        return len(self._plots)

    @property
    def plots(self) -> Tuple[Plot, ...]:
        return self._plots

    def __len__(self) -> int:
        return len(self._plots)

    def __iter__(self) -> Iterator[Plot]:
        return iter(self._plots)

    def advance(self, year: Optional[int] = None) -> List[YearSummary]:
        """Advance every plot by one year.

        Args:
            year: Current simulation year, forwarded for logging

        Returns:
            One YearSummary per plot, in plot order
        """
        if self.parallel_workers == 1 or len(self._plots) == 1:
            return [plot.advance(year) for plot in self._plots]

        with ThreadPoolExecutor(max_workers=self.parallel_workers) as executor:
            return list(executor.map(lambda plot: plot.advance(year), self._plots))

    def dump(self, year: int) -> List[PlotRecord]:
        """Summary record of every plot, in plot order."""
        return [plot.summary(year) for plot in self._plots]

    @property
    def total_trees(self) -> int:
        return sum(len(plot) for plot in self._plots)

    def mean_weight(self) -> float:
        return sum(plot.weight for plot in self._plots) / len(self._plots)

    def __repr__(self) -> str:
        return f"Forest(nplots={self.nplots}, trees={self.total_trees}, seed={self.seed})"
