"""
Plot class managing the tree population of one forest patch.

Each simulated year runs the pipeline

    birth()  -> recruitment of saplings
    kill()   -> age-dependent and growth-stress mortality
    growth() -> light competition and diameter growth

in that fixed order. Stand weight and basal area are refreshed at the end of
growth(), so birth() and kill() see last year's values.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from .competition import assign_shading
from .logging_config import get_logger, log_year_summary
from .mortality import MortalityModel
from .parameters import SimulationParameters, DEFAULT_PARAMETERS
from .species import SpeciesCatalog
from .tree import Tree

__all__ = ['SpeciesTally', 'PlotRecord', 'YearSummary', 'Plot']


@dataclass(frozen=True)
class SpeciesTally:
    """Per-species totals of a plot."""
    count: int = 0
    weight: float = 0.0
    basal_area: float = 0.0


@dataclass
class PlotRecord:
    """Summary of one plot in one year.

    Attributes:
        year: Simulation year
        plot: Plot index within the forest
        trees: Number of live trees
        weight: Total tree weight
        basal_area: Total basal area
        species: One tally per species id, in catalog order
    """
    year: int
    plot: int
    trees: int
    weight: float
    basal_area: float
    species: List[SpeciesTally] = field(default_factory=list)

    def to_dict(self, species_names: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """Flatten the record to a dictionary.

        Args:
            species_names: Column prefixes for the species tallies. Defaults
                to ``sp<id>``.
        """
        if species_names is None:
            species_names = [f"sp{i}" for i in range(len(self.species))]
        row = {
            'year': self.year,
            'plot': self.plot,
            'trees': self.trees,
            'weight': self.weight,
            'basal_area': self.basal_area,
        }
        for name, tally in zip(species_names, self.species):
            row[f"{name}_trees"] = tally.count
            row[f"{name}_weight"] = tally.weight
            row[f"{name}_basal_area"] = tally.basal_area
        return row


class YearSummary(NamedTuple):
    recruited: int
    died: int
    trees: int


class Plot:
    """One independent patch of forest.

    Attributes:
        catalog: Species catalog (shared, read-only)
        params: Simulation constants (shared, read-only)
        rng: Random source owned by this plot
        trees: Live trees
        weight: Total tree weight after the last growth()
        basal_area: Total basal area after the last growth()
    """

    def __init__(self, catalog: SpeciesCatalog, rng,
                 params: SimulationParameters = DEFAULT_PARAMETERS,
                 index: int = 0):
        """Initialize an empty plot.

        Args:
            catalog: Species catalog
            rng: Random source providing random() and randrange(n)
            params: Simulation constants
            index: Position of the plot in its forest (used for logging)
        """
        self.catalog = catalog
        self.params = params
        self.rng = rng
        self.index = index
        self.trees: List[Tree] = []
        self.weight = 0.0
        self.basal_area = 0.0
        self.mortality_model = MortalityModel(params)
        self.logger = get_logger(__name__)

    def __len__(self) -> int:
        return len(self.trees)

    def advance(self, year: Optional[int] = None) -> YearSummary:
        """Advance the plot by one year.

        Args:
            year: Current simulation year, used only for log messages

        Returns:
            YearSummary with the number of recruits, deaths and live trees
        """
        recruited = self.birth()
        died = self.kill()
        self.growth()
        summary = YearSummary(recruited, died, len(self.trees))
        if year is not None:
            log_year_summary(self.logger, year, self.index, *summary)
        return summary

    def _recruit(self, group: Sequence[int], count: int) -> int:
        """Add ``count`` saplings, each of a species drawn from ``group``."""
        if not group:
            return 0
        for _ in range(count):
            pft = self.catalog[group[self.rng.randrange(len(group))]]
            self.trees.append(Tree.create(pft, self.rng, self.params))
        return count

    def birth(self) -> int:
        """Recruit new saplings.

        One shade-tolerant species, drawn uniformly, adds 0-2 saplings. Shade
        intolerant recruitment depends on the plot weight:

        - below cherry_cutoff, 60-75 early-successional saplings
        - below birch_cutoff, 0-13 mid-successional saplings
        - otherwise none (canopy closed)

        Returns:
            Number of saplings added
        """
        recruited = 0
        rng = self.rng

        shade_tolerant = self.catalog.shade_tolerant_ids
        if shade_tolerant:
            pft = self.catalog[shade_tolerant[rng.randrange(len(shade_tolerant))]]
            count = rng.randrange(3)
            for _ in range(count):
                self.trees.append(Tree.create(pft, rng, self.params))
            recruited += count

        if self.weight < self.params.cherry_cutoff:
            recruited += self._recruit(self.catalog.cherry_ids, 60 + rng.randrange(16))
        elif self.weight < self.params.birch_cutoff:
            recruited += self._recruit(self.catalog.birch_ids, rng.randrange(14))

        return recruited

    def kill(self) -> int:
        """Apply age-dependent then growth-stress mortality.

        Returns:
            Number of trees that died
        """
        result = self.mortality_model.apply_mortality(self.trees, self.rng)
        self.trees = result.survivors
        return result.mortality_count

    def growth(self) -> None:
        """Grow every tree under light competition and refresh plot totals.

        Shading is computed for the whole population from pre-growth heights
        before any tree grows.
        """
        assign_shading(self.trees)

        weight = 0.0
        basal_area = 0.0
        for tree in self.trees:
            tree.growth()
            weight += tree.weight
            basal_area += tree.basal_area
        self.weight = weight
        self.basal_area = basal_area

    def species_tallies(self) -> List[SpeciesTally]:
        """Count, weight and basal area per species id, in catalog order."""
        counts = [0] * len(self.catalog)
        weights = [0.0] * len(self.catalog)
        basal_areas = [0.0] * len(self.catalog)
        for tree in self.trees:
            i = tree.species_id
            counts[i] += 1
            weights[i] += tree.weight
            basal_areas[i] += tree.basal_area
        return [SpeciesTally(c, w, b) for c, w, b in zip(counts, weights, basal_areas)]

    def summary(self, year: int) -> PlotRecord:
        """Build the summary record of this plot for ``year``."""
        return PlotRecord(
            year=year,
            plot=self.index,
            trees=len(self.trees),
            weight=self.weight,
            basal_area=self.basal_area,
            species=self.species_tallies(),
        )

    def __repr__(self) -> str:
        return (f"Plot(index={self.index}, trees={len(self.trees)}, "
                f"weight={self.weight:.3f}, basal_area={self.basal_area:.3f})")
