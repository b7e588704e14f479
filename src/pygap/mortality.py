"""
Mortality model for PyGap.

Two independent mechanisms are applied one after the other each year:

1. Age-dependent background mortality. A species that reaches age_max
   should leave about 2% of a cohort alive, giving a yearly death rate of
   4/age_max and a probability of dying this year of

       p = 1 - (1 - 4/age_max)^age

2. Growth-stress mortality. A tree whose last diameter increment fell below
   a fixed threshold dies with probability 0.368 (about 1/e), whatever its
   age.

Each pass builds a survivors list, so a tree killed by the first pass is
never examined by the second.
"""
from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

from .parameters import SimulationParameters, DEFAULT_PARAMETERS

if TYPE_CHECKING:
    from .tree import Tree

__all__ = ['MortalityResult', 'MortalityModel']


@dataclass
class MortalityResult:
    """Result of mortality application.

    Attributes:
        survivors: List of trees that survived
        mortality_count: Number of trees that died
        trees_died: List of trees that died
    """
    survivors: List['Tree']
    mortality_count: int
    trees_died: List['Tree'] = field(default_factory=list)


class MortalityModel:
    """Age-dependent and growth-stress mortality.

    Attributes:
        params: Simulation constants supplying the thresholds
    """

    def __init__(self, params: SimulationParameters = DEFAULT_PARAMETERS):
        self.params = params

    def age_mortality_probability(self, tree: 'Tree') -> float:
        """Probability that the tree dies of old age this year."""
        yearly_rate = self.params.age_mortality_factor / tree.pft.age_max
        return 1.0 - (1.0 - yearly_rate) ** tree.age

    def is_growth_stressed(self, tree: 'Tree') -> bool:
        return tree.diameter_change < self.params.growth_stress_threshold

    def apply_age_mortality(self, trees: List['Tree'], rng) -> MortalityResult:
        """Kill trees by age. Draws one uniform number per tree, in order."""
        survivors = []
        died = []
        for tree in trees:
            if rng.random() < self.age_mortality_probability(tree):
                died.append(tree)
            else:
                survivors.append(tree)
        return MortalityResult(survivors, len(died), died)

    def apply_growth_stress_mortality(self, trees: List['Tree'], rng) -> MortalityResult:
        """Kill growth-stressed trees. Draws only for stressed trees."""
        survivors = []
        died = []
        for tree in trees:
            if self.is_growth_stressed(tree) and rng.random() < self.params.growth_stress_mortality:
                died.append(tree)
            else:
                survivors.append(tree)
        return MortalityResult(survivors, len(died), died)

    def apply_mortality(self, trees: List['Tree'], rng) -> MortalityResult:
        """Apply both mechanisms in order.

        Args:
            trees: Live trees of a plot
            rng: Random source providing random()

        Returns:
            MortalityResult covering both passes
        """
        by_age = self.apply_age_mortality(trees, rng)
        by_stress = self.apply_growth_stress_mortality(by_age.survivors, rng)
        return MortalityResult(
            survivors=by_stress.survivors,
            mortality_count=by_age.mortality_count + by_stress.mortality_count,
            trees_died=by_age.trees_died + by_stress.trees_died,
        )
