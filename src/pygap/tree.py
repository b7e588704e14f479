"""
Tree class representing an individual tree.
Implements the JABOWA diameter growth model and its light response.
"""
import math
from typing import Optional

from .parameters import SimulationParameters, DEFAULT_PARAMETERS
from .species import Pft, ToleranceClass
from .tree_utils import calculate_height, calculate_weight, calculate_basal_area

__all__ = ['Tree']


class Tree:
    """A single tree of a plot.

    Height, weight and basal area are cached functions of the diameter and
    are refreshed only when the diameter changes, so reading them never
    recomputes anything.

    Attributes:
        pft: Species parameters (shared, read-only)
        age: Age in years
        diameter: Diameter at breast height (cm)
        diameter_change: Last yearly diameter increment (cm)
        height: Height (cm)
        weight: Biomass proxy
        basal_area: Basal area (cm^2)
        sla: Weight of all taller trees on the plot, set by the plot before growth
    """

    __slots__ = ('pft', 'params', 'age', 'diameter', 'diameter_change',
                 'height', 'weight', 'basal_area', 'sla')

    def __init__(self, pft: Pft, diameter: float, age: int = 0,
                 diameter_change: Optional[float] = None,
                 params: SimulationParameters = DEFAULT_PARAMETERS):
        """Initialize a tree with a known diameter.

        Args:
            pft: Species of the tree
            diameter: Diameter at breast height (cm)
            age: Tree age in years
            diameter_change: Last diameter increment. Defaults to
                params.initial_diameter_change.
            params: Simulation constants
        """
        if diameter <= 0:
            raise ValueError(f"Tree diameter must be positive, got {diameter}")
        if age < 0:
            raise ValueError(f"Tree age must be non-negative, got {age}")

        self.pft = pft
        self.params = params
        self.age = age
        self.diameter = diameter
        if diameter_change is None:
            diameter_change = params.initial_diameter_change
        self.diameter_change = diameter_change
        self.sla = 0.0
        self._update_allometry()

    @classmethod
    def create(cls, pft: Pft, rng, params: SimulationParameters = DEFAULT_PARAMETERS) -> 'Tree':
        """Create a sapling near the establishment diameter.

        The diameter is min_diameter plus up to 10% of it, drawn uniformly.

        Args:
            pft: Species of the sapling
            rng: Random source providing random()
            params: Simulation constants

        Returns:
            Tree of age 0
        """
        diameter = params.min_diameter + rng.random() * 0.1 * params.min_diameter
        return cls(pft, diameter, age=0, params=params)

    @property
    def species_id(self) -> int:
        return self.pft.id

    def _update_allometry(self) -> None:
        d = self.diameter
        self.height = calculate_height(d, self.pft.b2, self.pft.b3)
        self.weight = calculate_weight(d, self.pft.c)
        self.basal_area = calculate_basal_area(d)

    def growth(self) -> None:
        """Grow the tree by one year.

        Optimal increment (Botkin et al. 1972, eq. 5):

            dD = g*D*(1 - D*H/(Dmax*Hmax)) / (274 + 3*b2*D - 4*b3*D^2)

        reduced by the environment and light factors. Age increases by one.
        """
        pft = self.pft
        d = self.diameter
        h = self.height

        d_change = (pft.g * d * (1.0 - d * h / (pft.d_max * pft.h_max))
                    / (274.0 + 3.0 * pft.b2 * d - 4.0 * pft.b3 * d * d))
        d_change = d_change * self.environment_factor() * self.r_light()

        self.diameter_change = d_change
        self.diameter = d + d_change
        self._update_allometry()
        self.age += 1

    def environment_factor(self) -> float:
        """Site factor on growth.

        Always 1.0: degree-day and soil moisture limits are not modelled.
        """
        return 1.0

    def available_light(self) -> float:
        """Fraction of full light reaching the crown (Beer-Lambert extinction)."""
        return math.exp(-self.params.light_extinction * self.sla)

    def r_light(self) -> float:
        """Growth multiplier for the light reaching this tree.

        Shade-tolerant species saturate early; the others need more light but
        can exceed 1.0 in full sun. Never negative.
        """
        al = self.available_light()
        if self.pft.tolerance is ToleranceClass.SHADE_TOLERANT:
            return max(1.0 - math.exp(-4.64 * (al - 0.05)), 0.0)
        return max(2.24 * (1.0 - math.exp(-1.136 * (al - 0.08))), 0.0)

    def __repr__(self) -> str:
        return (f"Tree(species='{self.pft.name}', age={self.age}, "
                f"diameter={self.diameter:.3f}, height={self.height:.1f})")
