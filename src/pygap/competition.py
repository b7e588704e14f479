"""
Light competition between the trees of a plot.

Each tree is shaded by the combined weight of every tree strictly taller than
it. The all-pairs comparison is the dominant yearly cost of a plot and is
vectorised with numpy.
"""
from typing import List, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .tree import Tree

__all__ = [
    'calculate_shading_biomass',
    'assign_shading',
]


def calculate_shading_biomass(heights: Sequence[float], weights: Sequence[float]) -> np.ndarray:
    """Sum the weight of all strictly taller trees for every tree.

    Args:
        heights: Tree heights
        weights: Tree weights, same order as heights

    Returns:
        Array where element i is the total weight of trees taller than tree i.
        A tree never shades itself, and trees of equal height do not shade
        each other.
    """
    heights = np.asarray(heights, dtype=float)
    weights = np.asarray(weights, dtype=float)
    if heights.shape != weights.shape:
        raise ValueError(f"heights and weights differ in shape: {heights.shape} vs {weights.shape}")
    if heights.size == 0:
        return np.zeros(0)

    # taller[i, j] is True when tree j is taller than tree i
    taller = heights[np.newaxis, :] > heights[:, np.newaxis]
    return np.where(taller, weights[np.newaxis, :], 0.0).sum(axis=1)


def assign_shading(trees: List['Tree']) -> None:
    """Set tree.sla for every tree from the current heights.

    All values are computed before any is written, so the result reflects a
    single snapshot of the population.
    """
    sla = calculate_shading_biomass([t.height for t in trees], [t.weight for t in trees])
    for tree, value in zip(trees, sla):
        tree.sla = float(value)
