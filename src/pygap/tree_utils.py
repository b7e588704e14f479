"""
Tree allometry functions for PyGap.

Height, weight and basal area as functions of diameter at breast height.
"""
import math

__all__ = [
    'BASAL_AREA_FACTOR',
    'BREAST_HEIGHT',
    'calculate_height',
    'calculate_weight',
    'calculate_basal_area',
]


# Basal area constant: BA = pi/4 * d^2
BASAL_AREA_FACTOR = math.pi / 4.0

# Height (cm) at which diameter is measured
BREAST_HEIGHT = 137.0


def calculate_height(d: float, b2: float, b3: float) -> float:
    """Height from diameter: h = 137 + b2*d - b3*d^2."""
    return BREAST_HEIGHT + b2 * d - b3 * d * d


def calculate_weight(d: float, c: float) -> float:
    """Biomass proxy from diameter: w = c*d^2."""
    return c * d * d


def calculate_basal_area(d: float) -> float:
    """Basal area from diameter: ba = pi/4 * d^2."""
    return BASAL_AREA_FACTOR * d * d

