"""
Test helpers shared across PyGap test modules.
"""

# =============================================================================
# Species Records - Rows of the default catalog
# =============================================================================

SUGAR_MAPLE = {
    'name': 'Sugar maple', 'g': 170., 'c': 1.57, 'age_max': 200,
    'tolerance': 'shade_tolerant', 'd_max': 152.5, 'h_max': 4011.,
    'b2': 50.9, 'b3': 0.167, 'degd_min': 2000., 'degd_max': 6300.,
    'wmin': 300., 'wmax': -1.,
}

PIN_CHERRY = {
    'name': 'Pin cherry', 'g': 200., 'c': 2.45, 'age_max': 30,
    'tolerance': 'cherry', 'd_max': 28.5, 'h_max': 1126.,
    'b2': 70.6, 'b3': 1.26, 'degd_min': 1100., 'degd_max': 8000.,
    'wmin': 190., 'wmax': -1.,
}

WHITE_BIRCH = {
    'name': 'White birch', 'g': 140., 'c': 0.486, 'age_max': 80,
    'tolerance': 'birch', 'd_max': 46.0, 'h_max': 1830.,
    'b2': 73.6, 'b3': 0.800, 'degd_min': 1100., 'degd_max': 3700.,
    'wmin': 190., 'wmax': 600.,
}


class ScriptedRandom:
    """Random source returning predefined draws.

    Float draws come from ``floats`` and integer draws from ``ints``; once a
    list is exhausted the default value is returned. The number of draws of
    each kind is recorded.
    """

    def __init__(self, floats=(), ints=(), default_float=0.5, default_int=0):
        self.floats = list(floats)
        self.ints = list(ints)
        self.default_float = default_float
        self.default_int = default_int
        self.float_draws = 0
        self.int_draws = 0

    def random(self):
        self.float_draws += 1
        return self.floats.pop(0) if self.floats else self.default_float

    def randrange(self, stop):
        self.int_draws += 1
        value = self.ints.pop(0) if self.ints else self.default_int
        assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        return value


# =============================================================================
# Default Catalog - Botkin, Janak & Wallis (1972), in id order
# =============================================================================

DEFAULT_CATALOG_COLUMNS = (
    'name', 'g', 'c', 'age_max', 'tolerance', 'd_max', 'h_max',
    'b2', 'b3', 'degd_min', 'degd_max', 'wmin', 'wmax',
)

DEFAULT_CATALOG_ROWS = [
    ("Sugar maple",   170., 1.57,  200, 'shade_tolerant', 152.5, 4011., 50.9, 0.167, 2000.,  6300., 300., -1.),
    ("Beech",         150., 2.20,  300, 'shade_tolerant', 122.0, 3660., 57.8, 0.237, 2100.,  6000., 300., -1.),
    ("Yellow birch",  100., 0.486, 300, 'birch',          122.0, 3050., 47.8, 0.196, 2000.,  5300., 250., -1.),
    ("White ash",     130., 1.75,  100, 'shade_tolerant',  50.0, 2160., 80.2, 0.802, 2100., 10700., 320., -1.),
    ("Mt. maple",     100., 1.13,   25, 'shade_tolerant',  13.5,  500., 53.8, 2.0,   2000.,  6300., 320., -1.),
    ("Striped maple", 150., 1.75,   30, 'shade_tolerant',  22.5, 1000., 76.6, 1.70,  2000.,  6300., 320., -1.),
    ("Pin cherry",    200., 2.45,   30, 'cherry',          28.5, 1126., 70.6, 1.26,  1100.,  8000., 190., -1.),
    ("Choke cherry",  150., 2.45,   20, 'cherry',          10.0,  500., 72.6, 3.63,   600., 10000., 155., -1.),
    ("Balsam Fir",    200., 2.5,    80, 'shade_tolerant',  50.0, 1830., 67.9, 0.679, 1100.,  3700., 190., -1.),
    ("Spruce",         50., 2.5,   350, 'shade_tolerant',  50.0, 1830., 67.9, 0.679,  600.,  3700., 190., -1.),
    ("White birch",   140., 0.486,  80, 'birch',           46.0, 1830., 73.6, 0.800, 1100.,  3700., 190., 600.),
    ("Mt. ash",       150., 1.75,   30, 'shade_tolerant',  10.0,  500., 72.6, 3.63,  2000.,  4000., 300., -1.),
    ("Red maple",     240., 1.75,  150, 'shade_tolerant', 152.5, 3660., 46.3, 0.152, 2000., 12400., 300., -1.),
]
