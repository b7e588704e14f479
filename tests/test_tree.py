"""
Unit tests for individual tree growth.
"""
import math

import pytest

from pygap.parameters import SimulationParameters
from pygap.tree import Tree
from tests.utils import ScriptedRandom

# Shading weights spanning open gap to deep shade
SLA_VALUES = [-100.0, 0.0, 10.0, 1000.0, 6000.0, 15000.0, 18000.0, 50000.0, 1e6, 1e9]


@pytest.fixture
def sugar_maple(three_species_catalog):
    return three_species_catalog[0]


@pytest.fixture
def pin_cherry(three_species_catalog):
    return three_species_catalog[1]


def assert_allometry(tree):
    """Height, weight and basal area must follow from the diameter."""
    d = tree.diameter
    pft = tree.pft
    assert tree.height == pytest.approx(137.0 + pft.b2 * d - pft.b3 * d * d, rel=1e-12)
    assert tree.weight == pytest.approx(pft.c * d * d, rel=1e-12)
    assert tree.basal_area == pytest.approx(math.pi / 4.0 * d * d, rel=1e-12)


class TestTreeCreation:

    def test_sapling_defaults(self, sugar_maple, rng, params):
        tree = Tree.create(sugar_maple, rng, params)
        assert tree.age == 0
        assert tree.sla == 0.0
        assert tree.pft is sugar_maple
        assert tree.species_id == 0
        assert tree.diameter_change > params.growth_stress_threshold
        assert_allometry(tree)

    @pytest.mark.parametrize("draw,expected", [
        pytest.param(0.0, 0.5, id="lowest_draw"),
        pytest.param(0.5, 0.525, id="middle_draw"),
        pytest.param(0.999, 0.54995, id="highest_draw"),
    ])
    def test_sapling_diameter(self, sugar_maple, draw, expected):
        tree = Tree.create(sugar_maple, ScriptedRandom(floats=[draw]))
        assert tree.diameter == pytest.approx(expected)

    def test_sapling_diameter_range(self, sugar_maple, rng, params):
        for _ in range(200):
            tree = Tree.create(sugar_maple, rng, params)
            assert params.min_diameter <= tree.diameter < 1.1 * params.min_diameter

    def test_one_draw_per_sapling(self, sugar_maple):
        source = ScriptedRandom()
        Tree.create(sugar_maple, source)
        assert source.float_draws == 1
        assert source.int_draws == 0

    def test_custom_min_diameter(self, sugar_maple):
        params = SimulationParameters(min_diameter=2.0)
        tree = Tree.create(sugar_maple, ScriptedRandom(floats=[0.0]), params)
        assert tree.diameter == pytest.approx(2.0)

    @pytest.mark.parametrize("diameter,age", [(0.0, 0), (-1.0, 0), (1.0, -1)])
    def test_invalid_state_rejected(self, sugar_maple, diameter, age):
        with pytest.raises(ValueError):
            Tree(sugar_maple, diameter, age=age)


class TestTreeGrowth:

    def test_open_grown_increment(self, sugar_maple):
        tree = Tree(sugar_maple, 10.0, age=20)
        h = 137.0 + 50.9 * 10.0 - 0.167 * 100.0
        potential = (170.0 * 10.0 * (1.0 - 10.0 * h / (152.5 * 4011.0))
                     / (274.0 + 3.0 * 50.9 * 10.0 - 4.0 * 0.167 * 100.0))
        light = 1.0 - math.exp(-4.64 * (1.0 - 0.05))

        tree.growth()

        assert tree.diameter_change == pytest.approx(potential * light)
        assert tree.diameter == pytest.approx(10.0 + potential * light)
        assert tree.age == 21

    @pytest.mark.parametrize("diameter", [0.5, 2.0, 10.0, 40.0, 120.0])
    def test_allometry_after_growth(self, sugar_maple, diameter):
        tree = Tree(sugar_maple, diameter, age=5)
        tree.sla = 3000.0
        tree.growth()
        assert_allometry(tree)

    def test_repeated_growth_keeps_allometry(self, pin_cherry):
        tree = Tree(pin_cherry, 0.5)
        for year in range(1, 31):
            tree.growth()
            assert tree.age == year
            assert_allometry(tree)
        assert tree.diameter > 0.5

    def test_deep_shade_stops_growth(self, sugar_maple, params):
        tree = Tree(sugar_maple, 5.0, age=10)
        tree.sla = 20000.0
        tree.growth()
        assert tree.diameter_change == 0.0
        assert tree.diameter == 5.0
        assert tree.age == 11
        assert tree.diameter_change < params.growth_stress_threshold

    def test_shade_reduces_growth(self, sugar_maple):
        open_tree = Tree(sugar_maple, 5.0)
        shaded_tree = Tree(sugar_maple, 5.0)
        shaded_tree.sla = 5000.0
        open_tree.growth()
        shaded_tree.growth()
        assert 0.0 < shaded_tree.diameter_change < open_tree.diameter_change

    def test_environment_factor_is_neutral(self, sugar_maple):
        assert Tree(sugar_maple, 3.0).environment_factor() == 1.0


class TestLightResponse:

    @pytest.mark.parametrize("species_index", [0, 1, 2])
    @pytest.mark.parametrize("sla", SLA_VALUES)
    def test_never_negative(self, three_species_catalog, species_index, sla):
        tree = Tree(three_species_catalog[species_index], 1.0)
        tree.sla = sla
        assert tree.r_light() >= 0.0

    def test_shade_tolerant_full_light(self, sugar_maple):
        tree = Tree(sugar_maple, 1.0)
        assert tree.available_light() == 1.0
        assert tree.r_light() == pytest.approx(1.0 - math.exp(-4.64 * 0.95))

    def test_intolerant_full_light(self, pin_cherry):
        tree = Tree(pin_cherry, 1.0)
        assert tree.r_light() == pytest.approx(2.24 * (1.0 - math.exp(-1.136 * 0.92)))

    def test_beer_lambert_extinction(self, sugar_maple, params):
        tree = Tree(sugar_maple, 1.0)
        tree.sla = 6000.0
        assert tree.available_light() == pytest.approx(math.exp(-6000.0 * params.light_extinction))
        assert tree.available_light() == pytest.approx(math.exp(-1.0))

    @pytest.mark.parametrize("species_index,cutoff_light", [
        pytest.param(0, 0.05, id="shade_tolerant"),
        pytest.param(1, 0.08, id="intolerant"),
    ])
    def test_zero_below_compensation_point(self, three_species_catalog, species_index, cutoff_light):
        tree = Tree(three_species_catalog[species_index], 1.0)
        tree.sla = -math.log(cutoff_light * 0.9) * 6000.0
        assert tree.r_light() == 0.0

    def test_monotone_in_shade(self, pin_cherry):
        tree = Tree(pin_cherry, 1.0)
        responses = []
        for sla in [0.0, 1000.0, 2000.0, 5000.0, 10000.0]:
            tree.sla = sla
            responses.append(tree.r_light())
        assert responses == sorted(responses, reverse=True)

    def test_intolerant_beats_tolerant_in_gap(self, sugar_maple, pin_cherry):
        assert Tree(pin_cherry, 1.0).r_light() > Tree(sugar_maple, 1.0).r_light()
