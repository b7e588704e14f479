"""
Tests for the SimulationEngine driver.
"""
import io

import pytest

from pygap.exceptions import SimulationError
from pygap.output import format_header
from pygap.simulation_engine import SimulationEngine


@pytest.fixture
def engine(catalog, params):
    return SimulationEngine(2, catalog, params, seed=31)


class TestEngineRun:

    def test_one_row_per_plot_and_year(self, engine):
        df = engine.run(5)
        assert len(df) == 10
        assert sorted(df['year'].unique()) == [1, 2, 3, 4, 5]
        assert list(df[df['year'] == 3]['plot']) == [0, 1]
        assert engine.year == 5

    def test_output_interval_keeps_final_year(self, engine):
        df = engine.run(5, output_interval=2)
        assert sorted(df['year'].unique()) == [2, 4, 5]

    def test_interval_dividing_years(self, engine):
        df = engine.run(6, output_interval=3)
        assert sorted(df['year'].unique()) == [3, 6]

    def test_zero_years(self, engine):
        df = engine.run(0)
        assert df.empty
        assert engine.year == 0

    def test_stream_output(self, engine, catalog):
        out = io.StringIO()
        df = engine.run(3, stream=out)
        lines = out.getvalue().splitlines()
        assert lines[:2] == format_header(catalog).split("\n")
        assert len(lines) == 2 + len(df)
        assert all(len(line) == 468 for line in lines[2:])
        assert lines[-1].split()[0] == "3"

    def test_runs_continue_the_year_counter(self, engine):
        engine.run(2)
        df = engine.run(2)
        assert sorted(df['year'].unique()) == [3, 4]

    def test_reproducible(self, catalog, params):
        first = SimulationEngine(3, catalog, params, seed=4).run(15)
        second = SimulationEngine(3, catalog, params, seed=4).run(15)
        assert first.equals(second)

    def test_logs_run_summary(self, engine, caplog):
        with caplog.at_level('INFO', logger='pygap'):
            engine.run(2)
        assert "Simulated 2 years on 2 plots" in caplog.text

    @pytest.mark.parametrize("years,interval", [(-1, 1), (5, 0), (5, -2)])
    def test_invalid_arguments(self, engine, years, interval):
        with pytest.raises(SimulationError):
            engine.run(years, output_interval=interval)


class TestEngineDefaults:

    def test_packaged_configuration(self):
        engine = SimulationEngine(1)
        assert len(engine.catalog) == 13
        assert engine.forest.seed == 74837891

    def test_seed_overrides_parameters(self, catalog, params):
        assert SimulationEngine(1, catalog, params, seed=9).forest.seed == 9

    def test_step_and_snapshot(self, engine):
        engine.step()
        records = engine.snapshot()
        assert [r.year for r in records] == [1, 1]
        assert sum(r.trees for r in records) == engine.forest.total_trees


@pytest.mark.slow
def test_long_run_keeps_a_forest(catalog, params):
    df = SimulationEngine(4, catalog, params, seed=2).run(300, output_interval=50)
    final = df[df['year'] == 300]
    assert (final['trees'] > 0).all()
    assert (final['weight'] > 0).all()
