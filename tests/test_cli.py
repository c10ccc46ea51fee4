"""
Tests for the scalar-kalman command line.
"""

import logging

import pytest
import numpy as np
import pandas as pd

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from scalar_kalman.cli import main
from scalar_kalman.utils.io import save_config


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces the root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    save_config(
        {
            "filter": {"A": 0.95, "H": 1.0, "Q": 0.01, "R": 0.5, "x0": 0.0, "P0": 1.0},
            "data": {"column": "z"},
            "logging": {"level": "DEBUG", "file": str(tmp_path / "logs" / "run.log")},
        },
        path,
    )
    return path


class TestSimulateCommand:

    def test_simulate_writes_csv(self, tmp_path, config_path):
        out = tmp_path / "data" / "sim.csv"

        code = main(["simulate", "--config", str(config_path), "--output", str(out), "--n", "50", "--seed", "3"])

        assert code == 0
        df = pd.read_csv(out)
        assert list(df.columns) == ["t", "x_true", "z"]
        assert len(df) == 50
        assert (tmp_path / "logs" / "run.log").exists()


class TestFilterCommand:

    def test_filter_writes_estimates(self, tmp_path, config_path):
        sim = tmp_path / "sim.csv"
        out = tmp_path / "filtered.csv"
        main(["simulate", "-c", str(config_path), "-o", str(sim), "--n", "100"])

        code = main(["filter", "-c", str(config_path), "-i", str(sim), "-o", str(out)])

        assert code == 0
        df = pd.read_csv(out)
        assert list(df.columns) == ["t", "z", "x_filt"]
        assert len(df) == 100

        from scalar_kalman import ScalarKalman, FilterParams, kfilter
        params = FilterParams(A=0.95, H=1.0, Q=0.01, R=0.5, x0=0.0, P0=1.0)
        np.testing.assert_allclose(df["x_filt"].values, kfilter(ScalarKalman.from_params(params), df["z"].values))

    def test_filter_trace(self, tmp_path, config_path):
        sim = tmp_path / "sim.csv"
        out = tmp_path / "trace.csv"
        main(["simulate", "-c", str(config_path), "-o", str(sim), "--n", "20"])

        code = main(["filter", "-c", str(config_path), "-i", str(sim), "-o", str(out), "--trace"])

        assert code == 0
        df = pd.read_csv(out)
        assert list(df.columns) == ["t", "z", "x_pred", "P_pred", "innovation", "S", "K", "x_filt", "P_filt"]

    def test_filter_to_stdout(self, tmp_path, config_path, capsys):
        obs = tmp_path / "obs.csv"
        pd.DataFrame({"value": [1.0, 1.0, 1.0]}).to_csv(obs, index=False)

        code = main(["filter", "-c", str(config_path), "-i", str(obs), "--column", "value"])

        assert code == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "t,z,x_filt"
        assert len(lines) == 4

    def test_filter_singular_innovation(self, tmp_path):
        config = tmp_path / "bad.yaml"
        save_config({"filter": {"A": 1.0, "H": 0.0, "Q": 0.0, "R": 0.0}}, config)
        obs = tmp_path / "obs.csv"
        pd.DataFrame({"z": [1.0, 2.0]}).to_csv(obs, index=False)
        out = tmp_path / "out.csv"

        code = main(["filter", "-c", str(config), "-i", str(obs), "-o", str(out)])

        assert code == 1
        assert not out.exists()

    def test_empty_sections_and_default_column(self, tmp_path):
        """Empty data/logging sections fall back to defaults; simulate output filters on z."""
        config = tmp_path / "sparse.yaml"
        config.write_text(
            "filter:\n  A: 1.0\n  H: 1.0\n  Q: 0.001\n  R: 1.0\n  P0: 1.0\n"
            "data:\n"
            "logging:\n"
        )
        sim = tmp_path / "sim.csv"
        out = tmp_path / "filtered.csv"

        assert main(["simulate", "-c", str(config), "-o", str(sim), "--n", "30"]) == 0
        assert main(["filter", "-c", str(config), "-i", str(sim), "-o", str(out)]) == 0

        df = pd.read_csv(out)
        np.testing.assert_allclose(df["z"].values, pd.read_csv(sim)["z"].values)

    def test_missing_column(self, tmp_path, config_path):
        obs = tmp_path / "obs.csv"
        pd.DataFrame({"other": [1.0]}).to_csv(obs, index=False)

        with pytest.raises(KeyError):
            main(["filter", "-c", str(config_path), "-i", str(obs)])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
