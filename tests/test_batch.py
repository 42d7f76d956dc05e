"""
Tests for the batch sweep helpers and result summaries.
"""

import pandas as pd
import pytest

from batch_run import flatten_dict, iter_param_combinations, run_one, run_single_experiment
from plot_utils import load_results, summarize_by_group


class TestParamGrid:

    def test_iter_param_combinations(self):
        combos = list(iter_param_combinations({"a": [1, 2], "b": ["x", "y", "z"]}))
        assert len(combos) == 6
        assert combos[0] == {"a": 1, "b": "x"}

    def test_flatten_dict(self):
        assert flatten_dict({"a": {"b": 1, "c": {"d": 2}}, "e": 3}) == {
            "a.b": 1,
            "a.c.d": 2,
            "e": 3,
        }


class TestExperiments:

    @pytest.mark.parametrize("seed", range(5))
    def test_bfs_and_astar_agree(self, seed):
        common = dict(purpose="t", rows=12, cols=12, obstacle_density=0.25, seed=seed)
        bfs = run_single_experiment(algorithm="BFS", **common)
        astar = run_single_experiment(algorithm="AStar", **common)
        dfs = run_single_experiment(algorithm="DFS", **common)

        assert bfs["pathfinding.path_found"] == astar["pathfinding.path_found"]
        assert bfs["pathfinding.path_found"] == dfs["pathfinding.path_found"]
        assert bfs["pathfinding.path_length"] == astar["pathfinding.path_length"]
        if dfs["pathfinding.path_found"]:
            assert dfs["pathfinding.path_length"] >= bfs["pathfinding.path_length"]
        assert bfs["grid.blocked"] == astar["grid.blocked"] == 36

    def test_open_grid_metrics(self):
        row = run_single_experiment(
            purpose="t", rows=5, cols=5, obstacle_density=0.0, algorithm="AStar", seed=0
        )
        assert row["pathfinding.algorithm"] == "AStar"
        assert row["pathfinding.path_found"] is True
        assert row["pathfinding.path_length"] == 8
        assert row["pathfinding.expansions"] >= 8

    def test_run_one_merges_params(self):
        params = dict(purpose="t", rows=4, cols=4, obstacle_density=0.0, algorithm="BFS", seed=1)
        row = run_one(params)
        assert row["purpose"] == "t"
        assert row["pathfinding.path_length"] == 6

    def test_run_one_reports_failure(self, capsys):
        params = dict(purpose="t", rows=4, cols=4, obstacle_density=0.0, algorithm="nope", seed=1)
        assert run_one(params) is None
        assert "[ERROR]" in capsys.readouterr().out


class TestSummaries:

    @pytest.fixture
    def results_csv(self, tmp_path):
        df = pd.DataFrame(
            {
                "pathfinding.algorithm": ["BFS", "BFS", "DFS", "DFS", "AStar"],
                "pathfinding.path_found": [True, True, True, False, True],
                "pathfinding.path_length": [4, 6, 10, None, 4],
            }
        )
        path = tmp_path / "batch_results.csv"
        df.to_csv(path, index=False)
        return path

    def test_load_results_found_only(self, results_csv):
        assert len(load_results(results_csv)) == 5
        assert len(load_results(results_csv, found_only=True)) == 4

    def test_load_results_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(tmp_path / "missing.csv")

    def test_summarize_by_group(self, results_csv):
        stats = summarize_by_group(
            load_results(results_csv), ["pathfinding.algorithm"], "pathfinding.path_length"
        )
        assert stats.loc["BFS", "n"] == 2
        assert stats.loc["BFS", "median"] == 5
        assert stats.loc["DFS", "n"] == 1

    def test_summarize_unknown_column(self, results_csv):
        with pytest.raises(ValueError, match="not found"):
            summarize_by_group(load_results(results_csv), ["nope"], "pathfinding.path_length")
