"""
Tests for file helpers, the single-run entry point and the grid picture.
"""

import json

import numpy as np
import pytest

from config import Config
from grid import Grid
from pathfinding import Algorithm, SearchResult
from io_utils import (
    load_grid,
    make_run_dir,
    path_to_json,
    save_config,
    save_summary,
    search_summary,
)
from main import build_grid, resolve_endpoints
from viz import draw_grid


class TestLoadGrid:

    def test_load_grid(self, tmp_path, maze_text):
        grid_file = tmp_path / "maze.txt"
        grid_file.write_text(maze_text, encoding="utf-8")
        grid = load_grid(grid_file)
        assert (grid.rows, grid.cols) == (3, 4)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_grid(tmp_path / "nope.txt")

    def test_ragged_file(self, tmp_path):
        grid_file = tmp_path / "bad.txt"
        grid_file.write_text("...\n..\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_grid(grid_file)


class TestRunOutputs:

    def test_make_run_dir_random_grid(self, tmp_path):
        cfg = Config(rows=5, cols=6, seed=3)
        run_dir = make_run_dir(cfg, base=str(tmp_path / "outputs"), algorithm="BFS")
        assert run_dir.is_dir()
        assert run_dir.name.startswith("run_R5x6_seed3_BFS_")

    def test_make_run_dir_grid_file(self, tmp_path):
        cfg = Config(grid_file="mazes/level1.txt")
        run_dir = make_run_dir(cfg, base=str(tmp_path))
        assert run_dir.name.startswith("run_level1_")

    def test_make_run_dir_is_unique(self, tmp_path):
        cfg = Config()
        a = make_run_dir(cfg, base=str(tmp_path))
        b = make_run_dir(cfg, base=str(tmp_path))
        assert a != b

    def test_save_config(self, tmp_path):
        cfg = Config(start=(1, 2), algorithm="DFS")
        save_config(cfg, tmp_path)
        data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert data["start"] == [1, 2]
        assert data["algorithm"] == "DFS"

    def test_save_summary(self, tmp_path):
        save_summary({"pathfinding": {"path_found": False}}, tmp_path)
        data = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
        assert data == {"pathfinding": {"path_found": False}}

    def test_save_summary_converts_numpy_and_enums(self, tmp_path):
        out = save_summary(
            {"algorithm": Algorithm.ASTAR, "blocked": np.int64(3), "cells": np.zeros((1, 2))},
            tmp_path,
        )
        assert out == tmp_path / "summary.json"
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data == {"algorithm": "AStar", "blocked": 3, "cells": [[0.0, 0.0]]}

    def test_save_summary_rejects_unknown_objects(self, tmp_path):
        with pytest.raises(TypeError, match="object"):
            save_summary({"bad": object()}, tmp_path)

    def test_search_summary_found(self):
        result = SearchResult(path=[(0, 0), (0, 1), (1, 1)], expansions=3, runtime=0.5)
        assert search_summary("astar", result) == {
            "algorithm": "AStar",
            "path_found": True,
            "path_length": 2,
            "expansions": 3,
            "runtime": 0.5,
        }

    def test_search_summary_without_path(self):
        result = SearchResult(path=None, expansions=1, runtime=0.0)
        summary = search_summary(Algorithm.DFS, result)
        assert summary["algorithm"] == "DFS"
        assert summary["path_found"] is False
        assert summary["path_length"] is None

    def test_path_to_json(self):
        assert path_to_json([(0, 0), (0, 1)]) == [[0, 0], [0, 1]]
        assert path_to_json(None) is None
        assert json.dumps(path_to_json(None)) == "null"


class TestMainHelpers:

    def test_default_endpoints_are_corners(self, wall_grid):
        assert resolve_endpoints(Config(), wall_grid) == ((0, 0), (2, 2))

    def test_explicit_endpoints(self, wall_grid):
        cfg = Config(start=(0, 2), goal=[2, 0])
        assert resolve_endpoints(cfg, wall_grid) == ((0, 2), (2, 0))

    def test_out_of_bounds_endpoint(self, wall_grid):
        with pytest.raises(ValueError, match="goal"):
            resolve_endpoints(Config(goal=(3, 0)), wall_grid)

    def test_build_random_grid_keeps_corners_free(self):
        cfg = Config(rows=6, cols=7, obstacle_density=0.9, seed=2)
        grid = build_grid(cfg)
        assert (grid.rows, grid.cols) == (6, 7)
        assert grid.is_free((0, 0))
        assert grid.is_free((5, 6))

    def test_build_grid_from_file(self, tmp_path, maze_text):
        grid_file = tmp_path / "maze.txt"
        grid_file.write_text(maze_text, encoding="utf-8")
        grid = build_grid(Config(grid_file=str(grid_file)))
        assert isinstance(grid, Grid)
        assert grid.cols == 4


class TestDrawGrid:

    def test_draw_with_path(self, tmp_path, wall_grid):
        out = tmp_path / "img" / "grid.png"
        path = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]
        draw_grid(wall_grid, (0, 0), (2, 0), path, out_path=out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_draw_without_path(self, tmp_path, diagonal_grid):
        out = tmp_path / "none.png"
        draw_grid(diagonal_grid, (0, 0), (1, 1), None, out_path=out)
        assert out.exists()
