"""
Pytest configuration and shared fixtures.

Grids are written as nested lists, 0 = free and 1 = blocked.
"""

import pytest

from grid import Grid


@pytest.fixture
def wall_grid() -> Grid:
    """Middle wall forces a detour through column 2."""
    return Grid.from_rows([
        [0, 0, 0],
        [1, 1, 0],
        [0, 0, 0],
    ])


@pytest.fixture
def diagonal_grid() -> Grid:
    """Free cells only touch diagonally."""
    return Grid.from_rows([
        [0, 1],
        [1, 0],
    ])


@pytest.fixture
def single_cell_grid() -> Grid:
    return Grid.from_rows([[0]])


@pytest.fixture
def open_2x2() -> Grid:
    return Grid.from_rows([
        [0, 0],
        [0, 0],
    ])


@pytest.fixture
def maze_text() -> str:
    return "\n".join([
        "; small maze",
        "..#.",
        ".##.",
        "....",
    ])
