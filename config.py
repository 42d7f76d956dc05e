# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class Config:
    # Random grid, used when grid_file is None
    rows: int = 20
    cols: int = 20
    obstacle_density: float = 0.25  # fraction of all cells that are blocked
    seed: int = 0

    # Text grid to load instead of generating one (see io_utils.load_grid)
    grid_file: Optional[str] = None

    # (row, col); None means top-left / bottom-right corner
    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None

    algorithm: str = "AStar"  # "BFS", "DFS" or "AStar"

    log_events: bool = True
    draw: bool = True  # write grid.png with the found path
