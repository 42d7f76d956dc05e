# batch_config.py
from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use exactly this many worker processes.
#
# Example:
#   CPU_COUNT = 8        # use 8 processes
#   CPU_COUNT = None     # auto-detect from the machine
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID will run all permutations (Cartesian product) of the values.
#
# Example:
#   "rows": [20, 50]
#   "cols": [20, 50]
# will generate 4 grid shapes:
#   (20x20), (20x50), (50x20), (50x50)
#
# Start is always the top-left corner and goal the bottom-right corner;
# both are kept free when the random grid is generated.
#
# Be careful: experiment count grows exponentially in the number of values
# per key, i.e.  prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["pathfinding_comparison"],  # free-text label for this batch

    # --- grid parameters ---
    "rows": [20, 50],                       # number of grid rows
    "cols": [20, 50],                       # number of grid columns
    "obstacle_density": [0.1, 0.2, 0.3],    # fraction of cells that are blocked

    # --- algorithms ---
    #   "BFS"    - Breadth-first search (unweighted shortest paths).
    #   "DFS"    - Depth-first search (any path, not necessarily shortest).
    #   "AStar"  - A* with Manhattan heuristic (optimal, informed).
    "algorithm": ["BFS", "DFS", "AStar"],

    # --- randomness ---
    "seed": [i for i in range(10)],  # RNG seeds; same seed => same grid for every algorithm
}
