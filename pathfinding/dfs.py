# pathfinding/dfs.py
from __future__ import annotations

from time import perf_counter
from typing import Dict, List, Optional, Set

from grid import Grid, Pos
from .base import Algorithm, PathfindingAlgorithm, SearchResult, reconstruct_path


class DFSPlanner(PathfindingAlgorithm):
    """
    Depth-first search on a 4-connected grid.

    Identical bookkeeping to BFS (visited on discovery, goal test on pop),
    but the frontier is a LIFO stack, so the returned path is *some*
    connecting path with no shortest-path guarantee.
    """

    name = "DFS"
    algorithm = Algorithm.DFS

    def __init__(self) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ---- stats API ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1

    # ---- main planning API ----

    def plan(self, grid: Grid, start: Pos, goal: Pos) -> Optional[List[Pos]]:
        """
        Returns a list of positions from start to goal (inclusive),
        or None if no path exists.
        """
        return self.search(grid, start, goal).path

    def search(self, grid: Grid, start: Pos, goal: Pos) -> SearchResult:
        t0 = perf_counter()

        stack: List[Pos] = [start]
        visited: Set[Pos] = {start}
        parent: Dict[Pos, Pos] = {}
        expansions = 0

        while stack:
            cur = stack.pop()

            if cur == goal:
                path = reconstruct_path(parent, goal)
                dt = perf_counter() - t0
                self._update_stats(dt)
                return SearchResult(path=path, expansions=expansions, runtime=dt)

            expansions += 1
            for np in grid.neighbors4(cur):
                if np in visited:
                    continue
                visited.add(np)
                parent[np] = cur
                stack.append(np)

        # no path
        dt = perf_counter() - t0
        self._update_stats(dt)
        return SearchResult(path=None, expansions=expansions, runtime=dt)


ALGORITHM = DFSPlanner()
