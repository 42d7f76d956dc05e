# pathfinding/bfs.py
from collections import deque
from time import perf_counter
from typing import Deque, Dict, List, Optional, Set

from grid import Grid, Pos
from .base import Algorithm, PathfindingAlgorithm, SearchResult, reconstruct_path


class BFSPlanner(PathfindingAlgorithm):
    name = "BFS"
    algorithm = Algorithm.BFS

    def __init__(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def plan(self, grid: Grid, start: Pos, goal: Pos) -> Optional[List[Pos]]:
        return self.search(grid, start, goal).path

    def search(self, grid: Grid, start: Pos, goal: Pos) -> SearchResult:
        """
        Breadth-first search on a 4-connected grid.
        The result path is the shortest list of cells from start to goal
        (inclusive), or None if the goal is unreachable.
        """
        t0 = perf_counter()

        q: Deque[Pos] = deque([start])
        visited: Set[Pos] = {start}
        parent: Dict[Pos, Pos] = {}
        path: Optional[List[Pos]] = None
        expansions = 0

        while q:
            cur = q.popleft()
            if cur == goal:
                path = reconstruct_path(parent, goal)
                break

            expansions += 1
            for np in grid.neighbors4(cur):
                if np in visited:
                    continue
                # mark on enqueue so a cell is queued at most once
                visited.add(np)
                parent[np] = cur
                q.append(np)

        dt = perf_counter() - t0
        self._update_stats(dt)
        return SearchResult(path=path, expansions=expansions, runtime=dt)

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1


ALGORITHM = BFSPlanner()
