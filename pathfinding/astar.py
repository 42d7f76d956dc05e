# pathfinding/astar.py
from __future__ import annotations

from time import perf_counter
from heapq import heappush, heappop
from typing import Dict, List, Optional, Set, Tuple

from grid import Grid, Pos
from .base import Algorithm, PathfindingAlgorithm, SearchResult, manhattan, reconstruct_path


class AStarPlanner(PathfindingAlgorithm):
    """
    A* path planner on a 4-connected grid.
    Uses Manhattan distance as heuristic, so paths are still optimal
    (same length as BFS) but usually found with fewer expansions.

    The open set is a binary heap of (f, seq, pos). seq is a push counter,
    so equal-f entries come out in insertion order. A cell may sit in the
    heap several times with stale scores; an entry is only accepted if the
    cell is not closed and its f still matches the live f_score map.
    """

    name = "AStar"
    algorithm = Algorithm.ASTAR

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

        def heuristic(p: Pos) -> int:
            return manhattan(p, goal)

        g_score: Dict[Pos, int] = {start: 0}
        f_score: Dict[Pos, int] = {start: heuristic(start)}
        parent: Dict[Pos, Pos] = {}
        closed: Set[Pos] = set()

        seq = 0
        open_heap: List[Tuple[int, int, Pos]] = []
        heappush(open_heap, (f_score[start], seq, start))

        expansions = 0

        while open_heap:
            f_cur, _, cur = heappop(open_heap)

            if cur in closed or f_cur != f_score[cur]:
                continue  # stale entry
            if cur == goal:
                path = reconstruct_path(parent, goal)
                dt = perf_counter() - t0
                self._update_stats(dt)
                return SearchResult(path=path, expansions=expansions, runtime=dt)

            closed.add(cur)
            expansions += 1
            g_cur = g_score[cur]

            for np in grid.neighbors4(cur):
                if np in closed:
                    continue

                tentative_g = g_cur + 1  # unit-cost grid

                # strict improvement only; ties keep the existing parent
                old_g = g_score.get(np)
                if old_g is not None and tentative_g >= old_g:
                    continue

                parent[np] = cur
                g_score[np] = tentative_g
                f_score[np] = tentative_g + heuristic(np)
                seq += 1
                heappush(open_heap, (f_score[np], seq, np))

        # no path
        dt = perf_counter() - t0
        self._update_stats(dt)
        return SearchResult(path=None, expansions=expansions, runtime=dt)


ALGORITHM = AStarPlanner()
