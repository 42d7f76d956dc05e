# solver.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from grid import Grid, Pos
from pathfinding import Algorithm, SearchResult, get_algorithm


@dataclass
class GridPathfinder:
    """
    Single entry point of the traversal engine.

    grid may be a Grid or a plain 2D array of markers (0 = free); a plain
    array is wrapped as-is, without checking row lengths.
    The selector is only resolved in solve(), so an unknown value is
    accepted at construction and raises UnsupportedAlgorithm there.
    No search state is stored on the instance; every solve() call
    starts from scratch. The stats of the latest call land in last_result.
    """
    grid: Union[Grid, Sequence[Sequence[float]]]
    start: Pos
    goal: Pos
    algorithm: Union[Algorithm, str] = Algorithm.BFS

    # control terminal logging
    log_events: bool = False

    last_result: Optional[SearchResult] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.grid, Grid):
            self.grid = Grid.from_array(self.grid)

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------------- solving ---------------- #

    def solve(self) -> Optional[List[Pos]]:
        """
        Returns the path [start, ..., goal] (inclusive), or None if the
        goal cannot be reached through free cells.
        Raises UnsupportedAlgorithm for an unrecognised selector.
        """
        planner = get_algorithm(self.algorithm)

        self._log(
            f"[SOLVE] {planner.name} on {self.grid.rows}x{self.grid.cols} grid, "
            f"{self.start} -> {self.goal}"
        )

        result = planner.search(self.grid, self.start, self.goal)
        self.last_result = result

        if not result.found:
            self._log(
                f"[NO PATH] {planner.name} exhausted the frontier after "
                f"{result.expansions} expansions"
            )
        else:
            self._log(
                f"[DONE] {planner.name} found {result.steps} steps, "
                f"{result.expansions} expansions, {result.runtime:.6f}s"
            )
        return result.path
