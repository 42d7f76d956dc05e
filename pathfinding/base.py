# pathfinding/base.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from grid import Grid, Pos


class UnsupportedAlgorithm(ValueError):
    """Raised when an algorithm selector is not one of the known tags."""

    def __init__(self, selector: Any) -> None:
        self.selector = selector
        choices = ", ".join(f'"{a.value}"' for a in Algorithm)
        super().__init__(
            f"Unsupported algorithm {selector!r}. Please choose one of {choices}."
        )


class Algorithm(str, Enum):
    """Closed set of traversal strategies; values double as registry names."""

    BFS = "BFS"      # shortest path, unweighted
    DFS = "DFS"      # any path
    ASTAR = "AStar"  # shortest path, Manhattan heuristic

    @classmethod
    def _missing_(cls, value: object) -> Optional["Algorithm"]:
        # case-insensitive tag lookup ("bfs", "astar", ...)
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

    @classmethod
    def parse(cls, selector: Any) -> "Algorithm":
        try:
            return cls(selector)
        except (ValueError, TypeError):
            raise UnsupportedAlgorithm(selector) from None


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search; owned by the caller, never by the planner."""
    path: Optional[List[Pos]]  # None = no path
    expansions: int
    runtime: float

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def steps(self) -> Optional[int]:
        return len(self.path) - 1 if self.path is not None else None


class PathfindingAlgorithm(Protocol):
    name: str
    algorithm: Algorithm
    # Optional timing stats (per algorithm implementation, cumulative)
    total_runtime: float
    call_count: int
    last_runtime: float

    def search(self, grid: Grid, start: Pos, goal: Pos) -> SearchResult:
        ...

    def plan(self, grid: Grid, start: Pos, goal: Pos) -> Optional[List[Pos]]:
        ...

    def reset_stats(self) -> None:
        ...


def manhattan(a: Pos, b: Pos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(parent: Dict[Pos, Pos], goal: Pos) -> List[Pos]:
    """
    Walk the parent map back from goal until a node without a parent
    (the start), then reverse so the path reads start -> goal.
    """
    cur = goal
    path = [cur]
    while cur in parent:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path
