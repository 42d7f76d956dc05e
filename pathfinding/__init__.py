# pathfinding/__init__.py
import importlib
import pkgutil
from typing import Dict
from .base import Algorithm, PathfindingAlgorithm, SearchResult, UnsupportedAlgorithm

# one planner per Algorithm member
PATHFINDING_ALGOS: Dict[Algorithm, PathfindingAlgorithm] = {}


def load_algorithms() -> None:
    """
    Import every planner module in this package and register its
    module-level ALGORITHM under the Algorithm member it declares.
    Fails if two planners claim the same member or a member has none.
    """
    global PATHFINDING_ALGOS
    PATHFINDING_ALGOS = {}
    package = __name__
    for info in pkgutil.iter_modules(__path__):
        if info.name == "base":
            continue
        module = importlib.import_module(f"{package}.{info.name}")
        planner = getattr(module, "ALGORITHM", None)
        if planner is None:
            continue
        algo = Algorithm(planner.algorithm)
        if algo in PATHFINDING_ALGOS:
            raise ValueError(
                f"Duplicate planner for {algo.value}: "
                f"{PATHFINDING_ALGOS[algo].name} and {planner.name}"
            )
        PATHFINDING_ALGOS[algo] = planner

    missing = [a.value for a in Algorithm if a not in PATHFINDING_ALGOS]
    if missing:
        raise RuntimeError(f"No planner registered for: {', '.join(missing)}")


def get_algorithm(selector) -> PathfindingAlgorithm:
    """Resolve a selector (Algorithm member or tag string) to its planner."""
    return PATHFINDING_ALGOS[Algorithm.parse(selector)]


load_algorithms()

__all__ = [
    "Algorithm",
    "PATHFINDING_ALGOS",
    "PathfindingAlgorithm",
    "SearchResult",
    "UnsupportedAlgorithm",
    "get_algorithm",
    "load_algorithms",
]
