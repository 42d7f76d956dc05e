from config import Config
from grid import Grid, Pos
from io_utils import (
    load_grid,
    make_run_dir,
    path_to_json,
    save_config,
    save_summary,
    search_summary,
)
from pathfinding import Algorithm
from solver import GridPathfinder
from viz import draw_grid


def resolve_endpoints(cfg: Config, grid: Grid) -> tuple[Pos, Pos]:
    """
    Fill in default corners and check that start/goal lie inside the grid.
    The engine itself never validates this.
    """
    start: Pos = tuple(cfg.start) if cfg.start is not None else (0, 0)
    goal: Pos = (
        tuple(cfg.goal) if cfg.goal is not None else (grid.rows - 1, grid.cols - 1)
    )
    for label, p in (("start", start), ("goal", goal)):
        if not grid.in_bounds(p):
            raise ValueError(
                f"{label} {p} is outside the {grid.rows}x{grid.cols} grid."
            )
    return start, goal


def build_grid(cfg: Config) -> Grid:
    if cfg.grid_file:
        return load_grid(cfg.grid_file)

    # keep the default corners free so random runs are not trivially blocked
    corners = [(0, 0), (cfg.rows - 1, cfg.cols - 1)]
    keep_free = [tuple(p) for p in (cfg.start, cfg.goal) if p is not None] or corners
    return Grid.random(
        cfg.rows,
        cfg.cols,
        obstacle_density=cfg.obstacle_density,
        seed=cfg.seed,
        keep_free=keep_free,
    )


def main() -> None:
    """
    Single-run entry point for the grid pathfinder.

    Typical usage:
      1. Open config.py and edit the Config defaults
         (grid size / grid_file, start, goal, algorithm, ...).
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/ (PNG, summary.json).
    """

    # ------------------------------------------------------------------
    # 1) Configuration and grid
    # ------------------------------------------------------------------
    cfg = Config()
    algorithm = Algorithm.parse(cfg.algorithm)

    grid = build_grid(cfg)
    start, goal = resolve_endpoints(cfg, grid)

    # ------------------------------------------------------------------
    # 2) Output directory
    # ------------------------------------------------------------------
    run_dir = make_run_dir(cfg, base="outputs", algorithm=algorithm.value)
    save_config(cfg, run_dir)

    # ------------------------------------------------------------------
    # 3) Solve
    # ------------------------------------------------------------------
    solver = GridPathfinder(
        grid=grid,
        start=start,
        goal=goal,
        algorithm=algorithm,
        log_events=cfg.log_events,
    )
    path = solver.solve()

    # ------------------------------------------------------------------
    # 4) Summary + picture
    # ------------------------------------------------------------------
    summary: dict = {
        "grid": {
            "rows": grid.rows,
            "cols": grid.cols,
            "blocked": len(grid.obstacles()),
        },
        "query": {"start": list(start), "goal": list(goal)},
        "pathfinding": search_summary(algorithm, solver.last_result),
        "path": path_to_json(path),
    }
    save_summary(summary, run_dir)

    if cfg.draw:
        draw_grid(
            grid,
            start,
            goal,
            path,
            out_path=run_dir / "grid.png",
            title=f"{algorithm.value} on {grid.rows}x{grid.cols} grid",
        )

    print(f"Run directory: {run_dir}")
    if path is None:
        print("No path found.")
    else:
        print(f"Path length: {len(path) - 1} steps")


if __name__ == "__main__":
    main()
