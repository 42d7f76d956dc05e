#!/usr/bin/env python3
"""
Batch experiment runner.

This script is meant for *offline experiments* where you want to:

- Sweep over many grid / algorithm configurations.
- Solve one query per configuration (no PNG output).
- Collect all metrics into a single CSV file for analysis.

High-level behavior
-------------------

1. Build a parameter grid (grid size, obstacle density, algorithm, seed, "purpose")
   from batch_config.PARAM_GRID.
2. For each combination:
   - Generate the random grid for that seed (corners kept free).
   - Solve corner-to-corner with the requested algorithm.
   - Record path length, expansions and runtime.
3. Use multiprocessing to parallelize runs across CPU cores.
4. Append rows to `outputs_batch/batch_results.csv`.

If `outputs_batch/batch_results.csv` already exists its header is reused and
new rows are appended with the same schema.

Usage
-----

From the repo root:

    python batch_run.py

Then plot the results:

    python plot_utils.py
"""

import csv
import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional
import traceback

from batch_config import CPU_COUNT, PARAM_GRID
from grid import Grid
from io_utils import search_summary
from pathfinding import Algorithm
from solver import GridPathfinder


def iter_param_combinations(grid: Dict[str, List[Any]]) -> Iterator[Dict[str, Any]]:
    """Yield dicts for each combination in the parameter grid."""
    keys = list(grid.keys())
    value_lists = [grid[k] for k in keys]
    for combo in itertools.product(*value_lists):
        yield dict(zip(keys, combo))


def flatten_dict(
    d: Dict[str, Any],
    parent_key: str = "",
    sep: str = ".",
) -> Dict[str, Any]:
    """
    Turn nested dicts into a flat dict with dotted keys:

        {"a": {"b": 1}, "c": 2}  ->  {"a.b": 1, "c": 2}
    """
    items: Dict[str, Any] = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


# ---------------------------------------------------------------------
# One experiment
# ---------------------------------------------------------------------

def run_single_experiment(
    purpose: str,                # meta label, not used in the search, just for CSV
    rows: int,
    cols: int,
    obstacle_density: float,
    algorithm: str,
    seed: int,
) -> Dict[str, Any]:
    """
    Solve ONE corner-to-corner query and return a flat dict of metrics.
    """
    start = (0, 0)
    goal = (rows - 1, cols - 1)
    grid = Grid.random(
        rows, cols, obstacle_density=obstacle_density, seed=seed, keep_free=[start, goal]
    )

    algo = Algorithm.parse(algorithm)
    solver = GridPathfinder(grid=grid, start=start, goal=goal, algorithm=algo)
    solver.solve()

    summary: Dict[str, Any] = {
        "grid": {"blocked": len(grid.obstacles())},
        "pathfinding": search_summary(algo, solver.last_result),
    }
    return flatten_dict(summary)


# ---------------------------------------------------------------------
# Worker for multiprocessing
# ---------------------------------------------------------------------

def run_one(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Worker function for each process.

    - Calls run_single_experiment(**params).
    - Returns merged {params..., metrics...} dict.
    - If the run fails, returns None and prints an error.
    """
    params = dict(params)

    try:
        metrics = run_single_experiment(**params)
    except Exception as e:
        print(f"[ERROR] run_single_experiment failed for params={params}: {e}")
        traceback.print_exc()
        # returning None tells the caller to skip this run
        return None

    merged: Dict[str, Any] = {**params, **metrics}
    return merged


# ---------------------------------------------------------------------
# Batch driver: incremental CSV writing in outputs_batch/
# ---------------------------------------------------------------------

def main_batch(out_dir: str | Path = "outputs_batch") -> Optional[Path]:
    combos = list(iter_param_combinations(PARAM_GRID))
    total = len(combos)
    if total == 0:
        print("No parameter combinations to run. Check PARAM_GRID.")
        return None

    print(f"Total experiments to run: {total}")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "batch_results.csv"

    fieldnames: Optional[List[str]] = None
    if out_path.exists():
        print(f"Appending to existing CSV: {out_path}")
        with out_path.open("r", newline="") as f:
            reader = csv.reader(f)
            fieldnames = next(reader, None) or None

    # No header yet: run the first job synchronously to infer the columns.
    start_index = 0
    if fieldnames is None:
        print("Running first job synchronously to infer CSV columns...")
        first_row = run_one(combos[0])
        if first_row is None:
            print("[ERROR] First experiment failed; cannot infer CSV columns.")
            return None

        fieldnames = sorted(first_row.keys())
        # 'purpose' first
        if "purpose" in fieldnames:
            fieldnames.remove("purpose")
            fieldnames = ["purpose"] + fieldnames

        with out_path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerow(first_row)
        print(f"Created new CSV and wrote first row to {out_path}")

        start_index = 1
    else:
        print(f"Using existing header with {len(fieldnames)} columns.")

    remaining = combos[start_index:]
    if not remaining:
        print("No remaining experiments to run; done.")
        return out_path

    num_procs = CPU_COUNT or mp.cpu_count()
    print(f"Running remaining {len(remaining)} experiments in parallel using {num_procs} CPUs ...")

    done = start_index
    with out_path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        with mp.Pool(processes=num_procs) as pool:
            for row in pool.imap_unordered(run_one, remaining):
                if row is None:
                    # this run failed; already logged, so just skip it
                    continue

                writer.writerow(row)
                f.flush()
                done += 1
                if done % 10 == 0 or done == total:
                    print(f"Completed {done}/{total} experiments")

    print(f"All done. Results in {out_path}")
    return out_path


if __name__ == "__main__":
    main_batch()
