from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
from enum import Enum
from typing import Any, List, Optional
from config import Config
from grid import Grid, Pos
from pathfinding import Algorithm, SearchResult
import uuid

import numpy as np


def load_grid(path: str | Path) -> Grid:
    """
    Read a grid from a text file (see Grid.from_text for the format).

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the contents are empty, ragged, or contain unknown characters.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Grid file not found: {path}")
    return Grid.from_text(path.read_text(encoding="utf-8"))


def make_run_dir(
    cfg: Config,
    base: str = "outputs",
    algorithm: str | None = None,
) -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (grid size, seed, etc.).
    base : str, optional
        Base directory under which the run folder will be created, by default "outputs".
    algorithm : str | None, optional
        Name of the pathfinding algorithm, appended to the folder name if given.

    Folder naming
    -------------
    The folder name encodes:
      - grid source (rows x cols + seed, or the grid file stem)
      - algorithm name
      - a timestamp + short UUID suffix to guarantee uniqueness

    Example:
        outputs/run_R20x20_seed1_AStar_20251216-213012_ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    if cfg.grid_file:
        parts = [Path(cfg.grid_file).stem]
    else:
        parts = [f"R{cfg.rows}x{cfg.cols}", f"seed{cfg.seed}"]
    if algorithm:
        parts.append(algorithm)

    base_name = "run_" + "_".join(parts)

    # timestamp + short random suffix so repeated runs don't collide
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    suffix = f"{ts}-{uid}"

    run_dir = base_path / f"{base_name}_{suffix}"

    # exist_ok=False => raise if directory somehow already exists
    run_dir.mkdir(exist_ok=False)
    return run_dir


def _to_jsonable(obj: Any) -> Any:
    """json.dump fallback for numpy scalars/arrays and enum selectors."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _write_json(data: Any, out_path: Path) -> Path:
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=_to_jsonable)
    return out_path


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> Path:
    """
    Serialize the Config object for this run into JSON.
    start/goal tuples are written as [row, col] lists.
    """
    return _write_json(asdict(cfg), run_dir / filename)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> Path:
    """
    Save the summary metrics for a run as a JSON file.

    Parameters
    ----------
    summary : dict[str, Any]
        Nested dictionary built by main.py: grid info, the query, the
        search_summary() block and the path (null when none was found).
        numpy scalars and Algorithm members are converted on the way out.
    run_dir : Path
        Run directory where the summary will be written.
    filename : str, optional
        Name of the JSON file, by default "summary.json".
    """
    return _write_json(summary, run_dir / filename)


def search_summary(algorithm: Algorithm, result: SearchResult) -> dict[str, Any]:
    """Flat metrics of one search, shared by main.py and batch_run.py."""
    return {
        "algorithm": Algorithm(algorithm).value,
        "path_found": result.found,
        "path_length": result.steps,
        "expansions": result.expansions,
        "runtime": result.runtime,
    }


def path_to_json(path: Optional[List[Pos]]) -> Optional[List[List[int]]]:
    """Tuples become lists in JSON; None (no path) stays null."""
    if path is None:
        return None
    return [[int(r), int(c)] for r, c in path]
