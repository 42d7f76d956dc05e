# viz.py
from __future__ import annotations
from typing import List, Optional
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from grid import Grid, Pos


def draw_grid(
    grid: Grid,
    start: Pos,
    goal: Pos,
    path: Optional[List[Pos]],
    out_path: str | Path,
    title: str = "Grid pathfinding",
) -> None:
    """
    Draw a snapshot of the grid:
      - free cells: light background
      - blocked cells: dark gray
      - path cells: soft blue line through cell centers
      - start: green circle
      - goal: red star
    A missing path (None) is noted in the title.
    """
    rows, cols = grid.rows, grid.cols
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # --- Color palette (RGB in 0–1) ---
    bgcolor       = np.array([0.96, 0.96, 0.96])  # light gray background
    blocked_color = np.array([0.30, 0.30, 0.30])  # dark gray

    img = np.zeros((rows, cols, 3), dtype=float)
    img[:, :, :] = bgcolor
    img[grid.cells != 0] = blocked_color

    fig, ax = plt.subplots(figsize=(max(cols / 2.0, 3.0), max(rows / 2.0, 3.0)))
    # origin="upper" keeps row 0 at the top, matching the text format
    ax.imshow(img, origin="upper")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    handles = []

    # Path (x = col, y = row)
    if path:
        px = [c for _, c in path]
        py = [r for r, _ in path]
        (h_path,) = ax.plot(
            px,
            py,
            color="#1f77b4",   # blue
            linewidth=2.0,
            marker="o",
            markersize=3,
            label=f"path ({len(path) - 1} steps)",
        )
        handles.append(h_path)

    h_start = ax.scatter(
        [start[1]],
        [start[0]],
        marker="o",
        s=120,
        c="#2ca02c",          # green
        edgecolors="white",
        linewidths=1.0,
        label="start",
        zorder=3,
    )
    h_goal = ax.scatter(
        [goal[1]],
        [goal[0]],
        marker="*",
        s=180,
        c="#d62728",          # red
        edgecolors="white",
        linewidths=1.0,
        label="goal",
        zorder=3,
    )
    handles.extend([h_start, h_goal])
    handles.append(Patch(facecolor=blocked_color, edgecolor="black", label="blocked"))

    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    if path is None:
        title = f"{title} (no path)"
    fig.suptitle(title, fontsize=14, y=0.98)

    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.93),
        ncol=len(handles),
        fontsize=9,
        frameon=False,
    )

    # Leave space at top for title + legend
    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.88])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)
