#!/usr/bin/env python3
"""
plot_utils.py

Boxplots of batch_run results (one box per algorithm) using seaborn.

Typical workflow:

1) Run batch experiments:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import plot_boxplots_from_csv

        plot_boxplots_from_csv(
            csv_path="outputs_batch/batch_results.csv",
            group_by=["pathfinding.algorithm"],
            metrics=["pathfinding.path_length", "pathfinding.expansions"],
            output_dir="outputs_batch/plots",
            show=False,
        )

   - Or from the command line (using the DEFAULT_* constants at the bottom):
        python plot_utils.py
"""

from pathlib import Path
from typing import Sequence, Optional, Union, Dict

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

import seaborn as sns


PathLike = Union[str, Path]


def load_results(csv_path: PathLike, found_only: bool = False) -> pd.DataFrame:
    """
    Read the batch CSV. With found_only=True, rows where no path
    was found are dropped (their path_length is empty).
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    if found_only and "pathfinding.path_found" in df.columns:
        df = df[df["pathfinding.path_found"].astype(bool)]
    return df


def summarize_by_group(
    df: pd.DataFrame,
    group_by: Sequence[str],
    metric: str,
) -> pd.DataFrame:
    """Count, median and quartiles of one metric per group."""
    for col in list(group_by) + [metric]:
        if col not in df.columns:
            raise ValueError(
                f"column '{col}' not found in results. "
                f"Available columns include: {list(df.columns)[:20]} ..."
            )

    sub = df[list(group_by) + [metric]].dropna()
    return sub.groupby(list(group_by))[metric].agg(
        n="count",
        median="median",
        q1=lambda s: s.quantile(0.25),
        q3=lambda s: s.quantile(0.75),
    )


def plot_boxplots_from_csv(
    csv_path: PathLike,
    group_by: Sequence[str],
    metrics: Sequence[str],
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    figsize_per_group: float = 1.5,
    x_axis_label: Optional[str] = None,
    seaborn_style: str = "whitegrid",
    palette_name: str = "colorblind",
    title_template: Optional[str] = None,
    y_axis_labels: Optional[Dict[str, str]] = None,
    log_scale: bool = False,
    found_only: bool = True,
) -> None:
    """
    Read a CSV and make seaborn boxplots for given metrics grouped by given columns.

    Parameters
    ----------
    csv_path : str or Path
        Path to the CSV file (e.g. 'outputs_batch/batch_results.csv').
    group_by : list[str]
        Column(s) to group by. Several columns are joined into one label per row.
    metrics : list[str]
        Numeric columns to plot, e.g. ['pathfinding.path_length'].
    output_dir : str or Path or None, default None
        If provided, plots are saved as PDF files in that directory.
    show : bool, default True
        If False, figures are closed after (optionally) being saved.
    title_template : str or None, default None
        Formatted with metric=<name>; defaults to "{metric} by {group_by}".
    log_scale : bool, default False
        Log y-axis (useful for runtimes and expansions).
    found_only : bool, default True
        Ignore runs where no path was found.
    """
    TITLE_FONTSIZE = 16
    AXIS_LABEL_FONTSIZE = 14

    df = load_results(csv_path, found_only=found_only)

    group_by = list(group_by)
    if len(group_by) == 1:
        group_label_col = group_by[0]
    else:
        group_label_col = "__group_label__"
        df[group_label_col] = df[group_by].astype(str).agg(" | ".join, axis=1)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    categories = sorted(df[group_label_col].astype(str).unique())
    x_label_text = x_axis_label if x_axis_label is not None else " | ".join(group_by)

    sns.set_style(seaborn_style)
    sns.set_context("paper", font_scale=1.2)

    # Fixed order of categories for stable colors
    palette = sns.color_palette(palette_name, n_colors=max(1, len(categories)))
    palette_mapping = dict(zip(categories, palette))

    for metric in metrics:
        stats = summarize_by_group(df, [group_label_col], metric)
        if stats.empty:
            print(f"[WARN] No data for metric '{metric}' after dropping NaNs. Skipping.")
            continue

        print(f"\n[STATS] {metric}")
        print(stats.to_string(float_format=lambda x: f"{x:.4g}"))

        sub = df[[group_label_col, metric]].dropna().astype({group_label_col: str})
        width = max(6.0, figsize_per_group * max(1, len(categories)))
        fig, ax = plt.subplots(figsize=(width, 6))

        ax = sns.boxplot(
            data=sub,
            x=group_label_col,
            y=metric,
            hue=group_label_col,
            order=categories,
            palette=palette_mapping,
            dodge=False,
            ax=ax,
        )

        if title_template is None:
            title_text = f"{metric} by {', '.join(group_by)}"
        else:
            title_text = title_template.format(metric=metric)

        ax.set_title(title_text, fontsize=TITLE_FONTSIZE, pad=28)
        ax.set_xlabel(x_label_text, fontsize=AXIS_LABEL_FONTSIZE)
        ax.set_ylabel(
            y_axis_labels.get(metric, metric) if y_axis_labels else metric,
            fontsize=AXIS_LABEL_FONTSIZE,
        )

        if log_scale:
            ax.set_yscale("log")

        handles = [mpatches.Patch(color=palette_mapping[c], label=c) for c in categories]
        ax.legend(
            handles=handles,
            title="",
            loc="upper center",
            bbox_to_anchor=(0.5, 1.08),
            ncol=min(len(handles), 10),
            frameon=False,
        )

        plt.tight_layout(rect=[0, 0, 1, 0.99])

        if output_dir is not None:
            safe_metric = metric.replace(".", "_").replace(" ", "_")
            safe_groups = "_".join(g.replace(".", "_") for g in group_by)
            fname = output_dir / f"box_{safe_metric}_by_{safe_groups}.pdf"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            print(f"Saved boxplot for '{metric}' to {fname}")

        if show:
            plt.show()
        else:
            plt.close(fig)


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_GROUP_BY = ["pathfinding.algorithm"]
DEFAULT_METRICS = [
    "pathfinding.path_length",
    "pathfinding.expansions",
    "pathfinding.runtime",
]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"
DEFAULT_SHOW = False  # set to True for interactive windows


def _run_with_defaults() -> None:
    print(f"Reading CSV: {DEFAULT_CSV}")
    print(f"Grouping by: {DEFAULT_GROUP_BY}")
    print(f"Metrics: {DEFAULT_METRICS}")

    plot_boxplots_from_csv(
        csv_path=DEFAULT_CSV,
        group_by=DEFAULT_GROUP_BY,
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=DEFAULT_SHOW,
        x_axis_label="Pathfinding algorithm",
        title_template="Pathfinding Algorithm Comparison",
        y_axis_labels={
            "pathfinding.path_length": "Path length (steps)",
            "pathfinding.expansions": "Expanded cells",
            "pathfinding.runtime": "Runtime (s)",
        },
    )


if __name__ == "__main__":
    _run_with_defaults()
