"""
Figures for dispersion and rank correlation results.

Plotting functions take finished results and only render them; no
statistics are computed here. Figures are saved as PNG and closed.
"""

from __future__ import annotations

import logging
import os

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .config import DEFAULT_OUTPUT_DIR, FIGURE_DPI
from .results import CorrelationResult, DispersionResult
from .schema import COLUMNS

logger = logging.getLogger(__name__)

DATA_COLOR = "#004371"
ACCENT_COLOR = "#a50f15"
GRID_ALPHA = 0.20


def setup_plot_style() -> None:
    """Apply serif fonts and light spines to all subsequent figures."""
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.size": 11,
            "axes.titlesize": 13,
            "axes.labelsize": 12,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "savefig.dpi": FIGURE_DPI,
        }
    )


def clean_axis(ax: Axes, grid_axis: str = "y") -> None:
    ax.tick_params(axis="both", which="major", width=1.0)
    for side in ("left", "bottom"):
        ax.spines[side].set_linewidth(1.2)
    ax.grid(True, axis=grid_axis, alpha=GRID_ALPHA, linestyle=":", linewidth=0.7)


def _save(fig, output_dir: str, filename: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    fig.savefig(path, dpi=FIGURE_DPI, bbox_inches="tight", pad_inches=0.12)
    plt.close(fig)
    logger.info("Saved figure to %s", path)
    return path


def plot_dispersion_summary(
    result: DispersionResult,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    filename: str = "dispersion_summary.png",
) -> str:
    """Draw a box-and-whisker summary with the individual values overlaid.

    The box spans Q1 to Q3 with the median line; whiskers reach the minimum
    and maximum. The mean is marked separately.

    Args:
        result (DispersionResult): Raw-sample result.
        output_dir (str): Directory for the PNG file.
        filename (str): Name of the PNG file.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If the result has no quartiles (fewer than four values).
    """
    if not result.has_quartiles:
        raise ValueError("A box plot needs quartiles; the sample has fewer than 4 values.")

    setup_plot_style()
    fig, ax = plt.subplots(figsize=(7.0, 4.2))

    stats = {
        "label": f"n = {result.n}",
        "whislo": result.minimum,
        "q1": result.q1,
        "med": result.median,
        "q3": result.q3,
        "whishi": result.maximum,
        "mean": result.mean,
        "fliers": [],
    }
    ax.bxp(
        [stats],
        showmeans=True,
        showfliers=False,
        widths=0.4,
        boxprops={"color": DATA_COLOR, "linewidth": 1.6},
        medianprops={"color": ACCENT_COLOR, "linewidth": 2.0},
        meanprops={"marker": "D", "markerfacecolor": "white", "markeredgecolor": "black"},
    )

    values = np.asarray(result.original_values, dtype=float)
    jitter = np.linspace(-0.08, 0.08, len(values)) if len(values) > 1 else np.zeros(1)
    ax.scatter(1.0 + jitter, values, s=18, color=DATA_COLOR, alpha=0.55, zorder=3)

    ax.set_ylabel(COLUMNS.value)
    ax.set_title(
        f"Mean = {result.mean:.3g}, SD = {result.standard_deviation:.3g}, IQR = {result.iqr:.3g}"
    )
    clean_axis(ax)
    return _save(fig, output_dir, filename)


def plot_rank_scatter(
    result: CorrelationResult,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    filename: str = "rank_scatter.png",
) -> str:
    """Scatter the ranks of the two samples against each other.

    Points on the rising diagonal indicate identical rankings (rs = 1); the
    falling diagonal indicates reversed rankings (rs = -1).

    Returns:
        str: Path to the saved PNG file.
    """
    setup_plot_style()
    fig, ax = plt.subplots(figsize=(5.2, 5.0))

    r1 = np.asarray(result.ranks1, dtype=float)
    r2 = np.asarray(result.ranks2, dtype=float)
    ax.scatter(r1, r2, s=36, color=DATA_COLOR, edgecolor="black", linewidth=0.6, zorder=3)
    if result.n > 0:
        ax.plot([1, result.n], [1, result.n], linestyle="--", color="0.6", linewidth=1.0)

    ax.set_xlabel(COLUMNS.rank1)
    ax.set_ylabel(COLUMNS.rank2)
    ax.set_title(f"$r_s$ = {result.coefficient:.3f} ({result.label})")
    clean_axis(ax, grid_axis="both")
    return _save(fig, output_dir, filename)
