"""Turn calculator results into tables and write them to CSV files.

This module is the boundary between in-memory results and exported
artifacts. It does not compute any statistics itself.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Mapping

import pandas as pd

from .config import DEFAULT_OUTPUT_DIR
from .results import (
    CombinedSetsResult,
    CorrelationResult,
    DispersionResult,
    FrequencyResult,
)
from .schema import COLUMNS

logger = logging.getLogger(__name__)


def _summary_frame(rows: List[tuple]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=[COLUMNS.statistic, COLUMNS.value])


def dispersion_summary_frame(result: DispersionResult) -> pd.DataFrame:
    """Return one row per statistic for a raw-sample result.

    The mode is written as a comma-separated string (empty when no value
    repeats) so the ``Value`` column stays one cell per statistic.
    """
    mode_text = ", ".join(f"{m:g}" for m in result.mode)
    rows = [
        ("n", result.n),
        ("Mean", result.mean),
        ("Median", result.median),
        ("Mode", mode_text),
        ("Range", result.range),
        ("Q1", result.q1),
        ("Q3", result.q3),
        ("IQR", result.iqr),
        ("Variance", result.variance),
        ("Standard Deviation", result.standard_deviation),
    ]
    return _summary_frame(rows)


def frequency_summary_frame(result: FrequencyResult) -> pd.DataFrame:
    rows = [
        ("Σf", result.sum_f),
        ("Σfx", result.sum_fx),
        ("Σfx²", result.sum_fx2),
        ("Mean", result.mean),
        ("Variance", result.variance),
        ("Standard Deviation", result.standard_deviation),
    ]
    return _summary_frame(rows)


def frequency_table_frame(result: FrequencyResult) -> pd.DataFrame:
    """Return the working table with ``x``, ``f``, ``fx`` and ``fx²`` columns."""
    df = pd.DataFrame(
        {
            COLUMNS.x: list(result.x_values),
            COLUMNS.frequency: list(result.frequencies),
        }
    )
    df[COLUMNS.fx] = df[COLUMNS.x] * df[COLUMNS.frequency]
    df[COLUMNS.fx2] = df[COLUMNS.fx] * df[COLUMNS.x]
    return df


def combined_summary_frame(result: CombinedSetsResult) -> pd.DataFrame:
    rows = [
        ("n", result.n),
        ("Mean", result.mean),
        ("Variance", result.variance),
        ("Standard Deviation", result.standard_deviation),
    ]
    return _summary_frame(rows)


def correlation_table_frame(result: CorrelationResult) -> pd.DataFrame:
    """Return one row per pair with scores, ranks, ``d`` and ``d²``."""
    return pd.DataFrame(
        {
            COLUMNS.pair: list(range(1, result.n + 1)),
            COLUMNS.score1: list(result.scores1),
            COLUMNS.rank1: list(result.ranks1),
            COLUMNS.score2: list(result.scores2),
            COLUMNS.rank2: list(result.ranks2),
            COLUMNS.difference: list(result.differences),
            COLUMNS.difference_squared: list(result.squared_differences),
        }
    )


def correlation_summary_frame(result: CorrelationResult) -> pd.DataFrame:
    rows = [
        ("n", result.n),
        ("Σd²", result.sum_squared_differences),
        ("rs", result.coefficient),
        ("Correlation", str(result.label)),
    ]
    return _summary_frame(rows)


def save_frames_to_csv(
    frames: Mapping[str, pd.DataFrame], output_dir: str = DEFAULT_OUTPUT_DIR
) -> Dict[str, str]:
    """Write each named DataFrame to ``<output_dir>/<name>.csv``.

    Args:
        frames (Mapping[str, pandas.DataFrame]): Tables keyed by file stem.
        output_dir (str): Directory for the CSV files; created if missing.

    Returns:
        dict[str, str]: File path written for each name.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = {}
    for name, frame in frames.items():
        path = os.path.join(output_dir, f"{name}.csv")
        frame.to_csv(path, index=False)
        logger.info("Saved %s to %s", name, path)
        paths[name] = path
    return paths
