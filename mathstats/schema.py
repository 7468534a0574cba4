"""Define standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These labels are shared by the export tables in :mod:`mathstats.output`
    and the figures in :mod:`mathstats.plotting`.

    Attributes:
        statistic: Name of a summary statistic (one row per statistic).
        value: Numerical value of that statistic.

        pair: 1-based index of a pair in a rank correlation table.
        score1, score2: Paired input scores.
        rank1, rank2: Tie-averaged ranks; the highest score has rank 1.
        difference: Signed rank difference ``d = rank1 - rank2``.
        difference_squared: ``d**2``.

        x: Table value or class midpoint.
        frequency: Count for that row.
        fx: ``f * x``.
        fx2: ``f * x**2``.
    """

    statistic: str = "Statistic"
    value: str = "Value"

    pair: str = "Pair"
    score1: str = "Score 1"
    score2: str = "Score 2"
    rank1: str = "Rank 1"
    rank2: str = "Rank 2"
    difference: str = "d"
    difference_squared: str = "d²"

    x: str = "x"
    frequency: str = "f"
    fx: str = "fx"
    fx2: str = "fx²"


COLUMNS = ResultColumns()
