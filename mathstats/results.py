"""Immutable result snapshots returned by the calculators.

Each calculator computes once and hands back one of these frozen containers.
Sequences are stored as tuples so a result cannot be modified after it is
returned.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .correlation.labels import CorrelationLabel


@dataclass(frozen=True)
class Quartiles:
    """Lower quartile, upper quartile and interquartile range."""

    q1: float
    q3: float
    iqr: float


@dataclass(frozen=True)
class DispersionResult:
    """Central tendency and spread of a raw sample.

    Attributes:
        original_values: Sample in insertion order.
        sorted_values: Sample in ascending order.
        n: Number of values.
        mean: Arithmetic mean.
        median: Middle value (average of the two central values for even n).
        mode: Every most-frequent value in ascending order. Empty when no
            value occurs more than once.
        range: ``max - min``.
        q1, q3, iqr: Exclusive-median quartiles. ``nan`` when the sample has
            fewer than four values.
        variance: Population variance (divisor ``n``).
        standard_deviation: Square root of ``variance``.
    """

    original_values: Tuple[float, ...]
    sorted_values: Tuple[float, ...]
    n: int
    mean: float
    median: float
    mode: Tuple[float, ...]
    range: float
    q1: float
    q3: float
    iqr: float
    variance: float
    standard_deviation: float

    @property
    def has_quartiles(self) -> bool:
        return not math.isnan(self.iqr)

    @property
    def minimum(self) -> float:
        return self.sorted_values[0]

    @property
    def maximum(self) -> float:
        return self.sorted_values[-1]


@dataclass(frozen=True)
class FrequencyResult:
    """Frequency-weighted moments of a discrete or grouped table.

    ``x_values`` holds the values the moments were taken over: the table
    values for a discrete table and the class midpoints for a continuous one.
    """

    x_values: Tuple[float, ...]
    frequencies: Tuple[int, ...]
    sum_f: float
    sum_fx: float
    sum_fx2: float
    mean: float
    variance: float
    standard_deviation: float


@dataclass(frozen=True)
class CombinedSetsResult:
    n: int
    mean: float
    variance: float
    standard_deviation: float


@dataclass(frozen=True)
class CorrelationResult:
    """Spearman rank correlation for two paired samples.

    Attributes:
        scores1, scores2: Paired input samples.
        ranks1, ranks2: Tie-averaged ranks (highest score has rank 1).
        differences: Signed ``rank1 - rank2`` per pair.
        squared_differences: ``d**2`` per pair.
        sum_squared_differences: ``sum(d**2)``.
        n: Number of pairs.
        coefficient: Spearman's ``rs``, clamped to ``[-1, 1]``.
        label: Qualitative strength and direction of ``coefficient``.
    """

    scores1: Tuple[float, ...]
    scores2: Tuple[float, ...]
    ranks1: Tuple[float, ...]
    ranks2: Tuple[float, ...]
    differences: Tuple[float, ...]
    squared_differences: Tuple[float, ...]
    sum_squared_differences: float
    n: int
    coefficient: float
    label: "CorrelationLabel"
