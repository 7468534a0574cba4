"""
Numerical primitives shared by the statistics calculators.

All functions operate on plain sequences of numbers and return floats or
tuples; no calculator state is involved.

Modules:
    sequence:
        Mean, median, mode, range, exclusive-median quartiles and population
        variance over a flat sequence.

    ranking:
        Descending ranks with tie-averaging for rank correlation.

Design Principle:
    This subpackage has no dependencies on dispersion/, correlation/ or
    plotting code. It can be tested on its own.
"""

from .ranking import rank_descending
from .sequence import (
    mean,
    median,
    mode,
    population_variance,
    quartiles,
    value_range,
)

__all__ = [
    "mean",
    "median",
    "mode",
    "population_variance",
    "quartiles",
    "rank_descending",
    "value_range",
]
