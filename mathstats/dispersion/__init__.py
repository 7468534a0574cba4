"""
Dispersion and central-tendency calculators.

Modules:
    raw_sample:
        Mean, median, mode, range, exclusive-median quartiles, population
        variance and standard deviation of an ungrouped sample.

    frequency_table:
        Frequency-weighted mean, variance and standard deviation of a
        discrete (value, frequency) table, plus the validation and moment
        helpers shared with grouped tables.

    continuous_table:
        Grouped (class interval, frequency) tables reduced to class
        midpoints, then summarized with the discrete-table formulas.

    combined_sets:
        Pooled mean and spread of two data sets from their summaries.

Lifecycle:
    Every calculator validates its input at construction and computes once in
    ``run()``, which returns a frozen result from :mod:`mathstats.results`.
"""

from .combined_sets import CombinedSetsStatistics
from .continuous_table import (
    ContinuousFrequencyStatistics,
    class_midpoint,
    parse_class_interval,
)
from .frequency_table import DiscreteFrequencyStatistics, frequency_moments
from .raw_sample import RawSampleStatistics

__all__ = [
    "CombinedSetsStatistics",
    "ContinuousFrequencyStatistics",
    "DiscreteFrequencyStatistics",
    "RawSampleStatistics",
    "class_midpoint",
    "frequency_moments",
    "parse_class_interval",
]
