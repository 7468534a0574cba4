"""
Rank correlation between two paired samples.

Modules:
    spearman:
        Tie-averaged ranking of both samples, signed rank differences and
        Spearman's coefficient, clamped to [-1, 1].

    labels:
        Qualitative strength/direction labels for a coefficient.
"""

from .labels import CorrelationLabel, classify_correlation
from .spearman import RankCorrelationEngine, spearman_coefficient

__all__ = [
    "CorrelationLabel",
    "RankCorrelationEngine",
    "classify_correlation",
    "spearman_coefficient",
]
