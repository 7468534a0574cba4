"""Spearman's rank correlation with tie-averaged ranks.

Each sample is ranked independently (highest score ranked 1, ties share the
average of the ranks they span). With ``d`` the signed rank difference per
pair and ``n`` the number of pairs:

    rs = 1 - 6 Σd² / (n (n² - 1))

For ``n <= 1`` the denominator vanishes and ``rs`` is defined as 0. The
result is clamped to ``[-1, 1]``.

The engine does not require a minimum number of pairs; callers that want one
must check it before constructing the engine.
"""

from __future__ import annotations

from typing import Sequence

from ..errors import ListsNotSameSizeError, NullInputError
from ..results import CorrelationResult
from ..stats.ranking import rank_descending
from ..stats.sequence import finite_array
from .labels import classify_correlation


def spearman_coefficient(sum_squared_differences: float, n: int) -> float:
    """Return ``rs`` for ``n`` pairs, clamped to ``[-1, 1]``."""
    denominator = n * (n**2 - 1)
    if denominator == 0:
        return 0.0
    rs = 1.0 - (6.0 * sum_squared_differences) / denominator
    return float(min(1.0, max(-1.0, rs)))


def _as_scores(scores: Sequence[float]) -> tuple[float, ...]:
    return tuple(float(v) for v in finite_array(scores))


class RankCorrelationEngine:
    """Rank two paired samples and measure their monotonic association.

    Args:
        scores1: First sample.
        scores2: Second sample, paired index-by-index with ``scores1``.

    Raises:
        NullInputError: If either sample is ``None``.
        ListsNotSameSizeError: If the samples differ in length.
        NonNumericValueError: If any score is not a number.
        NonFiniteValueError: If any score is NaN or infinite.
    """

    def __init__(
        self,
        scores1: Sequence[float] | None,
        scores2: Sequence[float] | None,
    ):
        if scores1 is None or scores2 is None:
            raise NullInputError("Both score lists must be provided.")
        if len(scores1) != len(scores2):
            raise ListsNotSameSizeError(
                f"Got {len(scores1)} and {len(scores2)} scores; pairs must line up."
            )
        self._scores1 = _as_scores(scores1)
        self._scores2 = _as_scores(scores2)
        self._result: CorrelationResult | None = None

    @property
    def result(self) -> CorrelationResult | None:
        return self._result

    def run(self) -> CorrelationResult:
        ranks1 = rank_descending(self._scores1)
        ranks2 = rank_descending(self._scores2)

        differences = tuple(r1 - r2 for r1, r2 in zip(ranks1, ranks2))
        squared = tuple(d * d for d in differences)
        sum_squared = float(sum(squared))

        n = len(self._scores1)
        rs = spearman_coefficient(sum_squared, n)

        self._result = CorrelationResult(
            scores1=self._scores1,
            scores2=self._scores2,
            ranks1=ranks1,
            ranks2=ranks2,
            differences=differences,
            squared_differences=squared,
            sum_squared_differences=sum_squared,
            n=n,
            coefficient=rs,
            label=classify_correlation(rs),
        )
        return self._result
