"""Combine the summary statistics of two separately measured data sets."""

from __future__ import annotations

import math

from ..errors import InsufficientDataError, InvalidStandardDeviationError
from ..results import CombinedSetsResult


class CombinedSetsStatistics:
    """Mean and population spread of the union of two data sets.

    Only the size, mean and standard deviation of each set are needed. Each
    set's sum of squares is recovered from ``Σx² = n (sd² + mean²)``, and the
    combined variance is ``Σx² / N - mean²`` over the pooled totals.

    Raises:
        InsufficientDataError: If either set size is not positive.
        InvalidStandardDeviationError: If either standard deviation is negative.
    """

    def __init__(
        self,
        n1: int,
        mean1: float,
        sd1: float,
        n2: int,
        mean2: float,
        sd2: float,
    ):
        if n1 <= 0 or n2 <= 0:
            raise InsufficientDataError("Both data sets must contain at least one value.")
        if sd1 < 0 or sd2 < 0:
            raise InvalidStandardDeviationError()

        self._n1, self._mean1, self._sd1 = int(n1), float(mean1), float(sd1)
        self._n2, self._mean2, self._sd2 = int(n2), float(mean2), float(sd2)
        self._result: CombinedSetsResult | None = None

    @property
    def result(self) -> CombinedSetsResult | None:
        return self._result

    def run(self) -> CombinedSetsResult:
        n = self._n1 + self._n2
        mean = (self._n1 * self._mean1 + self._n2 * self._mean2) / n

        sum_x2_1 = self._n1 * (self._sd1**2 + self._mean1**2)
        sum_x2_2 = self._n2 * (self._sd2**2 + self._mean2**2)
        variance = max((sum_x2_1 + sum_x2_2) / n - mean**2, 0.0)

        self._result = CombinedSetsResult(
            n=n,
            mean=mean,
            variance=variance,
            standard_deviation=math.sqrt(variance),
        )
        return self._result
