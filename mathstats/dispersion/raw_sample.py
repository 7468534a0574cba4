"""Summary statistics for a raw (ungrouped) sample."""

from __future__ import annotations

import math
from typing import Sequence

from ..config import QUARTILE_MIN_POINTS
from ..errors import EmptyDataSetError, NullInputError
from ..results import DispersionResult
from ..stats import sequence


class RawSampleStatistics:
    """Mean, median, mode, range, quartiles and spread of one sample.

    The sample is validated at construction. :meth:`run` computes every
    statistic in one pass and returns a frozen :class:`DispersionResult`.

    Args:
        sample: Real numbers in their original order.

    Raises:
        NullInputError: If ``sample`` is ``None``.
        EmptyDataSetError: If ``sample`` has no elements.
        NonNumericValueError: If any value is not a number.
        NonFiniteValueError: If any value is NaN or infinite.
    """

    def __init__(self, sample: Sequence[float] | None):
        if sample is None:
            raise NullInputError()
        values = sequence.finite_array(sample)
        if values.size == 0:
            raise EmptyDataSetError()

        self._original = tuple(float(v) for v in values)
        self._sorted = tuple(sorted(self._original))
        self._result: DispersionResult | None = None

    @property
    def original_values(self) -> tuple[float, ...]:
        return self._original

    @property
    def sorted_values(self) -> tuple[float, ...]:
        return self._sorted

    @property
    def result(self) -> DispersionResult | None:
        return self._result

    def run(self) -> DispersionResult:
        values = self._original

        mean = sequence.mean(values)
        # Quartiles are undefined below four values; report them as nan.
        if len(values) >= QUARTILE_MIN_POINTS:
            q = sequence.quartiles(values)
            q1, q3, iqr = q.q1, q.q3, q.iqr
        else:
            q1 = q3 = iqr = math.nan

        variance = sequence.population_variance(values)

        self._result = DispersionResult(
            original_values=self._original,
            sorted_values=self._sorted,
            n=len(values),
            mean=mean,
            median=sequence.median(values),
            mode=sequence.mode(values),
            range=sequence.value_range(values),
            q1=q1,
            q3=q3,
            iqr=iqr,
            variance=variance,
            standard_deviation=math.sqrt(variance),
        )
        return self._result
