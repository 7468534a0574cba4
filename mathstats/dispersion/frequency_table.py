"""Frequency-weighted mean and spread for discrete frequency tables.

A discrete table is two parallel lists: the observed values ``x`` and how
many times each was observed ``f``. Moments come from three column totals:

    Σf, Σfx, Σfx²
    mean     = Σfx / Σf
    variance = Σfx² / Σf - mean²

This is the raw-sample population variance written for weighted data, so a
table with every frequency equal to one reproduces the raw-sample result.

Median, mode and quartiles are not computed for frequency tables.
"""

from __future__ import annotations

import math
from typing import Sequence, Sized

import numpy as np

from ..errors import (
    EmptyDataSetError,
    InvalidFrequencyError,
    ListsNotSameSizeError,
    NullInputError,
)
from ..results import FrequencyResult
from ..stats.sequence import finite_array


def validate_table_shape(column: Sized | None, frequencies: Sized | None) -> None:
    """Run the structural checks shared by discrete and continuous tables.

    Order: missing list, length mismatch, empty table.
    """
    if column is None or frequencies is None:
        raise NullInputError("Both the table column and frequencies must be provided.")
    if len(column) != len(frequencies):
        raise ListsNotSameSizeError(
            f"Got {len(column)} table entries but {len(frequencies)} frequencies."
        )
    if len(column) == 0:
        raise EmptyDataSetError()


def coerce_frequencies(frequencies: Sequence[float]) -> tuple[int, ...]:
    """Return frequencies as ints, rejecting negative or fractional counts."""
    counts = []
    for f in frequencies:
        try:
            f_val = float(f)
        except (TypeError, ValueError):
            raise InvalidFrequencyError(f"Frequency {f!r} is not a number.") from None
        if not math.isfinite(f_val) or f_val < 0 or not f_val.is_integer():
            raise InvalidFrequencyError(f"Invalid frequency {f!r}.")
        counts.append(int(f_val))
    return tuple(counts)


def frequency_moments(
    x_values: Sequence[float], frequencies: Sequence[int]
) -> FrequencyResult:
    """Compute Σf, Σfx, Σfx² and the weighted mean, variance and SD.

    A table whose frequencies are all zero has nothing to average; mean,
    variance and standard deviation are then reported as ``0.0``.
    """
    x = np.asarray(x_values, dtype=float)
    f = np.asarray(frequencies, dtype=float)

    sum_f = float(np.sum(f))
    sum_fx = float(np.sum(f * x))
    sum_fx2 = float(np.sum(f * x**2))

    if sum_f == 0:
        mean = 0.0
        variance = 0.0
    else:
        mean = sum_fx / sum_f
        # Cancellation can leave a tiny negative value for a one-point table.
        variance = max(sum_fx2 / sum_f - mean**2, 0.0)

    return FrequencyResult(
        x_values=tuple(float(v) for v in x),
        frequencies=tuple(int(v) for v in frequencies),
        sum_f=sum_f,
        sum_fx=sum_fx,
        sum_fx2=sum_fx2,
        mean=mean,
        variance=variance,
        standard_deviation=math.sqrt(variance),
    )


class DiscreteFrequencyStatistics:
    """Mean, variance and standard deviation of a discrete frequency table.

    Args:
        values: Observed values.
        frequencies: Count for each value, same length as ``values``.

    Raises:
        NullInputError: If either list is ``None``.
        ListsNotSameSizeError: If the lists differ in length.
        EmptyDataSetError: If both lists are empty.
        InvalidFrequencyError: If any frequency is negative, fractional or not
            a number.
        NonNumericValueError: If any value is not a number.
        NonFiniteValueError: If any value is NaN or infinite.
    """

    def __init__(
        self,
        values: Sequence[float] | None,
        frequencies: Sequence[int] | None,
    ):
        validate_table_shape(values, frequencies)
        self._frequencies = coerce_frequencies(frequencies)

        self._values = tuple(float(v) for v in finite_array(values))
        self._result: FrequencyResult | None = None

    @property
    def result(self) -> FrequencyResult | None:
        return self._result

    def run(self) -> FrequencyResult:
        self._result = frequency_moments(self._values, self._frequencies)
        return self._result
