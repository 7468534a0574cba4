"""Order statistics and moments over a flat sequence of numbers.

These helpers are shared by every dispersion calculator. They take any
sequence of real numbers, never mutate it, and return plain floats or tuples.

Quartile convention:
    Quartiles use the exclusive-median split. The ascending data is cut at
    ``m = n // 2``; for odd ``n`` the median element belongs to neither half.
    Q1 and Q3 are the medians of the lower and upper halves. For
    ``[1, 2, 3, 4, 5]`` this gives ``Q1 = 1.5`` and ``Q3 = 4.5``, which differs
    from inclusive-median and interpolating conventions on small odd samples.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ..config import QUARTILE_MIN_POINTS
from ..errors import (
    EmptyInputError,
    InsufficientDataError,
    NonFiniteValueError,
    NonNumericValueError,
)
from ..results import Quartiles


def finite_array(values: Sequence[float]) -> np.ndarray:
    """Return ``values`` as a flat float array of finite numbers.

    Raises:
        NonNumericValueError: If an entry cannot be read as a number.
        NonFiniteValueError: If an entry is NaN or infinite.
    """
    try:
        arr = np.asarray(values, dtype=float).ravel()
    except (TypeError, ValueError):
        raise NonNumericValueError() from None
    if not np.all(np.isfinite(arr)):
        raise NonFiniteValueError()
    return arr


def _sorted_array(values: Sequence[float]) -> np.ndarray:
    arr = np.sort(np.asarray(values, dtype=float).ravel())
    if arr.size == 0:
        raise EmptyInputError("Cannot summarize an empty sequence.")
    return arr


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean of ``values``.

    Raises:
        EmptyInputError: If ``values`` is empty.
    """
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        raise EmptyInputError("Cannot take the mean of an empty sequence.")
    return float(np.mean(arr))


def _median_of_sorted(arr: np.ndarray) -> float:
    n = int(arr.size)
    mid = n // 2
    if n % 2 == 0:
        return float((arr[mid - 1] + arr[mid]) / 2.0)
    return float(arr[mid])


def median(values: Sequence[float]) -> float:
    """Return the median of ``values``.

    Odd counts give the middle element of the sorted copy; even counts give the
    average of the two central elements.

    Raises:
        EmptyInputError: If ``values`` is empty.
    """
    return _median_of_sorted(_sorted_array(values))


def mode(values: Sequence[float]) -> Tuple[float, ...]:
    """Return every most-frequent value in ascending order.

    The sorted copy is scanned for runs of equal consecutive values. All values
    whose run length equals the longest run are returned, provided that run is
    at least two long. A sequence with no repeated value has an empty mode,
    which is distinct from having no data.

    Raises:
        EmptyInputError: If ``values`` is empty.
    """
    arr = _sorted_array(values)

    runs: list[tuple[float, int]] = []
    current = float(arr[0])
    length = 1
    for x in arr[1:]:
        x = float(x)
        if x == current:
            length += 1
        else:
            runs.append((current, length))
            current = x
            length = 1
    runs.append((current, length))

    longest = max(length for _, length in runs)
    if longest < 2:
        return ()
    return tuple(value for value, length in runs if length == longest)


def value_range(values: Sequence[float]) -> float:
    """Return ``max - min`` of ``values``."""
    arr = _sorted_array(values)
    return float(arr[-1] - arr[0])


def quartiles(values: Sequence[float]) -> Quartiles:
    """Return exclusive-median quartiles and the interquartile range.

    Args:
        values: At least four real numbers in any order.

    Returns:
        Quartiles: ``q1``, ``q3`` and ``iqr = q3 - q1``.

    Raises:
        EmptyInputError: If ``values`` is empty.
        InsufficientDataError: If fewer than four values are supplied.
    """
    arr = _sorted_array(values)
    n = int(arr.size)
    if n < QUARTILE_MIN_POINTS:
        raise InsufficientDataError(
            f"Quartiles need at least {QUARTILE_MIN_POINTS} values; got {n}."
        )

    m = n // 2
    lower = arr[:m]
    upper = arr[m:] if n % 2 == 0 else arr[m + 1 :]

    q1 = _median_of_sorted(lower)
    q3 = _median_of_sorted(upper)
    return Quartiles(q1=q1, q3=q3, iqr=q3 - q1)


def population_variance(values: Sequence[float]) -> float:
    """Return the mean squared deviation from the mean (divisor ``n``)."""
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        raise EmptyInputError("Cannot take the variance of an empty sequence.")
    center = float(np.mean(arr))
    return float(np.mean((arr - center) ** 2))
