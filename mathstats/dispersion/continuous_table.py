"""Grouped (continuous) frequency tables keyed by class-interval labels.

Each class interval is written ``"lower-upper"`` (for example ``"10-20"``).
Before any arithmetic the label is reduced to its midpoint
``(lower + upper) / 2``, and the table is then treated exactly like a
discrete table over the midpoints.
"""

from __future__ import annotations

import re
from typing import Sequence, Tuple

from ..errors import InvalidClassIntervalFormatError
from ..results import FrequencyResult
from .frequency_table import coerce_frequencies, frequency_moments, validate_table_shape

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)"
_INTERVAL_RE = re.compile(rf"^\s*({_NUMBER})\s*-\s*({_NUMBER})\s*$")


def parse_class_interval(label: str) -> Tuple[float, float]:
    """Split a ``"lower-upper"`` label into its two numeric bounds.

    A leading sign is allowed on either bound, so ``"-10-0"`` parses to
    ``(-10.0, 0.0)``.

    Raises:
        InvalidClassIntervalFormatError: If ``label`` is not two numbers
            separated by a hyphen.
    """
    if not isinstance(label, str):
        raise InvalidClassIntervalFormatError(f"Class interval {label!r} is not a string.")
    match = _INTERVAL_RE.match(label)
    if match is None:
        raise InvalidClassIntervalFormatError(
            f"Invalid class interval {label!r}; use the format 'lower-upper' (e.g. '10-20')."
        )
    return float(match.group(1)), float(match.group(2))


def class_midpoint(label: str) -> float:
    lower, upper = parse_class_interval(label)
    return (lower + upper) / 2.0


class ContinuousFrequencyStatistics:
    """Mean, variance and standard deviation of a grouped frequency table.

    Structural checks (missing list, size mismatch, empty table, bad
    frequency) run at construction. Interval labels are parsed in :meth:`run`,
    before any totals are formed.

    Args:
        intervals: Class-interval labels such as ``"10-20"``.
        frequencies: Count for each class.
    """

    def __init__(
        self,
        intervals: Sequence[str] | None,
        frequencies: Sequence[int] | None,
    ):
        validate_table_shape(intervals, frequencies)
        self._frequencies = coerce_frequencies(frequencies)
        self._intervals = tuple(intervals)
        self._result: FrequencyResult | None = None

    @property
    def intervals(self) -> tuple[str, ...]:
        return self._intervals

    @property
    def result(self) -> FrequencyResult | None:
        return self._result

    def run(self) -> FrequencyResult:
        """Parse every interval to its midpoint and compute the moments.

        Raises:
            InvalidClassIntervalFormatError: If any label fails to parse.
        """
        midpoints = [class_midpoint(label) for label in self._intervals]
        self._result = frequency_moments(midpoints, self._frequencies)
        return self._result
