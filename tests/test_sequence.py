import math

import pytest

from mathstats.errors import EmptyDataSetError, ErrorKind, InsufficientDataError
from mathstats.stats.sequence import (
    mean,
    median,
    mode,
    population_variance,
    quartiles,
    value_range,
)


def test_mean_and_median_do_not_mutate_input():
    values = [5.0, 1.0, 4.0, 2.0, 3.0]
    assert mean(values) == 3.0
    assert median(values) == 3.0
    assert values == [5.0, 1.0, 4.0, 2.0, 3.0]


def test_median_even_count_averages_central_pair():
    assert median([4, 1, 3, 2]) == 2.5


@pytest.mark.parametrize("func", [mean, median, mode, value_range, population_variance])
def test_empty_sequence_raises(func):
    with pytest.raises(EmptyDataSetError) as excinfo:
        func([])
    assert excinfo.value.kind is ErrorKind.EMPTY_DATA_SET


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 3, 3, 4], (2.0, 3.0)),
        ([4, 1, 4, 2], (4.0,)),
        ([7, 7, 7], (7.0,)),
        ([1, 2, 3], ()),
        ([3.5], ()),
    ],
)
def test_mode_returns_all_longest_runs(values, expected):
    assert mode(values) == expected


def test_range_is_max_minus_min():
    assert value_range([600, 470, 170, 430, 300]) == 430.0


@pytest.mark.parametrize(
    "values, q1, q3",
    [
        # Odd n: the median is excluded from both halves.
        ([1, 2, 3, 4, 5], 1.5, 4.5),
        ([1, 2, 3, 4, 5, 6, 7], 2.0, 6.0),
        ([600, 470, 170, 430, 300], 235.0, 535.0),
        # Even n: halves split at n // 2.
        ([1, 2, 3, 4], 1.5, 3.5),
        ([7, 1, 3, 5, 9, 11], 3.0, 9.0),
        ([1, 2, 3, 4, 5, 6, 7, 8], 2.5, 6.5),
    ],
)
def test_quartiles_exclusive_median_split(values, q1, q3):
    q = quartiles(values)
    assert q.q1 == q1
    assert q.q3 == q3
    assert q.iqr == q3 - q1


@pytest.mark.parametrize("values", [[1], [1, 2], [3, 1, 2]])
def test_quartiles_need_four_values(values):
    with pytest.raises(InsufficientDataError):
        quartiles(values)


def test_population_variance_uses_n_divisor():
    assert population_variance([1, 2, 3, 4, 5]) == 2.0
    assert math.isclose(population_variance([2, 4]), 1.0)


@pytest.mark.parametrize("values", [[5, 5, 5, 5, 5], [2.5, 2.5, 2.5, 2.5], [-3.0]])
def test_population_variance_constant_sample_is_zero(values):
    assert population_variance(values) == 0.0
