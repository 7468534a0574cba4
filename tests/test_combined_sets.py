import math

import pytest

from mathstats.dispersion import CombinedSetsStatistics, RawSampleStatistics
from mathstats.errors import InsufficientDataError, InvalidStandardDeviationError


def test_identical_sets_keep_their_statistics():
    result = CombinedSetsStatistics(10, 5.0, 2.0, 10, 5.0, 2.0).run()
    assert result.n == 20
    assert result.mean == pytest.approx(5.0)
    assert result.variance == pytest.approx(4.0)
    assert result.standard_deviation == pytest.approx(2.0)


def test_matches_pooled_raw_sample():
    a = [1, 2, 3, 4]
    b = [10, 12]
    ra = RawSampleStatistics(a).run()
    rb = RawSampleStatistics(b).run()
    pooled = RawSampleStatistics(a + b).run()

    result = CombinedSetsStatistics(
        ra.n, ra.mean, ra.standard_deviation, rb.n, rb.mean, rb.standard_deviation
    ).run()

    assert result.mean == pytest.approx(pooled.mean)
    assert result.variance == pytest.approx(pooled.variance)
    assert math.isclose(result.standard_deviation, pooled.standard_deviation, rel_tol=1e-9)


@pytest.mark.parametrize("n1, n2", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_sizes_rejected(n1, n2):
    with pytest.raises(InsufficientDataError):
        CombinedSetsStatistics(n1, 1.0, 1.0, n2, 1.0, 1.0)


def test_negative_standard_deviation_rejected():
    with pytest.raises(InvalidStandardDeviationError):
        CombinedSetsStatistics(3, 1.0, -0.5, 3, 1.0, 1.0)
