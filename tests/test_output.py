"""Tests for result tables and CSV export."""

import os

import numpy as np
import pandas as pd

from mathstats.correlation import RankCorrelationEngine
from mathstats.dispersion import (
    CombinedSetsStatistics,
    ContinuousFrequencyStatistics,
    RawSampleStatistics,
)
from mathstats.output import (
    combined_summary_frame,
    correlation_summary_frame,
    correlation_table_frame,
    dispersion_summary_frame,
    frequency_summary_frame,
    frequency_table_frame,
    save_frames_to_csv,
)


def _value(frame, statistic):
    return frame.loc[frame["Statistic"] == statistic, "Value"].iloc[0]


def test_dispersion_summary_frame():
    result = RawSampleStatistics([1, 2, 2, 3, 3, 4]).run()
    df = dispersion_summary_frame(result)
    assert list(df.columns) == ["Statistic", "Value"]
    assert len(df) == 10
    assert np.isclose(_value(df, "Mean"), 2.5)
    assert _value(df, "Mode") == "2, 3"
    assert np.isclose(_value(df, "IQR"), 1.0)


def test_frequency_frames():
    result = ContinuousFrequencyStatistics(["10-20", "20-30"], [1, 3]).run()
    table = frequency_table_frame(result)
    assert table["x"].tolist() == [15.0, 25.0]
    assert table["fx"].tolist() == [15.0, 75.0]
    assert table["fx²"].tolist() == [225.0, 1875.0]

    summary = frequency_summary_frame(result)
    assert np.isclose(_value(summary, "Mean"), 22.5)


def test_combined_summary_frame():
    result = CombinedSetsStatistics(4, 2.5, 1.0, 4, 4.5, 1.0).run()
    df = combined_summary_frame(result)
    assert df["Statistic"].tolist() == ["n", "Mean", "Variance", "Standard Deviation"]
    assert _value(df, "n") == 8
    assert np.isclose(_value(df, "Mean"), 3.5)
    assert np.isclose(_value(df, "Variance"), 2.0)


def test_correlation_frames():
    result = RankCorrelationEngine([10, 20, 30], [3, 2, 1]).run()
    table = correlation_table_frame(result)
    assert table["Pair"].tolist() == [1, 2, 3]
    assert table["Rank 1"].tolist() == [3.0, 2.0, 1.0]
    assert table["d"].tolist() == [2.0, 0.0, -2.0]

    summary = correlation_summary_frame(result)
    assert _value(summary, "Correlation") == "Perfect negative correlation"


def test_save_frames_to_csv(tmp_path):
    result = RawSampleStatistics([1, 2, 3, 4, 5]).run()
    paths = save_frames_to_csv(
        {"dispersion_summary": dispersion_summary_frame(result)},
        output_dir=str(tmp_path / "out"),
    )
    path = paths["dispersion_summary"]
    assert os.path.exists(path)
    reloaded = pd.read_csv(path)
    assert reloaded["Statistic"].tolist()[0] == "n"
