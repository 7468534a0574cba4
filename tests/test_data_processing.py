import logging

import pandas as pd
import pytest

from mathstats.data_processing import (
    load_frequency_table_csv,
    load_paired_columns_csv,
    load_sample_csv,
    parse_frequency_list,
    parse_interval_list,
    parse_number_list,
)


def test_parse_number_list():
    assert parse_number_list("1, 2.5,3 ") == [1.0, 2.5, 3.0]
    assert parse_number_list("-4") == [-4.0]


@pytest.mark.parametrize("text", [None, "", "   "])
def test_blank_text_gives_empty_list(text):
    assert parse_number_list(text) == []
    assert parse_frequency_list(text) == []
    assert parse_interval_list(text) == []


def test_parse_number_list_reports_bad_token():
    with pytest.raises(ValueError, match="position 2"):
        parse_number_list("1, abc, 3")


def test_parse_frequency_list_requires_whole_numbers():
    assert parse_frequency_list("9, 11,13") == [9, 11, 13]
    with pytest.raises(ValueError, match="whole numbers"):
        parse_frequency_list("1, 2.5")


def test_parse_interval_list_trims_labels():
    assert parse_interval_list(" 10-20 , 20-30") == ["10-20", "20-30"]


def test_load_sample_csv_drops_blank_rows(caplog, tmp_path):
    caplog.set_level(logging.WARNING)
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame({"score": [1.0, None, 3.0], "other": [1, 2, 3]}).to_csv(csv_path, index=False)

    values = load_sample_csv(str(csv_path), "score")

    assert values == [1.0, 3.0]
    assert any("Dropped 1 blank rows" in rec.message for rec in caplog.records)


def test_load_sample_csv_rejects_text(tmp_path):
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame({"score": ["1", "abc"]}).to_csv(csv_path, index=False)
    with pytest.raises(ValueError, match="abc"):
        load_sample_csv(str(csv_path), "score")


def test_load_sample_csv_missing_column(tmp_path):
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame({"score": [1, 2]}).to_csv(csv_path, index=False)
    with pytest.raises(KeyError):
        load_sample_csv(str(csv_path), "missing")


def test_load_discrete_table(tmp_path):
    csv_path = tmp_path / "table.csv"
    pd.DataFrame({"x": [0, 1, 2], "f": [1, 9, 12]}).to_csv(csv_path, index=False)
    x, f = load_frequency_table_csv(str(csv_path), "x", "f")
    assert x == [0.0, 1.0, 2.0]
    assert f == [1, 9, 12]


def test_load_grouped_table(tmp_path):
    csv_path = tmp_path / "grouped.csv"
    pd.DataFrame({"class": ["10-20", "20-30"], "f": [9, 11]}).to_csv(csv_path, index=False)
    x, f = load_frequency_table_csv(str(csv_path), "class", "f", intervals=True)
    assert x == ["10-20", "20-30"]
    assert f == [9, 11]


def test_load_paired_columns_keeps_rows_aligned(caplog, tmp_path):
    caplog.set_level(logging.WARNING)
    csv_path = tmp_path / "pairs.csv"
    pd.DataFrame({"a": [1, 2, None, 4, 5], "b": [1, 2, 3, None, 5]}).to_csv(csv_path, index=False)

    scores1, scores2 = load_paired_columns_csv(str(csv_path), "a", "b")

    assert scores1 == [1.0, 2.0, 5.0]
    assert scores2 == [1.0, 2.0, 5.0]
    assert any("Dropped 2 incomplete rows" in rec.message for rec in caplog.records)


def test_load_paired_columns_missing_column(tmp_path):
    csv_path = tmp_path / "pairs.csv"
    pd.DataFrame({"a": [1, 2]}).to_csv(csv_path, index=False)
    with pytest.raises(KeyError):
        load_paired_columns_csv(str(csv_path), "a", "b")
