"""
Parse typed or exported data into the sequences the calculators accept.
"""

# Comma-separated text is split and trimmed; CSV files are read with pandas
# and one or two columns are pulled out, dropping blank rows. Malformed
# tokens are reported by position rather than silently skipped.

from __future__ import annotations

import logging
from typing import List, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


def _split_tokens(text: str | None) -> List[str]:
    if text is None or not text.strip():
        return []
    return [token.strip() for token in text.split(",")]


def parse_number_list(text: str | None) -> List[float]:
    """Parse ``"1, 2.5, 3"`` into ``[1.0, 2.5, 3.0]``.

    Blank text gives an empty list so the calculators can report an empty data
    set themselves.

    Raises:
        ValueError: If any token is not a number.
    """
    numbers = []
    for position, token in enumerate(_split_tokens(text), start=1):
        try:
            numbers.append(float(token))
        except ValueError:
            raise ValueError(
                f"Invalid number {token!r} at position {position}; "
                "enter only numbers separated by commas."
            ) from None
    return numbers


def parse_frequency_list(text: str | None) -> List[int]:
    """Parse comma-separated whole-number frequencies.

    Raises:
        ValueError: If any token is not a whole number.
    """
    counts = []
    for position, token in enumerate(_split_tokens(text), start=1):
        try:
            counts.append(int(token))
        except ValueError:
            raise ValueError(
                f"Invalid frequency {token!r} at position {position}; "
                "frequencies must be whole numbers."
            ) from None
    return counts


def parse_interval_list(text: str | None) -> List[str]:
    """Split comma-separated class intervals such as ``"10-20, 20-30"``.

    Labels are only trimmed here; their format is checked by the continuous
    table calculator.
    """
    return _split_tokens(text)


def _numeric_column(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found; available: {list(df.columns)}")
    raw = df[column]
    values = pd.to_numeric(raw, errors="coerce")
    bad = values.isna() & raw.notna()
    if bad.any():
        first = raw[bad].iloc[0]
        raise ValueError(f"Non-numeric entry {first!r} in column {column!r}.")
    return values


def load_sample_csv(filepath: str, column: str) -> List[float]:
    """Load one numeric column of a CSV file as a sample.

    Args:
        filepath (str): Path to the CSV file.
        column (str): Header of the column to read.

    Returns:
        list[float]: Column values in file order with blank rows removed.

    Raises:
        KeyError: If ``column`` is missing.
        ValueError: If a non-blank entry is not numeric.
    """
    df = pd.read_csv(filepath)
    values = _numeric_column(df, column)
    n_blank = int(values.isna().sum())
    if n_blank:
        logger.warning("Dropped %d blank rows from column %r in %s", n_blank, column, filepath)
    values = values.dropna()
    logger.info("Loaded %d values from %s", len(values), filepath)
    return [float(v) for v in values]


def load_paired_columns_csv(
    filepath: str, column1: str, column2: str
) -> Tuple[List[float], List[float]]:
    """Load two numeric columns as row-aligned pairs.

    A row is kept only when both cells are filled, so a blank in either
    column drops the whole pair rather than shifting later scores onto the
    wrong partner.

    Args:
        filepath (str): Path to the CSV file.
        column1 (str): Header of the first score column.
        column2 (str): Header of the second score column.

    Returns:
        tuple[list[float], list[float]]: Scores from complete rows, in file
        order.

    Raises:
        KeyError: If either column is missing.
        ValueError: If a non-blank entry is not numeric.
    """
    df = pd.read_csv(filepath)
    pairs = pd.DataFrame(
        {column1: _numeric_column(df, column1), column2: _numeric_column(df, column2)}
    )

    before = len(pairs)
    pairs = pairs.dropna(how="any", subset=[column1, column2])
    if len(pairs) < before:
        logger.warning(
            "Dropped %d incomplete rows from columns %r and %r in %s",
            before - len(pairs),
            column1,
            column2,
            filepath,
        )
    logger.info("Loaded %d pairs from %s", len(pairs), filepath)
    return [float(v) for v in pairs[column1]], [float(v) for v in pairs[column2]]


def load_frequency_table_csv(
    filepath: str, x_col: str, f_col: str, *, intervals: bool = False
) -> Tuple[list, List[int]]:
    """Load a frequency table stored as two CSV columns.

    Args:
        filepath (str): Path to the CSV file.
        x_col (str): Column holding values, or class-interval labels when
            ``intervals`` is true.
        f_col (str): Column holding frequencies.
        intervals (bool): Read ``x_col`` as text labels instead of numbers.

    Returns:
        tuple[list, list[int]]: Parallel ``(x, frequencies)`` lists. Rows
        where both cells are blank are dropped.
    """
    df = pd.read_csv(filepath, dtype={x_col: str} if intervals else None)
    for col in (x_col, f_col):
        if col not in df.columns:
            raise KeyError(f"Column {col!r} not found; available: {list(df.columns)}")

    before = len(df)
    df = df.dropna(how="all", subset=[x_col, f_col])
    if len(df) < before:
        logger.warning("Dropped %d blank rows from %s", before - len(df), filepath)

    if intervals:
        x = [str(v).strip() for v in df[x_col]]
    else:
        x = [float(v) for v in _numeric_column(df, x_col)]

    freqs = []
    for v in _numeric_column(df, f_col):
        if pd.isna(v) or not float(v).is_integer():
            raise ValueError(f"Frequency {v!r} in column {f_col!r} is not a whole number.")
        freqs.append(int(v))

    logger.info("Loaded %d table rows from %s", len(freqs), filepath)
    return x, freqs
