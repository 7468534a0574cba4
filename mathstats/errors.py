"""Validation errors raised by the statistics engine.

Every error describes bad caller input rather than an environment fault, so
the whole family derives from :class:`ValueError`. Each class carries an
:class:`ErrorKind` so callers can branch on the kind without matching
exception types (see :mod:`mathstats.outcome`).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NULL_INPUT = "null_input"
    EMPTY_DATA_SET = "empty_data_set"
    LISTS_NOT_SAME_SIZE = "lists_not_same_size"
    INVALID_FREQUENCY = "invalid_frequency"
    INVALID_CLASS_INTERVAL_FORMAT = "invalid_class_interval_format"
    INSUFFICIENT_DATA = "insufficient_data"
    NON_FINITE_VALUE = "non_finite_value"
    NON_NUMERIC_VALUE = "non_numeric_value"
    INVALID_STANDARD_DEVIATION = "invalid_standard_deviation"


class StatisticsError(ValueError):
    """Base class for all input validation failures."""

    kind: ErrorKind
    default_message = "Invalid input for statistics calculation."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NullInputError(StatisticsError):
    kind = ErrorKind.NULL_INPUT
    default_message = "Values entered must not be None."


class EmptyDataSetError(StatisticsError):
    kind = ErrorKind.EMPTY_DATA_SET
    default_message = "The data set cannot be empty."


# Primitives report an empty sequence with the same kind as the calculators.
EmptyInputError = EmptyDataSetError


class ListsNotSameSizeError(StatisticsError):
    kind = ErrorKind.LISTS_NOT_SAME_SIZE
    default_message = "Inputs must have the same number of data points."


class InvalidFrequencyError(StatisticsError):
    kind = ErrorKind.INVALID_FREQUENCY
    default_message = "Frequencies must be non-negative whole numbers."


class InvalidClassIntervalFormatError(StatisticsError):
    kind = ErrorKind.INVALID_CLASS_INTERVAL_FORMAT
    default_message = "Class intervals must use the format 'lower-upper' (e.g. '10-20')."


class InsufficientDataError(StatisticsError):
    kind = ErrorKind.INSUFFICIENT_DATA
    default_message = "There is insufficient input to perform the calculation."


class NonFiniteValueError(StatisticsError):
    kind = ErrorKind.NON_FINITE_VALUE
    default_message = "Values must be finite numbers."


class NonNumericValueError(StatisticsError):
    kind = ErrorKind.NON_NUMERIC_VALUE
    default_message = "Values must be numbers."


class InvalidStandardDeviationError(StatisticsError):
    kind = ErrorKind.INVALID_STANDARD_DEVIATION
    default_message = "Standard deviation cannot be negative."
