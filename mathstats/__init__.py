"""
A Python package for classroom descriptive statistics.

Computes central tendency and spread for raw samples, discrete frequency
tables and grouped (class-interval) tables, and Spearman's rank correlation
with tie-averaged ranks.

Modules:
    - stats: Shared numerical primitives (median, mode, quartiles, ranking).
    - dispersion: Calculators for the three data representations.
    - correlation: Spearman rank correlation and its qualitative label.
    - outcome: Success/failure wrapper around any calculator.
    - data_processing: Parses comma-separated text and CSV columns.
    - output: Result tables and CSV export.
    - plotting: Box-and-whisker and rank scatter figures.
"""

__version__ = "1.0.0"

from .correlation import CorrelationLabel, RankCorrelationEngine
from .dispersion import (
    CombinedSetsStatistics,
    ContinuousFrequencyStatistics,
    DiscreteFrequencyStatistics,
    RawSampleStatistics,
)
from .errors import (
    EmptyDataSetError,
    ErrorKind,
    InsufficientDataError,
    InvalidClassIntervalFormatError,
    InvalidFrequencyError,
    InvalidStandardDeviationError,
    ListsNotSameSizeError,
    NonFiniteValueError,
    NonNumericValueError,
    NullInputError,
    StatisticsError,
)
from .outcome import Failure, Success, compute
from .results import (
    CombinedSetsResult,
    CorrelationResult,
    DispersionResult,
    FrequencyResult,
    Quartiles,
)

__all__ = [
    # Calculators
    "RawSampleStatistics",
    "DiscreteFrequencyStatistics",
    "ContinuousFrequencyStatistics",
    "CombinedSetsStatistics",
    "RankCorrelationEngine",
    # Results
    "DispersionResult",
    "FrequencyResult",
    "CombinedSetsResult",
    "CorrelationResult",
    "CorrelationLabel",
    "Quartiles",
    # Outcomes
    "compute",
    "Success",
    "Failure",
    # Errors
    "ErrorKind",
    "StatisticsError",
    "NullInputError",
    "EmptyDataSetError",
    "ListsNotSameSizeError",
    "InvalidFrequencyError",
    "InvalidClassIntervalFormatError",
    "InsufficientDataError",
    "NonFiniteValueError",
    "NonNumericValueError",
    "InvalidStandardDeviationError",
]
