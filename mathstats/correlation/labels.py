"""Qualitative labels for a Spearman rank correlation coefficient."""

from __future__ import annotations

from enum import Enum

from ..config import CORRELATION_BANDS, CorrelationBands


class CorrelationLabel(Enum):
    PERFECT_POSITIVE = "Perfect positive correlation"
    STRONG_POSITIVE = "Strong positive correlation"
    MODERATE_POSITIVE = "Moderate positive correlation"
    WEAK_POSITIVE = "Weak positive correlation"
    VERY_WEAK_POSITIVE = "Very weak positive correlation"
    NO_CORRELATION = "No correlation"
    VERY_WEAK_NEGATIVE = "Very weak negative correlation"
    WEAK_NEGATIVE = "Weak negative correlation"
    MODERATE_NEGATIVE = "Moderate negative correlation"
    STRONG_NEGATIVE = "Strong negative correlation"
    PERFECT_NEGATIVE = "Perfect negative correlation"

    def __str__(self) -> str:
        return self.value


_POSITIVE = (
    CorrelationLabel.PERFECT_POSITIVE,
    CorrelationLabel.STRONG_POSITIVE,
    CorrelationLabel.MODERATE_POSITIVE,
    CorrelationLabel.WEAK_POSITIVE,
    CorrelationLabel.VERY_WEAK_POSITIVE,
)
_NEGATIVE = (
    CorrelationLabel.PERFECT_NEGATIVE,
    CorrelationLabel.STRONG_NEGATIVE,
    CorrelationLabel.MODERATE_NEGATIVE,
    CorrelationLabel.WEAK_NEGATIVE,
    CorrelationLabel.VERY_WEAK_NEGATIVE,
)


def classify_correlation(
    rs: float, bands: CorrelationBands = CORRELATION_BANDS
) -> CorrelationLabel:
    """Bucket ``rs`` by magnitude and sign.

    Args:
        rs: Correlation coefficient in ``[-1, 1]``.
        bands: Magnitude thresholds. Defaults to 0.8 / 0.6 / 0.4.

    Returns:
        CorrelationLabel: ``PERFECT_*`` only when ``|rs|`` is exactly 1 and
        ``NO_CORRELATION`` only when ``rs`` is exactly 0.
    """
    if rs == 0:
        return CorrelationLabel.NO_CORRELATION

    magnitude = abs(rs)
    if magnitude >= 1.0:
        tier = 0
    elif magnitude >= bands.strong:
        tier = 1
    elif magnitude >= bands.moderate:
        tier = 2
    elif magnitude >= bands.weak:
        tier = 3
    else:
        tier = 4
    return _POSITIVE[tier] if rs > 0 else _NEGATIVE[tier]
