"""Centralized constants for calculations, reporting and figures."""

from __future__ import annotations

from dataclasses import dataclass

QUARTILE_MIN_POINTS: int = 4
DEFAULT_OUTPUT_DIR: str = "output"
DEFAULT_DECIMALS: int = 3
FIGURE_DPI: int = 300


@dataclass(frozen=True)
class CorrelationBands:
    """Lower bounds on ``|rs|`` for each qualitative correlation strength.

    Attributes:
        strong: ``|rs|`` at or above this value is a strong correlation.
        moderate: Lower bound for a moderate correlation.
        weak: Lower bound for a weak correlation. Anything above zero and
            below this is reported as very weak.
    """

    strong: float = 0.8
    moderate: float = 0.6
    weak: float = 0.4


CORRELATION_BANDS = CorrelationBands()
