"""
Numeric Utilities
psyscore/scoring/utils.py

Half-up rounding and guarded division shared by the scorers.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable


def to_decimal(value: float, places: int = 2) -> Decimal:
    """Convert float to Decimal with explicit precision (half-up)."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round to `places` decimals, halves away from zero for positive values.

    Python's built-in round() uses banker's rounding (round(0.125, 2) == 0.12);
    reported scores round 0.125 up to 0.13.
    """
    return float(to_decimal(value, places))


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide with zero-division protection.

    Formula: numerator / denominator (if denominator != 0, else 0)
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0 for an empty input."""
    values = list(values)
    return safe_divide(sum(values), len(values))
