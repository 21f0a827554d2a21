"""Numeric helpers shared by calorie and progress computations."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def is_positive_quantity(value: object) -> bool:
    """Return True for a finite real number greater than zero."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and value > 0
