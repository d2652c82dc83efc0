"""
Shared numeric helpers for the load-calculation engine.

The engine never raises on degenerate input: divisions by zero, overflowing
exponentials and logarithms of non-positive numbers produce IEEE-754
infinities / NaN instead of Python exceptions.
"""

import math


def is_set(value) -> bool:
    """
    True if a room field counts as supplied.

    Zero, empty strings, None and NaN all count as "not supplied", so a
    default (or a derived value) is used in their place.
    """
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics: x/0 → ±inf, 0/0 → nan."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def safe_exp(x: float) -> float:
    """math.exp that returns inf on overflow."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def safe_log(x: float) -> float:
    """Natural log returning -inf at 0 and nan for negative input."""
    if x == 0:
        return -math.inf
    if x < 0 or math.isnan(x):
        return math.nan
    return math.log(x)


def is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)
