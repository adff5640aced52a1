"""Mathematical utilities for the rate calculations."""

import math
from decimal import Decimal
from typing import Iterable, Union

Number = Union[int, float, Decimal, str]


def to_float(value: Number) -> float:
    """
    Coerce an amount to float.

    Args:
        value: int, float, Decimal or numeric string

    Returns:
        Amount as float
    """
    if isinstance(value, str):
        value = value.replace(",", "").strip()
    return float(value)


def is_finite(*values: float) -> bool:
    """Check that none of the values is NaN or infinite."""
    return all(math.isfinite(v) for v in values)


def safe_pow(base: float, exponent: float) -> float:
    """
    Raise a non-negative base to a power, returning inf on overflow.

    math.pow raises OverflowError instead of returning inf, which would
    escape the root finder's non-finite checks.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        # 0 ** negative
        return math.inf


def sign(value: float) -> float:
    """Sign of value as -1.0, 0.0 or 1.0."""
    if value == 0:
        return 0.0
    return math.copysign(1.0, value)


def exact_sum(values: Iterable[float]) -> float:
    """
    Correctly rounded sum.

    The result does not depend on the order of the terms. Sums that
    overflow, or mix +inf and -inf, fall back to plain addition so they come
    out as inf or nan rather than raising.
    """
    terms = list(values)
    try:
        return math.fsum(terms)
    except (OverflowError, ValueError):
        return sum(terms, 0.0)
