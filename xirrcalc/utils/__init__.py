"""Utility modules for the XIRR calculator."""

from .date_utils import (
    parse_date,
    date_from_timestamp,
    days_between,
    year_fraction,
)
from .math_utils import (
    to_float,
    is_finite,
    safe_pow,
    sign,
    exact_sum,
)

__all__ = [
    "parse_date",
    "date_from_timestamp",
    "days_between",
    "year_fraction",
    "to_float",
    "is_finite",
    "safe_pow",
    "sign",
    "exact_sum",
]
