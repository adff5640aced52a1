"""Date handling utilities."""

import math
from datetime import date, datetime, tzinfo
from typing import Optional, Union
from dateutil import parser as date_parser

DateLike = Union[str, date, datetime]


def parse_date(date_input: DateLike, date_format: Optional[str] = None) -> date:
    """
    Parse a date from string or return date object.

    Datetimes are truncated to their calendar day.

    Args:
        date_input: Date string, date or datetime object
        date_format: Optional specific format string

    Returns:
        Parsed date object
    """
    if isinstance(date_input, datetime):
        return date_input.date()

    if isinstance(date_input, date):
        return date_input

    if not isinstance(date_input, str):
        raise TypeError(f"Cannot interpret {type(date_input).__name__} as a date")

    if date_format:
        return datetime.strptime(date_input, date_format).date()

    # Use dateutil for flexible parsing
    return date_parser.parse(date_input).date()


def date_from_timestamp(seconds: float, tz: Optional[tzinfo] = None) -> date:
    """
    Convert seconds since the epoch to a calendar date.

    Args:
        seconds: POSIX timestamp
        tz: Time zone to resolve the day in (default: local time zone)

    Returns:
        Calendar date of the instant in ``tz``
    """
    return datetime.fromtimestamp(seconds, tz).date()


def days_between(start_date: date, end_date: date) -> int:
    """Actual number of days from start_date to end_date."""
    return (end_date - start_date).days


def year_fraction(start_date: date, end_date: date, days_per_year: float = 365.0) -> float:
    """
    Calculate year fraction between two dates.

    Args:
        start_date: Start date
        end_date: End date
        days_per_year: Day count denominator (365 for Actual/365, 360 for Actual/360)

    Returns:
        Year fraction as float
    """
    if not (days_per_year > 0 and math.isfinite(days_per_year)):
        raise ValueError(f"days_per_year must be positive and finite, got {days_per_year}")
    return days_between(start_date, end_date) / days_per_year
