"""Transaction data model."""

import math
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional

from ..errors import InvalidTransactionsError
from ..utils.date_utils import parse_date, date_from_timestamp
from ..utils.math_utils import Number, to_float


@dataclass(frozen=True)
class Transaction:
    """
    A dated cash flow.

    Negative amounts are money put into the investment (deposits), positive
    amounts are money taken out or the value at liquidation. ``when`` may
    be given as a date, a datetime (truncated to its day) or a string.
    """

    amount: float
    when: date

    def __post_init__(self):
        """Normalise amount to float and when to a calendar date."""
        amount = to_float(self.amount)
        if not math.isfinite(amount):
            raise InvalidTransactionsError(f"Transaction amount must be finite, got {self.amount!r}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "when", parse_date(self.when))

    @classmethod
    def from_string(
        cls,
        amount: Number,
        when: str,
        date_format: Optional[str] = None
    ) -> "Transaction":
        """
        Create a transaction from a date string.

        Args:
            amount: Cash flow amount
            when: Date string, e.g. "2010-01-01"
            date_format: Optional strptime format; dateutil parsing otherwise

        Returns:
            Transaction
        """
        return cls(to_float(amount), parse_date(when, date_format))

    @classmethod
    def from_timestamp(
        cls,
        amount: Number,
        seconds: float,
        tz: Optional[tzinfo] = None
    ) -> "Transaction":
        """Create a transaction from seconds since the epoch, resolved in ``tz`` (local by default)."""
        return cls(to_float(amount), date_from_timestamp(seconds, tz))

    @property
    def is_deposit(self) -> bool:
        """Check if this transaction puts money in."""
        return self.amount < 0

    def __str__(self) -> str:
        """String representation of transaction."""
        return f"{self.when.isoformat()} | {self.amount:,.2f}"
