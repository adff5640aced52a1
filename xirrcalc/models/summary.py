"""Aggregate view of a transaction set."""

import math
from dataclasses import dataclass, replace
from fractions import Fraction
from datetime import date
from functools import reduce
from typing import Iterable, Optional

from ..errors import InvalidTransactionsError
from ..utils.date_utils import year_fraction
from .transaction import Transaction


@dataclass(frozen=True)
class CashFlowSummary:
    """
    Dates and amount statistics of a set of transactions.

    Built by folding transactions with ``accumulate``. Partial summaries
    computed over any split of the transactions can be merged with
    ``combine``, which is commutative and associative, so the result does
    not depend on the order transactions are visited in. ``total`` and
    ``deposits`` are kept as exact fractions for the same reason.
    """

    start: Optional[date] = None
    end: Optional[date] = None
    min_amount: float = math.inf
    max_amount: float = -math.inf
    total: Fraction = Fraction(0)
    deposits: Fraction = Fraction(0)
    count: int = 0

    @classmethod
    def of(cls, transactions: Iterable[Transaction]) -> "CashFlowSummary":
        """Summarise the given transactions."""
        return reduce(cls.accumulate, transactions, cls())

    def accumulate(self, tx: Transaction) -> "CashFlowSummary":
        """Summary including one more transaction."""
        return CashFlowSummary(
            start=tx.when if self.start is None else min(self.start, tx.when),
            end=tx.when if self.end is None else max(self.end, tx.when),
            min_amount=min(self.min_amount, tx.amount),
            max_amount=max(self.max_amount, tx.amount),
            total=self.total + Fraction(tx.amount),
            deposits=self.deposits - Fraction(tx.amount) if tx.amount < 0 else self.deposits,
            count=self.count + 1,
        )

    def combine(self, other: "CashFlowSummary") -> "CashFlowSummary":
        """Merge two partial summaries."""
        if other.count == 0:
            return self
        if self.count == 0:
            return other
        return replace(
            self,
            start=min(self.start, other.start),
            end=max(self.end, other.end),
            min_amount=min(self.min_amount, other.min_amount),
            max_amount=max(self.max_amount, other.max_amount),
            total=self.total + other.total,
            deposits=self.deposits + other.deposits,
            count=self.count + other.count,
        )

    def validate(self) -> None:
        """
        Check the transactions can have a rate of return.

        Raises:
            InvalidTransactionsError: fewer than two transactions, all on the
                same day, all nonnegative or all negative
        """
        if self.count < 2:
            raise InvalidTransactionsError("Must have at least two transactions")
        if self.start == self.end:
            raise InvalidTransactionsError("Transactions must not all be on the same day.")
        if self.min_amount >= 0:
            raise InvalidTransactionsError("Transactions must not all be nonnegative.")
        if self.max_amount < 0:
            raise InvalidTransactionsError("Transactions must not all be negative.")

    def years(self, days_per_year: float = 365.0) -> float:
        """Length of the period covered, in years."""
        if self.start is None:
            return 0.0
        return year_fraction(self.start, self.end, days_per_year)

    @property
    def is_total_loss(self) -> bool:
        """The largest cash flow is a liquidation at exactly zero."""
        return self.max_amount == 0
