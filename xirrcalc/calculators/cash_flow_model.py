"""Present value of dated cash flows as a function of the rate of return."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Tuple

from ..models.transaction import Transaction
from ..utils.date_utils import year_fraction
from ..utils.math_utils import exact_sum, safe_pow


@dataclass(frozen=True)
class Investment:
    """A cash flow and the years from its date to the valuation date."""
    amount: float
    years: float

    def present_value(self, rate: float) -> float:
        """
        Value of the cash flow at the valuation date under ``rate``.

        For rate < -1 the function is extended as -|amount| × (-1 - rate)^years.
        (1 + rate)^years has no real value there for fractional years; the
        extension is always non-positive with a positive derivative, which
        moves Newton-Raphson candidates back above -1.
        """
        if rate > -1:
            return self.amount * safe_pow(1 + rate, self.years)
        elif rate < -1:
            return -abs(self.amount) * safe_pow(-1 - rate, self.years)
        elif self.years == 0:
            # 0^0 resolved as 1
            return self.amount
        else:
            return 0.0

    def derivative(self, rate: float) -> float:
        """Derivative of present_value with respect to rate."""
        if self.years == 0:
            return 0.0
        elif rate > -1:
            return self.amount * self.years * safe_pow(1 + rate, self.years - 1)
        elif rate < -1:
            return abs(self.amount) * self.years * safe_pow(-1 - rate, self.years - 1)
        else:
            return 0.0


class CashFlowModel:
    """
    Present value of a set of investments valued at a common date.

    PV(r) = Σ [amountᵢ × (1 + r)^yearsᵢ]

    Where:
        yearsᵢ = (valuation date - dateᵢ) / days per year

    The rate of return is the root of PV.
    """

    def __init__(self, investments: Iterable[Investment]):
        self._investments: Tuple[Investment, ...] = tuple(investments)

    @classmethod
    def from_transactions(
        cls,
        transactions: Iterable[Transaction],
        end: date,
        days_per_year: float = 365.0
    ) -> "CashFlowModel":
        """
        Derive investments valued at ``end``.

        Args:
            transactions: Transactions dated on or before ``end``
            end: Valuation date, normally the latest transaction date
            days_per_year: Day count denominator

        Returns:
            CashFlowModel
        """
        return cls(
            Investment(tx.amount, year_fraction(tx.when, end, days_per_year))
            for tx in transactions
        )

    @property
    def investments(self) -> List[Investment]:
        return list(self._investments)

    def present_value(self, rate: float) -> float:
        """Present value of all investments under ``rate``."""
        return exact_sum(inv.present_value(rate) for inv in self._investments)

    def derivative(self, rate: float) -> float:
        """Derivative of the present value under ``rate``."""
        return exact_sum(inv.derivative(rate) for inv in self._investments)

    def __len__(self) -> int:
        return len(self._investments)
