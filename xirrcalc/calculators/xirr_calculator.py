"""XIRR calculator using Newton-Raphson method."""

import logging
from typing import Iterable, List, Optional, Sequence

from ..config.xirr_config import XIRRConfig
from ..models.enums import GuessStrategy
from ..models.summary import CashFlowSummary
from ..models.transaction import Transaction
from ..utils.date_utils import DateLike
from ..utils.math_utils import Number, sign
from .cash_flow_model import CashFlowModel, Investment
from .newton_raphson import NewtonRaphson

logger = logging.getLogger(__name__)

# Rate of return when the only nonnegative cash flows are zero
TOTAL_LOSS = -1.0


class XIRRCalculator:
    """
    Calculate the Extended Internal Rate of Return of dated cash flows.

    XIRR is the rate r solving: Σ [CFᵢ × (1 + r)^(tᵢ/D)] = 0

    Where:
        CFᵢ = Cash flow i (negative for deposits)
        tᵢ = Days from cash flow i to the latest cash flow
        D = Days per year (365 by default)

    An instance is built for one set of transactions and solved once.
    """

    def __init__(
        self,
        transactions: Iterable[Transaction],
        config: Optional[XIRRConfig] = None
    ):
        """
        Validate the transactions and build the present value model.

        Args:
            transactions: At least two transactions, on at least two
                different days, with at least one negative and one
                nonnegative amount
            config: Solver options (default: from settings)

        Raises:
            InvalidTransactionsError: if the transactions are unusable
        """
        self.config = config or XIRRConfig.from_settings()

        txs = list(transactions)
        self.summary = CashFlowSummary.of(txs)
        self.summary.validate()

        self.model = CashFlowModel.from_transactions(
            txs, self.summary.end, self.config.days_per_year
        )
        self._solved = False

    @property
    def investments(self) -> List[Investment]:
        return self.model.investments

    def present_value(self, rate: float) -> float:
        """Value of the transactions at the latest date under ``rate``."""
        return self.model.present_value(rate)

    def derivative(self, rate: float) -> float:
        """Derivative of the present value under ``rate``."""
        return self.model.derivative(rate)

    def initial_guess(self) -> float:
        """Starting rate for Newton-Raphson."""
        if self.config.initial_guess is not None:
            return self.config.initial_guess

        if self.config.guess_strategy is GuessStrategy.SIGN_OF_TOTAL:
            return sign(self.summary.total) / 100

        years = self.summary.years(self.config.days_per_year)
        return float(self.summary.total / self.summary.deposits) / years

    def xirr(self) -> float:
        """
        Calculate the rate of return of the transactions.

        Returns:
            XIRR as a decimal fraction (0.1 for 10%)

        Raises:
            NewtonRaphsonError: if Newton-Raphson hits a zero derivative,
                overflows, or does not converge
            RuntimeError: if called more than once
        """
        if self._solved:
            raise RuntimeError("XIRRCalculator instances can only be solved once")
        self._solved = True

        if self.summary.is_total_loss:
            logger.debug("Largest cash flow is zero, returning total loss")
            return TOTAL_LOSS

        guess = self.initial_guess()
        logger.debug(
            "Solving XIRR for %d transactions from %s to %s, guess %r",
            self.summary.count, self.summary.start, self.summary.end, guess
        )

        solver = NewtonRaphson(
            self.present_value,
            self.derivative,
            tolerance=self.config.tolerance,
            iterations=self.config.max_iterations,
        )
        return solver.find_root(guess)


def solve(
    transactions: Iterable[Transaction],
    config: Optional[XIRRConfig] = None
) -> float:
    """
    Calculate XIRR of the transactions.

    Args:
        transactions: Transactions to analyse
        config: Solver options

    Returns:
        XIRR as float
    """
    return XIRRCalculator(transactions, config).xirr()


def calculate_xirr(
    dates: Sequence[DateLike],
    amounts: Sequence[Number],
    config: Optional[XIRRConfig] = None
) -> float:
    """
    Convenience function to calculate XIRR.

    Args:
        dates: List of cash flow dates (date, datetime or string)
        amounts: List of cash flow amounts

    Returns:
        XIRR as float
    """
    if len(dates) != len(amounts):
        raise ValueError("Dates and amounts must have same length")

    transactions = [Transaction(a, d) for d, a in zip(dates, amounts)]
    return solve(transactions, config)
