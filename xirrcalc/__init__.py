"""Extended Internal Rate of Return (XIRR) of dated cash flows."""

from .errors import XIRRError, InvalidTransactionsError, NewtonRaphsonError
from .models import Transaction, CashFlowSummary, GuessStrategy, DayCount
from .config import Settings, settings, XIRRConfig
from .calculators import (
    NewtonRaphson,
    CashFlowModel,
    XIRRCalculator,
    solve,
    calculate_xirr,
)

__version__ = "1.0.0"

__all__ = [
    "XIRRError",
    "InvalidTransactionsError",
    "NewtonRaphsonError",
    "Transaction",
    "CashFlowSummary",
    "GuessStrategy",
    "DayCount",
    "Settings",
    "settings",
    "XIRRConfig",
    "NewtonRaphson",
    "CashFlowModel",
    "XIRRCalculator",
    "solve",
    "calculate_xirr",
]
