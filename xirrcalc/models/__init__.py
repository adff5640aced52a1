"""Data models for the XIRR calculator."""

from .enums import GuessStrategy, DayCount
from .transaction import Transaction
from .summary import CashFlowSummary

__all__ = [
    "GuessStrategy",
    "DayCount",
    "Transaction",
    "CashFlowSummary",
]
