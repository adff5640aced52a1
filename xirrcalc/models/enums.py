"""Enumeration types for the XIRR calculator."""

from enum import Enum


class GuessStrategy(Enum):
    """How the initial Newton-Raphson guess is derived when none is supplied."""

    # (total / deposits) / years
    RETURN_OVER_DEPOSITS = "return_over_deposits"

    # sign(total) / 100
    SIGN_OF_TOTAL = "sign_of_total"

    @classmethod
    def from_string(cls, strategy_str: str) -> "GuessStrategy":
        """Convert string to GuessStrategy, accepting names or values."""
        normalized = strategy_str.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown guess strategy: {strategy_str}")


class DayCount(Enum):
    """Common day-count denominators."""

    ACTUAL_365 = 365.0
    ACTUAL_360 = 360.0
    ACTUAL_365_25 = 365.25

    @classmethod
    def from_string(cls, convention_str: str) -> "DayCount":
        """Convert e.g. "actual_360" or "act/360" to a DayCount."""
        normalized = (
            convention_str.strip().upper()
            .replace("ACT/", "ACTUAL_")
            .replace("ACTUAL/", "ACTUAL_")
            .replace(".", "_")
        )
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Unknown day count convention: {convention_str}")
