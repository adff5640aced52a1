"""Exceptions raised by the XIRR calculator."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .calculators.outcomes import Failure


class XIRRError(Exception):
    """Base class for every error raised by xirrcalc."""


class InvalidTransactionsError(XIRRError, ValueError):
    """The transaction set cannot produce a rate of return."""


class NewtonRaphsonError(XIRRError, ArithmeticError):
    """
    Newton-Raphson iteration stopped without finding a root.

    The failure itself is described by ``outcome``, one of
    ``ZeroDerivative``, ``Overflow`` or ``Nonconvergence``. Callers wishing
    to retry (e.g. with a perturbed guess after a zero derivative) should
    inspect it with ``isinstance``.
    """

    def __init__(self, outcome: "Failure"):
        super().__init__(outcome.message)
        self.outcome = outcome

    @property
    def kind(self) -> str:
        """Name of the failure case."""
        return type(self.outcome).__name__

    @property
    def initial_guess(self) -> float:
        return self.outcome.guess

    @property
    def iteration(self) -> Optional[int]:
        state = getattr(self.outcome, "state", None)
        return state.iteration if state is not None else None

    @property
    def candidate(self) -> Optional[float]:
        state = getattr(self.outcome, "state", None)
        return state.candidate if state is not None else None

    @property
    def value(self) -> Optional[float]:
        state = getattr(self.outcome, "state", None)
        return state.value if state is not None else None

    @property
    def derivative_value(self) -> Optional[float]:
        state = getattr(self.outcome, "state", None)
        return state.derivative_value if state is not None else None

    @property
    def iterations(self) -> Optional[int]:
        """Iteration bound, only set when the method failed to converge."""
        return getattr(self.outcome, "iterations", None)

    def __str__(self) -> str:
        return f"{self.outcome.message} ({self.outcome.describe()})"
