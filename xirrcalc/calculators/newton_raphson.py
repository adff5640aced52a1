"""Newton-Raphson root finder."""

import logging
from typing import Callable

from ..utils.math_utils import is_finite
from .outcomes import (
    CalculationState,
    Converged,
    Nonconvergence,
    Outcome,
    Overflow,
    ZeroDerivative,
)

logger = logging.getLogger(__name__)

# Default tolerance
TOLERANCE = 1e-7
MAX_ITERATIONS = 10_000


class NewtonRaphson:
    """
    Find inputs of a scalar function using Newton-Raphson iteration.

    Starting at a guess x₀, the candidate is repeatedly updated as

        xₙ₊₁ = xₙ - (f(xₙ) - target) / f'(xₙ)

    until |f(xₙ) - target| < tolerance.

    The iteration stops early when the derivative is exactly zero or when
    the function value, the derivative or the next candidate is NaN or
    infinite.
    """

    def __init__(
        self,
        func: Callable[[float], float],
        derivative: Callable[[float], float],
        tolerance: float = TOLERANCE,
        iterations: int = MAX_ITERATIONS
    ):
        """
        Initialize the root finder.

        Args:
            func: The function
            derivative: The derivative of the function
            tolerance: Required precision of the function value
            iterations: Maximum number of iterations
        """
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        if not isinstance(iterations, int) or iterations < 1:
            raise ValueError(f"iterations must be an integer of at least 1, got {iterations!r}")
        self.func = func
        self.derivative = derivative
        self.tolerance = tolerance
        self.iterations = iterations

    def solve(self, target: float, guess: float) -> Outcome:
        """
        Run the iteration and report how it ended.

        Args:
            target: The target value of the function
            guess: Value to start the algorithm with

        Returns:
            Converged with the input x such that |f(x) - target| < tolerance,
            or one of ZeroDerivative, Overflow, Nonconvergence
        """
        candidate = guess

        for i in range(self.iterations):
            value = self.func(candidate) - target
            if not is_finite(value):
                return Overflow(CalculationState(guess, i, candidate, value))

            if abs(value) < self.tolerance:
                logger.debug("Converged to %r after %d iterations", candidate, i)
                return Converged(candidate, i)

            slope = self.derivative(candidate)
            if slope == 0.0:
                return ZeroDerivative(CalculationState(guess, i, candidate, value, slope))

            next_candidate = candidate - value / slope
            if not is_finite(slope, next_candidate):
                return Overflow(CalculationState(guess, i, candidate, value, slope))

            candidate = next_candidate

        logger.debug("No convergence from guess %r in %d iterations", guess, self.iterations)
        return Nonconvergence(guess, self.iterations)

    def inverse(self, target: float, guess: float) -> float:
        """
        Find the input x with |f(x) - target| < tolerance, starting at guess.

        Raises:
            NewtonRaphsonError: if the derivative is zero, a value overflows,
                or the method fails to converge in the given iterations
        """
        return self.solve(target, guess).unwrap()

    def find_root(self, guess: float) -> float:
        """Equivalent to ``inverse(0, guess)``."""
        return self.inverse(0.0, guess)
