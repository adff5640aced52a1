"""Results of a Newton-Raphson run.

A run ends in exactly one of four cases. ``Converged`` carries the root;
the three failure cases carry what was known when iteration stopped.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..errors import NewtonRaphsonError


@dataclass(frozen=True)
class CalculationState:
    """Snapshot of the iteration at the moment it failed."""
    guess: float
    iteration: int
    candidate: float
    value: float
    derivative_value: Optional[float] = None

    def __str__(self) -> str:
        return (
            f"guess={self.guess!r}, iteration={self.iteration}, "
            f"candidate={self.candidate!r}, value={self.value!r}, "
            f"derivative={self.derivative_value!r}"
        )


@dataclass(frozen=True)
class Converged:
    """The function reached the target within tolerance."""
    value: float
    iteration: int = 0

    succeeded = True
    message = "Newton-Raphson converged."

    def unwrap(self) -> float:
        return self.value

    def describe(self) -> str:
        return f"root={self.value!r}, iteration={self.iteration}"


@dataclass(frozen=True)
class ZeroDerivative:
    """The derivative was exactly zero at the current candidate."""
    state: CalculationState

    succeeded = False
    message = "Newton-Raphson failed due to zero-valued derivative."

    @property
    def guess(self) -> float:
        return self.state.guess

    def unwrap(self) -> float:
        raise NewtonRaphsonError(self)

    def describe(self) -> str:
        return str(self.state)


@dataclass(frozen=True)
class Overflow:
    """A non-finite value appeared in the function, slope or candidate."""
    state: CalculationState

    succeeded = False
    message = "Newton-Raphson failed due to floating-point overflow."

    @property
    def guess(self) -> float:
        return self.state.guess

    def unwrap(self) -> float:
        raise NewtonRaphsonError(self)

    def describe(self) -> str:
        return str(self.state)


@dataclass(frozen=True)
class Nonconvergence:
    """The iteration bound was exhausted."""
    guess: float
    iterations: int

    succeeded = False

    @property
    def message(self) -> str:
        return f"Newton-Raphson failed to converge within {self.iterations} iterations."

    def unwrap(self) -> float:
        raise NewtonRaphsonError(self)

    def describe(self) -> str:
        return f"guess={self.guess!r}, iterations={self.iterations}"


Failure = Union[ZeroDerivative, Overflow, Nonconvergence]
Outcome = Union[Converged, ZeroDerivative, Overflow, Nonconvergence]
