"""Calculator modules for the XIRR calculator."""

from .newton_raphson import NewtonRaphson
from .outcomes import (
    CalculationState,
    Converged,
    ZeroDerivative,
    Overflow,
    Nonconvergence,
)
from .cash_flow_model import CashFlowModel, Investment
from .xirr_calculator import XIRRCalculator, solve, calculate_xirr

__all__ = [
    "NewtonRaphson",
    "CalculationState",
    "Converged",
    "ZeroDerivative",
    "Overflow",
    "Nonconvergence",
    "CashFlowModel",
    "Investment",
    "XIRRCalculator",
    "solve",
    "calculate_xirr",
]
