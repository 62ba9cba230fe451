"""
Backend-agnostic contracts and error types for stochopt.

Nothing in this package imports NumPy; concrete implementations live in
`stochopt.infrastructure`.
"""

from ._errors import (
    PreconditionError,
    DimensionMismatchError,
    PolicyNotInitializedError,
    EmptyObjectiveError,
    OptimizerBusyError,
)
from ._objective import IDecomposableFunction
from ._update_policy import IUpdatePolicy
from ._optimizers import IOptimizer

__all__ = [
    PreconditionError.__name__,
    DimensionMismatchError.__name__,
    PolicyNotInitializedError.__name__,
    EmptyObjectiveError.__name__,
    OptimizerBusyError.__name__,
    IDecomposableFunction.__name__,
    IUpdatePolicy.__name__,
    IOptimizer.__name__,
]
