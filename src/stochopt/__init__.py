"""
stochopt: stochastic optimization of decomposable objectives.

Quick start
-----------
    import numpy as np
    from stochopt import AdaGrad
    from stochopt.infrastructure.problems import SeparableQuadraticFunction

    f = SeparableQuadraticFunction()
    x = f.initial_point()
    AdaGrad(f, step_size=0.99, epsilon=1.0, tolerance=1e-9).optimize(x)
"""

from .domain import (
    IDecomposableFunction,
    IUpdatePolicy,
    IOptimizer,
    PreconditionError,
    DimensionMismatchError,
    PolicyNotInitializedError,
    EmptyObjectiveError,
    OptimizerBusyError,
)
from .infrastructure import (
    SGDConfig,
    UpdatePolicyRegistry,
    AdaGradUpdate,
    VanillaUpdate,
    SGD,
    AdaGrad,
    RunHistory,
    Termination,
)

__version__ = "0.1.0"

__all__ = [
    "IDecomposableFunction",
    "IUpdatePolicy",
    "IOptimizer",
    "PreconditionError",
    "DimensionMismatchError",
    "PolicyNotInitializedError",
    "EmptyObjectiveError",
    "OptimizerBusyError",
    "SGDConfig",
    "UpdatePolicyRegistry",
    "AdaGradUpdate",
    "VanillaUpdate",
    "SGD",
    "AdaGrad",
    "RunHistory",
    "Termination",
]
