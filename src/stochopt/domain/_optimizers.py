"""
Domain-level optimizer contracts for stochopt.

This module defines the `IOptimizer` protocol, which specifies the minimal
interface required for optimizer implementations (e.g., SGD, AdaGrad).

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Optimizers own the objective they minimize and mutate the caller's iterate
  in place. How gradients are computed is the objective's business and is
  outside the scope of this protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ._objective import IDecomposableFunction
from .types._numpy import NDArrayLike


@runtime_checkable
class IOptimizer(Protocol):
    """
    Optimizer interface contract.

    An optimizer holds a reference to a decomposable objective and minimizes
    it starting from a caller-supplied iterate.

    Required members
    ----------------
    - `optimize(iterate)` runs one optimization and returns the final
      objective value.
    - `function` exposes the objective being minimized.
    """

    def optimize(self, iterate: NDArrayLike) -> float:
        """
        Minimize the objective starting at ``iterate``.

        ``iterate`` is modified in place to hold the final point; the mean
        objective value at that point is returned.
        """
        ...

    @property
    def function(self) -> IDecomposableFunction:
        """
        Return the objective minimized by this optimizer.
        """
        ...
