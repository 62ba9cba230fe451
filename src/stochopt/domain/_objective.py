"""
Domain-level contract for decomposable objective functions.

A decomposable objective is a function expressible as an average (or sum) over
``n`` independently evaluable sub-functions, as in empirical-risk minimization
where each sub-function is the loss on a single data point.

Notes
-----
- The contract is structural: any object exposing the three methods below is
  accepted by stochopt optimizers; no inheritance is required.
- Indices passed to `evaluate` and `gradient` are always in ``[0, n)`` where
  ``n = num_functions()``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .types._numpy import NDArrayLike


@runtime_checkable
class IDecomposableFunction(Protocol):
    """
    Decomposable objective interface contract.

    Required methods
    ----------------
    - `num_functions()` returns the number of sub-functions ``n``.
    - `evaluate(iterate, i)` returns the loss contribution of sub-function
      ``i`` at ``iterate``.
    - `gradient(iterate, i)` returns the gradient of sub-function ``i`` at
      ``iterate``, with the same shape as ``iterate``.
    """

    def num_functions(self) -> int:
        """
        Return the number of sub-functions (e.g., the dataset size).
        """
        ...

    def evaluate(self, iterate: NDArrayLike, i: int) -> float:
        """
        Evaluate sub-function ``i`` at ``iterate``.

        Implementations must not modify ``iterate``.
        """
        ...

    def gradient(self, iterate: NDArrayLike, i: int) -> NDArrayLike:
        """
        Compute the gradient of sub-function ``i`` at ``iterate``.

        The returned array is owned by the caller and may be consumed (but is
        not modified) by the update policy.
        """
        ...
