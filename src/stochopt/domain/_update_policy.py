"""
Domain-level contract for optimizer update rules.

An update policy turns a raw gradient into a change of the iterate. The
stochastic driver depends only on this contract, so adaptive rules (AdaGrad)
and the plain gradient step can be substituted without touching the driver.

Notes
-----
- Policies may hold per-coordinate state (e.g., accumulated squared
  gradients). That state is owned by the policy and is (re)allocated by
  `initialize()` at the start of every optimization run.
- Policies are not required to be thread-safe; a single run drives a policy
  from a single thread.
"""

from __future__ import annotations

from typing import Protocol, Tuple, Union, runtime_checkable

from .types._numpy import NDArrayLike

Shape = Union[int, Tuple[int, ...]]


@runtime_checkable
class IUpdatePolicy(Protocol):
    """
    Update rule interface contract.

    Required methods
    ----------------
    - `initialize(shape)` prepares (or resets) policy state for iterates of
      the given shape.
    - `update(iterate, step_size, gradient)` applies one step to ``iterate``
      in place.
    """

    def initialize(self, shape: Shape) -> None:
        """
        Allocate or reset per-run state for iterates of ``shape``.

        Calling this again discards all history accumulated so far.
        """
        ...

    def update(
        self, iterate: NDArrayLike, step_size: float, gradient: NDArrayLike
    ) -> None:
        """
        Apply one update step to ``iterate`` in place.

        Implementations should raise a precondition error if the shapes of
        ``iterate`` or ``gradient`` differ from the initialized shape.
        """
        ...
