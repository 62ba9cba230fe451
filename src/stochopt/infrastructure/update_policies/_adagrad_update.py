"""
AdaGrad update rule.

AdaGrad rescales every coordinate of the gradient by the inverse square root
of that coordinate's accumulated squared-gradient history. Coordinates that
receive large or frequent gradients get small effective step sizes, while
rarely-updated (sparse) coordinates keep large ones.

Reference
---------
Duchi, Hazan and Singer, "Adaptive subgradient methods for online learning
and stochastic optimization", JMLR 12 (2011), 2121-2159.

Design notes
------------
- The accumulator is seeded with ``epsilon`` rather than zero, so the
  denominator is bounded below by ``sqrt(epsilon)`` from the very first step.
- The squared gradient is added *before* the division.
- The rule is strictly element-wise: no coordinate's scaling depends on any
  other coordinate.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ...domain._errors import PolicyNotInitializedError
from ...domain._update_policy import Shape
from ._base import UpdatePolicyRegistry, as_shape, check_operands


@UpdatePolicyRegistry.register_policy("adagrad")
class AdaGradUpdate:
    """
    AdaGrad update policy.

    Update rule
    -----------
    For each coordinate ``i`` with gradient ``g``:

        acc[i] <- acc[i] + g[i] ** 2
        p[i]   <- p[i] - step_size * g[i] / sqrt(acc[i])

    Parameters
    ----------
    epsilon : float, optional
        Initial value of every accumulator entry. Not validated; a
        non-positive value produces non-finite updates. Defaults to 1e-8.

    Notes
    -----
    - A zero gradient component leaves both the accumulator and the iterate
      coordinate unchanged.
    - State is allocated by `initialize()`; calling it again resets history.
    """

    def __init__(self, epsilon: float = 1e-8) -> None:
        self.epsilon = float(epsilon)
        self._squared_gradient: Optional[np.ndarray] = None

    @property
    def squared_gradient(self) -> Optional[np.ndarray]:
        """
        The accumulated squared gradients, or None before `initialize()`.
        """
        return self._squared_gradient

    @property
    def shape(self) -> Optional[Tuple[int, ...]]:
        """Shape the accumulator was allocated for."""
        if self._squared_gradient is None:
            return None
        return self._squared_gradient.shape

    def initialize(self, shape: Shape) -> None:
        """
        Allocate the accumulator for iterates of ``shape`` and fill it with
        ``epsilon``.

        Parameters
        ----------
        shape : int or tuple[int, ...]
            Dimension (or full shape) of the iterate to be optimized.
        """
        self._squared_gradient = np.full(
            as_shape(shape), self.epsilon, dtype=np.float64
        )

    def update(
        self, iterate: np.ndarray, step_size: float, gradient: np.ndarray
    ) -> None:
        """
        Apply one AdaGrad step to ``iterate`` in place.

        Parameters
        ----------
        iterate : np.ndarray
            Current point; modified in place.
        step_size : float
            Global step size scaling every coordinate.
        gradient : np.ndarray
            Gradient at ``iterate``; same shape as ``iterate``.

        Raises
        ------
        PolicyNotInitializedError
            If `initialize()` has not been called.
        DimensionMismatchError
            If ``iterate`` or ``gradient`` does not match the initialized shape.
        """
        if self._squared_gradient is None:
            raise PolicyNotInitializedError(type(self).__name__)

        gradient = np.asarray(gradient)
        check_operands(self._squared_gradient.shape, iterate, gradient)

        self._squared_gradient += gradient * gradient
        iterate -= step_size * gradient / np.sqrt(self._squared_gradient)
