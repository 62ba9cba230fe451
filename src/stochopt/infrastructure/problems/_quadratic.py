"""
Separable quadratic test objective.

Each sub-function is a one-dimensional squared error on its own coordinate,

    f_i(x) = (x[i] - m[i]) ** 2,    i in [0, n)

so the objective is convex with the unique minimizer ``m`` and every gradient
touches exactly one coordinate.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np


class SeparableQuadraticFunction:
    """
    Sum of independent one-dimensional squared-error terms.

    Parameters
    ----------
    minimizer : Sequence[float], optional
        Location of the minimum. Its length is both the problem dimension and
        the number of sub-functions. Defaults to ``(0, 0, 0)``.
    """

    def __init__(self, minimizer: Optional[Sequence[float]] = None) -> None:
        if minimizer is None:
            minimizer = (0.0, 0.0, 0.0)
        self.minimizer = np.asarray(minimizer, dtype=np.float64).reshape(-1)

    def num_functions(self) -> int:
        return int(self.minimizer.shape[0])

    def initial_point(self) -> np.ndarray:
        """Return the conventional starting point (all ones)."""
        return np.ones_like(self.minimizer)

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        diff = iterate[i] - self.minimizer[i]
        return float(diff * diff)

    def gradient(self, iterate: np.ndarray, i: int) -> np.ndarray:
        g = np.zeros_like(iterate, dtype=np.float64)
        g[i] = 2.0 * (iterate[i] - self.minimizer[i])
        return g
