"""
Classic three-term SGD test objective.

    f_0(x) = -exp(-|x[0]|)
    f_1(x) = x[1] ** 2
    f_2(x) = x[2] ** 4 + 3 * x[2] ** 2

The global minimum is at the origin with objective value -1 (sum) or -1/3
(mean). The first term is non-smooth at 0, which makes it a useful check that
an optimizer settles rather than oscillates.
"""

from __future__ import annotations

import numpy as np


class SGDTestFunction:
    """
    Three sub-functions in three dimensions, minimized at the origin.
    """

    def num_functions(self) -> int:
        return 3

    def initial_point(self) -> np.ndarray:
        return np.array([6.0, -45.6, 6.2], dtype=np.float64)

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        if i == 0:
            return float(-np.exp(-np.abs(iterate[0])))
        if i == 1:
            return float(iterate[1] ** 2)
        if i == 2:
            return float(iterate[2] ** 4 + 3.0 * iterate[2] ** 2)
        raise IndexError(f"function index out of range: {i}")

    def gradient(self, iterate: np.ndarray, i: int) -> np.ndarray:
        g = np.zeros_like(iterate, dtype=np.float64)
        if i == 0:
            # d/dx -exp(-|x|) = sign(x) * exp(-|x|); subgradient +1 at 0
            g[0] = np.exp(-iterate[0]) if iterate[0] >= 0 else -np.exp(iterate[0])
        elif i == 1:
            g[1] = 2.0 * iterate[1]
        elif i == 2:
            g[2] = 4.0 * iterate[2] ** 3 + 6.0 * iterate[2]
        else:
            raise IndexError(f"function index out of range: {i}")
        return g
