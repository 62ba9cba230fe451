"""
L2-regularized logistic regression as a decomposable objective.

Each data point contributes one sub-function, so any stochopt optimizer can
train a binary linear classifier directly.

Layout
------
- ``predictors`` has shape ``(dims, points)``: one column per data point.
- ``responses`` has shape ``(points,)`` with labels in ``{0, 1}``.
- Parameters have shape ``(dims + 1,)``; element 0 is the intercept.

Objective
---------
For point ``i`` with features ``x`` and label ``y``:

    z      = p[0] + p[1:] . x
    f_i(p) = lambda / (2 n) * ||p[1:]||^2 - log(sigmoid(z))        if y == 1
    f_i(p) = lambda / (2 n) * ||p[1:]||^2 - log(1 - sigmoid(z))    if y == 0

The intercept is not regularized. Log-probabilities are computed with
``np.logaddexp`` so large margins do not overflow.
"""

from __future__ import annotations

import numpy as np


def _sigmoid(z: np.ndarray) -> np.ndarray:
    # tanh form is stable for large |z|
    return 0.5 * (1.0 + np.tanh(0.5 * z))


class LogisticRegressionFunction:
    """
    Per-point logistic loss with L2 penalty on the non-intercept weights.

    Parameters
    ----------
    predictors : np.ndarray
        Training features, shape ``(dims, points)``.
    responses : np.ndarray
        Binary labels, shape ``(points,)``.
    lambda_ : float, optional
        L2 regularization strength. Defaults to 0.0.

    Raises
    ------
    ValueError
        If ``predictors`` is not 2-D or the number of responses does not
        match the number of points.
    """

    def __init__(
        self, predictors: np.ndarray, responses: np.ndarray, lambda_: float = 0.0
    ) -> None:
        predictors = np.asarray(predictors, dtype=np.float64)
        responses = np.asarray(responses).reshape(-1)
        if predictors.ndim != 2:
            raise ValueError(
                f"predictors must be 2-D (dims, points), got shape {predictors.shape}"
            )
        if responses.shape[0] != predictors.shape[1]:
            raise ValueError(
                f"expected {predictors.shape[1]} responses, got {responses.shape[0]}"
            )

        self.predictors = predictors
        self.responses = responses.astype(np.float64)
        self.lambda_ = float(lambda_)

    def num_functions(self) -> int:
        return int(self.predictors.shape[1])

    @property
    def dims(self) -> int:
        return int(self.predictors.shape[0])

    def initial_point(self) -> np.ndarray:
        """Return all-zero parameters (intercept included)."""
        return np.zeros(self.dims + 1, dtype=np.float64)

    def _regularization(self, iterate: np.ndarray) -> float:
        w = iterate[1:]
        return self.lambda_ / (2.0 * self.num_functions()) * float(w @ w)

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        x = self.predictors[:, i]
        z = iterate[0] + iterate[1:] @ x

        if self.responses[i] == 1.0:
            nll = np.logaddexp(0.0, -z)
        else:
            nll = np.logaddexp(0.0, z)
        return self._regularization(iterate) + float(nll)

    def gradient(self, iterate: np.ndarray, i: int) -> np.ndarray:
        x = self.predictors[:, i]
        z = iterate[0] + iterate[1:] @ x
        residual = _sigmoid(z) - self.responses[i]

        g = np.empty_like(iterate, dtype=np.float64)
        g[0] = residual
        g[1:] = residual * x + (self.lambda_ / self.num_functions()) * iterate[1:]
        return g

    def evaluate_all(self, iterate: np.ndarray) -> float:
        """
        Return the full (summed) objective over every data point.
        """
        z = iterate[0] + iterate[1:] @ self.predictors
        nll = np.where(
            self.responses == 1.0, np.logaddexp(0.0, -z), np.logaddexp(0.0, z)
        )
        return self.num_functions() * self._regularization(iterate) + float(nll.sum())

    @staticmethod
    def predict(
        iterate: np.ndarray, predictors: np.ndarray, decision_boundary: float = 0.5
    ) -> np.ndarray:
        """
        Classify the columns of ``predictors`` with parameters ``iterate``.

        Points whose predicted probability is ``>= decision_boundary`` are
        labelled 1.
        """
        predictors = np.asarray(predictors, dtype=np.float64)
        probabilities = _sigmoid(iterate[0] + iterate[1:] @ predictors)
        return (probabilities >= decision_boundary).astype(np.int64)

    @classmethod
    def compute_accuracy(
        cls,
        iterate: np.ndarray,
        predictors: np.ndarray,
        responses: np.ndarray,
        decision_boundary: float = 0.5,
    ) -> float:
        """
        Return the percentage (0-100) of points classified correctly.
        """
        predictions = cls.predict(iterate, predictors, decision_boundary)
        responses = np.asarray(responses).reshape(-1)
        return 100.0 * float(np.mean(predictions == responses))
