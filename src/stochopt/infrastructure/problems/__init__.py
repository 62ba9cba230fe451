"""
Reference decomposable objectives.

These are concrete `IDecomposableFunction` implementations used to exercise
the optimizers end to end; none of the optimizers depend on them.
"""

from ._quadratic import SeparableQuadraticFunction
from ._sgd_test_function import SGDTestFunction
from ._logistic_regression import LogisticRegressionFunction

__all__ = [
    SeparableQuadraticFunction.__name__,
    SGDTestFunction.__name__,
    LogisticRegressionFunction.__name__,
]
