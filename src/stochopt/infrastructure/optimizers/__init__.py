"""
Optimizer public API.

Exports
-------
- SGD:
    Generic stochastic iteration driver with a pluggable update policy.
- AdaGrad:
    `SGD` wired to `AdaGradUpdate`.
- RunHistory, Termination:
    Diagnostics recorded for the most recent run of an optimizer.
"""

from ._history import RunHistory, Termination
from ._sgd import SGD
from ._adagrad import AdaGrad

__all__ = [
    SGD.__name__,
    AdaGrad.__name__,
    RunHistory.__name__,
    Termination.__name__,
]
