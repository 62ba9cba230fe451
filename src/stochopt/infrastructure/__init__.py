"""
NumPy-backed implementations of the stochopt domain contracts.
"""

from ._config import SGDConfig
from .update_policies import UpdatePolicyRegistry, AdaGradUpdate, VanillaUpdate
from .optimizers import SGD, AdaGrad, RunHistory, Termination

__all__ = [
    SGDConfig.__name__,
    UpdatePolicyRegistry.__name__,
    AdaGradUpdate.__name__,
    VanillaUpdate.__name__,
    SGD.__name__,
    AdaGrad.__name__,
    RunHistory.__name__,
    Termination.__name__,
]
