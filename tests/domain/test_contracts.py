import unittest

import numpy as np

from stochopt.domain import IDecomposableFunction, IOptimizer, IUpdatePolicy
from stochopt.domain.types import NDArrayLike
from stochopt.infrastructure.optimizers import SGD, AdaGrad
from stochopt.infrastructure.update_policies import AdaGradUpdate, VanillaUpdate
from stochopt.infrastructure.problems import (
    LogisticRegressionFunction,
    SeparableQuadraticFunction,
    SGDTestFunction,
)


class TestUpdatePolicyProtocol(unittest.TestCase):
    def test_adagrad_update_conforms_to_iupdatepolicy(self):
        self.assertIsInstance(AdaGradUpdate(), IUpdatePolicy)

    def test_vanilla_update_conforms_to_iupdatepolicy(self):
        self.assertIsInstance(VanillaUpdate(), IUpdatePolicy)

    def test_plain_object_does_not_conform(self):
        self.assertNotIsInstance(object(), IUpdatePolicy)


class TestDecomposableFunctionProtocol(unittest.TestCase):
    def test_reference_problems_conform(self):
        problems = [
            SeparableQuadraticFunction(),
            SGDTestFunction(),
            LogisticRegressionFunction(np.zeros((2, 4)), np.array([0, 1, 0, 1])),
        ]
        for f in problems:
            with self.subTest(problem=type(f).__name__):
                self.assertIsInstance(f, IDecomposableFunction)


class TestOptimizerProtocol(unittest.TestCase):
    def test_sgd_conforms_to_ioptimizer(self):
        opt = SGD(SeparableQuadraticFunction())
        self.assertIsInstance(opt, IOptimizer)

    def test_adagrad_conforms_to_ioptimizer(self):
        opt = AdaGrad(SeparableQuadraticFunction())
        self.assertIsInstance(opt, IOptimizer)


class TestNDArrayLikeProtocol(unittest.TestCase):
    def test_numpy_array_conforms(self):
        self.assertIsInstance(np.zeros(3), NDArrayLike)

    def test_list_does_not_conform(self):
        self.assertNotIsInstance([0.0, 1.0], NDArrayLike)

    def test_minimal_array_wrapper_conforms(self):
        class Wrapped:
            def __init__(self, data):
                self._data = np.asarray(data, dtype=np.float64)

            @property
            def shape(self):
                return self._data.shape

            def __array__(self, dtype=None):
                return self._data

            def __isub__(self, other):
                self._data -= np.asarray(other)
                return self

            def __iadd__(self, other):
                self._data += np.asarray(other)
                return self

        self.assertIsInstance(Wrapped([1.0, 2.0]), NDArrayLike)


if __name__ == "__main__":
    unittest.main()
