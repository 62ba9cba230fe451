from __future__ import annotations

import unittest

import numpy as np

from stochopt.domain import OptimizerBusyError
from stochopt.infrastructure.optimizers import AdaGrad, Termination
from stochopt.infrastructure.update_policies import AdaGradUpdate, VanillaUpdate
from stochopt.infrastructure.problems import (
    LogisticRegressionFunction,
    SeparableQuadraticFunction,
    SGDTestFunction,
)


def two_gaussian_dataset(rng: np.random.Generator, points_per_class: int = 500):
    """Two unit-covariance 3-D Gaussian clusters centred at 1 and 9."""
    g1 = rng.normal(loc=1.0, scale=1.0, size=(3, points_per_class))
    g2 = rng.normal(loc=9.0, scale=1.0, size=(3, points_per_class))
    data = np.concatenate([g1, g2], axis=1)
    responses = np.concatenate(
        [np.zeros(points_per_class, dtype=np.int64), np.ones(points_per_class, dtype=np.int64)]
    )
    return data, responses


class TestAdaGradConfiguration(unittest.TestCase):
    def test_defaults(self):
        opt = AdaGrad(SeparableQuadraticFunction())
        self.assertEqual(opt.step_size, 0.01)
        self.assertEqual(opt.epsilon, 1e-8)
        self.assertEqual(opt.max_iterations, 100000)
        self.assertEqual(opt.tolerance, 1e-5)
        self.assertTrue(opt.shuffle)
        self.assertIsInstance(opt.update_policy, AdaGradUpdate)

    def test_setters(self):
        opt = AdaGrad(SeparableQuadraticFunction())
        opt.step_size = 0.5
        opt.epsilon = 2.0
        opt.max_iterations = 0
        opt.tolerance = 1e-3
        opt.shuffle = False

        self.assertEqual(opt.step_size, 0.5)
        self.assertEqual(opt.epsilon, 2.0)
        self.assertEqual(opt.update_policy.epsilon, 2.0)
        self.assertEqual(opt.max_iterations, 0)
        self.assertEqual(opt.tolerance, 1e-3)
        self.assertFalse(opt.shuffle)

    def test_update_policy_accepts_only_adagrad(self):
        opt = AdaGrad(SeparableQuadraticFunction(), epsilon=0.25)
        installed_policy = opt.update_policy

        with self.assertRaises(TypeError):
            opt.update_policy = "vanilla"
        with self.assertRaises(TypeError):
            opt.update_policy = VanillaUpdate()

        self.assertIs(opt.update_policy, installed_policy)
        self.assertEqual(opt.epsilon, 0.25)

    def test_update_policy_replaced_by_adagrad_instance_or_name(self):
        opt = AdaGrad(SeparableQuadraticFunction())

        custom = AdaGradUpdate(3.0)
        opt.update_policy = custom
        self.assertIs(opt.update_policy, custom)
        self.assertEqual(opt.epsilon, 3.0)

        opt.update_policy = "adagrad"
        self.assertIsInstance(opt.update_policy, AdaGradUpdate)
        self.assertIsNot(opt.update_policy, custom)

    def test_epsilon_cannot_change_during_a_run(self):
        opt = None

        class Meddling(SeparableQuadraticFunction):
            def evaluate(self, iterate, i):
                opt.epsilon = 1.0
                return 0.0

        opt = AdaGrad(Meddling(), max_iterations=5)
        with self.assertRaises(OptimizerBusyError):
            opt.optimize(np.ones(3))

    def test_accumulator_seeded_with_epsilon_each_run(self):
        f = SeparableQuadraticFunction()
        opt = AdaGrad(f, step_size=0.1, epsilon=0.5, max_iterations=3, shuffle=False)

        opt.optimize(f.initial_point())
        first = opt.update_policy.squared_gradient.copy()
        opt.optimize(f.initial_point())
        second = opt.update_policy.squared_gradient

        # identical runs from a reset accumulator end in identical state
        np.testing.assert_array_equal(first, second)
        self.assertTrue(np.all(first > 0.5))


class TestAdaGradConvergence(unittest.TestCase):
    def test_simple_squared_error_function(self):
        f = SeparableQuadraticFunction()
        opt = AdaGrad(
            f,
            step_size=0.99,
            epsilon=1.0,
            max_iterations=5000000,
            tolerance=1e-9,
            shuffle=True,
            seed=0,
        )

        coordinates = f.initial_point()
        np.testing.assert_array_equal(coordinates, [1.0, 1.0, 1.0])
        result = opt.optimize(coordinates)

        np.testing.assert_allclose(coordinates, [0.0, 0.0, 0.0], rtol=0.0, atol=0.003)
        self.assertIs(opt.history.termination, Termination.CONVERGED)
        self.assertLess(result, 1e-5)

    def test_quadratic_with_offset_minimizer(self):
        minimizer = [3.0, -2.0, 0.5, 10.0]
        f = SeparableQuadraticFunction(minimizer)
        opt = AdaGrad(
            f, step_size=0.99, epsilon=1.0, max_iterations=0, tolerance=1e-9, seed=3
        )

        x = f.initial_point()
        opt.optimize(x)

        np.testing.assert_allclose(x, minimizer, rtol=0.0, atol=0.003)

    def test_unshuffled_runs_are_bit_identical(self):
        f = SGDTestFunction()
        results = []
        for _ in range(2):
            x = f.initial_point()
            value = AdaGrad(
                f, step_size=0.99, epsilon=1.0, max_iterations=3000, shuffle=False
            ).optimize(x)
            results.append((x, value))

        self.assertTrue(np.array_equal(results[0][0], results[1][0]))
        self.assertEqual(results[0][1], results[1][1])

    def test_sgd_test_function_reaches_minimum_in_smooth_terms(self):
        f = SGDTestFunction()
        x = f.initial_point()
        start = np.mean([f.evaluate(x, i) for i in range(3)])

        result = AdaGrad(
            f, step_size=0.99, epsilon=1.0, max_iterations=30000, tolerance=1e-12, seed=5
        ).optimize(x)

        self.assertLess(result, start)
        self.assertLessEqual(abs(x[1]), 0.003)
        self.assertLessEqual(abs(x[2]), 0.003)


class TestAdaGradLogisticRegression(unittest.TestCase):
    def test_two_cluster_classification(self):
        rng = np.random.default_rng(2018)

        data, responses = two_gaussian_dataset(rng)
        order = rng.permutation(data.shape[1])
        shuffled_data = data[:, order]
        shuffled_responses = responses[order]

        test_data, test_responses = two_gaussian_dataset(rng)

        f = LogisticRegressionFunction(shuffled_data, shuffled_responses, lambda_=0.5)
        opt = AdaGrad(
            f,
            step_size=0.99,
            epsilon=1e-8,
            max_iterations=50000,
            tolerance=1e-9,
            shuffle=True,
            seed=11,
        )
        parameters = f.initial_point()
        initial_loss = f.evaluate_all(parameters)
        result = opt.optimize(parameters)

        final_loss = f.evaluate_all(parameters)
        self.assertLess(final_loss, initial_loss)
        self.assertAlmostEqual(result, final_loss / f.num_functions(), places=9)

        acc = f.compute_accuracy(parameters, data, responses)
        self.assertGreaterEqual(acc, 99.7)

        test_acc = f.compute_accuracy(parameters, test_data, test_responses)
        self.assertGreaterEqual(test_acc, 99.4)


if __name__ == "__main__":
    unittest.main()
