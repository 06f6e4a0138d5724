import unittest

from qhoptim.domain import (
    ConfigurationError,
    DimensionMismatchError,
    IDecomposableFunction,
    IOptimizer,
    IUpdatePolicy,
)
from qhoptim.infrastructure.functions import LinearRegressionFunction, SphereFunction
from qhoptim.infrastructure.optimizers import SGD, Adam, QHAdam
from qhoptim.infrastructure.policies import AdamUpdate, QHAdamUpdate, VanillaUpdate


class TestErrors(unittest.TestCase):
    def test_dimension_mismatch_hierarchy(self):
        err = DimensionMismatchError(3, 2)
        self.assertIsInstance(err, ConfigurationError)
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.expected, 3)
        self.assertEqual(err.actual, 2)
        self.assertIn("3", str(err))


class TestProtocols(unittest.TestCase):
    def test_policies_satisfy_update_policy(self):
        for policy in (VanillaUpdate(), AdamUpdate(), QHAdamUpdate()):
            self.assertIsInstance(policy, IUpdatePolicy)

    def test_functions_satisfy_decomposable_function(self):
        self.assertIsInstance(SphereFunction(2), IDecomposableFunction)
        self.assertIsInstance(
            LinearRegressionFunction([[1.0, 2.0]], [1.0]), IDecomposableFunction
        )

    def test_optimizers_satisfy_optimizer(self):
        for opt in (SGD(QHAdamUpdate()), Adam(), QHAdam()):
            self.assertIsInstance(opt, IOptimizer)


if __name__ == "__main__":
    unittest.main()
