import unittest
import numpy as np

from qhoptim.infrastructure.functions import LinearRegressionFunction, SphereFunction


def _numerical_gradient(f, x, indices, h=1e-6):
    grad = np.zeros_like(x)
    for i in range(x.size):
        e = np.zeros_like(x)
        e.flat[i] = h
        grad.flat[i] = (f.evaluate(x + e, indices) - f.evaluate(x - e, indices)) / (2 * h)
    return grad


class TestSphereFunction(unittest.TestCase):
    def test_counts(self):
        f = SphereFunction(4)
        self.assertEqual(f.num_functions(), 4)
        self.assertEqual(f.num_parameters(), 4)

    def test_evaluate_batch(self):
        f = SphereFunction(3)
        x = np.array([1.0, -2.0, 3.0])
        self.assertEqual(f.evaluate(x, np.array([0, 2])), 10.0)
        self.assertEqual(f.evaluate(x, np.arange(3)), 14.0)

    def test_gradient_only_touches_batch(self):
        f = SphereFunction(3)
        x = np.array([1.0, -2.0, 3.0])
        obj, grad = f.evaluate_with_gradient(x, np.array([1]))
        self.assertEqual(obj, 4.0)
        np.testing.assert_array_equal(grad, [0.0, -4.0, 0.0])

    def test_gradient_keeps_iterate_shape(self):
        f = SphereFunction(4)
        x = np.arange(4, dtype=np.float64).reshape(2, 2)
        _, grad = f.evaluate_with_gradient(x, np.arange(4))
        np.testing.assert_array_equal(grad, 2.0 * x)

    def test_invalid_dimension_raises(self):
        with self.assertRaises(ValueError):
            SphereFunction(0)


class TestLinearRegressionFunction(unittest.TestCase):
    def setUp(self):
        rng = np.random.default_rng(1)
        self.X = rng.normal(size=(8, 3))
        self.y = rng.normal(size=8)
        self.f = LinearRegressionFunction(self.X, self.y)

    def test_counts(self):
        self.assertEqual(self.f.num_functions(), 8)
        self.assertEqual(self.f.num_parameters(), 3)

    def test_evaluate_matches_squared_residuals(self):
        w = np.array([0.5, -1.0, 2.0])
        idx = np.array([1, 4, 6])
        r = self.X[idx] @ w - self.y[idx]
        self.assertAlmostEqual(self.f.evaluate(w, idx), float(r @ r), places=12)

    def test_gradient_matches_finite_differences(self):
        w = np.array([0.5, -1.0, 2.0])
        idx = np.array([0, 3, 5, 7])
        obj, grad = self.f.evaluate_with_gradient(w, idx)

        self.assertAlmostEqual(obj, self.f.evaluate(w, idx), places=12)
        np.testing.assert_allclose(
            grad, _numerical_gradient(self.f, w, idx), rtol=1e-5, atol=1e-6
        )

    def test_column_iterate(self):
        w = np.ones((3, 1))
        _, grad = self.f.evaluate_with_gradient(w, np.arange(8))
        self.assertEqual(grad.shape, (3, 1))

    def test_invalid_shapes_raise(self):
        with self.assertRaises(ValueError):
            LinearRegressionFunction(np.ones(3), np.ones(3))
        with self.assertRaises(ValueError):
            LinearRegressionFunction(np.ones((3, 2)), np.ones(4))
        with self.assertRaises(ValueError):
            LinearRegressionFunction(np.ones((0, 2)), np.ones(0))


if __name__ == "__main__":
    unittest.main()
