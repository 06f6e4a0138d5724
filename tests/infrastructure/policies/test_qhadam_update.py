import unittest
import numpy as np

from qhoptim.infrastructure.policies import AdamUpdate, QHAdamUpdate, VanillaUpdate


def _gradients(n: int, shape=(3,), seed: int = 0):
    rng = np.random.default_rng(seed)
    return [rng.normal(size=shape) for _ in range(n)]


class TestQHAdamUpdate(unittest.TestCase):
    def test_first_step_matches_reference(self):
        """
        First QHAdam step reference check (bias correction included).
        """
        g0 = np.array([0.1, -0.2])
        lr, v1, v2 = 1e-2, 0.7, 1.0
        b1, b2, eps = 0.9, 0.999, 1e-8

        policy = QHAdamUpdate(lr, v1=v1, v2=v2, beta1=b1, beta2=b2, epsilon=eps)
        policy.initialize(g0.shape)
        delta = policy.compute_delta(g0)

        m = (1 - b1) * g0
        v = (1 - b2) * (g0 * g0)
        m_hat = m / (1 - b1)
        v_hat = v / (1 - b2)
        num = (1 - v1) * g0 + v1 * m_hat
        den = np.sqrt((1 - v2) * g0 * g0 + v2 * v_hat) + eps
        expected = -lr * num / den

        np.testing.assert_allclose(delta, expected, rtol=1e-12, atol=1e-15)

    def test_second_step_matches_reference(self):
        g1 = np.array([0.5, -1.0, 2.0])
        g2 = np.array([-0.25, 0.5, 1.0])
        lr, v1, v2 = 0.1, 0.4, 0.6
        b1, b2, eps = 0.8, 0.95, 1e-8

        policy = QHAdamUpdate(lr, v1=v1, v2=v2, beta1=b1, beta2=b2, epsilon=eps)
        policy.compute_delta(g1)
        delta = policy.compute_delta(g2)

        m = b1 * ((1 - b1) * g1) + (1 - b1) * g2
        v = b2 * ((1 - b2) * g1 * g1) + (1 - b2) * g2 * g2
        m_hat = m / (1 - b1**2)
        v_hat = v / (1 - b2**2)
        num = (1 - v1) * g2 + v1 * m_hat
        den = np.sqrt((1 - v2) * g2 * g2 + v2 * v_hat) + eps
        np.testing.assert_allclose(delta, -lr * num / den, rtol=1e-12)

    def test_v1_v2_one_is_adam(self):
        qh = QHAdamUpdate(0.01, v1=1.0, v2=1.0, beta1=0.9, beta2=0.999, epsilon=1e-8)
        adam = AdamUpdate(0.01, beta1=0.9, beta2=0.999, epsilon=1e-8)
        qh.initialize((3,))
        adam.initialize((3,))

        for g in _gradients(20):
            np.testing.assert_allclose(
                qh.compute_delta(g), adam.compute_delta(g), rtol=1e-12, atol=0.0
            )
        np.testing.assert_allclose(qh.first_moment, adam.first_moment, rtol=1e-12)
        np.testing.assert_allclose(qh.second_moment, adam.second_moment, rtol=1e-12)

    def test_v1_zero_uses_raw_gradient_only(self):
        g1 = np.array([1.0, -3.0])
        g2 = np.array([2.0, 0.5])
        lr, b1, b2, eps = 0.05, 0.9, 0.99, 1e-8

        policy = QHAdamUpdate(lr, v1=0.0, v2=1.0, beta1=b1, beta2=b2, epsilon=eps)
        policy.compute_delta(g1)
        delta = policy.compute_delta(g2)

        v = b2 * ((1 - b2) * g1 * g1) + (1 - b2) * g2 * g2
        v_hat = v / (1 - b2**2)
        np.testing.assert_allclose(delta, -lr * g2 / (np.sqrt(v_hat) + eps), rtol=1e-12)

    def test_beta1_zero_first_moment_is_gradient(self):
        policy = QHAdamUpdate(0.01, beta1=0.0)
        for g in _gradients(5):
            policy.compute_delta(g)
            np.testing.assert_array_equal(policy.first_moment, g)

    def test_zero_gradient_gives_zero_delta(self):
        policy = QHAdamUpdate(0.5)
        policy.initialize((4,))
        for _ in range(10):
            delta = policy.compute_delta(np.zeros(4))
            np.testing.assert_array_equal(delta, np.zeros(4))

    def test_iteration_increments_by_one(self):
        policy = QHAdamUpdate()
        policy.initialize((3,))
        self.assertEqual(policy.iteration, 0)
        for i, g in enumerate(_gradients(7), start=1):
            policy.compute_delta(g)
            self.assertEqual(policy.iteration, i)

    def test_reset_zeroes_state(self):
        policy = QHAdamUpdate()
        for g in _gradients(4):
            policy.compute_delta(g)

        policy.reset()
        self.assertEqual(policy.iteration, 0)
        np.testing.assert_array_equal(policy.first_moment, np.zeros(3))
        np.testing.assert_array_equal(policy.second_moment, np.zeros(3))

    def test_reset_reproduces_fresh_trajectory(self):
        grads = _gradients(6, seed=3)

        used = QHAdamUpdate(0.01)
        for g in _gradients(6, seed=9):
            used.compute_delta(g)
        used.reset()

        fresh = QHAdamUpdate(0.01)
        for g in grads:
            np.testing.assert_array_equal(used.compute_delta(g), fresh.compute_delta(g))

    def test_reset_before_initialize_is_safe(self):
        policy = QHAdamUpdate()
        policy.reset()
        self.assertIsNone(policy.first_moment)
        self.assertEqual(policy.iteration, 0)

    def test_lazy_initialization_uses_gradient_shape(self):
        policy = QHAdamUpdate()
        delta = policy.compute_delta(np.ones((2, 3)))
        self.assertEqual(delta.shape, (2, 3))
        self.assertEqual(policy.first_moment.shape, (2, 3))
        self.assertEqual(policy.second_moment.shape, (2, 3))

    def test_non_finite_gradient_propagates(self):
        policy = QHAdamUpdate()
        delta = policy.compute_delta(np.array([np.nan, 1.0]))
        self.assertTrue(np.isnan(delta[0]))
        self.assertTrue(np.isfinite(delta[1]))


class TestAdamUpdate(unittest.TestCase):
    def test_step_matches_reference_first_step(self):
        g0 = np.array([0.1, -0.2])
        lr, b1, b2, eps = 1e-2, 0.9, 0.999, 1e-8

        policy = AdamUpdate(lr, beta1=b1, beta2=b2, epsilon=eps)
        delta = policy.compute_delta(g0)

        m_hat = ((1 - b1) * g0) / (1 - b1)
        v_hat = ((1 - b2) * g0 * g0) / (1 - b2)
        np.testing.assert_allclose(
            delta, -lr * (m_hat / (np.sqrt(v_hat) + eps)), rtol=1e-12
        )

    def test_reset_zeroes_state(self):
        policy = AdamUpdate()
        policy.compute_delta(np.ones(2))
        policy.reset()
        self.assertEqual(policy.iteration, 0)
        np.testing.assert_array_equal(policy.first_moment, np.zeros(2))


class TestVanillaUpdate(unittest.TestCase):
    def test_delta_is_scaled_negative_gradient(self):
        policy = VanillaUpdate(0.5)
        g = np.array([0.1, -0.2, 0.3])
        np.testing.assert_allclose(policy.compute_delta(g), -0.5 * g, rtol=1e-12)
        self.assertEqual(policy.iteration, 1)

        policy.reset()
        self.assertEqual(policy.iteration, 0)


if __name__ == "__main__":
    unittest.main()
