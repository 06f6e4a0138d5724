"""
QHAdam update policy.

This module provides the quasi-hyperbolic Adam (QHAdam) update rule. The
policy keeps exponentially decaying estimates of the first and second
moments of the gradient and blends each of them with its instantaneous
counterpart before forming the step.

Design notes
------------
- The policy returns a delta; it never touches the iterate. Applying the
  delta is the driver's job.
- State (first moment, second moment, step counter) is owned by the policy
  instance and persists across steps until `initialize()` or `reset()`.
- No hyperparameter validation happens here. Ranges are checked by
  `QHAdamConfig` when a configuration is built.
- Non-finite gradients are not detected; they propagate into the moments
  and the returned delta.

Reference: Ma, J. & Yarats, D. (2019). Quasi-hyperbolic momentum and Adam
for deep learning. ICLR.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass
class QHAdamUpdate:
    """
    QHAdam update policy.

    Update rule
    -----------
    Let ``g_t`` be the gradient at step ``t`` (``t`` starts at 1):

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        v_t = beta2 * v_{t-1} + (1 - beta2) * (g_t ** 2)

        m_hat = m_t / (1 - beta1^t)
        v_hat = v_t / (1 - beta2^t)

        num = (1 - v1) * g_t + v1 * m_hat
        den = (1 - v2) * (g_t ** 2) + v2 * v_hat

        delta = -step_size * num / (sqrt(den) + epsilon)

    Parameters
    ----------
    step_size : float, optional
        Step size. Defaults to 1e-3.
    v1 : float, optional
        Weight of the momentum term in the numerator. Defaults to 0.7.
    v2 : float, optional
        Weight of the smoothed second moment in the denominator.
        Defaults to 1.0.
    beta1 : float, optional
        Decay rate of the first moment estimate. Defaults to 0.9.
    beta2 : float, optional
        Decay rate of the second moment estimate. Defaults to 0.999.
    epsilon : float, optional
        Term added to the denominator. Defaults to 1e-8.

    Notes
    -----
    - ``v1 = v2 = 1`` recovers Adam exactly.
    - ``v1 = 0`` removes the momentum term from the numerator;
      ``v1 = 1`` removes the raw gradient.
    - Since ``t >= 1`` and ``beta1, beta2 < 1``, the bias-correction
      denominators are never zero.
    """

    step_size: float = 1e-3
    v1: float = 0.7
    v2: float = 1.0
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = 1e-8

    def __init__(
        self,
        step_size: float = 1e-3,
        *,
        v1: float = 0.7,
        v2: float = 1.0,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ) -> None:
        self.step_size = float(step_size)
        self.v1 = float(v1)
        self.v2 = float(v2)
        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.epsilon = float(epsilon)

        self._m: Optional[np.ndarray] = None
        self._v: Optional[np.ndarray] = None
        self._iteration = 0

    @property
    def iteration(self) -> int:
        """
        Number of steps taken since the last `initialize()` / `reset()`.
        """
        return self._iteration

    @property
    def first_moment(self) -> Optional[np.ndarray]:
        """
        Biased first moment estimate, or None before initialization.
        """
        return self._m

    @property
    def second_moment(self) -> Optional[np.ndarray]:
        """
        Biased second moment estimate, or None before initialization.
        """
        return self._v

    def initialize(self, shape: Tuple[int, ...]) -> None:
        """
        Allocate zeroed moment estimates for iterates of the given shape.

        Parameters
        ----------
        shape : tuple[int, ...]
            Shape of the iterate the policy will be applied to.
        """
        self._m = np.zeros(shape, dtype=np.float64)
        self._v = np.zeros(shape, dtype=np.float64)
        self._iteration = 0

    def reset(self) -> None:
        """
        Zero both moment estimates and the step counter in place.

        Notes
        -----
        Calling `reset()` on a policy that was never initialized only clears
        the step counter; the moments are allocated on the next step.
        """
        if self._m is not None:
            self._m.fill(0.0)
        if self._v is not None:
            self._v.fill(0.0)
        self._iteration = 0

    def compute_delta(self, gradient: np.ndarray) -> np.ndarray:
        """
        Advance the moment estimates and return the QHAdam delta.

        Parameters
        ----------
        gradient : np.ndarray
            Gradient of the objective at the current iterate.

        Returns
        -------
        np.ndarray
            Delta to add to the iterate, shaped like `gradient`.

        Notes
        -----
        State is created lazily from the gradient shape when the policy has
        not been initialized yet.
        """
        g = np.asarray(gradient, dtype=np.float64)
        if self._m is None or self._v is None:
            self.initialize(g.shape)

        self._iteration += 1
        t = self._iteration
        b1, b2 = self.beta1, self.beta2
        g2 = g * g

        # m = b1*m + (1-b1)*g
        # v = b2*v + (1-b2)*(g*g)
        self._m *= b1
        self._m += (1.0 - b1) * g
        self._v *= b2
        self._v += (1.0 - b2) * g2

        # bias correction
        m_hat = self._m / (1.0 - (b1**t))
        v_hat = self._v / (1.0 - (b2**t))

        numerator = ((1.0 - self.v1) * g) + (self.v1 * m_hat)
        denominator = np.sqrt(((1.0 - self.v2) * g2) + (self.v2 * v_hat)) + self.epsilon

        return -self.step_size * (numerator / denominator)
