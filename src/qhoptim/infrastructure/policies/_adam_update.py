"""
Adam update policy.

This module contains only Adam. It is the ``v1 = v2 = 1`` special case of
QHAdam and is kept as its own policy so that the plain adaptive-moment rule
can be plugged into the driver without carrying the blend weights around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass
class AdamUpdate:
    """
    Adam update policy.

    Update rule
    -----------
    Let ``g_t`` be the gradient at step ``t``:

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        v_t = beta2 * v_{t-1} + (1 - beta2) * (g_t ** 2)

        m_hat = m_t / (1 - beta1^t)
        v_hat = v_t / (1 - beta2^t)

        delta = -step_size * m_hat / (sqrt(v_hat) + epsilon)

    Parameters
    ----------
    step_size : float, optional
        Step size. Defaults to 1e-3.
    beta1 : float, optional
        Decay rate of the first moment estimate. Defaults to 0.9.
    beta2 : float, optional
        Decay rate of the second moment estimate. Defaults to 0.999.
    epsilon : float, optional
        Term added to the denominator. Defaults to 1e-8.
    """

    step_size: float = 1e-3
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = 1e-8

    def __init__(
        self,
        step_size: float = 1e-3,
        *,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ) -> None:
        self.step_size = float(step_size)
        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.epsilon = float(epsilon)

        self._m: Optional[np.ndarray] = None
        self._v: Optional[np.ndarray] = None
        self._iteration = 0

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def first_moment(self) -> Optional[np.ndarray]:
        return self._m

    @property
    def second_moment(self) -> Optional[np.ndarray]:
        return self._v

    def initialize(self, shape: Tuple[int, ...]) -> None:
        self._m = np.zeros(shape, dtype=np.float64)
        self._v = np.zeros(shape, dtype=np.float64)
        self._iteration = 0

    def reset(self) -> None:
        if self._m is not None:
            self._m.fill(0.0)
        if self._v is not None:
            self._v.fill(0.0)
        self._iteration = 0

    def compute_delta(self, gradient: np.ndarray) -> np.ndarray:
        """
        Advance the moment estimates and return the Adam delta.
        """
        g = np.asarray(gradient, dtype=np.float64)
        if self._m is None or self._v is None:
            self.initialize(g.shape)

        self._iteration += 1
        t = self._iteration
        b1, b2 = self.beta1, self.beta2

        self._m *= b1
        self._m += (1.0 - b1) * g
        self._v *= b2
        self._v += (1.0 - b2) * (g * g)

        m_hat = self._m / (1.0 - (b1**t))
        v_hat = self._v / (1.0 - (b2**t))

        return -self.step_size * (m_hat / (np.sqrt(v_hat) + self.epsilon))
