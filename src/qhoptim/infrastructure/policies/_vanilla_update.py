"""
Vanilla (plain gradient descent) update policy.

The delta is the negative gradient scaled by the step size. The policy
keeps no moment state; it only counts steps so that it satisfies the same
contract as the adaptive policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass
class VanillaUpdate:
    """
    Plain stochastic gradient descent policy: ``delta = -step_size * g``.
    """

    step_size: float = 0.01

    def __init__(self, step_size: float = 0.01) -> None:
        self.step_size = float(step_size)
        self._iteration = 0

    @property
    def iteration(self) -> int:
        return self._iteration

    def initialize(self, shape: Tuple[int, ...]) -> None:
        self._iteration = 0

    def reset(self) -> None:
        self._iteration = 0

    def compute_delta(self, gradient: np.ndarray) -> np.ndarray:
        self._iteration += 1
        return -self.step_size * np.asarray(gradient, dtype=np.float64)
