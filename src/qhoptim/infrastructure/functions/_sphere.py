"""
Sphere (sum of squares) test objective.

    f(x) = sum_i x_i^2

Each coordinate is its own sub-function, so the objective is separable with
`num_functions() == dimension`. The minimum is 0 at the origin.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


class SphereFunction:
    """
    Separable sum-of-squares objective.

    Parameters
    ----------
    dimension : int
        Number of coordinates (and sub-functions). Must be >= 1.
    """

    def __init__(self, dimension: int) -> None:
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        self.dimension = int(dimension)

    def num_functions(self) -> int:
        return self.dimension

    def num_parameters(self) -> int:
        return self.dimension

    def evaluate(self, iterate: np.ndarray, indices: np.ndarray) -> float:
        x = np.asarray(iterate, dtype=np.float64).reshape(-1)
        idx = np.asarray(indices, dtype=np.intp)
        return float(np.sum(x[idx] ** 2))

    def evaluate_with_gradient(
        self, iterate: np.ndarray, indices: np.ndarray
    ) -> Tuple[float, np.ndarray]:
        x = np.asarray(iterate, dtype=np.float64).reshape(-1)
        idx = np.asarray(indices, dtype=np.intp)

        grad = np.zeros_like(x)
        # indices may repeat when a caller builds batches by hand
        np.add.at(grad, idx, 2.0 * x[idx])
        return float(np.sum(x[idx] ** 2)), grad.reshape(np.shape(iterate))
