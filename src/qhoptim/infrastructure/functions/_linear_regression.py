"""
Least-squares linear regression objective.

Given predictors ``X`` with shape ``(n_samples, n_features)`` and responses
``y`` with shape ``(n_samples,)``, the objective over parameters ``w`` is

    f(w) = sum_i (x_i . w - y_i)^2

with one sub-function per sample. The gradient of a batch ``B`` is

    grad = 2 * X_B^T (X_B w - y_B)

Notes
-----
- The iterate may be shaped ``(n_features,)`` or ``(n_features, 1)``; the
  gradient is returned in the iterate's shape.
- Data are copied to float64 on construction.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


class LinearRegressionFunction:
    """
    Separable least-squares objective for a linear model without intercept.

    Parameters
    ----------
    predictors : array-like
        Design matrix of shape ``(n_samples, n_features)``.
    responses : array-like
        Targets of shape ``(n_samples,)``.

    Raises
    ------
    ValueError
        If the shapes are inconsistent or there are no samples.
    """

    def __init__(self, predictors, responses) -> None:
        X = np.array(predictors, dtype=np.float64)
        y = np.array(responses, dtype=np.float64).reshape(-1)

        if X.ndim != 2:
            raise ValueError(f"predictors must be 2D, got shape {X.shape}")
        if X.shape[0] != y.shape[0]:
            raise ValueError(
                f"predictors and responses must have same length, got "
                f"{X.shape[0]} and {y.shape[0]}"
            )
        if X.shape[0] == 0:
            raise ValueError("at least one sample is required")

        self.predictors = X
        self.responses = y

    def num_functions(self) -> int:
        return int(self.predictors.shape[0])

    def num_parameters(self) -> int:
        return int(self.predictors.shape[1])

    def _residuals(self, iterate: np.ndarray, idx: np.ndarray) -> np.ndarray:
        w = np.asarray(iterate, dtype=np.float64).reshape(-1)
        return self.predictors[idx] @ w - self.responses[idx]

    def evaluate(self, iterate: np.ndarray, indices: np.ndarray) -> float:
        r = self._residuals(iterate, np.asarray(indices, dtype=np.intp))
        return float(r @ r)

    def evaluate_with_gradient(
        self, iterate: np.ndarray, indices: np.ndarray
    ) -> Tuple[float, np.ndarray]:
        idx = np.asarray(indices, dtype=np.intp)
        r = self._residuals(iterate, idx)
        grad = 2.0 * (self.predictors[idx].T @ r)
        return float(r @ r), grad.reshape(np.shape(iterate))
