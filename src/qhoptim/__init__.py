"""
qhoptim: quasi-hyperbolic adaptive optimizers for separable objectives.
"""

from .domain import (
    ConfigurationError,
    DimensionMismatchError,
    IDecomposableFunction,
    IOptimizationCallback,
    IOptimizer,
    IUpdatePolicy,
)
from .infrastructure import (
    SGD,
    Adam,
    AdamConfig,
    AdamUpdate,
    EarlyStopAtMinLoss,
    History,
    LinearRegressionFunction,
    PrintLoss,
    QHAdam,
    QHAdamConfig,
    QHAdamUpdate,
    SphereFunction,
    VanillaUpdate,
)

__all__ = [
    "ConfigurationError",
    "DimensionMismatchError",
    "IDecomposableFunction",
    "IOptimizationCallback",
    "IOptimizer",
    "IUpdatePolicy",
    "SGD",
    "Adam",
    "AdamConfig",
    "AdamUpdate",
    "EarlyStopAtMinLoss",
    "History",
    "LinearRegressionFunction",
    "PrintLoss",
    "QHAdam",
    "QHAdamConfig",
    "QHAdamUpdate",
    "SphereFunction",
    "VanillaUpdate",
]
