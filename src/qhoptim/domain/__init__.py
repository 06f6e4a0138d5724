from ._errors import ConfigurationError, DimensionMismatchError
from ._function import IDecomposableFunction
from ._update_policy import IUpdatePolicy
from ._callbacks import IOptimizationCallback
from ._optimizers import IOptimizer

__all__ = [
    "ConfigurationError",
    "DimensionMismatchError",
    "IDecomposableFunction",
    "IUpdatePolicy",
    "IOptimizationCallback",
    "IOptimizer",
]
