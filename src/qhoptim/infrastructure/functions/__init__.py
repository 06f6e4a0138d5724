from ._sphere import SphereFunction
from ._linear_regression import LinearRegressionFunction

__all__ = [
    "SphereFunction",
    "LinearRegressionFunction",
]
