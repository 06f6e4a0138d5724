from .policies import VanillaUpdate, AdamUpdate, QHAdamUpdate
from .optimizers import SGD, Adam, AdamConfig, QHAdam, QHAdamConfig
from .functions import SphereFunction, LinearRegressionFunction
from .callbacks import History, PrintLoss, EarlyStopAtMinLoss

__all__ = [
    "VanillaUpdate",
    "AdamUpdate",
    "QHAdamUpdate",
    "SGD",
    "Adam",
    "AdamConfig",
    "QHAdam",
    "QHAdamConfig",
    "SphereFunction",
    "LinearRegressionFunction",
    "History",
    "PrintLoss",
    "EarlyStopAtMinLoss",
]
