from ._sgd import SGD
from ._adam import Adam, AdamConfig
from ._qhadam import QHAdam, QHAdamConfig

__all__ = [
    "SGD",
    "Adam",
    "AdamConfig",
    "QHAdam",
    "QHAdamConfig",
]
