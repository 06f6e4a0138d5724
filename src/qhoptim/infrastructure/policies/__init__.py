from ._vanilla_update import VanillaUpdate
from ._adam_update import AdamUpdate
from ._qhadam_update import QHAdamUpdate

__all__ = [
    "VanillaUpdate",
    "AdamUpdate",
    "QHAdamUpdate",
]
