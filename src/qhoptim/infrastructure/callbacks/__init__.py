from ._history import History
from ._progress import PrintLoss, EarlyStopAtMinLoss

__all__ = [
    "History",
    "PrintLoss",
    "EarlyStopAtMinLoss",
]
