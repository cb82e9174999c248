from .core import IntervalSet, interval_set, merge
from .interval import Interval
from .result import InvalidRange, NotFound, WriteResult

__all__ = [
    "Interval",
    "IntervalSet",
    "interval_set",
    "merge",
    "WriteResult",
    "InvalidRange",
    "NotFound",
]
