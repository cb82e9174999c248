"""Result values returned by IntervalSet write operations.

Mutating operations never raise for a declined request. They return a
WriteResult whose ``error`` holds one of the exceptions below, leaving the
caller to decide how to present it.
"""

from dataclasses import dataclass

from intervalset.interval import Interval


class InvalidRange(ValueError):
    """Raised (or returned) when a range has start > end."""

    def __init__(self, start: int, end: int):
        super().__init__(f"Invalid interval: start ({start}) > end ({end})")
        self.start: int = start
        self.end: int = end


class NotFound(LookupError):
    """Returned when no stored interval exactly matches [start, end]."""

    def __init__(self, start: int, end: int):
        super().__init__(f"Interval [{start}, {end}] not found")
        self.start: int = start
        self.end: int = end


@dataclass(frozen=True)
class WriteResult:
    """Result of a write operation (add/delete).

    Attributes:
        success: True if the operation succeeded, False otherwise
        interval: The canonical interval covering an added range, or the
            interval removed by a delete. None if failed.
        error: The declined-operation error if failed, None if successful
    """

    success: bool
    interval: Interval | None
    error: Exception | None

    def __bool__(self) -> bool:
        return self.success


__all__ = ["WriteResult", "InvalidRange", "NotFound"]
