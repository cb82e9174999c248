from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Any

from typing_extensions import override

from intervalset.interval import Interval
from intervalset.logging_config import get_logger
from intervalset.result import InvalidRange, NotFound, WriteResult

logger = get_logger(__name__)


def merge(intervals: Iterable[Interval]) -> list[Interval]:
    """Return the canonical form of a collection of intervals.

    Algorithm: sort by start, then walk the sorted sequence once keeping a
    "current" span. An interval starting at or before the current end extends
    it (touching ranges such as [1, 5] and [5, 9] coalesce); anything else
    commits the current span and starts a new one.

    The input is not modified; a fresh list is built.
    """
    ordered = sorted(intervals, key=lambda interval: interval.start)
    if not ordered:
        return []

    merged: list[Interval] = []
    current = ordered[0]
    for interval in ordered[1:]:
        if interval.start <= current.end:
            if interval.end > current.end:
                current = replace(current, end=interval.end)
        else:
            merged.append(current)
            current = interval
    merged.append(current)
    return merged


class IntervalSet:
    """Ordered collection of disjoint closed integer intervals.

    After every mutating call the stored sequence is sorted by start and no
    adjacent pair ``a``, ``b`` satisfies ``b.start <= a.end``. Because the
    sequence is sorted and disjoint, both starts and ends are strictly
    increasing, which lets lookups binary-search either key.

    Write operations return a WriteResult instead of raising when a request
    is declined.
    """

    def __init__(self, intervals: Iterable[Interval | tuple[int, int]] = ()) -> None:
        """Initialize an empty or pre-populated interval set.

        Args:
            intervals: Optional initial intervals or (start, end) pairs. Each
                is added through add(); invalid pairs are skipped.
        """
        self._intervals: list[Interval] = []

        for item in intervals:
            if isinstance(item, Interval):
                start, end = item.start, item.end
            else:
                start, end = item
            self.add(start, end)

    def add(self, start: int, end: int) -> WriteResult:
        """Insert [start, end] and merge it into the canonical sequence.

        Returns:
            WriteResult carrying the canonical interval that now covers the
            added range, or an InvalidRange error if start > end (in which
            case the set is unchanged).
        """
        if start > end:
            logger.info("Declined add of [%d, %d]: start > end", start, end)
            return WriteResult(
                success=False, interval=None, error=InvalidRange(start, end)
            )

        before = len(self._intervals)
        self._intervals = merge([*self._intervals, Interval(start=start, end=end)])
        covering = self._covering(start)
        logger.debug(
            "Added [%d, %d] -> %s (%d -> %d intervals)",
            start,
            end,
            covering,
            before,
            len(self._intervals),
        )
        return WriteResult(success=True, interval=covering, error=None)

    def delete(self, start: int, end: int) -> WriteResult:
        """Remove the stored interval exactly equal to [start, end].

        Only whole canonical blocks can be removed; deleting a sub-range of a
        stored interval finds no match.
        """
        for idx, stored in enumerate(self._intervals):
            if stored.start == start and stored.end == end:
                removed = self._intervals.pop(idx)
                logger.debug("Deleted %s", removed)
                return WriteResult(success=True, interval=removed, error=None)

        logger.info("Declined delete of [%d, %d]: no exact match", start, end)
        return WriteResult(success=False, interval=None, error=NotFound(start, end))

    def query_point(self, point: int) -> bool:
        """True if some stored interval contains point."""
        return self._covering(point) is not None

    def query_range(self, start: int, end: int) -> bool:
        """True if some stored interval overlaps the closed range [start, end].

        The query pair is not validated. An inverted pair (start > end) is
        evaluated with the same overlap formula and simply matches less.
        """
        # First interval that ends at or after the query start; it has the
        # smallest start among all candidates, so it alone decides the answer.
        idx = bisect.bisect_left(
            self._intervals, start, key=lambda interval: interval.end
        )
        if idx == len(self._intervals):
            return False
        return self._intervals[idx].overlaps(start, end)

    def list(self) -> list[Interval]:
        """Return the canonical sequence as a new list."""
        return list(self._intervals)

    def clear(self) -> None:
        """Remove every interval."""
        logger.debug("Cleared %d intervals", len(self._intervals))
        self._intervals = []

    def _covering(self, point: int) -> Interval | None:
        # Last interval starting at or before point
        idx = bisect.bisect_right(
            self._intervals, point, key=lambda interval: interval.start
        )
        if idx == 0:
            return None
        candidate = self._intervals[idx - 1]
        return candidate if candidate.contains(point) else None

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(tuple(self._intervals))

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Interval):
            return item in self._intervals
        if isinstance(item, int):
            return self.query_point(item)
        return False

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._intervals == other._intervals

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        pairs = ", ".join(f"({i.start}, {i.end})" for i in self._intervals)
        return f"IntervalSet([{pairs}])"


def interval_set(*intervals: Interval | tuple[int, int]) -> IntervalSet:
    """Create an interval set from a collection of intervals.

    Convenience wrapper around IntervalSet; overlapping inputs are merged.

    Example:
        >>> from intervalset import interval_set
        >>> s = interval_set((1, 3), (2, 5), (8, 10))
        >>> s.list()
        [Interval(start=1, end=5), Interval(start=8, end=10)]
    """
    return IntervalSet(intervals)


__all__ = ["IntervalSet", "interval_set", "merge"]
