"""Tests for the Interval value type."""

from dataclasses import FrozenInstanceError

import pytest

from intervalset import Interval


def test_rejects_start_after_end():
    with pytest.raises(ValueError, match=r"start \(5\) must be <= end \(1\)"):
        Interval(start=5, end=1)


def test_single_point_interval():
    interval = Interval(start=3, end=3)

    assert interval.length == 1
    assert interval.contains(3)
    assert not interval.contains(4)


def test_is_immutable():
    interval = Interval(start=1, end=2)

    with pytest.raises(FrozenInstanceError):
        interval.end = 10  # type: ignore[misc]


def test_keyword_only():
    with pytest.raises(TypeError):
        Interval(1, 2)  # type: ignore[misc]


def test_str_shows_closed_range():
    assert str(Interval(start=-2, end=7)) == "[-2, 7]"


def test_length_counts_both_endpoints():
    assert Interval(start=1, end=10).length == 10


class TestOverlaps:
    """Closed-range overlap test against a literal (start, end) pair."""

    def test_shared_endpoint(self):
        interval = Interval(start=1, end=5)

        assert interval.overlaps(5, 9)
        assert interval.overlaps(-3, 1)

    def test_disjoint(self):
        interval = Interval(start=1, end=5)

        assert not interval.overlaps(6, 9)
        assert not interval.overlaps(-3, 0)

    def test_query_containing_interval(self):
        assert Interval(start=4, end=6).overlaps(0, 100)

    def test_inverted_query_is_evaluated_literally(self):
        interval = Interval(start=1, end=10)

        # not (3 < 1 or 7 > 10) -> True
        assert interval.overlaps(7, 3)
        # not (0 < 1 or ...) -> False
        assert not interval.overlaps(12, 0)
