"""Tests for range key types and their reconstruction from bounds."""

import pytest

from rangebounds.bound import UNBOUNDED, Excluded, Included
from rangebounds.ranges import (
    Bounds,
    Range,
    RangeBounds,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
    bounds_of,
)

ALL_TYPES = [Range, RangeInclusive, RangeFrom, RangeTo, RangeToInclusive, RangeFull]


@pytest.mark.parametrize(
    "range, start, end",
    [
        (Range(1, 4), Included(1), Excluded(4)),
        (RangeInclusive(1, 4), Included(1), Included(4)),
        (RangeFrom(1), Included(1), UNBOUNDED),
        (RangeTo(4), UNBOUNDED, Excluded(4)),
        (RangeToInclusive(4), UNBOUNDED, Included(4)),
        (RangeFull(), UNBOUNDED, UNBOUNDED),
        (Bounds(Excluded(1), Excluded(4)), Excluded(1), Excluded(4)),
    ],
)
def test_bounds_exposed(range, start, end) -> None:
    assert range.start_bound == start
    assert range.end_bound == end
    assert bounds_of(range) == (start, end)
    assert isinstance(range, RangeBounds)


@pytest.mark.parametrize(
    "range",
    [
        Range(1, 4),
        RangeInclusive(1, 4),
        RangeFrom(1),
        RangeTo(4),
        RangeToInclusive(4),
        RangeFull(),
    ],
)
def test_each_type_accepts_only_its_own_shape(range) -> None:
    """Every type rebuilds itself and refuses every other type's bounds."""
    for range_type in ALL_TYPES:
        rebuilt = range_type.try_from_bounds(range.start_bound, range.end_bound)
        if range_type is type(range):
            assert rebuilt == range
        else:
            assert rebuilt is None


def test_half_open_refuses_exclusive_start() -> None:
    assert Range.try_from_bounds(Excluded(6), Excluded(8)) is None


def test_bounds_accepts_everything() -> None:
    assert Bounds.try_from_bounds(Excluded(6), Excluded(8)) == Bounds(
        Excluded(6), Excluded(8)
    )
    assert Bounds.try_from_bounds(UNBOUNDED, Included(3)) == Bounds(
        UNBOUNDED, Included(3)
    )


def test_plain_objects_are_not_ranges() -> None:
    assert not isinstance((1, 4), RangeBounds)
    assert not isinstance(range(1, 4), RangeBounds)


def test_str_forms() -> None:
    assert str(Range(1, 4)) == "[1, 4)"
    assert str(RangeInclusive(1, 4)) == "[1, 4]"
    assert str(RangeFrom(1)) == "[1, +inf)"
    assert str(RangeTo(4)) == "(-inf, 4)"
    assert str(RangeFull()) == "(-inf, +inf)"
