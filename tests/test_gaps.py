"""Tests for gaps() and contains_range_bounds()."""

from rangebounds import (
    UNBOUNDED,
    Bounds,
    Excluded,
    Included,
    Range,
    RangeBoundsMap,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    range_map,
)


def test_gaps_from_a_point_onwards() -> None:
    m = range_map((Range(1, 3), False), (Range(5, 7), True), (Range(9, 100), False))
    assert list(m.gaps(RangeFrom(2))) == [
        (Included(3), Excluded(5)),
        (Included(7), Excluded(9)),
        (Included(100), UNBOUNDED),
    ]


def test_gaps_of_empty_map_is_outer() -> None:
    m = RangeBoundsMap()
    assert list(m.gaps(Range(0, 10))) == [(Included(0), Excluded(10))]
    assert list(m.gaps(RangeFull())) == [(UNBOUNDED, UNBOUNDED)]


def test_every_gap_in_full_range() -> None:
    m = range_map((Range(1, 3), "a"), (Range(5, 7), "b"))
    assert list(m.gaps(RangeFull())) == [
        (UNBOUNDED, Excluded(1)),
        (Included(3), Excluded(5)),
        (Included(7), UNBOUNDED),
    ]


def test_touching_entries_leave_no_gap() -> None:
    m = range_map((Range(1, 4), "a"), (Range(4, 8), "b"))
    assert list(m.gaps(Range(1, 8))) == []


def test_single_point_gaps() -> None:
    m = range_map(
        (Bounds(Excluded(0), Excluded(5)), "a"),
        (Bounds(Excluded(5), Excluded(9)), "b"),
    )
    assert list(m.gaps(RangeInclusive(0, 9))) == [
        (Included(0), Included(0)),
        (Included(5), Included(5)),
        (Included(9), Included(9)),
    ]


def test_outer_inside_one_entry() -> None:
    m = range_map((Range(0, 100), "a"))
    assert list(m.gaps(Range(10, 20))) == []


def test_gaps_is_lazy() -> None:
    m = range_map((Range(1, 3), "a"), (Range(5, 7), "b"))
    gaps = m.gaps(RangeFull())
    assert next(gaps) == (UNBOUNDED, Excluded(1))
    assert next(gaps) == (Included(3), Excluded(5))


def test_gaps_and_coverage_partition_outer() -> None:
    m = range_map((Range(2, 4), "a"), (Range(6, 7), "b"), (Range(7, 9), "c"))
    outer = Range(0, 12)
    gaps = RangeBoundsMap([(Bounds(*gap), None) for gap in m.gaps(outer)])
    for half in range(0, 24):
        point = half / 2
        assert m.contains_point(point) != gaps.contains_point(point)


class TestContainsRangeBounds:
    def test_documented_cases(self):
        m = range_map((Range(1, 3), False), (Range(5, 8), True), (Range(8, 100), False))
        assert m.contains_range_bounds(Range(1, 3))
        assert not m.contains_range_bounds(Range(2, 6))
        assert m.contains_range_bounds(Range(6, 50))

    def test_unbounded_coverage(self):
        m = RangeBoundsMap([(RangeFull(), 0)])
        assert m.contains_range_bounds(RangeFrom(-(10**6)))
        assert m.contains_range_bounds(RangeFull())

    def test_empty_map_contains_nothing(self):
        assert not RangeBoundsMap().contains_range_bounds(RangeInclusive(3, 3))
