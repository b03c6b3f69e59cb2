"""Tests for split_off()."""

import pytest

from rangebounds import (
    UNBOUNDED,
    Bounds,
    Excluded,
    Included,
    Range,
    RangeBoundsMap,
    TryFromBoundsError,
    range_map,
)


def sample() -> RangeBoundsMap:
    return range_map((Range(1, 2), False), (Range(4, 8), True), (Range(10, 16), True))


def test_unrepresentable_left_part_fails() -> None:
    """Splitting at Excluded(6) would leave [4, 6] behind."""
    a = sample()
    with pytest.raises(TryFromBoundsError):
        a.split_off(Excluded(6))
    assert a == sample()


def test_split_inside_an_entry() -> None:
    a = sample()
    b = a.split_off(Included(6))
    assert a.to_pairs() == [(Range(1, 2), False), (Range(4, 6), True)]
    assert b.to_pairs() == [(Range(6, 8), True), (Range(10, 16), True)]


def test_split_on_entry_start_moves_whole_entry() -> None:
    a = sample()
    b = a.split_off(Included(4))
    assert a.to_pairs() == [(Range(1, 2), False)]
    assert b.to_pairs() == [(Range(4, 8), True), (Range(10, 16), True)]


def test_split_in_a_gap() -> None:
    a = sample()
    b = a.split_off(Included(9))
    assert a.to_pairs() == [(Range(1, 2), False), (Range(4, 8), True)]
    assert b.to_pairs() == [(Range(10, 16), True)]


def test_split_on_entry_end_keeps_entry() -> None:
    a = sample()
    b = a.split_off(Included(8))
    assert len(a) == 2
    assert b.first_entry() == (Range(10, 16), True)


def test_split_at_unbounded_moves_everything() -> None:
    a = sample()
    b = a.split_off(UNBOUNDED)
    assert a.is_empty()
    assert b == sample()


def test_split_past_the_end_moves_nothing() -> None:
    a = sample()
    b = a.split_off(Included(100))
    assert a == sample()
    assert b.is_empty()


def test_split_excluded_bound_with_raw_bounds() -> None:
    a = RangeBoundsMap([(Range(4, 8), "x")], range_type=Bounds)
    b = a.split_off(Excluded(6))
    assert a.to_pairs() == [(Bounds(Included(4), Included(6)), "x")]
    assert b.to_pairs() == [(Bounds(Excluded(6), Excluded(8)), "x")]


def test_split_keeps_configuration_and_clones_value() -> None:
    a = RangeBoundsMap([(Range(0, 10), ["v"])], range_type=Range)
    b = a.split_off(Included(5))
    assert b.range_type is Range
    assert b.clone is a.clone
    a.get_at_point(0).append("left")
    assert b.get_at_point(5) == ["v"]


def test_recombining_halves_restores_map() -> None:
    original = range_map(
        (Range(-5, 0), "a"),
        (Range(1, 2), "b"),
        (Range(4, 8), "c"),
        (Range(10, 16), "d"),
    )
    for point in range(-6, 18):
        a = original.copy()
        b = a.split_off(Included(point))
        assert all(key.end <= point for key, _ in a)
        assert all(key.start >= point for key, _ in b)

        recombined = RangeBoundsMap(a.to_pairs() + b.to_pairs())
        coverage = [(p, recombined.get_at_point(p)) for p in range(-6, 18)]
        assert coverage == [(p, original.get_at_point(p)) for p in range(-6, 18)]
