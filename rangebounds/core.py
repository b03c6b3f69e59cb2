"""The range map container.

``RangeBoundsMap`` maps non-overlapping ranges to values. Reads are binary
searches over the ordered store; writes that reshape stored ranges (cuts,
merges, splits) build every new key before touching the store, so a failed
reconstruction leaves the map as it was.
"""

import copy
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, Self, TypeVar

from rangebounds.algebra import (
    BoundPair,
    bounds_touch,
    cut_range,
    intersection,
    is_valid,
    overlaps,
)
from rangebounds.bound import (
    Bound,
    Included,
    Unbounded,
    end_rank,
    flip,
    start_rank,
)
from rangebounds.errors import InvalidRangeError, OverlapError, TryFromBoundsError
from rangebounds.ranges import Bounds, RangeBounds, TryFromBounds, bounds_of
from rangebounds.store import BoundStore, Entry

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=RangeBounds)
V = TypeVar("V")


class Overlapping(Generic[K, V]):
    """Restartable view of the entries overlapping a query range.

    Iterating yields ``(range, value)`` in ascending order, ``reversed()``
    in descending order. The view reads the map live: do not mutate the map
    while iterating it.
    """

    def __init__(self, store: BoundStore[K, V], query: RangeBounds):
        self._store: BoundStore[K, V] = store
        self._query: RangeBounds = query

    def _span(self) -> tuple[int, int]:
        return self._store.overlap_slice(
            start_rank(self._query.start_bound), end_rank(self._query.end_bound)
        )

    def __iter__(self) -> Iterator[Entry[K, V]]:
        lo, hi = self._span()
        return self._store.islice(lo, hi)

    def __reversed__(self) -> Iterator[Entry[K, V]]:
        lo, hi = self._span()
        return self._store.islice(lo, hi, reverse=True)

    def __len__(self) -> int:
        lo, hi = self._span()
        return hi - lo

    def __repr__(self) -> str:
        return f"Overlapping({self._query!r}, {list(self)!r})"


class RangeBoundsMap(Generic[K, V]):
    """Ordered map of non-overlapping ranges to values.

    Args:
        entries: Initial ``(range, value)`` pairs, inserted strictly
        range_type: Type used to rebuild ranges after cuts, merges and
            splits. Defaults to the type of the range being reshaped.
        clone: Duplicates a value when a split leaves one entry on each side
            (default ``copy.copy``)

    Raises:
        OverlapError: If two of the initial ranges overlap
        InvalidRangeError: If an initial range is invalid

    Example:
        >>> from rangebounds import Range, RangeBoundsMap
        >>> m = RangeBoundsMap([(Range(1, 4), False), (Range(4, 8), True)])
        >>> m.get_at_point(4)
        True
        >>> m.cut(Range(2, 6))
        [((Included(2), Excluded(4)), False), ((Included(4), Excluded(6)), True)]
    """

    def __init__(
        self,
        entries: Iterable[tuple[K, V]] = (),
        *,
        range_type: type[TryFromBounds] | None = None,
        clone: Callable[[V], V] = copy.copy,
    ) -> None:
        self.range_type: type[TryFromBounds] | None = range_type
        self.clone: Callable[[V], V] = clone
        self._store: BoundStore[K, V] = BoundStore()

        for key, value in entries:
            self.insert_strict(key, value)

    @classmethod
    def from_iter_strict(cls, entries: Iterable[tuple[K, V]], **options: Any) -> Self:
        """Build a map, failing on the first pair that overlaps another."""
        return cls(entries, **options)

    @classmethod
    def from_iter_merge(cls, entries: Iterable[tuple[K, V]], **options: Any) -> Self:
        """Build a map, coalescing pairs that touch or overlap.

        Later values win over the entries they absorb.
        """
        built = cls(**options)
        for key, value in entries:
            built.insert_merge_touching_or_overlapping(key, value)
        return built

    def _spawn(self, store: BoundStore[K, V]) -> Self:
        sibling = type(self)(range_type=self.range_type, clone=self.clone)
        sibling._store = store
        return sibling

    # --- validation and reconstruction ---

    def _check(self, range: Any) -> None:
        if not isinstance(range, RangeBounds):
            raise TypeError(
                f"Expected a range with start_bound and end_bound.\n"
                f"Got {type(range).__name__!r}: {range!r}\n"
                f"Hint: use Range(start, end), RangeInclusive(start, end) "
                f"or Bounds(start_bound, end_bound)"
            )
        if not is_valid(range):
            raise InvalidRangeError(range)

    def _rebuild(self, like: K, start: Bound, end: Bound) -> K:
        """Build a key of the map's range type from raw bounds."""
        range_type = self.range_type or type(like)
        try_from_bounds = getattr(range_type, "try_from_bounds", None)
        if try_from_bounds is None:
            raise TypeError(
                f"{range_type.__name__} has no try_from_bounds classmethod, "
                f"so it cannot be rebuilt from bounds ({start}, {end}).\n"
                f"Hint: pass range_type=Bounds to store raw bound pairs"
            )
        built = try_from_bounds(start, end)
        if built is None:
            raise TryFromBoundsError(
                f"{range_type.__name__} cannot represent ({start}, {end})"
            )
        return built

    # --- reads ---

    def __len__(self) -> int:
        return len(self._store)

    def is_empty(self) -> bool:
        return not self._store

    def iter(self) -> Iterator[Entry[K, V]]:
        """Iterate over every ``(range, value)`` in ascending order."""
        return iter(self._store)

    def __iter__(self) -> Iterator[Entry[K, V]]:
        return iter(self._store)

    def __reversed__(self) -> Iterator[Entry[K, V]]:
        return reversed(self._store)

    def overlaps(self, range: RangeBounds) -> bool:
        self._check(range)
        lo, hi = self._store.overlap_slice(
            start_rank(range.start_bound), end_rank(range.end_bound)
        )
        return hi > lo

    def overlapping(self, range: RangeBounds) -> Overlapping[K, V]:
        """Entries whose ranges overlap ``range``, as a reusable view."""
        self._check(range)
        return Overlapping(self._store, range)

    def overlapping_trimmed(
        self, range: RangeBounds
    ) -> Iterator[tuple[BoundPair, V]]:
        """Like :meth:`overlapping`, with each range clipped to ``range``."""
        self._check(range)
        return (
            (intersection(key, range), value)
            for key, value in Overlapping(self._store, range)
        )

    def _index_at_point(self, point: Any) -> int | None:
        return self._store.index_containing(start_rank(Included(point)))

    def get_entry_at_point(self, point: Any) -> Entry[K, V] | None:
        index = self._index_at_point(point)
        return None if index is None else self._store[index]

    def get_at_point(self, point: Any) -> V | None:
        entry = self.get_entry_at_point(point)
        return None if entry is None else entry[1]

    def contains_point(self, point: Any) -> bool:
        return self._index_at_point(point) is not None

    def __contains__(self, point: Any) -> bool:
        return self.contains_point(point)

    def set_at_point(self, point: Any, value: V) -> None:
        """Replace the value of the entry covering ``point``.

        Raises:
            KeyError: If no stored range covers ``point``
        """
        index = self._index_at_point(point)
        if index is None:
            raise KeyError(point)
        self._store.replace_value(index, value)

    def first_entry(self) -> Entry[K, V] | None:
        return self._store.first()

    def last_entry(self) -> Entry[K, V] | None:
        return self._store.last()

    def gaps(self, outer: RangeBounds) -> Iterator[BoundPair]:
        """Yield the maximal sub-ranges of ``outer`` not covered by the map.

        Pass ``RangeFull()`` to get every gap. Gaps come in ascending order
        as raw ``(start, end)`` bound pairs.

        Example:
            >>> m = range_map((Range(1, 3), 0), (Range(5, 7), 1))
            >>> list(m.gaps(Range(0, 6)))
            [(Included(0), Excluded(1)), (Included(3), Excluded(5))]
        """
        self._check(outer)
        return self._iter_gaps(outer)

    def _iter_gaps(self, outer: RangeBounds) -> Iterator[BoundPair]:
        cursor = outer.start_bound
        for key, _ in Overlapping(self._store, outer):
            if start_rank(cursor) < start_rank(key.start_bound):
                yield cursor, flip(key.start_bound)
            if isinstance(key.end_bound, Unbounded):
                return
            cursor = flip(key.end_bound)

        if start_rank(cursor) <= end_rank(outer.end_bound):
            yield cursor, outer.end_bound

    def contains_range_bounds(self, outer: RangeBounds) -> bool:
        """True if every point of ``outer`` is covered by some entry."""
        return next(self.gaps(outer), None) is None

    # --- writes ---

    def _drain_overlapping(self, range: RangeBounds) -> list[Entry[K, V]]:
        lo, _ = self._store.overlap_slice(
            start_rank(range.start_bound), end_rank(range.end_bound)
        )
        return self._store.drain_while(lo, lambda entry: overlaps(entry[0], range))

    def remove_overlapping(self, range: RangeBounds) -> list[Entry[K, V]]:
        """Remove and return every entry overlapping ``range``."""
        self._check(range)
        removed = self._drain_overlapping(range)
        logger.debug("removed %d entries overlapping %s", len(removed), range)
        return removed

    def insert_strict(self, range: K, value: V) -> None:
        """Insert ``range`` without touching other entries.

        Raises:
            OverlapError: If ``range`` overlaps a stored range; the map is
                left unchanged
        """
        if self.overlaps(range):
            logger.debug("rejected strict insert of %s: overlap", range)
            raise OverlapError(f"{range} overlaps a range already in the map")
        self._store.add(range, value)

    def cut(self, range: RangeBounds) -> list[tuple[BoundPair, V]]:
        """Remove the part of the map's coverage that lies within ``range``.

        Stored ranges straddling an edge of ``range`` are shortened rather
        than removed; when one stored range spans the whole of ``range`` it
        is split in two and its value cloned for both halves.

        Returns:
            The removed ``((start, end), value)`` pieces in ascending order

        Raises:
            TryFromBoundsError: If a shortened range cannot be rebuilt; the
                map is left unchanged
        """
        self._check(range)
        left = self._store.index_containing(start_rank(range.start_bound))
        right = self._store.index_containing(end_rank(range.end_bound))

        if left is not None and left == right:
            pieces = self._cut_single(range, left)
        else:
            pieces = self._cut_edges(range, left, right)

        logger.debug("cut %s: removed %d pieces", range, len(pieces))
        return pieces

    def _cut_single(self, range: RangeBounds, index: int) -> list[tuple[BoundPair, V]]:
        key, value = self._store[index]
        result = cut_range(key, range)

        before = after = None
        if result.before is not None:
            before = self._rebuild(key, *result.before)
        if result.after is not None:
            after = self._rebuild(key, *result.after)

        self._store.pop(index)
        if before is not None:
            self._store.add(before, self.clone(value))
        if after is not None:
            self._store.add(after, self.clone(value))

        return [(result.inside, value)]

    def _cut_edges(
        self, range: RangeBounds, left: int | None, right: int | None
    ) -> list[tuple[BoundPair, V]]:
        # Plans are (key, value, inside piece, kept remainder or None).
        left_plan = right_plan = None
        if left is not None:
            key, value = self._store[left]
            result = cut_range(key, range)
            kept = None
            if result.before is not None:
                kept = self._rebuild(key, *result.before)
            left_plan = (value, result.inside, kept)
        if right is not None:
            key, value = self._store[right]
            result = cut_range(key, range)
            kept = None
            if result.after is not None:
                kept = self._rebuild(key, *result.after)
            right_plan = (value, result.inside, kept)

        # Pop the higher index first so the lower one stays put.
        if right is not None:
            self._store.pop(right)
        if left is not None:
            self._store.pop(left)

        pieces: list[tuple[BoundPair, V]] = []
        if left_plan is not None:
            value, inside, kept = left_plan
            if kept is not None:
                self._store.add(kept, self.clone(value))
            pieces.append((inside, value))

        pieces.extend(
            (bounds_of(key), value) for key, value in self._drain_overlapping(range)
        )

        if right_plan is not None:
            value, inside, kept = right_plan
            if kept is not None:
                self._store.add(kept, self.clone(value))
            pieces.append((inside, value))

        return pieces

    def insert_overwrite(self, range: K, value: V) -> None:
        """Insert ``range``, cutting away whatever it overlaps first.

        Raises:
            TryFromBoundsError: If the cut leaves a range that cannot be
                rebuilt; the map is left unchanged
        """
        self.cut(range)
        self.insert_strict(range, value)

    def insert_merge_touching(self, range: K, value: V) -> K:
        """Insert ``range``, absorbing stored ranges that touch it.

        The merged entry carries ``value``.

        Returns:
            The key actually stored

        Raises:
            OverlapError: If ``range`` overlaps a stored range
            TryFromBoundsError: If the merged range cannot be rebuilt
        """
        return self._insert_merge(range, value, touching=True, overlapping=False)

    def insert_merge_overlapping(self, range: K, value: V) -> K:
        """Insert ``range``, absorbing stored ranges that overlap it.

        Touching neighbours are left alone.

        Raises:
            TryFromBoundsError: If the merged range cannot be rebuilt
        """
        return self._insert_merge(range, value, touching=False, overlapping=True)

    def insert_merge_touching_or_overlapping(self, range: K, value: V) -> K:
        """Insert ``range``, absorbing stored ranges that touch or overlap it.

        Raises:
            TryFromBoundsError: If the merged range cannot be rebuilt
        """
        return self._insert_merge(range, value, touching=True, overlapping=True)

    def _insert_merge(
        self, range: K, value: V, *, touching: bool, overlapping: bool
    ) -> K:
        self._check(range)
        store = self._store
        lo, hi = store.overlap_slice(
            start_rank(range.start_bound), end_rank(range.end_bound)
        )
        if hi > lo and not overlapping:
            logger.debug("rejected merge insert of %s: overlap", range)
            raise OverlapError(f"{range} overlaps a range already in the map")

        start, end = range.start_bound, range.end_bound
        if hi > lo:
            start = min(start, store[lo][0].start_bound, key=start_rank)
            end = max(end, store[hi - 1][0].end_bound, key=end_rank)

        if touching:
            if lo > 0 and bounds_touch(store[lo - 1][0].end_bound, start):
                lo -= 1
                start = store[lo][0].start_bound
            if hi < len(store) and bounds_touch(end, store[hi][0].start_bound):
                end = store[hi][0].end_bound
                hi += 1

        if (start, end) == bounds_of(range):
            merged = range
        else:
            merged = self._rebuild(range, start, end)

        if hi > lo:
            span = Bounds(start, end)
            absorbed = store.drain_while(lo, lambda entry: overlaps(entry[0], span))
            logger.debug(
                "merged %s with %d entries into %s", range, len(absorbed), merged
            )
        store.add(merged, value)
        return merged

    def split_off(self, bound: Bound) -> Self:
        """Move every entry at or after start bound ``bound`` into a new map.

        A stored range straddling ``bound`` is split: its left part stays,
        its right part (with a cloned value) moves.

        Raises:
            TryFromBoundsError: If either part of a straddling range cannot
                be rebuilt; the map is left unchanged
        """
        rank = start_rank(bound)
        index = self._store.index_containing(rank)

        if index is None:
            return self._spawn(self._store.split(self._store.bisect(rank)))

        key, value = self._store[index]
        if start_rank(key.start_bound) == rank:
            return self._spawn(self._store.split(index))

        kept = self._rebuild(key, key.start_bound, flip(bound))
        moved = self._rebuild(key, bound, key.end_bound)

        self._store.pop(index)
        self._store.add(kept, value)
        tail = self._store.split(index + 1)
        tail.add(moved, self.clone(value))
        logger.debug("split %s at %s", key, bound)
        return self._spawn(tail)

    # --- copying and serialization ---

    def copy(self) -> Self:
        """Copy the map, cloning each value with the map's clone hook."""
        return self._spawn(self._store.copy(self.clone))

    def __copy__(self) -> Self:
        return self.copy()

    def to_pairs(self) -> list[Entry[K, V]]:
        """Return the entries as an ascending list of ``(range, value)``."""
        return list(self._store)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, V]], **options: Any) -> Self:
        """Rebuild a map from :meth:`to_pairs` output.

        Raises:
            OverlapError: If the pairs overlap
        """
        return cls(pairs, **options)

    def __getstate__(self) -> dict[str, Any]:
        return {
            "range_type": self.range_type,
            "clone": self.clone,
            "entries": self.to_pairs(),
        }

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.range_type = state["range_type"]
        self.clone = state["clone"]
        self._store = BoundStore()
        for key, value in state["entries"]:
            self.insert_strict(key, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeBoundsMap):
            return NotImplemented
        return self.to_pairs() == other.to_pairs()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_pairs()!r})"


def range_map(*entries: tuple[Any, Any], **options: Any) -> RangeBoundsMap[Any, Any]:
    """Create a map from ``(range, value)`` pairs, rejecting overlaps.

    Example:
        >>> from rangebounds import Range, range_map
        >>> m = range_map((Range(1, 4), "a"), (Range(4, 8), "b"))
        >>> m.get_at_point(5)
        'b'
    """
    return RangeBoundsMap(entries, **options)
