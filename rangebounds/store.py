"""Ordered storage for non-overlapping range entries.

Entries are ``(range, value)`` tuples kept sorted by the start rank of their
range. Because stored ranges never overlap, their end ranks are sorted too,
which lets every lookup here be a binary search on start ranks.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from sortedcontainers import SortedKeyList

from rangebounds.bound import BoundRank, end_rank, start_rank

K = TypeVar("K")
V = TypeVar("V")

Entry = tuple[K, V]


def _entry_rank(entry: tuple[Any, Any]) -> BoundRank:
    return start_rank(entry[0].start_bound)


class BoundStore(Generic[K, V]):
    """Sorted ``(range, value)`` entries searchable by arbitrary bound rank.

    The store does not check for overlaps; callers guarantee that every
    added entry is disjoint from the ones already present.
    """

    def __init__(self, entries: Iterable[Entry[K, V]] = ()):
        self._entries: SortedKeyList = SortedKeyList(entries, key=_entry_rank)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry[K, V]]:
        return iter(self._entries)

    def __reversed__(self) -> Iterator[Entry[K, V]]:
        return reversed(self._entries)

    def __getitem__(self, index: int) -> Entry[K, V]:
        return self._entries[index]

    def add(self, key: K, value: V) -> None:
        self._entries.add((key, value))

    def pop(self, index: int) -> Entry[K, V]:
        return self._entries.pop(index)

    def replace_value(self, index: int, value: V) -> None:
        key, _ = self._entries.pop(index)
        self._entries.add((key, value))

    def first(self) -> Entry[K, V] | None:
        return self._entries[0] if self._entries else None

    def last(self) -> Entry[K, V] | None:
        return self._entries[-1] if self._entries else None

    def bisect(self, rank: BoundRank) -> int:
        """Number of entries whose start rank is at or below ``rank``."""
        return self._entries.bisect_key_right(rank)

    def index_containing(self, rank: BoundRank) -> int | None:
        """Index of the entry whose range spans ``rank``, if any.

        ``rank`` may be a start or an end rank; both live on the same scale.
        """
        index = self.bisect(rank) - 1
        if index < 0:
            return None
        key, _ = self._entries[index]
        if end_rank(key.end_bound) < rank:
            return None
        return index

    def overlap_slice(self, lower: BoundRank, upper: BoundRank) -> tuple[int, int]:
        """Index span ``[lo, hi)`` of entries overlapping a query range.

        Args:
            lower: Start rank of the query range
            upper: End rank of the query range
        """
        hi = self.bisect(upper)
        lo = self.bisect(lower)
        if lo > 0:
            key, _ = self._entries[lo - 1]
            if end_rank(key.end_bound) >= lower:
                lo -= 1
        return lo, hi

    def islice(
        self, lo: int, hi: int, reverse: bool = False
    ) -> Iterator[Entry[K, V]]:
        return self._entries.islice(lo, hi, reverse=reverse)

    def drain_while(
        self, index: int, predicate: Callable[[Entry[K, V]], bool]
    ) -> list[Entry[K, V]]:
        """Remove the contiguous run of entries from ``index`` on that
        satisfy ``predicate`` and return them in ascending order."""
        stop = index
        for entry in self._entries.islice(index):
            if not predicate(entry):
                break
            stop += 1
        drained = list(self._entries.islice(index, stop))
        del self._entries[index:stop]
        return drained

    def split(self, index: int) -> "BoundStore[K, V]":
        """Move entries from ``index`` onwards into a new store."""
        tail = BoundStore(list(self._entries.islice(index)))
        del self._entries[index:]
        return tail

    def copy(self, clone: Callable[[V], V]) -> "BoundStore[K, V]":
        return BoundStore([(key, clone(value)) for key, value in self._entries])
