"""Range key types.

Any object with ``start_bound`` and ``end_bound`` properties can be stored in
a :class:`~rangebounds.core.RangeBoundsMap`. Maps that cut, split or merge
also need to build new keys from a raw pair of bounds, which is what
``try_from_bounds`` is for: it returns ``None`` when the pair's inclusivity
does not fit the type, e.g. ``Range`` only holds ``[start, end)``.
"""

from dataclasses import dataclass
from typing import Any, Generic, Protocol, Self, TypeVar, runtime_checkable

from rangebounds.bound import UNBOUNDED, Bound, Excluded, Included, Unbounded

I = TypeVar("I")


@runtime_checkable
class RangeBounds(Protocol):
    @property
    def start_bound(self) -> Bound: ...

    @property
    def end_bound(self) -> Bound: ...


class TryFromBounds(Protocol):
    @classmethod
    def try_from_bounds(cls, start: Bound, end: Bound) -> Self | None: ...


@dataclass(frozen=True)
class Range(Generic[I]):
    """Half-open range ``[start, end)``."""

    start: I
    end: I

    @property
    def start_bound(self) -> Bound:
        return Included(self.start)

    @property
    def end_bound(self) -> Bound:
        return Excluded(self.end)

    @classmethod
    def try_from_bounds(cls, start: Bound, end: Bound) -> "Range[Any] | None":
        if isinstance(start, Included) and isinstance(end, Excluded):
            return cls(start.value, end.value)
        return None

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


@dataclass(frozen=True)
class RangeInclusive(Generic[I]):
    """Closed range ``[start, end]``."""

    start: I
    end: I

    @property
    def start_bound(self) -> Bound:
        return Included(self.start)

    @property
    def end_bound(self) -> Bound:
        return Included(self.end)

    @classmethod
    def try_from_bounds(
        cls, start: Bound, end: Bound
    ) -> "RangeInclusive[Any] | None":
        if isinstance(start, Included) and isinstance(end, Included):
            return cls(start.value, end.value)
        return None

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


@dataclass(frozen=True)
class RangeFrom(Generic[I]):
    """Range ``[start, +inf)``."""

    start: I

    @property
    def start_bound(self) -> Bound:
        return Included(self.start)

    @property
    def end_bound(self) -> Bound:
        return UNBOUNDED

    @classmethod
    def try_from_bounds(cls, start: Bound, end: Bound) -> "RangeFrom[Any] | None":
        if isinstance(start, Included) and isinstance(end, Unbounded):
            return cls(start.value)
        return None

    def __str__(self) -> str:
        return f"[{self.start}, +inf)"


@dataclass(frozen=True)
class RangeTo(Generic[I]):
    """Range ``(-inf, end)``."""

    end: I

    @property
    def start_bound(self) -> Bound:
        return UNBOUNDED

    @property
    def end_bound(self) -> Bound:
        return Excluded(self.end)

    @classmethod
    def try_from_bounds(cls, start: Bound, end: Bound) -> "RangeTo[Any] | None":
        if isinstance(start, Unbounded) and isinstance(end, Excluded):
            return cls(end.value)
        return None

    def __str__(self) -> str:
        return f"(-inf, {self.end})"


@dataclass(frozen=True)
class RangeToInclusive(Generic[I]):
    """Range ``(-inf, end]``."""

    end: I

    @property
    def start_bound(self) -> Bound:
        return UNBOUNDED

    @property
    def end_bound(self) -> Bound:
        return Included(self.end)

    @classmethod
    def try_from_bounds(
        cls, start: Bound, end: Bound
    ) -> "RangeToInclusive[Any] | None":
        if isinstance(start, Unbounded) and isinstance(end, Included):
            return cls(end.value)
        return None

    def __str__(self) -> str:
        return f"(-inf, {self.end}]"


@dataclass(frozen=True)
class RangeFull:
    """Range covering every value."""

    @property
    def start_bound(self) -> Bound:
        return UNBOUNDED

    @property
    def end_bound(self) -> Bound:
        return UNBOUNDED

    @classmethod
    def try_from_bounds(cls, start: Bound, end: Bound) -> "RangeFull | None":
        if isinstance(start, Unbounded) and isinstance(end, Unbounded):
            return cls()
        return None

    def __str__(self) -> str:
        return "(-inf, +inf)"


@dataclass(frozen=True)
class Bounds:
    """Raw pair of bounds; every combination is representable.

    Use this as the key type when a map must accept the remainders of
    arbitrary cuts and merges.
    """

    start: Bound
    end: Bound

    @property
    def start_bound(self) -> Bound:
        return self.start

    @property
    def end_bound(self) -> Bound:
        return self.end

    @classmethod
    def try_from_bounds(cls, start: Bound, end: Bound) -> "Bounds":
        return cls(start, end)

    def __str__(self) -> str:
        return f"({self.start}, {self.end})"


def bounds_of(range: RangeBounds) -> tuple[Bound, Bound]:
    """Return ``range`` as a plain ``(start, end)`` bound pair."""
    return range.start_bound, range.end_bound
