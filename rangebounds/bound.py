"""Range endpoints and their ordering.

A bound on its own has no natural order: ``Excluded(4)`` sorts after
``Included(4)`` when it opens a range and before it when it closes one.
Ordering is therefore always asked for through :func:`rank`, which takes the
edge the bound is being used as.
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeAlias, TypeVar

I = TypeVar("I")

Edge: TypeAlias = Literal["start", "end"]


@dataclass(frozen=True, repr=False)
class Included(Generic[I]):
    value: I

    def __repr__(self) -> str:
        return f"Included({self.value!r})"


@dataclass(frozen=True, repr=False)
class Excluded(Generic[I]):
    value: I

    def __repr__(self) -> str:
        return f"Excluded({self.value!r})"


@dataclass(frozen=True, repr=False)
class Unbounded:
    def __repr__(self) -> str:
        return "Unbounded"


UNBOUNDED = Unbounded()

Bound: TypeAlias = Included[Any] | Excluded[Any] | Unbounded

# A rank is (section,) for the two infinities or (1, value, tie) otherwise.
# Ties for one value: end-Excluded(0) < Included(1) < start-Excluded(2).
BoundRank: TypeAlias = tuple[Any, ...]

_BELOW_ALL: BoundRank = (0,)
_ABOVE_ALL: BoundRank = (2,)


def rank(bound: Bound, edge: Edge) -> BoundRank:
    """Return a comparable key for ``bound`` used as the ``edge`` of a range.

    Start and end ranks share one scale, so a range's end rank can be
    compared against another range's start rank directly.

    Raises:
        TypeError: If ``bound`` is not a bound variant
    """
    if isinstance(bound, Included):
        return (1, bound.value, 1)
    if isinstance(bound, Excluded):
        return (1, bound.value, 2 if edge == "start" else 0)
    if isinstance(bound, Unbounded):
        return _BELOW_ALL if edge == "start" else _ABOVE_ALL
    raise TypeError(
        f"Expected Included, Excluded or Unbounded as a {edge} bound.\n"
        f"Got {type(bound).__name__!r}: {bound!r}"
    )


def start_rank(bound: Bound) -> BoundRank:
    return rank(bound, "start")


def end_rank(bound: Bound) -> BoundRank:
    return rank(bound, "end")


def flip(bound: Bound) -> Bound:
    """Swap inclusivity, keeping the value.

    The flipped bound is the edge of the complement on the other side of
    ``bound``: a range ending at ``Included(4)`` is followed by one starting
    at ``Excluded(4)``.

    Raises:
        ValueError: If ``bound`` is unbounded (it has no other side)
    """
    if isinstance(bound, Included):
        return Excluded(bound.value)
    if isinstance(bound, Excluded):
        return Included(bound.value)
    raise ValueError(f"Cannot flip an unbounded edge: {bound!r}")
