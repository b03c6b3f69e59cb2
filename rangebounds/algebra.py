"""Pure predicates and decompositions over pairs of ranges."""

from dataclasses import dataclass

from rangebounds.bound import Bound, Excluded, Included, end_rank, flip, start_rank
from rangebounds.ranges import RangeBounds

BoundPair = tuple[Bound, Bound]


@dataclass(frozen=True)
class CutResult:
    """Pieces of a target range on either side of, and inside, a cutter."""

    before: BoundPair | None
    inside: BoundPair
    after: BoundPair | None


def is_valid(range: RangeBounds) -> bool:
    """True if the range holds at least one point."""
    return start_rank(range.start_bound) <= end_rank(range.end_bound)


def overlaps(a: RangeBounds, b: RangeBounds) -> bool:
    """True if ``a`` and ``b`` share at least one point.

    Touching ranges such as ``[1, 4)`` and ``[4, 8)`` do not overlap.
    """
    return not (
        end_rank(a.end_bound) < start_rank(b.start_bound)
        or end_rank(b.end_bound) < start_rank(a.start_bound)
    )


def bounds_touch(end: Bound, start: Bound) -> bool:
    """True if a range ending at ``end`` is directly followed by one
    starting at ``start``, with neither a gap nor a shared point."""
    if isinstance(end, Included) and isinstance(start, Excluded):
        return end.value == start.value
    if isinstance(end, Excluded) and isinstance(start, Included):
        return end.value == start.value
    return False


def touches(a: RangeBounds, b: RangeBounds) -> bool:
    """True if ``a`` ends exactly where ``b`` starts."""
    return bounds_touch(a.end_bound, b.start_bound)


def intersection(a: RangeBounds, b: RangeBounds) -> BoundPair:
    """Bounds shared by two overlapping ranges."""
    start = max(a.start_bound, b.start_bound, key=start_rank)
    end = min(a.end_bound, b.end_bound, key=end_rank)
    return start, end


def cut_range(target: RangeBounds, cutter: RangeBounds) -> CutResult:
    """Decompose ``target`` around ``cutter``.

    ``before`` and ``after`` are the parts of ``target`` left outside the
    cutter on each side; ``inside`` is what the cutter covers. The caller
    must ensure the two ranges overlap.
    """
    before = None
    after = None

    if start_rank(target.start_bound) < start_rank(cutter.start_bound):
        before = (target.start_bound, flip(cutter.start_bound))

    if end_rank(cutter.end_bound) < end_rank(target.end_bound):
        after = (flip(cutter.end_bound), target.end_bound)

    return CutResult(before=before, inside=intersection(target, cutter), after=after)
