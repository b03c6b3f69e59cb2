from .algebra import CutResult, cut_range, intersection, is_valid, overlaps, touches
from .bound import (
    UNBOUNDED,
    Bound,
    Excluded,
    Included,
    Unbounded,
    end_rank,
    flip,
    rank,
    start_rank,
)
from .core import Overlapping, RangeBoundsMap, range_map
from .errors import (
    InvalidRangeError,
    OverlapError,
    RangeBoundsError,
    TryFromBoundsError,
)
from .ranges import (
    Bounds,
    Range,
    RangeBounds,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
    TryFromBounds,
)

__all__ = [
    "RangeBoundsMap",
    "Overlapping",
    "range_map",
    "Bound",
    "Included",
    "Excluded",
    "Unbounded",
    "UNBOUNDED",
    "rank",
    "start_rank",
    "end_rank",
    "flip",
    "RangeBounds",
    "TryFromBounds",
    "Range",
    "RangeInclusive",
    "RangeFrom",
    "RangeTo",
    "RangeToInclusive",
    "RangeFull",
    "Bounds",
    "CutResult",
    "cut_range",
    "intersection",
    "is_valid",
    "overlaps",
    "touches",
    "RangeBoundsError",
    "OverlapError",
    "TryFromBoundsError",
    "InvalidRangeError",
]
