"""Errors raised by range maps."""

from typing import Any


class RangeBoundsError(Exception):
    """Base class for recoverable range map errors."""


class OverlapError(RangeBoundsError):
    """A strict write collided with a range already in the map."""


class TryFromBoundsError(RangeBoundsError):
    """A derived range cannot be represented by the map's range type.

    Cutting ``RangeInclusive(4, 6)`` out of ``Range(2, 8)`` in a map of
    half-open ``Range`` keys would leave ``(Excluded(6), Excluded(8))``
    behind, which ``Range`` cannot hold. Merging touching ranges can run
    into the same wall.
    """


class InvalidRangeError(ValueError):
    """A range whose start lies after its end was passed to a map.

    This is a caller bug, not a runtime condition: operations raise it
    before touching the map.
    """

    def __init__(self, range: Any):
        self.range: Any = range
        super().__init__(
            f"Invalid range: start bound must not lie after end bound.\n"
            f"Got {range!r} (start={range.start_bound}, end={range.end_bound})\n"
            f"Hint: empty ranges such as Range(4, 4) are invalid too; "
            f"use RangeInclusive(4, 4) for a single point"
        )
