import logging
from dataclasses import dataclass
from typing import Any, ClassVar, override

from intrange.util import HASH_MULTIPLIER, HASH_SEED, INT_MAX, INT_MIN, to_int32

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class IntRange:
    """Closed range of 32-bit signed integers.

    Obtain instances through `IntRange.of`, which orders its arguments, or
    through the `EMPTY` and `ALL` constants. Direct construction is
    validated and refuses anything but an ordered pair or the canonical
    empty encoding.
    """

    min: int
    max: int

    EMPTY: ClassVar["IntRange"]
    ALL: ClassVar["IntRange"]

    def __post_init__(self) -> None:
        for edge, bound in (("min", self.min), ("max", self.max)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError(
                    f"IntRange {edge} bound must be int.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}"
                )
            if not INT_MIN <= bound <= INT_MAX:
                raise ValueError(
                    f"IntRange {edge} bound ({bound}) is outside the 32-bit "
                    f"signed domain [{INT_MIN}, {INT_MAX}].\n"
                    f"Hint: Use IntRange.ALL for the widest possible range"
                )
        if self.min > self.max and not self.is_empty():
            raise ValueError(
                f"IntRange min ({self.min}) must be <= max ({self.max}).\n"
                f"Hint: IntRange.of() orders its bounds for you:\n"
                f"  IntRange.of({self.min}, {self.max})  "
                f"# -> [{self.max},{self.min}]"
            )

    @classmethod
    def of(cls, a: int, b: int) -> "IntRange":
        """Create a range from two bounds given in either order."""
        if a <= b:
            return cls(min=a, max=b)
        return cls(min=b, max=a)

    def is_empty(self) -> bool:
        # Exact match on the sentinel pair, not a min > max test
        return self.min == INT_MAX and self.max == INT_MIN

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self.contains(value)

    def contains_range(self, other: "IntRange") -> bool:
        """True if both bounds of `other` lie within this range.

        Bounds are ordered, so every value between them is covered too.
        EMPTY is tested by its sentinel bounds: only ALL holds both.
        """
        return self.contains(other.min) and self.contains(other.max)

    def is_overlapping(self, other: "IntRange") -> bool:
        """True if the two ranges share at least one value.

        Always False when either side is empty.
        """
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.contains(other.min)
            or self.contains(other.max)
            or other.contains(self.min)
            or other.contains(self.max)
        )

    def is_disjoint(self, other: "IntRange") -> bool:
        return not self.is_overlapping(other)

    def intersect(self, *ranges: "IntRange") -> "IntRange":
        """Intersect this range with each of `ranges`, left to right.

        Stops as soon as the running result is empty. With no arguments
        the range itself is returned.

        Example:
            >>> IntRange.of(1, 5).intersect(IntRange.of(3, 8))
            IntRange(min=3, max=5)
        """
        result = self
        for index, other in enumerate(ranges):
            result = result._intersect_one(other)
            if result.is_empty():
                skipped = len(ranges) - index - 1
                if skipped:
                    LOGGER.debug(
                        "Intersection of %s became empty at argument %d; "
                        "skipping %d remaining range(s)",
                        self,
                        index,
                        skipped,
                    )
                break
        return result

    def _intersect_one(self, other: "IntRange") -> "IntRange":
        if other is self:
            return self
        if self.is_overlapping(other):
            return IntRange.of(max(self.min, other.min), min(self.max, other.max))
        return EMPTY

    def __and__(self, other: Any) -> "IntRange":
        if not isinstance(other, IntRange):
            return NotImplemented
        return self._intersect_one(other)

    @override
    def __hash__(self) -> int:
        result = HASH_SEED
        result = to_int32(HASH_MULTIPLIER * result + self.min)
        result = to_int32(HASH_MULTIPLIER * result + self.max)
        # CPython reports a -1 result as -2
        return result

    @override
    def __str__(self) -> str:
        if self.is_empty():
            return "[EMPTY]"
        return f"[{self.min},{self.max}]"


EMPTY = IntRange(min=INT_MAX, max=INT_MIN)
ALL = IntRange(min=INT_MIN, max=INT_MAX)

IntRange.EMPTY = EMPTY
IntRange.ALL = ALL


def intersection(*ranges: IntRange) -> IntRange:
    """Intersect ranges left to right (equivalent to chaining `&`)."""

    if not ranges:
        raise ValueError(
            f"intersection() requires at least one range argument.\n"
            f"Example: intersection(IntRange.of(1, 10), IntRange.of(5, 20))"
        )

    first, *rest = ranges
    return first.intersect(*rest)
