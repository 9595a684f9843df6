"""
Integer sources.

Integers shrink toward the value in their range closest to zero. Candidates
are ordered most reduced first: the target itself, then points ever closer
to the original value, ending one step away from it. Every candidate is
strictly closer to the target, so repeated shrinking always terminates.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..core.prng import PseudoRandomStream
from ..core.source import ShrinkContext, Source
from ..core.types import Shrink
from ..utilities.constants import MAX_INTEGER, MAX_LONG, MIN_INTEGER, MIN_LONG
from ..utilities.validators import validate_range


def shrink_target(low: int, high: int) -> int:
    """Return the value in [low, high] closest to zero."""
    if low > 0:
        return low
    if high < 0:
        return high
    return 0


def shrink_towards(target: int) -> Shrink[int]:
    """
    Build a shrinker moving integers toward target.

    For value 87 and target 0 the candidates are 0, 44, 66, 77, 82, 85, 86.
    """

    def shrink(value: int, context: ShrinkContext) -> Iterator[int]:
        if value == target:
            return
        yield target
        distance = abs(value - target)
        direction = 1 if value > target else -1
        offset = distance // 2
        while offset > 0:
            candidate = value - direction * offset
            if candidate != target:
                yield candidate
            offset //= 2

    return shrink


def integer_source(low: int, high: int) -> Source[int]:
    """Source of integers drawn uniformly from [low, high]."""
    validate_range(low, high, "integers")

    def generate(stream: PseudoRandomStream, step: int) -> int:
        return stream.next_int(low, high)

    return Source(generate, shrink_towards(shrink_target(low, high)))


class IntegerDomain:
    """Entry point for integer sources (``integers().between(0, 100)``)."""

    def __init__(self, low: int = MIN_INTEGER, high: int = MAX_INTEGER) -> None:
        self.low = low
        self.high = high

    def all(self) -> Source[int]:
        """All values in this domain."""
        return integer_source(self.low, self.high)

    def between(self, low: int, high: int) -> Source[int]:
        """Values in the inclusive range [low, high]."""
        return integer_source(low, high)

    def all_positive(self) -> Source[int]:
        """Values from 1 to the top of this domain."""
        return integer_source(1, self.high)

    def from_zero_to(self, high: int) -> Source[int]:
        """Values from 0 to high inclusive."""
        return integer_source(0, high)


def integers() -> IntegerDomain:
    """Integers within the 32-bit signed range."""
    return IntegerDomain(MIN_INTEGER, MAX_INTEGER)


def longs() -> IntegerDomain:
    """Integers within the 64-bit signed range."""
    return IntegerDomain(MIN_LONG, MAX_LONG)
