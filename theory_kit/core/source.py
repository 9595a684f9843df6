"""
Source: the unit of composition for generating and shrinking values.

A Source bundles a generator, a shrinker and a describer. Sources are
immutable; every combinator returns a new Source built from the functions
of the original, so a Source can be reused across all trials of a run and
across runs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from ..domain.pair import Pair
from ..utilities.constants import DEFAULT_GENERATE_ATTEMPTS
from ..utilities.validators import validate_positive_number
from .prng import PseudoRandomStream, StreamPosition
from .types import AsString, Generator, Shrink

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ShrinkContext:
    """
    Provenance of a value being shrunk.

    Records which stream position produced the original falsifying value
    and how much of the shrink budget is left. Shrinkers may use it to
    decide how aggressively to reduce; callers never interpret it.
    """

    origin: StreamPosition
    remaining_shrinks: int


def no_shrink(value: object, context: ShrinkContext) -> Iterator[object]:
    """Shrinker for values that cannot be reduced."""
    return iter(())


@dataclass(frozen=True)
class Source(Generic[T]):
    """
    Immutable (generator, shrinker, describer) triple.

    The shrinker must only yield values the generator could have produced,
    ordered from most reduced to least, and must yield finitely many for
    any value.
    """

    generator: Generator[T]
    shrinker: Shrink[T] = no_shrink
    describer: AsString[T] = str

    @classmethod
    def of(cls, generator: Generator[T]) -> Source[T]:
        """Create a Source that cannot shrink and describes values with str()."""
        return cls(generator)

    def next(self, stream: PseudoRandomStream, step: int = 0) -> T:
        """Draw a value from the stream."""
        return self.generator(stream, step)

    def shrink(self, value: T, context: ShrinkContext) -> Iterator[T]:
        """Lazily yield shrink candidates for value."""
        return iter(self.shrinker(value, context))

    def as_string(self, value: T) -> str:
        """Describe a value for failure reports."""
        return self.describer(value)

    def described_as(self, describer: AsString[T]) -> Source[T]:
        """Return a copy of this Source with a different description."""
        return replace(self, describer=describer)

    def with_shrinker(self, shrinker: Shrink[T]) -> Source[T]:
        """Return a copy of this Source with a different shrinker."""
        return replace(self, shrinker=shrinker)

    def map(
        self, mapping: Callable[[T], U], inverse: Callable[[U], T] | None = None
    ) -> Source[U]:
        """
        Transform generated values.

        Args:
            mapping: Total function applied to every generated value
            inverse: Optional function recovering the original value, needed
                to shrink mapped values; without it the result cannot shrink

        Returns:
            Source of mapped values, described with str()
        """

        def generate(stream: PseudoRandomStream, step: int) -> U:
            return mapping(self.next(stream, step))

        if inverse is None:
            return Source(generate)

        def shrink(value: U, context: ShrinkContext) -> Iterator[U]:
            return (mapping(candidate) for candidate in self.shrink(inverse(value), context))

        return Source(generate, shrink)

    def map_with_precursor(
        self, mapping: Callable[[T], U], describe_new: AsString[U] = str
    ) -> Source[Pair[T, U]]:
        """
        Transform generated values while keeping the value they came from.

        Only the precursor is shrunk; the derived value is always recomputed
        from the current precursor, so ``pair.second == mapping(pair.first)``
        holds for every generated and shrunk pair.
        """

        def generate(stream: PseudoRandomStream, step: int) -> Pair[T, U]:
            precursor = self.next(stream, step)
            return Pair.of(precursor, mapping(precursor))

        def shrink(original: Pair[T, U], context: ShrinkContext) -> Iterator[Pair[T, U]]:
            return (
                Pair.of(candidate, mapping(candidate))
                for candidate in self.shrink(original.first, context)
            )

        describe_precursor = self.describer

        def describe(pair: Pair[T, U]) -> str:
            return str(pair.map(describe_precursor, describe_new))

        return Source(generate, shrink, describe)

    def zip(self, other: Source[U]) -> Source[Pair[T, U]]:
        """
        Combine with another Source into pairs.

        Shrinking reduces the first component while holding the second
        fixed, then the second while holding the first fixed.
        """

        def generate(stream: PseudoRandomStream, step: int) -> Pair[T, U]:
            first = self.next(stream, step)
            return Pair.of(first, other.next(stream, step))

        def shrink(original: Pair[T, U], context: ShrinkContext) -> Iterator[Pair[T, U]]:
            for candidate in self.shrink(original.first, context):
                yield Pair.of(candidate, original.second)
            for candidate in other.shrink(original.second, context):
                yield Pair.of(original.first, candidate)

        def describe(pair: Pair[T, U]) -> str:
            return str(pair.map(self.describer, other.describer))

        return Source(generate, shrink, describe)

    def filter(
        self, predicate: Callable[[T], bool], max_attempts: int = DEFAULT_GENERATE_ATTEMPTS
    ) -> Source[T]:
        """
        Restrict generated and shrunk values to those matching predicate.

        Unlike a theory assumption this filters at generation time: the
        generator redraws from the same stream up to max_attempts times and
        raises ValueError when no draw matches.
        """
        validate_positive_number(max_attempts, "max_attempts")

        def generate(stream: PseudoRandomStream, step: int) -> T:
            for _ in range(max_attempts):
                value = self.next(stream, step)
                if predicate(value):
                    return value
            raise ValueError(f"No value matched the filter after {max_attempts} attempts")

        def shrink(value: T, context: ShrinkContext) -> Iterator[T]:
            return (candidate for candidate in self.shrink(value, context) if predicate(candidate))

        return replace(self, generator=generate, shrinker=shrink)
