"""
Builds theories about pairs of values drawn from two Sources.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ..core.check_result import CheckResult
from ..core.source import Source
from ..core.strategy import Strategy
from ..domain.pair import Pair
from .assumptions import always, asserting, conjoin, identity
from .base import BaseTheoryBuilder
from .mapping_theory_builder import MappingTheoryBuilder

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


class TheoryBuilder2(BaseTheoryBuilder[Pair[A, B], Pair[A, B]]):
    """Builds theories about values of types A and B."""

    def __init__(
        self,
        state: Callable[[], Strategy],
        first: Source[A],
        second: Source[B],
        assumptions: Callable[[Pair[A, B]], bool] = always,
    ) -> None:
        source = first.zip(second)
        super().__init__(state, source, assumptions, identity, source.as_string)
        self.first = first
        self.second = second

    def assuming(self, new_assumption: Callable[[A, B], bool]) -> TheoryBuilder2[A, B]:
        """Constrain the values the theory must hold for."""

        def holds(pair: Pair[A, B]) -> bool:
            return new_assumption(pair.first, pair.second)

        return TheoryBuilder2(
            self.state, self.first, self.second, conjoin(self.assumptions, holds)
        )

    def as_(self, mapping: Callable[[A, B], T]) -> MappingTheoryBuilder[Pair[A, B], T]:
        """Combine both values into one and build a theory about the result."""

        def convert(pair: Pair[A, B]) -> T:
            return mapping(pair.first, pair.second)

        return MappingTheoryBuilder(self.state, self.source, self.assumptions, convert, str)

    def described_as(
        self, first_to_string: Callable[[A], str], second_to_string: Callable[[B], str]
    ) -> TheoryBuilder2[A, B]:
        """Describe each value with its own function in failure reports."""
        return TheoryBuilder2(
            self.state,
            self.first.described_as(first_to_string),
            self.second.described_as(second_to_string),
            self.assumptions,
        )

    def check(self, prop: Callable[[A, B], Any]) -> CheckResult:
        """Check a boolean property of both values."""
        return self.runner().check(lambda pair: prop(pair.first, pair.second))

    def check_assert(self, prop: Callable[[A, B], Any]) -> CheckResult:
        """Check a property of both values that signals falsification by raising."""
        return self.check(asserting(prop))
