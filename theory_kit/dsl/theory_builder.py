"""
Builds theories about the values of a single Source.
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
from .precursor_theory_builder import PrecursorTheoryBuilder

A = TypeVar("A")
T = TypeVar("T")


class TheoryBuilder(BaseTheoryBuilder[A, A]):
    """
    Builds theories about values of type A.

    Example:
        qt().for_all(integers().between(0, 100)) \\
            .assuming(lambda x: x % 2 == 0) \\
            .check(lambda x: x != 4)
    """

    def __init__(
        self,
        state: Callable[[], Strategy],
        source: Source[A],
        assumptions: Callable[[A], bool] = always,
    ) -> None:
        """
        Args:
            state: Supplies the strategy for each check
            source: Source of the values to generate and shrink
            assumptions: Limits the values the theory must hold for
        """
        super().__init__(state, source, assumptions, identity, source.as_string)

    def assuming(self, new_assumption: Callable[[A], bool]) -> TheoryBuilder[A]:
        """Constrain the values the theory must hold for."""
        return TheoryBuilder(self.state, self.source, conjoin(self.assumptions, new_assumption))

    def as_(self, mapping: Callable[[A], T]) -> MappingTheoryBuilder[A, T]:
        """
        Convert the theory to one about a different type.

        Values are described with str() unless described_as is called on the
        result.
        """
        return MappingTheoryBuilder(self.state, self.source, self.assumptions, mapping, str)

    def as_with_precursor(
        self, mapping: Callable[[A], T], describe_new: Callable[[T], str] = str
    ) -> PrecursorTheoryBuilder[Pair[A, T], A, T]:
        """
        Convert the theory to one about a different type, retaining the
        precursor value each converted value was built from.

        Args:
            mapping: Function from A to T
            describe_new: Describes T values in failure reports

        Returns:
            Builder whose properties receive (precursor, converted)
        """
        source = self.source.map_with_precursor(mapping, describe_new)
        assumptions = self.assumptions

        def holds(pair: Pair[A, T]) -> bool:
            return assumptions(pair.first)

        return PrecursorTheoryBuilder(self.state, source, holds, identity, source.as_string)

    def described_as(self, to_string: Callable[[A], str]) -> TheoryBuilder[A]:
        """Describe values with to_string in failure reports."""
        return TheoryBuilder(self.state, self.source.described_as(to_string), self.assumptions)

    def check(self, prop: Callable[[A], Any]) -> CheckResult:
        """Check a boolean property across a random sample of values."""
        return self.runner().check(prop)

    def check_assert(self, prop: Callable[[A], Any]) -> CheckResult:
        """
        Check a property across a random sample of values where
        falsification is indicated by an exception such as an assertion.
        """
        return self.check(asserting(prop))
