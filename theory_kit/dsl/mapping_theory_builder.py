"""
Theories about values converted from another Source's values.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ..core.check_result import CheckResult
from ..domain.pair import Pair
from .assumptions import asserting, conjoin
from .base import BaseTheoryBuilder
from .precursor_theory_builder import PrecursorTheoryBuilder

P = TypeVar("P")
T = TypeVar("T")
U = TypeVar("U")


class MappingTheoryBuilder(BaseTheoryBuilder[P, T]):
    """
    Builds theories about ``mapping(value)`` for values of an original Source.

    The original Source is still what gets generated and shrunk; the
    mapping is reapplied to every candidate, so a mapped theory shrinks
    exactly as well as its original Source does.
    """

    def assuming(self, new_assumption: Callable[[T], bool]) -> MappingTheoryBuilder[P, T]:
        """Constrain the converted values the theory must hold for."""
        mapping = self.converter

        def holds(value: P) -> bool:
            return new_assumption(mapping(value))

        return MappingTheoryBuilder(
            self.state, self.source, conjoin(self.assumptions, holds), mapping, self.describer
        )

    def as_(self, mapping: Callable[[T], U]) -> MappingTheoryBuilder[P, U]:
        """Convert the theory to one about another type."""
        current = self.converter

        def convert(value: P) -> U:
            return mapping(current(value))

        return MappingTheoryBuilder(self.state, self.source, self.assumptions, convert, str)

    def as_with_precursor(
        self, mapping: Callable[[T], U], describe_new: Callable[[U], str] = str
    ) -> PrecursorTheoryBuilder[P, T, U]:
        """Convert the theory to one about (value, mapping(value)) pairs."""
        current = self.converter
        describe_current = self.describer

        def convert(value: P) -> Pair[T, U]:
            converted = current(value)
            return Pair.of(converted, mapping(converted))

        def describe(pair: Pair[T, U]) -> str:
            return str(pair.map(describe_current, describe_new))

        return PrecursorTheoryBuilder(self.state, self.source, self.assumptions, convert, describe)

    def described_as(self, to_string: Callable[[T], str]) -> MappingTheoryBuilder[P, T]:
        """Describe converted values with to_string in failure reports."""
        return MappingTheoryBuilder(
            self.state, self.source, self.assumptions, self.converter, to_string
        )

    def check(self, prop: Callable[[T], Any]) -> CheckResult:
        """Check a boolean property across a random sample of values."""
        return self.runner().check(prop)

    def check_assert(self, prop: Callable[[T], Any]) -> CheckResult:
        """Check a property that signals falsification by raising."""
        return self.check(asserting(prop))
