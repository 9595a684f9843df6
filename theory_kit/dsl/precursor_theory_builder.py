"""
Theories about derived values that keep the precursor they came from.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ..core.check_result import CheckResult
from ..domain.pair import Pair
from .assumptions import asserting, conjoin
from .base import BaseTheoryBuilder

P = TypeVar("P")
A = TypeVar("A")
T = TypeVar("T")


class PrecursorTheoryBuilder(BaseTheoryBuilder[P, Pair[A, T]]):
    """
    Builds theories about (precursor, derived) pairs.

    Properties and assumptions receive the precursor and the derived value
    as two arguments. Shrinking always reduces the precursor and recomputes
    the derived value from it.
    """

    def assuming(self, new_assumption: Callable[[A, T], bool]) -> PrecursorTheoryBuilder[P, A, T]:
        """Constrain the pairs the theory must hold for."""
        converter = self.converter

        def holds(value: P) -> bool:
            pair = converter(value)
            return new_assumption(pair.first, pair.second)

        return PrecursorTheoryBuilder(
            self.state, self.source, conjoin(self.assumptions, holds), converter, self.describer
        )

    def described_as(
        self, precursor_to_string: Callable[[A], str], type_to_string: Callable[[T], str]
    ) -> PrecursorTheoryBuilder[P, A, T]:
        """Describe both components of the pair in failure reports."""

        def describe(pair: Pair[A, T]) -> str:
            return str(pair.map(precursor_to_string, type_to_string))

        return PrecursorTheoryBuilder(
            self.state, self.source, self.assumptions, self.converter, describe
        )

    def check(self, prop: Callable[[A, T], Any]) -> CheckResult:
        """Check a boolean property of the precursor and derived value."""
        return self.runner().check(lambda pair: prop(pair.first, pair.second))

    def check_assert(self, prop: Callable[[A, T], Any]) -> CheckResult:
        """Check a property that signals falsification by raising."""
        return self.check(asserting(prop))
