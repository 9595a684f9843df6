"""
Pair value object.

Holds two values together, typically a precursor value and the value
derived from it, so both can be reported and shrunk together.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    """
    Immutable ordered pair.

    Supports tuple unpacking so properties can be written as
    ``lambda pair: check(*pair)``.
    """

    first: A
    second: B

    @classmethod
    def of(cls, first: A, second: B) -> Pair[A, B]:
        """Create a Pair from two values."""
        return cls(first, second)

    def map(self, first_fn: Callable[[A], C], second_fn: Callable[[B], D]) -> Pair[C, D]:
        """Apply a function to each component."""
        return Pair(first_fn(self.first), second_fn(self.second))

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        """String representation."""
        return f"{{{self.first}, {self.second}}}"
