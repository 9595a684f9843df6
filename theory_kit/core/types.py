"""
Shared protocol types for the function shapes composed by Sources.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from .prng import PseudoRandomStream
    from .source import ShrinkContext

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class Generator(Protocol[T_co]):
    """Produces a value from a stream.

    Must be a pure function of the stream position and step so that
    replaying a position yields the same value.
    """

    def __call__(self, stream: PseudoRandomStream, step: int) -> T_co: ...


class Shrink(Protocol[T]):
    """Yields candidate values smaller than the given one, smallest first.

    The sequence must be finite and may be empty when the value cannot be
    reduced.
    """

    def __call__(self, value: T, context: ShrinkContext) -> Iterator[T]: ...


class AsString(Protocol[T_contra]):
    """Renders a value for failure reports."""

    def __call__(self, value: T_contra) -> str: ...
