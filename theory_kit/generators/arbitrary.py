"""
Sources for booleans, constants and picks from fixed sequences.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from ..core.prng import PseudoRandomStream
from ..core.source import ShrinkContext, Source
from .integers import shrink_towards

T = TypeVar("T")


def booleans() -> Source[bool]:
    """True or False with equal probability; True shrinks to False."""

    def generate(stream: PseudoRandomStream, step: int) -> bool:
        return stream.next_bool()

    def shrink(value: bool, context: ShrinkContext) -> Iterator[bool]:
        if value:
            yield False

    return Source(generate, shrink)


def constant(value: T) -> Source[T]:
    """Always the same value."""

    def generate(stream: PseudoRandomStream, step: int) -> T:
        return value

    return Source.of(generate)


def pick(values: Sequence[T]) -> Source[T]:
    """
    Elements of a fixed, non-empty sequence.

    Shrinks toward elements earlier in the sequence, so list the simplest
    values first.
    """
    choices = tuple(values)
    if not choices:
        raise ValueError("Cannot pick from an empty sequence")
    towards_first = shrink_towards(0)

    def generate(stream: PseudoRandomStream, step: int) -> T:
        return choices[stream.next_int(0, len(choices) - 1)]

    def shrink(value: T, context: ShrinkContext) -> Iterator[T]:
        index = choices.index(value)
        return (choices[candidate] for candidate in towards_first(index, context))

    return Source(generate, shrink)
