"""
List sources.

Lists shrink by removing elements first (down to the minimum size, then
ever smaller chunks) and then by shrinking individual elements with the
element Source's shrinker.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from ..core.prng import PseudoRandomStream
from ..core.source import ShrinkContext, Source
from ..utilities.constants import DEFAULT_MAX_LIST_SIZE
from ..utilities.validators import validate_non_negative_number, validate_range

T = TypeVar("T")


def _removals(value: list[T], min_size: int) -> Iterator[list[T]]:
    size = len(value)
    if size <= min_size:
        return
    yield value[:min_size]

    chunk = (size - min_size) // 2
    while chunk > 0:
        for start in range(0, size - chunk + 1):
            yield value[:start] + value[start + chunk :]
        chunk //= 2


def list_source(elements: Source[T], min_size: int, max_size: int) -> Source[list[T]]:
    """Source of lists whose sizes lie in [min_size, max_size]."""
    validate_non_negative_number(min_size, "min_size")
    validate_range(min_size, max_size, "list sizes")

    def generate(stream: PseudoRandomStream, step: int) -> list[T]:
        size = stream.next_int(min_size, max_size)
        return [elements.next(stream, step) for _ in range(size)]

    def shrink(value: list[T], context: ShrinkContext) -> Iterator[list[T]]:
        yield from _removals(value, min_size)
        for index, element in enumerate(value):
            for candidate in elements.shrink(element, context):
                yield value[:index] + [candidate] + value[index + 1 :]

    def describe(value: list[T]) -> str:
        return "[" + ", ".join(elements.as_string(element) for element in value) + "]"

    return Source(generate, shrink, describe)


class ListDomain:
    """Lists of values from an element Source (``lists().of(source)``)."""

    def __init__(self, elements: Source[T] | None = None) -> None:
        self.elements = elements

    def of(self, elements: Source[T]) -> ListDomain:
        return ListDomain(elements)

    def of_sizes_between(self, min_size: int, max_size: int) -> Source[list[T]]:
        return list_source(self._require_elements(), min_size, max_size)

    def of_size(self, size: int) -> Source[list[T]]:
        return list_source(self._require_elements(), size, size)

    def all(self) -> Source[list[T]]:
        """Lists of up to DEFAULT_MAX_LIST_SIZE elements."""
        return list_source(self._require_elements(), 0, DEFAULT_MAX_LIST_SIZE)

    def _require_elements(self) -> Source[T]:
        if self.elements is None:
            raise ValueError("Element source not set; call lists().of(source) first")
        return self.elements


def lists() -> ListDomain:
    return ListDomain()
