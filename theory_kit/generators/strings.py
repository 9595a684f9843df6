"""
Character and string sources.

Characters are drawn as code points and shrink toward the lowest code point
of their range; strings are lists of characters joined together, so they
shrink by losing characters first and simplifying the rest second.
"""

from __future__ import annotations

from ..core.source import Source
from ..utilities.constants import DEFAULT_MAX_STRING_LENGTH
from .integers import integer_source
from .lists import list_source

ASCII_RANGE = (0x0000, 0x007F)
BASIC_LATIN_RANGE = (0x0020, 0x007E)


def code_points(low: int, high: int) -> Source[str]:
    """Single characters with code points in [low, high]."""
    return integer_source(low, high).map(chr, ord).described_as(repr)


class CharacterDomain:
    """Entry point for character sources (``characters().basic_latin()``)."""

    def ascii(self) -> Source[str]:
        return code_points(*ASCII_RANGE)

    def basic_latin(self) -> Source[str]:
        """Printable ASCII, from space to tilde."""
        return code_points(*BASIC_LATIN_RANGE)

    def between(self, low: str, high: str) -> Source[str]:
        return code_points(ord(low), ord(high))


class StringDomain:
    """Strings built from a character Source."""

    def __init__(self, characters: Source[str] | None = None) -> None:
        self.characters = characters or code_points(*BASIC_LATIN_RANGE)

    def ascii(self) -> StringDomain:
        return StringDomain(code_points(*ASCII_RANGE))

    def basic_latin(self) -> StringDomain:
        return StringDomain(code_points(*BASIC_LATIN_RANGE))

    def of_lengths_between(self, min_length: int, max_length: int) -> Source[str]:
        chars = list_source(self.characters, min_length, max_length)
        return chars.map("".join, list).described_as(repr)

    def of_length(self, length: int) -> Source[str]:
        return self.of_lengths_between(length, length)

    def all(self) -> Source[str]:
        return self.of_lengths_between(0, DEFAULT_MAX_STRING_LENGTH)


def characters() -> CharacterDomain:
    return CharacterDomain()


def strings() -> StringDomain:
    return StringDomain()
