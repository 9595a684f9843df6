"""
Standard Sources for common value types.

    from theory_kit.generators import integers, lists, strings

    integers().between(0, 100)
    lists().of(integers().all()).of_sizes_between(1, 10)
    strings().basic_latin().of_lengths_between(0, 20)
"""

from .arbitrary import booleans, constant, pick
from .integers import IntegerDomain, integer_source, integers, longs, shrink_target, shrink_towards
from .lists import ListDomain, list_source, lists
from .strings import CharacterDomain, StringDomain, characters, code_points, strings

__all__ = [
    "CharacterDomain",
    "IntegerDomain",
    "ListDomain",
    "StringDomain",
    "booleans",
    "characters",
    "code_points",
    "constant",
    "integer_source",
    "integers",
    "list_source",
    "lists",
    "longs",
    "pick",
    "shrink_target",
    "shrink_towards",
    "strings",
]
