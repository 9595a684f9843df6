"""
Fluent builder layer: ``qt().for_all(source).assuming(...).check(...)``.
"""

from .assumptions import assume
from .mapping_theory_builder import MappingTheoryBuilder
from .precursor_theory_builder import PrecursorTheoryBuilder
from .quick_theory import QuickTheory, qt
from .theory_builder import TheoryBuilder
from .theory_builder2 import TheoryBuilder2

__all__ = [
    "MappingTheoryBuilder",
    "PrecursorTheoryBuilder",
    "QuickTheory",
    "TheoryBuilder",
    "TheoryBuilder2",
    "assume",
    "qt",
]
