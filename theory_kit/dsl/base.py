"""
Shared state held by every theory builder.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from ..core.source import Source
from ..core.strategy import Strategy
from ..core.theory_runner import TheoryRunner
from ..core.types import AsString

P = TypeVar("P")
V = TypeVar("V")


class BaseTheoryBuilder(Generic[P, V]):
    """
    Holds a strategy supplier, a Source of precursor values, the conjoined
    assumptions over them, and how to convert and describe what the
    property sees. Builders are immutable; every operation returns a new
    builder.
    """

    def __init__(
        self,
        state: Callable[[], Strategy],
        source: Source[P],
        assumptions: Callable[[P], bool],
        converter: Callable[[P], V],
        describer: AsString[V],
    ) -> None:
        self.state = state
        self.source = source
        self.assumptions = assumptions
        self.converter = converter
        self.describer = describer

    def runner(self) -> TheoryRunner[P, V]:
        """Create a runner for the current strategy snapshot."""
        return TheoryRunner(
            self.state(), self.source, self.assumptions, self.converter, self.describer
        )
