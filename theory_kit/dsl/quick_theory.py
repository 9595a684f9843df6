"""
Entry point for writing theories.

    from theory_kit import qt
    from theory_kit.generators import integers

    qt().with_fixed_seed(42).for_all(integers().between(0, 100)).check(lambda x: x < 101)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..config.configuration import get_configuration
from ..core.reporter import Reporter
from ..core.source import Source
from ..core.strategy import Strategy
from .theory_builder import TheoryBuilder
from .theory_builder2 import TheoryBuilder2


class QuickTheory:
    """
    Holds a strategy supplier and starts theory builders from it.

    The supplier is invoked once per check, so environment configuration is
    read at check time and overrides applied here are layered on top.
    """

    def __init__(self, state: Callable[[], Strategy]) -> None:
        self.state = state

    def _with(self, change: Callable[[Strategy], Strategy]) -> QuickTheory:
        state = self.state
        return QuickTheory(lambda: change(state()))

    def with_fixed_seed(self, seed: int) -> QuickTheory:
        return self._with(lambda strategy: strategy.with_seed(seed))

    def with_examples(self, examples: int) -> QuickTheory:
        return self._with(lambda strategy: strategy.with_examples(examples))

    def with_shrink_cycles(self, shrink_cycles: int) -> QuickTheory:
        return self._with(lambda strategy: strategy.with_shrink_cycles(shrink_cycles))

    def with_generate_attempts(self, attempts: int) -> QuickTheory:
        return self._with(lambda strategy: strategy.with_generate_attempts(attempts))

    def with_reporter(self, reporter: Reporter) -> QuickTheory:
        return self._with(lambda strategy: strategy.with_reporter(reporter))

    def for_all(self, *sources: Source[Any]) -> TheoryBuilder[Any] | TheoryBuilder2[Any, Any]:
        """
        Start a theory about values from one or two Sources.

        Raises:
            ValueError: If not given one or two Sources
        """
        if len(sources) == 1:
            return TheoryBuilder(self.state, sources[0])
        if len(sources) == 2:
            return TheoryBuilder2(self.state, sources[0], sources[1])
        raise ValueError(f"for_all takes one or two sources, got {len(sources)}")


def qt() -> QuickTheory:
    """Start a theory using configuration from the environment."""
    return QuickTheory(lambda: get_configuration().to_strategy())
