"""
Run-level strategy: the budgets and seed governing a single check.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..utilities.constants import (
    DEFAULT_EXAMPLES,
    DEFAULT_GENERATE_ATTEMPTS,
    DEFAULT_SHRINK_CYCLES,
)
from ..utilities.validators import validate_non_negative_number, validate_positive_number
from .reporter import ExceptionReporter, Reporter


@dataclass(frozen=True)
class Strategy:
    """
    Immutable configuration snapshot consumed once per check.

    Attributes:
        seed: Run seed from which every trial's stream is derived
        examples: Number of trials to sample
        shrink_cycles: Maximum number of shrink candidates evaluated
        generate_attempts: Draws allowed per trial before giving up on the
            assumptions
        reporter: Receives the result of the run
    """

    seed: int
    examples: int = DEFAULT_EXAMPLES
    shrink_cycles: int = DEFAULT_SHRINK_CYCLES
    generate_attempts: int = DEFAULT_GENERATE_ATTEMPTS
    reporter: Reporter = field(default_factory=ExceptionReporter, compare=False)

    def __post_init__(self):
        """Validate budgets after initialization."""
        validate_positive_number(self.examples, "examples")
        validate_non_negative_number(self.shrink_cycles, "shrink_cycles")
        validate_positive_number(self.generate_attempts, "generate_attempts")

    def with_seed(self, seed: int) -> Strategy:
        return replace(self, seed=seed)

    def with_examples(self, examples: int) -> Strategy:
        return replace(self, examples=examples)

    def with_shrink_cycles(self, shrink_cycles: int) -> Strategy:
        return replace(self, shrink_cycles=shrink_cycles)

    def with_generate_attempts(self, generate_attempts: int) -> Strategy:
        return replace(self, generate_attempts=generate_attempts)

    def with_reporter(self, reporter: Reporter) -> Strategy:
        return replace(self, reporter=reporter)
