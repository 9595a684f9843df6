"""
Constants and exception types shared across theory_kit.

Centralizes default run budgets, environment variable names and the
exception hierarchy raised by the engine so that every module reports
failures through the same types.
"""

from __future__ import annotations

from typing import Any

# Default run budgets
DEFAULT_EXAMPLES = 1000
DEFAULT_SHRINK_CYCLES = 100000
DEFAULT_GENERATE_ATTEMPTS = 100

# Environment variables read by the configuration layer
ENV_SEED = "QT_SEED"
ENV_EXAMPLES = "QT_EXAMPLES"
ENV_SHRINKS = "QT_SHRINKS"
ENV_ATTEMPTS = "QT_ATTEMPTS"

# Integer source bounds
MIN_INTEGER = -(2**31)
MAX_INTEGER = 2**31 - 1
MIN_LONG = -(2**63)
MAX_LONG = 2**63 - 1

# Collection source defaults
DEFAULT_MAX_LIST_SIZE = 100
DEFAULT_MAX_STRING_LENGTH = 100

# Display symbols
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_INFO = "ℹ️"


class TheoryError(Exception):
    """Base class for every error raised by theory_kit."""


class ConfigurationError(TheoryError, ValueError):
    """Raised when a run budget or seed cannot be parsed or is out of range."""


class AssumptionRejected(TheoryError):
    """Raised from inside a property to reject the current value.

    Treated exactly like a failing assumption: the value is discarded and a
    new one is drawn (or the shrink candidate is skipped).
    """


class GeneratorFault(TheoryError):
    """
    A Source's generator or shrinker raised unexpectedly.

    This indicates a bug in the Source rather than a falsified property, so
    the run is aborted with enough context to replay the failing draw.
    """

    def __init__(self, message: str, seed: int, trial: int, attempt: int, phase: str) -> None:
        super().__init__(
            f"{message} (phase={phase}, seed={seed}, trial={trial}, attempt={attempt})"
        )
        self.seed = seed
        self.trial = trial
        self.attempt = attempt
        self.phase = phase


class AssumptionError(GeneratorFault):
    """An assumption predicate raised instead of returning a boolean."""


class PropertyFalsified(TheoryError, AssertionError):
    """The property was falsified; carries the smallest counterexample found."""

    def __init__(self, message: str, result: Any) -> None:
        super().__init__(message)
        self.result = result

    @property
    def counterexample(self) -> Any:
        return self.result.smallest

    @property
    def description(self) -> str:
        return self.result.smallest_description

    @property
    def cause(self) -> BaseException | None:
        return self.result.cause


class TooManyRejections(TheoryError, AssertionError):
    """Sampling or shrinking could not find values satisfying the assumptions."""

    def __init__(self, message: str, result: Any) -> None:
        super().__init__(message)
        self.result = result
