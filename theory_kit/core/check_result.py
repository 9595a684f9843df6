"""
Check result types for the outcome of a single theory run.

Provides consistent result handling for the runner and the reporters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CheckStatus(Enum):
    """Theory run status."""

    PASSED = "passed"
    FALSIFIED = "falsified"
    EXHAUSTED = "exhausted"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self == CheckStatus.PASSED

    def is_error(self) -> bool:
        """Check if status indicates a failed run."""
        return self in [CheckStatus.FALSIFIED, CheckStatus.EXHAUSTED]


@dataclass
class CheckResult:
    """
    Result of a theory run.

    For falsified runs ``smallest`` holds the shrunk counterexample as the
    property saw it, and ``original_description`` describes the first
    falsifying value found before shrinking.
    """

    status: CheckStatus
    seed: int
    examples_used: int
    rejected: int = 0
    shrink_steps: int = 0
    smallest: Any = None
    smallest_description: str | None = None
    original_description: str | None = None
    cause: BaseException | None = None
    trial: int | None = None
    attempt: int | None = None
    elapsed: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_passed(self) -> bool:
        return self.status == CheckStatus.PASSED

    def is_falsified(self) -> bool:
        return self.status == CheckStatus.FALSIFIED

    def is_exhausted(self) -> bool:
        return self.status == CheckStatus.EXHAUSTED

    def is_error(self) -> bool:
        """Check if the run failed for any reason."""
        return self.status.is_error()

    @classmethod
    def passed(cls, seed: int, examples_used: int, rejected: int) -> CheckResult:
        """Create a passing result."""
        return cls(
            status=CheckStatus.PASSED, seed=seed, examples_used=examples_used, rejected=rejected
        )

    @classmethod
    def falsified(
        cls,
        seed: int,
        examples_used: int,
        rejected: int,
        shrink_steps: int,
        smallest: Any,
        smallest_description: str,
        original_description: str,
        cause: BaseException | None,
        trial: int,
        attempt: int,
    ) -> CheckResult:
        """Create a falsified result."""
        return cls(
            status=CheckStatus.FALSIFIED,
            seed=seed,
            examples_used=examples_used,
            rejected=rejected,
            shrink_steps=shrink_steps,
            smallest=smallest,
            smallest_description=smallest_description,
            original_description=original_description,
            cause=cause,
            trial=trial,
            attempt=attempt,
        )

    @classmethod
    def exhausted(cls, seed: int, examples_used: int, rejected: int, trial: int) -> CheckResult:
        """Create a result for a run that gave up on its assumptions."""
        return cls(
            status=CheckStatus.EXHAUSTED,
            seed=seed,
            examples_used=examples_used,
            rejected=rejected,
            trial=trial,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "status": self.status.value,
            "seed": self.seed,
            "examples_used": self.examples_used,
            "rejected": self.rejected,
            "shrink_steps": self.shrink_steps,
            "smallest": self.smallest_description,
            "original": self.original_description,
            "cause": repr(self.cause) if self.cause is not None else None,
            "trial": self.trial,
            "attempt": self.attempt,
            "elapsed": self.elapsed,
            "metadata": self.metadata,
        }

    def __str__(self) -> str:
        """String representation of the check result."""
        if self.is_passed():
            return f"PASSED: {self.examples_used} examples (seed {self.seed})"
        if self.is_falsified():
            return f"FALSIFIED: {self.smallest_description} (seed {self.seed})"
        return f"EXHAUSTED: {self.rejected} rejected (seed {self.seed})"
