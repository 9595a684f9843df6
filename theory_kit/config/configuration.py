"""
Run configuration loaded from the environment.

Reads QT_SEED, QT_EXAMPLES, QT_SHRINKS and QT_ATTEMPTS, falling back to the
package defaults. A run without QT_SEED gets a fresh time-based seed, which
is always included in failure reports so the run can be replayed by
exporting it.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Mapping
from dataclasses import dataclass

from ..core.reporter import ExceptionReporter, Reporter
from ..core.strategy import Strategy
from ..utilities.constants import (
    DEFAULT_EXAMPLES,
    DEFAULT_GENERATE_ATTEMPTS,
    DEFAULT_SHRINK_CYCLES,
    ENV_ATTEMPTS,
    ENV_EXAMPLES,
    ENV_SEED,
    ENV_SHRINKS,
    ConfigurationError,
)
from ..utilities.validators import (
    safe_int_convert,
    validate_non_negative_number,
    validate_positive_number,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    """Budgets and seed used to build the Strategy for each check."""

    seed: int
    examples: int = DEFAULT_EXAMPLES
    shrink_cycles: int = DEFAULT_SHRINK_CYCLES
    generate_attempts: int = DEFAULT_GENERATE_ATTEMPTS

    def __post_init__(self):
        """Validate configuration after initialization."""
        try:
            validate_positive_number(self.examples, "examples")
            validate_non_negative_number(self.shrink_cycles, "shrink_cycles")
            validate_positive_number(self.generate_attempts, "generate_attempts")
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def to_strategy(self, reporter: Reporter | None = None) -> Strategy:
        """Build a Strategy snapshot from this configuration."""
        return Strategy(
            seed=self.seed,
            examples=self.examples,
            shrink_cycles=self.shrink_cycles,
            generate_attempts=self.generate_attempts,
            reporter=reporter or ExceptionReporter(),
        )


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    try:
        return safe_int_convert(environ.get(name), default)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got: {environ.get(name)!r}") from e


def get_configuration(environ: Mapping[str, str] | None = None) -> Configuration:
    """
    Load configuration from environment variables.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        Validated Configuration

    Raises:
        ConfigurationError: If a variable is not an integer or out of range
    """
    env = os.environ if environ is None else environ

    seed = _read_int(env, ENV_SEED, time.time_ns())
    config = Configuration(
        seed=seed,
        examples=_read_int(env, ENV_EXAMPLES, DEFAULT_EXAMPLES),
        shrink_cycles=_read_int(env, ENV_SHRINKS, DEFAULT_SHRINK_CYCLES),
        generate_attempts=_read_int(env, ENV_ATTEMPTS, DEFAULT_GENERATE_ATTEMPTS),
    )
    if ENV_SEED in env:
        logger.info(f"Using fixed seed {seed} from {ENV_SEED}")
    return config
