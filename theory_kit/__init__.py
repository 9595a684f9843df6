"""
theory_kit - property-based testing with deterministic shrinking.

This package provides:
- Composable Sources that generate and shrink values from seeded streams
- A runner that samples values, filters them by assumptions, and shrinks
  falsifying values to a locally minimal counterexample
- A fluent builder for writing theories about Sources

Every run is reproducible from the seed printed in its failure report.
"""

__version__ = "1.0.0"
__description__ = "Property-based testing engine with deterministic shrinking"

from .config import Configuration, get_configuration
from .core import CheckResult, CheckStatus, ConsoleReporter, ExceptionReporter, Source, Strategy
from .domain import Pair
from .dsl import assume, qt
from .utilities.constants import (
    AssumptionError,
    AssumptionRejected,
    ConfigurationError,
    GeneratorFault,
    PropertyFalsified,
    TheoryError,
    TooManyRejections,
)

__all__ = [
    "AssumptionError",
    "AssumptionRejected",
    "CheckResult",
    "CheckStatus",
    "Configuration",
    "ConfigurationError",
    "ConsoleReporter",
    "ExceptionReporter",
    "GeneratorFault",
    "Pair",
    "PropertyFalsified",
    "Source",
    "Strategy",
    "TheoryError",
    "TooManyRejections",
    "assume",
    "get_configuration",
    "qt",
]
