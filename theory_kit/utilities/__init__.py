"""
Utility modules for theory_kit.

Constants and exception types, console output, report formatting and input
validation helpers.
"""

from .constants import (
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
    "ConfigurationError",
    "GeneratorFault",
    "PropertyFalsified",
    "TheoryError",
    "TooManyRejections",
]
