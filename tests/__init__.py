"""
Test package for theory-kit.

Provides unit, integration and property-based suites for the theory
engine, its standard Sources and the fluent builder API.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "integration",  # End-to-end theories through the public API
    "property",  # Hypothesis-driven engine invariants
    "unit",  # Unit test suite
]
