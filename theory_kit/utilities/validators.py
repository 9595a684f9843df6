"""
Input validation utilities.

This module provides validation functions for run budgets, generator
bounds and size ranges used throughout the package.
"""


def validate_positive_number(value: int | float, name: str) -> None:
    """Validate that a number is positive."""
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_number(value: int | float, name: str) -> None:
    """Validate that a number is zero or positive."""
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def validate_range(low: int, high: int, name: str) -> None:
    """Validate that an inclusive range is not empty."""
    if low > high:
        raise ValueError(f"{name} lower bound {low} is greater than upper bound {high}")


def safe_int_convert(value: str | int | None, default: int) -> int:
    """Convert value to int, falling back to default when unset or blank."""
    if value is None:
        return default
    if isinstance(value, str) and not value.strip():
        return default
    return int(value)
