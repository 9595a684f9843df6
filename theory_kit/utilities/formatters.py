"""
Formatting utilities for failure reports.

This module provides consistent formatting functions used by the reporters
for rendering counterexamples, counts and seeds.
"""

from __future__ import annotations

from typing import Any


def format_plural(count: int, noun: str) -> str:
    """Format a count with a pluralized noun (e.g. '1 example(s)')."""
    return f"{count} {noun}(s)"


def format_seed(seed: int) -> str:
    """Format seed for display."""
    return f"Seed was {seed}"


def format_cause(cause: BaseException | None) -> str:
    """Format the exception that falsified a property."""
    if cause is None:
        return ""
    message = str(cause)
    if not message:
        return type(cause).__name__
    return f"{type(cause).__name__}: {message}"


def format_falsification(result: Any) -> str:
    """
    Render a falsified CheckResult as a multi-line report.

    Args:
        result: CheckResult with status FALSIFIED

    Returns:
        Report text naming the smallest counterexample, its cause, the
        originally found counterexample and the seed.
    """
    lines = [
        f"Property falsified after {format_plural(result.examples_used, 'example')}",
        "Smallest found falsifying value(s) :-",
        result.smallest_description,
    ]
    if result.cause is not None:
        lines.append("Cause was :-")
        lines.append(format_cause(result.cause))
    if result.original_description != result.smallest_description:
        lines.append("Other found falsifying value(s) :-")
        lines.append(result.original_description)
    lines.append("")
    lines.append(format_seed(result.seed))
    return "\n".join(lines)


def format_exhaustion(result: Any) -> str:
    """Render an exhausted CheckResult as a report."""
    return (
        f"Gave up after finding only {format_plural(result.examples_used, 'example')} "
        f"matching the assumptions ({result.rejected} rejected)\n"
        f"{format_seed(result.seed)}"
    )


def format_summary(result: Any) -> str:
    """Format a single-line summary of a run for console display."""
    if result.is_passed():
        return (
            f"{format_plural(result.examples_used, 'example')} passed "
            f"({result.rejected} rejected, seed {result.seed})"
        )
    if result.is_falsified():
        return (
            f"Falsified by {result.smallest_description} after "
            f"{result.shrink_steps} shrink step(s) (seed {result.seed})"
        )
    return f"Gave up after {result.rejected} rejection(s) (seed {result.seed})"
