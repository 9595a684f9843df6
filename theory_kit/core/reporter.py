"""
Reporters turn a CheckResult into the outcome the caller sees.

The default ExceptionReporter raises for failed runs so that theories fail
the surrounding test; ConsoleReporter additionally prints a summary.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..utilities.console import print_details, print_header, print_status
from ..utilities.constants import PropertyFalsified, TooManyRejections
from ..utilities.formatters import format_exhaustion, format_falsification
from .check_result import CheckResult


@runtime_checkable
class Reporter(Protocol):
    """Receives the result of every run."""

    def report(self, result: CheckResult) -> None: ...


class ExceptionReporter:
    """Raise PropertyFalsified or TooManyRejections for failed runs."""

    def report(self, result: CheckResult) -> None:
        if result.is_falsified():
            raise PropertyFalsified(format_falsification(result), result) from result.cause
        if result.is_exhausted():
            raise TooManyRejections(format_exhaustion(result), result)

    def __repr__(self) -> str:
        return "ExceptionReporter()"


class ConsoleReporter(ExceptionReporter):
    """Print a run summary to stdout before raising for failed runs."""

    def __init__(self, title: str | None = None, verbose: bool = False) -> None:
        self.title = title
        self.verbose = verbose

    def report(self, result: CheckResult) -> None:
        if self.title:
            print_header(self.title)
        print_status(result)
        if self.verbose:
            print_details(result)

        super().report(result)

    def __repr__(self) -> str:
        return f"ConsoleReporter(title={self.title!r}, verbose={self.verbose})"
