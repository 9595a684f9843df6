"""
Console output for theory runs.

Prints one status line per run, prefixed with an emoji chosen by the run's
outcome, and optionally every field of the result.
"""

from __future__ import annotations

from ..core.check_result import CheckResult, CheckStatus
from .constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS, EMOJI_WARNING
from .formatters import format_summary

STATUS_EMOJI = {
    CheckStatus.PASSED: EMOJI_SUCCESS,
    CheckStatus.FALSIFIED: EMOJI_ERROR,
    CheckStatus.EXHAUSTED: EMOJI_WARNING,
}


def print_header(title: str, width: int = 60) -> None:
    """Print a theory title, underlined."""
    print(f"\n{title}")
    print("=" * max(width, len(title)))


def print_status(result: CheckResult) -> None:
    """Print the one-line summary of a run."""
    print(f"{STATUS_EMOJI[result.status]} {format_summary(result)}")


def print_details(result: CheckResult) -> None:
    """Print each populated field of a run on its own line."""
    for key, value in result.to_dict().items():
        if value is None or value == {}:
            continue
        print(f"{EMOJI_INFO} {key}: {value}")
