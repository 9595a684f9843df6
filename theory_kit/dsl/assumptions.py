"""
Helpers for composing assumptions and adapting properties.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ..utilities.constants import AssumptionRejected

T = TypeVar("T")


def always(value: Any) -> bool:
    """Assumption that accepts every value."""
    return True


def identity(value: T) -> T:
    return value


def conjoin(prior: Callable[[T], bool], new: Callable[[T], bool]) -> Callable[[T], bool]:
    """
    Combine two assumptions with a short-circuiting AND.

    ``new`` is only evaluated for values ``prior`` accepts, so it may rely on
    preconditions established by earlier assumptions.
    """

    def combined(value: T) -> bool:
        return bool(prior(value)) and bool(new(value))

    return combined


def asserting(prop: Callable[..., Any]) -> Callable[..., bool]:
    """
    Adapt a property that signals failure by raising into a boolean one.

    The runner already treats a raised exception as falsification, so the
    adapted property only has to report success when the original returns.
    """

    def check(*values: Any) -> bool:
        prop(*values)
        return True

    return check


def assume(condition: bool, message: str = "Assumption not met") -> None:
    """
    Reject the current value from inside a property.

    Raises:
        AssumptionRejected: If condition is false
    """
    if not condition:
        raise AssumptionRejected(message)
