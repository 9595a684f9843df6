"""
Core engine: random streams, Sources, strategies, the theory runner and
reporters.
"""

from .check_result import CheckResult, CheckStatus
from .prng import PseudoRandomStream, StreamPosition, derive_seed
from .reporter import ConsoleReporter, ExceptionReporter, Reporter
from .source import ShrinkContext, Source, no_shrink
from .strategy import Strategy
from .theory_runner import Counterexample, TheoryRunner, Verdict

__all__ = [
    "CheckResult",
    "CheckStatus",
    "ConsoleReporter",
    "Counterexample",
    "ExceptionReporter",
    "PseudoRandomStream",
    "Reporter",
    "ShrinkContext",
    "Source",
    "StreamPosition",
    "Strategy",
    "TheoryRunner",
    "Verdict",
    "derive_seed",
    "no_shrink",
]
