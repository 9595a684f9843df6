"""
Seeded, replayable pseudo-random streams.

Every draw made during a run comes from a PseudoRandomStream whose state is
fully determined by the run seed, the trial index and the assumption retry
attempt. There is no module-level random state: any value produced during a
run can be regenerated in isolation from its StreamPosition.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

_MASK_64 = (1 << 64) - 1
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def _splitmix64(value: int) -> int:
    z = (value + _GOLDEN_GAMMA) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def derive_seed(seed: int, trial: int, attempt: int = 0) -> int:
    """
    Mix a run seed with a trial index and retry attempt.

    Args:
        seed: Run seed (any int, negative values are folded into 64 bits)
        trial: Trial index within the run
        attempt: Assumption retry attempt within the trial

    Returns:
        64-bit seed for the stream at that position
    """
    mixed = _splitmix64(seed & _MASK_64)
    mixed = _splitmix64(mixed ^ (trial & _MASK_64))
    return _splitmix64(mixed ^ (attempt & _MASK_64))


@dataclass(frozen=True)
class StreamPosition:
    """Identifies one logical stream within a run."""

    seed: int
    trial: int = 0
    attempt: int = 0

    def __str__(self) -> str:
        return f"seed={self.seed} trial={self.trial} attempt={self.attempt}"


class PseudoRandomStream:
    """
    Random bit source positioned at (seed, trial, attempt).

    Two streams created at the same position produce identical draws. A
    stream is owned by whoever created it and is never shared between
    trials.
    """

    def __init__(self, seed: int, trial: int = 0, attempt: int = 0) -> None:
        self._position = StreamPosition(seed, trial, attempt)
        self._rng = random.Random(derive_seed(seed, trial, attempt))
        self._draws = 0

    @classmethod
    def at(cls, position: StreamPosition) -> PseudoRandomStream:
        """Create a fresh stream at the given position."""
        return cls(position.seed, position.trial, position.attempt)

    @property
    def position(self) -> StreamPosition:
        return self._position

    @property
    def draws(self) -> int:
        """Number of values drawn from this stream so far."""
        return self._draws

    def next_int(self, low: int, high: int) -> int:
        """Draw an integer in the inclusive range [low, high]."""
        if low > high:
            raise ValueError(f"low ({low}) must be <= high ({high})")
        self._draws += 1
        return self._rng.randint(low, high)

    def next_float(self) -> float:
        """Draw a float in [0.0, 1.0)."""
        self._draws += 1
        return self._rng.random()

    def next_bool(self, probability: float = 0.5) -> bool:
        """Draw True with the given probability."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability ({probability}) must be in [0, 1]")
        return self.next_float() < probability

    def choice(self, seq: Sequence[T]) -> T:
        """Pick an element from a non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        return seq[self.next_int(0, len(seq) - 1)]

    def __repr__(self) -> str:
        return f"PseudoRandomStream({self._position}, draws={self._draws})"
