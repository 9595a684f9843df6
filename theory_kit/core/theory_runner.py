"""
Theory runner: sampling, falsification and shrink search.

The runner draws values from a Source, filters them through the composed
assumptions, evaluates the property, and on the first falsification runs a
greedy depth-first shrink search: the first candidate in the shrinker's
order that still satisfies the assumptions and still falsifies the
property replaces the current counterexample, and the search restarts from
that candidate's own shrink sequence.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from ..utilities.constants import AssumptionError, AssumptionRejected, GeneratorFault
from .check_result import CheckResult
from .prng import PseudoRandomStream, StreamPosition
from .source import ShrinkContext, Source
from .strategy import Strategy
from .types import AsString

logger = logging.getLogger(__name__)

P = TypeVar("P")
T = TypeVar("T")


class Verdict(Enum):
    """Outcome of evaluating a property against one value."""

    HELD = "held"
    FALSIFIED = "falsified"
    REJECTED = "rejected"


@dataclass
class Counterexample(Generic[P]):
    """Smallest falsifying value known so far during a shrink search."""

    value: P
    cause: BaseException | None
    position: StreamPosition
    shrink_steps: int = 0
    gave_up: bool = False

    def replace_with(self, value: P, cause: BaseException | None) -> None:
        self.value = value
        self.cause = cause


class TheoryRunner(Generic[P, T]):
    """
    Runs one property check against a Source.

    The Source produces (and shrinks) values of type P; the property and the
    description see ``converter(value)`` of type T. Plain theories use the
    identity converter; theories built with ``as_`` convert each precursor
    value with their mapping, so shrinking always drives the precursor.
    """

    def __init__(
        self,
        strategy: Strategy,
        source: Source[P],
        assumptions: Callable[[P], bool],
        converter: Callable[[P], T],
        describer: AsString[T],
    ) -> None:
        self.strategy = strategy
        self.source = source
        self.assumptions = assumptions
        self.converter = converter
        self.describer = describer

    def check(self, prop: Callable[[T], Any]) -> CheckResult:
        """
        Run the property and hand the result to the strategy's reporter.

        Args:
            prop: Property returning a truthy value when it holds; raising an
                exception counts as falsification

        Returns:
            The result, when the reporter does not raise for it
        """
        result = self.run(prop)
        self.strategy.reporter.report(result)
        return result

    def run(self, prop: Callable[[T], Any]) -> CheckResult:
        """Sample, evaluate and shrink without reporting."""
        started = time.perf_counter()
        seed = self.strategy.seed
        rejected = 0

        for trial in range(self.strategy.examples):
            sample = None
            for attempt in range(self.strategy.generate_attempts):
                stream = PseudoRandomStream(seed, trial, attempt)
                value = self._generate(stream, trial)
                if not self._accepts(value, stream.position, "sample"):
                    rejected += 1
                    continue
                verdict, cause = self._evaluate(prop, value, stream.position)
                if verdict is Verdict.REJECTED:
                    rejected += 1
                    continue
                sample = (value, verdict, cause, stream.position)
                break

            if sample is None:
                logger.warning(
                    f"Gave up on trial {trial} after {self.strategy.generate_attempts} "
                    f"rejected draws (seed {seed})"
                )
                result = CheckResult.exhausted(seed, trial, rejected, trial)
                result.elapsed = time.perf_counter() - started
                return result

            value, verdict, cause, position = sample
            if verdict is Verdict.HELD:
                logger.debug(f"Trial {trial} held for {self._describe(value, position)}")
                continue

            original_description = self._describe(value, position)
            logger.info(f"Falsified at trial {trial} by {original_description}, shrinking")

            counterexample = Counterexample(value, cause, position)
            self._shrink(prop, counterexample)
            smallest_description = self._describe(counterexample.value, position)
            logger.info(
                f"Smallest counterexample {smallest_description} after "
                f"{counterexample.shrink_steps} shrink step(s)"
            )

            result = CheckResult.falsified(
                seed=seed,
                examples_used=trial + 1,
                rejected=rejected,
                shrink_steps=counterexample.shrink_steps,
                smallest=self._convert(counterexample.value, position),
                smallest_description=smallest_description,
                original_description=original_description,
                cause=counterexample.cause,
                trial=position.trial,
                attempt=position.attempt,
            )
            result.metadata["shrink_gave_up"] = counterexample.gave_up
            result.elapsed = time.perf_counter() - started
            return result

        logger.info(f"{self.strategy.examples} example(s) held ({rejected} rejected, seed {seed})")
        result = CheckResult.passed(seed, self.strategy.examples, rejected)
        result.elapsed = time.perf_counter() - started
        return result

    def replay(self, trial: int, attempt: int = 0) -> P:
        """Regenerate the value drawn at (trial, attempt) of this run."""
        return self._generate(PseudoRandomStream(self.strategy.seed, trial, attempt), trial)

    def _shrink(self, prop: Callable[[T], Any], counterexample: Counterexample[P]) -> None:
        budget = self.strategy.shrink_cycles
        attempts = self.strategy.generate_attempts
        position = counterexample.position

        while counterexample.shrink_steps < budget:
            context = ShrinkContext(position, budget - counterexample.shrink_steps)
            improved = False
            rejected = 0
            for candidate in self._candidates(counterexample.value, context, position):
                if counterexample.shrink_steps >= budget:
                    break
                if rejected >= attempts:
                    logger.warning(
                        f"Stopped shrinking {self._describe(counterexample.value, position)} "
                        f"after {rejected} rejected candidate(s)"
                    )
                    counterexample.gave_up = True
                    return
                counterexample.shrink_steps += 1
                if not self._accepts(candidate, position, "shrink"):
                    rejected += 1
                    continue
                verdict, cause = self._evaluate(prop, candidate, position)
                if verdict is Verdict.REJECTED:
                    rejected += 1
                elif verdict is Verdict.FALSIFIED:
                    counterexample.replace_with(candidate, cause)
                    logger.debug(f"Shrunk to {self._describe(candidate, position)}")
                    improved = True
                    break
            if not improved:
                return

        logger.debug(f"Shrink budget of {budget} step(s) exhausted")

    def _candidates(
        self, value: P, context: ShrinkContext, position: StreamPosition
    ) -> Iterator[P]:
        try:
            candidates = self.source.shrink(value, context)
        except Exception as e:
            raise self._fault("Shrinker raised", position, "shrink") from e

        while True:
            try:
                candidate = next(candidates)
            except StopIteration:
                return
            except Exception as e:
                raise self._fault("Shrinker raised", position, "shrink") from e
            yield candidate

    def _generate(self, stream: PseudoRandomStream, step: int) -> P:
        try:
            return self.source.next(stream, step)
        except Exception as e:
            raise self._fault("Generator raised", stream.position, "generate") from e

    def _accepts(self, value: P, position: StreamPosition, phase: str) -> bool:
        try:
            return bool(self.assumptions(value))
        except Exception as e:
            raise AssumptionError(
                f"Assumption raised {type(e).__name__}: {e}",
                position.seed,
                position.trial,
                position.attempt,
                phase,
            ) from e

    def _evaluate(
        self, prop: Callable[[T], Any], value: P, position: StreamPosition
    ) -> tuple[Verdict, BaseException | None]:
        converted = self._convert(value, position)
        try:
            outcome = prop(converted)
        except AssumptionRejected:
            return Verdict.REJECTED, None
        except Exception as e:
            return Verdict.FALSIFIED, e
        return (Verdict.HELD if outcome else Verdict.FALSIFIED), None

    def _convert(self, value: P, position: StreamPosition) -> T:
        try:
            return self.converter(value)
        except Exception as e:
            raise self._fault("Mapping raised", position, "convert") from e

    def _describe(self, value: P, position: StreamPosition) -> str:
        return self.describer(self._convert(value, position))

    def _fault(self, message: str, position: StreamPosition, phase: str) -> GeneratorFault:
        return GeneratorFault(message, position.seed, position.trial, position.attempt, phase)
