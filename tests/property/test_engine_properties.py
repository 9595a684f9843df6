"""
Property-based tests for the theory engine itself.

Uses Hypothesis to vary seeds, ranges and values, and checks the invariants
the runner and the standard shrinkers must keep for every one of them.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from theory_kit.core.prng import PseudoRandomStream, StreamPosition
from theory_kit.core.source import ShrinkContext
from theory_kit.core.strategy import Strategy
from theory_kit.core.theory_runner import TheoryRunner
from theory_kit.domain.pair import Pair
from theory_kit.dsl.assumptions import always, identity
from theory_kit.generators import integers, lists, shrink_target, shrink_towards

CI_SETTINGS = settings(max_examples=25, deadline=None)

seeds = st.integers(min_value=-(2**63), max_value=2**63 - 1)


def run(seed, source, prop, assumptions=always, examples=100):
    strategy = Strategy(seed=seed, examples=examples)
    return TheoryRunner(strategy, source, assumptions, identity, source.as_string).run(prop)


def context_for(seed=0):
    return ShrinkContext(StreamPosition(seed), remaining_shrinks=1000)


@st.composite
def bounded_values(draw):
    """Generate (low, high, value) with low <= value <= high."""
    low = draw(st.integers(min_value=-1000, max_value=1000))
    high = draw(st.integers(min_value=low, max_value=low + 2000))
    value = draw(st.integers(min_value=low, max_value=high))
    return low, high, value


class TestStreamProperties:
    """Property-based tests for the seeded stream."""

    @given(seeds, st.integers(min_value=0, max_value=10_000), st.integers(0, 100))
    @CI_SETTINGS
    def test_same_position_same_draws(self, seed, trial, attempt):
        first = PseudoRandomStream(seed, trial, attempt)
        second = PseudoRandomStream.at(StreamPosition(seed, trial, attempt))

        assert [first.next_int(0, 1000) for _ in range(10)] == [
            second.next_int(0, 1000) for _ in range(10)
        ]

    @given(seeds, bounded_values())
    @CI_SETTINGS
    def test_next_int_within_bounds(self, seed, bounds):
        low, high, _ = bounds
        stream = PseudoRandomStream(seed)
        assert all(low <= stream.next_int(low, high) <= high for _ in range(20))


class TestRunnerProperties:
    """Property-based tests for sampling and shrinking."""

    @given(seeds)
    @CI_SETTINGS
    def test_runs_are_deterministic(self, seed):
        source = integers().between(0, 100)
        first = run(seed, source, lambda x: x < 90)
        second = run(seed, source, lambda x: x < 90)

        assert first.status == second.status
        assert first.smallest == second.smallest
        assert first.trial == second.trial
        assert first.original_description == second.original_description

    @given(seeds)
    @CI_SETTINGS
    def test_threshold_shrinks_to_boundary_or_passes(self, seed):
        result = run(seed, integers().between(0, 100), lambda x: x < 50)

        assert result.is_passed() or result.smallest == 50

    @given(seeds, st.integers(min_value=1, max_value=100))
    @CI_SETTINGS
    def test_accepted_counterexamples_strictly_decrease(self, seed, threshold):
        failures = []

        def prop(x):
            if x >= threshold:
                failures.append(x)
                return False
            return True

        run(seed, integers().between(0, 100), prop)

        assert all(later < earlier for earlier, later in zip(failures, failures[1:]))

    @given(seeds, st.integers(min_value=0, max_value=100))
    @CI_SETTINGS
    def test_property_only_sees_assumed_values(self, seed, threshold):
        seen = []

        def prop(x):
            seen.append(x)
            return x < threshold

        run(seed, integers().between(0, 100), prop, lambda x: x % 3 == 0)

        assert all(x % 3 == 0 for x in seen)

    @given(seeds, st.integers(min_value=0, max_value=100))
    @CI_SETTINGS
    def test_precursor_pairs_stay_consistent(self, seed, threshold):
        seen = []

        def prop(pair):
            seen.append(pair)
            return pair.first < threshold

        source = integers().between(0, 100).map_with_precursor(lambda n: n * 3)
        result = run(seed, source, prop)

        assert all(pair.second == pair.first * 3 for pair in seen)
        if result.is_falsified():
            assert result.smallest == Pair(result.smallest.first, result.smallest.first * 3)


class TestShrinkerProperties:
    """Property-based tests for the standard shrinkers."""

    @given(bounded_values())
    @CI_SETTINGS
    def test_integer_candidates_move_toward_target(self, bounds):
        low, high, value = bounds
        target = shrink_target(low, high)
        candidates = list(shrink_towards(target)(value, context_for()))

        assert len(candidates) == len(set(candidates))
        assert all(low <= candidate <= high for candidate in candidates)
        assert all(abs(candidate - target) < abs(value - target) for candidate in candidates)
        if value != target:
            assert candidates[0] == target

    @given(
        st.integers(min_value=0, max_value=4),
        st.lists(st.integers(min_value=0, max_value=50), max_size=12),
    )
    @CI_SETTINGS
    def test_list_candidates_respect_min_size(self, min_size, prefix):
        value = [7] * min_size + prefix
        source = lists().of(integers().between(0, 50)).of_sizes_between(min_size, 20)

        for candidate in source.shrink(value, context_for()):
            assert min_size <= len(candidate) <= len(value)
            assert candidate != value
