"""
End-to-end theories run through the public API.

Each theory is checked with a fixed seed so the reported counterexamples
are stable from run to run.
"""

import pytest

from theory_kit import ConsoleReporter, Pair, PropertyFalsified, assume, qt
from theory_kit.generators import integers, lists, strings


def falsified_by(builder, prop, method="check"):
    with pytest.raises(PropertyFalsified) as exc_info:
        getattr(builder, method)(prop)
    return exc_info.value


@pytest.mark.integration
class TestShrinkingScenarios:
    """Theories whose smallest counterexample is known in advance."""

    def test_threshold_shrinks_to_boundary(self, theory, percentages):
        error = falsified_by(theory.for_all(percentages), lambda x: x < 50)

        assert error.counterexample == 50
        assert "Smallest found falsifying value(s) :-\n50\n" in str(error)

    def test_threshold_with_linear_shrinker(self, theory, percentages):
        linear = percentages.with_shrinker(lambda value, context: iter(range(value - 1, -1, -1)))
        error = falsified_by(theory.for_all(linear), lambda x: x < 50)

        assert error.counterexample == 50

    def test_assumption_never_admits_odd_counterexample(self, theory):
        builder = theory.for_all(integers().between(0, 10)).assuming(lambda x: x % 2 == 0)
        error = falsified_by(builder, lambda x: x != 4)

        assert error.counterexample == 4

    def test_precursor_stays_consistent_while_shrinking(self, theory):
        seen = []

        def prop(n, s):
            seen.append((n, s))
            return n < 7

        builder = theory.for_all(integers().between(0, 10)).as_with_precursor(str)
        error = falsified_by(builder, prop)

        assert error.counterexample == Pair(7, "7")
        assert all(s == str(n) for n, s in seen)

    def test_check_assert_matches_boolean_property(self, theory):
        source = integers().between(0, 10)

        def raises_on_three(x):
            if x == 3:
                raise ValueError("three")

        asserted = falsified_by(theory.for_all(source), raises_on_three, "check_assert").result
        boolean = falsified_by(theory.for_all(source), lambda x: x != 3).result

        assert asserted.smallest == boolean.smallest == 3
        assert asserted.trial == boolean.trial
        assert asserted.examples_used == boolean.examples_used
        assert asserted.shrink_steps == boolean.shrink_steps
        assert isinstance(asserted.cause, ValueError)
        assert boolean.cause is None

    def test_sorted_lists(self, theory):
        source = lists().of(integers().between(0, 100)).of_sizes_between(0, 10)
        error = falsified_by(theory.for_all(source), lambda xs: xs == sorted(xs))

        assert error.counterexample == [1, 0]
        assert error.description == "[1, 0]"

    def test_strings_without_letter(self, theory):
        builder = theory.with_examples(500).for_all(strings().basic_latin().all())
        error = falsified_by(builder, lambda s: "z" not in s)

        assert error.counterexample == "z"
        assert error.description == "'z'"

    def test_filtered_source(self, theory, percentages):
        evens = percentages.filter(lambda x: x % 2 == 0)
        error = falsified_by(theory.for_all(evens), lambda x: x < 10)

        assert error.counterexample % 2 == 0
        assert error.counterexample >= 10

    def test_assume_inside_property(self, theory, percentages):
        def prop(x):
            assume(x > 20)
            return x > 20

        result = theory.for_all(percentages).check(prop)

        assert result.is_passed()
        assert result.rejected > 0


@pytest.mark.integration
class TestEnvironmentDrivenRuns:
    """Theories configured through QT_* environment variables."""

    def test_fixed_seed_reproduces_failure(self, monkeypatch, percentages):
        monkeypatch.setenv("QT_SEED", "77")
        monkeypatch.setenv("QT_EXAMPLES", "300")

        first = falsified_by(qt().for_all(percentages), lambda x: x < 90).result
        second = falsified_by(qt().for_all(percentages), lambda x: x < 90).result

        assert first.seed == second.seed == 77
        assert first.original_description == second.original_description
        assert first.smallest == second.smallest == 90

    def test_seed_in_report(self, monkeypatch, percentages):
        monkeypatch.setenv("QT_SEED", "31337")
        monkeypatch.setenv("QT_EXAMPLES", "300")

        error = falsified_by(qt().for_all(percentages), lambda x: x < 90)

        assert str(error).endswith("Seed was 31337")

    def test_console_reporter(self, monkeypatch, percentages, capsys):
        monkeypatch.setenv("QT_SEED", "3")
        reporter = ConsoleReporter(title="Percentages stay in range")

        result = qt().with_reporter(reporter).for_all(percentages).check(lambda x: x <= 100)

        output = capsys.readouterr().out
        assert result.is_passed()
        assert "Percentages stay in range" in output
        assert "1000 example(s) passed" in output
