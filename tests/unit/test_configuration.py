"""
Unit tests for configuration loading and strategies.
"""

import pytest

from theory_kit.config import Configuration, get_configuration
from theory_kit.core.reporter import ConsoleReporter, ExceptionReporter
from theory_kit.core.strategy import Strategy
from theory_kit.utilities.constants import (
    DEFAULT_EXAMPLES,
    DEFAULT_GENERATE_ATTEMPTS,
    DEFAULT_SHRINK_CYCLES,
    ConfigurationError,
)
from theory_kit.utilities.validators import safe_int_convert, validate_range


class TestConfiguration:
    """Test cases for environment configuration."""

    def test_defaults(self):
        config = get_configuration({})

        assert config.examples == DEFAULT_EXAMPLES
        assert config.shrink_cycles == DEFAULT_SHRINK_CYCLES
        assert config.generate_attempts == DEFAULT_GENERATE_ATTEMPTS
        assert isinstance(config.seed, int)

    def test_reads_environment(self):
        config = get_configuration(
            {"QT_SEED": "123", "QT_EXAMPLES": "50", "QT_SHRINKS": "10", "QT_ATTEMPTS": "3"}
        )
        assert config == Configuration(
            seed=123, examples=50, shrink_cycles=10, generate_attempts=3
        )

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("QT_SEED", "-9")
        assert get_configuration().seed == -9

    def test_blank_values_use_defaults(self):
        assert get_configuration({"QT_EXAMPLES": "  "}).examples == DEFAULT_EXAMPLES

    def test_non_integer_rejected(self):
        with pytest.raises(ConfigurationError, match="QT_EXAMPLES"):
            get_configuration({"QT_EXAMPLES": "many"})

    def test_out_of_range_rejected(self):
        with pytest.raises(ConfigurationError):
            get_configuration({"QT_EXAMPLES": "0"})
        with pytest.raises(ConfigurationError):
            get_configuration({"QT_SHRINKS": "-1"})

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            Configuration(seed=1, generate_attempts=0)

    def test_to_strategy(self):
        strategy = Configuration(seed=5, examples=7).to_strategy()

        assert strategy == Strategy(seed=5, examples=7)
        assert isinstance(strategy.reporter, ExceptionReporter)

    def test_to_strategy_with_reporter(self):
        reporter = ConsoleReporter()
        assert Configuration(seed=5).to_strategy(reporter).reporter is reporter


class TestStrategy:
    """Test cases for Strategy."""

    def test_with_methods_return_copies(self):
        strategy = Strategy(seed=1)
        changed = (
            strategy.with_seed(2)
            .with_examples(3)
            .with_shrink_cycles(4)
            .with_generate_attempts(5)
        )

        assert changed == Strategy(seed=2, examples=3, shrink_cycles=4, generate_attempts=5)
        assert strategy.seed == 1
        assert strategy.examples == DEFAULT_EXAMPLES

    def test_with_reporter(self):
        reporter = ConsoleReporter()
        assert Strategy(seed=1).with_reporter(reporter).reporter is reporter

    def test_validation(self):
        with pytest.raises(ValueError):
            Strategy(seed=1, examples=0)
        with pytest.raises(ValueError):
            Strategy(seed=1, shrink_cycles=-1)
        with pytest.raises(ValueError):
            Strategy(seed=1, generate_attempts=0)

    def test_zero_shrink_cycles_allowed(self):
        assert Strategy(seed=1, shrink_cycles=0).shrink_cycles == 0


class TestValidators:
    """Test cases for validation helpers."""

    def test_safe_int_convert(self):
        assert safe_int_convert(None, 4) == 4
        assert safe_int_convert("", 4) == 4
        assert safe_int_convert("12", 4) == 12
        with pytest.raises(ValueError):
            safe_int_convert("twelve", 4)

    def test_validate_range(self):
        validate_range(1, 1, "range")
        with pytest.raises(ValueError):
            validate_range(2, 1, "range")
