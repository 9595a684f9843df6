"""
Pytest configuration and shared fixtures for theory_kit tests.

Provides markers, fixed-seed strategies and small Sources shared by the
unit, integration and property test suites.
"""

import logging
from io import StringIO

import pytest

from theory_kit.core.prng import PseudoRandomStream, StreamPosition
from theory_kit.core.source import ShrinkContext
from theory_kit.core.strategy import Strategy
from theory_kit.dsl.quick_theory import QuickTheory
from theory_kit.generators import integers

FIXED_SEED = 20240601


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (end-to-end theories)"
    )
    config.addinivalue_line("markers", "property: mark test as property-based test (Hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture
def strategy() -> Strategy:
    """Fixed-seed strategy with a modest number of examples."""
    return Strategy(seed=FIXED_SEED, examples=200)


@pytest.fixture
def theory() -> QuickTheory:
    """QuickTheory that ignores the environment and uses a fixed seed."""
    return QuickTheory(lambda: Strategy(seed=FIXED_SEED, examples=200))


@pytest.fixture
def stream() -> PseudoRandomStream:
    return PseudoRandomStream(FIXED_SEED)


@pytest.fixture
def context() -> ShrinkContext:
    """Shrink context with a generous remaining budget."""
    return ShrinkContext(StreamPosition(FIXED_SEED), remaining_shrinks=10000)


@pytest.fixture
def percentages():
    """Integers 0 to 100 inclusive."""
    return integers().between(0, 100)


@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    handlers = []

    def _capture_logs(logger_name: str | None = None):
        log_capture = StringIO()
        handler = logging.StreamHandler(log_capture)
        handler.setLevel(logging.DEBUG)
        logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        handlers.append((logger, handler))
        return log_capture

    yield _capture_logs

    for logger, handler in handlers:
        logger.removeHandler(handler)
