"""Pytest configuration and shared fixtures for the prettydiff test suite.

This module provides shared fixtures, test configuration, and sample texts
used across the unit and integration tests.
"""

import logging
import os

import pytest

from prettydiff.constants import ENV_PREFIX

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will fail to import
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def clean_prettydiff_env(monkeypatch):
    """Remove PRETTYDIFF_* variables so the caller's shell cannot leak settings into tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers installed by configure_logging during a test."""
    package_logger = logging.getLogger("prettydiff")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def swapped_lines():
    """Two texts whose only difference is the order of their two lines."""
    return "foo\nline 1\n", "line 1\nfoo\n"


@pytest.fixture
def numbered_lines():
    """Twenty numbered lines, each terminated by a newline."""
    return "".join(f"l{i}\n" for i in range(1, 21))
