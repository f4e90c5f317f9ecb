"""Pytest configuration and fixtures."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "timing: tests that wait on real timers"
    )


@pytest.fixture
def red():
    """Wrap text in red ANSI codes."""
    return lambda text: f"\x1b[31m{text}\x1b[0m"
