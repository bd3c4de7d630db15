"""Pytest configuration and shared fixtures for termite tests."""

import io
from typing import Any
from unittest.mock import Mock

import pytest

from termite.lib.ui.cursor import ERASE_PREVIOUS_LINE


@pytest.fixture
def stream() -> io.StringIO:
    """Provide an in-memory output stream for indicators to write to.

    Returns:
        Empty StringIO instance
    """
    return io.StringIO()


@pytest.fixture
def fake_sleep() -> Mock:
    """Provide a sleep replacement that records calls instead of blocking.

    Returns:
        Mock accepting a number of seconds
    """
    return Mock(return_value=None)


@pytest.fixture
def report_lines():
    """Split captured output into the lines printed before each erase.

    Returns:
        Callable taking the captured text and returning the printed lines.
    """

    def _split(output: str) -> list[str]:
        chunks = output.split(ERASE_PREVIOUS_LINE)
        # Output ends with an erase, leaving an empty trailing chunk
        return [chunk.rstrip("\n") for chunk in chunks if chunk]

    return _split


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    # Register custom markers
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
