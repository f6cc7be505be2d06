"""
Pytest configuration and shared fixtures for fluentstr tests.
"""

import pytest

from fluentstr.sequence import ArrayWrapper
from fluentstr.wrapper import StringWrapper


@pytest.fixture
def wrap():
    """Factory fixture for creating string wrappers."""

    def _wrap(value: str | None = None) -> StringWrapper:
        return StringWrapper(value)

    return _wrap


@pytest.fixture
def array():
    """Factory fixture for creating array wrappers."""

    def _array(*items: str) -> ArrayWrapper:
        return ArrayWrapper(items)

    return _array


@pytest.fixture
def null_wrapper() -> StringWrapper:
    """A wrapper holding no string at all."""
    return StringWrapper(None)
