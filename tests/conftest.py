"""Configuration for blockstyle tests."""

import pytest

from blockstyle import create_registry


@pytest.fixture(scope='session')
def registry():
    """Registry with the built-in token types and properties."""
    return create_registry()
