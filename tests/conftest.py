"""
Shared pytest fixtures and configuration for bindx tests.
"""

import pytest

from bindx import ObservableValue
from tests.utils.owners import Movement, Owner


@pytest.fixture
def movement():
    """Provide a fresh observable direction starting at UP."""
    return ObservableValue(Movement.UP)


@pytest.fixture
def owner():
    return Owner("primary")


@pytest.fixture
def other_owner():
    return Owner("secondary")
