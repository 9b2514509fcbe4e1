"""Shared test fixtures for rectcut."""

import pytest

from rectcut import Rect


@pytest.fixture
def rect():
    """10x10 rectangle anchored at the origin."""
    return Rect(0, 0, 10, 10)


@pytest.fixture
def inverted_rect():
    """Rectangle whose min bounds exceed its max bounds."""
    return Rect(10, 10, 0, 0)
