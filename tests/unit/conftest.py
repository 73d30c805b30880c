"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from gravity_core.models.weights import MatchWeights
from tests.mocks.mock_factories import make_weights
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def balanced() -> MatchWeights:
    """Return the balanced 33/33/34 triple."""
    return make_weights()
