"""Pytest fixtures for Box tests."""

import pytest

from boxdi import Box, BoxConfig
from boxdi.testing import TrackingFactory


@pytest.fixture
def box():
    """Provide a fresh container."""
    return Box(BoxConfig.for_testing())


@pytest.fixture
def tracking():
    """Provide a call-counting producer."""
    return TrackingFactory()
