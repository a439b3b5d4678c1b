"""Testing utilities for Box containers."""

from .mocks import TrackingFactory, mocked_box

__all__ = [
    "TrackingFactory",
    "mocked_box",
]
