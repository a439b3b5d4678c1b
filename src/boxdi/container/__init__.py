"""Dependency Injection Container.

Caches producer instances and builds classes from explicit dependencies.
"""

from .box import Box
from .construct import Construct

__all__ = ["Box", "Construct"]
