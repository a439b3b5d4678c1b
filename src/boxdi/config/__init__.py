"""Configuration for Box containers.

Provides a typed configuration object that can be loaded from:
- Environment variables
- YAML files
- Programmatic construction
"""

from .system import BoxConfig

__all__ = ["BoxConfig"]
