"""Box: a minimal dependency injection container.

Instances are constructed lazily and cached by the identity of the producer
that built them. A producer is either a class constructible with no
arguments, or anything exposing ``init(box)``:

1. **Classes**: ``box.get(Database)`` calls ``Database()`` once.

2. **Initializers**: a class with a static ``init(box)`` builds itself from
   other dependencies, e.g. ``Service(box.get(Database))``.

3. **Factories and constants**: ``factory(fn)`` and ``constant(value)`` wrap
   plain functions and values as producers.

Usage:
    from boxdi import Box, constant

    DatabaseUrl = constant("postgres://localhost:5432/app")

    class Database:
        def __init__(self, url: str):
            self.url = url

        @staticmethod
        def init(box: Box) -> "Database":
            return Database(box.get(DatabaseUrl))

    box = Box()
    db = box.get(Database)
    assert db is box.get(Database)
"""

from .config import BoxConfig
from .container import Box, Construct
from .producers import (
    Constant,
    Factory,
    Initializer,
    Producer,
    constant,
    factory,
)

__all__ = [
    "Box",
    "BoxConfig",
    "Construct",
    "Constant",
    "Factory",
    "Initializer",
    "Producer",
    "constant",
    "factory",
]
