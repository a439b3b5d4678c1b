"""The Box: identity-keyed instance cache."""

import contextlib
import logging
import threading
from typing import Any, Optional, Type, TypeVar

from ..config import BoxConfig
from ..producers import Producer, describe, is_initializer
from .construct import Construct

logger = logging.getLogger(__name__)

T = TypeVar('T')
C = TypeVar('C')


class Box:
    """Dependency injection container.

    Caches one instance per producer. Producers are keyed by object
    identity, never by equality, so two factories with identical behavior
    get separate entries. Entries live as long as the Box; there is no
    eviction.

    Usage:
        box = Box()

        db = box.get(Database)         # built once, then cached
        tmp = box.new(Database)        # always a fresh instance
        app = box.for_(App).get(Database, Cache)

        Box.mock(box, Database, FakeDatabase())

    Circular dependencies are not detected; a producer that (indirectly)
    requests itself recurses until Python raises RecursionError.
    """

    def __init__(self, config: Optional[BoxConfig] = None):
        self.config = config or BoxConfig()
        # id(producer) -> (producer, instance); the producer reference
        # keeps its id from being reused while the entry exists
        self._cache: dict[int, tuple[Any, Any]] = {}
        # id(producer) -> lock serializing construction of that producer
        self._locks: dict[int, Any] = {}
        if self.config.thread_safe:
            # Held only to touch the dicts, never while a producer runs
            self._lock = threading.Lock()
        else:
            self._lock = contextlib.nullcontext()

    def new(self, producer: Producer[T]) -> T:
        """Create a fresh instance without touching the cache.

        Initializer producers are called with this Box; plain classes are
        called with no arguments. Exceptions from the producer propagate
        unchanged.
        """
        if self.config.debug:
            logger.debug(f"[{self.config.name}] Creating transient {describe(producer)}")
        if is_initializer(producer):
            return producer.init(self)
        return producer()

    def get(self, producer: Producer[T]) -> T:
        """Return the cached instance for a producer, creating it once.

        A failed construction leaves no entry, so the next call retries.
        """
        key = id(producer)
        entry = self._cache.get(key)
        if entry is None:
            with self._producer_lock(key):
                # Another thread may have finished while we waited
                entry = self._cache.get(key)
                if entry is None:
                    logger.debug(f"[{self.config.name}] Constructing {describe(producer)}")
                    value = self.new(producer)
                    with self._lock:
                        # An override installed mid-construction wins
                        entry = self._cache.setdefault(key, (producer, value))
                    return entry[1]

        if self.config.debug:
            logger.debug(f"[{self.config.name}] Cache hit for {describe(producer)}")
        return entry[1]

    def _producer_lock(self, key: int):
        """Lock guarding construction of a single producer.

        Re-entrant so a cycle on one thread ends in RecursionError rather
        than a deadlock. Unrelated producers never wait on each other.
        """
        if not self.config.thread_safe:
            return self._lock
        with self._lock:
            return self._locks.setdefault(key, threading.RLock())

    def for_(self, target: Type[C]) -> Construct[C]:
        """Return a builder that constructs ``target`` from producers.

        Named ``for_`` because ``for`` is a keyword.
        """
        return Construct(self, target)

    def override(self, producer: Producer[T], value: T) -> None:
        """Force ``value`` into the cache for ``producer``.

        Replaces an existing entry or pre-empts construction entirely: the
        producer's own logic never runs afterwards.
        """
        logger.debug(f"[{self.config.name}] Overriding {describe(producer)}")
        with self._lock:
            self._cache[id(producer)] = (producer, value)

    @staticmethod
    def mock(box: "Box", producer: Producer[T], value: T) -> None:
        """Install ``value`` as the instance of ``producer`` in ``box``.

        Intended for tests.
        """
        box.override(producer, value)

    def __contains__(self, producer: Any) -> bool:
        return id(producer) in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"<Box {self.config.name!r} cached={len(self._cache)}>"
