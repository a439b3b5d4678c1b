"""Producer types understood by the Box.

A producer is anything the Box knows how to turn into an instance:

- a class constructible with no arguments (``box.get(Cache)`` -> ``Cache()``)
- anything exposing ``init(box)``: a class with a static or class method
  named ``init``, a ``Factory`` wrapping a function, or a ``Constant``
  wrapping a value.
"""

from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, Protocol, Type, TypeVar, Union

if TYPE_CHECKING:
    from .container import Box

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)


class Initializer(Protocol[T_co]):
    """Anything that builds an instance from a Box."""

    def init(self, box: "Box") -> T_co:
        ...


# A zero-argument class, or an object/class exposing init(box)
Producer = Union[Type[T], Initializer[T]]


class Factory(Generic[T]):
    """Producer wrapping a plain function ``box -> instance``.

    Every Factory is its own cache key: wrapping the same function twice
    yields two producers that the Box caches separately.
    """

    __slots__ = ("init", "name")

    def __init__(self, init: Callable[["Box"], T], name: Optional[str] = None):
        self.init = init
        self.name = name or getattr(init, "__qualname__", repr(init))

    def __repr__(self) -> str:
        return f"<Factory {self.name}>"


class Constant(Factory[T]):
    """Producer that ignores the Box and always returns the same value."""

    __slots__ = ("value",)

    def __init__(self, value: T):
        self.value = value
        super().__init__(lambda box: value, name=f"constant({value!r})")

    def __repr__(self) -> str:
        return f"<Constant {self.value!r}>"


def factory(init: Callable[["Box"], T]) -> Factory[T]:
    """Wrap a function as a producer.

    Args:
        init: Function receiving the Box and returning the instance.

    Returns:
        A new producer with its own cache identity.
    """
    return Factory(init)


def constant(value: T) -> Constant[T]:
    """Wrap a value as a producer.

    Two constants wrapping equal values are still distinct producers
    and never share a cache entry.
    """
    return Constant(value)


def is_initializer(producer: Any) -> bool:
    """Return True if the producer is built through ``init(box)``.

    For classes only a static or class method named ``init`` counts; a plain
    instance method cannot be called without an instance, so such classes
    are constructed directly.
    """
    if isinstance(producer, type):
        for klass in producer.__mro__:
            if "init" in vars(klass):
                return isinstance(vars(klass)["init"], (staticmethod, classmethod))
        return False
    return callable(getattr(producer, "init", None))


def describe(producer: Any) -> str:
    """Human-readable producer name for log messages."""
    if isinstance(producer, type):
        return producer.__qualname__
    return repr(producer)
