"""Scoped builder returned by ``Box.for_``."""

from typing import TYPE_CHECKING, Any, Generic, Type, TypeVar

if TYPE_CHECKING:
    from .box import Box

C = TypeVar('C')


class Construct(Generic[C]):
    """Builds instances of one class from positional producers.

    The producers must match the target's constructor signature in number
    and order; mismatches surface as the target's own TypeError. The built
    instance is never cached, only (for ``get``) its dependencies.

    Usage:
        app = box.for_(App).get(Database, Cache)   # shared dependencies
        app = box.for_(App).new(Database, Cache)   # fresh dependencies
    """

    def __init__(self, box: "Box", target: Type[C]):
        self.box = box
        self.target = target

    def new(self, *producers: Any) -> C:
        """Build a target from freshly created dependencies."""
        instances = [self.box.new(producer) for producer in producers]
        return self.target(*instances)

    def get(self, *producers: Any) -> C:
        """Build a target from the Box's cached dependencies."""
        instances = [self.box.get(producer) for producer in producers]
        return self.target(*instances)

    def __repr__(self) -> str:
        return f"<Construct {self.target.__qualname__} via {self.box!r}>"
