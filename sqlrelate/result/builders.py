"""Container builders for collection decoding.

A builder is created empty per decode call, receives one item per row
through ``append`` and hands back the finished container from ``build``.
Builders for the standard containers are registered by type; any other
container can be supported with :func:`register_builder` or by passing a
zero-argument callable that returns a :class:`~sqlrelate.protocols.Builder`.
"""

from collections import deque
from collections.abc import Callable
from typing import Any, Generic, Union

from typing_extensions import TypeVar

from sqlrelate.exceptions import ImproperConfigurationError
from sqlrelate.protocols import Builder
from sqlrelate.utils.dispatch import TypeDispatcher

__all__ = (
    "BuilderFactory",
    "BuilderSpec",
    "DictBuilder",
    "SequenceBuilder",
    "builder_for",
    "register_builder",
    "resolve_builder",
)

T = TypeVar("T")
C = TypeVar("C")

BuilderFactory = Callable[[], Builder[Any, Any]]
BuilderSpec = Union[type, BuilderFactory]


class SequenceBuilder(Generic[T, C]):
    """Collects items in order and passes them to ``container_type`` on build."""

    __slots__ = ("_items", "container_type")

    def __init__(self, container_type: "Callable[[list[T]], C]") -> None:
        self.container_type = container_type
        self._items: list[T] = []

    def append(self, item: T) -> None:
        self._items.append(item)

    def build(self) -> C:
        return self.container_type(self._items)


class DictBuilder(Generic[T, C]):
    """Collects ``(key, value)`` pairs into a mapping; later keys overwrite earlier ones."""

    __slots__ = ("_items", "container_type")

    def __init__(self, container_type: "Callable[[dict[Any, Any]], C]" = dict) -> None:  # type: ignore[assignment]
        self.container_type = container_type
        self._items: dict[Any, Any] = {}

    def append(self, item: "tuple[Any, Any]") -> None:
        key, value = item
        self._items[key] = value

    def build(self) -> C:
        if self.container_type is dict:
            return self._items  # type: ignore[return-value]
        return self.container_type(self._items)


_BUILDERS: TypeDispatcher["Callable[[type], Builder[Any, Any]]"] = TypeDispatcher()


def register_builder(container_type: type, factory: "Callable[[type], Builder[Any, Any]]") -> None:
    """Register how to build ``container_type`` and its subclasses.

    Args:
        container_type: The container type.
        factory: Called with the requested type, returns an empty builder.
    """
    _BUILDERS.register(container_type, factory)


def builder_for(container_type: type) -> BuilderFactory:
    """Return a factory of empty builders for ``container_type``.

    Raises:
        ImproperConfigurationError: If no builder is registered for the type or its bases.
    """
    factory = _BUILDERS.get_for_type(container_type)
    if factory is None:
        msg = f"No builder registered for container type {container_type.__name__!r}"
        raise ImproperConfigurationError(msg)
    return lambda: factory(container_type)


def resolve_builder(spec: BuilderSpec) -> BuilderFactory:
    """Accept a container type or a builder factory and return a builder factory.

    A class that itself defines ``append`` and ``build`` is a builder and is
    used as its own factory; any other class is looked up as a container type.
    """
    if isinstance(spec, type) and callable(getattr(spec, "append", None)) and callable(getattr(spec, "build", None)):
        return spec
    if isinstance(spec, type):
        return builder_for(spec)
    if callable(spec):
        return spec
    msg = f"Expected a container type or a builder factory, got {spec!r}"
    raise ImproperConfigurationError(msg)


for _sequence_type in (list, tuple, set, frozenset, deque):
    register_builder(_sequence_type, SequenceBuilder)
register_builder(dict, DictBuilder)
