"""Type keyed registry with MRO fallback."""

from typing import Any, Generic, Optional, TypeVar

__all__ = ("TypeDispatcher",)


T = TypeVar("T")


class TypeDispatcher(Generic[T]):
    """Maps types to values, resolving unregistered types through their MRO.

    A registration for ``list`` therefore also serves subclasses of ``list``.
    Resolved lookups are cached until the next :meth:`register`.
    """

    __slots__ = ("_cache", "_registry")

    def __init__(self) -> None:
        self._cache: dict[type, T] = {}
        self._registry: dict[type, T] = {}

    def register(self, type_: type, value: T) -> None:
        self._registry[type_] = value
        self._cache.clear()

    def get(self, obj: Any) -> Optional[T]:
        """Value registered for the type of ``obj``."""
        return self.get_for_type(type(obj))

    def get_for_type(self, obj_type: type) -> Optional[T]:
        """Value registered for ``obj_type`` or its nearest registered base, else None."""
        cached = self._cache.get(obj_type)
        if cached is not None:
            return cached
        for base in getattr(obj_type, "__mro__", (obj_type,)):
            value = self._registry.get(base)
            if value is not None:
                self._cache[obj_type] = value
                return value
        return None

    def clear_cache(self) -> None:
        self._cache.clear()

    def __contains__(self, type_: object) -> bool:
        return type_ in self._registry

    def __repr__(self) -> str:
        registered = sorted(type_.__name__ for type_ in self._registry)
        return f"{type(self).__name__}({registered!r})"
