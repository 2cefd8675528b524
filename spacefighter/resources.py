"""Loading and caching of game resources."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, TypeVar


class _Loadable(Protocol):
    def load(self, path: str, manager: ResourceManager) -> bool: ...


T = TypeVar("T")

_ID_MASK = 0xFFFF


class ResourceManager:
    """Loads resources from files and keeps track of the ones it manages.

    A resource type is any callable taking no arguments whose result has a
    ``load(path, manager)`` method returning True on success. A resource may
    set ``is_cloneable`` to True and provide ``clone()``; a cached cloneable
    resource is then handed out as a fresh clone on every later load.
    The manager sets ``resource_id`` and ``resource_manager`` on what it loads.
    """

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: dict[str, Any] = {}
        self._clones: list[Any] = []
        self._next_id = 0

    def _take_id(self) -> int:
        resource_id = self._next_id
        self._next_id = (self._next_id + 1) & _ID_MASK
        return resource_id

    def load(
        self,
        resource_type: Callable[[], T],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> T:
        """Load a resource, or return the cached one (or a clone of it).

        Raises OSError if the resource reports that it could not be loaded.
        """
        cached = self._resources.get(path)
        if cached is not None:
            if getattr(cached, "is_cloneable", False):
                clone = cached.clone()
                clone.resource_id = self._take_id()
                self._clones.append(clone)
                return clone
            return cached

        resource = resource_type()
        resource.resource_manager = self  # type: ignore[attr-defined]
        full_path = self.content_path + path if append_content_path else path

        if not resource.load(full_path, self):  # type: ignore[attr-defined]
            raise OSError(f"could not load resource {full_path!r}")

        if cache:
            self._resources[path] = resource
        resource.resource_id = self._take_id()  # type: ignore[attr-defined]
        return resource

    def unload_all(self) -> None:
        """Forget every managed resource and clone."""
        self._resources.clear()
        self._clones.clear()

    def cached(self, path: str) -> Optional[Any]:
        """Return the cached resource for a path, if any."""
        return self._resources.get(path)