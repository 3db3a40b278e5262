"""ConfigNode: a lazily resolved view of one configuration resource."""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from lazyconf.config import Settings
from lazyconf.loaders.registry import LoaderRegistry, default_registry
from lazyconf.path import Found, find
from lazyconf.resources.base import Resource, produce

logger = logging.getLogger(__name__)

__all__ = ["ConfigNode"]


@dataclass(frozen=True)
class _Unresolved:
    resource: Resource


@dataclass(frozen=True)
class _Resolved:
    data: Mapping[str, Any]


def _lowercase_keys(data: Mapping[Any, Any]) -> dict[str, Any]:
    return {str(key).lower(): value for key, value in data.items()}


class ConfigNode:
    """Configuration data of one resource, loaded on first access.

    A leaf resource is decoded by the loader registry. A container resource
    becomes a namespace: its default file (``Settings.default_file``)
    supplies the initial keys, and every other child becomes a nested
    ``ConfigNode`` stored under its lowercased name, overriding a default
    key of the same name. Children stay unresolved until a lookup crosses
    into them.

    Lookups take slash-delimited, case-insensitive paths::

        cfg = ConfigNode("./config")
        cfg.get("app/db/host")
        "app/debug" in cfg
        cfg.app.debug

    Attribute access is a fallback for top-level keys only. Keys that share
    a name with a ConfigNode attribute (``name``, ``get``, ``find``,
    ``exists``, ``keys``, ``items``, ``resolve``, ``to_dict``,
    ``is_resolved``) return the attribute; use ``cfg.get("name")`` for them.

    Resolution runs at most once per node and is safe under concurrent
    first access. After it, the resource reference is dropped and the
    top-level data never changes.
    """

    def __init__(
        self,
        source: Any,
        *,
        loaders: LoaderRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Bind a node to a configuration source.

        Args:
            source: A Resource, a filesystem path, or a nested mapping (see
                :func:`lazyconf.resources.produce`).
            loaders: Loader registry shared with child nodes. Defaults to
                every built-in format.
            settings: Options shared with child nodes and new resources.

        Raises:
            ResourceNotFoundError: If a filesystem path does not exist.
        """
        self._settings = settings or Settings()
        self._loaders = loaders if loaders is not None else default_registry()
        resource = produce(source, settings=self._settings)
        self._name = resource.name
        self._state: _Unresolved | _Resolved = _Unresolved(resource)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Name of the resource this node was created from."""
        return self._name

    @property
    def is_resolved(self) -> bool:
        return isinstance(self._state, _Resolved)

    # ----- Resolution -----

    def resolve(self) -> Mapping[str, Any]:
        """Resolve the node if needed and return its read-only top-level data.

        Raises:
            ParseError: If the resource (or the container's default file) is
                malformed. The node stays unresolved in that case.
        """
        state = self._state
        if isinstance(state, _Resolved):
            return state.data
        with self._lock:
            state = self._state
            if isinstance(state, _Unresolved):
                state = _Resolved(MappingProxyType(self._load(state.resource)))
                self._state = state
        return state.data

    def _load(self, resource: Resource) -> dict[str, Any]:
        logger.debug("Resolving config node '%s' from %s", self._name, resource.path)
        if not resource.is_container():
            data = _lowercase_keys(self._loaders.load(resource))
            logger.debug("Resolved '%s' with %d key(s)", self._name, len(data))
            return data

        data: dict[str, Any] = {}
        default = resource.get_child(self._settings.default_file)
        if default is not None and default.is_container():
            default = None
        if default is not None:
            data = _lowercase_keys(self._loaders.load(default))

        child_keys: dict[str, str] = {}
        for name in resource.children():
            child = resource.get_child(name)
            if child is None or (default is not None and child.path == default.path):
                continue
            key = child.name.lower()
            if key in child_keys:
                logger.warning(
                    "Case collision: '%s' and '%s' in %s differ only by case, keeping '%s'",
                    child_keys[key],
                    child.name,
                    resource.path,
                    child.name,
                )
            child_keys[key] = child.name
            data[key] = ConfigNode(child, loaders=self._loaders, settings=self._settings)

        logger.debug("Resolved '%s' with %d key(s), %d child node(s)", self._name, len(data), len(child_keys))
        return data

    # ----- Lookup -----

    def find(self, path: str) -> Found | None:
        """Look up a path; ``None`` when absent, ``Found(value)`` otherwise."""
        return find(self, path)

    def exists(self, path: str) -> bool:
        return self.find(path) is not None

    def get(self, path: str, default: Any = None) -> Any:
        """The value at a path, or ``default`` when absent. Never raises for a missing path."""
        found = self.find(path)
        if found is None:
            return default
        return found.value

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.exists(path)

    def __getitem__(self, path: str) -> Any:
        return self.get(path)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or not name.isidentifier():
            raise AttributeError(name)
        found = self.find(name)
        if found is None:
            raise AttributeError(f"'{type(self).__name__}' has no key '{name}'")
        return found.value

    # ----- Iteration -----

    def __iter__(self) -> Iterator[str]:
        return iter(self.resolve())

    def __len__(self) -> int:
        return len(self.resolve())

    def keys(self) -> list[str]:
        return list(self.resolve())

    def items(self) -> list[tuple[str, Any]]:
        return list(self.resolve().items())

    def to_dict(self) -> dict[str, Any]:
        """Resolve the whole subtree and return it as plain nested dicts."""
        result: dict[str, Any] = {}
        for key, value in self.resolve().items():
            if isinstance(value, ConfigNode):
                result[key] = value.to_dict()
            else:
                result[key] = copy.deepcopy(value)
        return result

    def __repr__(self) -> str:
        return f"ConfigNode(name={self._name!r}, resolved={self.is_resolved})"
