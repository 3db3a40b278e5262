"""In-memory resource provider built from a nested mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lazyconf.config import Settings
from lazyconf.errors import InvalidInputError
from lazyconf.resources.base import split_name

logger = logging.getLogger(__name__)

__all__ = ["MemoryResource"]


class MemoryResource:
    """A virtual resource tree.

    Mapping values are containers; ``str`` and ``bytes`` values are leaves,
    keyed by entry name including the extension::

        MemoryResource.from_mapping({
            ".ini": "debug = true",
            "db": {"main.json": '{"host": "local"}'},
        })
    """

    def __init__(
        self,
        entry_name: str,
        node: Any,
        path: str = "/",
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._path = path
        if isinstance(node, Mapping):
            self._children_map: Mapping[str, Any] | None = node
            self._content = b""
            self._name, self._ext = entry_name, ""
        elif isinstance(node, (str, bytes)):
            self._children_map = None
            self._content = node.encode("utf-8") if isinstance(node, str) else bytes(node)
            self._name, self._ext = split_name(entry_name)
        else:
            raise InvalidInputError(
                message=f"Unsupported in-memory entry at {path}: {type(node).__name__}"
            )
        self._entries: dict[str, str] | None = None

    @classmethod
    def from_mapping(cls, tree: Mapping[str, Any], settings: Settings | None = None) -> MemoryResource:
        """Create a root container from a nested mapping."""
        return cls("", tree, path="/", settings=settings)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_tag(self) -> str:
        if self._children_map is not None:
            return ""
        return self._settings.type_tag_for(self._ext)

    @property
    def path(self) -> str:
        return self._path

    def is_container(self) -> bool:
        return self._children_map is not None

    def children(self) -> list[str]:
        return list(self._scan())

    def get_child(self, name: str) -> MemoryResource | None:
        if self._children_map is None or not name:
            return None
        entry_name = self._scan().get(name)
        if entry_name is not None:
            return self._make_child(entry_name)
        # Leaves skipped by the listing stay reachable by exact entry name.
        if isinstance(self._children_map.get(name), (str, bytes)):
            return self._make_child(name)
        return None

    def read(self) -> bytes:
        if self._children_map is not None:
            raise InvalidInputError(message=f"Cannot read content of a container: {self._path}")
        return self._content

    def _make_child(self, entry_name: str) -> MemoryResource:
        assert self._children_map is not None
        child_path = self._path.rstrip("/") + "/" + entry_name
        return MemoryResource(entry_name, self._children_map[entry_name], path=child_path, settings=self._settings)

    def _scan(self) -> dict[str, str]:
        if self._entries is not None:
            return self._entries
        entries: dict[str, str] = {}
        for entry_name in sorted(self._children_map or {}):
            if self._settings.skip_hidden and entry_name.startswith("."):
                continue
            value = self._children_map[entry_name]  # type: ignore[index]
            name = entry_name if isinstance(value, Mapping) else split_name(entry_name)[0]
            if name in entries:
                logger.warning(
                    "Duplicate resource name '%s' at %s, already found as '%s'. Skipping.",
                    name,
                    self._path,
                    entries[name],
                )
                continue
            entries[name] = entry_name
        self._entries = entries
        return entries

    def __repr__(self) -> str:
        return f"MemoryResource({self._path!r})"
