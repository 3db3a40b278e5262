"""Resource provider contract and the source-to-resource factory."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from lazyconf.errors import InvalidInputError

if TYPE_CHECKING:
    from lazyconf.config import Settings

__all__ = ["Resource", "split_name", "produce"]


@runtime_checkable
class Resource(Protocol):
    """A named node of a hierarchical configuration source.

    A resource is either a container (it has children) or a leaf (it has
    typed content). Implementations decide where the data lives; the
    resolution engine only talks to this interface.
    """

    @property
    def name(self) -> str:
        """Base name: the entry name without its last extension."""
        ...

    @property
    def type_tag(self) -> str:
        """Normalized format tag of a leaf, "" for containers and unknown formats."""
        ...

    @property
    def path(self) -> str:
        """Identifying path used in error reports."""
        ...

    def is_container(self) -> bool:
        """Whether this resource has children instead of content."""
        ...

    def children(self) -> list[str]:
        """Ordered, duplicate-free child base names of a container."""
        ...

    def get_child(self, name: str) -> Resource | None:
        """Fetch a child by enumerated name, falling back to a leaf's exact entry name."""
        ...

    def read(self) -> bytes:
        """Raw content of a leaf."""
        ...


def split_name(entry_name: str) -> tuple[str, str]:
    """Split an entry name into (base name, extension) on its last dot.

    ``"db.json"`` gives ``("db", "json")``, ``".ini"`` gives ``("", "ini")``
    and ``"README"`` gives ``("README", "")``.
    """
    base, dot, ext = entry_name.rpartition(".")
    if not dot:
        return entry_name, ""
    return base, ext


def produce(source: Any, settings: Settings | None = None) -> Resource:
    """Turn a configuration source into a Resource.

    Args:
        source: An existing Resource, a filesystem path, or a nested mapping
            describing an in-memory tree.
        settings: Options applied to newly created resources.

    Raises:
        ResourceNotFoundError: If a filesystem path does not exist.
        InvalidInputError: If the source type is not supported.
    """
    if isinstance(source, Resource):
        return source

    from lazyconf.resources.filesystem import FileResource
    from lazyconf.resources.memory import MemoryResource

    if isinstance(source, (str, os.PathLike)):
        return FileResource.open(source, settings=settings)
    if isinstance(source, Mapping):
        return MemoryResource.from_mapping(source, settings=settings)
    raise InvalidInputError(message=f"Unsupported configuration source: {type(source).__name__}")
