"""Format dispatch: a registry mapping type tags to loader callables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from lazyconf.errors import InvalidInputError, ParseError
from lazyconf.loaders.formats import load_ini, load_json, load_toml, load_yaml
from lazyconf.loaders.literal import load_literal
from lazyconf.loaders.markup import load_xml

if TYPE_CHECKING:
    from lazyconf.resources.base import Resource

logger = logging.getLogger(__name__)

__all__ = ["Loader", "LoaderRegistry", "default_registry"]


class Loader(Protocol):
    """Decode the raw bytes of a resource into a plain mapping.

    Malformed content must be reported by raising ``ValueError`` (or
    ``SyntaxError``).
    """

    def __call__(self, content: bytes) -> dict[str, Any]: ...


class LoaderRegistry:
    """Maps resource type tags to loaders.

    Unregistered tags are inert: loading such a resource yields an empty
    mapping rather than an error.
    """

    def __init__(self, loaders: dict[str, Loader] | None = None) -> None:
        self._loaders: dict[str, Loader] = {}
        for tag, loader in (loaders or {}).items():
            self.register(tag, loader)

    def register(self, type_tag: str, loader: Loader) -> None:
        """Register a loader for a type tag, replacing any existing one.

        Raises:
            InvalidInputError: If the tag is empty or the loader is not callable.
        """
        if not type_tag:
            raise InvalidInputError(message="Loader type tag must be a non-empty string")
        if not callable(loader):
            raise InvalidInputError(message=f"Loader for '{type_tag}' is not callable")
        self._loaders[type_tag] = loader

    def unregister(self, type_tag: str) -> bool:
        """Remove the loader for a type tag. Returns whether one was registered."""
        return self._loaders.pop(type_tag, None) is not None

    def get(self, type_tag: str) -> Loader | None:
        return self._loaders.get(type_tag)

    def tags(self) -> list[str]:
        return list(self._loaders)

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._loaders

    def copy(self) -> LoaderRegistry:
        return LoaderRegistry(dict(self._loaders))

    def load(self, resource: Resource) -> dict[str, Any]:
        """Load a leaf resource into a plain mapping.

        Raises:
            ParseError: If the content is malformed for its recognized format.
        """
        loader = self._loaders.get(resource.type_tag)
        if loader is None:
            logger.debug("No loader for type '%s' at %s, treating as empty", resource.type_tag, resource.path)
            return {}

        content = resource.read()
        try:
            data = loader(content)
        except (ValueError, SyntaxError) as e:
            raise ParseError(resource_path=resource.path, reason=str(e), cause=e) from e

        if not isinstance(data, dict):
            raise ParseError(
                resource_path=resource.path,
                reason=f"loader returned {type(data).__name__}, expected a mapping",
            )
        return data


def default_registry() -> LoaderRegistry:
    """A fresh registry with every built-in format registered."""
    return LoaderRegistry(
        {
            "py": load_literal,
            "json": load_json,
            "ini": load_ini,
            "xml": load_xml,
            "yaml": load_yaml,
            "toml": load_toml,
        }
    )
