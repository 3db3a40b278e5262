"""Slash-delimited path lookup across a tree of config nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lazyconf.node import ConfigNode

__all__ = ["Found", "parse_path", "find", "exists", "get"]


@dataclass(frozen=True)
class Found:
    """A lookup hit. ``value`` may itself be ``None``."""

    value: Any


def parse_path(path: str) -> list[str]:
    """Split a path on ``/`` into lowercase, non-empty segments.

    ``"path/to/var"``, ``"/path/to/var"`` and ``"Path//To/var"`` all give
    ``["path", "to", "var"]``.
    """
    return [segment for segment in path.lower().split("/") if segment]


def find(node: ConfigNode, path: str) -> Found | None:
    """Look up a path below a node.

    Returns ``None`` when the path is empty or any segment is missing.
    Crossing into a child node hands the remaining segments to that child,
    which resolves itself on demand.
    """
    return _find_segments(node, parse_path(path))


def _find_segments(node: ConfigNode, segments: list[str]) -> Found | None:
    from lazyconf.node import ConfigNode

    data = node.resolve()
    if not segments:
        return None

    first, rest = segments[0], segments[1:]
    if first not in data:
        return None

    branch = data[first]
    for i, step in enumerate(rest):
        if isinstance(branch, ConfigNode):
            return _find_segments(branch, rest[i:])
        if isinstance(branch, Mapping) and step in branch:
            branch = branch[step]
        elif isinstance(branch, list) and step.isdecimal() and int(step) < len(branch):
            branch = branch[int(step)]
        else:
            return None
    return Found(branch)


def exists(node: ConfigNode, path: str) -> bool:
    """Whether the path resolves to a value, including a ``None`` value."""
    return find(node, path) is not None


def get(node: ConfigNode, path: str, default: Any = None) -> Any:
    """The value at a path, or ``default`` when the path is absent."""
    found = find(node, path)
    if found is None:
        return default
    return found.value
