"""Resource providers: the contract and its filesystem and in-memory implementations.

Usage::

    from lazyconf.resources import produce

    root = produce("./config")
    for name in root.children():
        print(name, root.get_child(name).type_tag)
"""

from __future__ import annotations

from lazyconf.resources.base import Resource, produce, split_name
from lazyconf.resources.filesystem import FileResource
from lazyconf.resources.memory import MemoryResource

__all__ = [
    "FileResource",
    "MemoryResource",
    "Resource",
    "produce",
    "split_name",
]
