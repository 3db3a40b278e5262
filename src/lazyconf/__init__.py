"""lazyconf - lazily resolved hierarchical configuration trees."""

from __future__ import annotations

# Core
from lazyconf.node import ConfigNode
from lazyconf.path import Found, exists, find, get, parse_path

# Settings
from lazyconf.config import Settings

# Resources
from lazyconf.resources import FileResource, MemoryResource, Resource, produce

# Loaders
from lazyconf.loaders import Loader, LoaderRegistry, default_registry

# Errors
from lazyconf.errors import (
    ConfigError,
    ErrorCodes,
    InvalidInputError,
    ParseError,
    ResourceNotFoundError,
    ResourceReadError,
    SettingsError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigNode",
    "Found",
    "find",
    "exists",
    "get",
    "parse_path",
    # Settings
    "Settings",
    # Resources
    "Resource",
    "FileResource",
    "MemoryResource",
    "produce",
    # Loaders
    "Loader",
    "LoaderRegistry",
    "default_registry",
    # Errors
    "ErrorCodes",
    "ConfigError",
    "ParseError",
    "ResourceNotFoundError",
    "ResourceReadError",
    "SettingsError",
    "InvalidInputError",
]
