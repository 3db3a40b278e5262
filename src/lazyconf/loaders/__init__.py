"""Format loaders and the type-tag registry that dispatches to them."""

from __future__ import annotations

from lazyconf.loaders.formats import load_ini, load_json, load_toml, load_yaml, parse_scalar
from lazyconf.loaders.literal import load_literal
from lazyconf.loaders.markup import flatten_element, load_xml
from lazyconf.loaders.registry import Loader, LoaderRegistry, default_registry

__all__ = [
    "Loader",
    "LoaderRegistry",
    "default_registry",
    "flatten_element",
    "load_ini",
    "load_json",
    "load_literal",
    "load_toml",
    "load_xml",
    "load_yaml",
    "parse_scalar",
]
