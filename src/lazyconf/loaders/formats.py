"""Loaders for the structured-data and key/value formats.

Every loader takes the raw bytes of a resource and returns a plain mapping.
Malformed content is reported as ``ValueError``; the loader registry turns
that into a ``ParseError`` carrying the resource path.
"""

from __future__ import annotations

import configparser
import json
import re
import tomllib
from typing import Any

import yaml

__all__ = ["load_json", "load_ini", "load_yaml", "load_toml", "parse_scalar"]

_ROOT_SECTION = "__lazyconf_root__"
_UNUSED_DEFAULT_SECTION = "__lazyconf_default__"

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+(?=[eE]))([eE][+-]?\d+)?$")

_TRUE_WORDS = {"true", "on", "yes"}
_FALSE_WORDS = {"false", "off", "no", "none"}
_NULL_WORDS = {"null"}


def _decode(content: bytes) -> str:
    # UnicodeDecodeError is a ValueError, so it surfaces as a parse failure.
    return content.decode("utf-8-sig")


def _as_mapping(data: Any, format_name: str) -> dict[str, Any]:
    """Normalize a decoded top-level document to a string-keyed mapping."""
    if data is None:
        raise ValueError(f"{format_name} document is empty")
    if isinstance(data, dict):
        return {str(k): v for k, v in data.items()}
    if isinstance(data, list):
        return {str(i): v for i, v in enumerate(data)}
    raise ValueError(f"{format_name} document must be a mapping or a list, got {type(data).__name__}")


def parse_scalar(raw: str) -> Any:
    """Infer the type of a key/value scalar.

    Booleans (true/on/yes, false/off/no/none), ``null``, integers and
    decimals are recognized case-insensitively. Quoted values are returned
    unquoted and untyped.
    """
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    if lowered in _NULL_WORDS:
        return None
    if _INT_RE.match(value):
        return int(value)
    if _FLOAT_RE.match(value):
        return float(value)
    return value


def load_json(content: bytes) -> dict[str, Any]:
    """Decode a JSON document."""
    return _as_mapping(json.loads(_decode(content)), "JSON")


def load_ini(content: bytes) -> dict[str, Any]:
    """Decode an INI document.

    Keys before the first section header land at the top level; each
    section becomes a nested mapping. Key case is preserved.
    """
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section=_UNUSED_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        parser.read_string(f"[{_ROOT_SECTION}]\n" + _decode(content))
    except configparser.ParsingError as e:
        # Line numbers count the injected root header.
        lines = "; ".join(f"line {lineno - 1}: {line}" for lineno, line in e.errors)
        raise ValueError(f"Invalid INI: {lines}") from e
    except configparser.Error as e:
        raise ValueError(f"Invalid INI: {e}") from e

    result: dict[str, Any] = {}
    for section in parser.sections():
        values = {key: parse_scalar(raw) for key, raw in parser.items(section, raw=True)}
        if section == _ROOT_SECTION:
            result.update(values)
        else:
            result[section] = values
    return result


def load_yaml(content: bytes) -> dict[str, Any]:
    """Decode a YAML document with the safe loader."""
    try:
        data = yaml.safe_load(_decode(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    return _as_mapping(data, "YAML")


def load_toml(content: bytes) -> dict[str, Any]:
    """Decode a TOML document."""
    return tomllib.loads(_decode(content))
