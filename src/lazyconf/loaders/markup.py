"""XML loader: parse to an element tree, then flatten it to a plain mapping."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

__all__ = ["load_xml", "flatten_element", "ATTRIBUTES_KEY", "TEXT_KEY"]

ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"


def flatten_element(element: ET.Element) -> Any:
    """Flatten one element.

    - attributes are collected under ``"@attributes"``;
    - child elements are keyed by tag, repeated tags become a list in
      document order;
    - an element without children or attributes is its stripped text;
    - an element with attributes and text only keeps the text under ``"#text"``.

    Text mixed with child elements is dropped. Values stay strings.
    """
    children = list(element)
    text = (element.text or "").strip()

    if not children and not element.attrib:
        return text

    result: dict[str, Any] = {}
    if element.attrib:
        result[ATTRIBUTES_KEY] = dict(element.attrib)

    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(child.tag, []).append(flatten_element(child))
    for tag, values in grouped.items():
        result[tag] = values[0] if len(values) == 1 else values

    if not children and text:
        result[TEXT_KEY] = text
    return result


def load_xml(content: bytes) -> dict[str, Any]:
    """Decode an XML document; the root element's content becomes the mapping."""
    # ET.ParseError subclasses SyntaxError; the registry reports it as a parse failure.
    root = ET.fromstring(content)
    flattened = flatten_element(root)
    if isinstance(flattened, dict):
        return flattened
    if not flattened:
        return {}
    return {TEXT_KEY: flattened}
