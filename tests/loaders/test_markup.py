"""Tests for XML flattening."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from lazyconf.loaders.markup import ATTRIBUTES_KEY, TEXT_KEY, flatten_element, load_xml


class TestFlattenElement:
    def test_text_only_element_is_scalar(self) -> None:
        assert flatten_element(ET.fromstring("<a> hello </a>")) == "hello"

    def test_empty_element_is_empty_string(self) -> None:
        assert flatten_element(ET.fromstring("<a/>")) == ""

    def test_children_keyed_by_tag(self) -> None:
        el = ET.fromstring("<a><b>1</b><c>2</c></a>")
        assert flatten_element(el) == {"b": "1", "c": "2"}

    def test_repeated_tags_become_list(self) -> None:
        el = ET.fromstring("<a><item>x</item><other>o</other><item>y</item><item>z</item></a>")
        assert flatten_element(el) == {"item": ["x", "y", "z"], "other": "o"}

    def test_attributes(self) -> None:
        el = ET.fromstring('<a id="1"><b>x</b></a>')
        assert flatten_element(el) == {ATTRIBUTES_KEY: {"id": "1"}, "b": "x"}

    def test_attributes_with_text(self) -> None:
        el = ET.fromstring('<a unit="s">30</a>')
        assert flatten_element(el) == {ATTRIBUTES_KEY: {"unit": "s"}, TEXT_KEY: "30"}

    def test_attributes_without_text(self) -> None:
        el = ET.fromstring('<a enabled="yes"/>')
        assert flatten_element(el) == {ATTRIBUTES_KEY: {"enabled": "yes"}}

    def test_mixed_text_is_dropped(self) -> None:
        el = ET.fromstring("<a>ignored<b>kept</b>tail</a>")
        assert flatten_element(el) == {"b": "kept"}


class TestLoadXml:
    def test_root_element_is_dropped(self) -> None:
        content = b'<?xml version="1.0" encoding="UTF-8"?>\n<config><db><host>local</host></db></config>'
        assert load_xml(content) == {"db": {"host": "local"}}

    def test_comments_ignored(self) -> None:
        assert load_xml(b"<config><!-- note --><a>1</a></config>") == {"a": "1"}

    def test_empty_root(self) -> None:
        assert load_xml(b"<config/>") == {}

    def test_text_root(self) -> None:
        assert load_xml(b"<config>value</config>") == {TEXT_KEY: "value"}

    def test_root_attributes(self) -> None:
        assert load_xml(b'<config version="2"><a>1</a></config>') == {ATTRIBUTES_KEY: {"version": "2"}, "a": "1"}

    @pytest.mark.parametrize("raw", [b"", b"<config>", b"<a></b>", b"not xml"])
    def test_malformed(self, raw: bytes) -> None:
        with pytest.raises(SyntaxError):
            load_xml(raw)
