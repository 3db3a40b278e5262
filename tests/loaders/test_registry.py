"""Tests for LoaderRegistry dispatch and error wrapping."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from lazyconf.config import Settings
from lazyconf.errors import InvalidInputError, ParseError
from lazyconf.loaders.registry import LoaderRegistry, default_registry
from lazyconf.resources.memory import MemoryResource

from tree_helpers import CountingResource


def leaf(entry_name: str, content: str) -> MemoryResource:
    return MemoryResource.from_mapping({entry_name: content}).get_child(entry_name)  # type: ignore[return-value]


# === Registration ===


class TestRegistration:
    def test_default_tags(self) -> None:
        assert sorted(default_registry().tags()) == ["ini", "json", "py", "toml", "xml", "yaml"]

    def test_default_registry_is_fresh(self) -> None:
        first = default_registry()
        first.unregister("json")
        assert "json" in default_registry()

    def test_register_replaces(self) -> None:
        registry = default_registry()
        registry.register("json", lambda content: {"replaced": True})
        assert registry.load(leaf("a.json", "{}")) == {"replaced": True}

    def test_register_empty_tag_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            LoaderRegistry().register("", lambda content: {})

    def test_register_non_callable_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            LoaderRegistry().register("x", "not callable")  # type: ignore[arg-type]

    def test_unregister(self) -> None:
        registry = default_registry()
        assert registry.unregister("xml") is True
        assert registry.unregister("xml") is False
        assert registry.get("xml") is None

    def test_copy_is_independent(self) -> None:
        registry = default_registry()
        clone = registry.copy()
        clone.unregister("ini")
        assert "ini" in registry
        assert "ini" not in clone


# === load() ===


class TestLoad:
    @pytest.mark.parametrize(
        ("entry_name", "content", "expected"),
        [
            ("a.json", '{"k": 1}', {"k": 1}),
            ("a.ini", "k = 1", {"k": 1}),
            ("a.xml", "<r><k>1</k></r>", {"k": "1"}),
            ("a.yaml", "k: 1", {"k": 1}),
            ("a.yml", "k: 1", {"k": 1}),
            ("a.toml", "k = 1", {"k": 1}),
            ("a.py", "K = 1", {"K": 1}),
        ],
    )
    def test_dispatch_by_type_tag(self, entry_name: str, content: str, expected: dict[str, Any]) -> None:
        assert default_registry().load(leaf(entry_name, content)) == expected

    def test_unknown_type_is_empty_and_not_read(self, caplog: pytest.LogCaptureFixture) -> None:
        resource = CountingResource("notes.txt", "anything")
        with caplog.at_level(logging.DEBUG, logger="lazyconf"):
            assert default_registry().load(resource) == {}
        assert resource.reads == 0
        assert "No loader for type" in caplog.text

    @pytest.mark.parametrize(
        ("entry_name", "content"),
        [
            ("bad.json", "{oops"),
            ("bad.json", "null"),
            ("bad.ini", "no delimiter here"),
            ("bad.xml", "<a><b></a>"),
            ("bad.yaml", "a: [1"),
            ("bad.toml", "a = "),
            ("bad.py", "import os"),
            ("bad.py", "A = ["),
        ],
    )
    def test_malformed_raises_parse_error_with_path(self, entry_name: str, content: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            default_registry().load(leaf(entry_name, content))
        assert exc_info.value.resource_path == f"/{entry_name}"
        assert exc_info.value.reason
        assert exc_info.value.cause is not None

    def test_loader_returning_non_mapping(self) -> None:
        registry = LoaderRegistry({"json": lambda content: ["not", "a", "dict"]})  # type: ignore[dict-item]
        with pytest.raises(ParseError, match="expected a mapping"):
            registry.load(leaf("a.json", "[]"))

    def test_custom_tag(self) -> None:
        registry = LoaderRegistry({"env": lambda content: dict(line.split("=", 1) for line in content.decode().split())})
        resource = CountingResource("vars.env", "A=1 B=2", settings=Settings(type_tags={"env": "env"}))
        assert registry.load(resource) == {"A": "1", "B": "2"}
