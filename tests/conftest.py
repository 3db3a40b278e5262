"""Shared test fixtures for the lazyconf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from tree_helpers import CountingResource, write_tree


# === Sample trees ===

APP_TREE: dict[str, Any] = {
    "app": {
        ".ini": "debug = true\nx = 1\n",
        "db": {"main.json": '{"host": "local", "port": 5432}'},
        "x.json": '{"from_child": true}',
    },
}


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """A filesystem tree with a default file, a child directory and an overriding child."""
    return write_tree(tmp_path / "config", APP_TREE)


@pytest.fixture
def counting_json() -> CountingResource:
    """A JSON leaf that may only be read once."""
    return CountingResource("settings.json", '{"Name": "demo", "nothing": null, "nested": {"a": {"b": 2}}}')
