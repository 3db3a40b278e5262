"""Tests for Python literal data files."""

from __future__ import annotations

import pytest

from lazyconf.loaders.literal import load_literal


class TestLoadLiteral:
    def test_single_dict_expression(self) -> None:
        assert load_literal(b'{"debug": True, "workers": 4}') == {"debug": True, "workers": 4}

    def test_single_list_expression(self) -> None:
        assert load_literal(b'["a", "b"]') == {"0": "a", "1": "b"}

    def test_assignments(self) -> None:
        content = b'"""Settings."""\n\nDEBUG = True\nHOSTS = ["a", "b"]\nLIMITS = {"rpm": 60}\nRATIO: float = 0.5\n'
        assert load_literal(content) == {
            "DEBUG": True,
            "HOSTS": ["a", "b"],
            "LIMITS": {"rpm": 60},
            "RATIO": 0.5,
        }

    def test_later_assignment_wins(self) -> None:
        assert load_literal(b"A = 1\nA = 2\n") == {"A": 2}

    def test_empty_file(self) -> None:
        assert load_literal(b"") == {}

    def test_negative_and_none_literals(self) -> None:
        assert load_literal(b"OFFSET = -3\nNOTHING = None\n") == {"OFFSET": -3, "NOTHING": None}

    @pytest.mark.parametrize(
        "raw",
        [
            b"import os\n",
            b"A = os.getcwd()\n",
            b"A = B\n",
            b"A, B = 1, 2\n",
            b"A = B = 1\n",
            b"A += 1\n",
            b"print('hi')\n",
            b"__import__('os').system('true')\n",
            b"def f():\n    pass\n",
        ],
    )
    def test_rejects_code(self, raw: bytes) -> None:
        with pytest.raises(ValueError):
            load_literal(raw)

    def test_scalar_expression_rejected(self) -> None:
        with pytest.raises(ValueError):
            load_literal(b"42\n")

    def test_syntax_error(self) -> None:
        with pytest.raises(SyntaxError):
            load_literal(b"A = [1, 2\n")

    @pytest.mark.parametrize("raw", [b"SETTINGS = {[1]: 2}\n", b"TAGS = {[1], [2]}\n", b"{{}: 1}\n"])
    def test_unhashable_members_rejected(self, raw: bytes) -> None:
        with pytest.raises(ValueError, match="Invalid literal"):
            load_literal(raw)
