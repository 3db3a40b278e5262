"""Python data files, evaluated as literals only.

A data file is parsed with :mod:`ast` and never executed. Two shapes are
accepted::

    # a single literal expression
    {"debug": True, "workers": 4}

    # or top-level assignments of literals
    DEBUG = True
    WORKERS = 4
    HOSTS = ["a", "b"]

Anything else (calls, imports, names on the right-hand side, tuple targets)
is rejected with ``ValueError``.
"""

from __future__ import annotations

import ast
from typing import Any

from lazyconf.loaders.formats import _as_mapping, _decode

__all__ = ["load_literal"]


def _is_docstring(stmt: ast.stmt) -> bool:
    return (
        isinstance(stmt, ast.Expr)
        and isinstance(stmt.value, ast.Constant)
        and isinstance(stmt.value.value, str)
    )


def _literal(node: ast.expr, where: str) -> Any:
    try:
        return ast.literal_eval(node)
    except ValueError as e:
        raise ValueError(f"Non-literal value {where}: {e}") from e
    except (TypeError, RecursionError, MemoryError) as e:
        # Unhashable dict keys or set members, or nesting too deep to evaluate.
        raise ValueError(f"Invalid literal {where}: {e}") from e


def load_literal(content: bytes) -> dict[str, Any]:
    """Evaluate a Python data file without executing it."""
    try:
        tree = ast.parse(_decode(content), mode="exec")
    except (RecursionError, MemoryError) as e:
        raise ValueError(f"Python data file nested too deeply: {e!r}") from e
    body = [stmt for stmt in tree.body if not _is_docstring(stmt)]

    if len(body) == 1 and isinstance(body[0], ast.Expr):
        return _as_mapping(_literal(body[0].value, "at line 1"), "Python literal")

    result: dict[str, Any] = {}
    for stmt in body:
        if isinstance(stmt, ast.Assign) and len(stmt.targets) == 1 and isinstance(stmt.targets[0], ast.Name):
            result[stmt.targets[0].id] = _literal(stmt.value, f"for '{stmt.targets[0].id}' at line {stmt.lineno}")
        elif isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name) and stmt.value is not None:
            result[stmt.target.id] = _literal(stmt.value, f"for '{stmt.target.id}' at line {stmt.lineno}")
        else:
            raise ValueError(f"Unsupported statement at line {stmt.lineno}: {type(stmt).__name__}")
    return result
