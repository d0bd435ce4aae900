"""Dotted attribute-path access (``"database.host"``) on nested objects."""

from __future__ import annotations

from typing import Any


def get_path(obj: object, path: str) -> Any:
    """Return the attribute at dotted *path* below *obj*."""
    for part in path.split("."):
        obj = getattr(obj, part)
    return obj


def set_path(obj: object, path: str, value: Any) -> None:
    """Assign *value* to the attribute at dotted *path* below *obj*.

    Raises
    ------
    AttributeError
        If any intermediate or final attribute does not exist.
    """
    *parents, leaf = path.split(".")
    for part in parents:
        obj = getattr(obj, part)
    if not hasattr(obj, leaf):
        raise AttributeError(f"{type(obj).__name__!s} has no attribute {leaf!r}")
    setattr(obj, leaf, value)
