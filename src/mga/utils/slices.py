"""Element-wise list conversion helpers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

F = TypeVar("F")
T = TypeVar("T")


def convert(values: Sequence[F] | None, fn: Callable[[F], T]) -> list[T] | None:
    """Apply *fn* to every element of *values*.

    ``None`` is returned unchanged so callers can tell "never supplied"
    apart from "supplied but empty".
    """
    if values is None:
        return None
    return [fn(value) for value in values]
