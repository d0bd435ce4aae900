"""Post-parse conversion of primitive list flags into domain-typed lists.

Converters run after flag binding and before the runner, in the order
they were registered with :func:`~mga.cli.action.dispatch`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from mga.cli.flags import ParsedFlags
from mga.utils import slices
from mga.utils.attrpath import set_path

F = TypeVar("F")
T = TypeVar("T")


@dataclass(frozen=True)
class SliceConverter(Generic[F, T]):
    """Copy a list flag's raw values into a config field, wrapping each one.

    ``None`` (flag never supplied) is stored as ``None``; an empty list is
    stored as an empty list.
    """

    flag_name: str
    dest: str
    source: Callable[[ParsedFlags, str], list[F] | None]
    convert: Callable[[F], T]

    def apply(self, parsed: ParsedFlags, target: object) -> None:
        raw = self.source(parsed, self.flag_name)
        set_path(target, self.dest, slices.convert(raw, self.convert))


def string_slice_converter(
    flag_name: str,
    dest: str,
    element: Callable[[str], T] = str,  # type: ignore[assignment]
) -> SliceConverter[str, T]:
    """Converter for a string-list flag; *element* wraps each value."""
    return SliceConverter(flag_name, dest, ParsedFlags.string_list, element)


def int_slice_converter(
    flag_name: str,
    dest: str,
    element: Callable[[int], T] = int,  # type: ignore[assignment]
) -> SliceConverter[int, T]:
    """Converter for an int-list flag; *element* wraps each value."""
    return SliceConverter(flag_name, dest, ParsedFlags.int_list, element)
