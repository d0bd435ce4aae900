"""Tests for slice converters and the helpers they build on."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from mga.cli.converters import SliceConverter, int_slice_converter, string_slice_converter
from mga.cli.flags import ParsedFlags
from mga.core.resource import create
from mga.core.resource.types import Tag
from mga.core.service import stop
from mga.core.service.types import PID
from mga.utils import slices
from mga.utils.attrpath import get_path, set_path


# ---------------------------------------------------------------------------
# slices.convert
# ---------------------------------------------------------------------------

class TestSliceConvert:
    def test_none_stays_none(self) -> None:
        assert slices.convert(None, str.upper) is None

    def test_empty_stays_empty(self) -> None:
        assert slices.convert([], str.upper) == []

    def test_order_preserved(self) -> None:
        assert slices.convert(["b", "a", "c"], str.upper) == ["B", "A", "C"]


# ---------------------------------------------------------------------------
# Attribute paths
# ---------------------------------------------------------------------------

@dataclass
class _Inner:
    value: int = 0


@dataclass
class _Outer:
    inner: _Inner = field(default_factory=_Inner)


class TestAttrPath:
    def test_set_nested(self) -> None:
        obj = _Outer()
        set_path(obj, "inner.value", 5)
        assert obj.inner.value == 5
        assert get_path(obj, "inner.value") == 5

    def test_missing_leaf_raises(self) -> None:
        with pytest.raises(AttributeError):
            set_path(_Outer(), "inner.missing", 1)

    def test_missing_parent_raises(self) -> None:
        with pytest.raises(AttributeError):
            set_path(_Outer(), "nope.value", 1)


# ---------------------------------------------------------------------------
# SliceConverter
# ---------------------------------------------------------------------------

class TestStringSliceConverter:
    def test_values_copied_into_config(self) -> None:
        cfg = create.Config()
        parsed = ParsedFlags(values={"tags": ["a", "b"]})
        string_slice_converter("tags", "tags", Tag).apply(parsed, cfg)
        assert cfg.tags == ["a", "b"]

    def test_absent_flag_gives_none(self) -> None:
        cfg = create.Config()
        string_slice_converter("tags", "tags", Tag).apply(ParsedFlags(), cfg)
        assert cfg.tags is None

    def test_explicit_none_gives_none(self) -> None:
        cfg = create.Config(tags=[Tag("stale")])
        parsed = ParsedFlags(values={"tags": None})
        string_slice_converter("tags", "tags", Tag).apply(parsed, cfg)
        assert cfg.tags is None

    def test_empty_list_is_preserved(self) -> None:
        cfg = create.Config()
        parsed = ParsedFlags(values={"tags": []})
        string_slice_converter("tags", "tags", Tag).apply(parsed, cfg)
        assert cfg.tags == []

    def test_element_wrapper_applied(self) -> None:
        cfg = create.Config()
        parsed = ParsedFlags(values={"tags": ["x"]})
        string_slice_converter("tags", "tags", str.upper).apply(parsed, cfg)
        assert cfg.tags == ["X"]


class TestIntSliceConverter:
    def test_pids_copied(self) -> None:
        cfg = stop.Config()
        parsed = ParsedFlags(values={"pid": [10, 20]})
        int_slice_converter("pid", "pids", PID).apply(parsed, cfg)
        assert cfg.pids == [10, 20]

    def test_absent_pids_stay_none(self) -> None:
        cfg = stop.Config()
        int_slice_converter("pid", "pids", PID).apply(ParsedFlags(), cfg)
        assert cfg.pids is None

    def test_custom_source(self) -> None:
        cfg = stop.Config()
        converter: SliceConverter[int, PID] = SliceConverter(
            "pid", "pids", lambda parsed, name: [1, 2, 3], PID
        )
        converter.apply(ParsedFlags(), cfg)
        assert cfg.pids == [1, 2, 3]
