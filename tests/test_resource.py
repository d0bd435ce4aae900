"""Tests for the resource runners (core/resource/*)."""

from __future__ import annotations

import json
import logging

import pytest

from mga.core.context import RunContext
from mga.core.resource import create, listing
from mga.core.resource.types import Description, Name, Pattern, SortField, Status, Tag
from mga.exceptions import CancelledError, RunnerError
from mga.infra.output import encode_result


def _ids(result: listing.Result) -> list[str]:
    return [res.id for res in result.resources]


# ---------------------------------------------------------------------------
# resource create
# ---------------------------------------------------------------------------

class TestCreate:
    def test_dry_run(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = create.Config(name=Name("demo"), tags=[Tag("a"), Tag("b")], dry_run=True)
        result = create.run(ctx, quiet_logger, cfg)
        assert result.success is True
        assert result.dry_run is True
        assert result.resource_id == "res-demo"
        assert list(result.tags or ()) == ["a", "b"]
        assert result.message == "Dry run: would have created resource (noop)"

    def test_real_run_message(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = create.run(ctx, quiet_logger, create.Config(name=Name("demo")))
        assert result.message == "Resource created successfully (noop)"

    def test_config_echoed(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = create.Config(
            name=Name("demo"),
            description=Description("a thing"),
            enabled=True,
            force=True,
        )
        result = create.run(ctx, quiet_logger, cfg)
        assert result.description == "a thing"
        assert result.enabled is True
        assert result.force is True

    def test_id_replaces_spaces(self) -> None:
        assert create.resource_id_for(Name("my big res")) == "res-my-big-res"

    def test_unset_tags_serialise_as_null(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = create.run(ctx, quiet_logger, create.Config(name=Name("demo")))
        assert result.tags is None
        assert json.loads(encode_result(result))["tags"] is None

    def test_empty_tags_serialise_as_list(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = create.run(ctx, quiet_logger, create.Config(name=Name("demo"), tags=[]))
        assert json.loads(encode_result(result))["tags"] == []

    def test_logs_progress(
        self,
        ctx: RunContext,
        quiet_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger=quiet_logger.name):
            create.run(ctx, quiet_logger, create.Config(name=Name("demo")))
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["Creating resource", "Resource creation complete"]
        assert caplog.records[0].resource_name == "demo"  # type: ignore[attr-defined]

    def test_cancelled_context(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        ctx.cancel()
        with pytest.raises(CancelledError):
            create.run(ctx, quiet_logger, create.Config(name=Name("demo")))


# ---------------------------------------------------------------------------
# resource list
# ---------------------------------------------------------------------------

class TestList:
    def test_defaults_list_everything(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = listing.run(ctx, quiet_logger, listing.Config())
        assert _ids(result) == ["res-001", "res-002", "res-003"]
        assert result.total == 3
        assert result.message == "Listed 3 of 3 resources (noop)"

    def test_status_filter(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = listing.Config(statuses=[Status("active")])
        result = listing.run(ctx, quiet_logger, cfg)
        assert _ids(result) == ["res-001", "res-003"]
        assert result.total == 2
        assert result.filter_statuses == ("active",)

    def test_limit_zero_is_unlimited(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = listing.run(ctx, quiet_logger, listing.Config(limit=0))
        assert len(result.resources) == 3

    def test_limit_and_offset(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = listing.run(ctx, quiet_logger, listing.Config(limit=1, offset=1))
        assert _ids(result) == ["res-002"]
        assert result.total == 3
        assert result.message == "Listed 1 of 3 resources (noop)"

    def test_offset_past_end(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = listing.run(ctx, quiet_logger, listing.Config(offset=10))
        assert result.resources == ()
        assert result.total == 3

    def test_include_and_exclude(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = listing.Config(
            include_patterns=Pattern("example-*"),
            exclude_patterns=Pattern("*-2"),
        )
        assert _ids(listing.run(ctx, quiet_logger, cfg)) == ["res-001", "res-003"]

    def test_include_matches_any_pattern(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = listing.Config(include_patterns=Pattern("*-1, *-3"))
        assert _ids(listing.run(ctx, quiet_logger, cfg)) == ["res-001", "res-003"]

    def test_sort_descending_by_creation(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = listing.Config(sort_by=SortField("created_at"), ascending=False)
        assert _ids(listing.run(ctx, quiet_logger, cfg)) == ["res-003", "res-002", "res-001"]

    def test_sort_by_status_is_stable(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = listing.Config(sort_by=SortField("status"))
        assert _ids(listing.run(ctx, quiet_logger, cfg)) == ["res-001", "res-003", "res-002"]

    def test_unknown_sort_field(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        with pytest.raises(RunnerError) as exc_info:
            listing.run(ctx, quiet_logger, listing.Config(sort_by=SortField("size")))
        assert exc_info.value.hint is not None

    def test_empty_filters_omitted_from_json(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        data = json.loads(encode_result(listing.run(ctx, quiet_logger, listing.Config())))
        assert "include_patterns" not in data
        assert "exclude_patterns" not in data
        assert "filter_statuses" not in data
        assert data["resources"][0]["created_at"] == "2025-01-01T00:00:00Z"

    def test_set_filters_present_in_json(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = listing.Config(statuses=[Status("active")], include_patterns=Pattern("*"))
        data = json.loads(encode_result(listing.run(ctx, quiet_logger, cfg)))
        assert data["filter_statuses"] == ["active"]
        assert data["include_patterns"] == "*"


class TestListHelpers:
    def test_split_patterns_drops_blanks(self) -> None:
        assert listing.split_patterns(Pattern(" a , ,b,")) == ["a", "b"]

    def test_paginate_negative_offset_treated_as_zero(self) -> None:
        resources = list(listing.MOCK_RESOURCES)
        assert listing.paginate(resources, -5, 1) == resources[:1]

    def test_filter_with_no_criteria_keeps_all(self) -> None:
        assert listing.filter_resources(listing.MOCK_RESOURCES) == list(listing.MOCK_RESOURCES)
