"""``resource list``: filter, sort and paginate a fixed set of mock resources.

``total`` reports the number of resources left after status and pattern
filtering, before ``offset``/``limit`` pagination is applied.
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from mga.core.context import RunContext
from mga.core.models import CommandConfig, JsonResult
from mga.core.resource.types import (
    ID,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
    Limit,
    Name,
    Offset,
    Pattern,
    SortField,
    Status,
    Tag,
)
from mga.exceptions import RunnerError


@dataclass
class Config(CommandConfig):
    """Configuration for listing resources."""

    include_patterns: Pattern = Pattern("")
    exclude_patterns: Pattern = Pattern("")
    statuses: list[Status] | None = None
    limit: Limit = Limit(10)
    offset: Offset = Offset(0)
    sort_by: SortField = SortField("name")
    ascending: bool = True


@dataclass(frozen=True, slots=True)
class Resource(JsonResult):
    id: ID
    name: Name
    status: Status
    tags: tuple[Tag, ...]
    created_at: datetime


@dataclass(frozen=True, slots=True)
class Result(JsonResult):
    success: bool
    message: str
    resources: tuple[Resource, ...]
    total: int
    limit: Limit
    offset: Offset
    include_patterns: Pattern
    exclude_patterns: Pattern
    filter_statuses: tuple[Status, ...]
    sort_by: SortField
    ascending: bool

    def to_dict(self) -> dict[str, Any]:
        """Serialise, omitting empty pattern and status filters."""
        data = JsonResult.to_dict(self)
        for key in ("include_patterns", "exclude_patterns", "filter_statuses"):
            if not data[key]:
                del data[key]
        return data


MOCK_RESOURCES: tuple[Resource, ...] = (
    Resource(
        id=ID("res-001"),
        name=Name("example-resource-1"),
        status=STATUS_ACTIVE,
        tags=(Tag("prod"), Tag("critical")),
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    ),
    Resource(
        id=ID("res-002"),
        name=Name("example-resource-2"),
        status=STATUS_INACTIVE,
        tags=(Tag("dev"), Tag("test")),
        created_at=datetime(2025, 1, 2, tzinfo=timezone.utc),
    ),
    Resource(
        id=ID("res-003"),
        name=Name("example-resource-3"),
        status=STATUS_ACTIVE,
        tags=(Tag("staging"),),
        created_at=datetime(2025, 1, 3, tzinfo=timezone.utc),
    ),
)

SORT_FIELDS: tuple[SortField, ...] = (
    SortField("id"),
    SortField("name"),
    SortField("status"),
    SortField("created_at"),
)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def split_patterns(patterns: Pattern) -> list[str]:
    """Split a comma-separated pattern string, dropping blanks."""
    return [p.strip() for p in patterns.split(",") if p.strip()]


def _matches_any(name: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def filter_resources(
    resources: Iterable[Resource],
    *,
    statuses: Iterable[Status] = (),
    include: Pattern = Pattern(""),
    exclude: Pattern = Pattern(""),
) -> list[Resource]:
    """Keep resources matching any status, any include and no exclude pattern.

    Empty filters match everything.
    """
    wanted = set(statuses)
    includes = split_patterns(include)
    excludes = split_patterns(exclude)

    kept: list[Resource] = []
    for res in resources:
        if wanted and res.status not in wanted:
            continue
        if includes and not _matches_any(res.name, includes):
            continue
        if excludes and _matches_any(res.name, excludes):
            continue
        kept.append(res)
    return kept


def sort_resources(
    resources: Iterable[Resource],
    sort_by: SortField,
    *,
    ascending: bool = True,
) -> list[Resource]:
    """Return *resources* ordered by *sort_by*.

    Raises
    ------
    RunnerError
        If *sort_by* is not one of :data:`SORT_FIELDS`.
    """
    if sort_by not in SORT_FIELDS:
        raise RunnerError(
            f"unsupported sort field: {sort_by!r}",
            hint=f"Use one of: {', '.join(SORT_FIELDS)}.",
        )
    return sorted(resources, key=lambda r: getattr(r, sort_by), reverse=not ascending)


def paginate(resources: list[Resource], offset: Offset, limit: Limit) -> list[Resource]:
    """Slice one page out of *resources*.  A limit of ``0`` means unlimited."""
    start = max(int(offset), 0)
    if start >= len(resources):
        return []
    if int(limit) <= 0:
        return resources[start:]
    return resources[start:start + int(limit)]


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def run(ctx: RunContext, logger: logging.Logger, cfg: Config) -> Result:
    """List the mock resources according to *cfg* (noop stub)."""
    ctx.raise_if_cancelled()

    logger.info(
        "Listing resources",
        extra={
            "include": cfg.include_patterns,
            "exclude": cfg.exclude_patterns,
            "statuses": cfg.statuses,
            "limit": cfg.limit,
            "offset": cfg.offset,
            "sort_by": cfg.sort_by,
            "ascending": cfg.ascending,
        },
    )

    statuses = tuple(cfg.statuses or ())

    matching = filter_resources(
        MOCK_RESOURCES,
        statuses=statuses,
        include=cfg.include_patterns,
        exclude=cfg.exclude_patterns,
    )
    matching = sort_resources(matching, cfg.sort_by, ascending=cfg.ascending)
    total = len(matching)
    page = paginate(matching, cfg.offset, cfg.limit)

    result = Result(
        success=True,
        message=f"Listed {len(page)} of {total} resources (noop)",
        resources=tuple(page),
        total=total,
        limit=cfg.limit,
        offset=cfg.offset,
        include_patterns=cfg.include_patterns,
        exclude_patterns=cfg.exclude_patterns,
        filter_statuses=statuses,
        sort_by=cfg.sort_by,
        ascending=cfg.ascending,
    )

    logger.info("Resource listing complete", extra={"count": len(page), "total": total})
    return result
