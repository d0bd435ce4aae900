"""``resource create``: noop resource creation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mga.core.context import RunContext
from mga.core.models import CommandConfig, JsonResult
from mga.core.resource.types import ID, Description, Message, Name, Tag


@dataclass
class Config(CommandConfig):
    """Configuration for resource creation."""

    name: Name = Name("")
    description: Description = Description("")
    tags: list[Tag] | None = None
    enabled: bool = False
    dry_run: bool = False
    force: bool = False


@dataclass(frozen=True, slots=True)
class Result(JsonResult):
    success: bool
    resource_id: ID
    name: Name
    description: Description
    tags: tuple[Tag, ...] | None
    enabled: bool
    dry_run: bool
    force: bool
    message: Message


def resource_id_for(name: Name) -> ID:
    """Derive the resource identifier from its name (``"my res"`` -> ``"res-my-res"``)."""
    return ID("res-" + name.replace(" ", "-"))


def run(ctx: RunContext, logger: logging.Logger, cfg: Config) -> Result:
    """Create a resource (noop stub) and describe what was done."""
    ctx.raise_if_cancelled()

    logger.info(
        "Creating resource",
        extra={
            "resource_name": cfg.name,
            "description": cfg.description,
            "tags": cfg.tags,
            "enabled": cfg.enabled,
            "dry_run": cfg.dry_run,
            "force": cfg.force,
        },
    )

    if cfg.dry_run:
        message = Message("Dry run: would have created resource (noop)")
    else:
        message = Message("Resource created successfully (noop)")

    result = Result(
        success=True,
        resource_id=resource_id_for(cfg.name),
        name=cfg.name,
        description=cfg.description,
        tags=tuple(cfg.tags) if cfg.tags is not None else None,
        enabled=cfg.enabled,
        dry_run=cfg.dry_run,
        force=cfg.force,
        message=message,
    )

    logger.info("Resource creation complete", extra={"resource_id": result.resource_id})
    return result
