"""``service stop``: noop service stop.  No signal is actually sent."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mga.core.context import RunContext
from mga.core.models import CommandConfig, JsonResult
from mga.core.service.types import PID, SIGNAL_TERM, Name, Signal, Timeout


@dataclass
class Config(CommandConfig):
    """Configuration for stopping a service."""

    service_name: Name = Name("")
    force: bool = False
    timeout: Timeout = Timeout(30)
    pids: list[PID] | None = None
    signal: Signal = SIGNAL_TERM


@dataclass(frozen=True, slots=True)
class Result(JsonResult):
    success: bool
    service_name: Name
    force: bool
    timeout: Timeout
    pids: tuple[PID, ...]
    signal: Signal
    message: str


def run(ctx: RunContext, logger: logging.Logger, cfg: Config) -> Result:
    """Stop a service (noop stub).  Unset PIDs are reported as an empty list."""
    ctx.raise_if_cancelled()

    logger.info(
        "Stopping service",
        extra={
            "service_name": cfg.service_name,
            "force": cfg.force,
            "timeout": cfg.timeout,
            "pids": cfg.pids,
            "signal": cfg.signal,
        },
    )

    if cfg.force:
        message = "Service force stopped successfully (noop)"
    else:
        message = "Service stopped successfully (noop)"

    result = Result(
        success=True,
        service_name=cfg.service_name,
        force=cfg.force,
        timeout=cfg.timeout,
        pids=tuple(cfg.pids or ()),
        signal=cfg.signal,
        message=message,
    )

    logger.info("Service stop complete", extra={"service_name": result.service_name})
    return result
