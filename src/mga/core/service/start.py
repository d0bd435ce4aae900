"""``service start``: noop service start with nested configuration."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

from mga.core.context import RunContext
from mga.core.models import CommandConfig, JsonResult
from mga.core.service.types import (
    ENVIRONMENT_DEV,
    PID,
    SSL_MODE_DISABLE,
    DatabaseName,
    Environment,
    Host,
    Name,
    Password,
    Port,
    SSLMode,
    Timeout,
    Username,
    WorkerCount,
)

MOCK_PID = PID(12345)
PASSWORD_MASK = "********"


@dataclass
class DatabaseConfig:
    host: Host = Host("localhost")
    port: Port = Port(5432)
    name: DatabaseName = DatabaseName("postgres")
    user: Username = Username("postgres")
    password: Password = Password("")
    ssl_mode: SSLMode = SSL_MODE_DISABLE


@dataclass
class ServerConfig:
    host: Host = Host("localhost")
    port: Port = Port(8080)
    read_timeout: Timeout = Timeout(30)
    write_timeout: Timeout = Timeout(30)


@dataclass
class Config(CommandConfig):
    """Configuration for starting a service."""

    service_name: Name = Name("")
    environment: Environment = ENVIRONMENT_DEV
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    workers: WorkerCount = WorkerCount(2)
    enable_cache: bool = False
    debug: bool = False


@dataclass(frozen=True, slots=True)
class Result(JsonResult):
    success: bool
    service_name: Name
    environment: Environment
    pid: PID
    database: DatabaseConfig
    server: ServerConfig
    workers: WorkerCount
    enable_cache: bool
    debug: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Serialise, masking the database password when one is set."""
        data = JsonResult.to_dict(self)
        if data["database"]["password"]:
            data["database"]["password"] = PASSWORD_MASK
        return data


def run(ctx: RunContext, logger: logging.Logger, cfg: Config) -> Result:
    """Start a service (noop stub) and echo its effective configuration."""
    ctx.raise_if_cancelled()

    logger.info(
        "Starting service",
        extra={
            "service_name": cfg.service_name,
            "environment": cfg.environment,
            "workers": cfg.workers,
            "enable_cache": cfg.enable_cache,
            "debug": cfg.debug,
        },
    )
    logger.debug(
        "Database configuration",
        extra={
            "host": cfg.database.host,
            "port": cfg.database.port,
            "database": cfg.database.name,
            "user": cfg.database.user,
        },
    )
    logger.debug(
        "Server configuration",
        extra={
            "host": cfg.server.host,
            "port": cfg.server.port,
            "read_timeout": cfg.server.read_timeout,
            "write_timeout": cfg.server.write_timeout,
        },
    )

    result = Result(
        success=True,
        service_name=cfg.service_name,
        environment=cfg.environment,
        pid=MOCK_PID,
        database=dataclasses.replace(cfg.database),
        server=dataclasses.replace(cfg.server),
        workers=cfg.workers,
        enable_cache=cfg.enable_cache,
        debug=cfg.debug,
        message="Service started successfully (noop)",
    )

    logger.info(
        "Service start complete",
        extra={"service_name": result.service_name, "pid": result.pid},
    )
    return result
