"""Tests for the service runners (core/service/*)."""

from __future__ import annotations

import json
import logging

import pytest

from mga.core.context import RunContext
from mga.core.service import start, stop
from mga.core.service.types import PID, Host, Name, Password
from mga.exceptions import CancelledError
from mga.infra.output import encode_result


# ---------------------------------------------------------------------------
# service stop
# ---------------------------------------------------------------------------

class TestStop:
    def test_defaults(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = stop.run(ctx, quiet_logger, stop.Config())
        assert result.signal == "SIGTERM"
        assert result.timeout == 30
        assert result.pids == ()
        assert result.message == "Service stopped successfully (noop)"
        assert json.loads(encode_result(result))["pids"] == []

    def test_force(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = stop.run(ctx, quiet_logger, stop.Config(force=True))
        assert result.message == "Service force stopped successfully (noop)"

    def test_pids_echoed(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = stop.Config(service_name=Name("api"), pids=[PID(1), PID(2)], signal="SIGKILL")
        result = stop.run(ctx, quiet_logger, cfg)
        assert result.pids == (1, 2)
        assert result.signal == "SIGKILL"
        assert result.service_name == "api"

    def test_cancelled_context(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        ctx.cancel()
        with pytest.raises(CancelledError):
            stop.run(ctx, quiet_logger, stop.Config())


# ---------------------------------------------------------------------------
# service start
# ---------------------------------------------------------------------------

class TestStart:
    def test_defaults(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        result = start.run(ctx, quiet_logger, start.Config(service_name=Name("api")))
        assert result.success is True
        assert result.pid == start.MOCK_PID
        assert result.environment == "dev"
        assert result.workers == 2
        assert result.database.port == 5432
        assert result.server.port == 8080
        assert result.message == "Service started successfully (noop)"

    def test_nested_json(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        data = json.loads(encode_result(start.run(ctx, quiet_logger, start.Config())))
        assert data["database"] == {
            "host": "localhost",
            "port": 5432,
            "name": "postgres",
            "user": "postgres",
            "password": "",
            "ssl_mode": "disable",
        }
        assert data["server"]["read_timeout"] == 30

    def test_password_masked(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = start.Config()
        cfg.database.password = Password("s3cret")
        result = start.run(ctx, quiet_logger, cfg)
        data = json.loads(encode_result(result))
        assert data["database"]["password"] == start.PASSWORD_MASK
        assert "s3cret" not in encode_result(result)

    def test_result_detached_from_config(self, ctx: RunContext, quiet_logger: logging.Logger) -> None:
        cfg = start.Config()
        result = start.run(ctx, quiet_logger, cfg)
        cfg.database.host = Host("elsewhere")
        assert result.database.host == "localhost"

    def test_debug_logs_configuration(
        self,
        ctx: RunContext,
        quiet_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger=quiet_logger.name):
            start.run(ctx, quiet_logger, start.Config())
        messages = [r.getMessage() for r in caplog.records]
        assert "Database configuration" in messages
        assert "Server configuration" in messages
