"""Named value types for service configuration."""

from __future__ import annotations

from typing import NewType

Name = NewType("Name", str)
Environment = NewType("Environment", str)
Host = NewType("Host", str)
Port = NewType("Port", int)
DatabaseName = NewType("DatabaseName", str)
Username = NewType("Username", str)
Password = NewType("Password", str)
SSLMode = NewType("SSLMode", str)
"""PostgreSQL ``sslmode`` connection setting."""
Timeout = NewType("Timeout", int)
"""Duration in seconds."""
WorkerCount = NewType("WorkerCount", int)
PID = NewType("PID", int)
Signal = NewType("Signal", str)

ENVIRONMENT_DEV = Environment("dev")
ENVIRONMENT_STAGING = Environment("staging")
ENVIRONMENT_PROD = Environment("prod")

SSL_MODE_DISABLE = SSLMode("disable")
SSL_MODE_ALLOW = SSLMode("allow")
SSL_MODE_PREFER = SSLMode("prefer")
SSL_MODE_REQUIRE = SSLMode("require")
SSL_MODE_VERIFY_CA = SSLMode("verify-ca")
SSL_MODE_VERIFY_FULL = SSLMode("verify-full")

SIGNAL_TERM = Signal("SIGTERM")
SIGNAL_KILL = Signal("SIGKILL")
SIGNAL_INT = Signal("SIGINT")
SIGNAL_HUP = Signal("SIGHUP")
