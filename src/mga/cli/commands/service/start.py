"""``service start`` flags and wiring.

Database flags read the standard PostgreSQL client variables
(``PGHOST``, ``PGPORT``, ...) rather than the application prefix.
"""

from __future__ import annotations

from mga.cli.action import dispatch
from mga.cli.flags import (
    FlagSpec,
    bool_flag,
    common_flags,
    env_prefix,
    int_flag,
    string_flag,
    with_output_flags,
)
from mga.cli.tree import Command
from mga.core.service import start

NAME = "start"
USAGE = "Start a service"
DESCRIPTION = """\
Start a service with the specified configuration.

Examples:
  # Start with default configuration
  mga service start --service-name my-service

  # Start with custom database configuration
  mga service start \\
    --service-name my-service \\
    --environment prod \\
    --db-host postgres.example.com \\
    --db-port 5432 \\
    --db-name mydb \\
    --db-user admin

  # Start with custom server configuration
  mga service start \\
    --service-name my-service \\
    --server-host 0.0.0.0 \\
    --server-port 8080 \\
    --workers 4 \\
    --enable-cache \\
    --debug

  # Using environment variables
  MGA_SERVICE_START_SERVICE_NAME=my-service \\
  PGHOST=localhost \\
  MGA_SERVICE_START_SERVER_PORT=8080 \\
  mga service start
"""


def flags(prefix: str) -> list[FlagSpec]:
    env = env_prefix(prefix, "service", "start")
    base = [
        string_flag(
            "service-name",
            dest="service_name",
            aliases=("n",),
            env_vars=(env + "SERVICE_NAME",),
            help="Service name",
        ),
        string_flag(
            "environment",
            dest="environment",
            aliases=("env",),
            env_vars=(env + "ENVIRONMENT",),
            default="dev",
            help="Environment (dev, staging, prod)",
        ),
        # Database
        string_flag(
            "db-host",
            dest="database.host",
            env_vars=("PGHOST",),
            default="localhost",
            help="Database host",
        ),
        int_flag(
            "db-port",
            dest="database.port",
            env_vars=("PGPORT",),
            default=5432,
            help="Database port",
        ),
        string_flag(
            "db-name",
            dest="database.name",
            env_vars=("PGDATABASE",),
            default="postgres",
            help="Database name",
        ),
        string_flag(
            "db-user",
            dest="database.user",
            env_vars=("PGUSER",),
            default="postgres",
            help="Database user",
        ),
        string_flag(
            "db-password",
            dest="database.password",
            env_vars=("PGPASSWORD",),
            help="Database password",
        ),
        string_flag(
            "db-sslmode",
            dest="database.ssl_mode",
            env_vars=("PGSSLMODE",),
            default="disable",
            help="SSL mode (disable, require, verify-ca, verify-full)",
        ),
        # Server
        string_flag(
            "server-host",
            dest="server.host",
            env_vars=(env + "SERVER_HOST",),
            default="localhost",
            help="Server host",
        ),
        int_flag(
            "server-port",
            dest="server.port",
            env_vars=(env + "SERVER_PORT",),
            default=8080,
            help="Server port",
        ),
        int_flag(
            "server-read-timeout",
            dest="server.read_timeout",
            env_vars=(env + "SERVER_READ_TIMEOUT",),
            default=30,
            help="Server read timeout (seconds)",
        ),
        int_flag(
            "server-write-timeout",
            dest="server.write_timeout",
            env_vars=(env + "SERVER_WRITE_TIMEOUT",),
            default=30,
            help="Server write timeout (seconds)",
        ),
        # Other
        int_flag(
            "workers",
            dest="workers",
            aliases=("w",),
            env_vars=(env + "WORKERS",),
            default=2,
            help="Number of worker processes",
        ),
        bool_flag(
            "enable-cache",
            dest="enable_cache",
            env_vars=(env + "ENABLE_CACHE",),
            default=False,
            help="Enable caching",
        ),
        *common_flags(env, debug="debug"),
    ]
    return with_output_flags(prefix, base)


def command(prefix: str) -> Command:
    return Command(
        name=NAME,
        help=USAGE,
        description=DESCRIPTION,
        flags=tuple(flags(prefix)),
        config=start.Config,
        action=dispatch(start.run),
    )
