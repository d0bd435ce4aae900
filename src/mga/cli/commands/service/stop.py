"""``service stop`` flags and wiring."""

from __future__ import annotations

from mga.cli.action import dispatch
from mga.cli.converters import int_slice_converter
from mga.cli.flags import (
    FlagSpec,
    bool_flag,
    env_prefix,
    int_flag,
    int_list_flag,
    string_flag,
    with_output_flags,
)
from mga.cli.tree import Command
from mga.core.service import stop
from mga.core.service.types import PID

NAME = "stop"
USAGE = "Stop a service"
DESCRIPTION = """\
Stop a running service with configurable options.

Examples:
  # Stop a service
  mga service stop --service-name myservice

  # Stop with force and custom timeout
  mga service stop --service-name myservice --force --timeout 60

  # Stop specific PIDs
  mga service stop --service-name myservice --pid 1234 --pid 5678 --signal SIGKILL

  # Using environment variables
  MGA_SERVICE_STOP_SERVICE_NAME=myservice \\
  MGA_SERVICE_STOP_FORCE=true \\
  mga service stop
"""

FLAG_PID = "pid"


def flags(prefix: str) -> list[FlagSpec]:
    env = env_prefix(prefix, "service", "stop")
    base = [
        string_flag(
            "service-name",
            dest="service_name",
            aliases=("n",),
            env_vars=(env + "SERVICE_NAME",),
            help="Service name",
        ),
        bool_flag(
            "force",
            dest="force",
            aliases=("f",),
            env_vars=(env + "FORCE",),
            default=False,
            help="Force stop the service",
        ),
        int_flag(
            "timeout",
            dest="timeout",
            aliases=("t",),
            env_vars=(env + "TIMEOUT",),
            default=30,
            help="Timeout in seconds",
        ),
        int_list_flag(
            FLAG_PID,
            aliases=("p",),
            env_vars=(env + "PIDS",),
            help="Specific PID to stop (can be specified multiple times)",
        ),
        string_flag(
            "signal",
            dest="signal",
            aliases=("s",),
            env_vars=(env + "SIGNAL",),
            default="SIGTERM",
            help="Signal to send (SIGTERM, SIGKILL, SIGINT, etc.)",
        ),
    ]
    return with_output_flags(prefix, base)


def command(prefix: str) -> Command:
    return Command(
        name=NAME,
        help=USAGE,
        description=DESCRIPTION,
        flags=tuple(flags(prefix)),
        config=stop.Config,
        action=dispatch(stop.run, int_slice_converter(FLAG_PID, "pids", PID)),
    )
