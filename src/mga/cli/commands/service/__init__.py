"""``service`` command group."""

from __future__ import annotations

from mga.cli.commands.service import start, stop
from mga.cli.tree import Command

NAME = "service"
USAGE = "Manage services"
DESCRIPTION = """\
Manage application services.

This command provides subcommands for starting and stopping services.

Examples:
  # Start a service
  mga service start --service-name my-service

  # Stop a service
  mga service stop --service-name my-service
"""


def command(prefix: str) -> Command:
    return Command(
        name=NAME,
        help=USAGE,
        description=DESCRIPTION,
        subcommands=(
            start.command(prefix),
            stop.command(prefix),
        ),
    )
