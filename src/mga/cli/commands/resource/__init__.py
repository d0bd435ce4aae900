"""``resource`` command group."""

from __future__ import annotations

from mga.cli.commands.resource import create, listing
from mga.cli.tree import Command

NAME = "resource"
USAGE = "Manage resources"
DESCRIPTION = """\
Manage application resources.

This command provides subcommands for creating and listing resources.

Examples:
  # Create a new resource
  mga resource create --name my-resource --enabled

  # List resources
  mga resource list --limit 10
"""


def command(prefix: str) -> Command:
    return Command(
        name=NAME,
        help=USAGE,
        description=DESCRIPTION,
        subcommands=(
            create.command(prefix),
            listing.command(prefix),
        ),
    )
