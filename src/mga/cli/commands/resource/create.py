"""``resource create`` flags and wiring."""

from __future__ import annotations

from mga.cli.action import dispatch
from mga.cli.converters import string_slice_converter
from mga.cli.flags import (
    FlagSpec,
    bool_flag,
    env_prefix,
    string_flag,
    string_list_flag,
    with_output_flags,
)
from mga.cli.tree import Command
from mga.core.resource import create
from mga.core.resource.types import Tag

NAME = "create"
USAGE = "Create a new resource"
DESCRIPTION = """\
Create a new resource with the specified configuration.

Examples:
  # Create a simple resource
  mga resource create --name my-resource

  # Create with all options
  mga resource create \\
    --name my-resource \\
    --description "My test resource" \\
    --tags prod,critical \\
    --enabled \\
    --dry-run

  # Using environment variables
  MGA_RESOURCE_CREATE_NAME=my-resource \\
  MGA_RESOURCE_CREATE_ENABLED=true \\
  mga resource create
"""

FLAG_NAME = "name"
FLAG_DESCRIPTION = "description"
FLAG_TAGS = "tags"
FLAG_ENABLED = "enabled"
FLAG_DRY_RUN = "dry-run"
FLAG_FORCE = "force"


def flags(prefix: str) -> list[FlagSpec]:
    env = env_prefix(prefix, "resource", "create")
    base = [
        string_flag(
            FLAG_NAME,
            dest="name",
            aliases=("n",),
            env_vars=(env + "NAME",),
            help="Resource name",
        ),
        string_flag(
            FLAG_DESCRIPTION,
            dest="description",
            aliases=("desc",),
            env_vars=(env + "DESCRIPTION",),
            default="",
            help="Resource description",
        ),
        string_list_flag(
            FLAG_TAGS,
            aliases=("t",),
            env_vars=(env + "TAGS",),
            help="Resource tags (can be specified multiple times or comma-separated)",
        ),
        bool_flag(
            FLAG_ENABLED,
            dest="enabled",
            aliases=("e",),
            env_vars=(env + "ENABLED",),
            default=False,
            help="Enable the resource",
        ),
        bool_flag(
            FLAG_DRY_RUN,
            dest="dry_run",
            env_vars=(env + "DRY_RUN",),
            default=False,
            help="Perform a dry run without creating the resource",
        ),
        bool_flag(
            FLAG_FORCE,
            dest="force",
            aliases=("f",),
            env_vars=(env + "FORCE",),
            default=False,
            help="Force creation even if resource exists",
        ),
    ]
    return with_output_flags(prefix, base)


def command(prefix: str) -> Command:
    return Command(
        name=NAME,
        help=USAGE,
        description=DESCRIPTION,
        flags=tuple(flags(prefix)),
        config=create.Config,
        action=dispatch(create.run, string_slice_converter(FLAG_TAGS, "tags", Tag)),
    )
