"""``resource list`` flags and wiring."""

from __future__ import annotations

from mga.cli.action import dispatch
from mga.cli.converters import string_slice_converter
from mga.cli.flags import (
    FlagSpec,
    bool_flag,
    env_prefix,
    filter_flags,
    int_flag,
    string_flag,
    string_list_flag,
    with_output_flags,
)
from mga.cli.tree import Command
from mga.core.resource import listing
from mga.core.resource.types import Status

NAME = "list"
USAGE = "List resources"
DESCRIPTION = """\
List resources with optional filtering and pagination.

Examples:
  # List all resources
  mga resource list

  # List with filtering
  mga resource list \\
    --include "example-*" \\
    --exclude "*-2" \\
    --status active,pending \\
    --limit 10

  # List with pagination and sorting
  mga resource list --limit 20 --offset 40 --sort-by name --no-ascending

  # Using environment variables
  MGA_RESOURCE_LIST_LIMIT=10 mga resource list
"""

FLAG_STATUS = "status"
FLAG_LIMIT = "limit"
FLAG_OFFSET = "offset"
FLAG_SORT_BY = "sort-by"
FLAG_ASCENDING = "ascending"


def flags(prefix: str) -> list[FlagSpec]:
    env = env_prefix(prefix, "resource", "list")
    base = [
        *filter_flags(env, include="include_patterns", exclude="exclude_patterns"),
        string_list_flag(
            FLAG_STATUS,
            aliases=("s",),
            env_vars=(env + "STATUSES",),
            help="Filter by status (can be specified multiple times or comma-separated)",
        ),
        int_flag(
            FLAG_LIMIT,
            dest="limit",
            aliases=("l",),
            env_vars=(env + "LIMIT",),
            default=10,
            help="Maximum number of results (0 = unlimited)",
        ),
        int_flag(
            FLAG_OFFSET,
            dest="offset",
            env_vars=(env + "OFFSET",),
            default=0,
            help="Offset for pagination",
        ),
        string_flag(
            FLAG_SORT_BY,
            dest="sort_by",
            env_vars=(env + "SORT_BY",),
            default="name",
            help="Field to sort by (id, name, status, created_at)",
        ),
        bool_flag(
            FLAG_ASCENDING,
            dest="ascending",
            aliases=("asc",),
            env_vars=(env + "ASCENDING",),
            default=True,
            help="Sort in ascending order",
        ),
    ]
    return with_output_flags(prefix, base)


def command(prefix: str) -> Command:
    return Command(
        name=NAME,
        help=USAGE,
        description=DESCRIPTION,
        flags=tuple(flags(prefix)),
        config=listing.Config,
        action=dispatch(listing.run, string_slice_converter(FLAG_STATUS, "statuses", Status)),
    )
