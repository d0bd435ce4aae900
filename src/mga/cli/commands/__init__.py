"""Command tree definitions.

Each leaf module exposes ``flags(prefix)`` and ``command(prefix)``; each
group package exposes ``command(prefix)`` assembling its leaves.
"""

from __future__ import annotations

from mga.cli.commands import resource, service
from mga.cli.tree import Command


def commands(prefix: str) -> tuple[Command, ...]:
    """All top-level commands for the given environment prefix."""
    return (
        resource.command(prefix),
        service.command(prefix),
    )
