"""Static command hierarchy and its translation into an argparse parser."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from mga.cli.action import Action
from mga.cli.flags import FlagSpec, add_flags
from mga.exceptions import UsageError


@dataclass(frozen=True)
class Command:
    """One node of the command tree.

    Leaves carry ``flags``, a ``config`` factory and an ``action``; parent
    nodes carry ``subcommands`` only.
    """

    name: str
    help: str
    description: str = ""
    flags: tuple[FlagSpec, ...] = ()
    config: Callable[[], Any] | None = None
    action: Action | None = None
    subcommands: tuple[Command, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return self.action is not None


class ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting on bad input."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message, hint=f"Run '{self.prog} --help' for usage.")


def _add_command(subparsers: Any, command: Command) -> None:
    parser = subparsers.add_parser(
        command.name,
        help=command.help,
        description=command.description or command.help,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    add_flags(parser, command.flags)
    parser.set_defaults(_command=command, _parser=parser)
    if command.subcommands:
        add_subcommands(parser, command.subcommands)


def add_subcommands(parser: argparse.ArgumentParser, commands: Iterable[Command]) -> None:
    """Attach *commands* to *parser*, sorted alphabetically by name."""
    subparsers = parser.add_subparsers(title="commands", metavar="<command>")
    for command in sorted(commands, key=lambda c: c.name):
        _add_command(subparsers, command)
