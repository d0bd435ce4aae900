"""CLI application entry point and command routing for mga.

This module is the **sole error boundary** for the entire application.
Errors raised anywhere below it (flag parsing, runners, output) propagate
unchanged to :func:`cli`, which logs them with an ``error`` field and
exits with :data:`~mga.cli.exit_codes.GENERAL_ERROR`.

Flow of one invocation
----------------------
1. Parse ``argv`` into the command tree.
2. Construct a fresh config for the selected leaf command.
3. Bind the root logging flags, then create and cache the run's logger.
4. Bind the leaf command's flags (may raise :class:`ParseError`).
5. Hand config and parsed flags to the command's action.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

from mga.cli import exit_codes
from mga.cli.action import RunState, get_logger
from mga.cli.commands import commands
from mga.cli.console import console
from mga.cli.flags import FlagSpec, add_flags, bind_flags, string_flag
from mga.cli.tree import ArgumentParser, Command, add_subcommands
from mga.core.models import LoggerConfig
from mga.exceptions import MgaError
from mga.infra.logger import create_logger
from mga.infra.signals import cancel_on_signals
from mga.version import __version__

APP_NAME = "mga"
APP_ENV_NAME = "MGA"
APP_USAGE = "A generic command-execution CLI skeleton"
APP_ENV_PREFIX = APP_ENV_NAME + "_"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def root_flags(prefix: str) -> list[FlagSpec]:
    """Application-wide flags, bound into every command's logger config."""
    return [
        string_flag(
            "log-level",
            dest="log.level",
            env_vars=(prefix + "LOG_LEVEL",),
            default="info",
            help="Set the logging level (debug, info, warn, error)",
        ),
        string_flag(
            "log-format",
            dest="log.format",
            env_vars=(prefix + "LOG_FORMAT",),
            default="text",
            help="Set the log output format (text, json)",
        ),
    ]


def _build_parser(prefix: str) -> ArgumentParser:
    """Construct the top-level parser with the full command tree."""
    parser = ArgumentParser(
        prog=APP_NAME,
        description=APP_USAGE,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    add_flags(parser, root_flags(prefix))
    add_subcommands(parser, commands(prefix))
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    state: RunState | None = None,
) -> int:
    """Run the mga CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment used for flag fallbacks.  Defaults to ``os.environ``.
    state:
        Run-scoped state (context and cached logger).  A fresh one is
        created when omitted.

    Returns
    -------
    int
        OS process exit code.
    """
    environ = os.environ if environ is None else environ
    state = state if state is not None else RunState()

    parser = _build_parser(APP_ENV_PREFIX)
    args = parser.parse_args(argv)

    command: Command | None = getattr(args, "_command", None)
    if command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if not command.is_leaf or command.config is None:
        args._parser.print_help()
        return exit_codes.SUCCESS

    cfg = command.config()
    parsed = bind_flags(root_flags(APP_ENV_PREFIX), args, cfg, environ=environ)
    get_logger(state, cfg.logger_config())
    bind_flags(command.flags, args, cfg, environ=environ, parsed=parsed)

    command.action(state, cfg, parsed)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _log_error(state: RunState, error: str) -> None:
    logger = state.logger if state.logger is not None else create_logger(LoggerConfig())
    logger.error("Application error", extra={"error": error})


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    SIGINT and SIGTERM cancel the run context instead of interrupting;
    runners observe the cancellation cooperatively.
    """
    state = RunState()
    try:
        with cancel_on_signals(state.context):
            code = main(state=state)
        sys.exit(code)
    except MgaError as exc:
        _log_error(state, str(exc))
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        _log_error(state, f"{type(exc).__name__}: {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
