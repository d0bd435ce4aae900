"""Process exit codes returned by :func:`mga.cli.app.cli`.

Error details are never encoded in the exit code; they are logged to
stderr with an ``error`` field instead.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran and its result was written."""

GENERAL_ERROR: int = 1
"""Any error, known or unexpected.  The error was logged to stderr."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C outside the cancellable window.  POSIX convention (128 + SIGINT=2)."""
