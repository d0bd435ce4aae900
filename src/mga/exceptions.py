"""Custom exception hierarchy for mga.

Every error that reaches the CLI error boundary should be a subclass of
:class:`MgaError` so it can be logged cleanly with an optional hint.
Runners may raise anything; the dispatcher never wraps their errors.

Hierarchy
---------
MgaError
├── ParseError
│   └── UsageError
├── RunnerError
│   └── CancelledError
├── EncodingError
└── OutputError
"""

from __future__ import annotations


class MgaError(Exception):
    """Base exception for all mga errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Startup ---------------------------------------------------------------

class ParseError(MgaError):
    """Raised when a flag or environment value cannot be converted.

    Always raised before any runner executes.
    """

    def __init__(
        self,
        message: str,
        *,
        flag: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.flag: str | None = flag


class UsageError(ParseError):
    """Raised when the command line itself is malformed (unknown flag etc.)."""


# --- Business logic --------------------------------------------------------

class RunnerError(MgaError):
    """Raised by a runner when its business logic fails."""


class CancelledError(RunnerError):
    """Raised by a runner that observed a cancelled run context."""


# --- Output ----------------------------------------------------------------

class EncodingError(MgaError):
    """Raised when a result cannot be serialised to JSON."""


class OutputError(MgaError):
    """Raised when the serialised result cannot be written to its destination."""
