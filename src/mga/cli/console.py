"""Rich console for human-facing notes on standard error.

Results go to stdout as JSON and logs go through :mod:`logging`; this
console is only used for hints and interruption notices.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console() -> Console:
    """Create a Rich console instance targeting stderr."""
    return Console(stderr=True, highlight=False)


console = get_rich_console()
