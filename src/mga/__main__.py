"""Allow ``python -m mga`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m mga``
behaves identically to the ``mga`` console script.
"""

from __future__ import annotations

from mga.cli.app import cli

if __name__ == "__main__":
    cli()
