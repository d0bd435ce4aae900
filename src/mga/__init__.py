"""mga: a generic command-execution CLI skeleton.

Flags and environment variables are bound to typed configuration objects,
handed to a business-logic runner, and the runner's result is written as
JSON to stdout or a file.
"""

from mga.version import __version__

__all__: list[str] = ["__version__"]
