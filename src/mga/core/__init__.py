"""Core layer: configuration contract, run context and command runners.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from mga.core.context import RunContext
from mga.core.models import (
    CommandConfig,
    FilePath,
    JsonResult,
    LoggerConfig,
)
from mga.core.protocols import Configurable, JsonSerializable, Runner

__all__: list[str] = [
    "CommandConfig",
    "Configurable",
    "FilePath",
    "JsonResult",
    "JsonSerializable",
    "LoggerConfig",
    "RunContext",
    "Runner",
]
