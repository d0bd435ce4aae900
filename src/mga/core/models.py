"""Shared configuration and result building blocks.

Every command's ``Config`` derives from :class:`CommandConfig`, which
supplies the two capabilities the dispatcher needs: a logger
configuration and an output file path.  Every command's ``Result``
derives from :class:`JsonResult`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, NewType

FilePath = NewType("FilePath", str)
"""Output destination.  The empty string means standard output."""

Level = NewType("Level", str)
Format = NewType("Format", str)

LEVEL_DEBUG = Level("debug")
LEVEL_INFO = Level("info")
LEVEL_WARN = Level("warn")
LEVEL_ERROR = Level("error")

TEXT_FORMAT = Format("text")
JSON_FORMAT = Format("json")


# ---------------------------------------------------------------------------
# Logger configuration
# ---------------------------------------------------------------------------

@dataclass
class LoggerConfig:
    """Logging level and output format for one run.

    Mutable so that flag binding can populate it in place.
    """

    level: Level = LEVEL_INFO
    format: Format = TEXT_FORMAT


# ---------------------------------------------------------------------------
# Command configuration base
# ---------------------------------------------------------------------------

@dataclass
class CommandConfig:
    """Fields and capabilities shared by every command configuration."""

    output: FilePath = FilePath("")
    log: LoggerConfig = field(default_factory=LoggerConfig)

    def logger_config(self) -> LoggerConfig:
        return self.log

    def output_file_path(self) -> FilePath:
        return self.output


# ---------------------------------------------------------------------------
# Result base
# ---------------------------------------------------------------------------

class JsonResult:
    """Mixin for dataclass results serialised as JSON objects.

    Keys follow field declaration order, which keeps output deterministic.
    Subclasses override :meth:`to_dict` to omit or mask fields.
    """

    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)  # type: ignore[call-overload]
