"""Protocols (interfaces) shared between the core and the CLI layer.

The dispatcher depends only on these contracts; it knows nothing about
what a particular runner does.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from mga.core.context import RunContext
from mga.core.models import FilePath, LoggerConfig


class Configurable(Protocol):
    """A command configuration the dispatcher can work with."""

    def logger_config(self) -> LoggerConfig:
        """Return the logging configuration for this run."""
        ...  # pragma: no cover

    def output_file_path(self) -> FilePath:
        """Return the output destination; empty means stdout."""
        ...  # pragma: no cover


class JsonSerializable(Protocol):
    """A command result that can be rendered as a JSON object."""

    def to_dict(self) -> dict[str, Any]:
        ...  # pragma: no cover


C = TypeVar("C", bound=Configurable)
R = TypeVar("R", bound=JsonSerializable)

Runner = Callable[[RunContext, logging.Logger, C], R]
"""Business logic for one command: ``(ctx, logger, config) -> result``.

Failures are reported by raising; the dispatcher propagates them as-is.
"""
