"""Generic execution envelope shared by every leaf command.

:func:`dispatch` turns a runner into a command action.  The action
applies slice converters, acquires the run's logger, calls the runner and
routes its result to :func:`~mga.infra.output.write_output`.  Runner
failures propagate unchanged and produce no output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from mga.cli.converters import SliceConverter
from mga.cli.flags import ParsedFlags
from mga.core.context import RunContext
from mga.core.models import LoggerConfig
from mga.core.protocols import Configurable, JsonSerializable, Runner
from mga.infra.logger import create_logger
from mga.infra.output import write_output

C = TypeVar("C", bound=Configurable)
R = TypeVar("R", bound=JsonSerializable)


@dataclass
class RunState:
    """State scoped to a single process invocation."""

    context: RunContext = field(default_factory=RunContext)
    logger: logging.Logger | None = None


Action = Callable[[RunState, Any, ParsedFlags], None]
"""``(state, config, parsed_flags) -> None``"""


def get_logger(state: RunState, config: LoggerConfig) -> logging.Logger:
    """Return the run's logger, creating and caching it on first use."""
    if state.logger is None:
        state.logger = create_logger(config)
    return state.logger


def run_action(state: RunState, cfg: C, runner: Runner[C, R]) -> None:
    """Invoke *runner* with the run's context and logger, then write its result."""
    logger = get_logger(state, cfg.logger_config())
    result = runner(state.context, logger, cfg)
    write_output(logger, cfg.output_file_path(), result)


def dispatch(runner: Runner[C, R], *converters: SliceConverter[Any, Any]) -> Action:
    """Build a command action around *runner*.

    *converters* are applied to the freshly bound config, in order,
    before the runner is called.
    """

    def action(state: RunState, cfg: C, parsed: ParsedFlags) -> None:
        for converter in converters:
            converter.apply(parsed, cfg)
        run_action(state, cfg, runner)

    return action
