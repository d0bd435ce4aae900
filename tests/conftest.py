"""Shared pytest fixtures and configuration for the mga test suite.

Guidelines
----------
* Tests never read the real process environment; pass ``environ``.
* Tests never touch files outside ``tmp_path``.
* Runners are called directly with a quiet logger where possible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from mga.cli.action import RunState
from mga.core.context import RunContext


@pytest.fixture
def ctx() -> RunContext:
    return RunContext()


@pytest.fixture
def quiet_logger() -> logging.Logger:
    """A propagating logger so ``caplog`` sees records, with no handlers of its own."""
    logger = logging.getLogger("tests.mga")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def run_state(quiet_logger: logging.Logger) -> RunState:
    """Run state with a pre-cached logger, as after the startup hook."""
    return RunState(logger=quiet_logger)


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    """Drop handlers left on the ``mga`` logger by a previous test."""
    yield
    logger = logging.getLogger("mga")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
