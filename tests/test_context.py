"""Tests for run-context cancellation and its signal bridge."""

from __future__ import annotations

import signal
import sys

import pytest

from mga.core.context import RunContext
from mga.exceptions import CancelledError
from mga.infra.signals import cancel_on_signals


class TestRunContext:
    def test_starts_live(self, ctx: RunContext) -> None:
        assert not ctx.cancelled
        assert ctx.reason is None
        ctx.raise_if_cancelled()

    def test_cancel(self, ctx: RunContext) -> None:
        ctx.cancel("shutdown")
        assert ctx.cancelled
        assert ctx.reason == "shutdown"

    def test_first_reason_wins(self, ctx: RunContext) -> None:
        ctx.cancel("first")
        ctx.cancel("second")
        assert ctx.reason == "first"

    def test_raise_if_cancelled(self, ctx: RunContext) -> None:
        ctx.cancel("SIGTERM")
        with pytest.raises(CancelledError, match="SIGTERM"):
            ctx.raise_if_cancelled()

    def test_wait_times_out_while_live(self, ctx: RunContext) -> None:
        assert ctx.wait(timeout=0.01) is False

    def test_wait_returns_once_cancelled(self, ctx: RunContext) -> None:
        ctx.cancel()
        assert ctx.wait(timeout=0.01) is True


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
class TestCancelOnSignals:
    def test_signal_cancels_context(self, ctx: RunContext) -> None:
        with cancel_on_signals(ctx, (signal.SIGTERM,)):
            signal.raise_signal(signal.SIGTERM)
        assert ctx.cancelled
        assert ctx.reason == "SIGTERM"

    def test_previous_handler_restored(self, ctx: RunContext) -> None:
        before = signal.getsignal(signal.SIGTERM)
        with cancel_on_signals(ctx, (signal.SIGTERM,)):
            assert signal.getsignal(signal.SIGTERM) is not before
        assert signal.getsignal(signal.SIGTERM) is before

    def test_sigint_does_not_raise_keyboard_interrupt(self, ctx: RunContext) -> None:
        with cancel_on_signals(ctx):
            signal.raise_signal(signal.SIGINT)
        assert ctx.reason == "SIGINT"
