"""Bridge OS termination signals to run-context cancellation."""

from __future__ import annotations

import signal
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

from mga.core.context import RunContext

CANCEL_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


@contextmanager
def cancel_on_signals(
    context: RunContext,
    signals: tuple[signal.Signals, ...] = CANCEL_SIGNALS,
) -> Iterator[RunContext]:
    """Cancel *context* when any of *signals* arrives.

    Previous handlers are restored on exit.  Must be entered from the
    main thread.
    """

    def _handler(signum: int, _frame: FrameType | None) -> None:
        context.cancel(signal.Signals(signum).name)

    previous = {sig: signal.signal(sig, _handler) for sig in signals}
    try:
        yield context
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
