"""Cancellation-aware run context handed to every runner."""

from __future__ import annotations

import threading

from mga.exceptions import CancelledError


class RunContext:
    """Cooperative cancellation token for a single invocation.

    The CLI cancels the context when the process receives SIGINT or
    SIGTERM.  Nothing is torn down forcibly; runners are expected to check
    :attr:`cancelled` (or call :meth:`raise_if_cancelled`) at convenient
    points.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """Why the context was cancelled, or ``None`` while it is live."""
        return self._reason

    def cancel(self, reason: str = "cancelled") -> None:
        """Cancel the context.  Only the first reason is kept."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or *timeout* elapses; return :attr:`cancelled`."""
        return self._event.wait(timeout)

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` if the context has been cancelled."""
        if self._event.is_set():
            raise CancelledError(f"run cancelled: {self._reason}")
