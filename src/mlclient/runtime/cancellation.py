"""Cancellation token checked by the host turn loop."""

from __future__ import annotations

import threading


class CancellationToken:
    """Thread-safe one-shot cancellation flag.

    The turn loop checks :attr:`cancelled` before every turn; any other
    thread (a shutdown handler, a signal handler) may call :meth:`cancel`.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return the flag."""

        return self._event.wait(timeout)
