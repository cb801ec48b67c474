"""
Cooperative cancellation for the comparison loop.

Signal handlers only set a flag; the loop polls it between blocks so a line
is never cut in half.
"""

from __future__ import annotations

import logging
import signal
import threading
from contextlib import contextmanager
from typing import Iterator

log = logging.getLogger(__name__)

# Signals that request a graceful stop
CANCEL_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CancelFlag:
    """A process-wide stop request, passed by reference into the loop."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def handle_signal(self, signum: int, frame: object) -> None:
        """Signal handler that records the stop request."""
        log.debug("Received signal %d, stopping after current block", signum)
        self.set()


@contextmanager
def cancel_on_signals(flag: CancelFlag, signals: tuple = CANCEL_SIGNALS) -> Iterator[CancelFlag]:
    """Route `signals` to `flag` for the duration of the block.

    Previous handlers are restored on exit. Outside the main thread signal
    handlers cannot be installed, so the flag is yielded untouched.
    """
    if threading.current_thread() is not threading.main_thread():
        yield flag
        return

    previous = {}
    try:
        for signum in signals:
            previous[signum] = signal.signal(signum, flag.handle_signal)
        yield flag
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
