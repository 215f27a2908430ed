"""Cancellation and deadline handling for catalog queries."""

import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from .exceptions import DeadlineExceeded, ParseCancelled

logger = logging.getLogger(__name__)


class ParseContext:
    """Carries a cancel flag and an optional deadline through one parse.

    Extraction calls ``check()`` before every catalog query and wraps the
    query itself in ``watch()``, which fires the supplied callback when the
    context is cancelled or the deadline passes while the query is running.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.deadline: Optional[float] = None
        if timeout is not None:
            self.deadline = time.monotonic() + timeout
        self._cancelled = threading.Event()
        self._callbacks: list[Callable[[], None]] = []
        self._lock = threading.Lock()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None when there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def cancel(self) -> None:
        """Cancel the context and interrupt any in-flight query."""
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks = list(self._callbacks)
        logger.debug("Parse context cancelled")
        for callback in callbacks:
            callback()

    def check(self) -> None:
        """Raise if the context is cancelled or past its deadline."""
        if self.cancelled:
            raise ParseCancelled("parse cancelled")
        if self.expired:
            raise DeadlineExceeded("parse deadline exceeded")

    @contextmanager
    def watch(self, on_cancel: Callable[[], None]) -> Generator[None, None, None]:
        """Invoke ``on_cancel`` if the context ends while the block runs.

        ``on_cancel`` never runs after the block exits, even when the deadline
        timer has already started firing.
        """
        active = True

        def interrupt() -> None:
            with self._lock:
                if active:
                    on_cancel()

        with self._lock:
            self._callbacks.append(interrupt)
        timer = None
        remaining = self.remaining()
        if remaining is not None:
            timer = threading.Timer(remaining, interrupt)
            timer.daemon = True
            timer.start()
        try:
            yield
        finally:
            if timer is not None:
                timer.cancel()
            with self._lock:
                active = False
                self._callbacks.remove(interrupt)


def background() -> ParseContext:
    """A context that is never cancelled and has no deadline."""
    return ParseContext()
