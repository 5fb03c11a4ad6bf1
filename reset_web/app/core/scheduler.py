"""
Cancellable periodic tasks.

The carousel needs two independent timers (autoplay and background
refresh).  Both are expressed as :class:`PeriodicTask` objects created
through a scheduler so that tests can substitute a manual clock.

A ``PeriodicTask`` runs its callback on a daemon thread every
``interval`` seconds until :meth:`PeriodicTask.cancel` is called.  The
callback never runs after ``cancel`` returns, which is what lets an
owner tear down without leaving a dangling timer that touches its state.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTask:
    """A callback invoked every ``interval`` seconds on a worker thread."""

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "periodic-task") -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.callback = callback
        self.name = name
        self._stop = threading.Event()
        self._run_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def active(self) -> bool:
        return self._thread is not None and not self._stop.is_set()

    def start(self) -> "PeriodicTask":
        if self._thread is not None:
            return self
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()
        logger.debug("Started %s (every %.1fs)", self.name, self.interval)
        return self

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            with self._run_lock:
                if self._stop.is_set():
                    break
                try:
                    self.callback()
                except Exception:
                    logger.exception("Periodic task %s failed", self.name)

    def cancel(self) -> None:
        self._stop.set()
        # Wait for a callback in progress so nothing runs after cancel().
        if self._thread is not None and self._thread is not threading.current_thread():
            with self._run_lock:
                pass
        logger.debug("Cancelled %s", self.name)


class Scheduler:
    """Factory for periodic tasks backed by threads."""

    def every(self, interval: float, callback: Callable[[], None], name: str = "periodic-task") -> PeriodicTask:
        return PeriodicTask(interval, callback, name=name).start()
