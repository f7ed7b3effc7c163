"""
Debouncing

Collapses bursts of triggers (container resizes) into one call.
"""

from __future__ import annotations
import threading
from typing import Callable, Optional


class Debouncer:
    """Runs a callback once a trigger has been quiet for ``delay`` seconds."""

    def __init__(
        self,
        delay: float,
        callback: Callable[[], None],
        timer_factory: Callable = threading.Timer,
    ):
        """Initialize debouncer.

        Args:
            delay: Quiet period in seconds
            callback: Function called once the period elapses
            timer_factory: Creates timers, threading.Timer signature
        """
        if delay < 0:
            raise ValueError(f"Invalid debounce delay: {delay}")

        self.delay = delay
        self._callback = callback
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """Whether a call is scheduled."""
        return self._timer is not None

    def trigger(self):
        """Schedule the callback, cancelling any scheduled call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = self._timer_factory(
                self.delay, self._fire, args=(self._generation,)
            )
            self._timer.daemon = True
            self._timer.start()

    def cancel(self):
        """Drop the scheduled call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self):
        """Run the scheduled call now."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._timer = None
        self._callback()

    def _fire(self, generation: int):
        with self._lock:
            # A timer that lost the race with cancel() or trigger()
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
        self._callback()
