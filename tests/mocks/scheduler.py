"""Deterministic virtual clock implementing the Scheduler protocol.

Timers only run when the test calls ``advance()``, in due-time order, and
timers scheduled by a running callback are honoured within the same advance.

Example:
    >>> scheduler = ManualScheduler()
    >>> fired = []
    >>> scheduler.call_later(0.5, lambda: fired.append(scheduler.now))
    >>> scheduler.advance(1.0)
    >>> assert fired == [0.5]
"""

from collections.abc import Callable
from typing import Any


class ManualTimer:
    """Handle for a callback scheduled on a ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], Any], seq: int) -> None:
        self.when = when
        self.callback = callback
        self.seq = seq
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock advances only when told to.

    Attributes:
        now: Current virtual time in seconds.
        scheduled: Every timer ever created, for assertions on delays.
        fail_with: If set, raised by ``call_later`` instead of scheduling.
    """

    # Absorbs float error when deadlines are sums of millisecond delays
    EPSILON = 1e-9

    def __init__(self) -> None:
        self.now = 0.0
        self.scheduled: list[ManualTimer] = []
        self._timers: list[ManualTimer] = []
        self._seq = 0
        self.fail_with: Exception | None = None

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ManualTimer:
        if self.fail_with is not None:
            raise self.fail_with
        self._seq += 1
        timer = ManualTimer(self.now + delay, callback, self._seq)
        self._timers.append(timer)
        self.scheduled.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        """Timers that are neither cancelled nor run yet."""
        return [timer for timer in self._timers if not timer.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every timer that falls due."""
        deadline = self.now + seconds
        while True:
            due = [
                timer
                for timer in self._timers
                if not timer.cancelled and timer.when <= deadline + self.EPSILON
            ]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            self._timers.remove(timer)
            self.now = max(self.now, timer.when)
            timer.callback()
        self.now = deadline
        self._timers = [timer for timer in self._timers if not timer.cancelled]
