"""Timer source protocol.

Matches the shape of ``asyncio.AbstractEventLoop.call_later`` so an event
loop can be used directly and tests can substitute a virtual clock.
"""

from collections.abc import Callable
from typing import Any, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Protocol for scheduling delayed callbacks."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle:
        """Run ``callback`` after ``delay`` seconds.

        Args:
            delay: Delay in seconds.
            callback: Zero-argument callable.

        Returns:
            A handle whose ``cancel()`` prevents the callback from running.
        """
        ...
