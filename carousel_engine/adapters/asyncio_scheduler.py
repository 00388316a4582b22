"""Scheduler backed by the asyncio event loop."""

import asyncio
from collections.abc import Callable
from typing import Any


class AsyncioScheduler:
    """Schedules callbacks on an asyncio event loop.

    The loop is resolved on each call unless one is given, so an instance
    can be created before the loop starts running.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
