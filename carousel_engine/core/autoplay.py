"""Autoplay scheduling.

Advances the carousel on a fixed interval. A tick that lands while a move is
in flight is simply dropped by the transition controller, never queued.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from carousel_engine.core.logging import get_logger

if TYPE_CHECKING:
    from carousel_engine.ports.scheduling import Scheduler, TimerHandle

logger = get_logger(__name__)


class AutoplayScheduler:
    """Periodic auto-advance with pause and resume.

    Resuming restarts the full interval rather than counting down whatever
    was left when the scheduler was paused.
    """

    def __init__(
        self,
        scheduler: "Scheduler",
        advance: Callable[[], Any],
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            scheduler: Timer source.
            advance: Called on every tick, normally ``TransitionController.next``.
            log: Logger to use, typically bound to a carousel id.
        """
        self._scheduler = scheduler
        self._advance = advance
        self._log = log or logger
        self._interval_ms: int | None = None
        self._handle: TimerHandle | None = None
        self._paused = False

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def interval_ms(self) -> int | None:
        return self._interval_ms

    def start(self, interval_ms: int) -> None:
        """Start ticking every ``interval_ms``. No-op if already running."""
        if self.running:
            return
        self._interval_ms = interval_ms
        self._paused = False
        self._schedule()
        self._log.debug("autoplay_started", interval_ms=interval_ms)

    def pause(self) -> None:
        if not self.running:
            return
        self._cancel()
        self._paused = True
        self._log.debug("autoplay_paused")

    def resume(self) -> None:
        if not self._paused or self._interval_ms is None:
            return
        self._paused = False
        self._schedule()
        self._log.debug("autoplay_resumed", interval_ms=self._interval_ms)

    def stop(self) -> None:
        """Release the timer. Safe to call when not running."""
        self._cancel()
        self._paused = False
        self._interval_ms = None

    def _schedule(self) -> None:
        if self._interval_ms is None:
            return
        self._handle = self._scheduler.call_later(self._interval_ms / 1000, self._tick)

    def _tick(self) -> None:
        self._handle = None
        if self._interval_ms is None:
            return
        # Reschedule first so a failing advance does not stop the interval
        self._schedule()
        self._advance()

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
