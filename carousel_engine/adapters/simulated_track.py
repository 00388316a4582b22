"""Headless track surface.

Behaves like a browser track as far as the engine can tell: offset changes
made while a transition is enabled end with a transition-end signal after
the transition duration, instant changes produce none. Used for the demo
runner, server-side previews and integration tests.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from carousel_engine.core.layout import PaddedSlot
from carousel_engine.core.logging import get_logger

if TYPE_CHECKING:
    from carousel_engine.ports.scheduling import Scheduler, TimerHandle

logger = get_logger(__name__)


class _Listener:
    def __init__(self, track: "SimulatedTrack", callback: Callable[[], None]) -> None:
        self._track = track
        self.callback = callback

    def remove(self) -> None:
        self._track._remove_listener(self)


class SimulatedTrack:
    """In-memory implementation of the TrackSurface protocol.

    Attributes:
        offset: Current translation in pixels.
        slots: Padded sequence from the last layout.
        item_width: Slot width from the last layout.
        animated_moves: Number of offset changes made with a transition.
        instant_moves: Number of offset changes made without one.
    """

    def __init__(
        self,
        scheduler: "Scheduler",
        container_width: float = 960.0,
        viewport_width: float = 1280.0,
    ) -> None:
        self._scheduler = scheduler
        self._container_width = container_width
        self._viewport_width = viewport_width
        self._transition_ms: int | None = None
        self._listeners: list[_Listener] = []
        self._pending_end: TimerHandle | None = None
        self.offset = 0.0
        self.slots: list[PaddedSlot] = []
        self.item_width = 0.0
        self.gap_px = 0
        self.animated_moves = 0
        self.instant_moves = 0

    def resize(self, viewport_width: float, container_width: float | None = None) -> None:
        """Simulate a window resize; the container follows the viewport by default."""
        self._viewport_width = viewport_width
        self._container_width = (
            container_width if container_width is not None else viewport_width
        )

    def visible_sources(self, items_per_view: int) -> list[int]:
        """Real item indexes currently shown, left to right."""
        stride = self.item_width + self.gap_px
        if stride <= 0 or not self.slots:
            return []
        first = round(-self.offset / stride)
        return [slot.source_index for slot in self.slots[first : first + items_per_view]]

    def container_width(self) -> float:
        return self._container_width

    def viewport_width(self) -> float:
        return self._viewport_width

    def layout_items(
        self, slots: Sequence[PaddedSlot], item_width: float, gap_px: int
    ) -> None:
        self.slots = list(slots)
        self.item_width = item_width
        self.gap_px = gap_px

    def resize_items(self, item_width: float, gap_px: int) -> None:
        self.item_width = item_width
        self.gap_px = gap_px

    def set_offset(self, offset_px: float) -> None:
        if self._pending_end is not None:
            self._pending_end.cancel()
            self._pending_end = None

        moved = offset_px != self.offset
        self.offset = offset_px
        if self._transition_ms is None:
            self.instant_moves += 1
            return

        self.animated_moves += 1
        if moved:
            self._pending_end = self._scheduler.call_later(
                self._transition_ms / 1000, self._fire_transition_end
            )

    def enable_transition(self, duration_ms: int) -> None:
        self._transition_ms = duration_ms

    def disable_transition(self) -> None:
        self._transition_ms = None

    def force_layout(self) -> None:
        """Nothing is buffered in memory."""

    def on_transition_end(self, callback: Callable[[], None]) -> _Listener:
        listener = _Listener(self, callback)
        self._listeners.append(listener)
        return listener

    def _remove_listener(self, listener: _Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire_transition_end(self) -> None:
        self._pending_end = None
        logger.debug("transition_end", offset=self.offset, listeners=len(self._listeners))
        for listener in list(self._listeners):
            listener.callback()
