"""Recording implementation of the TrackSurface protocol.

Records every call so tests can assert on the exact sequence of style
changes, and lets tests deliver transition-end signals by hand, including
duplicates and late ones.
"""

from collections.abc import Callable, Sequence

from carousel_engine.core.layout import PaddedSlot


class MockListener:
    """Listener handle that tracks whether it was removed."""

    def __init__(self, track: "RecordingTrack", callback: Callable[[], None]) -> None:
        self._track = track
        self.callback = callback
        self.removed = False

    def remove(self) -> None:
        self.removed = True
        if self in self._track.listeners:
            self._track.listeners.remove(self)


class RecordingTrack:
    """Mock track surface.

    Attributes:
        offset: Current translation in pixels.
        transition_ms: Active transition duration, or None when disabled.
        moves: ``(offset, animated)`` for every ``set_offset`` call.
        calls: Ordered log of style calls ("enable", "disable", "offset", "flush").
        layouts: ``(slots, item_width, gap_px)`` for every ``layout_items`` call.
        resizes: ``(item_width, gap_px)`` for every ``resize_items`` call.
        listeners: Currently registered transition-end listeners.
        all_listeners: Every listener ever registered.
    """

    def __init__(self, container_width: float = 1200.0, viewport_width: float = 1280.0) -> None:
        self.width = container_width
        self.viewport = viewport_width
        self.offset = 0.0
        self.transition_ms: int | None = None
        self.moves: list[tuple[float, bool]] = []
        self.calls: list[str] = []
        self.layouts: list[tuple[list[PaddedSlot], float, int]] = []
        self.resizes: list[tuple[float, int]] = []
        self.listeners: list[MockListener] = []
        self.all_listeners: list[MockListener] = []

    @property
    def animated_moves(self) -> list[float]:
        return [offset for offset, animated in self.moves if animated]

    @property
    def instant_moves(self) -> list[float]:
        return [offset for offset, animated in self.moves if not animated]

    def fire_transition_end(self, times: int = 1) -> None:
        """Deliver the transition-end signal to every registered listener."""
        for _ in range(times):
            for listener in list(self.listeners):
                listener.callback()

    def container_width(self) -> float:
        return self.width

    def viewport_width(self) -> float:
        return self.viewport

    def layout_items(
        self, slots: Sequence[PaddedSlot], item_width: float, gap_px: int
    ) -> None:
        self.layouts.append((list(slots), item_width, gap_px))

    def resize_items(self, item_width: float, gap_px: int) -> None:
        self.resizes.append((item_width, gap_px))

    def set_offset(self, offset_px: float) -> None:
        self.offset = offset_px
        self.moves.append((offset_px, self.transition_ms is not None))
        self.calls.append("offset")

    def enable_transition(self, duration_ms: int) -> None:
        self.transition_ms = duration_ms
        self.calls.append("enable")

    def disable_transition(self) -> None:
        self.transition_ms = None
        self.calls.append("disable")

    def force_layout(self) -> None:
        self.calls.append("flush")

    def on_transition_end(self, callback: Callable[[], None]) -> MockListener:
        listener = MockListener(self, callback)
        self.listeners.append(listener)
        self.all_listeners.append(listener)
        return listener
