"""Track surface protocol.

The track is the element holding the padded sequence of items. The engine
only ever talks to it through this protocol; a browser binding translates
the calls into style changes and ``transitionend`` listeners.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from carousel_engine.core.layout import PaddedSlot


class ListenerHandle(Protocol):
    """Handle returned when registering a listener."""

    def remove(self) -> None:
        """Detach the listener. Safe to call more than once."""
        ...


class TrackSurface(Protocol):
    """Protocol for the rendered track of a carousel."""

    def container_width(self) -> float:
        """Current pixel width of the visible window."""
        ...

    def viewport_width(self) -> float:
        """Current pixel width of the viewport, used for breakpoints."""
        ...

    def layout_items(
        self, slots: Sequence[PaddedSlot], item_width: float, gap_px: int
    ) -> None:
        """Lay out the padded sequence.

        Args:
            slots: Padded sequence, clones included. Clone slots must be
                marked hidden from assistive technology.
            item_width: Width of every slot in pixels.
            gap_px: Gap between neighbouring slots in pixels.
        """
        ...

    def resize_items(self, item_width: float, gap_px: int) -> None:
        """Apply new slot geometry to the existing padded sequence.

        Used when the viewport changes but items-per-view does not, so the
        slots themselves stay in place.
        """
        ...

    def set_offset(self, offset_px: float) -> None:
        """Translate the track horizontally to ``offset_px``."""
        ...

    def enable_transition(self, duration_ms: int) -> None:
        """Animate subsequent offset changes over ``duration_ms``."""
        ...

    def disable_transition(self) -> None:
        """Apply subsequent offset changes instantly."""
        ...

    def force_layout(self) -> None:
        """Flush pending style changes synchronously."""
        ...

    def on_transition_end(self, callback: Callable[[], None]) -> ListenerHandle:
        """Register a callback for the end of an offset transition.

        The callback may fire more than once per transition (bubbled events
        from children); callers are expected to de-duplicate.
        """
        ...
