"""Responsive re-layout on viewport changes.

On every (debounced) resize the item width is recomputed and the current
Position re-applied without animation. When the breakpoint rules yield a
different items-per-view, the clone padding is rebuilt and the displayed
RealIndex is carried over into the new Position space, so a viewer never sees
the carousel jump to a different item because the window changed size.
"""

from typing import TYPE_CHECKING

import structlog

from carousel_engine.core.config import CarouselConfig
from carousel_engine.core.layout import (
    Geometry,
    Layout,
    build,
    build_slots,
    compute_item_width,
)
from carousel_engine.core.logging import get_logger
from carousel_engine.core.transition import TransitionController

if TYPE_CHECKING:
    from carousel_engine.ports.scheduling import Scheduler, TimerHandle
    from carousel_engine.ports.track import TrackSurface

logger = get_logger(__name__)


def measure(
    track: "TrackSurface", config: CarouselConfig, items_per_view: int
) -> Geometry:
    """Pixel geometry for ``items_per_view`` items in the track's current width."""
    return Geometry(
        item_width=compute_item_width(
            track.container_width(), items_per_view, config.gap_px
        ),
        gap_px=config.gap_px,
    )


def layout_track(
    track: "TrackSurface", config: CarouselConfig, item_count: int, items_per_view: int
) -> tuple[Layout, Geometry]:
    """Build the layout and geometry for ``items_per_view`` and apply them to the track."""
    layout = build(item_count, items_per_view)
    geometry = measure(track, config, layout.items_per_view)
    track.layout_items(build_slots(layout), geometry.item_width, geometry.gap_px)
    return layout, geometry


class ResponsiveResizer:
    """Recomputes items-per-view and geometry when the viewport changes."""

    def __init__(
        self,
        config: CarouselConfig,
        controller: TransitionController,
        track: "TrackSurface",
        scheduler: "Scheduler",
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._controller = controller
        self._track = track
        self._scheduler = scheduler
        self._log = log or logger
        self._pending: TimerHandle | None = None
        self._closed = False

    @property
    def items_per_view(self) -> int:
        return self._controller.layout.items_per_view

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, viewport_width: float) -> None:
        """Debounce a resize; only the last of a burst is applied."""
        if self._closed:
            return
        if self._pending is not None:
            self._pending.cancel()
        self._pending = self._scheduler.call_later(
            self._config.resize_debounce_ms / 1000,
            lambda: self._run(viewport_width),
        )

    def apply(self, viewport_width: float) -> bool:
        """Re-layout for ``viewport_width`` immediately.

        Returns:
            True if items-per-view changed and the clones were rebuilt.
        """
        if self._closed:
            return False

        previous = self._controller.layout
        items_per_view = self._config.items_per_view_for(viewport_width)
        changed = items_per_view != previous.items_per_view
        if changed:
            layout, geometry = layout_track(
                self._track, self._config, previous.item_count, items_per_view
            )
        else:
            # Same padding, only the slot width moves
            layout = previous
            geometry = measure(self._track, self._config, layout.items_per_view)
            self._track.resize_items(geometry.item_width, geometry.gap_px)
        position = self._controller.apply_layout(layout, geometry)
        if changed:
            self._log.info(
                "items_per_view_changed",
                previous=previous.items_per_view,
                current=items_per_view,
                real_index=position - layout.clone_count,
            )
        self._controller.go_to(position, animate=False)
        return changed

    def close(self) -> None:
        """Cancel any pending resize; later resizes are ignored."""
        self._closed = True
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _run(self, viewport_width: float) -> None:
        self._pending = None
        self.apply(viewport_width)
