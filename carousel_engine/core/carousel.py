"""Carousel facade.

Wires the layout, transition, autoplay and responsive components together
behind the commands exposed to the page layer.

Example:
    track = SimulatedTrack(scheduler, container_width=960, viewport_width=1280)
    carousel = Carousel(
        ["a", "b", "c", "d"],
        track,
        config=CarouselConfig(autoplay=True),
        scheduler=scheduler,
        on_settled=lambda index: print("now showing", index),
    )
    carousel.next()
"""

import asyncio
import uuid
from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from carousel_engine.core.autoplay import AutoplayScheduler
from carousel_engine.core.config import CarouselConfig
from carousel_engine.core.controls import Direction, direction_for_key, indicator_states
from carousel_engine.core.errors import ConfigurationError
from carousel_engine.core.layout import Layout
from carousel_engine.core.logging import get_logger
from carousel_engine.core.position import CarouselState
from carousel_engine.core.responsive import ResponsiveResizer, layout_track
from carousel_engine.core.transition import SettleCallback, TransitionController

if TYPE_CHECKING:
    from carousel_engine.ports.scheduling import Scheduler
    from carousel_engine.ports.track import TrackSurface

logger = get_logger(__name__)

T = TypeVar("T")


def _default_scheduler() -> "Scheduler":
    """Scheduler bound to the running asyncio loop.

    Raises:
        ConfigurationError: If no event loop is running.
    """
    # Imported lazily so the core has no hard dependency on adapters
    from carousel_engine.adapters.asyncio_scheduler import AsyncioScheduler

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as ex:
        raise ConfigurationError.from_exception(ex) from ex
    return AsyncioScheduler(loop)


class Carousel(Generic[T]):
    """An infinite-loop carousel over a fixed list of items.

    A carousel that cannot be built (no items, no timer source) is
    inert: its items stay where they are and every command is a no-op.
    """

    def __init__(
        self,
        items: Sequence[T],
        track: "TrackSurface",
        *,
        config: CarouselConfig | None = None,
        scheduler: "Scheduler | None" = None,
        viewport_width: float | None = None,
        on_settled: SettleCallback | None = None,
        carousel_id: str | None = None,
    ) -> None:
        """Build the carousel and position it at the first item.

        Args:
            items: The real items, in display order.
            track: Surface the padded sequence is rendered on.
            config: Options; defaults to ``CarouselConfig()``.
            scheduler: Timer source; defaults to the running asyncio loop.
                Without one, and outside a running loop, the carousel is inert.
            viewport_width: Initial viewport width; read from the track if None.
            on_settled: Called with the RealIndex once per completed move.
            carousel_id: Identifier bound to every log line of this instance.
        """
        self.carousel_id = carousel_id or uuid.uuid4().hex[:8]
        self._log = logger.bind(carousel_id=self.carousel_id)
        self._items = tuple(items)
        self._track = track
        self._config = config or CarouselConfig()
        self._on_settled = on_settled
        self._controller: TransitionController | None = None
        self._autoplay: AutoplayScheduler | None = None
        self._resizer: ResponsiveResizer | None = None
        self._destroyed = False
        self._scheduler = scheduler

        try:
            if self._scheduler is None:
                self._scheduler = _default_scheduler()
            self._build(viewport_width)
        except ConfigurationError as ex:
            self._log.warning("carousel_inert", error=str(ex), category=ex.category.name)
            self._controller = None
            return

        if self._config.autoplay and self.layout.loops:
            self._autoplay.start(self._config.interval_ms)

    def _build(self, viewport_width: float | None) -> None:
        if not self._items:
            raise ConfigurationError("Carousel has no items")
        if viewport_width is None:
            viewport_width = self._track.viewport_width()

        layout, geometry = layout_track(
            self._track,
            self._config,
            len(self._items),
            self._config.items_per_view_for(viewport_width),
        )
        self._controller = TransitionController(
            self._track,
            self._scheduler,
            layout,
            geometry,
            duration_ms=self._config.transition_duration_ms,
            on_settled=self._handle_settled,
            log=self._log,
        )
        self._autoplay = AutoplayScheduler(
            self._scheduler, self._controller.next, log=self._log
        )
        self._resizer = ResponsiveResizer(
            self._config, self._controller, self._track, self._scheduler, log=self._log
        )
        self._controller.go_to(layout.first_real_position, animate=False)
        self._log.debug(
            "carousel_created",
            item_count=layout.item_count,
            items_per_view=layout.items_per_view,
            clone_count=layout.clone_count,
        )

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def config(self) -> CarouselConfig:
        return self._config

    @property
    def is_inert(self) -> bool:
        return self._controller is None

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def layout(self) -> Layout | None:
        return self._controller.layout if self._controller else None

    @property
    def state(self) -> CarouselState | None:
        return self._controller.state if self._controller else None

    @property
    def real_index(self) -> int | None:
        return self._controller.real_index if self._controller else None

    @property
    def position(self) -> int | None:
        return self._controller.position if self._controller else None

    @property
    def items_per_view(self) -> int | None:
        return self._controller.layout.items_per_view if self._controller else None

    @property
    def is_animating(self) -> bool:
        return self._controller is not None and self._controller.is_animating

    @property
    def autoplay_running(self) -> bool:
        return self._autoplay is not None and self._autoplay.running

    @property
    def current_item(self) -> T | None:
        if self._controller is None:
            return None
        return self._items[self._controller.real_index]

    def _active(self) -> TransitionController | None:
        if self._destroyed:
            return None
        return self._controller

    def next(self) -> bool:
        controller = self._active()
        return controller.next() if controller else False

    def prev(self) -> bool:
        controller = self._active()
        return controller.prev() if controller else False

    def go_to_index(self, real_index: int) -> bool:
        controller = self._active()
        return controller.go_to_index(real_index) if controller else False

    def pause(self) -> None:
        if self._autoplay is not None and not self._destroyed:
            self._autoplay.pause()

    def resume(self) -> None:
        if self._autoplay is not None and not self._destroyed:
            self._autoplay.resume()

    def handle_resize(self, viewport_width: float) -> None:
        """Viewport resize event; applied after the debounce delay."""
        if self._resizer is not None and not self._destroyed:
            self._resizer.schedule(viewport_width)

    def resize_now(self, viewport_width: float) -> bool:
        """Apply a viewport width immediately, bypassing the debounce."""
        if self._resizer is None or self._destroyed:
            return False
        return self._resizer.apply(viewport_width)

    def handle_key(self, key: str) -> bool:
        """Keyboard navigation. Returns True if the key was consumed."""
        if not self._config.keyboard or self._active() is None:
            return False
        direction = direction_for_key(key)
        if direction is None:
            return False
        if direction is Direction.PREV:
            self.prev()
        else:
            self.next()
        return True

    def pointer_enter(self) -> None:
        if self._config.autoplay and self._config.pause_on_hover:
            self.pause()

    def pointer_leave(self) -> None:
        if self._config.autoplay and self._config.pause_on_hover:
            self.resume()

    def indicator_states(self) -> list[bool]:
        if self._controller is None:
            return []
        return indicator_states(self._controller.real_index, len(self._items))

    def destroy(self) -> None:
        """Release the autoplay timer, pending resize and transition listener."""
        if self._destroyed:
            return
        self._destroyed = True
        if self._autoplay is not None:
            self._autoplay.stop()
        if self._resizer is not None:
            self._resizer.close()
        if self._controller is not None:
            self._controller.destroy()
        self._log.info("carousel_destroyed")

    def _handle_settled(self, real_index: int) -> None:
        if self._on_settled is not None:
            self._on_settled(real_index)
