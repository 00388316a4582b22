"""Transition controller for the infinite-loop carousel.

State machine:

    IDLE --go_to(animate=True)--> ANIMATING --transition end--> IDLE

When an animated move lands in clone territory the controller re-snaps,
unanimated, to the equivalent real Position before settling. Clones render
the same pixels as their real counterparts, so the correction is invisible.

At most one animated move is in flight. Animated requests received while
ANIMATING are dropped, not queued. Unanimated requests (resize,
initialization) always apply immediately and cancel whatever is in flight.
Each move carries an epoch; a completion signal from an older epoch, or a
duplicate signal for the current one, is ignored.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from carousel_engine.core.layout import Geometry, Layout
from carousel_engine.core.logging import get_logger
from carousel_engine.core.position import CarouselState, classify, resolve_position

if TYPE_CHECKING:
    from carousel_engine.ports.scheduling import Scheduler, TimerHandle
    from carousel_engine.ports.track import ListenerHandle, TrackSurface

logger = get_logger(__name__)

SettleCallback = Callable[[int], None]

# Grace period on top of the transition duration before completing a move
# whose transition-end never arrived
TRANSITION_END_GRACE_MS = 100


class TransitionController:
    """Drives animated and instantaneous moves through the padded sequence."""

    def __init__(
        self,
        track: "TrackSurface",
        scheduler: "Scheduler",
        layout: Layout,
        geometry: Geometry,
        *,
        duration_ms: int = 500,
        on_settled: SettleCallback | None = None,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the controller at the first real item.

        Args:
            track: Surface the offsets are applied to.
            scheduler: Timer source for the missed-transition-end fallback.
            layout: Current clone padding.
            geometry: Current pixel geometry.
            duration_ms: Duration of animated moves.
            on_settled: Called with the RealIndex once per completed move.
            log: Logger to use, typically bound to a carousel id.
        """
        self._track = track
        self._scheduler = scheduler
        self._layout = layout
        self._geometry = geometry
        self._duration_ms = duration_ms
        self._on_settled = on_settled
        self._log = log or logger
        self._state = CarouselState(
            position=layout.first_real_position,
            clone_count=layout.clone_count,
            item_count=layout.item_count,
        )
        self._epoch = 0
        self._listener: ListenerHandle | None = None
        self._fallback: TimerHandle | None = None
        self._destroyed = False

    @property
    def state(self) -> CarouselState:
        return self._state

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def geometry(self) -> Geometry:
        return self._geometry

    @property
    def position(self) -> int:
        return self._state.position

    @property
    def real_index(self) -> int:
        # The settled position is always in the real zone
        return self._state.position - self._state.clone_count

    @property
    def is_animating(self) -> bool:
        return self._state.is_animating

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def displayed_real_index(self) -> int:
        """RealIndex being shown, or headed to while a move is in flight."""
        target = self._state.target
        if target is None:
            return self.real_index
        resolved = resolve_position(
            target, self._state.clone_count, self._state.item_count
        )
        return resolved - self._state.clone_count

    def go_to(self, target: int, animate: bool = True) -> bool:
        """Move the track to a Position.

        Args:
            target: Position in the padded sequence. May be one step outside
                it; the move still resolves to a real Position.
            animate: Animate the move, or apply it instantly.

        Returns:
            False if the request was dropped, True otherwise.
        """
        if self._destroyed:
            return False

        if not animate:
            self._cancel_pending()
            resolved = resolve_position(
                target, self._state.clone_count, self._state.item_count
            )
            self._snap(resolved)
            self._settle(resolved)
            return True

        if self._state.is_animating:
            self._log.debug(
                "transition_dropped",
                target=target,
                in_flight=self._state.target,
            )
            return False

        if target == self._state.position:
            # No offset change means no transition end will ever arrive
            self._settle(target)
            return True

        epoch = self._epoch + 1
        # Timer first: if the scheduler fails, the controller is still IDLE
        self._fallback = self._scheduler.call_later(
            (self._duration_ms + TRANSITION_END_GRACE_MS) / 1000,
            lambda: self._complete(epoch),
        )
        self._epoch = epoch
        self._state = self._state.animating_to(target)
        self._listener = self._track.on_transition_end(lambda: self._complete(epoch))
        self._track.enable_transition(self._duration_ms)
        self._track.set_offset(self._geometry.offset_for(target))
        self._log.debug("transition_started", target=target, epoch=epoch)
        return True

    def next(self) -> bool:
        if not self._layout.loops:
            return False
        return self.go_to(self._state.position + 1)

    def prev(self) -> bool:
        if not self._layout.loops:
            return False
        return self.go_to(self._state.position - 1)

    def go_to_index(self, real_index: int, animate: bool = True) -> bool:
        """Move to a real item by index; out-of-range indexes are ignored."""
        if not 0 <= real_index < self._layout.item_count:
            self._log.warning(
                "index_out_of_range",
                real_index=real_index,
                item_count=self._layout.item_count,
            )
            return False
        return self.go_to(self._layout.position_for(real_index), animate)

    def apply_layout(self, layout: Layout, geometry: Geometry) -> int:
        """Switch to a new layout, keeping the displayed RealIndex.

        Cancels any in-flight move. The caller is expected to follow up with
        an unanimated ``go_to`` to the returned Position.

        Returns:
            Position of the displayed RealIndex in the new layout.
        """
        real_index = self.displayed_real_index
        self._cancel_pending()
        position = layout.position_for(real_index)
        self._layout = layout
        self._geometry = geometry
        self._state = self._state.with_clone_count(layout.clone_count, position)
        return position

    def destroy(self) -> None:
        """Release the transition listener and fallback timer."""
        self._cancel_pending()
        self._destroyed = True

    def _complete(self, epoch: int) -> None:
        if self._destroyed or epoch != self._epoch or self._state.target is None:
            self._log.debug("transition_end_ignored", epoch=epoch, current=self._epoch)
            return

        target = self._state.target
        self._release_handles()
        clone_count = self._state.clone_count
        item_count = self._state.item_count
        resolved = resolve_position(target, clone_count, item_count)
        if resolved != target:
            zone = (
                classify(target, clone_count, item_count).value
                if 0 <= target < self._state.padded_length
                else "outside"
            )
            self._log.debug("resnap", landed=target, zone=zone, position=resolved)
            self._snap(resolved)
        self._settle(resolved)

    def _snap(self, position: int) -> None:
        self._track.disable_transition()
        self._track.set_offset(self._geometry.offset_for(position))
        # Flush before re-enabling, or the next animated move would be instant
        self._track.force_layout()
        self._track.enable_transition(self._duration_ms)

    def _settle(self, position: int) -> None:
        self._state = self._state.settled_at(position)
        real_index = self.real_index
        self._log.debug("settled", position=position, real_index=real_index)
        if self._on_settled is not None:
            self._on_settled(real_index)

    def _cancel_pending(self) -> None:
        # Bumping the epoch invalidates completions already in the queue
        self._epoch += 1
        self._release_handles()
        if self._state.is_animating:
            self._state = self._state.settled_at(self._state.position)

    def _release_handles(self) -> None:
        if self._listener is not None:
            self._listener.remove()
            self._listener = None
        if self._fallback is not None:
            self._fallback.cancel()
            self._fallback = None
