"""Position space bookkeeping.

Position is an integer index into the padded sequence; RealIndex addresses
only genuine items and is always derived from Position, never stored.
"""

from dataclasses import dataclass, replace
from enum import Enum

from carousel_engine.core.errors import OutOfRangeError


class Zone(Enum):
    """Where a Position falls in the padded sequence."""

    TAIL_CLONE = "tail_clone"
    REAL = "real"
    HEAD_CLONE = "head_clone"


class TransitionState(Enum):
    IDLE = "idle"
    ANIMATING = "animating"


def _check_range(position: int, clone_count: int, item_count: int) -> None:
    padded_length = item_count + 2 * clone_count
    if not 0 <= position < padded_length:
        raise OutOfRangeError(position, padded_length)


def classify(position: int, clone_count: int, item_count: int) -> Zone:
    """Classify a Position as tail clone, real, or head clone.

    Raises:
        OutOfRangeError: If the position is outside the padded sequence.
    """
    _check_range(position, clone_count, item_count)
    if position < clone_count:
        return Zone.TAIL_CLONE
    if position >= clone_count + item_count:
        return Zone.HEAD_CLONE
    return Zone.REAL


def to_real_index(position: int, clone_count: int, item_count: int) -> int | None:
    """Real item index at a Position, or None inside clone territory.

    Raises:
        OutOfRangeError: If the position is outside the padded sequence.
    """
    if classify(position, clone_count, item_count) is not Zone.REAL:
        return None
    return min(max(position - clone_count, 0), item_count - 1)


def equivalent_real_position(
    position: int, zone: Zone, clone_count: int, item_count: int
) -> int:
    """Real-zone Position rendering the same content as ``position``.

    A tail clone ``k`` steps before the first real slot maps to ``k`` steps
    before the end of the real range; a head clone ``k`` steps past the last
    real slot maps to ``k`` steps past the first one.
    """
    if zone is Zone.TAIL_CLONE:
        target = clone_count + item_count - (clone_count - position)
    elif zone is Zone.HEAD_CLONE:
        target = clone_count + (position - (clone_count + item_count))
    else:
        return position
    # Only differs from target when there are more clones than items
    return clone_count + (target - clone_count) % item_count


def resolve_position(position: int, clone_count: int, item_count: int) -> int:
    """Resolve any target Position, including transient out-of-range ones, to a real Position."""
    if 0 <= position < item_count + 2 * clone_count:
        zone = classify(position, clone_count, item_count)
        return equivalent_real_position(position, zone, clone_count, item_count)
    return clone_count + (position - clone_count) % item_count


@dataclass(frozen=True)
class CarouselState:
    """Snapshot of a carousel's position space.

    Attributes:
        position: Settled Position in the padded sequence.
        clone_count: Clones on each side of the real items.
        item_count: Number of real items.
        transition_state: Whether an animated move is in flight.
        target: Position the in-flight move is heading to, if any.
    """

    position: int
    clone_count: int
    item_count: int
    transition_state: TransitionState = TransitionState.IDLE
    target: int | None = None

    @property
    def padded_length(self) -> int:
        return self.item_count + 2 * self.clone_count

    @property
    def zone(self) -> Zone:
        return classify(self.position, self.clone_count, self.item_count)

    @property
    def real_index(self) -> int | None:
        return to_real_index(self.position, self.clone_count, self.item_count)

    @property
    def is_animating(self) -> bool:
        return self.transition_state is TransitionState.ANIMATING

    def animating_to(self, target: int) -> "CarouselState":
        return replace(self, transition_state=TransitionState.ANIMATING, target=target)

    def settled_at(self, position: int) -> "CarouselState":
        return replace(
            self,
            position=position,
            transition_state=TransitionState.IDLE,
            target=None,
        )

    def with_clone_count(self, clone_count: int, position: int) -> "CarouselState":
        """Re-express the state in a padded sequence with a different clone count."""
        return CarouselState(
            position=position,
            clone_count=clone_count,
            item_count=self.item_count,
        )
