"""Layout building for the padded clone sequence.

The padded sequence is laid out as ``[tail clones][real items][head clones]``
with ``clone_count`` clones on each side, enough to fill one full view past
either end of the real items. Everything here is pure computation; applying
the result to a track is the job of a ``TrackSurface``.
"""

from dataclasses import dataclass

from carousel_engine.core.errors import ConfigurationError

# Fewer items than this cannot wrap around
MIN_LOOPING_ITEMS = 2


@dataclass(frozen=True)
class Layout:
    """Clone padding for a given item count and items-per-view.

    Attributes:
        item_count: Number of real items.
        items_per_view: Items visible at once.
        clone_count: Clones on each side of the real items (0 when not looping).
    """

    item_count: int
    items_per_view: int
    clone_count: int

    @property
    def padded_length(self) -> int:
        return self.item_count + 2 * self.clone_count

    @property
    def loops(self) -> bool:
        return self.clone_count > 0

    @property
    def first_real_position(self) -> int:
        return self.clone_count

    def position_for(self, real_index: int) -> int:
        """Position of a real item in this layout's padded sequence."""
        return real_index + self.clone_count


@dataclass(frozen=True)
class PaddedSlot:
    """One entry of the padded sequence.

    Attributes:
        position: Index within the padded sequence.
        source_index: Real item this slot renders.
        is_clone: True for presentational duplicates.
    """

    position: int
    source_index: int
    is_clone: bool

    @property
    def aria_hidden(self) -> bool:
        # Clones must never answer "which real item is this"
        return self.is_clone


@dataclass(frozen=True)
class Geometry:
    """Pixel geometry of the track for the current layout."""

    item_width: float
    gap_px: int

    def offset_for(self, position: int) -> float:
        return pixel_offset_for(position, self.item_width, self.gap_px)


def build(item_count: int, items_per_view: int) -> Layout:
    """Build the clone padding for an item set.

    Args:
        item_count: Number of real items, at least 1.
        items_per_view: Items visible at once; values below 1 are clamped.

    Returns:
        The layout. With fewer than two items no clones are added and the
        carousel is a static single view.

    Raises:
        ConfigurationError: If there are no items.
    """
    if item_count < 1:
        raise ConfigurationError("Carousel has no items")
    items_per_view = max(1, items_per_view)
    clone_count = items_per_view if item_count >= MIN_LOOPING_ITEMS else 0
    return Layout(
        item_count=item_count,
        items_per_view=items_per_view,
        clone_count=clone_count,
    )


def build_slots(layout: Layout) -> list[PaddedSlot]:
    """Expand a layout into its padded sequence of slots.

    Tail clones copy the last ``clone_count`` items in order and head clones
    copy the first ``clone_count`` items. When there are more clones than
    items the sources wrap around.
    """
    count = layout.item_count
    clones = layout.clone_count
    slots: list[PaddedSlot] = []

    for offset in range(clones):
        slots.append(
            PaddedSlot(
                position=offset,
                source_index=(count - clones + offset) % count,
                is_clone=True,
            )
        )
    for index in range(count):
        slots.append(
            PaddedSlot(position=clones + index, source_index=index, is_clone=False)
        )
    for offset in range(clones):
        slots.append(
            PaddedSlot(
                position=clones + count + offset,
                source_index=offset % count,
                is_clone=True,
            )
        )
    return slots


def compute_item_width(container_width: float, items_per_view: int, gap_px: int) -> float:
    """Pixel width of one item so that ``items_per_view`` items and their gaps fill the container."""
    items_per_view = max(1, items_per_view)
    total_gap = gap_px * (items_per_view - 1)
    return max(0.0, (container_width - total_gap) / items_per_view)


def pixel_offset_for(position: int, item_width: float, gap_px: int) -> float:
    """Track translation (px) that brings ``position`` to the left edge."""
    return -(position * (item_width + gap_px))
