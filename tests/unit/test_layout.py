"""Tests for clone padding and track geometry."""

import pytest

from carousel_engine.core.errors import ConfigurationError, ErrorCategory
from carousel_engine.core.layout import (
    Geometry,
    build,
    build_slots,
    compute_item_width,
    pixel_offset_for,
)


class TestBuild:
    """Tests for build function."""

    @pytest.mark.parametrize("item_count", [2, 3, 4, 6, 9])
    @pytest.mark.parametrize("items_per_view", [1, 2, 3, 4])
    def test_padded_length(self, item_count: int, items_per_view: int) -> None:
        """Padded length should be items plus one view of clones per side."""
        layout = build(item_count, items_per_view)
        assert layout.clone_count == items_per_view
        assert layout.padded_length == item_count + 2 * items_per_view
        assert layout.first_real_position == items_per_view
        assert layout.loops

    def test_single_item_skips_cloning(self) -> None:
        """A single item cannot wrap around, so no clones are built."""
        layout = build(1, 3)
        assert layout.clone_count == 0
        assert layout.padded_length == 1
        assert not layout.loops

    def test_no_items_raises_configuration_error(self) -> None:
        """Should refuse to build a layout for zero items."""
        with pytest.raises(ConfigurationError) as exc_info:
            build(0, 3)
        assert exc_info.value.category == ErrorCategory.CONFIGURATION

    def test_items_per_view_clamped_to_one(self) -> None:
        """Non-positive items-per-view should be treated as one."""
        layout = build(4, 0)
        assert layout.items_per_view == 1
        assert layout.clone_count == 1

    def test_position_for(self) -> None:
        """Real index should map past the tail clones."""
        layout = build(6, 3)
        assert layout.position_for(0) == 3
        assert layout.position_for(5) == 8


class TestBuildSlots:
    """Tests for build_slots function."""

    def test_tail_and_head_clone_sources(self) -> None:
        """Tail clones copy the last items, head clones the first ones."""
        slots = build_slots(build(6, 3))
        assert [slot.source_index for slot in slots] == [
            3, 4, 5,
            0, 1, 2, 3, 4, 5,
            0, 1, 2,
        ]
        assert [slot.position for slot in slots] == list(range(12))

    def test_clones_are_hidden(self) -> None:
        """Only clone slots should be hidden from assistive technology."""
        slots = build_slots(build(4, 1))
        assert [slot.aria_hidden for slot in slots] == [
            True, False, False, False, False, True,
        ]

    def test_more_clones_than_items_wraps_sources(self) -> None:
        """With fewer items than one view, clone sources wrap around."""
        slots = build_slots(build(2, 3))
        assert [slot.source_index for slot in slots] == [1, 0, 1, 0, 1, 0, 1, 0]

    def test_single_item_has_no_clones(self) -> None:
        slots = build_slots(build(1, 2))
        assert len(slots) == 1
        assert not slots[0].is_clone


class TestGeometry:
    """Tests for item width and pixel offsets."""

    def test_item_width_fills_container(self) -> None:
        """Three items with two 20px gaps should fill 1240px."""
        assert compute_item_width(1240, 3, 20) == 400

    def test_single_item_ignores_gap(self) -> None:
        assert compute_item_width(800, 1, 20) == 800

    def test_item_width_never_negative(self) -> None:
        """Gaps wider than the container should clamp the width to zero."""
        assert compute_item_width(30, 4, 20) == 0

    def test_item_width_clamps_items_per_view(self) -> None:
        assert compute_item_width(500, 0, 20) == 500

    def test_pixel_offset(self) -> None:
        """Offset should move one item plus one gap per position."""
        assert pixel_offset_for(3, 400, 20) == -1260
        assert pixel_offset_for(0, 400, 20) == 0

    def test_geometry_offset_for(self) -> None:
        geometry = Geometry(item_width=400, gap_px=20)
        assert geometry.offset_for(2) == pixel_offset_for(2, 400, 20)
