"""Tests for input helpers."""

from carousel_engine.core.controls import Direction, direction_for_key, indicator_states


def test_arrow_keys_map_to_directions() -> None:
    assert direction_for_key("ArrowLeft") is Direction.PREV
    assert direction_for_key("ArrowRight") is Direction.NEXT


def test_other_keys_ignored() -> None:
    assert direction_for_key("Enter") is None
    assert direction_for_key("arrowleft") is None


def test_indicator_states_marks_current_only() -> None:
    assert indicator_states(2, 4) == [False, False, True, False]


def test_indicator_states_empty() -> None:
    assert indicator_states(0, 0) == []
