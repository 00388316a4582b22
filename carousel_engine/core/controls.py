"""Input helpers shared by carousel bindings."""

from enum import Enum


class Direction(Enum):
    PREV = "prev"
    NEXT = "next"


# KeyboardEvent.key values handled by the carousel
NAVIGATION_KEYS: dict[str, Direction] = {
    "ArrowLeft": Direction.PREV,
    "ArrowRight": Direction.NEXT,
}


def direction_for_key(key: str) -> Direction | None:
    return NAVIGATION_KEYS.get(key)


def indicator_states(real_index: int, item_count: int) -> list[bool]:
    """One flag per real item, set only for the current one (dot navigation)."""
    return [index == real_index for index in range(item_count)]
