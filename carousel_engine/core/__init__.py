"""Core carousel engine.

This module contains the platform-agnostic pieces of the infinite-loop
carousel: layout building, position space bookkeeping, the transition state
machine, autoplay and responsive re-layout.
"""

from carousel_engine.core.autoplay import AutoplayScheduler
from carousel_engine.core.carousel import Carousel
from carousel_engine.core.config import Breakpoints, CarouselConfig
from carousel_engine.core.controls import Direction, indicator_states
from carousel_engine.core.errors import (
    CarouselError,
    ConfigurationError,
    ErrorCategory,
    OutOfRangeError,
)
from carousel_engine.core.layout import (
    Geometry,
    Layout,
    PaddedSlot,
    build,
    build_slots,
    compute_item_width,
    pixel_offset_for,
)
from carousel_engine.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)
from carousel_engine.core.position import (
    CarouselState,
    TransitionState,
    Zone,
    classify,
    equivalent_real_position,
    resolve_position,
    to_real_index,
)
from carousel_engine.core.responsive import ResponsiveResizer
from carousel_engine.core.transition import TransitionController

__all__ = [
    # Facade
    "Carousel",
    # Configuration
    "Breakpoints",
    "CarouselConfig",
    # Controls
    "Direction",
    "indicator_states",
    # Errors
    "CarouselError",
    "ConfigurationError",
    "ErrorCategory",
    "OutOfRangeError",
    # Layout
    "Geometry",
    "Layout",
    "PaddedSlot",
    "build",
    "build_slots",
    "compute_item_width",
    "pixel_offset_for",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    # Position space
    "CarouselState",
    "TransitionState",
    "Zone",
    "classify",
    "equivalent_real_position",
    "resolve_position",
    "to_real_index",
    # Components
    "AutoplayScheduler",
    "ResponsiveResizer",
    "TransitionController",
]
