"""Shared pytest fixtures for carousel engine tests."""

import pytest

from carousel_engine.core.config import CarouselConfig
from tests.mocks import ManualScheduler, RecordingTrack

# Configure pytest-asyncio for the async integration tests
pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a virtual clock starting at t=0.

    Returns:
        ManualScheduler: Timers run only when the test advances the clock.
    """
    return ManualScheduler()


@pytest.fixture
def track() -> RecordingTrack:
    """Provide a recording track 1200px wide in a 1280px viewport.

    The viewport width selects the wide breakpoint of the default config.

    Returns:
        RecordingTrack: A track that records every call made on it.
    """
    return RecordingTrack(container_width=1200.0, viewport_width=1280.0)


@pytest.fixture
def slider_config() -> CarouselConfig:
    """One item per view at every breakpoint, no autoplay."""
    return CarouselConfig.single()


@pytest.fixture
def multi_config() -> CarouselConfig:
    """Three items per view when wide, one when narrow."""
    return CarouselConfig(
        items_per_view=3,
        items_per_view_medium=2,
        items_per_view_narrow=1,
        gap_px=20,
    )
