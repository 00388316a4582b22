"""Adapters implementing the carousel ports."""

from carousel_engine.adapters.asyncio_scheduler import AsyncioScheduler
from carousel_engine.adapters.simulated_track import SimulatedTrack

__all__ = [
    "AsyncioScheduler",
    "SimulatedTrack",
]
