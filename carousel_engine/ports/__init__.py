"""Ports (interfaces) for the carousel engine.

This module contains Protocol definitions that define the boundaries between
the engine core and the outside world: the rendered track and the timer
source.
"""

from carousel_engine.ports.scheduling import Scheduler, TimerHandle
from carousel_engine.ports.track import ListenerHandle, TrackSurface

__all__ = [
    # Rendering
    "ListenerHandle",
    "TrackSurface",
    # Timers
    "Scheduler",
    "TimerHandle",
]
