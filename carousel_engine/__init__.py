"""Infinite-loop carousel engine.

A platform-agnostic engine that lets a finite list of items be browsed as if
it wrapped around seamlessly. Rendering is delegated to a ``TrackSurface``
implementation and timers to a ``Scheduler``; see ``carousel_engine.ports``.
"""

__version__ = "1.0.0"
