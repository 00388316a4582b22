"""Test doubles for the carousel ports."""

from tests.mocks.scheduler import ManualScheduler, ManualTimer
from tests.mocks.track import RecordingTrack

__all__ = [
    "ManualScheduler",
    "ManualTimer",
    "RecordingTrack",
]
