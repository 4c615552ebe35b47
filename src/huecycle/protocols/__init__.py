"""Protocol and event definitions for huecycle."""

from .events import CycleEvent
from .observers import CycleObserver, Surface

__all__ = [
    "CycleEvent",
    "CycleObserver",
    "Surface",
]
