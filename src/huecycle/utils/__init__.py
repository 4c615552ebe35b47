"""Utility modules for huecycle."""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
