"""Data models for huecycle."""

from .color import Color
from .config import AppConfig, CycleConfig

__all__ = [
    "AppConfig",
    "Color",
    "CycleConfig",
]
