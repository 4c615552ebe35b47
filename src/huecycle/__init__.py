"""huecycle: cycle a surface through unique, never-repeating background colors."""

__version__ = "0.1.0"

from .colors import ColorHistory
from .core import ColorSpace, CycleSession
from .models import Color, CycleConfig

__all__ = [
    "Color",
    "ColorHistory",
    "ColorSpace",
    "CycleConfig",
    "CycleSession",
]
