"""Core color generation and session driving."""

from .color_space import ColorSpace
from .session import CycleSession

__all__ = ["ColorSpace", "CycleSession"]
