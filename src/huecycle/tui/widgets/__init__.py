"""Reusable UI widgets for the TUI."""

from .color_panel import ColorPanel
from .status_bar import StatusBar

__all__ = [
    "ColorPanel",
    "StatusBar",
]
