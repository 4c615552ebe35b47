"""CLI commands for huecycle."""

from .color import color
from .config import config
from .cycle import cycle
from .tui import tui

__all__ = ["color", "config", "cycle", "tui"]
