"""Renderable surfaces for color sessions.

The Textual surface lives in `huecycle.tui.widgets` so the terminal UI
stack is only imported when it is used.
"""

from .console import ConsoleSurface

__all__ = ["ConsoleSurface"]
