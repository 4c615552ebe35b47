"""Terminal surface: one 24-bit colored swatch line per cycle."""

import logging
from typing import IO, TYPE_CHECKING, Optional

import click

from huecycle.colors import parse_hex, rgba_components
from huecycle.protocols import CycleEvent

if TYPE_CHECKING:
    from huecycle.core.session import CycleSession
    from huecycle.models import Color

logger = logging.getLogger(__name__)


class ConsoleSurface:
    """
    Paints each cycled color as a full-width swatch in the terminal.

    Implements both Surface (receives background and label) and
    CycleObserver (draws once per applied color, after the label is known).
    Labels are upper-cased and centered; the label's alpha is dropped
    because terminals only support opaque colors.
    """

    def __init__(self, width: int = 40, file: Optional[IO[str]] = None, color: Optional[bool] = None):
        """
        Initialize console surface.

        Args:
            width: Swatch width in characters
            file: Output stream (defaults to stdout)
            color: Force ANSI colors on/off (None = auto-detect, as click.echo does)
        """
        self._width = width
        self._file = file
        self._color = color
        self._background: Optional[str] = None
        self._label: Optional[tuple[str, str]] = None

    @property
    def background(self) -> Optional[str]:
        return self._background

    def set_background(self, hex_value: str) -> None:
        self._background = hex_value
        self._label = None

    def set_label(self, text: str, color: str) -> None:
        self._label = (text, color)

    def on_cycle_event(
        self, event: CycleEvent, session: "CycleSession", color: Optional["Color"] = None
    ) -> None:
        """Draw the swatch once a color is applied; summarize at the end."""
        if event == CycleEvent.COLOR_APPLIED:
            self.render()
        elif event == CycleEvent.SESSION_FINISHED:
            click.echo(
                click.style(f"{session.ticks} colors shown", dim=True),
                file=self._file,
                color=self._color,
            )

    def render(self) -> None:
        """Write the current background (and label) as one line."""
        if self._background is None:
            return

        bg = parse_hex(self._background)
        if self._label:
            text, label_color = self._label
            fg: Optional[tuple[int, int, int]] = rgba_components(label_color)[:3]
            content = text.upper().center(self._width)
        else:
            fg = None
            content = " " * self._width

        click.echo(click.style(content, fg=fg, bg=bg, bold=True), file=self._file, color=self._color)
