"""Textual application that cycles a full-screen color panel."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Footer

from huecycle.core import CycleSession
from huecycle.exceptions import ColorSpaceExhaustedError
from huecycle.models import CycleConfig

from .widgets import ColorPanel, StatusBar

logger = logging.getLogger(__name__)


class HueCycleApp(App):
    """
    Textual TUI for huecycle.

    The app hosts one CycleSession whose surface is the ColorPanel. Textual's
    `set_interval` timer drives the ticks: the first color is applied on
    mount, the rest once per interval, until the session finishes.
    """

    TITLE = "huecycle"

    BINDINGS = [
        Binding("r", "restart", "Restart", show=True),
        Binding("space", "toggle_pause", "Pause/Resume", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, cycle_config: Optional[CycleConfig] = None):
        """
        Initialize the app.

        Args:
            cycle_config: Session settings (defaults to CycleConfig())
        """
        super().__init__()
        self.cycle_config = cycle_config or CycleConfig()
        self.color_panel = ColorPanel()
        self.status_bar: Optional[StatusBar] = None
        self.cycle_session = CycleSession(surface=self.color_panel, config=self.cycle_config)
        self._cycle_timer: Optional[Timer] = None
        self._paused = False

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        self.status_bar = StatusBar()
        yield self.color_panel
        yield self.status_bar
        yield Footer()

    def on_mount(self) -> None:
        """Apply the first color and start the timer."""
        self._begin()

    def on_unmount(self) -> None:
        """Discard the session history when the app closes."""
        self._stop_timer()
        if not self.cycle_session.is_finished:
            self.cycle_session.stop()

    # =================================================================
    # Actions
    # =================================================================

    def action_restart(self) -> None:
        """Start a fresh session with an empty history."""
        self._stop_timer()
        if not self.cycle_session.is_finished:
            self.cycle_session.stop()
        self.cycle_session.restart()
        self._paused = False
        self._begin()

    def action_toggle_pause(self) -> None:
        """Pause or resume cycling."""
        if self._cycle_timer is None:
            return

        if self._paused:
            self._cycle_timer.resume()
        else:
            self._cycle_timer.pause()
        self._paused = not self._paused
        logger.info(f"Cycling {'paused' if self._paused else 'resumed'}")
        self._refresh_status()

    # =================================================================
    # Cycling
    # =================================================================

    def _begin(self) -> None:
        self._advance()
        if not self.cycle_session.is_finished:
            self._cycle_timer = self.set_interval(self.cycle_config.interval, self._advance)

    def _advance(self) -> None:
        """Timer callback: apply one color."""
        try:
            self.cycle_session.tick()
        except ColorSpaceExhaustedError as e:
            logger.error(f"Cycling stopped: {e.technical_message}")
            self.notify(e.get_full_message(), severity="error")

        if self.cycle_session.is_finished:
            self._stop_timer()
        self._refresh_status()

    def _stop_timer(self) -> None:
        if self._cycle_timer is not None:
            self._cycle_timer.stop()
            self._cycle_timer = None

    def _refresh_status(self) -> None:
        if self.status_bar is None:
            return
        last = self.cycle_session.last_color
        self.status_bar.update_state(
            ticks=self.cycle_session.ticks,
            cycles=self.cycle_config.cycles,
            hex_value=last.hex if last else None,
            paused=self._paused,
            finished=self.cycle_session.is_finished,
        )
