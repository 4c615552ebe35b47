"""Status bar widget showing session progress."""

from typing import Optional

from textual.widgets import Static


class StatusBar(Static):
    """
    Status bar displaying the current session state.

    Shows:
    - Progress (cycle n of total)
    - Current color
    - Paused / finished state
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.paused {
        background: $warning;
    }

    StatusBar.finished {
        background: $success;
    }
    """

    def __init__(self) -> None:
        """Initialize status bar."""
        super().__init__()
        self._ticks = 0
        self._cycles = 0
        self._hex: Optional[str] = None
        self._paused = False
        self._finished = False
        self._update_display()

    def update_state(
        self,
        ticks: int,
        cycles: int,
        hex_value: Optional[str],
        paused: bool = False,
        finished: bool = False,
    ) -> None:
        """
        Update all status information.

        Args:
            ticks: Colors shown so far
            cycles: Colors per session
            hex_value: Current color, if any
            paused: Whether the timer is paused
            finished: Whether the session finished
        """
        self._ticks = ticks
        self._cycles = cycles
        self._hex = hex_value
        self._paused = paused
        self._finished = finished
        self._update_display()

    @property
    def status_text(self) -> str:
        """Plain status line text."""
        parts = [f"Cycle {self._ticks}/{self._cycles}"]
        if self._hex:
            parts.append(self._hex)
        if self._finished:
            parts.append("finished (r to restart)")
        elif self._paused:
            parts.append("paused")
        return " | ".join(parts)

    def _update_display(self) -> None:
        """Update the status bar display."""
        self.set_class(self._paused and not self._finished, "paused")
        self.set_class(self._finished, "finished")
        self.update(self.status_text)
