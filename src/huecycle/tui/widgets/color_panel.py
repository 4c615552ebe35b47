"""Full-screen panel whose background is cycled."""

from typing import Optional

from textual.color import Color as TextualColor
from textual.widgets import Static


class ColorPanel(Static):
    """
    Textual surface for a CycleSession.

    The background follows the session; the label (when enabled) is the
    upper-cased hex value, centered, in the session's contrast color.
    """

    DEFAULT_CSS = """
    ColorPanel {
        width: 1fr;
        height: 1fr;
        content-align: center middle;
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        """Initialize an unlabelled panel."""
        super().__init__("")
        self.current_hex: Optional[str] = None
        self.label_text: Optional[str] = None
        self.label_color: Optional[str] = None

    def set_background(self, hex_value: str) -> None:
        self.current_hex = hex_value
        self.styles.background = TextualColor.parse(hex_value)

    def set_label(self, text: str, color: str) -> None:
        # Style setters split strings on spaces, so "rgba(0, 0, 0, 0.6)" must be parsed first
        self.label_text = text.upper()
        self.label_color = color
        self.styles.color = TextualColor.parse(color)
        self.update(self.label_text)
