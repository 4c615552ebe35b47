"""Color generation exceptions.

This module defines exceptions raised by the color core:
- ColorError: Base class for color errors
- MalformedColorError: A value cannot be turned into a channel key
- ColorSpaceExhaustedError: No unique color could be drawn
- SessionError: A cycle session was driven in an invalid state
"""

from typing import Any, Optional

from .base import HueCycleError


class ColorError(HueCycleError):
    """Color value or generation failed."""
    pass


class MalformedColorError(ColorError):
    """Value is not a (red, green, blue) triple of 8-bit integers."""

    def __init__(self, value: Any, reason: str):
        """
        Initialize malformed color error.

        Args:
            value: The offending value
            reason: Why it could not be used as a color
        """
        super().__init__(
            user_message=f"Invalid color {value!r}: {reason}",
            technical_message=f"Cannot build color key from {value!r} ({type(value).__name__}): {reason}",
            recoverable=True,
            recovery_hint="Colors are three integers between 0 and 255, e.g. (0, 171, 255)",
        )
        self.value = value
        self.reason = reason


class ColorSpaceExhaustedError(ColorError):
    """No unique color could be produced for a history."""

    def __init__(self, attempts: int, recorded: int, max_retries: Optional[int] = None):
        """
        Initialize exhaustion error.

        Args:
            attempts: Number of draws made before giving up
            recorded: Number of colors already recorded in the history
            max_retries: The retry cap that was hit (None if the space is full)
        """
        if max_retries is None:
            user_msg = "Every color has already been used in this session"
        else:
            user_msg = f"No unique color found after {attempts} attempts"

        super().__init__(
            user_message=user_msg,
            technical_message=(
                f"Color space exhausted: attempts={attempts}, recorded={recorded}, "
                f"max_retries={max_retries}"
            ),
            recoverable=True,
            recovery_hint="Use fewer cycles per session, or raise --max-retries",
        )
        self.attempts = attempts
        self.recorded = recorded
        self.max_retries = max_retries


class SessionError(HueCycleError):
    """Cycle session was used in an invalid state."""
    pass
