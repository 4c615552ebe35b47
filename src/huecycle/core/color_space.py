"""Unique random color generator."""

import logging
import random
from typing import Any, Optional

from huecycle.colors import ColorHistory, channels_of, hex_of, label_color_for
from huecycle.exceptions import ColorSpaceExhaustedError
from huecycle.models import Color

logger = logging.getLogger(__name__)


class ColorSpace:
    """
    Draws random 24-bit colors that have not been issued in a history.

    Each channel is drawn independently and uniformly from 0-255. A draw
    that is already in the history is discarded and retried. By default
    retries are unbounded: collisions are rare until the 16.7M color space
    is nearly exhausted. Pass `max_retries` to give up with
    ColorSpaceExhaustedError instead of spinning in a crowded space.

    Example:
        ```python
        space = ColorSpace()
        history = ColorHistory()
        color = space.next_unique(history)
        surface.set_background(color.hex)
        ```
    """

    def __init__(self, rng: Optional[random.Random] = None, max_retries: Optional[int] = None):
        """
        Initialize the color space.

        Args:
            rng: Random source (defaults to a fresh, unseeded random.Random)
            max_retries: Consecutive duplicate draws allowed before giving up
                         (None = unbounded)
        """
        if max_retries is not None and max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")
        self._rng = rng or random.Random()
        self._max_retries = max_retries

    @property
    def max_retries(self) -> Optional[int]:
        """Retry cap, or None when retries are unbounded."""
        return self._max_retries

    def random_channel(self) -> int:
        """Draw one 8-bit channel value (0-255 inclusive)."""
        return self._rng.randint(0, 255)

    def next_unique(self, history: ColorHistory) -> Color:
        """
        Draw a color not yet in `history` and record it.

        Args:
            history: The session's color history

        Returns:
            The new color, with its hex and label fields

        Raises:
            ColorSpaceExhaustedError: If the history already holds every color,
                or the retry cap was hit
        """
        if history.is_exhausted:
            raise ColorSpaceExhaustedError(attempts=0, recorded=len(history))

        duplicates = 0
        while True:
            candidate = (self.random_channel(), self.random_channel(), self.random_channel())

            if not history.contains(candidate):
                break

            logger.debug(f"Color already used, drawing again: {candidate}")
            duplicates += 1
            if self._max_retries is not None and duplicates >= self._max_retries:
                raise ColorSpaceExhaustedError(
                    attempts=duplicates,
                    recorded=len(history),
                    max_retries=self._max_retries,
                )

        history.record(candidate)
        red, green, blue = candidate
        return Color(red=red, green=green, blue=blue)

    @staticmethod
    def hex_of(red: int, green: int, blue: int) -> str:
        """Format channels as '#rrggbb'."""
        return hex_of(red, green, blue)

    @staticmethod
    def label_color_for(color: Any) -> str:
        """
        RGBA label color that stays readable on `color`.

        Args:
            color: Color, or (red, green, blue) sequence

        Raises:
            MalformedColorError: If `color` is not a valid triple
        """
        return label_color_for(*channels_of(color))
