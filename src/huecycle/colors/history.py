"""Per-session record of issued colors."""

import logging
from typing import Any

from huecycle.exceptions import MalformedColorError

from .conversions import COLOR_SPACE_SIZE, color_key

logger = logging.getLogger(__name__)


class ColorHistory:
    """
    Set of colors already issued during one cycling session.

    Colors are stored as 24-bit integer keys, so membership checks are O(1)
    on average regardless of how many colors have been issued.

    A history belongs to exactly one session. It is not thread-safe; the
    owning session issues requests serially.

    Malformed values (None, wrong length, non-integer or out-of-range
    channels) are logged and ignored rather than raised, so a bad value can
    never stop a running cycle.
    """

    def __init__(self) -> None:
        """Initialize an empty history."""
        self._keys: set[int] = set()

    def contains(self, color: Any) -> bool:
        """
        Check whether a color has already been recorded.

        Args:
            color: (red, green, blue) sequence or object with to_rgb_tuple()

        Returns:
            True if recorded; False if not recorded or malformed
        """
        try:
            key = color_key(color)
        except MalformedColorError as e:
            logger.warning(f"Ignoring lookup of malformed color: {e.technical_message}")
            return False
        return key in self._keys

    def record(self, color: Any) -> None:
        """
        Mark a color as issued (idempotent).

        Args:
            color: (red, green, blue) sequence or object with to_rgb_tuple()
        """
        try:
            key = color_key(color)
        except MalformedColorError as e:
            logger.warning(f"Invalid color, not recorded: {e.technical_message}")
            return

        if key in self._keys:
            logger.debug(f"Color already recorded: #{key:06x}")
            return

        self._keys.add(key)

    def reset(self) -> None:
        """Discard every recorded color."""
        if self._keys:
            logger.debug(f"Resetting color history ({len(self._keys)} colors)")
        self._keys = set()

    @property
    def is_exhausted(self) -> bool:
        """True once every color in the 24-bit space has been recorded."""
        return len(self._keys) >= COLOR_SPACE_SIZE

    def __contains__(self, color: Any) -> bool:
        return self.contains(color)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"ColorHistory(recorded={len(self._keys)})"
