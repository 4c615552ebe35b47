"""Pure color conversions: hex strings, 24-bit keys and label contrast.

These helpers work on plain integers so they can be shared by the Color
model, the history index and the console surface without import cycles.
"""

from collections.abc import Sequence
from typing import Any

from huecycle.exceptions import MalformedColorError

CHANNEL_MAX = 255
COLOR_SPACE_SIZE = 256 ** 3  # 16,777,216

LIGHT_LABEL = "rgba(255, 255, 255, 0.95)"
DARK_LABEL = "rgba(0, 0, 0, 0.6)"

# Contrast thresholds, kept literal for compatibility with existing labels
_DARK_SUM_MAX = 300
_GREEN_BRIGHT = 170
_RED_BLUE_BRIGHT = 409


def hex_of(red: int, green: int, blue: int) -> str:
    """Format a triple as '#rrggbb' (lowercase, zero-padded).

    Example:
        >>> hex_of(0, 171, 255)
        '#00abff'
    """
    return f"#{red:02x}{green:02x}{blue:02x}"


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse '#rrggbb' or 'rrggbb' (any case) into a channel triple.

    Raises:
        MalformedColorError: If the string is not six hex digits
    """
    if not isinstance(value, str):
        raise MalformedColorError(value, "hex color must be a string")

    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise MalformedColorError(value, "hex color must have exactly 6 digits")

    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError as e:
        raise MalformedColorError(value, "hex color contains non-hex digits") from e


def label_color_for(red: int, green: int, blue: int) -> str:
    """Pick an RGBA label color that stays readable on the given background.

    Dark backgrounds get a near-opaque white label. Bright backgrounds, and
    green-heavy ones, get a translucent black label.
    """
    total = red + green + blue
    if total > _DARK_SUM_MAX:
        if green > _GREEN_BRIGHT or (total - green) > _RED_BLUE_BRIGHT:
            return DARK_LABEL
        return LIGHT_LABEL
    return LIGHT_LABEL


def rgba_components(css: str) -> tuple[int, int, int, float]:
    """Split an 'rgba(r, g, b, a)' string into its components."""
    inner = css.strip()
    if not inner.startswith("rgba(") or not inner.endswith(")"):
        raise MalformedColorError(css, "expected 'rgba(r, g, b, a)'")
    parts = [p.strip() for p in inner[5:-1].split(",")]
    if len(parts) != 4:
        raise MalformedColorError(css, "expected four rgba components")
    try:
        return int(parts[0]), int(parts[1]), int(parts[2]), float(parts[3])
    except ValueError as e:
        raise MalformedColorError(css, "rgba components must be numeric") from e


def channels_of(value: Any) -> tuple[int, int, int]:
    """Validate a color-like value and return its (red, green, blue) triple.

    Accepts anything with a ``to_rgb_tuple()`` method (such as ``Color``) or a
    sequence of three integers in 0-255.

    Raises:
        MalformedColorError: If the value is not a valid 8-bit triple
    """
    if hasattr(value, "to_rgb_tuple"):
        value = value.to_rgb_tuple()

    if value is None:
        raise MalformedColorError(value, "no color given")
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedColorError(value, "expected a sequence of three channels")
    if len(value) != 3:
        raise MalformedColorError(value, f"expected 3 channels, got {len(value)}")

    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise MalformedColorError(value, f"channel {channel!r} is not an integer")
        if not 0 <= channel <= CHANNEL_MAX:
            raise MalformedColorError(value, f"channel {channel} is outside 0-255")

    return value[0], value[1], value[2]


def color_key(value: Any) -> int:
    """Encode a color-like value as a 24-bit integer (red << 16 | green << 8 | blue).

    Raises:
        MalformedColorError: If the value is not a valid 8-bit triple
    """
    red, green, blue = channels_of(value)
    return (red << 16) | (green << 8) | blue
