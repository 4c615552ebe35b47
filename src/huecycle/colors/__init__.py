"""Color primitives shared by the generator, models and surfaces.

- `ColorHistory`: per-session index of issued colors
- `hex_of` / `parse_hex`: '#rrggbb' conversions
- `label_color_for`: readable RGBA label color for a background

The unique-color generator itself lives in `huecycle.core.color_space`.
"""

from .conversions import (
    COLOR_SPACE_SIZE,
    DARK_LABEL,
    LIGHT_LABEL,
    channels_of,
    color_key,
    hex_of,
    label_color_for,
    parse_hex,
    rgba_components,
)
from .history import ColorHistory

__all__ = [
    "COLOR_SPACE_SIZE",
    "ColorHistory",
    "DARK_LABEL",
    "LIGHT_LABEL",
    "channels_of",
    "color_key",
    "hex_of",
    "label_color_for",
    "parse_hex",
    "rgba_components",
]
