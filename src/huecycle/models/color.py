"""Color model for cycled backgrounds."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from huecycle.colors.conversions import hex_of, label_color_for, parse_hex


class Color(BaseModel):
    """Standard 8-bit RGB color with its hex form and label color.

    The model is frozen so colors are hashable and can't change once issued.
    `hex` and `label` are derived from the channels and included in
    `model_dump()` output.
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")

    @computed_field
    @property
    def hex(self) -> str:
        """CSS hex string, lowercase (e.g., '#00abff')."""
        return hex_of(self.red, self.green, self.blue)

    @computed_field
    @property
    def label(self) -> str:
        """RGBA color for a label drawn on top of this color."""
        return label_color_for(self.red, self.green, self.blue)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from '#rrggbb'.

        Raises:
            MalformedColorError: If the string is not a valid hex color

        Example:
            >>> Color.from_hex("#00abff").to_rgb_tuple()
            (0, 171, 255)
        """
        red, green, blue = parse_hex(value)
        return cls(red=red, green=green, blue=blue)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.red, self.green, self.blue)
