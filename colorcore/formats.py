"""Format selectors for CSS color output."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

# Percent-to-absolute chroma conventions for display: 100% is 0.4 in OKLCH and
# 150 in LCH.
OKLCH_CHROMA_PERCENT_SCALE = 0.4
LCH_CHROMA_PERCENT_SCALE = 150.0


class ColorFormat(str, Enum):
    HEX = "hex"
    HSL = "hsl"
    RGB = "rgb"
    OKLCH = "oklch"
    LCH = "lch"
    HSL_LEGACY = "hslLegacy"
    RGB_LEGACY = "rgbLegacy"
    HSB = "hsb"

    @property
    def display_name(self) -> str:
        return _TITLES[self]


_TITLES = {
    ColorFormat.HEX: "Hex",
    ColorFormat.HSL: "HSL",
    ColorFormat.RGB: "RGB",
    ColorFormat.OKLCH: "OKLCH",
    ColorFormat.LCH: "LCH",
    ColorFormat.HSL_LEGACY: "HSL (legacy)",
    ColorFormat.RGB_LEGACY: "RGB (legacy)",
    ColorFormat.HSB: "HSB",
}


class ColorStringFormat(BaseModel):
    """
    A format plus its options.

    Only hex uses the options: `is_uppercased` switches to uppercase digits and
    `has_prefix` controls the leading '#'.
    """

    model_config = ConfigDict(frozen=True)

    format: ColorFormat
    is_uppercased: bool = False
    has_prefix: bool = True

    @classmethod
    def hex(cls, is_uppercased: bool = False, has_prefix: bool = True) -> "ColorStringFormat":
        return cls(format=ColorFormat.HEX, is_uppercased=is_uppercased, has_prefix=has_prefix)

    @classmethod
    def of(cls, fmt: Union[ColorFormat, "ColorStringFormat", str]) -> "ColorStringFormat":
        """Accept a ColorFormat, its string value, or an existing ColorStringFormat."""
        if isinstance(fmt, ColorStringFormat):
            return fmt
        return cls(format=ColorFormat(fmt))
