"""
Value types shared by every conversion.

ColorValue is the common currency: gamma-encoded sRGB plus alpha, each nominally
in 0...1. Components outside that range (wide gamut) are kept as-is; only the
formatter clamps, right before quantizing.
"""

import logging
import math
import random
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict

from colorcore.errors import ColorSpaceConversionError
from colorcore.formats import ColorFormat, ColorStringFormat
from colorcore.numeric import clamp, round_half_away, to_byte

logger = logging.getLogger(__name__)


class ColorValue(BaseModel):
    """An sRGB color with alpha."""

    model_config = ConfigDict(frozen=True)

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def opacity(self) -> float:
        return self.alpha

    @classmethod
    def from_hex(cls, hex_value: int, alpha: float = 1.0) -> "ColorValue":
        """
        Create from a packed 0xRRGGBB integer.

        ColorValue.from_hex(0xFFFFFF) is opaque white.
        """
        return cls(
            red=((hex_value >> 16) & 0xFF) / 255,
            green=((hex_value >> 8) & 0xFF) / 255,
            blue=(hex_value & 0xFF) / 255,
            alpha=alpha,
        )

    @classmethod
    def random_avoiding_black_and_white(cls, rng: Optional[random.Random] = None) -> "ColorValue":
        """A random opaque color that is never too dark or too washed out."""
        rng = rng or random.Random()
        return cls.from_hsb(
            HSBA(
                hue=rng.uniform(0, 1),
                saturation=rng.uniform(0.5, 1),
                brightness=rng.uniform(0.5, 1),
                alpha=1.0,
            )
        )

    @property
    def hex(self) -> int:
        """Packed 0xRRGGBB, channels clamped and rounded."""
        return to_byte(self.red) << 16 | to_byte(self.green) << 8 | to_byte(self.blue)

    @property
    def hex_with_alpha(self) -> int:
        """Packed 0xRRGGBBAA."""
        return self.hex << 8 | round_half_away(clamp(self.alpha, 0.0, 1.0) * 0xFF)

    # Conversions live in colorcore.spaces and colorcore.formatter.

    def to_hsb(self) -> "HSBA":
        from colorcore import spaces
        return spaces.to_hsb(self)

    def to_hsl(self) -> "HSLA":
        from colorcore import spaces
        return spaces.to_hsl(self)

    def to_lch(self) -> "LCH":
        from colorcore import spaces
        return spaces.to_lch(self)

    def to_oklch(self) -> "OKLCH":
        from colorcore import spaces
        return spaces.to_oklch(self)

    @classmethod
    def from_hsb(cls, hsb: "HSBA") -> "ColorValue":
        from colorcore import spaces
        return spaces.from_hsb(hsb)

    @classmethod
    def from_hsl(cls, hsl: "HSLA") -> "ColorValue":
        from colorcore import spaces
        return spaces.from_hsl(hsl)

    def format(self, fmt: Union[ColorFormat, ColorStringFormat, str]) -> str:
        """Format as a CSS string; fmt is a ColorFormat or ColorStringFormat."""
        from colorcore.formatter import format_color
        return format_color(self, fmt)


class HSBA(BaseModel):
    """Hue, saturation, brightness and alpha; hue in 0...1."""

    model_config = ConfigDict(frozen=True)

    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0

    def to_color_value(self) -> ColorValue:
        from colorcore import spaces
        return spaces.from_hsb(self)


class HSLA(BaseModel):
    """Hue, saturation, lightness and alpha; hue in 0...1."""

    model_config = ConfigDict(frozen=True)

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def to_color_value(self) -> ColorValue:
        from colorcore import spaces
        return spaces.from_hsl(self)


class LCH(BaseModel):
    """CIE LCH: lightness 0...100, chroma 0...~150, hue in degrees."""

    model_config = ConfigDict(frozen=True)

    lightness: float
    chroma: float
    hue: float
    alpha: float = 1.0

    def to_color_value(self) -> ColorValue:
        from colorcore import spaces
        return spaces.from_lch(self)


class OKLCH(BaseModel):
    """OKLCH: lightness 0...1, chroma 0...~0.4, hue in degrees."""

    model_config = ConfigDict(frozen=True)

    lightness: float
    chroma: float
    hue: float
    alpha: float = 1.0

    def to_color_value(self) -> ColorValue:
        from colorcore import spaces
        return spaces.from_oklch(self)


def ensure_color_value(value: Any) -> ColorValue:
    """
    Normalize anything RGB-expressible to a ColorValue.

    Accepts a ColorValue, any of the HSBA/HSLA/LCH/OKLCH models, a sequence of
    3 or 4 numbers (red, green, blue[, alpha]) or a mapping with red/green/blue
    and optional alpha keys. Anything else raises ColorSpaceConversionError.
    """
    if isinstance(value, ColorValue):
        color = value
    elif isinstance(value, (HSBA, HSLA, LCH, OKLCH)):
        color = value.to_color_value()
    elif isinstance(value, Mapping):
        missing = [key for key in ("red", "green", "blue") if key not in value]
        if missing:
            logger.warning(f"Color mapping is missing components: {missing}")
            raise ColorSpaceConversionError(value, f"missing components {', '.join(missing)}")
        color = _from_numbers(
            value, [value["red"], value["green"], value["blue"], value.get("alpha", 1.0)]
        )
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) not in (3, 4):
            logger.warning(f"Color sequence has {len(value)} components, expected 3 or 4")
            raise ColorSpaceConversionError(
                value, f"expected 3 or 4 components (RGB[A]), got {len(value)}"
            )
        color = _from_numbers(value, list(value) + [1.0] * (4 - len(value)))
    else:
        logger.warning(f"Unsupported color value type: {type(value).__name__}")
        raise ColorSpaceConversionError(value, f"unsupported type {type(value).__name__}")

    if not all(math.isfinite(c) for c in (color.red, color.green, color.blue, color.alpha)):
        logger.warning(f"Color has non-finite components: {color!r}")
        raise ColorSpaceConversionError(value, "components must be finite numbers")
    return color


def _from_numbers(source: Any, components: Sequence[Any]) -> ColorValue:
    try:
        red, green, blue, alpha = (float(c) for c in components)
    except (TypeError, ValueError) as e:
        logger.warning(f"Color components are not numeric: {components!r}")
        raise ColorSpaceConversionError(source, "components must be numbers") from e
    return ColorValue(red=red, green=green, blue=blue, alpha=alpha)
