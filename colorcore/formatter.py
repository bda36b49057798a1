"""
CSS color string formatting.

Output grammars:

    hex         #rrggbb
    hsl         hsl(Hdeg S% L%)          hsl(Hdeg S% L% / A%)
    rgb         rgb(R G B)               rgb(R G B / A%)
    oklch       oklch(L% C% Hdeg)        chroma as a percentage of 0.4
    lch         lch(L% C% Hdeg)          chroma as a percentage of 150
    hslLegacy   hsl(H, S%, L%)           hsl(H, S%, L%, 0.50)
    rgbLegacy   rgb(R, G, B)             rgb(R, G, B, 0.50)
    hsb         H S% B%                  H S% B% / A%

Alpha is left out when it is 100%. Hex never carries alpha; use
ColorValue.hex_with_alpha for that.
"""

from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

from colorcore import spaces
from colorcore.config import FormatPreferences
from colorcore.formats import (
    LCH_CHROMA_PERCENT_SCALE,
    OKLCH_CHROMA_PERCENT_SCALE,
    ColorFormat,
    ColorStringFormat,
)
from colorcore.models import ColorValue
from colorcore.numeric import clamp, round_half_away, to_byte


def _percent(x: float) -> int:
    """0...1 to a clamped integer percentage."""
    return round_half_away(clamp(x, 0.0, 1.0) * 100)


def _degrees(hue: float) -> int:
    """0...1 hue to integer degrees; 360 wraps to 0."""
    return round_half_away(hue * 360) % 360


def _hue_text(degrees: float) -> str:
    text = f"{degrees:.0f}"
    return "0" if text == "360" else text


def _modern_alpha(alpha: float) -> str:
    percent = _percent(alpha)
    return "" if percent == 100 else f" / {percent}%"


def _legacy_alpha(alpha: float) -> str:
    text = f"{clamp(alpha, 0.0, 1.0):.2f}"
    return "" if text == "1.00" else f", {text}"


# Formatters -----------------------------------------------------

def format_hex(color: ColorValue, is_uppercased: bool = False, has_prefix: bool = True) -> str:
    string = f"{color.hex:06x}"
    if is_uppercased:
        string = string.upper()
    return f"#{string}" if has_prefix else string


def format_hsl(color: ColorValue) -> str:
    hsla = spaces.to_hsl(color)
    hue, saturation, lightness = _degrees(hsla.hue), _percent(hsla.saturation), _percent(hsla.lightness)
    return f"hsl({hue}deg {saturation}% {lightness}%{_modern_alpha(color.alpha)})"


def format_hsl_legacy(color: ColorValue) -> str:
    hsla = spaces.to_hsl(color)
    hue, saturation, lightness = _degrees(hsla.hue), _percent(hsla.saturation), _percent(hsla.lightness)
    return f"hsl({hue}, {saturation}%, {lightness}%{_legacy_alpha(color.alpha)})"


def format_rgb(color: ColorValue) -> str:
    red, green, blue = to_byte(color.red), to_byte(color.green), to_byte(color.blue)
    return f"rgb({red} {green} {blue}{_modern_alpha(color.alpha)})"


def format_rgb_legacy(color: ColorValue) -> str:
    red, green, blue = to_byte(color.red), to_byte(color.green), to_byte(color.blue)
    return f"rgb({red}, {green}, {blue}{_legacy_alpha(color.alpha)})"


def format_oklch(color: ColorValue) -> str:
    oklch = spaces.to_oklch(color)
    lightness = _percent(oklch.lightness)
    chroma = oklch.chroma / OKLCH_CHROMA_PERCENT_SCALE * 100
    return f"oklch({lightness}% {chroma:.0f}% {_hue_text(oklch.hue)}deg{_modern_alpha(color.alpha)})"


def format_lch(color: ColorValue) -> str:
    lch = spaces.to_lch(color)
    lightness = round_half_away(clamp(lch.lightness, 0.0, 100.0))
    chroma = lch.chroma / LCH_CHROMA_PERCENT_SCALE * 100
    return f"lch({lightness}% {chroma:.0f}% {_hue_text(lch.hue)}deg{_modern_alpha(color.alpha)})"


def format_hsb(color: ColorValue) -> str:
    hsba = spaces.to_hsb(color)
    hue, saturation, brightness = _degrees(hsba.hue), _percent(hsba.saturation), _percent(hsba.brightness)
    return f"{hue} {saturation}% {brightness}%{_modern_alpha(color.alpha)}"


FORMATTERS = {
    ColorFormat.HSL: format_hsl,
    ColorFormat.RGB: format_rgb,
    ColorFormat.OKLCH: format_oklch,
    ColorFormat.LCH: format_lch,
    ColorFormat.HSL_LEGACY: format_hsl_legacy,
    ColorFormat.RGB_LEGACY: format_rgb_legacy,
    ColorFormat.HSB: format_hsb,
}


def format_color(color: ColorValue, fmt: Union[ColorFormat, ColorStringFormat, str]) -> str:
    """Format the color to a string using the given format."""
    string_format = ColorStringFormat.of(fmt)
    if string_format.format == ColorFormat.HEX:
        return format_hex(
            color,
            is_uppercased=string_format.is_uppercased,
            has_prefix=string_format.has_prefix,
        )
    return FORMATTERS[string_format.format](color)


def format_with_preferences(
    color: ColorValue,
    fmt: Optional[ColorFormat] = None,
    preferences: Optional[FormatPreferences] = None,
) -> str:
    """Format using the variant the preferences select (hex case/prefix, legacy syntax)."""
    preferences = preferences or FormatPreferences()
    return format_color(color, preferences.resolve(fmt))


# Color info -----------------------------------------------------

class ColorInfo(BaseModel):
    """Every string representation of a color at once."""

    hex: str = Field(..., description="Hex string, styled by the preferences")
    hex_number: int = Field(..., description="Packed 0xRRGGBB value")
    hsl: str
    rgb: str
    oklch: str
    lch: str
    hsl_legacy: str
    rgb_legacy: str
    hsb: str
    preferred: str = Field(..., description="The color in the preferred format")
    shown: Dict[str, str] = Field(
        default_factory=dict, description="The shown formats, styled by the preferences"
    )


def color_info(color: ColorValue, preferences: Optional[FormatPreferences] = None) -> ColorInfo:
    preferences = preferences or FormatPreferences()
    return ColorInfo(
        hex=format_with_preferences(color, ColorFormat.HEX, preferences),
        hex_number=color.hex,
        hsl=format_hsl(color),
        rgb=format_rgb(color),
        oklch=format_oklch(color),
        lch=format_lch(color),
        hsl_legacy=format_hsl_legacy(color),
        rgb_legacy=format_rgb_legacy(color),
        hsb=format_hsb(color),
        preferred=format_with_preferences(color, None, preferences),
        shown={
            fmt.value: format_with_preferences(color, fmt, preferences)
            for fmt in preferences.shown_color_formats
        },
    )
