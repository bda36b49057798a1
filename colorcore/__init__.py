"""
Color space conversion and CSS color string parsing/formatting.

    >>> color = parse_color("#FF0000")
    >>> color.format(ColorFormat.HSL)
    'hsl(0deg 100% 50%)'
"""

from colorcore.config import FormatPreferences, ServiceSettings
from colorcore.errors import ColorCoreError, ColorSpaceConversionError
from colorcore.formats import ColorFormat, ColorStringFormat
from colorcore.formatter import ColorInfo, color_info, format_color, format_with_preferences
from colorcore.models import HSBA, HSLA, LCH, OKLCH, ColorValue, ensure_color_value
from colorcore.parser import (
    parse_color,
    parse_hex,
    parse_hsl,
    parse_lch,
    parse_oklch,
    parse_rgb,
)
from colorcore.spaces import (
    from_hsb,
    from_hsl,
    from_lch,
    from_oklch,
    to_hsb,
    to_hsl,
    to_lch,
    to_oklch,
)

__all__ = [
    "ColorCoreError",
    "ColorFormat",
    "ColorInfo",
    "ColorSpaceConversionError",
    "ColorStringFormat",
    "ColorValue",
    "FormatPreferences",
    "HSBA",
    "HSLA",
    "LCH",
    "OKLCH",
    "ServiceSettings",
    "color_info",
    "ensure_color_value",
    "format_color",
    "format_with_preferences",
    "from_hsb",
    "from_hsl",
    "from_lch",
    "from_oklch",
    "parse_color",
    "parse_hex",
    "parse_hsl",
    "parse_lch",
    "parse_oklch",
    "parse_rgb",
    "to_hsb",
    "to_hsl",
    "to_lch",
    "to_oklch",
]
