"""
CSS color string parsing into ColorValue.

Supported: hex 3/4/6/8, hsl/hsla and rgb/rgba (modern and legacy comma syntax),
lch and oklch. Each parser returns None when the string does not match or a
value is out of range, so callers can try the next format.
"""

import logging
import math
import re
from typing import Callable, List, Optional, Tuple

from colorcore.chromatic import normalize_hue
from colorcore.formats import LCH_CHROMA_PERCENT_SCALE, OKLCH_CHROMA_PERCENT_SCALE
from colorcore.models import HSLA, LCH, OKLCH, ColorValue
from colorcore.numeric import clamp

logger = logging.getLogger(__name__)


# Regular expression patterns
ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
angle_unit = r"deg|grad|rad|turn"
sep = r"(?:\s*,\s*|\s+)"
alpha_sep = r"\s*[,/]\s*"
alpha = f"(?:{alpha_sep}(?P<alpha>{num})(?P<alpha_pct>%)?)?"

# Hex -------------------------------------------------------------

HEX_RE = re.compile(r"^#?(?P<digits>[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

# HSL -------------------------------------------------------------

HSL_RE = re.compile(
    f"^hsla?{ws}\\({ws}"
    f"(?P<hue>{num})(?P<hue_unit>{angle_unit})?{sep}"
    f"(?P<saturation>{num})%{sep}"
    f"(?P<lightness>{num})%"
    f"{alpha}{ws}\\)$",
    re.IGNORECASE,
)

# RGB -------------------------------------------------------------

RGB_RE = re.compile(
    f"^rgba?{ws}\\({ws}"
    f"(?P<red>{num}){sep}"
    f"(?P<green>{num}){sep}"
    f"(?P<blue>{num})"
    f"{alpha}{ws}\\)$",
    re.IGNORECASE,
)

RGB_PERCENT_RE = re.compile(
    f"^rgba?{ws}\\({ws}"
    f"(?P<red>{num})%{sep}"
    f"(?P<green>{num})%{sep}"
    f"(?P<blue>{num})%"
    f"{alpha}{ws}\\)$",
    re.IGNORECASE,
)

# LCH / OKLCH -----------------------------------------------------

def _polar_re(family: str) -> "re.Pattern[str]":
    return re.compile(
        f"^{family}{ws}\\({ws}"
        f"(?P<lightness>{num})(?P<lightness_pct>%)?\\s+"
        f"(?P<chroma>{num})(?P<chroma_pct>%)?\\s+"
        f"(?P<hue>{num})(?P<hue_unit>{angle_unit})?"
        f"(?:{ws}/{ws}(?P<alpha>{num})(?P<alpha_pct>%)?)?{ws}\\)$",
        re.IGNORECASE,
    )


OKLCH_RE = _polar_re("oklch")
LCH_RE = _polar_re("lch")


# Helpers ---------------------------------------------------------

def normalize_input(s: str) -> str:
    """Strip surrounding whitespace and one trailing semicolon."""
    s = s.strip()
    if s.endswith(";"):
        s = s[:-1].rstrip()
    return s


def normalize_hex_input(text: str) -> str:
    """Clean up hex typed into a text field: whitespace and a doubled '##' prefix."""
    text = text.strip()
    if text.startswith("##"):
        text = text[1:]
    return text


def angle_to_deg(value: float, unit: Optional[str]) -> float:
    """Convert an angle to degrees; no unit means degrees."""
    unit = (unit or "deg").lower()
    if unit == "rad":
        return value * 180 / math.pi
    if unit == "grad":
        return value * 0.9
    if unit == "turn":
        return value * 360
    return value


def parse_opacity(value: Optional[str], is_percentage: bool = False) -> float:
    """
    Opacity as a 0...1 fraction.

    A bare number is already a fraction; a percentage is divided by 100. The
    result is clamped, never rejected. A missing value means opaque.
    """
    if value is None:
        return 1.0
    opacity = float(value)
    if is_percentage:
        opacity /= 100
    return clamp(opacity, 0.0, 1.0)


def _in_range(value: float, lo: float, hi: float) -> bool:
    return lo <= value <= hi


def _reject(kind: str, s: str, reason: str) -> None:
    logger.debug(f"Rejected {kind} color {s!r}: {reason}")
    return None


# Parsers ---------------------------------------------------------

def parse_hex(s: str) -> Optional[ColorValue]:
    """Parse #rgb, #rgba, #rrggbb or #rrggbbaa (the '#' is optional)."""
    s = normalize_hex_input(normalize_input(s))
    m = HEX_RE.match(s)
    if not m:
        return None
    digits = m.group("digits")
    if len(digits) in (3, 4):
        digits = "".join(d + d for d in digits)

    value = int(digits[:6], 16)
    opacity = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return ColorValue.from_hex(value, alpha=opacity)


def parse_hsl(s: str) -> Optional[ColorValue]:
    """Parse hsl()/hsla() in modern or legacy syntax."""
    s = normalize_input(s)
    m = HSL_RE.match(s)
    if not m:
        return None

    hue = angle_to_deg(float(m.group("hue")), m.group("hue_unit"))
    saturation = float(m.group("saturation"))
    lightness = float(m.group("lightness"))

    if not _in_range(hue, 0, 360):
        return _reject("HSL", s, f"hue {hue} outside 0...360")
    if not _in_range(saturation, 0, 100):
        return _reject("HSL", s, f"saturation {saturation}% outside 0...100")
    if not _in_range(lightness, 0, 100):
        return _reject("HSL", s, f"lightness {lightness}% outside 0...100")

    return HSLA(
        hue=hue / 360,
        saturation=saturation / 100,
        lightness=lightness / 100,
        alpha=parse_opacity(m.group("alpha"), bool(m.group("alpha_pct"))),
    ).to_color_value()


def parse_rgb(s: str) -> Optional[ColorValue]:
    """Parse rgb()/rgba() with 0...255 channels or 0%...100% channels."""
    s = normalize_input(s)

    m = RGB_RE.match(s)
    if m:
        limit, scale = 255.0, 255.0
    else:
        m = RGB_PERCENT_RE.match(s)
        if not m:
            return None
        limit, scale = 100.0, 100.0

    channels = [float(m.group(name)) for name in ("red", "green", "blue")]
    for name, value in zip(("red", "green", "blue"), channels):
        if not _in_range(value, 0, limit):
            return _reject("RGB", s, f"{name} {value} outside 0...{limit:g}")

    red, green, blue = (value / scale for value in channels)
    return ColorValue(
        red=red,
        green=green,
        blue=blue,
        alpha=parse_opacity(m.group("alpha"), bool(m.group("alpha_pct"))),
    )


def _parse_polar(
    pattern: "re.Pattern[str]", s: str
) -> Optional[Tuple["re.Match[str]", float]]:
    """Match an lch-style grammar; the hue comes back in degrees [0, 360)."""
    m = pattern.match(s)
    if not m:
        return None
    hue = normalize_hue(angle_to_deg(float(m.group("hue")), m.group("hue_unit")))
    return m, hue


def parse_oklch(s: str) -> Optional[ColorValue]:
    """
    Parse oklch(L C H [/ A]).

    Lightness is a 0...1 number or a percentage; chroma is absolute (at most
    0.4) or a percentage of 0.4.
    """
    s = normalize_input(s)
    parsed = _parse_polar(OKLCH_RE, s)
    if parsed is None:
        return None
    m, hue = parsed

    lightness = float(m.group("lightness"))
    if m.group("lightness_pct"):
        if not _in_range(lightness, 0, 100):
            return _reject("OKLCH", s, f"lightness {lightness}% outside 0...100")
        lightness /= 100
    elif not _in_range(lightness, 0, 1):
        return _reject("OKLCH", s, f"lightness {lightness} outside 0...1")

    chroma = float(m.group("chroma"))
    if chroma < 0:
        return _reject("OKLCH", s, f"negative chroma {chroma}")
    if m.group("chroma_pct"):
        if chroma > 100:
            return _reject("OKLCH", s, f"chroma {chroma}% above 100")
        chroma = chroma / 100 * OKLCH_CHROMA_PERCENT_SCALE
    elif chroma > OKLCH_CHROMA_PERCENT_SCALE:
        return _reject("OKLCH", s, f"chroma {chroma} above {OKLCH_CHROMA_PERCENT_SCALE:g}")

    return OKLCH(
        lightness=lightness,
        chroma=chroma,
        hue=hue,
        alpha=parse_opacity(m.group("alpha"), bool(m.group("alpha_pct"))),
    ).to_color_value()


def parse_lch(s: str) -> Optional[ColorValue]:
    """
    Parse lch(L C H [/ A]).

    Lightness is 0...100 with or without '%'; chroma is absolute (at most
    150) or a percentage of 150.
    """
    s = normalize_input(s)
    parsed = _parse_polar(LCH_RE, s)
    if parsed is None:
        return None
    m, hue = parsed

    lightness = float(m.group("lightness"))
    if not _in_range(lightness, 0, 100):
        return _reject("LCH", s, f"lightness {lightness} outside 0...100")

    chroma = float(m.group("chroma"))
    if chroma < 0:
        return _reject("LCH", s, f"negative chroma {chroma}")
    if m.group("chroma_pct"):
        if chroma > 100:
            return _reject("LCH", s, f"chroma {chroma}% above 100")
        chroma = chroma / 100 * LCH_CHROMA_PERCENT_SCALE
    elif chroma > LCH_CHROMA_PERCENT_SCALE:
        return _reject("LCH", s, f"chroma {chroma} above {LCH_CHROMA_PERCENT_SCALE:g}")

    return LCH(
        lightness=lightness,
        chroma=chroma,
        hue=hue,
        alpha=parse_opacity(m.group("alpha"), bool(m.group("alpha_pct"))),
    ).to_color_value()


PARSERS: List[Tuple[str, Callable[[str], Optional[ColorValue]]]] = [
    ("hex", parse_hex),
    ("hsl", parse_hsl),
    ("rgb", parse_rgb),
    ("oklch", parse_oklch),
    ("lch", parse_lch),
]


def parse_color(input_str: str) -> Optional[ColorValue]:
    """Parse any supported CSS color string, trying hex, hsl, rgb, oklch, lch in turn."""
    s = normalize_input(input_str)
    for name, parser in PARSERS:
        color = parser(s)
        if color is not None:
            logger.debug(f"Parsed {s!r} as {name}")
            return color
    logger.debug(f"No color format matched {s!r}")
    return None
