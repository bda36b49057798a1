"""
Conversions between ColorValue and the HSB, HSL, LCH and OKLCH models.

Every LCH/OKLCH path goes through linear-light sRGB:

    to_lch:    sRGB -> linear -> XYZ(D65) -> XYZ(D50) -> Lab -> LCH
    to_oklch:  sRGB -> linear -> Oklab -> OKLCH
    from_lch:  LCH -> Lab -> XYZ(D50) -> XYZ(D65) -> linear -> sRGB

Inputs are not clamped here; the formatter clamps on the way out.
"""

import math

from colorcore import chromatic
from colorcore.linearization import linear_to_srgb, srgb_to_linear
from colorcore.models import HSBA, HSLA, LCH, OKLCH, ColorValue

# Below these chroma values the hue carries no information and is reported as 0.
LCH_ACHROMATIC_CHROMA = 0.0015
OKLCH_ACHROMATIC_CHROMA = 0.000004


def _linear_components(color: ColorValue):
    return (
        srgb_to_linear(color.red),
        srgb_to_linear(color.green),
        srgb_to_linear(color.blue),
    )


def _encoded(r: float, g: float, b: float, alpha: float) -> ColorValue:
    return ColorValue(
        red=linear_to_srgb(r),
        green=linear_to_srgb(g),
        blue=linear_to_srgb(b),
        alpha=alpha,
    )


# LCH / OKLCH ------------------------------------------------------

def to_lch(color: ColorValue) -> LCH:
    """sRGB to CIE LCH (D50)."""
    xyz = chromatic.linear_srgb_to_xyz_d65(*_linear_components(color))
    lab = chromatic.xyz_d50_to_lab(chromatic.xyz_d65_to_d50(xyz))
    lightness, chroma, hue = chromatic.lab_to_lch(lab)
    if chroma < LCH_ACHROMATIC_CHROMA:
        hue = 0.0
    return LCH(lightness=lightness, chroma=chroma, hue=hue, alpha=color.alpha)


def from_lch(lch: LCH) -> ColorValue:
    """CIE LCH (D50) to sRGB."""
    lab = chromatic.lch_to_lab(chromatic.LCHValues(lch.lightness, lch.chroma, lch.hue))
    xyz = chromatic.xyz_d50_to_d65(chromatic.lab_to_xyz_d50(lab))
    return _encoded(*chromatic.xyz_d65_to_linear_srgb(xyz), alpha=lch.alpha)


def to_oklch(color: ColorValue) -> OKLCH:
    """sRGB to OKLCH."""
    oklab = chromatic.linear_srgb_to_oklab(*_linear_components(color))
    lightness, chroma, hue = chromatic.oklab_to_oklch(oklab)
    if chroma < OKLCH_ACHROMATIC_CHROMA:
        hue = 0.0
    return OKLCH(lightness=lightness, chroma=chroma, hue=hue, alpha=color.alpha)


def from_oklch(oklch: OKLCH) -> ColorValue:
    """OKLCH to sRGB."""
    oklab = chromatic.oklch_to_oklab(
        chromatic.OKLCHValues(oklch.lightness, oklch.chroma, oklch.hue)
    )
    return _encoded(*chromatic.oklab_to_linear_srgb(oklab), alpha=oklch.alpha)


# HSB / HSL --------------------------------------------------------

def to_hsb(color: ColorValue) -> HSBA:
    """sRGB to HSB with hue in 0...1."""
    r, g, b = color.red, color.green, color.blue
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    d = max_val - min_val

    h = 0.0
    if d != 0:
        if max_val == r:
            h = ((g - b) / d) % 6
        elif max_val == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6
        if h < 0:
            h += 1

    s = 0.0 if max_val == 0 else d / max_val
    return HSBA(hue=h, saturation=s, brightness=max_val, alpha=color.alpha)


def from_hsb(hsb: HSBA) -> ColorValue:
    """HSB (hue in 0...1) to sRGB."""
    h, s, v = hsb.hue, hsb.saturation, hsb.brightness
    sector = (h % 1.0) * 6
    i = math.floor(sector)
    f = sector - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = [
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    ][int(i) % 6]
    return ColorValue(red=r, green=g, blue=b, alpha=hsb.alpha)


def to_hsl(color: ColorValue) -> HSLA:
    """sRGB to HSL, derived from HSB."""
    hsb = to_hsb(color)

    saturation = hsb.saturation * hsb.brightness
    lightness = (2.0 - hsb.saturation) * hsb.brightness

    divider = lightness if lightness <= 1.0 else 2.0 - lightness
    if divider != 0:
        saturation /= divider

    lightness /= 2.0
    return HSLA(hue=hsb.hue, saturation=saturation, lightness=lightness, alpha=hsb.alpha)


def from_hsl(hsl: HSLA) -> ColorValue:
    """HSL (all components 0...1) to sRGB, through HSB."""
    brightness = hsl.lightness + hsl.saturation * min(hsl.lightness, 1 - hsl.lightness)
    saturation = 0.0 if brightness == 0 else 2 * (1 - hsl.lightness / brightness)
    return from_hsb(
        HSBA(hue=hsl.hue, saturation=saturation, brightness=brightness, alpha=hsl.alpha)
    )
