"""
Matrix and polar transforms between linear-light sRGB, CIE XYZ, CIE Lab/LCH
and Oklab/OKLCH.

XYZ is tagged by white point: XYZD65 and XYZD50 are distinct types and only
the Bradford functions move between them.
"""

import math
from typing import NamedTuple, Sequence, Tuple

Matrix = Tuple[Tuple[float, float, float], ...]


class XYZD65(NamedTuple):
    x: float
    y: float
    z: float


class XYZD50(NamedTuple):
    x: float
    y: float
    z: float


class Lab(NamedTuple):
    lightness: float
    a: float
    b: float


class LCHValues(NamedTuple):
    lightness: float
    chroma: float
    hue: float


class Oklab(NamedTuple):
    lightness: float
    a: float
    b: float


class OKLCHValues(NamedTuple):
    lightness: float
    chroma: float
    hue: float


# Matrices ---------------------------------------------------------
# sRGB and Bradford matrices to 7 significant digits (Lindbloom), consistent
# with the D65 white (0.95047, 1.0, 1.08883) and D50 white below.

LINEAR_SRGB_TO_XYZ_D65: Matrix = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_D65_TO_LINEAR_SRGB: Matrix = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# Bradford chromatic adaptation
D65_TO_D50: Matrix = (
    (1.0478112, 0.0228866, -0.0501270),
    (0.0295424, 0.9904844, -0.0170491),
    (-0.0092345, 0.0150436, 0.7521316),
)

D50_TO_D65: Matrix = (
    (0.9555766, -0.0230393, 0.0631636),
    (-0.0282895, 1.0099416, 0.0210077),
    (0.0122982, -0.0204830, 1.3299098),
)

# Oklab (Björn Ottosson)
LINEAR_SRGB_TO_LMS: Matrix = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

LMS_TO_OKLAB: Matrix = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

OKLAB_TO_LMS: Matrix = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

LMS_TO_LINEAR_SRGB: Matrix = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# CIE Lab constants
D50_WHITE = (0.96422, 1.0, 0.82521)
EPSILON = 216 / 24389
KAPPA = 24389 / 27


def _multiply(matrix: Matrix, vector: Sequence[float]) -> Tuple[float, float, float]:
    """3x3 matrix times column vector."""
    v0, v1, v2 = vector
    return (
        matrix[0][0] * v0 + matrix[0][1] * v1 + matrix[0][2] * v2,
        matrix[1][0] * v0 + matrix[1][1] * v1 + matrix[1][2] * v2,
        matrix[2][0] * v0 + matrix[2][1] * v1 + matrix[2][2] * v2,
    )


def _cbrt(value: float) -> float:
    """Real cube root, sign preserving."""
    return math.copysign(abs(value) ** (1 / 3), value)


def normalize_hue(degrees: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    hue = degrees % 360
    if hue >= 360:
        hue -= 360
    # also turns -0.0 into 0.0
    return hue + 0.0


def _to_polar(a: float, b: float) -> Tuple[float, float]:
    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360
    if hue >= 360:
        hue -= 360
    return chroma, hue + 0.0


def _to_rectangular(chroma: float, hue: float) -> Tuple[float, float]:
    radians = hue * math.pi / 180
    return chroma * math.cos(radians), chroma * math.sin(radians)


# sRGB <-> XYZ -----------------------------------------------------

def linear_srgb_to_xyz_d65(r: float, g: float, b: float) -> XYZD65:
    """Linear sRGB to XYZ relative to D65."""
    return XYZD65(*_multiply(LINEAR_SRGB_TO_XYZ_D65, (r, g, b)))


def xyz_d65_to_linear_srgb(xyz: XYZD65) -> Tuple[float, float, float]:
    """XYZ (D65) to linear sRGB."""
    return _multiply(XYZ_D65_TO_LINEAR_SRGB, xyz)


def xyz_d65_to_d50(xyz: XYZD65) -> XYZD50:
    """Bradford adaptation D65 -> D50."""
    return XYZD50(*_multiply(D65_TO_D50, xyz))


def xyz_d50_to_d65(xyz: XYZD50) -> XYZD65:
    """Bradford adaptation D50 -> D65."""
    return XYZD65(*_multiply(D50_TO_D65, xyz))


# XYZ <-> Lab ------------------------------------------------------

def xyz_d50_to_lab(xyz: XYZD50) -> Lab:
    """XYZ (D50) to CIE Lab."""
    scaled = [value / white for value, white in zip(xyz, D50_WHITE)]
    f0, f1, f2 = [
        _cbrt(t) if t > EPSILON else (KAPPA * t + 16) / 116
        for t in scaled
    ]
    return Lab(116 * f1 - 16, 500 * (f0 - f1), 200 * (f1 - f2))


def lab_to_xyz_d50(lab: Lab) -> XYZD50:
    """CIE Lab to XYZ (D50)."""
    lightness, a, b = lab
    f1 = (lightness + 16) / 116
    f0 = a / 500 + f1
    f2 = f1 - b / 200

    x = f0 ** 3 if f0 ** 3 > EPSILON else (116 * f0 - 16) / KAPPA
    y = ((lightness + 16) / 116) ** 3 if lightness > KAPPA * EPSILON else lightness / KAPPA
    z = f2 ** 3 if f2 ** 3 > EPSILON else (116 * f2 - 16) / KAPPA

    return XYZD50(x * D50_WHITE[0], y * D50_WHITE[1], z * D50_WHITE[2])


def lab_to_lch(lab: Lab) -> LCHValues:
    """Lab to its polar form; hue in degrees [0, 360)."""
    chroma, hue = _to_polar(lab.a, lab.b)
    return LCHValues(lab.lightness, chroma, hue)


def lch_to_lab(lch: LCHValues) -> Lab:
    a, b = _to_rectangular(lch.chroma, lch.hue)
    return Lab(lch.lightness, a, b)


# Oklab ------------------------------------------------------------

def linear_srgb_to_oklab(r: float, g: float, b: float) -> Oklab:
    """Linear sRGB straight to Oklab through LMS, no XYZ step."""
    lms = [_cbrt(value) for value in _multiply(LINEAR_SRGB_TO_LMS, (r, g, b))]
    return Oklab(*_multiply(LMS_TO_OKLAB, lms))


def oklab_to_linear_srgb(oklab: Oklab) -> Tuple[float, float, float]:
    """Oklab to linear sRGB."""
    lms = [value ** 3 for value in _multiply(OKLAB_TO_LMS, oklab)]
    return _multiply(LMS_TO_LINEAR_SRGB, lms)


def oklab_to_oklch(oklab: Oklab) -> OKLCHValues:
    chroma, hue = _to_polar(oklab.a, oklab.b)
    return OKLCHValues(oklab.lightness, chroma, hue)


def oklch_to_oklab(oklch: OKLCHValues) -> Oklab:
    a, b = _to_rectangular(oklch.chroma, oklch.hue)
    return Oklab(oklch.lightness, a, b)
