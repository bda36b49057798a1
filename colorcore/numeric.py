"""Small numeric helpers shared by the parser and formatter."""

import math


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def to_byte(component: float) -> int:
    """Quantize a 0...1 channel to 0...255, clamping first."""
    return round_half_away(clamp(component, 0.0, 1.0) * 0xFF)
