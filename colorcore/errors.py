"""
Exceptions raised by the color core.

Parse failures are not exceptions: parsers return None so callers can try the
next format. Only values that cannot be expressed as RGB plus alpha raise.
"""

from typing import Any


class ColorCoreError(Exception):
    """Base class for color core errors."""


class ColorSpaceConversionError(ColorCoreError):
    """A value could not be normalized to an RGB color with alpha."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot convert {value!r} to an RGB color: {reason}")
