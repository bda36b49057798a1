from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from colorcore.config import FormatPreferences

TargetFormat = Literal["hex", "hsl", "rgb", "oklch", "lch", "hslLegacy", "rgbLegacy", "hsb"]


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to convert")
    target: TargetFormat = Field(..., description="The target color code format to convert to")
    uppercase: bool = Field(False, description="Uppercase hex digits (hex target only)")
    has_prefix: bool = Field(True, description="Prefix hex output with '#' (hex target only)")


class ColorParseRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to parse")


class ColorInfoRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to describe")
    preferences: Optional[FormatPreferences] = Field(
        None, description="Formatting preferences; the server defaults are used when omitted"
    )


class ColorFormatRequest(BaseModel):
    components: List[float] = Field(
        ..., description="red, green, blue and optional alpha, each nominally 0...1"
    )
    target: TargetFormat = Field(..., description="The color code format to produce")
    uppercase: bool = Field(False, description="Uppercase hex digits (hex target only)")
    has_prefix: bool = Field(True, description="Prefix hex output with '#' (hex target only)")
