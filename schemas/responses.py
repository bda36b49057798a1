from pydantic import BaseModel, Field
from typing import Optional


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="The converted color string")


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Whether the operation succeeded")
    detail: str = Field(..., description="What went wrong")


class ColorComponentsResponse(BaseModel):
    red: float = Field(..., description="Red channel, nominally 0...1")
    green: float = Field(..., description="Green channel, nominally 0...1")
    blue: float = Field(..., description="Blue channel, nominally 0...1")
    alpha: float = Field(..., description="Opacity, 0...1")
    hex_number: int = Field(..., description="Packed 0xRRGGBB value")
