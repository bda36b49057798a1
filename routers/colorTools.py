"""
HTTP/MCP tools over the color core: convert, parse and describe CSS colors.
"""

import logging
from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from colorcore import (
    ColorInfo,
    ColorSpaceConversionError,
    ColorStringFormat,
    ColorValue,
    ServiceSettings,
    color_info,
    ensure_color_value,
    format_color,
    parse_color,
)
from schemas.requests import (
    ColorConvertRequest,
    ColorFormatRequest,
    ColorInfoRequest,
    ColorParseRequest,
)
from schemas.responses import ColorComponentsResponse, ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

PARSE_ERRORS = {
    400: {"model": ErrorResponse, "description": "Not a recognized CSS color"},
}

CONVERSION_ERRORS = {
    422: {"model": ErrorResponse, "description": "Color cannot be expressed in RGB"},
}


@lru_cache()
def get_settings() -> ServiceSettings:
    """Settings read once from the environment."""
    return ServiceSettings.from_env()


def resolve_color(code: str) -> ColorValue:
    """Parse a CSS color string or fail the request with 400."""
    color = parse_color(code)
    if color is None:
        logger.info(f"Unrecognized color code: {code!r}")
        raise HTTPException(status_code=400, detail="Invalid CSS color")
    return color


def coerce_color(components: List[float]) -> ColorValue:
    """Build a color from raw RGB[A] components or fail the request with 422."""
    try:
        return ensure_color_value(components)
    except ColorSpaceConversionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post(
    "/convert_color_code",
    response_model=SuccessResponse,
    operation_id="convert_color_code",
    responses=PARSE_ERRORS,
    description="Convert a CSS color code to a target format",
)
async def parse_and_convert(request: ColorConvertRequest):
    """Parse CSS color and convert to target format."""
    color = resolve_color(request.code)
    string_format = ColorStringFormat(
        format=request.target,
        is_uppercased=request.uppercase,
        has_prefix=request.has_prefix,
    )
    return SuccessResponse(success=True, message=format_color(color, string_format))


@router.post(
    "/format_color",
    response_model=SuccessResponse,
    operation_id="format_color",
    responses=CONVERSION_ERRORS,
    description="Format RGB(A) components in 0...1 as a CSS color code",
)
async def format_components(request: ColorFormatRequest):
    """Format raw components to the target format."""
    color = coerce_color(request.components)
    string_format = ColorStringFormat(
        format=request.target,
        is_uppercased=request.uppercase,
        has_prefix=request.has_prefix,
    )
    return SuccessResponse(success=True, message=format_color(color, string_format))


@router.post(
    "/parse_color",
    response_model=ColorComponentsResponse,
    operation_id="parse_color",
    responses=PARSE_ERRORS,
    description="Parse a CSS color code into sRGB components",
)
async def parse_components(request: ColorParseRequest):
    """Parse CSS color into its RGBA components."""
    color = resolve_color(request.code)
    return ColorComponentsResponse(
        red=color.red,
        green=color.green,
        blue=color.blue,
        alpha=color.alpha,
        hex_number=color.hex,
    )


@router.post(
    "/color_info",
    response_model=ColorInfo,
    operation_id="color_info",
    responses=PARSE_ERRORS,
    description="Describe a CSS color code in every supported format",
)
async def describe_color(
    request: ColorInfoRequest, settings: ServiceSettings = Depends(get_settings)
):
    """All formats for one color, styled by the request or server preferences."""
    color = resolve_color(request.code)
    return color_info(color, request.preferences or settings.preferences)


@router.get(
    "/random_color",
    response_model=ColorInfo,
    operation_id="random_color",
    description="Get a random color, avoiding black and white, in every supported format",
)
async def random_color(settings: ServiceSettings = Depends(get_settings)):
    """A random color in every format."""
    color = ColorValue.random_avoiding_black_and_white()
    logger.debug(f"Generated random color {color!r}")
    return color_info(color, settings.preferences)
