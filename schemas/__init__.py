from .requests import ColorConvertRequest, ColorFormatRequest, ColorInfoRequest, ColorParseRequest
from .responses import ColorComponentsResponse, ErrorResponse, SuccessResponse

__all__ = [
    "ColorConvertRequest",
    "ColorFormatRequest",
    "ColorInfoRequest",
    "ColorParseRequest",
    "ColorComponentsResponse",
    "ErrorResponse",
    "SuccessResponse",
]
