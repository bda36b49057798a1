"""sRGB transfer function (gamma encode/decode), applied per channel."""


def srgb_to_linear(component: float) -> float:
    """sRGB companding to linear light."""
    if component > 0.04045:
        return ((component + 0.055) / 1.055) ** 2.4
    return component / 12.92


def linear_to_srgb(component: float) -> float:
    """Linear light to sRGB."""
    if component > 0.0031308:
        return component ** (1 / 2.4) * 1.055 - 0.055
    return component * 12.92
