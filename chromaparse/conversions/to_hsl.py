from typing import Any

from ..colors.color_base import default_color, hsl_array
from ..colors.rgb import map_rgb
from ..parsing.parsers import parse_hex
from ..types.color_types import ColorArray, ColorSpace
from ..types.format_type import HSL_RANGE
from ..utils import div_safe, get_dimension, map_range


def rgb_to_hsl(rgba: Any) -> ColorArray:
    """
    Convert an RGBA tuple to HSLA.

    Hue comes from whichever channel is largest, checked in red, green, blue
    order so ties go to the earlier channel. A gray (no chroma) has hue 0
    and saturation 0.

    Args:
        rgba: red, green, blue in [0, 255] and alpha in [0, 1]

    Returns:
        (hue [0, 360), saturation [0, 100], lightness [0, 100], alpha)
    """
    if get_dimension(rgba) < 1:
        return default_color(ColorSpace.HSL)
    r, g, b, alpha = map_rgb(rgba, 0, 1)
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    if c_max == r:
        hue = div_safe(g - b, delta) % 6
    elif c_max == g:
        hue = div_safe(b - r, delta) + 2
    else:
        hue = div_safe(r - g, delta) + 4

    lightness = (c_max + c_min) / 2
    saturation = div_safe(delta, 1 - abs(2 * lightness - 1))

    return hsl_array(
        map_range(hue, 0, 6, 0, HSL_RANGE[0]),
        map_range(saturation, 0, 1, 0, HSL_RANGE[1]),
        map_range(lightness, 0, 1, 0, HSL_RANGE[2]),
        alpha,
    )


def hex_to_hsl(hex_str: Any) -> ColorArray:
    parsed = parse_hex(hex_str)
    return default_color(ColorSpace.HSL) if parsed is None else rgb_to_hsl(parsed)
