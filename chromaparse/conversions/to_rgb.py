from typing import Any

from ..colors.color_base import default_color, rgb_array
from ..colors.hsl import to_hsl_array
from ..parsing.parsers import parse_hex
from ..types.color_types import ColorArray, ColorSpace
from ..types.format_type import HSL_RANGE, RGB_RANGE
from ..utils import div_safe, get_dimension, map_range, normalize, segment_map

HUE_SEGMENTS = 6


def _hue_segment_channels(segment: int, c: float, x: float) -> tuple[float, float, float]:
    if segment == 0:
        return c, x, 0
    if segment == 1:
        return x, c, 0
    if segment == 2:
        return 0, c, x
    if segment == 3:
        return 0, x, c
    if segment == 4:
        return x, 0, c
    return c, 0, x


def hsl_to_rgb(hsla: Any) -> ColorArray:
    """
    Convert an HSLA tuple to RGBA.

    Args:
        hsla: hue in degrees, saturation and lightness in [0, 100], alpha in [0, 1]

    Returns:
        (red, green, blue, alpha) with channels in [0, 255]
    """
    if get_dimension(hsla) < 1:
        return default_color(ColorSpace.RGB)
    h, s, l, alpha = to_hsl_array(hsla)
    s = normalize(s, 0, HSL_RANGE[1])
    l = normalize(l, 0, HSL_RANGE[2])

    # chroma
    c = (1 - abs(2 * l - 1)) * s
    # second largest component
    x = c * (1 - abs(div_safe(h, HSL_RANGE[0] / HUE_SEGMENTS) % 2 - 1)) if c else 0
    # lightness match
    m = l - c / 2

    segment = segment_map(h, HUE_SEGMENTS, 0, HSL_RANGE[0])
    r, g, b = (
        map_range(v + m, 0, 1, 0, RGB_RANGE[i])
        for i, v in enumerate(_hue_segment_channels(segment, c, x))
    )
    return rgb_array(r, g, b, alpha)


def hex_to_rgb(hex_str: Any) -> ColorArray:
    parsed = parse_hex(hex_str)
    return default_color(ColorSpace.RGB) if parsed is None else parsed
