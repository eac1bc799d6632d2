from typing import Any

from ..colors.rgb import invert_rgb, round_rgb
from ..parsing.parsers import parse_hex
from ..types.color_types import StringMode
from ..types.format_type import DEFAULT_COLORS, HEX_RANGE, RGB_RANGE
from ..utils import get_dimension, map_range, round_half_up
from .to_rgb import hsl_to_rgb


def rgb_to_hex(rgba: Any) -> str:
    """
    Format an RGBA tuple as ``#rrggbb``, or ``#rrggbbaa`` when not opaque.
    """
    if get_dimension(rgba) < 1:
        return DEFAULT_COLORS[StringMode.HEX]
    r, g, b, a = round_rgb(rgba)
    values = [r, g, b]
    if a != RGB_RANGE[3]:
        values.append(round_half_up(map_range(a, 0, RGB_RANGE[3], 0, HEX_RANGE, True)))
    return "#" + "".join(f"{v:02x}" for v in values)


def hsl_to_hex(hsla: Any) -> str:
    return rgb_to_hex(hsl_to_rgb(hsla))


def invert_hex(hex_str: Any) -> str:
    """Hex string of the inverted color; unparseable input gives white."""
    parsed = parse_hex(hex_str)
    if parsed is None:
        return "#ffffff"
    return rgb_to_hex(invert_rgb(parsed))
