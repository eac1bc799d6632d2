from typing import Any

from ..colors.hsl import round_hsl
from ..colors.rgb import round_rgb
from ..types.format_type import HSL_RANGE, RGB_RANGE
from ..utils import format_number


def rgb_to_string(rgba: Any) -> str:
    r, g, b, a = round_rgb(rgba)
    if a != RGB_RANGE[3]:
        return f"rgba({r},{g},{b},{format_number(a)})"
    return f"rgb({r},{g},{b})"


def hsl_to_string(hsla: Any) -> str:
    h, s, l, a = round_hsl(hsla)
    if a != HSL_RANGE[3]:
        return f"hsla({h},{s}%,{l}%,{format_number(a)})"
    return f"hsl({h},{s}%,{l}%)"
