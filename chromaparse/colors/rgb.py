from typing import Any

from ..types.color_types import ColorArray
from ..types.format_type import PRECISION_ALPHA, RGB_RANGE
from ..utils import channels, is_color_sequence, map_range, round_float, round_half_up
from .color_base import rgb_array


def to_rgb_array(rgba: Any) -> ColorArray:
    return rgb_array(*channels(rgba))


def round_rgb(rgba: Any) -> ColorArray:
    """Channels rounded to integers, alpha to ``PRECISION_ALPHA`` decimals."""
    r, g, b, a = to_rgb_array(rgba)
    return (round_half_up(r), round_half_up(g), round_half_up(b), round_float(a, PRECISION_ALPHA))


def map_rgb(rgba: Any, low: float = 0, high: float = 1) -> ColorArray:
    """Remap red, green and blue from ``[0, 255]`` onto ``[low, high]``; alpha is kept."""
    if not is_color_sequence(rgba):
        return rgb_array(low, low, low, RGB_RANGE[3])
    r, g, b, a = to_rgb_array(rgba)
    r, g, b = (map_range(v, 0, RGB_RANGE[i], low, high) for i, v in enumerate((r, g, b)))
    return (r, g, b, a)


def invert_rgb(rgba: Any) -> ColorArray:
    r, g, b, a = to_rgb_array(rgba)
    return (RGB_RANGE[0] - r, RGB_RANGE[1] - g, RGB_RANGE[2] - b, a)
