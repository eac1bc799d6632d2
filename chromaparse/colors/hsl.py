from typing import Any

from ..types.color_types import ColorArray
from ..types.format_type import HSL_RANGE, PRECISION_ALPHA
from ..utils import channels, euclidean_modulo, is_color_sequence, map_range, round_float, round_half_up
from .color_base import hsl_array


def to_hsl_array(hsla: Any) -> ColorArray:
    return hsl_array(*channels(hsla))


def round_hsl(hsla: Any) -> ColorArray:
    h, s, l, a = to_hsl_array(hsla)
    # 359.5 rounds up to a full turn
    hue = round_half_up(h) % HSL_RANGE[0]
    return (hue, round_half_up(s), round_half_up(l), round_float(a, PRECISION_ALPHA))


def map_hsl(hsla: Any, low: float = 0, high: float = 1) -> ColorArray:
    """Remap hue, saturation and lightness from their ranges onto ``[low, high]``."""
    if not is_color_sequence(hsla):
        return hsl_array(low, low, low, HSL_RANGE[3])
    h, s, l, a = to_hsl_array(hsla)
    h, s, l = (map_range(v, 0, HSL_RANGE[i], low, high) for i, v in enumerate((h, s, l)))
    return (h, s, l, a)


def invert_hsl(hsla: Any) -> ColorArray:
    """Opposite hue, mirrored lightness."""
    h, s, l, a = to_hsl_array(hsla)
    hue = float(euclidean_modulo(h + HSL_RANGE[0] / 2, HSL_RANGE[0]))
    return (hue, s, HSL_RANGE[2] - l, a)
