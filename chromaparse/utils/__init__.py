from .default import replace_at_index, value_or_default
from .dimension import channels, get_dimension, is_color_sequence
from .num_utils import (
    clamp,
    cubic_bezier,
    div_safe,
    euclidean_modulo,
    finite_float,
    format_number,
    is_num,
    map_range,
    normalize,
    parabola,
    round_float,
    round_half_up,
    segment_map,
)

__all__ = [
    "channels",
    "clamp",
    "cubic_bezier",
    "div_safe",
    "euclidean_modulo",
    "finite_float",
    "format_number",
    "get_dimension",
    "is_color_sequence",
    "is_num",
    "map_range",
    "normalize",
    "parabola",
    "replace_at_index",
    "round_float",
    "round_half_up",
    "segment_map",
    "value_or_default",
]
