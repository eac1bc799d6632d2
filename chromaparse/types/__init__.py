from .color_types import ColorArray, ColorChangeCallback, ColorOperator, ColorSpace, StringMode
from .format_type import (
    COMBINE_OPERATORS,
    DEFAULT_COLORS,
    HEX_RANGE,
    HSL_RANGE,
    PRECISION_ALPHA,
    RGB_RANGE,
    SPACE_RANGES,
)

__all__ = [
    "ColorArray",
    "ColorChangeCallback",
    "ColorOperator",
    "ColorSpace",
    "StringMode",
    "COMBINE_OPERATORS",
    "DEFAULT_COLORS",
    "HEX_RANGE",
    "HSL_RANGE",
    "PRECISION_ALPHA",
    "RGB_RANGE",
    "SPACE_RANGES",
]
