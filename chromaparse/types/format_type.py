# No dependencies
from .color_types import ColorArray, ColorSpace, StringMode

RGB_RANGE: ColorArray = (255, 255, 255, 1)
HSL_RANGE: ColorArray = (360, 100, 100, 1)
HEX_RANGE = 255
PRECISION_ALPHA = 3

SPACE_RANGES = {
    ColorSpace.RGB: RGB_RANGE,
    ColorSpace.HSL: HSL_RANGE,
}

DEFAULT_COLORS = {
    ColorSpace.RGB: (0, 0, 0, RGB_RANGE[3]),
    ColorSpace.HSL: (0, 0, 0, HSL_RANGE[3]),
    StringMode.HEX: "#000000",
}

COMBINE_OPERATORS = ("+", "-", "*", "/")
