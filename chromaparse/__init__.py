"""
Chromaparse - Color Parsing and Conversion Toolkit
==================================================

Parse CSS-style color strings, convert between RGB, HSL and hex, combine
colors channel by channel and keep a mutable, observable color in sync across
spaces.

Key Features
------------
- Hex (``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``), ``rgb()``/``rgba()``,
  ``hsl()``/``hsla()`` and CSS3 color names
- Bounded tuples: clamped channels, wrapped hue, alpha defaulting to opaque
- RGB ↔ HSL ↔ hex conversions and string formatting
- Channel-wise ``+ - * /`` with safe division
- Tone, brightness and contrast curves
- ``Color`` object with channel properties and a change subscriber

Quick Start
-----------
>>> from chromaparse import Color, parse_color
>>>
>>> parse_color("rgba(255, 128, 0, 0.5)")
(<ColorSpace.RGB: 'RGB'>, (255.0, 128.0, 0.0, 0.5))
>>>
>>> accent = Color("#ff0000")
>>> accent.hue = 120
>>> accent.to_string("hex")
'#00ff00'

Every public function is total: unparseable strings and invalid numbers
degrade to defaults instead of raising.
"""

import logging

from .types import ColorArray, ColorSpace, StringMode, DEFAULT_COLORS, HSL_RANGE, RGB_RANGE
from .colors import (
    Color,
    add_hsl,
    add_rgb,
    adjust_brightness,
    adjust_contrast,
    adjust_tone,
    combine_ca,
    div_hsl,
    div_rgb,
    hsl_array,
    invert_hsl,
    invert_rgb,
    map_hsl,
    map_rgb,
    mult_hsl,
    mult_rgb,
    rgb_array,
    round_hsl,
    round_rgb,
    sub_hsl,
    sub_rgb,
)
from .conversions import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsl_to_string,
    invert_hex,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_string,
)
from .parsing import color_names, color_test, lookup_name, parse_color, parse_hex, parse_hsl, parse_rgb

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.7"

__all__ = [
    # types and constants
    "ColorArray",
    "ColorSpace",
    "StringMode",
    "DEFAULT_COLORS",
    "HSL_RANGE",
    "RGB_RANGE",
    # color object
    "Color",
    # builders
    "rgb_array",
    "hsl_array",
    "round_rgb",
    "round_hsl",
    "map_rgb",
    "map_hsl",
    "invert_rgb",
    "invert_hsl",
    "invert_hex",
    # arithmetic
    "combine_ca",
    "add_rgb",
    "sub_rgb",
    "mult_rgb",
    "div_rgb",
    "add_hsl",
    "sub_hsl",
    "mult_hsl",
    "div_hsl",
    "adjust_tone",
    "adjust_brightness",
    "adjust_contrast",
    # parsing
    "color_test",
    "color_names",
    "lookup_name",
    "parse_color",
    "parse_rgb",
    "parse_hsl",
    "parse_hex",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hex",
    "hsl_to_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "rgb_to_string",
    "hsl_to_string",
]
