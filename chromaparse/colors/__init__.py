"""
Chromaparse Color Arrays and the Color Object
=============================================

Color values are plain 4-tuples. RGB tuples hold red, green and blue in
[0, 255]; HSL tuples hold hue in [0, 360), saturation and lightness in
[0, 100]. Both carry alpha in [0, 1] as the last item.

Builders
--------
>>> from chromaparse.colors import rgb_array, hsl_array
>>> rgb_array(300, -10, 128)
(255.0, 0.0, 128.0, 1.0)
>>> hsl_array(-90, 50, 50, 0.5)
(270.0, 50.0, 50.0, 0.5)

Arithmetic
----------
>>> from chromaparse.colors import combine_ca
>>> combine_ca((10, 10, 10, 1), (5, 5, 5, 1), "/", "RGB")
(2.0, 2.0, 2.0, 1.0)

The Color Object
----------------
>>> from chromaparse.colors import Color
>>> c = Color("tomato")
>>> c.on_change = lambda rgba, hsla: print("changed", rgba)
>>> c.lightness = 20
changed ...

Notes
-----
- Builders never reject input: out-of-range channels are clamped, hue wraps,
  invalid channels take the default.
- Combination ignores alpha and degrades to identity on bad operands.
- Color setters are no-ops when the normalized value equals the current one.
"""

from .color_base import builder_for, color_array, default_color, hsl_array, rgb_array, space_range
from .rgb import invert_rgb, map_rgb, round_rgb
from .hsl import invert_hsl, map_hsl, round_hsl
from .arithmetic import (
    add_hsl,
    add_rgb,
    adjust_brightness,
    adjust_contrast,
    adjust_tone,
    combine_ca,
    div_hsl,
    div_rgb,
    mult_hsl,
    mult_rgb,
    sub_hsl,
    sub_rgb,
)
from .color import Color

__all__ = [
    'Color',
    'builder_for',
    'color_array',
    'default_color',
    'space_range',
    'hsl_array',
    'rgb_array',
    'invert_rgb',
    'map_rgb',
    'round_rgb',
    'invert_hsl',
    'map_hsl',
    'round_hsl',
    'combine_ca',
    'add_rgb',
    'sub_rgb',
    'mult_rgb',
    'div_rgb',
    'add_hsl',
    'sub_hsl',
    'mult_hsl',
    'div_hsl',
    'adjust_tone',
    'adjust_brightness',
    'adjust_contrast',
]
