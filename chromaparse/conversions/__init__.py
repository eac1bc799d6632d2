"""
Chromaparse Color Space Conversions
===================================

Conversions between RGB, HSL and hex encodings of a single color, plus the
string formatters used for output.

Conversion Functions
--------------------

RGB → HSL:
    rgb_to_hsl(rgba)
        (r, g, b, a) with channels in [0, 255] to (h, s, l, a)
    hex_to_hsl(hex_str)
        Parse a hex string, then convert; black on parse failure

HSL → RGB:
    hsl_to_rgb(hsla)
        (h, s, l, a) with s and l in [0, 100] to (r, g, b, a)
    hex_to_rgb(hex_str)
        Parse a hex string; black on parse failure

Hex:
    rgb_to_hex(rgba)
        ``#rrggbb``, or ``#rrggbbaa`` for translucent colors
    hsl_to_hex(hsla)
        hsl_to_rgb followed by rgb_to_hex
    invert_hex(hex_str)
        Hex string of the inverted color

Strings:
    rgb_to_string(rgba)
        ``rgb(r,g,b)`` or ``rgba(r,g,b,a)``
    hsl_to_string(hsla)
        ``hsl(h,s%,l%)`` or ``hsla(h,s%,l%,a)``

Every function accepts any sequence of up to four numbers; channels are
normalized through the array builders first, so out-of-range or missing
values never leak into the result.

Examples
--------
>>> from chromaparse.conversions import rgb_to_hsl, hsl_to_hex
>>> rgb_to_hsl((255, 0, 0, 1))
(0.0, 100.0, 50.0, 1.0)
>>> hsl_to_hex((120, 100, 50, 1))
'#00ff00'
"""

from .to_hsl import hex_to_hsl, rgb_to_hsl
from .to_rgb import hex_to_rgb, hsl_to_rgb
from .to_hex import hsl_to_hex, invert_hex, rgb_to_hex
from .to_string import hsl_to_string, rgb_to_string

__all__ = [
    'rgb_to_hsl',
    'hex_to_hsl',
    'hsl_to_rgb',
    'hex_to_rgb',
    'rgb_to_hex',
    'hsl_to_hex',
    'invert_hex',
    'rgb_to_string',
    'hsl_to_string',
]
