from .names import color_names, lookup_name, name_table
from .parsers import parse_color, parse_hex, parse_hsl, parse_rgb
from .patterns import PATTERNS, color_test

__all__ = [
    "PATTERNS",
    "color_names",
    "color_test",
    "lookup_name",
    "name_table",
    "parse_color",
    "parse_hex",
    "parse_hsl",
    "parse_rgb",
]
