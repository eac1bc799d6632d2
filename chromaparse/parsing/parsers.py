from __future__ import annotations
import logging
from typing import Any, Optional, Tuple

from ..colors.color_base import hsl_array, rgb_array
from ..types.color_types import ColorArray, ColorSpace, StringMode
from ..types.format_type import HEX_RANGE, RGB_RANGE
from ..utils import map_range
from .names import lookup_name
from .patterns import PATTERNS

logger = logging.getLogger(__name__)

ParseResult = Tuple[Optional[ColorSpace], Optional[ColorArray]]


def _floats(*groups: Optional[str]) -> list[Optional[float]]:
    return [float(g) if g is not None else None for g in groups]


def parse_rgb(rgb_str: Any) -> Optional[ColorArray]:
    if not isinstance(rgb_str, str):
        return None
    match = PATTERNS[StringMode.RGB].match(rgb_str)
    if not match:
        return None
    return rgb_array(*_floats(*match.group("r", "g", "b", "a")))


def parse_hsl(hsl_str: Any) -> Optional[ColorArray]:
    if not isinstance(hsl_str, str):
        return None
    match = PATTERNS[StringMode.HSL].match(hsl_str)
    if not match:
        return None
    return hsl_array(*_floats(*match.group("h", "s", "l", "a")))


def parse_hex(hex_str: Any) -> Optional[ColorArray]:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional).

    Short forms double every digit. A fourth byte is alpha, remapped from
    ``[0, 255]`` to ``[0, 1]``.
    """
    if not isinstance(hex_str, str):
        return None
    match = PATTERNS[StringMode.HEX].match(hex_str)
    if not match:
        return None
    digits = match.group("hex")
    if len(digits) in (3, 4):
        pairs = [d + d for d in digits]
    else:
        pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    values: list[Optional[float]] = [int(p, 16) for p in pairs]
    if len(values) == 4:
        values[3] = map_range(values[3], 0, HEX_RANGE, 0, RGB_RANGE[3], True)
    return rgb_array(*values)


def parse_color(color_str: Any) -> ParseResult:
    """
    Parse a color name, ``rgb()``, ``hsl()`` or hex string.

    Returns:
        ``(space, values)``; hex and names are tagged RGB. Strings that match
        nothing give ``(None, None)``.
    """
    named = lookup_name(color_str)
    if named is not None:
        return ColorSpace.RGB, named
    for space, parser in (
        (ColorSpace.RGB, parse_rgb),
        (ColorSpace.HSL, parse_hsl),
        (ColorSpace.RGB, parse_hex),
    ):
        parsed = parser(color_str)
        if parsed is not None:
            return space, parsed
    logger.debug("Unrecognized color string %r", color_str)
    return None, None
