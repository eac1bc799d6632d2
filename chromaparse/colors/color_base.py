from __future__ import annotations
from typing import Any, Callable, Optional

from ..types.color_types import ColorArray, ColorSpace
from ..types.format_type import DEFAULT_COLORS, HSL_RANGE, RGB_RANGE, SPACE_RANGES
from ..utils import channels, clamp, euclidean_modulo, is_num

Channel = Optional[float]


def _alpha(value: Channel, maximum: float) -> float:
    return clamp(value, 0, maximum) if is_num(value) else float(maximum)


def rgb_array(r: Channel = None, g: Channel = None, b: Channel = None, a: Channel = None) -> ColorArray:
    """
    Build a normalized RGBA tuple.

    Red, green and blue are clamped to ``[0, 255]`` and fall back to 0 when
    they are not finite numbers. Alpha is clamped to ``[0, 1]`` and falls
    back to full opacity. Called without arguments it returns the RGB default.
    """
    red, green, blue = (
        clamp(v, 0, RGB_RANGE[i]) if is_num(v) else 0.0
        for i, v in enumerate((r, g, b))
    )
    return (red, green, blue, _alpha(a, RGB_RANGE[3]))


def hsl_array(h: Channel = None, s: Channel = None, l: Channel = None, a: Channel = None) -> ColorArray:
    """
    Build a normalized HSLA tuple.

    Hue wraps into ``[0, 360)``, saturation and lightness are clamped to
    ``[0, 100]``; invalid channels become 0 and invalid alpha becomes 1.
    """
    hue = float(euclidean_modulo(h, HSL_RANGE[0])) if is_num(h) else 0.0
    saturation = clamp(s, 0, HSL_RANGE[1]) if is_num(s) else 0.0
    lightness = clamp(l, 0, HSL_RANGE[2]) if is_num(l) else 0.0
    return (hue, saturation, lightness, _alpha(a, HSL_RANGE[3]))


BUILDERS: dict[ColorSpace, Callable[..., ColorArray]] = {
    ColorSpace.RGB: rgb_array,
    ColorSpace.HSL: hsl_array,
}


def builder_for(color_space: Any) -> Callable[..., ColorArray]:
    return BUILDERS[ColorSpace.coerce(color_space)]


def color_array(color_space: Any, values: Any = None) -> ColorArray:
    """Run the first four items of ``values`` through the builder of ``color_space``."""
    return builder_for(color_space)(*channels(values))


def default_color(color_space: Any) -> ColorArray:
    space = ColorSpace.coerce(color_space)
    return tuple(float(v) for v in DEFAULT_COLORS[space])  # type: ignore[return-value]


def space_range(color_space: Any) -> ColorArray:
    return SPACE_RANGES[ColorSpace.coerce(color_space)]
