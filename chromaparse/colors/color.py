from __future__ import annotations
import logging
from typing import Any, Optional

from ..conversions import hsl_to_rgb, hsl_to_string, rgb_to_hex, rgb_to_hsl, rgb_to_string
from ..parsing import parse_color, parse_hex
from ..types.color_types import ColorArray, ColorChangeCallback, ColorOperator, ColorSpace, StringMode
from ..utils import channels, get_dimension, is_color_sequence, is_num, replace_at_index, value_or_default
from .arithmetic import Strength, adjust_brightness, adjust_contrast, adjust_tone, combine_ca
from .color_base import default_color, hsl_array, rgb_array
from .rgb import invert_rgb

logger = logging.getLogger(__name__)


class Color:
    """
    A mutable color kept as an RGBA and an HSLA tuple at the same time.

    Every change goes through one of the two space setters, which normalize
    the input, recompute the other space and notify the ``on_change``
    subscriber. Setting a value equal to the current one does nothing.

    >>> c = Color("#ff0000")
    >>> c.hsl
    (0.0, 100.0, 50.0, 1.0)
    >>> c.hue = 120
    >>> c.hex
    '#00ff00'
    """

    __slots__ = ("_rgba", "_hsla", "_on_change")

    def __init__(self, color_str: Optional[str] = None) -> None:
        space, parsed = parse_color(color_str) if color_str is not None else (None, None)
        if parsed is None:
            if color_str is not None:
                logger.debug("Could not parse %r, using default color", color_str)
            self._rgba = default_color(ColorSpace.RGB)
            self._hsla = default_color(ColorSpace.HSL)
        elif space is ColorSpace.HSL:
            self._hsla = parsed
            self._rgba = hsl_to_rgb(parsed)
        else:
            self._rgba = parsed
            self._hsla = rgb_to_hsl(parsed)
        self._on_change: Optional[ColorChangeCallback] = None

    @classmethod
    def from_rgb(cls, values: Any) -> Color:
        color = cls()
        color.rgb = values
        return color

    @classmethod
    def from_hsl(cls, values: Any) -> Color:
        color = cls()
        color.hsl = values
        return color

    # ------------------ SPACE SETTERS ------------------
    @staticmethod
    def _merge(values: Any, current: ColorArray) -> Optional[list]:
        if not is_color_sequence(values) or get_dimension(values) == 0:
            logger.debug("Ignoring color input %r", values)
            return None
        return [value_or_default(v, current[i]) for i, v in enumerate(channels(values))]

    def _set_rgb(self, values: Any) -> None:
        merged = self._merge(values, self._rgba)
        if merged is None:
            return
        rgba = rgb_array(*merged)
        if rgba == self._rgba:
            return
        self._rgba = rgba
        self._hsla = rgb_to_hsl(rgba)
        self._notify()

    def _set_hsl(self, values: Any) -> None:
        merged = self._merge(values, self._hsla)
        if merged is None:
            return
        hsla = hsl_array(*merged)
        if hsla == self._hsla:
            return
        self._hsla = hsla
        self._rgba = hsl_to_rgb(hsla)
        self._notify()

    def _set(self, color_space: ColorSpace, values: Any) -> None:
        if color_space is ColorSpace.HSL:
            self._set_hsl(values)
        else:
            self._set_rgb(values)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self._rgba, self._hsla)

    # ------------------ ACCESSORS ------------------
    @property
    def rgb(self) -> ColorArray:
        return self._rgba

    @rgb.setter
    def rgb(self, values: Any) -> None:
        self._set_rgb(values)

    @property
    def hsl(self) -> ColorArray:
        return self._hsla

    @hsl.setter
    def hsl(self, values: Any) -> None:
        self._set_hsl(values)

    @property
    def hex(self) -> str:
        return rgb_to_hex(self._rgba)

    @hex.setter
    def hex(self, hex_str: str) -> None:
        parsed = parse_hex(hex_str)
        if parsed is not None:
            self._set_rgb(parsed)

    def _replace_rgb(self, value: Any, index: int) -> None:
        if is_num(value):
            self._set_rgb(replace_at_index(self._rgba, value, index))

    def _replace_hsl(self, value: Any, index: int) -> None:
        if is_num(value):
            self._set_hsl(replace_at_index(self._hsla, value, index))

    @property
    def red(self) -> float:
        return self._rgba[0]

    @red.setter
    def red(self, value: float) -> None:
        self._replace_rgb(value, 0)

    @property
    def green(self) -> float:
        return self._rgba[1]

    @green.setter
    def green(self, value: float) -> None:
        self._replace_rgb(value, 1)

    @property
    def blue(self) -> float:
        return self._rgba[2]

    @blue.setter
    def blue(self, value: float) -> None:
        self._replace_rgb(value, 2)

    @property
    def alpha(self) -> float:
        return self._rgba[3]

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._replace_rgb(value, 3)

    @property
    def hue(self) -> float:
        return self._hsla[0]

    @hue.setter
    def hue(self, value: float) -> None:
        self._replace_hsl(value, 0)

    @property
    def saturation(self) -> float:
        return self._hsla[1]

    @saturation.setter
    def saturation(self, value: float) -> None:
        self._replace_hsl(value, 1)

    @property
    def lightness(self) -> float:
        return self._hsla[2]

    @lightness.setter
    def lightness(self, value: float) -> None:
        self._replace_hsl(value, 2)

    # ------------------ CHANGE SUBSCRIBER ------------------
    @property
    def on_change(self) -> Optional[ColorChangeCallback]:
        return self._on_change

    @on_change.setter
    def on_change(self, callback: Any) -> None:
        self.set_on_change(callback)

    def set_on_change(self, callback: Any) -> None:
        """Replace the subscriber; anything that is not callable clears it."""
        self._on_change = callback if callable(callback) else None

    # ------------------ ARITHMETIC ------------------
    def _combine(self, values: Any, operator: ColorOperator, color_space: Any) -> None:
        space = ColorSpace.coerce(color_space)
        current = self._hsla if space is ColorSpace.HSL else self._rgba
        self._set(space, combine_ca(current, values, operator, space))

    def add(self, values: Any, color_space: Any = ColorSpace.RGB) -> None:
        self._combine(values, "+", color_space)

    def sub(self, values: Any, color_space: Any = ColorSpace.RGB) -> None:
        self._combine(values, "-", color_space)

    def mult(self, values: Any, color_space: Any = ColorSpace.RGB) -> None:
        self._combine(values, "*", color_space)

    def div(self, values: Any, color_space: Any = ColorSpace.RGB) -> None:
        self._combine(values, "/", color_space)

    def _operate(self, other: Any, operator: ColorOperator) -> Color:
        values = other.rgb if isinstance(other, Color) else other
        result = self.clone()
        result._combine(values, operator, ColorSpace.RGB)
        return result

    def __add__(self, other: Any) -> Color:
        return self._operate(other, "+")

    def __sub__(self, other: Any) -> Color:
        return self._operate(other, "-")

    def __mul__(self, other: Any) -> Color:
        return self._operate(other, "*")

    def __truediv__(self, other: Any) -> Color:
        return self._operate(other, "/")

    # ------------------ CURVES ------------------
    def tone(self, *strength: float) -> None:
        """Parabolic tone shaping with one strength per red, green and blue."""
        self._set_rgb(adjust_tone(self._rgba, strength))

    def brightness(self, strength: float) -> None:
        self._set_rgb(adjust_brightness(self._rgba, strength))

    def contrast(self, strength: Strength) -> None:
        self._set_rgb(adjust_contrast(self._rgba, strength))

    # ------------------ DERIVED COLORS ------------------
    def clone(self) -> Color:
        """Independent copy; the subscriber is not carried over."""
        color = type(self)()
        color._rgba, color._hsla = self._rgba, self._hsla
        return color

    def inverted(self) -> Color:
        return type(self).from_rgb(invert_rgb(self._rgba))

    # ------------------ OUTPUT ------------------
    def to_string(self, mode: Any = None) -> str:
        """
        Format the color.

        Args:
            mode: "RGB" (default), "HSL" or "HEX", case-insensitive; unknown
                modes fall back to RGB.
        """
        output = StringMode.coerce(mode)
        if output is StringMode.HSL:
            return hsl_to_string(self._hsla)
        if output is StringMode.HEX:
            return rgb_to_hex(self._rgba)
        return rgb_to_string(self._rgba)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Color({self.to_string()!r})"
