from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Literal, Tuple

ColorArray = Tuple[float, float, float, float]
ColorOperator = Literal["+", "-", "*", "/"]
ColorChangeCallback = Callable[[ColorArray, ColorArray], Any]


class ColorSpace(str, Enum):
    RGB = "RGB"
    HSL = "HSL"

    @classmethod
    def coerce(cls, value: Any) -> ColorSpace:
        """
        Resolve a space tag to a member.

        Accepts members and case-insensitive names; anything else is RGB.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.RGB


class StringMode(str, Enum):
    RGB = "RGB"
    HSL = "HSL"
    HEX = "HEX"

    @classmethod
    def coerce(cls, value: Any) -> StringMode:
        """Resolve an output mode, falling back to RGB."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.RGB
