import re
from typing import Any, Dict, Optional, Pattern

from ..types.color_types import StringMode

_CHANNEL = r"\d{1,3}(?:\.\d+)?"
_ALPHA = r"\d(?:\.\d+)?"

PATTERNS: Dict[StringMode, Pattern[str]] = {
    StringMode.RGB: re.compile(
        rf"^\s*rgba?\(\s*(?P<r>{_CHANNEL})\s*,\s*(?P<g>{_CHANNEL})\s*,\s*(?P<b>{_CHANNEL})\s*"
        rf"(?:,\s*(?P<a>{_ALPHA})\s*)?\)\s*$",
        re.IGNORECASE,
    ),
    StringMode.HSL: re.compile(
        rf"^\s*hsla?\(\s*(?P<h>{_CHANNEL})\s*,\s*(?P<s>{_CHANNEL})%?\s*,\s*(?P<l>{_CHANNEL})%?\s*"
        rf"(?:,\s*(?P<a>{_ALPHA})\s*)?\)\s*$",
        re.IGNORECASE,
    ),
    StringMode.HEX: re.compile(
        r"^\s*#?(?P<hex>[\da-f]{8}|[\da-f]{6}|[\da-f]{3,4})\s*$",
        re.IGNORECASE,
    ),
}


def color_test(color_str: Any) -> Optional[StringMode]:
    """Name of the first grammar (RGB, HSL, HEX) that matches ``color_str``."""
    if not isinstance(color_str, str):
        return None
    for mode, pattern in PATTERNS.items():
        if pattern.match(color_str):
            return mode
    return None
