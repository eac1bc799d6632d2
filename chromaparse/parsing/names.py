"""
Named color lookup.

The table maps lowercase CSS3 color names to RGB tuples. It is built once,
on first use, from the ``webcolors`` definitions and is read-only afterwards.
"""

from __future__ import annotations
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional

import webcolors

from ..colors.color_base import rgb_array
from ..types.color_types import ColorArray

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def name_table() -> Mapping[str, ColorArray]:
    table = {}
    for name in webcolors.names(webcolors.CSS3):
        red, green, blue = webcolors.name_to_rgb(name, spec=webcolors.CSS3)
        table[name.lower()] = rgb_array(red, green, blue)
    logger.debug("Built color name table with %d entries", len(table))
    return MappingProxyType(table)


def color_names() -> list[str]:
    return sorted(name_table())


def lookup_name(name: Any) -> Optional[ColorArray]:
    """RGB tuple for a color name, or None for unknown names and non-strings."""
    if not isinstance(name, str):
        return None
    return name_table().get(name.strip().lower())
