from .colors import (
    ALL_COLORS,
    MIXED_COLORS,
    PRIMARY_COLORS,
    samples_hsl_rgb,
    samples_rgb_hex,
    samples_rgb_hsl,
)

__all__ = [
    "ALL_COLORS",
    "MIXED_COLORS",
    "PRIMARY_COLORS",
    "samples_hsl_rgb",
    "samples_rgb_hex",
    "samples_rgb_hsl",
]
