# Reference colors as (rgba, hsla, hex)
RED = ((255, 0, 0, 1), (0, 100, 50, 1), "#ff0000")
GREEN = ((0, 255, 0, 1), (120, 100, 50, 1), "#00ff00")
BLUE = ((0, 0, 255, 1), (240, 100, 50, 1), "#0000ff")
YELLOW = ((255, 255, 0, 1), (60, 100, 50, 1), "#ffff00")
CYAN = ((0, 255, 255, 1), (180, 100, 50, 1), "#00ffff")
MAGENTA = ((255, 0, 255, 1), (300, 100, 50, 1), "#ff00ff")
WHITE = ((255, 255, 255, 1), (0, 0, 100, 1), "#ffffff")
BLACK = ((0, 0, 0, 1), (0, 0, 0, 1), "#000000")
GRAY = ((128, 128, 128, 1), (0, 0, 50.196, 1), "#808080")

# Less saturated colors, hsl rounded to 3 decimals
ORANGE = ((255, 128, 0, 1), (30.118, 100, 50, 1), "#ff8000")
TEAL = ((0, 128, 128, 1), (180, 100, 25.098, 1), "#008080")
NAVY = ((0, 0, 128, 1), (240, 100, 25.098, 1), "#000080")
TOMATO = ((255, 99, 71, 1), (9.130, 100, 63.922, 1), "#ff6347")
STEELBLUE = ((70, 130, 180, 1), (207.273, 44, 49.020, 1), "#4682b4")

# Translucent
HALF_RED = ((255, 0, 0, 0.5), (0, 100, 50, 0.5), "#ff000080")

PRIMARY_COLORS = [RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA, WHITE, BLACK, GRAY]
MIXED_COLORS = [ORANGE, TEAL, NAVY, TOMATO, STEELBLUE]
ALL_COLORS = PRIMARY_COLORS + MIXED_COLORS

samples_rgb_hsl = {rgba: hsla for rgba, hsla, _ in ALL_COLORS}
samples_hsl_rgb = {hsla: rgba for rgba, hsla, _ in PRIMARY_COLORS}
samples_rgb_hex = {rgba: hex_str for rgba, _, hex_str in ALL_COLORS + [HALF_RED]}
