"""Basic chromaparse usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaparse import (
    Color,
    adjust_contrast,
    hsl_to_hex,
    parse_color,
    rgb_to_hsl,
)


def demonstrate_parsing() -> None:
    # Every grammar lands in a bounded 4-tuple.
    for text in ("tomato", "#4682b4", "rgba(255, 128, 0, 0.5)", "hsl(200, 50%, 40%)", "nope"):
        print(f"{text!r:>26} ->", parse_color(text))

    print("RGB -> HSL:", rgb_to_hsl((255, 128, 0, 1)))
    print("HSL -> hex:", hsl_to_hex((200, 50, 40, 1)))


def demonstrate_color_object() -> None:
    accent = Color("#ff0000")
    accent.on_change = lambda rgba, hsla: print("  changed:", rgba, hsla)

    # Setting a channel in one space updates the other.
    accent.hue = 120
    print("Hue 120:", accent.to_string("hex"))

    # Same value again does not notify.
    accent.hue = 120

    accent.add((0, 0, 100))
    accent.lightness = 30
    print("HSL string:", accent.to_string("hsl"))

    mixed = Color("navy") + Color("rgb(100, 0, 0)")
    print("navy + dark red:", mixed)
    print("Inverted:", mixed.inverted().to_string("hex"))


def demonstrate_curves() -> None:
    # Positive strength pushes channels away from mid-gray.
    print("Contrast:", adjust_contrast((64, 128, 191, 1), 0.5))

    color = Color("rgb(127, 127, 127)")
    color.brightness(0.2)
    print("Brighter gray:", color)


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_color_object()
    demonstrate_curves()
