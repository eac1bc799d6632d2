import itertools

from chromaparse.colors import round_rgb
from chromaparse.conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from chromaparse.samples import ALL_COLORS

CHANNEL_STEPS = (0, 1, 17, 64, 127, 128, 200, 254, 255)


def test_rgb_hsl_rgb():
    for r, g, b in itertools.product(CHANNEL_STEPS, repeat=3):
        rgba = (r, g, b, 1)
        back = hsl_to_rgb(rgb_to_hsl(rgba))
        assert all(abs(x - y) <= 1 for x, y in zip(back, rgba))
        assert round_rgb(back) == rgba


def test_hex_rgb_hex():
    for _, _, hex_str in ALL_COLORS:
        assert rgb_to_hex(hex_to_rgb(hex_str)) == hex_str


def test_short_hex_expands():
    assert rgb_to_hex(hex_to_rgb("#abc")) == "#aabbcc"
    assert rgb_to_hex(hex_to_rgb("#abcd")) == "#aabbccdd"


def test_hex_alpha_survives():
    assert rgb_to_hex(hex_to_rgb("#11223344")) == "#11223344"
    assert rgb_to_hex(hex_to_rgb("#112233ff")) == "#112233"
