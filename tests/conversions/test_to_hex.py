from chromaparse.conversions import hsl_to_hex, invert_hex, rgb_to_hex
from chromaparse.samples import samples_rgb_hex


def test_rgb_to_hex():
    for rgba, hex_exp in samples_rgb_hex.items():
        assert rgb_to_hex(rgba) == hex_exp


def test_channels_are_zero_padded():
    assert rgb_to_hex((1, 2, 3, 1)) == "#010203"
    assert rgb_to_hex((0, 0, 0, 0)) == "#00000000"


def test_rgb_to_hex_rounds_and_clamps():
    assert rgb_to_hex((127.5, 300, -4, 1)) == "#80ff00"
    assert rgb_to_hex((10, 20, 30)) == "#0a141e"
    assert rgb_to_hex(None) == "#000000"


def test_hsl_to_hex():
    assert hsl_to_hex((120, 100, 50, 1)) == "#00ff00"
    assert hsl_to_hex((240, 100, 25.098, 1)) == "#000080"
    assert hsl_to_hex((0, 0, 100, 0.5)) == "#ffffff80"


def test_invert_hex():
    assert invert_hex("#000") == "#ffffff"
    assert invert_hex("#ff0000") == "#00ffff"
    assert invert_hex("#12345680") == "#edcba980"
    assert invert_hex("zzz") == "#ffffff"
    assert invert_hex(None) == "#ffffff"
