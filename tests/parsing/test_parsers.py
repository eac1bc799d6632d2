import pytest

from chromaparse.parsing import parse_color, parse_hex, parse_hsl, parse_rgb
from chromaparse.types import ColorSpace


def test_parse_rgb():
    assert parse_rgb("rgb(255, 128, 0)") == (255, 128, 0, 1)
    assert parse_rgb("RGBA(1,2,3,0.5)") == (1, 2, 3, 0.5)
    assert parse_rgb("rgb(127.5, 0, 0)") == (127.5, 0, 0, 1)


def test_parse_rgb_clamps():
    assert parse_rgb("rgb(300, 0, 0, 2)") == (255, 0, 0, 1)


def test_parse_rgb_rejects():
    assert parse_rgb("rgb(1, 2)") is None
    assert parse_rgb("rgb(-1, 2, 3)") is None
    assert parse_rgb("hsl(1, 2%, 3%)") is None
    assert parse_rgb(None) is None
    assert parse_rgb(12) is None


def test_parse_hsl():
    assert parse_hsl("hsl(120, 100%, 50%)") == (120, 100, 50, 1)
    assert parse_hsl("hsla(400, 50, 50, 0.5)") == (40, 50, 50, 0.5)
    assert parse_hsl("hsl(200, 150%, 50%)") == (200, 100, 50, 1)
    assert parse_hsl("hsl(1, 2, 3, 4, 5)") is None
    assert parse_hsl(["hsl(1,2,3)"]) is None


def test_parse_hex_lengths():
    assert parse_hex("#abc") == (170, 187, 204, 1)
    assert parse_hex("#AABBCC") == (170, 187, 204, 1)
    r, g, b, a = parse_hex("abcd")
    assert (r, g, b) == (170, 187, 204)
    assert a == pytest.approx(221 / 255)
    r, g, b, a = parse_hex("#aabbcc80")
    assert (r, g, b) == (170, 187, 204)
    assert a == pytest.approx(128 / 255)


def test_parse_hex_rejects():
    assert parse_hex("#ggg") is None
    assert parse_hex("12345") is None
    assert parse_hex("#abcde") is None
    assert parse_hex("#aabbccddee") is None
    assert parse_hex(0xFFFFFF) is None


def test_parse_color_dispatch():
    assert parse_color("navy") == (ColorSpace.RGB, (0, 0, 128, 1))
    assert parse_color("hsl(0, 100%, 50%)") == (ColorSpace.HSL, (0, 100, 50, 1))
    assert parse_color("rgb(1,2,3)") == (ColorSpace.RGB, (1, 2, 3, 1))
    assert parse_color("#f00") == (ColorSpace.RGB, (255, 0, 0, 1))


def test_parse_color_failures():
    assert parse_color("notacolor") == (None, None)
    assert parse_color("") == (None, None)
    assert parse_color(None) == (None, None)
    assert parse_color(123) == (None, None)


def test_parse_hex_short_alpha_form():
    r, g, b, a = parse_hex("#1234")
    assert (r, g, b) == (17, 34, 51)
    assert a == pytest.approx(68 / 255)
    assert parse_hex("#fff0")[3] == 0
