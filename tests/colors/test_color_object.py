import logging

import pytest

from chromaparse import Color
from chromaparse.types import ColorSpace


def test_construct_from_hex(red):
    assert red.rgb == (255, 0, 0, 1)
    assert red.hsl == (0, 100, 50, 1)


def test_construct_from_hsl_string():
    color = Color("hsl(120, 100%, 25%)")
    assert color.hsl == (120, 100, 25, 1)
    assert color.hex == "#008000"


def test_construct_from_name():
    assert Color("navy").hex == "#000080"
    assert Color(" Navy ").rgb == (0, 0, 128, 1)


def test_unparseable_gives_default():
    color = Color("notacolor")
    assert color.rgb == (0, 0, 0, 1)
    assert color.hsl == (0, 0, 0, 1)
    assert Color().rgb == (0, 0, 0, 1)
    assert Color(42).rgb == (0, 0, 0, 1)


def test_hue_setter_updates_rgb(red, recorder):
    red.on_change = recorder
    red.hue = 120
    assert red.hex == "#00ff00"
    assert len(recorder.calls) == 1
    rgba, hsla = recorder.calls[0]
    assert rgba == red.rgb
    assert hsla == red.hsl


def test_equal_value_does_not_notify(red, recorder):
    red.on_change = recorder
    red.hue = 0
    red.hue = 0
    red.hue = 360
    red.rgb = (255, 0, 0, 1)
    red.hex = "#f00"
    assert recorder.calls == []


def test_channel_setters(red):
    red.green = 128
    assert red.rgb == (255, 128, 0, 1)
    red.blue = 300
    assert red.blue == 255
    red.alpha = 0.5
    assert red.alpha == 0.5
    assert red.hsl[3] == 0.5
    red.red = 0
    assert red.hex == "#0080ff80"


def test_hsl_channel_setters():
    color = Color("hsl(200, 50%, 50%)")
    color.saturation = 0
    assert color.hsl == (200, 0, 50, 1)
    assert color.red == color.green == color.blue
    color.lightness = 100
    assert color.hex == "#ffffff"
    assert color.hue == 200


def test_invalid_channel_values_are_ignored(red, recorder):
    red.on_change = recorder
    red.hue = None
    red.red = "12"
    red.saturation = float("nan")
    assert red.rgb == (255, 0, 0, 1)
    assert recorder.calls == []


def test_partial_space_setters_keep_current_values(red):
    red.rgb = (None, 255)
    assert red.rgb == (255, 255, 0, 1)
    red.hsl = [None, None, 25]
    assert red.hsl == pytest.approx((60, 100, 25, 1))
    red.rgb = "rgb(0,0,0)"
    red.rgb = []
    assert red.hsl == pytest.approx((60, 100, 25, 1))


def test_hex_setter(red):
    red.hex = "00f"
    assert red.rgb == (0, 0, 255, 1)
    red.hex = "not hex"
    assert red.rgb == (0, 0, 255, 1)


def test_accessors_return_immutable_values(red):
    values = red.rgb
    assert isinstance(values, tuple)
    with pytest.raises(TypeError):
        values[0] = 0  # type: ignore[index]


def test_on_change_slot(red, recorder):
    red.set_on_change(recorder)
    assert red.on_change is recorder
    other = []
    red.on_change = lambda rgba, hsla: other.append(rgba)
    red.red = 10
    assert recorder.calls == []
    assert other == [(10, 0, 0, 1)]
    red.on_change = "not callable"
    assert red.on_change is None
    red.red = 20
    assert other == [(10, 0, 0, 1)]


def test_arithmetic_methods(red):
    red.sub((55, 0, 0))
    assert red.rgb == (200, 0, 0, 1)
    red.div((2, 1, 1))
    assert red.rgb == (100, 0, 0, 1)
    red.mult((2, 2, 2))
    assert red.rgb == (200, 0, 0, 1)
    red.add((0, 100, 0))
    assert red.rgb == (200, 100, 0, 1)


def test_arithmetic_in_hsl(red):
    red.add((240, 0, 0), ColorSpace.HSL)
    assert red.hue == 240
    assert red.hex == "#0000ff"
    red.sub((0, 0, 25), "hsl")
    assert red.hsl == (240, 100, 25, 1)


def test_arithmetic_no_op_does_not_notify(red, recorder):
    red.on_change = recorder
    red.add((0, 0, 0))
    red.add("garbage")
    red.mult((1, 1, 1))
    assert recorder.calls == []


def test_operators_return_new_colors(red):
    result = red + Color("#0000ff")
    assert result.hex == "#ff00ff"
    assert red.hex == "#ff0000"
    assert (red - (255, 0, 0)).hex == "#000000"
    assert (red * (0.5, 1, 1)).red == 127.5
    assert (red / (0, 1, 1)).hex == "#000000"


def test_to_string_modes(red):
    assert red.to_string() == "rgb(255,0,0)"
    assert str(red) == "rgb(255,0,0)"
    assert red.to_string("hsl") == "hsl(0,100%,50%)"
    assert red.to_string("HEX") == "#ff0000"
    assert red.to_string("cmyk") == "rgb(255,0,0)"
    red.alpha = 0.5
    assert red.to_string("RGB") == "rgba(255,0,0,0.5)"
    assert red.to_string("HSL") == "hsla(0,100%,50%,0.5)"
    assert repr(red) == "Color('rgba(255,0,0,0.5)')"


def test_clone_is_independent(red, recorder):
    red.on_change = recorder
    copy = red.clone()
    copy.hue = 200
    assert red.hex == "#ff0000"
    assert copy.on_change is None
    assert recorder.calls == []


def test_inverted_twice_is_original():
    color = Color("rgba(12, 200, 99, 0.4)")
    assert color.inverted().rgb == (243, 55, 156, 0.4)
    assert color.inverted().inverted().rgb == color.rgb


def test_from_space_constructors():
    assert Color.from_rgb((0, 128, 128)).hsl == pytest.approx((180, 100, 25.098, 1), abs=1e-3)
    assert Color.from_hsl((240, 100, 50)).hex == "#0000ff"


def test_curves(recorder):
    color = Color("rgb(127.5, 64, 191)")
    color.on_change = recorder
    color.tone(0.1, 0, 0)
    assert color.red == pytest.approx(153)
    color.contrast(0.5)
    assert color.green < 64
    color.brightness(0)
    assert len(recorder.calls) == 2


def test_callback_errors_propagate(red):
    def explode(rgba, hsla):
        raise RuntimeError("boom")

    red.on_change = explode
    with pytest.raises(RuntimeError):
        red.green = 255
    assert red.rgb == (255, 255, 0, 1)


def test_huge_channel_value_is_clamped(red):
    red.green = 10**400
    assert red.rgb == (255, 255, 0, 1)


def test_derived_colors_do_not_log_parse_failures(red, caplog):
    with caplog.at_level(logging.DEBUG, logger="chromaparse"):
        red.clone()
        red.inverted()
        Color.from_rgb((1, 2, 3))
        Color.from_hsl((1, 2, 3))
    assert caplog.records == []


def test_unparseable_input_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="chromaparse"):
        Color("nope")
    assert any("nope" in record.getMessage() for record in caplog.records)
