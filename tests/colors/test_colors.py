import pytest

from chromaluv.colors import (
    ColorRGBINT, ColorUnitRGB, ColorPercentageRGB,
    ColorXYZ, ColorLuv, ColorLCh, ColorHSLuv, ColorHPLuv,
    get_color_class,
)
from chromaluv.conversions import rgb_to_xyz, rgb_to_hsluv
from chromaluv.types.format_type import FormatType
from ..samples import samples_rgb255_hsluv
from ..utils import assert_color


def test_class_conversion_rgb_to_hsluv():
    for rgb, hsluv_expected in samples_rgb255_hsluv.items():
        hsluv = ColorRGBINT(rgb).convert("hsluv")
        assert isinstance(hsluv, ColorHSLuv)
        assert_color(hsluv.value, hsluv_expected)


def test_class_conversion_hsluv_to_rgb():
    for rgb, hsluv in samples_rgb255_hsluv.items():
        color = ColorHSLuv(hsluv)
        rgb_int = color.convert("rgb", FormatType.INT)
        assert isinstance(rgb_int, ColorRGBINT)
        assert rgb_int.value == rgb

        unit = color.convert("rgb")
        assert isinstance(unit, ColorUnitRGB)
        assert_color(unit.value, tuple(c / 255.0 for c in rgb))

        percent = color.convert("rgb", FormatType.PERCENTAGE)
        assert isinstance(percent, ColorPercentageRGB)
        assert_color(percent.value, tuple(c / 2.55 for c in rgb), atol=1e-7)


def test_rgb_keeps_its_format_by_default():
    rgb = ColorRGBINT((255, 128, 0))
    back = rgb.convert("lch").convert("rgb", FormatType.INT)
    assert back == rgb
    assert rgb.convert().value == rgb.value


def test_intermediate_records():
    unit = ColorUnitRGB((0.2, 0.4, 0.6))
    xyz = unit.convert("xyz")
    assert isinstance(xyz, ColorXYZ)
    assert_color(xyz.value, rgb_to_xyz(0.2, 0.4, 0.6), atol=0)
    assert isinstance(unit.convert("luv"), ColorLuv)
    assert isinstance(unit.convert("lch"), ColorLCh)
    assert isinstance(unit.convert("hpluv"), ColorHPLuv)


def test_construction_from_other_record():
    unit = ColorUnitRGB((0.2, 0.4, 0.6))
    hsluv = ColorHSLuv(unit)
    assert_color(hsluv.value, rgb_to_hsluv(0.2, 0.4, 0.6), atol=0)
    assert ColorUnitRGB(unit) == unit


def test_construction_forms_agree():
    assert ColorHSLuv(10, 20, 30) == ColorHSLuv((10, 20, 30))
    assert ColorHSLuv.new(10, 20, 30) == ColorHSLuv([10.0, 20.0, 30.0])
    assert ColorHSLuv(10, 20, 30).value == (10.0, 20.0, 30.0)


def test_int_rgb_rounds_channels():
    assert ColorRGBINT((0.5, 127.5, 254.4)).value == (1, 128, 254)


def test_named_channels():
    color = ColorHSLuv(12.0, 34.0, 56.0)
    assert (color.h, color.s, color.l) == (12.0, 34.0, 56.0)
    lch = ColorLCh(50.0, 20.0, 270.0)
    assert (lch.l, lch.c, lch.h) == (50.0, 20.0, 270.0)
    with pytest.raises(AttributeError):
        color.x


def test_sequence_protocol():
    color = ColorRGBINT((1, 2, 3))
    assert tuple(color) == (1, 2, 3)
    assert len(color) == 3
    assert color[1] == 2
    h, s, l = ColorHSLuv(1, 2, 3)
    assert (h, s, l) == (1.0, 2.0, 3.0)


def test_immutable():
    color = ColorHSLuv(12.0, 34.0, 56.0)
    with pytest.raises(AttributeError):
        color.h = 0.0
    with pytest.raises(AttributeError):
        color._value = (0.0, 0.0, 0.0)
    assert color.value == (12.0, 34.0, 56.0)


def test_equality_and_hash():
    a = ColorHSLuv(1.0, 2.0, 3.0)
    b = ColorHSLuv(1, 2, 3)
    assert a == b
    assert hash(a) == hash(b)
    assert a != ColorHPLuv(1.0, 2.0, 3.0)
    assert a != (1.0, 2.0, 3.0)
    assert len({a, b}) == 1


def test_repr():
    assert repr(ColorHSLuv(10.0, 20.0, 30.0)) == "ColorHSLuv(h=10.0, s=20.0, l=30.0)"
    assert repr(ColorRGBINT((1, 2, 3))) == "ColorRGBINT(r=1, g=2, b=3)"


def test_has_hue():
    assert ColorHSLuv(0, 0, 0).has_hue
    assert ColorLCh(0, 0, 0).has_hue
    assert not ColorXYZ(0, 0, 0).has_hue


def test_wrong_channel_count():
    with pytest.raises(ValueError, match="3 channels"):
        ColorHSLuv(1.0, 2.0)
    with pytest.raises(ValueError):
        ColorRGBINT((1, 2, 3, 4))


@pytest.mark.parametrize("bad", [("a", 1, 2), (None, 1, 2), (True, 1, 2)])
def test_non_numeric_channel(bad):
    with pytest.raises(TypeError):
        ColorHSLuv(bad)


def test_out_of_range_values_are_kept():
    color = ColorHSLuv(400.0, 150.0, -5.0)
    assert color.value == (400.0, 150.0, -5.0)


def test_clamped():
    color = ColorHSLuv(370.0, 120.0, -5.0).clamped()
    assert isinstance(color, ColorHSLuv)
    assert color.h == pytest.approx(10.0)
    assert (color.s, color.l) == (100.0, 0.0)

    assert ColorHPLuv(-30.0, 50.0, 50.0).clamped().h == pytest.approx(330.0)
    assert ColorRGBINT((300, -4, 12)).clamped().value == (255, 0, 12)
    assert ColorLCh(120.0, 500.0, 725.0).clamped().value == pytest.approx((100.0, 500.0, 5.0))
    xyz = ColorXYZ(1.5, -0.2, 2.0)
    assert xyz.clamped() == xyz


def test_get_color_class():
    assert get_color_class("rgb", FormatType.INT) is ColorRGBINT
    assert get_color_class("HSLUV", FormatType.FLOAT) is ColorHSLuv
    with pytest.raises(ValueError):
        get_color_class("hsluv", FormatType.INT)
    with pytest.raises(ValueError):
        get_color_class("hsv", FormatType.FLOAT)
