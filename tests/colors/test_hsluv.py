import warnings

import pytest

import chromaluv
from chromaluv.colors import hsluv, hpluv
from chromaluv.colors.hsluv import ColorHSLuv
from chromaluv.colors.hpluv import ColorHPLuv
from chromaluv.colors.rgb import ColorRGBINT, unit_to_rgb255
from chromaluv.errors import OutOfGamutWarning
from ..samples import samples_rgb255_hsluv, samples_hsluv_rgb255
from ..utils import assert_color


def test_rgb_builds_hsluv():
    for rgb, expected in samples_rgb255_hsluv.items():
        color = hsluv.rgb(*rgb)
        assert isinstance(color, ColorHSLuv)
        assert_color(color.value, expected)


def test_to_hsluv_returns_plain_tuple():
    for rgb, expected in samples_rgb255_hsluv.items():
        result = hsluv.to_hsluv(*rgb)
        assert type(result) is tuple
        assert_color(result, expected)


def test_to_rgb_known_values():
    for hsl, expected in samples_hsluv_rgb255.items():
        assert hsluv.to_rgb(*hsl) == expected


def test_to_rgb_accepts_tuple_and_color():
    assert hsluv.to_rgb((20, 50, 20)) == (75, 38, 31)
    assert hsluv.to_rgb(ColorHSLuv(20, 50, 20)) == (75, 38, 31)
    # A record of another space is converted first
    assert hsluv.to_rgb(ColorRGBINT((75, 38, 31))) == (75, 38, 31)


def test_to_rgb_round_trip_8bit():
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                assert hsluv.to_rgb(*hsluv.to_hsluv(r, g, b)) == (r, g, b)
                assert hpluv.to_rgb(*hpluv.to_hpluv(r, g, b)) == (r, g, b)


def test_from_rgb_and_to_rgb_methods():
    color = ColorHSLuv.from_rgb(200, 150, 20)
    assert color.to_rgb() == (200, 150, 20)
    color = ColorHPLuv.from_rgb(200.0, 150.0, 20.0)
    assert color.to_rgb() == (200, 150, 20)


def test_black_and_white():
    assert hsluv.to_rgb(0, 0, 0) == (0, 0, 0)
    assert hsluv.to_rgb(0, 0, 100) == (255, 255, 255)
    assert hsluv.to_hsluv(0, 0, 0) == (0.0, 0.0, 0.0)
    h, s, l = hsluv.to_hsluv(255, 255, 255)
    assert (s, l) == (0.0, 100.0)


def test_hpluv_shares_hue_and_lightness():
    h1, s1, l1 = hsluv.to_hsluv(200, 150, 20)
    h2, s2, l2 = hpluv.to_hpluv(200, 150, 20)
    assert (h1, l1) == (h2, l2)
    assert s2 > s1


def test_hpluv_pastel_stays_in_gamut():
    with warnings.catch_warnings():
        warnings.simplefilter("error", OutOfGamutWarning)
        for h in range(0, 360, 30):
            r, g, b = hpluv.to_rgb(h, 100, 60)
            assert all(0 <= c <= 255 for c in (r, g, b))


def test_out_of_gamut_warns():
    with pytest.warns(OutOfGamutWarning):
        result = hsluv.to_rgb(0, 200, 50)
    assert not all(0 <= c <= 255 for c in result)


def test_unit_to_rgb255_rounds_half_away_from_zero():
    assert unit_to_rgb255((0.5, 1.0, 0.0)) == (128, 255, 0)
    with pytest.warns(OutOfGamutWarning):
        assert unit_to_rgb255((-0.01, 0.0, 0.0)) == (-3, 0, 0)


def test_top_level_exports():
    assert chromaluv.rgb is hsluv.rgb
    assert chromaluv.to_rgb(20, 50, 20) == (75, 38, 31)
    assert_color(chromaluv.to_hsluv(200, 150, 20), samples_rgb255_hsluv[(200, 150, 20)])
    assert chromaluv.to_hpluv(200, 150, 20) == hpluv.to_hpluv(200, 150, 20)
    assert chromaluv.HSLuv is ColorHSLuv
