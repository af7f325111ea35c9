import pytest

from chromaluv.conversions import (
    rgb_to_xyz, xyz_to_rgb,
    xyz_to_luv, luv_to_xyz,
    luv_to_lch, lch_to_luv,
    lch_to_hsluv, hsluv_to_lch,
    lch_to_hpluv, hpluv_to_lch,
    rgb_to_hsluv, hsluv_to_rgb,
    rgb_to_hpluv, hpluv_to_rgb,
)
from ..utils import assert_color, hex_to_unit_rgb

# (function, source key, expected key)
SNAPSHOT_DIRECTIONS = [
    (lch_to_luv, "lch", "luv"),
    (luv_to_lch, "luv", "lch"),
    (xyz_to_rgb, "xyz", "rgb"),
    (rgb_to_xyz, "rgb", "xyz"),
    (xyz_to_luv, "xyz", "luv"),
    (luv_to_xyz, "luv", "xyz"),
    (hsluv_to_lch, "hsluv", "lch"),
    (lch_to_hsluv, "lch", "hsluv"),
    (hpluv_to_lch, "hpluv", "lch"),
    (lch_to_hpluv, "lch", "hpluv"),
    (hsluv_to_rgb, "hsluv", "rgb"),
    (hpluv_to_rgb, "hpluv", "rgb"),
    (rgb_to_hsluv, "rgb", "hsluv"),
    (rgb_to_hpluv, "rgb", "hpluv"),
]


def test_snapshot_is_complete(snapshot):
    assert len(snapshot) == 4096
    for hex_color, entry in snapshot.items():
        assert set(entry) == {"rgb", "xyz", "luv", "lch", "hsluv", "hpluv"}, hex_color


def test_snapshot_rgb_matches_hex(snapshot):
    for hex_color, entry in snapshot.items():
        assert_color(hex_to_unit_rgb(hex_color), entry["rgb"], label=hex_color)


@pytest.mark.parametrize(
    "func, source, target",
    SNAPSHOT_DIRECTIONS,
    ids=[f.__name__ for f, _, _ in SNAPSHOT_DIRECTIONS],
)
def test_snapshot_direction(snapshot, func, source, target):
    for hex_color, entry in snapshot.items():
        result = func(*entry[source])
        assert_color(result, entry[target], label=f"{func.__name__} {hex_color}")
