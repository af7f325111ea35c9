from __future__ import annotations
from typing import ClassVar, Tuple

from ..constants import HUE_360
from ..conversions import rgb_to_hpluv, hpluv_to_rgb
from ..types.color_types import ColorSpace, Scalar, Triplet
from .color_base import ColorBase, ChannelLimits
from .rgb import unit_to_rgb255


class ColorHPLuv(ColorBase):
    """
    HPLuv color with named ``h``, ``s`` and ``l`` fields.

    Saturation is relative to the hue-independent safe chroma, so in-gamut
    saturated colors can exceed 100.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.HPLUV
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    limits:   ClassVar[ChannelLimits] = ((0.0, HUE_360), (0.0, 100.0), (0.0, 100.0))

    @classmethod
    def from_rgb(cls, r: Scalar, g: Scalar, b: Scalar) -> ColorHPLuv:
        return cls(rgb_to_hpluv(r / 255.0, g / 255.0, b / 255.0))

    def to_rgb(self) -> Tuple[int, int, int]:
        return unit_to_rgb255(hpluv_to_rgb(*self.value))


def rgb(r: Scalar, g: Scalar, b: Scalar) -> ColorHPLuv:
    """Create an HPLuv color from RGB values in [0, 255]."""
    return ColorHPLuv.from_rgb(r, g, b)


def to_rgb(*hpl) -> Tuple[int, int, int]:
    return ColorHPLuv(*hpl).to_rgb()


def to_hpluv(r: Scalar, g: Scalar, b: Scalar) -> Triplet:
    return rgb(r, g, b).value
