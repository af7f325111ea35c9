"""
HSLuv colors from and to 8-bit RGB.

>>> from chromaluv.colors.hsluv import rgb, to_rgb, to_hsluv
>>> rgb(200, 150, 20)
ColorHSLuv(h=57.26077539223336, s=97.61326139925325, l=65.07659371178795)
>>> to_rgb(20, 50, 20)
(75, 38, 31)
>>> to_hsluv(20, 50, 20)
(127.71501294923954, 67.94319276530133, 17.829530512200364)
"""

from __future__ import annotations
from typing import ClassVar, Tuple

from ..constants import HUE_360
from ..conversions import rgb_to_hsluv, hsluv_to_rgb
from ..types.color_types import ColorSpace, Scalar, Triplet
from .color_base import ColorBase, ChannelLimits
from .rgb import unit_to_rgb255


class ColorHSLuv(ColorBase):
    """
    HSLuv color with named ``h``, ``s`` and ``l`` fields.

    ``h`` is in degrees [0, 360], ``s`` and ``l`` in [0, 100]. Ranges are
    nominal; nothing is checked or clamped on construction.
    """
    mode:     ClassVar[ColorSpace] = ColorSpace.HSLUV
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    limits:   ClassVar[ChannelLimits] = ((0.0, HUE_360), (0.0, 100.0), (0.0, 100.0))

    @classmethod
    def from_rgb(cls, r: Scalar, g: Scalar, b: Scalar) -> ColorHSLuv:
        """Build from RGB channels in [0, 255]; ints and floats are both accepted."""
        return cls(rgb_to_hsluv(r / 255.0, g / 255.0, b / 255.0))

    def to_rgb(self) -> Tuple[int, int, int]:
        """RGB channels in [0, 255], rounded half away from zero."""
        return unit_to_rgb255(hsluv_to_rgb(*self.value))


def rgb(r: Scalar, g: Scalar, b: Scalar) -> ColorHSLuv:
    """Create an HSLuv color from RGB values in [0, 255]."""
    return ColorHSLuv.from_rgb(r, g, b)


def to_rgb(*hsl) -> Tuple[int, int, int]:
    """
    Convert HSLuv to 8-bit RGB.

    Accepts ``to_rgb(h, s, l)``, ``to_rgb((h, s, l))`` or ``to_rgb(color)``.
    """
    return ColorHSLuv(*hsl).to_rgb()


def to_hsluv(r: Scalar, g: Scalar, b: Scalar) -> Triplet:
    """Convert RGB values in [0, 255] to a plain (h, s, l) tuple."""
    return rgb(r, g, b).value
