"""Records for the intermediate CIE spaces. Channels are unbounded except lightness."""

from typing import ClassVar, Tuple

from ..constants import HUE_360
from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelLimits, build_registry


class ColorXYZ(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.XYZ
    channels: ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    limits:   ClassVar[ChannelLimits] = (None, None, None)


class ColorLuv(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.LUV
    channels: ClassVar[Tuple[str, ...]] = ("l", "u", "v")
    limits:   ClassVar[ChannelLimits] = ((0.0, 100.0), None, None)


class ColorLCh(ColorBase):
    mode:     ClassVar[ColorSpace] = ColorSpace.LCH
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    limits:   ClassVar[ChannelLimits] = ((0.0, 100.0), None, (0.0, HUE_360))


cie_tuple_to_class = build_registry(ColorXYZ, ColorLuv, ColorLCh)
