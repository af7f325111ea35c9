import warnings
from typing import ClassVar, Tuple

from ..errors import OutOfGamutWarning
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorSpace, Triplet
from ..utils.num_utils import round_half_away
from .color_base import ColorBase, ChannelLimits, build_registry


class ColorRGBINT(ColorBase):
    mode:        ClassVar[ColorSpace] = ColorSpace.RGB
    channels:    ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    limits:      ClassVar[ChannelLimits] = ((0, 255), (0, 255), (0, 255))
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(ColorBase):
    mode:        ClassVar[ColorSpace] = ColorSpace.RGB
    channels:    ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    limits:      ClassVar[ChannelLimits] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorPercentageRGB(ColorBase):
    mode:        ClassVar[ColorSpace] = ColorSpace.RGB
    channels:    ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    limits:      ClassVar[ChannelLimits] = ((0.0, 100.0), (0.0, 100.0), (0.0, 100.0))
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


RGB = ColorRGBINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorUnitRGB,
    ColorPercentageRGB,
)


def unit_to_rgb255(rgb: Triplet) -> Tuple[int, int, int]:
    """
    Scale unit RGB to 0-255 and round each channel half away from zero.

    Nothing is clamped. A channel that lands outside [0, 255] triggers an
    ``OutOfGamutWarning`` and is returned as is.
    """
    maxval = max_non_hue[FormatType.INT]
    r, g, b = (round_half_away(c * float(maxval)) for c in rgb)
    if not all(0 <= c <= maxval for c in (r, g, b)):
        warnings.warn(
            f"RGB ({r}, {g}, {b}) is outside the displayable range [0, {maxval}]",
            OutOfGamutWarning,
            stacklevel=3,
        )
    return r, g, b
