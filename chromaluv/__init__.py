"""Chromaluv: sRGB ↔ HSLuv / HPLuv conversions through CIE XYZ, Luv and LCh."""

from .colors.color_base import ColorBase
from .colors.rgb import ColorRGBINT, ColorUnitRGB, ColorPercentageRGB
from .colors.cie import ColorXYZ, ColorLuv, ColorLCh
from .colors.hsluv import ColorHSLuv, rgb, to_rgb, to_hsluv
from .colors.hpluv import ColorHPLuv, to_hpluv
from .colors.color import color_convert

# Friendly aliases
ColorRGB = ColorRGBINT
HSLuv = ColorHSLuv
HPLuv = ColorHPLuv

from .conversions import (
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_luv,
    luv_to_xyz,
    luv_to_lch,
    lch_to_luv,
    lch_to_hsluv,
    hsluv_to_lch,
    lch_to_hpluv,
    hpluv_to_lch,
    rgb_to_hsluv,
    hsluv_to_rgb,
    rgb_to_hpluv,
    hpluv_to_rgb,
    get_bounds,
    max_safe_chroma_for_l,
    max_safe_chroma_for_lh,
    convert,
    FormatType,
    ColorSpace,
)
from .errors import OutOfGamutWarning

__version__ = "0.2.0"

__all__ = [
    # color records
    "ColorBase",
    "ColorRGBINT",
    "ColorUnitRGB",
    "ColorPercentageRGB",
    "ColorXYZ",
    "ColorLuv",
    "ColorLCh",
    "ColorHSLuv",
    "ColorHPLuv",
    "ColorRGB",
    "HSLuv",
    "HPLuv",
    "color_convert",
    # 8-bit convenience API
    "rgb",
    "to_rgb",
    "to_hsluv",
    "to_hpluv",
    # conversions
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_luv",
    "luv_to_xyz",
    "luv_to_lch",
    "lch_to_luv",
    "lch_to_hsluv",
    "hsluv_to_lch",
    "lch_to_hpluv",
    "hpluv_to_lch",
    "rgb_to_hsluv",
    "hsluv_to_rgb",
    "rgb_to_hpluv",
    "hpluv_to_rgb",
    "get_bounds",
    "max_safe_chroma_for_l",
    "max_safe_chroma_for_lh",
    "convert",
    "FormatType",
    "ColorSpace",
    "OutOfGamutWarning",
    "__version__",
]
