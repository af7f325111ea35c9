"""
Chromaluv Color Classes
=======================

Immutable color records for every space of the pipeline.

Features
--------
- Frozen instances (assignment after construction raises ``AttributeError``)
- Named channel access (``color.h``, ``color.s``, ``color.l`` ...)
- Conversion to any other space with ``color.convert("lch")``
- Opt-in display-safe copy with ``color.clamped()``; construction never clamps

Usage
-----
>>> from chromaluv.colors import ColorHSLuv, ColorRGBINT
>>> from chromaluv.types.format_type import FormatType
>>>
>>> accent = ColorHSLuv.from_rgb(200, 150, 20)
>>> accent.h, accent.s, accent.l
>>> accent.to_rgb()  # (200, 150, 20)
>>>
>>> rgb = ColorRGBINT((255, 128, 0))
>>> lch = rgb.convert("lch")
>>> back = lch.convert("rgb", FormatType.INT)

Color Classes
-------------
RGB:
    - ColorRGBINT: Integer RGB (0-255)
    - ColorUnitRGB: Float RGB (0.0-1.0)
    - ColorPercentageRGB: Percentage RGB (0-100)

CIE:
    - ColorXYZ, ColorLuv, ColorLCh

Perceptual:
    - ColorHSLuv: saturation relative to the hue-specific safe chroma
    - ColorHPLuv: saturation relative to the hue-independent safe chroma
"""

from .color_base import ColorBase
from .rgb import ColorRGBINT, ColorUnitRGB, ColorPercentageRGB, RGB
from .cie import ColorXYZ, ColorLuv, ColorLCh
from .hsluv import ColorHSLuv
from .hpluv import ColorHPLuv
from .color import color_convert, get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase',
    'ColorRGBINT',
    'ColorUnitRGB',
    'ColorPercentageRGB',
    'RGB',
    'ColorXYZ',
    'ColorLuv',
    'ColorLCh',
    'ColorHSLuv',
    'ColorHPLuv',
    'color_convert',
    'get_color_class',
    'unified_tuple_to_class',
]
