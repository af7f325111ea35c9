"""
Chromaluv Color Space Conversions
=================================

Scalar conversions between sRGB and the HSLuv / HPLuv color spaces, passing
through CIE XYZ, CIE L*u*v* and LCh(uv).

Pipeline
--------
::

    RGB <-> XYZ <-> Luv <-> LCh <-> HSLuv
                                \\-> HPLuv

Every function takes the three channels as positional arguments and returns
a plain tuple of floats. Nothing is clamped: out-of-gamut input produces
out-of-range output.

Conversion Functions
--------------------

RGB ↔ XYZ:
    rgb_to_xyz(r, g, b), xyz_to_rgb(x, y, z)

XYZ ↔ Luv:
    xyz_to_luv(x, y, z), luv_to_xyz(l, u, v)

Luv ↔ LCh:
    luv_to_lch(l, u, v), lch_to_luv(l, c, h)

LCh ↔ HSLuv / HPLuv:
    lch_to_hsluv(l, c, h), hsluv_to_lch(h, s, l)
    lch_to_hpluv(l, c, h), hpluv_to_lch(h, s, l)

Composed pipelines:
    rgb_to_hsluv(r, g, b), hsluv_to_rgb(h, s, l)
    rgb_to_hpluv(r, g, b), hpluv_to_rgb(h, s, l)

Gamut geometry:
    get_bounds(l)
    max_safe_chroma_for_l(l)
    max_safe_chroma_for_lh(l, h)

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type)
        Universal converter between any two supported spaces

Examples
--------
>>> from chromaluv.conversions import rgb_to_hsluv, hsluv_to_rgb
>>> h, s, l = rgb_to_hsluv(200 / 255, 150 / 255, 20 / 255)
>>> r, g, b = hsluv_to_rgb(h, s, l)
>>>
>>> from chromaluv.conversions import convert, FormatType
>>> convert((200, 150, 20), "rgb", "lch", input_type=FormatType.INT)
"""

from .companding import to_linear, from_linear

# → XYZ
from .to_xyz import rgb_to_xyz, luv_to_xyz

# → RGB
from .to_rgb import xyz_to_rgb, hsluv_to_rgb, hpluv_to_rgb

# → Luv
from .to_luv import xyz_to_luv, lch_to_luv

# → LCh
from .to_lch import luv_to_lch, hsluv_to_lch, hpluv_to_lch

# → HSLuv / HPLuv
from .to_hsluv import lch_to_hsluv, rgb_to_hsluv
from .to_hpluv import lch_to_hpluv, rgb_to_hpluv

# Gamut boundary
from .gamut import (
    Bound,
    get_bounds,
    max_safe_chroma_for_l,
    max_safe_chroma_for_lh,
    distance_line_from_origin,
    length_of_ray_until_intersect,
)

# High-level API
from .wrapper import convert, conversion_route

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    # Companding
    'to_linear',
    'from_linear',

    # RGB ↔ XYZ
    'rgb_to_xyz',
    'xyz_to_rgb',

    # XYZ ↔ Luv
    'xyz_to_luv',
    'luv_to_xyz',

    # Luv ↔ LCh
    'luv_to_lch',
    'lch_to_luv',

    # LCh ↔ HSLuv / HPLuv
    'lch_to_hsluv',
    'hsluv_to_lch',
    'lch_to_hpluv',
    'hpluv_to_lch',

    # Pipelines
    'rgb_to_hsluv',
    'hsluv_to_rgb',
    'rgb_to_hpluv',
    'hpluv_to_rgb',

    # Gamut boundary
    'Bound',
    'get_bounds',
    'max_safe_chroma_for_l',
    'max_safe_chroma_for_lh',
    'distance_line_from_origin',
    'length_of_ray_until_intersect',

    # High-level API
    'convert',
    'conversion_route',

    # Types
    'FormatType',
    'ColorSpace',
]
