from __future__ import annotations
from typing import Callable, Dict, List, Tuple, Union

import numpy as np

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, ColorSpace, Triplet, as_color_space, element_to_array
from ..utils.num_utils import round_half_away
from .to_xyz import rgb_to_xyz, luv_to_xyz
from .to_rgb import xyz_to_rgb
from .to_luv import xyz_to_luv, lch_to_luv
from .to_lch import luv_to_lch, hsluv_to_lch, hpluv_to_lch
from .to_hsluv import lch_to_hsluv
from .to_hpluv import lch_to_hpluv

SpaceLike = Union[ColorSpace, str]

# Adjacent stages of the pipeline
CONVERT_STEPS: Dict[Tuple[ColorSpace, ColorSpace], Callable[[float, float, float], Triplet]] = {
    (ColorSpace.RGB, ColorSpace.XYZ): rgb_to_xyz,
    (ColorSpace.XYZ, ColorSpace.RGB): xyz_to_rgb,
    (ColorSpace.XYZ, ColorSpace.LUV): xyz_to_luv,
    (ColorSpace.LUV, ColorSpace.XYZ): luv_to_xyz,
    (ColorSpace.LUV, ColorSpace.LCH): luv_to_lch,
    (ColorSpace.LCH, ColorSpace.LUV): lch_to_luv,
    (ColorSpace.LCH, ColorSpace.HSLUV): lch_to_hsluv,
    (ColorSpace.HSLUV, ColorSpace.LCH): hsluv_to_lch,
    (ColorSpace.LCH, ColorSpace.HPLUV): lch_to_hpluv,
    (ColorSpace.HPLUV, ColorSpace.LCH): hpluv_to_lch,
}

# Every space reaches LCh along a single chain
PATH_TO_LCH: Dict[ColorSpace, Tuple[ColorSpace, ...]] = {
    ColorSpace.RGB: (ColorSpace.RGB, ColorSpace.XYZ, ColorSpace.LUV, ColorSpace.LCH),
    ColorSpace.XYZ: (ColorSpace.XYZ, ColorSpace.LUV, ColorSpace.LCH),
    ColorSpace.LUV: (ColorSpace.LUV, ColorSpace.LCH),
    ColorSpace.LCH: (ColorSpace.LCH,),
    ColorSpace.HSLUV: (ColorSpace.HSLUV, ColorSpace.LCH),
    ColorSpace.HPLUV: (ColorSpace.HPLUV, ColorSpace.LCH),
}


def conversion_route(from_space: SpaceLike, to_space: SpaceLike) -> List[ColorSpace]:
    """
    Shortest sequence of spaces leading from ``from_space`` to ``to_space``.

    Walks up to LCh and back down, then drops every step that immediately
    doubles back.

    Args:
        from_space: Source space
        to_space: Target space

    Returns:
        Spaces visited, both ends included
    """
    source, target = as_color_space(from_space), as_color_space(to_space)
    walk = PATH_TO_LCH[source] + PATH_TO_LCH[target][::-1][1:]

    route: List[ColorSpace] = []
    for space in walk:
        if len(route) >= 2 and route[-2] == space:
            route.pop()
        else:
            route.append(space)
    return route


def normalize(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    if space == ColorSpace.RGB:
        return color / max_non_hue[fmt]
    return color


def scale(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> Tuple:
    if space == ColorSpace.RGB:
        color = color * max_non_hue[fmt]
    if fmt == FormatType.INT:
        return tuple(round_half_away(v) for v in color)
    return tuple(float(v) for v in color)


def _convert_core(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> Tuple:
    if color.shape != (3,):
        raise ValueError(f"{from_space.value} expects 3 channels, got shape {color.shape}")

    # normalize → convert → scale
    values = tuple(float(v) for v in normalize(color, from_space, input_fmt))

    route = conversion_route(from_space, to_space)
    for step in zip(route, route[1:]):
        values = CONVERT_STEPS[step](*values)

    return scale(np.asarray(values, dtype=np.float64), to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: SpaceLike,
    to_space: SpaceLike,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
) -> Tuple:
    """
    Convert one color between any two supported spaces.

    ``input_type`` / ``output_type`` set the scale of RGB channels
    (INT 0-255, FLOAT 0-1, PERCENTAGE 0-100). Other spaces are always in
    their native units; an INT output rounds every channel half away from zero.

    Args:
        color: Three channel values
        from_space: One of rgb, xyz, luv, lch, hsluv, hpluv
        to_space: One of rgb, xyz, luv, lch, hsluv, hpluv
        input_type: Format of ``color``
        output_type: Format of the result

    Returns:
        Converted channels as a tuple

    Raises:
        ValueError: Unknown space name or wrong channel count
    """
    source, target = as_color_space(from_space), as_color_space(to_space)
    input_fmt, output_fmt = FormatType(input_type), FormatType(output_type)
    if source == target and input_fmt == output_fmt:
        return color  # No conversion needed
    return _convert_core(element_to_array(color), source, target, input_fmt, output_fmt)
