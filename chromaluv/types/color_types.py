from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
Triplet = Tuple[float, float, float]
ColorElement = Union[Triplet, Sequence[Scalar]]


class ColorSpace(str, Enum):
    RGB = "rgb"
    XYZ = "xyz"
    LUV = "luv"
    LCH = "lch"
    HSLUV = "hsluv"
    HPLUV = "hpluv"


HUE_SPACES = {ColorSpace.LCH, ColorSpace.HSLUV, ColorSpace.HPLUV}

# Position of the hue channel within each hue-bearing space
HUE_INDEX = {
    ColorSpace.LCH: 2,
    ColorSpace.HSLUV: 0,
    ColorSpace.HPLUV: 0,
}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float64 numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.array(element, dtype=np.float64)


def is_hue_space(color_space: Union[ColorSpace, str]) -> bool:
    """
    Check if the given color space carries a hue channel (LCh, HSLuv, HPLuv).

    Args:
        color_space: Color space string or enum member
    Returns:
        True if hue-based, False otherwise
    """
    return as_color_space(color_space) in HUE_SPACES


def as_color_space(color_space: Union[ColorSpace, str]) -> ColorSpace:
    """Coerce a space name to ``ColorSpace``; unknown names raise ``ValueError``."""
    if isinstance(color_space, ColorSpace):
        return color_space
    return ColorSpace(color_space.lower())
