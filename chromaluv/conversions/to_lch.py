import math

from ..constants import MIN_L, MAX_L, MIN_CHROMA, HUE_360
from ..types.color_types import Triplet
from .gamut import max_safe_chroma_for_l, max_safe_chroma_for_lh


## Luv to LCh

def luv_to_lch(l: float, u: float, v: float) -> Triplet:
    """
    Convert cartesian Luv to polar LCh.

    Hue is in degrees within [0, 360). Below ``MIN_CHROMA`` the hue is
    undefined and reported as 0.

    Args:
        l: Lightness
        u: u* chroma axis
        v: v* chroma axis

    Returns:
        Tuple[float, float, float]: (l, c, h)
    """
    c = math.sqrt(u * u + v * v)
    if c < MIN_CHROMA:
        h = 0.0
    else:
        h = math.atan2(v, u) * 180.0 / math.pi
        if h < 0.0:
            h = HUE_360 + h
            # vanishing negative angles round up to exactly 360
            if h == HUE_360:
                h = 0.0
    return l, c, h

## HSLuv to LCh

def hsluv_to_lch(h: float, s: float, l: float) -> Triplet:
    """
    Convert HSLuv to LCh.

    Saturation is a percentage of the largest chroma displayable at this
    lightness and hue.
    """
    if l > MAX_L:
        return 100.0, 0.0, h
    if l < MIN_L:
        return 0.0, 0.0, h
    return l, max_safe_chroma_for_lh(l, h) / 100.0 * s, h

## HPLuv to LCh

def hpluv_to_lch(h: float, s: float, l: float) -> Triplet:
    """
    Convert HPLuv to LCh.

    Saturation is a percentage of the largest chroma displayable at this
    lightness for any hue.
    """
    if l > MAX_L:
        return 100.0, 0.0, h
    if l < MIN_L:
        return 0.0, 0.0, h
    return l, max_safe_chroma_for_l(l) / 100.0 * s, h
