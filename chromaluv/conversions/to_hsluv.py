from ..constants import MIN_L, MAX_L
from ..types.color_types import Triplet
from .gamut import max_safe_chroma_for_lh
from .to_xyz import rgb_to_xyz
from .to_luv import xyz_to_luv
from .to_lch import luv_to_lch


def lch_to_hsluv(l: float, c: float, h: float) -> Triplet:
    """
    Convert LCh to HSLuv.

    Args:
        l: Lightness in [0, 100]
        c: Chroma
        h: Hue in degrees

    Returns:
        Tuple[float, float, float]: (h, s, l) with s as a percentage of the
        largest chroma available at (l, h)
    """
    if l > MAX_L:
        return h, 0.0, 100.0
    if l < MIN_L:
        return h, 0.0, 0.0
    return h, c / max_safe_chroma_for_lh(l, h) * 100.0, l


def rgb_to_hsluv(r: float, g: float, b: float) -> Triplet:
    """sRGB in [0, 1] to HSLuv, through XYZ, Luv and LCh."""
    xyz = rgb_to_xyz(r, g, b)
    luv = xyz_to_luv(*xyz)
    lch = luv_to_lch(*luv)
    return lch_to_hsluv(*lch)
