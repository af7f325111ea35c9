from ..constants import MIN_L, MAX_L
from ..types.color_types import Triplet
from .gamut import max_safe_chroma_for_l
from .to_xyz import rgb_to_xyz
from .to_luv import xyz_to_luv
from .to_lch import luv_to_lch


def lch_to_hpluv(l: float, c: float, h: float) -> Triplet:
    """
    Convert LCh to HPLuv.

    Saturation is relative to the hue-independent safe chroma, so colors
    past the inscribed circle report saturations above 100.
    """
    if l > MAX_L:
        return h, 0.0, 100.0
    if l < MIN_L:
        return h, 0.0, 0.0
    return h, c / max_safe_chroma_for_l(l) * 100.0, l


def rgb_to_hpluv(r: float, g: float, b: float) -> Triplet:
    xyz = rgb_to_xyz(r, g, b)
    luv = xyz_to_luv(*xyz)
    lch = luv_to_lch(*luv)
    return lch_to_hpluv(*lch)
