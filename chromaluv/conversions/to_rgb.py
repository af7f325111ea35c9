from ..constants import M
from ..types.color_types import Triplet
from ..utils.num_utils import dot
from .companding import from_linear
from .to_lch import hsluv_to_lch, hpluv_to_lch
from .to_luv import lch_to_luv
from .to_xyz import luv_to_xyz


## XYZ to RGB

def xyz_to_rgb(x: float, y: float, z: float) -> Triplet:
    """
    Convert CIE XYZ to companded sRGB.

    Out-of-gamut colors produce channels outside [0, 1]; nothing is clipped.

    Args:
        x: X tristimulus value
        y: Y tristimulus value
        z: Z tristimulus value

    Returns:
        Tuple[float, float, float]: (r, g, b)
    """
    xyz = (x, y, z)
    m1, m2, m3 = M
    return (
        from_linear(dot(m1, xyz)),
        from_linear(dot(m2, xyz)),
        from_linear(dot(m3, xyz)),
    )

## HSLuv / HPLuv to RGB

def hsluv_to_rgb(h: float, s: float, l: float) -> Triplet:
    """HSLuv to sRGB in [0, 1], through LCh, Luv and XYZ."""
    lch = hsluv_to_lch(h, s, l)
    luv = lch_to_luv(*lch)
    xyz = luv_to_xyz(*luv)
    return xyz_to_rgb(*xyz)


def hpluv_to_rgb(h: float, s: float, l: float) -> Triplet:
    """HPLuv to sRGB in [0, 1], through LCh, Luv and XYZ."""
    lch = hpluv_to_lch(h, s, l)
    luv = lch_to_luv(*lch)
    xyz = luv_to_xyz(*luv)
    return xyz_to_rgb(*xyz)
