import math

from ..constants import REF_U, REF_V, REF_Y, KAPPA, EPSILON, HUE_360
from ..types.color_types import Triplet


def _y_to_l(y: float) -> float:
    """CIE lightness function, linear near black."""
    if y > EPSILON:
        return 116.0 * (y / REF_Y) ** (1.0 / 3.0) - 16.0
    return y / REF_Y * KAPPA


## XYZ to Luv

def xyz_to_luv(x: float, y: float, z: float) -> Triplet:
    """
    Convert CIE XYZ to CIE L*u*v*.

    Zero lightness (and the all-zero input) map to (0, 0, 0); the
    chromaticity denominator vanishes there.

    Args:
        x: X tristimulus value
        y: Y tristimulus value, reference white at 1.0
        z: Z tristimulus value

    Returns:
        Tuple[float, float, float]: (l, u, v)
    """
    l = _y_to_l(y)
    if l == 0.0 or (x == 0.0 and y == 0.0 and z == 0.0):
        return 0.0, 0.0, 0.0

    divisor = x + 15.0 * y + 3.0 * z
    var_u = 4.0 * x / divisor
    var_v = 9.0 * y / divisor
    u = 13.0 * l * (var_u - REF_U)
    v = 13.0 * l * (var_v - REF_V)
    return l, u, v

## LCh to Luv

def lch_to_luv(l: float, c: float, h: float) -> Triplet:
    """Polar LCh (hue in degrees) to cartesian Luv."""
    h_rad = h / HUE_360 * 2.0 * math.pi
    return l, math.cos(h_rad) * c, math.sin(h_rad) * c
