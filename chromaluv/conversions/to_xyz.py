from ..constants import M_INV, REF_U, REF_V, REF_Y, KAPPA
from ..types.color_types import Triplet
from ..utils.num_utils import dot
from .companding import to_linear


def _l_to_y(l: float) -> float:
    """Inverse of the CIE lightness function."""
    if l > 8:
        return REF_Y * ((l + 16.0) / 116.0) ** 3
    return REF_Y * l / KAPPA


## RGB to XYZ

def rgb_to_xyz(r: float, g: float, b: float) -> Triplet:
    """
    Convert companded sRGB to CIE XYZ.

    Args:
        r: Red component, nominally in [0, 1]
        g: Green component, nominally in [0, 1]
        b: Blue component, nominally in [0, 1]

    Returns:
        Tuple[float, float, float]: (x, y, z) with reference white at y = 1
    """
    linear = (to_linear(r), to_linear(g), to_linear(b))
    m1, m2, m3 = M_INV
    return dot(m1, linear), dot(m2, linear), dot(m3, linear)

## Luv to XYZ

def luv_to_xyz(l: float, u: float, v: float) -> Triplet:
    """
    Convert CIE L*u*v* to CIE XYZ.

    Black (l == 0) maps to (0, 0, 0); the chromaticity terms are undefined there.

    Args:
        l: Lightness, nominally in [0, 100]
        u: u* chroma axis
        v: v* chroma axis

    Returns:
        Tuple[float, float, float]: (x, y, z)
    """
    if l == 0.0:
        return 0.0, 0.0, 0.0

    var_u = u / (13.0 * l) + REF_U
    var_v = v / (13.0 * l) + REF_V
    y = _l_to_y(l)
    x = 0.0 - 9.0 * y * var_u / ((var_u - 4.0) * var_v - var_u * var_v)
    z = (9.0 * y - 15.0 * var_v * y - var_v * x) / (3.0 * var_v)
    return x, y, z
