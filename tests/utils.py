import numpy as np

from .samples import tolerance


def hex_to_unit_rgb(hex_color: str):
    """'#rrggbb' -> (r, g, b) in [0, 1]."""
    digits = hex_color.lstrip("#")
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def assert_color(actual, expected, atol=tolerance, label=""):
    """Channel-wise comparison with an absolute tolerance."""
    np.testing.assert_allclose(actual, expected, rtol=0, atol=atol, err_msg=label)
