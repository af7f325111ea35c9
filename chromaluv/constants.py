"""Fixed colorimetric constants shared by the conversion pipeline."""

import sys

# XYZ -> linear sRGB
M = (
    (3.240969941904521, -1.537383177570093, -0.498610760293),
    (-0.96924363628087, 1.87596750150772, 0.041555057407175),
    (0.055630079696993, -0.20397695888897, 1.056971514242878),
)

# linear sRGB -> XYZ
M_INV = (
    (0.41239079926595, 0.35758433938387, 0.18048078840183),
    (0.21263900587151, 0.71516867876775, 0.072192315360733),
    (0.019330818715591, 0.11919477979462, 0.95053215224966),
)

# D65 reference white
REF_Y = 1.0
REF_U = 0.19783000664283
REF_V = 0.46831999493879

KAPPA = 903.2962962
EPSILON = 0.0088564516

# Lightness thresholds treated as pure black / pure white
MIN_L = 0.00000001
MAX_L = 99.9999999

# Chroma below this has no meaningful hue
MIN_CHROMA = 0.00000001

# Starting value of the safe chroma scans
MAX_CHROMA_SENTINEL = sys.float_info.max

HUE_360 = 360.0
