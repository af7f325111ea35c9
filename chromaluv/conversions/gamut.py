"""
Gamut boundary geometry
=======================

At a fixed lightness the sRGB gamut, projected onto the (u, v) chroma plane
of CIE Luv, is a convex hexagon around the achromatic point. Each edge is the
line on which one RGB channel sits at its minimum (0) or maximum (1), so the
six edges come from the three rows of ``M`` crossed with the two extremes.

Two radii are derived from that hexagon:

- ``max_safe_chroma_for_l``: radius of the largest circle centred on the
  achromatic point that fits inside the hexagon. Hue independent (HPLuv).
- ``max_safe_chroma_for_lh``: distance from the achromatic point to the
  hexagon edge along one hue direction (HSLuv).
"""

from __future__ import annotations
import math
from typing import List, NamedTuple

from ..constants import M, KAPPA, EPSILON, HUE_360, MAX_CHROMA_SENTINEL


class Bound(NamedTuple):
    """A boundary line ``v = slope * u + intercept`` in the chroma plane."""
    slope: float
    intercept: float


CHANNEL_EXTREMES = (0.0, 1.0)


def get_bounds(l: float) -> List[Bound]:
    """
    Compute the six gamut boundary lines at lightness ``l``.

    Args:
        l: Lightness in [0, 100]

    Returns:
        List of six ``Bound`` in channel order R, G, B, each at 0 then 1
    """
    sub = (l + 16.0) ** 3 / 1560896.0
    if sub <= EPSILON:
        sub = l / KAPPA

    bounds = []
    for m1, m2, m3 in M:
        for t in CHANNEL_EXTREMES:
            top1 = (284517.0 * m1 - 94839.0 * m3) * sub
            top2 = (838422.0 * m3 + 769860.0 * m2 + 731718.0 * m1) * l * sub - 769860.0 * t * l
            bottom = (632260.0 * m3 - 126452.0 * m2) * sub + 126452.0 * t
            bounds.append(Bound(top1 / bottom, top2 / bottom))
    return bounds


def distance_line_from_origin(bound: Bound) -> float:
    """Perpendicular distance from the achromatic point to a boundary line."""
    slope, intercept = bound
    return abs(intercept) / math.sqrt(slope ** 2 + 1.0)


def length_of_ray_until_intersect(theta: float, bound: Bound) -> float:
    """
    Signed distance along the ray at angle ``theta`` (radians) to a boundary line.

    A negative result means the line lies behind the ray.
    """
    slope, intercept = bound
    return intercept / (math.sin(theta) - slope * math.cos(theta))


def max_safe_chroma_for_l(l: float) -> float:
    """Largest chroma displayable at lightness ``l`` for every hue."""
    val = MAX_CHROMA_SENTINEL
    for bound in get_bounds(l):
        length = distance_line_from_origin(bound)
        if length >= 0.0:
            val = min(val, length)
    return val


def max_safe_chroma_for_lh(l: float, h: float) -> float:
    """Largest chroma displayable at lightness ``l`` along hue ``h`` (degrees)."""
    h_rad = h / HUE_360 * math.pi * 2.0
    val = MAX_CHROMA_SENTINEL
    for bound in get_bounds(l):
        length = length_of_ray_until_intersect(h_rad, bound)
        if length >= 0.0:
            val = min(val, length)
    return val
