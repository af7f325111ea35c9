import math
from typing import Sequence


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3-vectors, summed left to right."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (builtin ``round`` ties to even)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
