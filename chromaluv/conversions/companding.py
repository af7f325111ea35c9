"""sRGB transfer function, applied one channel at a time."""


def to_linear(c: float) -> float:
    """Decode a companded sRGB channel into linear light."""
    if c > 0.04045:
        return ((c + 0.055) / 1.055) ** 2.4
    return c / 12.92


def from_linear(c: float) -> float:
    """Encode a linear-light channel with the sRGB curve."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1.0 / 2.4) - 0.055
