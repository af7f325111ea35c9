"""Basic Chromaluv usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaluv import (
    ColorRGB,
    ColorHSLuv,
    HPLuv,
    convert,
    rgb,
    to_rgb,
    to_hpluv,
)
from chromaluv.conversions import FormatType


def demonstrate_colors() -> None:
    # 8-bit RGB in, HSLuv record out
    accent = rgb(200, 150, 20)
    print("RGB -> HSLuv:", accent)
    print("Back to RGB:", accent.to_rgb())

    print("HSLuv (20, 50, 20) -> RGB:", to_rgb(20, 50, 20))
    print("RGB -> HPLuv:", to_hpluv(200, 150, 20))


def demonstrate_palette() -> None:
    # Same lightness and saturation, evenly spaced hues
    palette = [to_rgb(h, 90, 60) for h in range(0, 360, 45)]
    print("HSLuv palette:", palette)

    # HPLuv at s <= 100 never leaves the gamut; good for pastels
    pastels = [HPLuv(h, 100, 80).to_rgb() for h in range(0, 360, 60)]
    print("HPLuv pastels:", pastels)


def demonstrate_records() -> None:
    orange = ColorRGB((255, 128, 0))
    lch = orange.convert("lch")
    print("RGB -> LCh:", lch)
    print("LCh -> RGB (int):", lch.convert("rgb", FormatType.INT))

    hsluv = ColorHSLuv(orange)
    print("Clamped wild HSLuv:", ColorHSLuv(370, 120, -5).clamped())
    print("Same color, HSLuv channels:", hsluv.h, hsluv.s, hsluv.l)

    print(
        "Universal convert:",
        convert((255, 128, 0), "rgb", "hpluv", input_type=FormatType.INT),
    )


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_palette()
    demonstrate_records()
