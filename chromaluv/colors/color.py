from __future__ import annotations
from typing import Optional, Union

from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .cie import cie_tuple_to_class
from .hsluv import ColorHSLuv
from .hpluv import ColorHPLuv
from .color_base import build_registry
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, as_color_space

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **cie_tuple_to_class,
    **build_registry(ColorHSLuv, ColorHPLuv),
}


def get_color_class(color_space: Union[ColorSpace, str], format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((as_color_space(color_space), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(
    self: ColorBase,
    to_space: Union[ColorSpace, str, None] = None,
    to_format: Optional[FormatType] = None,
) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space (e.g., "rgb", "lch", "hsluv"). Defaults to current space.
        to_format: Target format type. Only RGB has INT and PERCENTAGE variants;
            defaults to the current format for RGB targets and FLOAT otherwise.

    Returns:
        New ColorBase instance in the target space/format
    """
    target = as_color_space(to_space) if to_space is not None else self.mode
    if to_format is None:
        to_format = self.format_type if target == ColorSpace.RGB else FormatType.FLOAT

    cls = get_color_class(target, to_format)
    return cls(self)


ColorBase.convert = color_convert
