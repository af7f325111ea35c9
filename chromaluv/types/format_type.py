# No dependencies
from enum import Enum


class FormatType(str, Enum):
    """Scale of RGB channels. Every other space is always in its native units."""
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


# Channel maxima for RGB in each format
max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0,
}
