from __future__ import annotations
from collections.abc import Sized
from numbers import Real
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..constants import HUE_360
from ..conversions import convert
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, HUE_INDEX, Scalar, Triplet, is_hue_space
from ..utils.num_utils import round_half_away

# (low, high) per channel; None leaves the channel unbounded
ChannelLimits = Tuple[Optional[Tuple[Scalar, Scalar]], ...]


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # _is_frozen gates __setattr__

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    channels:    ClassVar[Tuple[str, ...]] = ()
    limits:      ClassVar[ChannelLimits]
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    # def color_convert(self, to_space, to_format=None) -> ColorBase, attached in color.py
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Any) -> None:
        # Accept Color((a, b, c)), Color(a, b, c) or another ColorBase
        value: Any = values[0] if len(values) == 1 else values

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )

        count = len(value) if isinstance(value, Sized) else 1
        if count != self.num_channels:
            raise ValueError(f"{self.mode.value} expects {self.num_channels} channels, got {count}")

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(self._coerce(v) for v in value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _coerce(self, v: Any) -> Scalar:
        if isinstance(v, bool) or not isinstance(v, Real):
            raise TypeError(f"{self.mode.value} channels must be real numbers, got {v!r}")
        if self.format_type == FormatType.INT:
            return round_half_away(v)
        return float(v)

    @classmethod
    def new(cls, *values: Scalar):
        """Build a color from its channel values, in channel order."""
        return cls(values)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Triplet:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def __getattr__(self, name: str) -> Scalar:
        # Named channel access: color.h, color.s, color.l ...
        if name.startswith('_') or name not in self.channels:
            raise AttributeError(f"{self.__class__.__name__} has no attribute {name!r}")
        return self._value[self.channels.index(name)]

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self.format_type == other.format_type
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    def clamped(self):
        """
        Return a display-safe copy.

        Hue is wrapped into [0, 360); every bounded channel is clipped to its
        nominal range. Unbounded channels (XYZ, the Luv chroma axes, LCh
        chroma) pass through. The conversion pipeline never does this on its own.
        """
        hue_index = HUE_INDEX.get(self.mode)
        result = []
        for i, (v, limit) in enumerate(zip(self._value, self.limits)):
            if i == hue_index:
                v = cyclic_wrap_float(v, 0.0, HUE_360)
            elif limit is not None:
                v = clamp(v, limit[0], limit[1])
            result.append(v)
        return self.__class__(tuple(result))


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
