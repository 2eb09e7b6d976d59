"""
Adjustment options: colour, tone and sharpness corrections.

Ranges follow the rendering service's documented bounds; values outside
them are rejected when the option is constructed.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Union

from pydantic import Field

from ..families import OptionFamily
from ..utils import format_bool, format_number
from .base import ImageOption

Signed = Annotated[float, Field(ge=-100, le=100)]
Unsigned = Annotated[float, Field(ge=0, le=100)]


class _AdjustmentOption(ImageOption):
    family: ClassVar[OptionFamily] = OptionFamily.ADJUSTMENT


class _AmountOption(_AdjustmentOption):
    """Adjustment carrying a single numeric ``amount``."""

    def token(self) -> str:
        return format_number(self.amount)  # type: ignore[attr-defined]


class Brightness(_AmountOption):
    key: ClassVar[str] = "bri"
    amount: Signed


class Contrast(_AmountOption):
    key: ClassVar[str] = "con"
    amount: Signed


class Exposure(_AmountOption):
    key: ClassVar[str] = "exp"
    amount: Signed


class Gamma(_AmountOption):
    key: ClassVar[str] = "gam"
    amount: Signed


class Highlight(_AmountOption):
    key: ClassVar[str] = "high"
    amount: Annotated[float, Field(ge=-100, le=0)]


class Shadow(_AmountOption):
    key: ClassVar[str] = "shad"
    amount: Unsigned


class HueShift(_AmountOption):
    key: ClassVar[str] = "hue"
    amount: Annotated[float, Field(ge=0, le=359)]


class Saturation(_AmountOption):
    key: ClassVar[str] = "sat"
    amount: Signed


class Vibrance(_AmountOption):
    key: ClassVar[str] = "vib"
    amount: Signed


class Sharpen(_AmountOption):
    key: ClassVar[str] = "sharp"
    amount: Unsigned


class UnsharpMask(_AmountOption):
    key: ClassVar[str] = "usm"
    amount: Signed


class UnsharpRadius(_AmountOption):
    key: ClassVar[str] = "usmrad"
    amount: Annotated[float, Field(ge=0, le=500)]


class Invert(_AdjustmentOption):
    key: ClassVar[str] = "invert"
    flag: ClassVar[bool] = True

    def token(self) -> str:
        return format_bool(True)


AdjustmentOption = Union[
    Brightness,
    Contrast,
    Exposure,
    Gamma,
    Highlight,
    Shadow,
    HueShift,
    Saturation,
    Vibrance,
    Sharpen,
    UnsharpMask,
    UnsharpRadius,
    Invert,
]
