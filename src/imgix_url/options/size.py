"""Size options: output dimensions, resize fit and crop behaviour."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Union

from pydantic import Field

from ..families import OptionFamily
from ..utils import format_number
from .base import ImageOption

Pixels = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class FitMode(str, Enum):
    CLAMP = "clamp"
    CLIP = "clip"
    CROP = "crop"
    FACEAREA = "facearea"
    FILL = "fill"
    FILLMAX = "fillmax"
    MAX = "max"
    MIN = "min"
    SCALE = "scale"


class CropMode(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    FACES = "faces"
    ENTROPY = "entropy"
    EDGES = "edges"
    FOCALPOINT = "focalpoint"


class _SizeOption(ImageOption):
    family: ClassVar[OptionFamily] = OptionFamily.SIZE


class Width(_SizeOption):
    """Output width in pixels, or a fraction of the source width when <= 1."""

    key: ClassVar[str] = "w"
    pixels: Pixels

    def token(self) -> str:
        return format_number(self.pixels)


class Height(_SizeOption):
    """Output height in pixels, or a fraction of the source height when <= 1."""

    key: ClassVar[str] = "h"
    pixels: Pixels

    def token(self) -> str:
        return format_number(self.pixels)


class Fit(_SizeOption):
    key: ClassVar[str] = "fit"
    mode: FitMode

    def token(self) -> str:
        return self.mode.value


class Crop(_SizeOption):
    """Crop anchor; several crops merge into one comma-separated ``crop``."""

    key: ClassVar[str] = "crop"
    mode: CropMode

    def token(self) -> str:
        return self.mode.value


class DevicePixelRatio(_SizeOption):
    key: ClassVar[str] = "dpr"
    ratio: Annotated[float, Field(gt=0, le=5, allow_inf_nan=False)]

    def token(self) -> str:
        return format_number(self.ratio)


class AspectRatio(_SizeOption):
    """Aspect ratio rendered as ``width:height`` (e.g. ``16:9``)."""

    key: ClassVar[str] = "ar"
    width: Pixels
    height: Pixels

    def token(self) -> str:
        return f"{format_number(self.width)}:{format_number(self.height)}"


SizeOption = Union[Width, Height, Fit, Crop, DevicePixelRatio, AspectRatio]
