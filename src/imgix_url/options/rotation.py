"""Rotation options: mirroring along an image axis."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from ..families import OptionFamily
from .base import ImageOption


class FlipAxis(str, Enum):
    HORIZONTAL = "h"
    VERTICAL = "v"


class Flip(ImageOption):
    family: ClassVar[OptionFamily] = OptionFamily.ROTATION
    key: ClassVar[str] = "flip"

    axis: FlipAxis

    def token(self) -> str:
        return self.axis.value


RotationOption = Flip
