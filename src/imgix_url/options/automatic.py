"""Automatic optimizations applied by the rendering service."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from ..families import OptionFamily
from .base import ImageOption


class AutoMode(str, Enum):
    COMPRESS = "compress"
    ENHANCE = "enhance"
    FORMAT = "format"
    REDEYE = "redeye"


class Auto(ImageOption):
    family: ClassVar[OptionFamily] = OptionFamily.AUTOMATIC
    key: ClassVar[str] = "auto"

    mode: AutoMode

    def token(self) -> str:
        return self.mode.value


AutomaticOption = Auto
