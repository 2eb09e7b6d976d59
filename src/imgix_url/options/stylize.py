"""Stylize options: blur, halftone, monochrome, pixellate and sepia."""

from __future__ import annotations

from typing import Annotated, ClassVar, Union

from pydantic import Field

from ..families import OptionFamily
from ..utils import format_number
from .base import ImageOption

Unsigned = Annotated[float, Field(ge=0, le=100)]


class _StylizeOption(ImageOption):
    family: ClassVar[OptionFamily] = OptionFamily.STYLIZE


class Blur(_StylizeOption):
    key: ClassVar[str] = "blur"
    amount: Annotated[float, Field(ge=0, le=2000)]

    def token(self) -> str:
        return format_number(self.amount)


class Halftone(_StylizeOption):
    key: ClassVar[str] = "htn"
    amount: Unsigned

    def token(self) -> str:
        return format_number(self.amount)


class Monochrome(_StylizeOption):
    """Tint with a hex colour (``#rgb``, ``#rrggbb`` or ``#aarrggbb``)."""

    key: ClassVar[str] = "mono"
    color: Annotated[
        str,
        Field(pattern=r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"),
    ]

    def token(self) -> str:
        return self.color.lstrip("#").lower()


class Pixellate(_StylizeOption):
    key: ClassVar[str] = "px"
    amount: Unsigned

    def token(self) -> str:
        return format_number(self.amount)


class Sepia(_StylizeOption):
    key: ClassVar[str] = "sepia"
    amount: Unsigned

    def token(self) -> str:
        return format_number(self.amount)


StylizeOption = Union[Blur, Halftone, Monochrome, Pixellate, Sepia]
