"""
Rendering a target as an ``<img>`` element.

``ImageElement`` is a plain value; ``render()`` produces markup with the
attribute values HTML-escaped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .config import ImgixUrlConfig
    from .encoder import EncoderRegistry
    from .target import ImageTarget

_ATTRIBUTE_NAME_RE = re.compile(r"^[A-Za-z_:][-A-Za-z0-9_:.]*$")


@dataclass(frozen=True)
class ImageElement:
    """An image element with ordered attributes; ``src`` always comes first."""

    attributes: tuple[tuple[str, str], ...]
    tag: str = "img"

    def __post_init__(self) -> None:
        for name, _ in self.attributes:
            if not _ATTRIBUTE_NAME_RE.match(name):
                raise ValueError(f"Invalid HTML attribute name: {name!r}")

    @property
    def src(self) -> str:
        return self.attributes[0][1]

    def get(self, name: str) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def render(self) -> str:
        attrs = "".join(
            f' {key}="{escape(value, quote=True)}"' for key, value in self.attributes
        )
        return f"<{self.tag}{attrs}>"

    def __str__(self) -> str:
        return self.render()


def to_html(
    target: ImageTarget,
    registry: EncoderRegistry | None = None,
    config: ImgixUrlConfig | None = None,
) -> ImageElement:
    """Element whose only attribute is ``src`` set to ``target.to_url()``."""
    return ImageElement(attributes=(("src", target.to_url(registry, config)),))


def to_html_with_attributes(
    attributes: Iterable[tuple[str, str]],
    target: ImageTarget,
    registry: EncoderRegistry | None = None,
    config: ImgixUrlConfig | None = None,
) -> ImageElement:
    """
    Element with ``src`` followed by the caller's attributes in order.

    A caller attribute whose name is already present replaces the earlier
    value in place, so a caller-supplied ``src`` overrides the generated
    URL while staying first.

    Raises:
        ValueError: If an attribute name is not a valid HTML attribute name.
    """
    merged: dict[str, str] = {"src": target.to_url(registry, config)}
    for name, value in attributes:
        merged[name] = value
    return ImageElement(attributes=tuple(merged.items()))
