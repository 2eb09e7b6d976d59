"""
The accumulated transformation state for one image.

``ImageTarget`` holds a base URL and, per option family, the options
applied so far. It is an immutable value: every ``with_*`` call returns
a new instance and the original is left untouched, so targets can be
shared freely and serialized any number of times.

Example::

    target = (
        ImageTarget.from_string("https://assets.example.com/photo.png")
        .with_sizes([Width(pixels=300), Height(pixels=200)])
        .with_rotation(Flip(axis=FlipAxis.HORIZONTAL))
        .with_automatic(Auto(mode=AutoMode.FORMAT))
    )
    target.to_url()
    # → "https://assets.example.com/photo.png?w=300&h=200&flip=h&auto=format"

Options render in application order within their family; applying a
batch is the same as applying its items one at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from .exceptions import UrlParseError
from .families import FAMILY_ORDER, OptionFamily
from .serializer import build_query, encode_pairs, serialize
from .urls import parse_url, strip_query

if TYPE_CHECKING:
    from collections.abc import Iterable
    from urllib.parse import ParseResult, SplitResult

    from .config import ImgixUrlConfig
    from .encoder import EncoderRegistry, QueryPair
    from .options import (
        AdjustmentOption,
        AutomaticOption,
        ImageOption,
        RotationOption,
        SizeOption,
        StylizeOption,
    )

_log = logging.getLogger("imgix_url.target")

_FIELDS: dict[OptionFamily, str] = {
    OptionFamily.SIZE: "size_ops",
    OptionFamily.ROTATION: "rotation_ops",
    OptionFamily.ADJUSTMENT: "adjustment_ops",
    OptionFamily.AUTOMATIC: "automatic_ops",
    OptionFamily.STYLIZE: "stylize_ops",
}


@dataclass(frozen=True)
class ImageTarget:
    """
    Immutable accumulator of image options.

    Attributes:
        base_url: Scheme, host and path of the image. Any query string
            or fragment is removed on construction.
        size_ops: Applied size options, in application order.
        rotation_ops: Applied rotation options.
        adjustment_ops: Applied adjustment options.
        automatic_ops: Applied automatic-optimization options.
        stylize_ops: Applied stylize options.
    """

    base_url: str
    size_ops: tuple[SizeOption, ...] = ()
    rotation_ops: tuple[RotationOption, ...] = ()
    adjustment_ops: tuple[AdjustmentOption, ...] = ()
    automatic_ops: tuple[AutomaticOption, ...] = ()
    stylize_ops: tuple[StylizeOption, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", strip_query(self.base_url))
        for name in _FIELDS.values():
            object.__setattr__(self, name, tuple(getattr(self, name)))

    # -- construction --------------------------------------------------------

    @classmethod
    def from_url(cls, url: SplitResult | ParseResult) -> ImageTarget:
        """Create an empty target from an already-parsed URL."""
        return cls(base_url=url.geturl())

    @classmethod
    def from_string(
        cls,
        text: str,
        config: ImgixUrlConfig | None = None,
    ) -> ImageTarget | None:
        """
        Parse ``text`` and create an empty target.

        Returns ``None`` when ``text`` is not a valid absolute URL.
        """
        try:
            parsed = parse_url(text, config)
        except UrlParseError as exc:
            _log.debug("Rejected image URL: %s", exc)
            return None
        return cls.from_url(parsed)

    # -- size ----------------------------------------------------------------

    def with_size(self, option: SizeOption) -> ImageTarget:
        return self._extend(OptionFamily.SIZE, (option,))

    def with_sizes(self, options: Iterable[SizeOption]) -> ImageTarget:
        return self._extend(OptionFamily.SIZE, tuple(options))

    # -- rotation ------------------------------------------------------------

    def with_rotation(self, option: RotationOption) -> ImageTarget:
        return self._extend(OptionFamily.ROTATION, (option,))

    def with_rotations(self, options: Iterable[RotationOption]) -> ImageTarget:
        return self._extend(OptionFamily.ROTATION, tuple(options))

    # -- adjustment ----------------------------------------------------------

    def with_adjustment(self, option: AdjustmentOption) -> ImageTarget:
        return self._extend(OptionFamily.ADJUSTMENT, (option,))

    def with_adjustments(self, options: Iterable[AdjustmentOption]) -> ImageTarget:
        return self._extend(OptionFamily.ADJUSTMENT, tuple(options))

    # -- automatic -----------------------------------------------------------

    def with_automatic(self, option: AutomaticOption) -> ImageTarget:
        return self._extend(OptionFamily.AUTOMATIC, (option,))

    def with_automatics(self, options: Iterable[AutomaticOption]) -> ImageTarget:
        return self._extend(OptionFamily.AUTOMATIC, tuple(options))

    # -- stylize -------------------------------------------------------------

    def with_stylize(self, option: StylizeOption) -> ImageTarget:
        return self._extend(OptionFamily.STYLIZE, (option,))

    def with_stylizes(self, options: Iterable[StylizeOption]) -> ImageTarget:
        return self._extend(OptionFamily.STYLIZE, tuple(options))

    # -- family-agnostic -----------------------------------------------------

    def apply(self, *options: ImageOption) -> ImageTarget:
        """Return a copy with each option appended to its own family."""
        changes: dict[str, tuple[ImageOption, ...]] = {}
        for option in options:
            name = _FIELDS[option.family]
            changes[name] = changes.get(name, getattr(self, name)) + (option,)
        return replace(self, **changes)

    def merge(self, other: ImageTarget) -> ImageTarget:
        """
        Merge two targets.

        - ``self``'s base URL is kept.
        - Each family of ``other`` is appended after ``self``'s.
        """
        return replace(
            self,
            **{
                name: getattr(self, name) + getattr(other, name)
                for name in _FIELDS.values()
            },
        )

    def ops_for(self, family: OptionFamily) -> tuple[ImageOption, ...]:
        """Applied options of ``family`` in application order."""
        ops: tuple[ImageOption, ...] = getattr(self, _FIELDS[family])
        return ops

    # -- rendering -----------------------------------------------------------

    def query_pairs(
        self,
        registry: EncoderRegistry | None = None,
        config: ImgixUrlConfig | None = None,
    ) -> list[QueryPair]:
        return encode_pairs(self, registry, config)

    def query_string(
        self,
        registry: EncoderRegistry | None = None,
        config: ImgixUrlConfig | None = None,
    ) -> str:
        return build_query(encode_pairs(self, registry, config), config)

    def to_url(
        self,
        registry: EncoderRegistry | None = None,
        config: ImgixUrlConfig | None = None,
    ) -> str:
        """Full URL with the encoded options as its query string."""
        return serialize(self, registry, config)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        result: dict[str, Any] = {"base_url": self.base_url}
        for family in FAMILY_ORDER:
            ops = self.ops_for(family)
            if ops:
                result[family.value] = [str(option) for option in ops]
        return result

    def __str__(self) -> str:
        return self.to_url()

    # -- internals -----------------------------------------------------------

    def _extend(
        self,
        family: OptionFamily,
        options: tuple[ImageOption, ...],
    ) -> ImageTarget:
        for option in options:
            if option.family is not family:
                raise TypeError(
                    f"{type(option).__name__} is a {option.family.value} option, "
                    f"expected a {family.value} option"
                )
        name = _FIELDS[family]
        return replace(self, **{name: getattr(self, name) + options})
