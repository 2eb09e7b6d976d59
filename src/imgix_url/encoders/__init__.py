"""
Concrete encoders and the default registry.

Usage::

    from imgix_url.encoders import build_default_registry

    registry = build_default_registry()
    pairs = registry.encode(OptionFamily.SIZE, [Width(pixels=300)])
"""

from __future__ import annotations

from ..config import DEFAULT_CONFIG, ImgixUrlConfig
from ..encoder import EncoderRegistry
from ..families import OptionFamily
from ..options.automatic import Auto
from ..options.rotation import Flip
from .list_merge import ListMergeEncoder, SingleKeyEncoder, SingletonEncoder
from .repeated import RepeatedKeyEncoder


def build_default_registry(config: ImgixUrlConfig | None = None) -> EncoderRegistry:
    """
    Create a registry wired with the built-in family encoders.

    Every call returns a fresh instance, so callers may register
    overrides without affecting other registries.

    Example:
        >>> registry = build_default_registry()
        >>> registry.encode(OptionFamily.ROTATION, [])
        []
    """
    cfg = config or DEFAULT_CONFIG
    sep = cfg.list_separator
    registry = EncoderRegistry()
    registry.register_all(
        ListMergeEncoder(OptionFamily.SIZE, sep),
        SingleKeyEncoder(OptionFamily.ROTATION, Flip.key, sep),
        ListMergeEncoder(OptionFamily.ADJUSTMENT, sep),
        SingletonEncoder(
            OptionFamily.AUTOMATIC,
            Auto.key,
            sep,
            always_emit=cfg.emit_empty_automatic,
        ),
        ListMergeEncoder(OptionFamily.STYLIZE, sep),
    )
    return registry


__all__ = [
    "build_default_registry",
    "ListMergeEncoder",
    "RepeatedKeyEncoder",
    "SingleKeyEncoder",
    "SingletonEncoder",
]
