"""imgix-url — compose image-transformation URLs from typed options.

Pure functions over immutable values: no network I/O, no caching.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, ImgixUrlConfig
from .encoder import EncoderRegistry, OptionEncoder, QueryPair
from .encoders import (
    ListMergeEncoder,
    RepeatedKeyEncoder,
    SingleKeyEncoder,
    SingletonEncoder,
    build_default_registry,
)
from .exceptions import EncoderNotFoundError, ImgixUrlError, UrlParseError
from .families import FAMILY_ORDER, OptionFamily
from .element import ImageElement, to_html, to_html_with_attributes
from .options import ImageOption
from .serializer import build_query, encode_pairs, serialize
from .target import ImageTarget
from .urls import parse_url, strip_query

__all__ = [
    # Core types
    "ImageTarget",
    "ImageOption",
    "OptionFamily",
    "FAMILY_ORDER",
    # Encoding
    "OptionEncoder",
    "EncoderRegistry",
    "QueryPair",
    "ListMergeEncoder",
    "SingleKeyEncoder",
    "SingletonEncoder",
    "RepeatedKeyEncoder",
    "build_default_registry",
    # Serialization
    "encode_pairs",
    "build_query",
    "serialize",
    "parse_url",
    "strip_query",
    # Rendering
    "ImageElement",
    "to_html",
    "to_html_with_attributes",
    # Configuration
    "ImgixUrlConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "ImgixUrlError",
    "UrlParseError",
    "EncoderNotFoundError",
]
