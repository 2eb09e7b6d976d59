"""
Serialization of an ImageTarget into its final URL.

Encoding is deferred until here: each family's accumulated options are
passed to the family encoder in ``FAMILY_ORDER``, and the resulting pairs
are percent-encoded and ``&``-joined into the query string.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .config import DEFAULT_CONFIG, ImgixUrlConfig
from .encoders import build_default_registry
from .families import FAMILY_ORDER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .encoder import EncoderRegistry, QueryPair
    from .target import ImageTarget

_log = logging.getLogger("imgix_url.serializer")


def encode_pairs(
    target: ImageTarget,
    registry: EncoderRegistry | None = None,
    config: ImgixUrlConfig | None = None,
) -> list[QueryPair]:
    """Encode every family of ``target`` and concatenate the pairs in family order."""
    if registry is None:
        registry = build_default_registry(config)
    pairs: list[QueryPair] = []
    for family in FAMILY_ORDER:
        pairs.extend(registry.encode(family, target.ops_for(family)))
    return pairs


def build_query(
    pairs: Sequence[QueryPair],
    config: ImgixUrlConfig | None = None,
) -> str:
    """Percent-encode keys and values and join the pairs with ``&``."""
    cfg = config or DEFAULT_CONFIG
    return urlencode(list(pairs), quote_via=quote, safe=cfg.safe)


def serialize(
    target: ImageTarget,
    registry: EncoderRegistry | None = None,
    config: ImgixUrlConfig | None = None,
) -> str:
    """
    Render ``target`` as a full URL.

    The base URL's scheme, host and path are kept; the query is replaced
    by the encoded options. Serialization never mutates ``target`` and
    repeated calls return identical strings.
    """
    query = build_query(encode_pairs(target, registry, config), config)
    url = urlunsplit(urlsplit(target.base_url)._replace(query=query, fragment=""))
    _log.debug("Serialized %s -> %s", target.base_url, url)
    return url
