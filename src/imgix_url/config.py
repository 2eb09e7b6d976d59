"""Configuration for URL composition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImgixUrlConfig:
    """Configuration shared by parsing, encoding and serialization.

    Attributes:
        allowed_schemes: URL schemes accepted by ``ImageTarget.from_string``.
        list_separator: Joins tokens that share a query key.
        safe: Characters left unescaped in query keys and values.
            The default keeps comma-joined tokens readable; pass ``""``
            for strict percent-encoding.
        emit_empty_automatic: Emit the ``auto`` key even when no
            automatic option has been applied.
    """

    allowed_schemes: tuple[str, ...] = ("http", "https")
    list_separator: str = ","
    safe: str = ","
    emit_empty_automatic: bool = True


DEFAULT_CONFIG = ImgixUrlConfig()
