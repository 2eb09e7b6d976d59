"""URL parsing and normalisation for image base URLs."""

from __future__ import annotations

from urllib.parse import ParseResult, SplitResult, urlsplit, urlunsplit

from .config import DEFAULT_CONFIG, ImgixUrlConfig
from .exceptions import UrlParseError


def parse_url(text: str, config: ImgixUrlConfig | None = None) -> SplitResult:
    """
    Parse ``text`` as an absolute image URL.

    Raises:
        UrlParseError: If ``text`` is not a URL with an allowed scheme
            and a host.
    """
    cfg = config or DEFAULT_CONFIG
    candidate = text.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        raise UrlParseError(text, "empty or contains whitespace")
    try:
        parsed = urlsplit(candidate)
        # Accessing the port validates it.
        _ = parsed.port
    except ValueError as exc:
        raise UrlParseError(text, str(exc)) from exc
    if parsed.scheme.lower() not in cfg.allowed_schemes:
        raise UrlParseError(text, f"unsupported scheme '{parsed.scheme}'")
    if not parsed.hostname:
        raise UrlParseError(text, "missing host")
    return parsed


def strip_query(url: str | SplitResult | ParseResult) -> str:
    """Return ``url`` without its query string and fragment."""
    raw = url if isinstance(url, str) else url.geturl()
    parts = urlsplit(raw)
    return urlunsplit(parts._replace(query="", fragment=""))
