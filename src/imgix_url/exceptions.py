"""
Exception hierarchy for imgix-url.

All exceptions inherit from ``ImgixUrlError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .families import OptionFamily


class ImgixUrlError(Exception):
    """Base exception for all imgix-url errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UrlParseError(ImgixUrlError):
    """Text could not be parsed into an absolute image URL."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid image URL {text!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "URL_PARSE_ERROR",
            "text": self.text,
            "reason": self.reason,
        }


class EncoderNotFoundError(ImgixUrlError):
    """No encoder is registered for an option family."""

    def __init__(self, family: OptionFamily) -> None:
        self.family = family
        super().__init__(f"No encoder registered for option family '{family.value}'")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ENCODER_NOT_FOUND",
            "family": self.family.value,
        }
